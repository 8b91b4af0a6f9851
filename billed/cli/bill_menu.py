from __future__ import annotations

import mimetypes
from pathlib import Path

import questionary
from rich.console import Console
from rich.table import Table

from billed.constants import EXPENSE_TYPES, ROUTES_PATH
from billed.containers.bills import Bills
from billed.containers.new_bill import NewBill
from billed.models.bill import DisplayBill
from billed.models.receipt import ReceiptFile
from billed.store.base import StoreError
from billed.ui.dom import EyeIcon, FileChangeEvent, FileInput, SubmitEvent

console = Console()


def _bills_table(bills: list[DisplayBill]) -> Table:
    table = Table(title="Mes notes de frais")
    table.add_column("Type")
    table.add_column("Nom")
    table.add_column("Date")
    table.add_column("Montant", justify="right")
    table.add_column("Statut", justify="center")

    for bill in bills:
        table.add_row(
            bill.type or "",
            bill.name or "",
            bill.formatted_date,
            f"{bill.amount} €" if bill.amount is not None else "",
            bill.formatted_status or "",
        )
    return table


def _read_receipt(path_text: str) -> ReceiptFile | None:
    path = Path(path_text).expanduser()
    if not path.is_file():
        return None
    content_type, _ = mimetypes.guess_type(path.name)
    return ReceiptFile(name=path.name, content_type=content_type or "", data=path.read_bytes())


async def list_bills_menu(bills_page: Bills) -> list[DisplayBill]:
    try:
        bills = await bills_page.get_bills()
    except StoreError as e:
        console.print(f"[red]{e.message}[/red]")
        return []

    if not bills:
        console.print("[yellow]Aucune note de frais.[/yellow]")
        return []

    console.print(_bills_table(bills))
    return bills


async def show_receipt_menu(bills_page: Bills) -> None:
    bills = await list_bills_menu(bills_page)
    if not bills:
        return

    choices = [f"{i + 1}. {bill.name or '?'} ({bill.formatted_date})" for i, bill in enumerate(bills)]
    choices.append("Retour")
    choice = await questionary.select("Justificatif à afficher", choices=choices).ask_async()
    if choice is None or choice == "Retour":
        return

    bill = bills[int(choice.split(".")[0]) - 1]
    bills_page.handle_click_icon_eye(EyeIcon(bill.file_url or ""))


async def new_bill_menu(new_bill_page: NewBill) -> bool:
    """Walk through the new bill form. Returns True once the bill is saved."""
    console.print()
    console.print("[bold]Envoyer une note de frais[/bold]", style="cyan")

    while True:
        path_text = await questionary.path("Justificatif (png ou jpeg):").ask_async()
        if not path_text:
            return False
        receipt = _read_receipt(path_text)
        if receipt is None:
            console.print("[red]Fichier introuvable. Réessayez.[/red]")
            continue
        staged = await new_bill_page.handle_change_file(FileChangeEvent(FileInput([receipt])))
        if staged is not None:
            break
        if not await questionary.confirm("Choisir un autre fichier ?", default=True).ask_async():
            return False

    form = {
        "expense-type": await questionary.select("Type de dépense", choices=EXPENSE_TYPES).ask_async(),
        "expense-name": await questionary.text("Nom de la dépense:").ask_async() or "",
        "datepicker": await questionary.text("Date (AAAA-MM-JJ):").ask_async() or "",
        "amount": await questionary.text("Montant TTC:").ask_async() or "",
        "vat": await questionary.text("TVA:").ask_async() or "",
        "pct": await questionary.text("TVA %:", default="20").ask_async() or "",
        "commentary": await questionary.text("Commentaire (optionnel):").ask_async() or "",
    }

    # Retries reuse the staged receipt; uploading again would reserve another bill.
    while True:
        saved = await new_bill_page.handle_submit(SubmitEvent(dict(form)))
        if saved is not None:
            break
        console.print("[red]La note de frais n'a pas pu être envoyée.[/red]")
        if not await questionary.confirm("Réessayer l'envoi ?", default=True).ask_async():
            return False

    console.print("[green bold]Note de frais envoyée ![/green bold]")
    return True


class CliNavigator:
    """Remembers the last route asked for; the menu loop acts on it."""

    def __init__(self) -> None:
        self.route = ROUTES_PATH["Bills"]

    async def __call__(self, route: str) -> None:
        self.route = route
