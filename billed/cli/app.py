from __future__ import annotations

import asyncio

import questionary
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from billed.cli.bill_menu import CliNavigator, list_bills_menu, new_bill_menu, show_receipt_menu
from billed.constants import EMPLOYEE, ROUTES_PATH
from billed.containers.bills import Bills
from billed.containers.new_bill import NewBill
from billed.models.user import SessionUser
from billed.session import FileSessionStore, SessionStore, load_user, login_as
from billed.settings import settings
from billed.store.base import BillStore
from billed.store.factory import get_store
from billed.ui.base import Alerter, Modal

console = Console()


class ConsoleModal(Modal):
    def show(self, content: str) -> None:
        console.print(Panel(Text(content), title="Justificatif"))


class ConsoleAlerter(Alerter):
    def alert(self, message: str) -> None:
        console.print(f"[red bold]{message}[/red bold]")


async def _ensure_user(session: SessionStore) -> SessionUser | None:
    user = load_user(session)
    if user is not None:
        return user
    email = await questionary.text("Email:").ask_async()
    if not email:
        return None
    user = SessionUser(type=EMPLOYEE, email=email)
    login_as(session, user)
    return user


async def main_menu(store: BillStore, session: SessionStore) -> None:
    user = await _ensure_user(session)
    if user is None:
        return

    navigator = CliNavigator()
    bills_page = Bills(on_navigate=navigator, store=store, user=user, modal=ConsoleModal())

    console.print()
    console.print("[bold]Billed[/bold]", style="cyan")
    console.print()

    while True:
        choice = await questionary.select(
            "Menu principal",
            choices=[
                "Mes notes de frais",
                "Voir un justificatif",
                "Nouvelle note de frais",
                "Quitter",
            ],
        ).ask_async()

        if choice is None or choice == "Quitter":
            console.print("[bold]À bientôt ![/bold]")
            break
        elif choice == "Mes notes de frais":
            await list_bills_menu(bills_page)
        elif choice == "Voir un justificatif":
            await show_receipt_menu(bills_page)
        elif choice == "Nouvelle note de frais":
            await bills_page.handle_click_new_bill()
            new_bill_page = NewBill(on_navigate=navigator, store=store, user=user, alerter=ConsoleAlerter())
            await new_bill_menu(new_bill_page)
            if navigator.route == ROUTES_PATH["Bills"]:
                await list_bills_menu(bills_page)
            navigator.route = ROUTES_PATH["Bills"]


async def _run() -> None:
    store = get_store()
    try:
        await main_menu(store, FileSessionStore(settings.session_path))
    finally:
        await store.aclose()


def run() -> None:
    asyncio.run(_run())
