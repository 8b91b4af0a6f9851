from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from billed.constants import ALLOWED_RECEIPT_EXTENSIONS, DEFAULT_VAT_PCT, EXPENSE_TYPES
from billed.models.bill import DisplayBill
from billed.models.user import SessionUser

BASE_DIR = Path(__file__).parent

env = Environment(
    loader=FileSystemLoader(BASE_DIR / "templates"),
    autoescape=select_autoescape(["html"]),
)


def render(template: str, **context) -> str:
    return env.get_template(template).render(**context)


def loading_page(user: SessionUser | None = None) -> str:
    return render("loading.html", user=user)


def error_page(error: str | None, user: SessionUser | None = None) -> str:
    return render("error.html", error=error, user=user)


def bills_ui(
    data: list[DisplayBill] | None = None,
    loading: bool = False,
    error: str | None = None,
    user: SessionUser | None = None,
) -> str:
    if loading:
        return loading_page(user)
    if error:
        return error_page(error, user)
    return render("bills.html", bills=data or [], user=user, active="window")


def new_bill_ui(user: SessionUser | None = None) -> str:
    return render(
        "new_bill.html",
        user=user,
        active="mail",
        expense_types=EXPENSE_TYPES,
        default_pct=DEFAULT_VAT_PCT,
        accept=",".join(sorted(ALLOWED_RECEIPT_EXTENSIONS)),
    )


def receipt_preview(bill_url: str, width: int) -> str:
    return render("receipt_preview.html", bill_url=bill_url, width=width)
