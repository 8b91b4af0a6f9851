from __future__ import annotations

import logging

from billed.constants import ROUTES_PATH
from billed.formatting import date_sort_key, format_status, safe_format_date
from billed.models.bill import DisplayBill, RawBill
from billed.models.user import SessionUser
from billed.settings import settings
from billed.store.base import BillStore
from billed.ui.base import Modal, Navigator
from billed.ui.dom import EyeIcon
from billed.views.render import receipt_preview

logger = logging.getLogger(__name__)


def to_display_bill(bill: RawBill) -> DisplayBill:
    """Attach the rendered date and status; a bad date keeps its raw value."""
    formatted = safe_format_date(bill.date)
    if formatted.fallback:
        logger.warning(
            "Could not format date %r of bill %s, keeping raw value: %s",
            bill.date,
            bill.id,
            formatted.error,
        )
    return DisplayBill(
        **bill.model_dump(),
        formatted_date=formatted.value,
        formatted_status=format_status(bill.status),
    )


def sort_bills(bills: list[DisplayBill]) -> list[DisplayBill]:
    """Most recent first; equal dates keep their fetch order."""
    return sorted(bills, key=lambda bill: date_sort_key(bill.date), reverse=True)


class Bills:
    def __init__(
        self,
        on_navigate: Navigator,
        store: BillStore | None,
        user: SessionUser | None = None,
        modal: Modal | None = None,
    ) -> None:
        self.on_navigate = on_navigate
        self.store = store
        self.user = user
        self.modal = modal

    async def handle_click_new_bill(self) -> None:
        await self.on_navigate(ROUTES_PATH["NewBill"])

    def handle_click_icon_eye(self, icon: EyeIcon) -> None:
        if self.modal is None:
            raise ValueError("No modal available to show the receipt")
        bill_url = icon.get_attribute("data-bill-url") or ""
        self.modal.show(receipt_preview(bill_url, settings.receipt_preview_width))

    async def get_bills(self) -> list[DisplayBill]:
        """Fetch, format and sort the bills. Store failures propagate."""
        if self.store is None:
            return []
        raw_bills = await self.store.list()
        bills = sort_bills([to_display_bill(bill) for bill in raw_bills])
        logger.info("Loaded %d bills", len(bills))
        return bills
