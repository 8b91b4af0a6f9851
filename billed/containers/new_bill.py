from __future__ import annotations

import logging

from billed.constants import DEFAULT_VAT_PCT, RECEIPT_TYPE_ALERT, ROUTES_PATH
from billed.models.bill import BillStatus, RawBill
from billed.models.draft import NewBillDraft
from billed.models.receipt import StagedReceipt, is_allowed_receipt
from billed.models.user import SessionUser
from billed.store.base import BillStore, StoreError
from billed.ui.base import Alerter, Navigator
from billed.ui.dom import FileChangeEvent, SubmitEvent

logger = logging.getLogger(__name__)


def _parse_int(value: str | None) -> int | None:
    """Leading integer of ``value``: '348.5' -> 348, '' -> None."""
    if value is None:
        return None
    text = str(value).strip()
    digits = ""
    for i, char in enumerate(text):
        if char.isdigit() or (i == 0 and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return None


class NewBill:
    def __init__(
        self,
        on_navigate: Navigator,
        store: BillStore | None,
        user: SessionUser | None,
        alerter: Alerter,
    ) -> None:
        self.on_navigate = on_navigate
        self.store = store
        self.user = user
        self.alerter = alerter
        self.draft = NewBillDraft()

    @property
    def email(self) -> str:
        return self.user.email if self.user else ""

    async def handle_change_file(self, event: FileChangeEvent) -> StagedReceipt | None:
        file_input = event.target
        if not file_input.files:
            return None
        file = file_input.files[0]

        if not is_allowed_receipt(file):
            logger.warning("Rejected receipt %s (type=%r)", file.name, file.content_type)
            file_input.clear()
            self.draft.clear_file()
            self.alerter.alert(RECEIPT_TYPE_ALERT)
            return None

        if self.store is None:
            logger.warning("No bill store configured, receipt %s not uploaded", file.name)
            return None

        try:
            staged = await self.store.create(file, self.email)
        except StoreError:
            logger.exception("Receipt upload failed for %s", file.name)
            self.draft.clear_file()
            return None

        self.draft.stage_file(staged, file.name)
        logger.info("Receipt %s staged as bill %s", file.name, staged.key)
        return staged

    def build_bill(self, form: dict[str, str]) -> RawBill:
        bill_id = self.draft.require_staged()
        return RawBill(
            id=bill_id,
            email=self.email,
            type=form.get("expense-type"),
            name=form.get("expense-name"),
            amount=_parse_int(form.get("amount")),
            date=form.get("datepicker"),
            vat=form.get("vat"),
            pct=_parse_int(form.get("pct")) or DEFAULT_VAT_PCT,
            commentary=form.get("commentary"),
            file_url=self.draft.file_url,
            file_name=self.draft.file_name,
            status=BillStatus.PENDING.value,
        )

    async def handle_submit(self, event: SubmitEvent) -> RawBill | None:
        event.prevent_default()
        try:
            bill = self.build_bill(event.form)
        except ValueError:
            logger.warning("Bill submitted in state %s", self.draft.state.value)
            raise

        try:
            saved = await self.update_bill(bill)
        except StoreError:
            logger.exception("Could not save bill %s", bill.id)
            return None

        self.draft.mark_submitted()
        await self.on_navigate(ROUTES_PATH["Bills"])
        return saved

    async def update_bill(self, bill: RawBill) -> RawBill:
        if self.store is None:
            raise StoreError("No bill store configured")
        return await self.store.update(bill)
