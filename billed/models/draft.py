from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from billed.models.receipt import StagedReceipt


class DraftState(str, Enum):
    EMPTY = "empty"
    FILE_STAGED = "file_staged"
    SUBMITTED = "submitted"


class NewBillDraft(BaseModel):
    """In-progress bill: EMPTY -> FILE_STAGED -> SUBMITTED."""

    state: DraftState = DraftState.EMPTY
    bill_id: str | None = None
    file_url: str | None = None
    file_name: str | None = None

    def stage_file(self, staged: StagedReceipt, file_name: str) -> None:
        if self.state == DraftState.SUBMITTED:
            raise ValueError("Draft already submitted")
        self.bill_id = staged.key
        self.file_url = staged.file_url
        self.file_name = staged.file_name or file_name
        self.state = DraftState.FILE_STAGED

    def clear_file(self) -> None:
        if self.state == DraftState.SUBMITTED:
            raise ValueError("Draft already submitted")
        self.bill_id = None
        self.file_url = None
        self.file_name = None
        self.state = DraftState.EMPTY

    def require_staged(self) -> str:
        """Return the staged bill id, or raise if no receipt is staged."""
        if self.state == DraftState.EMPTY:
            raise ValueError("No receipt uploaded for this bill")
        if self.state == DraftState.SUBMITTED:
            raise ValueError("Draft already submitted")
        return self.bill_id

    def mark_submitted(self) -> None:
        self.require_staged()
        self.state = DraftState.SUBMITTED
