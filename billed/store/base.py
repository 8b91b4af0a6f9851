from __future__ import annotations

from abc import ABC, abstractmethod

from billed.models.bill import RawBill
from billed.models.receipt import ReceiptFile, StagedReceipt


class StoreError(Exception):
    """A store call failed; the message is meant to be shown as is."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BillStore(ABC):
    @abstractmethod
    async def list(self) -> list[RawBill]:
        """Return every bill visible to the current user."""
        ...

    @abstractmethod
    async def create(self, file: ReceiptFile, email: str) -> StagedReceipt:
        """Upload a receipt and reserve a bill for it."""
        ...

    @abstractmethod
    async def update(self, bill: RawBill) -> RawBill:
        """Persist ``bill`` under ``bill.id``."""
        ...

    async def aclose(self) -> None:
        """Release any connection held by the store."""
        return None
