from __future__ import annotations

import logging

from ulid import ULID

from billed.models.bill import RawBill
from billed.models.receipt import ReceiptFile, StagedReceipt
from billed.store.base import BillStore, StoreError

logger = logging.getLogger(__name__)

SAMPLE_BILLS = [
    {
        "id": "47qAXb6fIm2zOKkLzMro",
        "vat": "80",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…f-1.jpg?alt=media&token=c1640e12-a24b-4b11-ae52-529112e9602a",
        "status": "pending",
        "type": "Hôtel et logement",
        "commentary": "séminaire billed",
        "name": "encore",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2004-04-04",
        "amount": 400,
        "email": "a@a",
        "pct": 20,
    },
    {
        "id": "BeKy5Mo4jkmdfPGYpTxZ",
        "vat": "",
        "amount": 100,
        "name": "test1",
        "fileName": "1592770761.jpeg",
        "commentary": "plop",
        "pct": 20,
        "type": "Transports",
        "email": "a@a",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…61.jpeg?alt=media&token=7685cd61-c112-42bc-9929-8a799bb82d8b",
        "date": "2001-01-01",
        "status": "refused",
    },
    {
        "id": "UIUZtnPQvnbFnB0ozvJh",
        "name": "test3",
        "email": "a@a",
        "type": "Services en ligne",
        "vat": "60",
        "pct": 20,
        "commentary": "",
        "amount": 300,
        "status": "accepted",
        "date": "2003-03-03",
        "fileName": "facture-client-php-exportee-dans-document-pdf-enregistre-sur-disque-dur.png",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…dur.png?alt=media&token=571d34cb-9c8f-430a-af52-66221cae1da3",
    },
    {
        "id": "qcCK3SzECmaZAGRrHjaC",
        "status": "refused",
        "pct": 20,
        "amount": 200,
        "email": "a@a",
        "name": "test2",
        "vat": "40",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2002-02-02",
        "commentary": "test2",
        "type": "Restaurants et bars",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…f-1.jpg?alt=media&token=4df6ed2c-12c8-42a2-b013-346c1346f732",
    },
]


class MemoryBillStore(BillStore):
    """Process-local bill store; receipts are kept as bytes."""

    def __init__(self, bills: list[dict] | None = None, base_url: str = "memory://receipts") -> None:
        self.base_url = base_url
        self.bills: dict[str, RawBill] = {}
        self.receipts: dict[str, bytes] = {}
        for item in bills or []:
            bill = RawBill.model_validate(item)
            self.bills[bill.id or str(ULID())] = bill

    async def list(self) -> list[RawBill]:
        return [bill.model_copy() for bill in self.bills.values()]

    async def create(self, file: ReceiptFile, email: str) -> StagedReceipt:
        key = str(ULID())
        file_url = f"{self.base_url}/{key}/{file.name}"
        self.receipts[key] = file.data
        self.bills[key] = RawBill(id=key, email=email, file_url=file_url, file_name=file.name)
        logger.debug("Staged receipt %s (%d bytes) as bill %s", file.name, len(file.data), key)
        return StagedReceipt(key=key, file_url=file_url, file_name=file.name)

    async def update(self, bill: RawBill) -> RawBill:
        if not bill.id or bill.id not in self.bills:
            raise StoreError("Erreur 404", status_code=404)
        self.bills[bill.id] = bill.model_copy()
        logger.debug("Bill %s updated", bill.id)
        return bill.model_copy()
