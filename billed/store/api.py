from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from billed.models.bill import RawBill, parse_bill
from billed.models.receipt import ReceiptFile, StagedReceipt
from billed.store.base import BillStore, StoreError

logger = logging.getLogger(__name__)

INVALID_RESPONSE = "Erreur réponse invalide"


class ApiBillStore(BillStore):
    """Bill store backed by the REST API (``/bills``)."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self.client = client or httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("Bill API unreachable (%s %s): %s", method, url, e)
            raise StoreError(f"Erreur réseau: {e}") from e

        if response.is_error:
            logger.warning("Bill API %s %s answered %d", method, url, response.status_code)
            raise StoreError(f"Erreur {response.status_code}", status_code=response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.warning("Bill API %s answered a non-JSON body: %s", response.request.url, e)
            raise StoreError(INVALID_RESPONSE, status_code=response.status_code) from e

    async def list(self) -> list[RawBill]:
        response = await self._request("GET", "/bills")
        payload = self._json(response)
        if not isinstance(payload, list):
            logger.warning("Bill API list answered %s instead of a list", type(payload).__name__)
            raise StoreError(INVALID_RESPONSE, status_code=response.status_code)
        bills = [parse_bill(item) for item in payload]
        logger.info("Fetched %d bills", len(bills))
        return bills

    async def create(self, file: ReceiptFile, email: str) -> StagedReceipt:
        response = await self._request(
            "POST",
            "/bills",
            files={"file": (file.name, file.data, file.content_type or "application/octet-stream")},
            data={"email": email},
        )
        try:
            staged = StagedReceipt.model_validate(self._json(response))
        except ValidationError as e:
            logger.warning("Bill API upload answer for %s is missing fields: %s", file.name, e)
            raise StoreError(INVALID_RESPONSE, status_code=response.status_code) from e
        if staged.file_name is None:
            staged.file_name = file.name
        logger.info("Receipt %s uploaded as bill %s", file.name, staged.key)
        return staged

    async def update(self, bill: RawBill) -> RawBill:
        if not bill.id:
            raise ValueError("Cannot update a bill without an id")
        response = await self._request("PATCH", f"/bills/{bill.id}", json=bill.to_payload())
        try:
            saved = RawBill.model_validate(self._json(response))
        except ValidationError as e:
            logger.warning("Bill API update answer for %s is not a bill: %s", bill.id, e)
            raise StoreError(INVALID_RESPONSE, status_code=response.status_code) from e
        logger.info("Bill %s updated", bill.id)
        return saved
