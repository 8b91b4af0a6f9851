from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("id", "name", "date", "status", "fileUrl", "fileName", "type", "vat", "commentary", "email")


class BillStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


def _as_number(value: Any) -> int | float | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return int(number) if number.is_integer() else number


class RawBill(BaseModel):
    """A bill as the store sends it. Any field may be missing or off-type."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = None
    name: str | None = None
    date: str | None = None
    amount: int | float | None = None
    status: str | None = None
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    type: str | None = None
    vat: str | None = None
    pct: int | None = None
    commentary: str | None = None
    email: str | None = None

    @field_validator(
        "id", "name", "date", "status", "file_url", "file_name", "type", "vat", "commentary", "email", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (dict, list)):
            return None
        return str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> int | float | None:
        return _as_number(value)

    @field_validator("pct", mode="before")
    @classmethod
    def _coerce_pct(cls, value: Any) -> int | None:
        number = _as_number(value)
        return None if number is None else int(number)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def parse_bill(item: Any) -> RawBill:
    """Validate one store record; a record that still fails is kept with its text fields only."""
    try:
        return RawBill.model_validate(item)
    except ValidationError as e:
        record = item if isinstance(item, dict) else {}
        logger.warning("Malformed bill record %r kept with partial data: %s", record.get("id"), e)
        return RawBill.model_validate(
            {key: record[key] for key in TEXT_FIELDS if isinstance(record.get(key), (str, int, float))}
        )


class DisplayBill(RawBill):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    formatted_date: str = Field(default="", alias="formattedDate")
    formatted_status: str | None = Field(default=None, alias="formattedStatus")
