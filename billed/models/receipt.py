from __future__ import annotations

from pathlib import PurePath

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from billed.constants import ALLOWED_RECEIPT_EXTENSIONS, ALLOWED_RECEIPT_TYPES


class ReceiptFile(BaseModel):
    """A file picked in the receipt input."""

    name: str
    content_type: str = ""
    data: bytes = b""

    @property
    def extension(self) -> str:
        return PurePath(self.name).suffix.lower()


class StagedReceipt(BaseModel):
    """What the store answers once a receipt is uploaded."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")

    @field_validator("key", mode="before")
    @classmethod
    def _coerce_key(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) and not isinstance(value, bool) else value


def is_allowed_receipt(file: ReceiptFile) -> bool:
    """Both the extension and a declared MIME type must be acceptable.

    An empty MIME type is tolerated since some platforms do not report one;
    the extension then decides alone.
    """
    if file.extension not in ALLOWED_RECEIPT_EXTENSIONS:
        return False
    content_type = file.content_type.lower()
    return not content_type or content_type in ALLOWED_RECEIPT_TYPES
