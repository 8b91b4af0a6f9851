"""Minimal event surface the pipelines consume from the page."""

from __future__ import annotations

from billed.models.receipt import ReceiptFile


class FileInput:
    def __init__(self, files: list[ReceiptFile] | None = None) -> None:
        self.files: list[ReceiptFile] = list(files or [])

    @property
    def value(self) -> str:
        return self.files[0].name if self.files else ""

    def clear(self) -> None:
        self.files = []


class FileChangeEvent:
    def __init__(self, target: FileInput) -> None:
        self.target = target


class SubmitEvent:
    def __init__(self, form: dict[str, str]) -> None:
        self.form = form
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class EyeIcon:
    """Eye icon of a bill row; carries the receipt URL in ``data-bill-url``."""

    def __init__(self, bill_url: str) -> None:
        self.attributes = {"data-bill-url": bill_url}

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)
