"""Shared fixtures: sample bills, an employee session, an in-memory store."""

from __future__ import annotations

import copy

import pytest

from billed.models.receipt import ReceiptFile
from billed.models.user import SessionUser
from billed.store.memory import SAMPLE_BILLS, MemoryBillStore


@pytest.fixture()
def sample_bills() -> list[dict]:
    return copy.deepcopy(SAMPLE_BILLS)


@pytest.fixture()
def employee() -> SessionUser:
    return SessionUser(type="Employee", email="a@a")


@pytest.fixture()
def memory_store(sample_bills) -> MemoryBillStore:
    return MemoryBillStore(sample_bills)


def _receipt(name: str = "image.jpg", content_type: str = "image/jpeg", **overrides) -> ReceiptFile:
    defaults = dict(name=name, content_type=content_type, data=b"image")
    defaults.update(overrides)
    return ReceiptFile(**defaults)


@pytest.fixture()
def receipt():
    return _receipt
