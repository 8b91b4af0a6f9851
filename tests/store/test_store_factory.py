import asyncio
from unittest.mock import patch

import pytest

from billed.store.api import ApiBillStore
from billed.store.factory import get_store
from billed.store.memory import MemoryBillStore


class TestGetStore:
    def test_api(self):
        with patch("billed.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "api"
            mock_settings.api_url = "http://bills.test"
            mock_settings.api_token = ""
            mock_settings.api_timeout = 5.0
            store = get_store()
        assert isinstance(store, ApiBillStore)
        asyncio.run(store.aclose())

    def test_memory(self):
        with patch("billed.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "memory"
            store = get_store()
        assert isinstance(store, MemoryBillStore)
        assert len(asyncio.run(store.list())) == 4

    def test_unsupported(self):
        with patch("billed.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "ftp"
            with pytest.raises(ValueError, match="Unsupported store backend"):
                get_store()
