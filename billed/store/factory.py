import logging

from billed.settings import settings
from billed.store.base import BillStore

logger = logging.getLogger(__name__)


def get_store() -> BillStore:
    backend = settings.store_backend

    if backend == "api":
        from billed.store.api import ApiBillStore

        logger.info("Using bill store: api url=%s", settings.api_url)
        return ApiBillStore(
            base_url=settings.api_url,
            token=settings.api_token,
            timeout=settings.api_timeout,
        )

    if backend == "memory":
        from billed.store.memory import SAMPLE_BILLS, MemoryBillStore

        logger.info("Using bill store: memory")
        return MemoryBillStore(SAMPLE_BILLS)

    raise ValueError(f"Unsupported store backend: {backend}")
