from __future__ import annotations

import logging

from billed.constants import ROUTES_PATH
from billed.containers.bills import Bills
from billed.containers.new_bill import NewBill
from billed.session import SessionStore, load_user
from billed.store.base import BillStore, StoreError
from billed.ui.base import Alerter, Modal
from billed.views.render import bills_ui, error_page, new_bill_ui

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = "Page introuvable"


class Router:
    """Renders the page of a route into ``root`` and keeps its container in ``page``."""

    def __init__(
        self,
        store: BillStore | None,
        session: SessionStore,
        modal: Modal,
        alerter: Alerter,
    ) -> None:
        self.store = store
        self.session = session
        self.modal = modal
        self.alerter = alerter
        self.root = ""
        self.pathname = ""
        self.page: Bills | NewBill | None = None

    async def on_navigate(self, pathname: str) -> None:
        self.pathname = pathname
        user = load_user(self.session)
        logger.info("Navigating to %s", pathname)

        if pathname == ROUTES_PATH["Bills"]:
            self.root = bills_ui(loading=True, user=user)
            page = Bills(on_navigate=self.on_navigate, store=self.store, user=user, modal=self.modal)
            self.page = page
            try:
                bills = await page.get_bills()
            except StoreError as e:
                logger.warning("Bills page rendered in error state: %s", e.message)
                self.root = bills_ui(error=e.message, user=user)
                return
            self.root = bills_ui(data=bills, user=user)
        elif pathname == ROUTES_PATH["NewBill"]:
            self.page = NewBill(on_navigate=self.on_navigate, store=self.store, user=user, alerter=self.alerter)
            self.root = new_bill_ui(user=user)
        else:
            logger.warning("Unknown route %s", pathname)
            self.page = None
            self.root = error_page(PAGE_NOT_FOUND, user=user)
