from __future__ import annotations

import logging

from billed.ui.base import Modal

logger = logging.getLogger(__name__)


class HtmlModal(Modal):
    """The shared receipt dialog of the bills page."""

    def __init__(self, width: int = 1000) -> None:
        self.width = width
        self.body = ""
        self.visible = False
        self.show_count = 0

    def show(self, content: str) -> None:
        self.body = content
        self.visible = True
        self.show_count += 1
        logger.debug("Modal shown (%d times)", self.show_count)

    def hide(self) -> None:
        self.visible = False
