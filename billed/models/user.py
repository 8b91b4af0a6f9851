from __future__ import annotations

from pydantic import BaseModel

from billed.constants import EMPLOYEE


class SessionUser(BaseModel):
    type: str
    email: str = ""
    status: str = "connected"

    @property
    def is_employee(self) -> bool:
        return self.type == EMPLOYEE
