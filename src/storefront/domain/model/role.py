"""Who is using the store."""

from enum import Enum


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    PICKER = "PICKER"
    CASHIER = "CASHIER"

    @property
    def is_staff(self) -> bool:
        return self is not Role.CUSTOMER
