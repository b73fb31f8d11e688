"""Vendor classification driving the required field-set."""

from enum import Enum


class VendorType(str, Enum):
    """Whether a vendor is registered in the home country or abroad."""

    DOMESTIC = "domestic"
    INTERNATIONAL = "international"

    def __str__(self) -> str:
        return self.value
