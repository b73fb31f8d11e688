"""Domain Enums - Constant values used across the domain."""

from .application_status import ApplicationStatus
from .vendor_type import VendorType
from .review_action import ReviewAction, ApplicationTab

__all__ = ["ApplicationStatus", "VendorType", "ReviewAction", "ApplicationTab"]
