"""Application code value object used for applicant self-service lookup."""

import re
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

FALLBACK_PREFIX = "APP"

_WHITESPACE = re.compile(r"\s+")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class ApplicationCode:
    """
    Immutable human-readable identifier of an application.

    Generated codes look like ``ACMECORP-3F2A9B1C``: the sanitized company
    name in upper case followed by the first segment of a random UUID.

    Attributes:
        value: The code string
    """

    value: str

    def __post_init__(self) -> None:
        """Validate code."""
        if not self.value or not self.value.strip():
            raise ValueError("Application code cannot be empty")

    @classmethod
    def generate(
        cls,
        provided_code: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> "ApplicationCode":
        """
        Produce a code for a new application.

        Args:
            provided_code: Code chosen by the caller, used verbatim when not blank
            company_name: Company name the prefix is derived from

        Returns:
            ApplicationCode instance
        """
        trimmed = provided_code.strip() if provided_code else ""
        if trimmed:
            return cls(trimmed)

        prefix = cls.prefix_for(company_name)
        suffix = str(uuid4()).split("-")[0].upper()
        return cls(f"{prefix}-{suffix}")

    @staticmethod
    def prefix_for(company_name: Optional[str]) -> str:
        """Upper-cased sanitized company name, or the fallback prefix when nothing is left."""
        if not company_name:
            return FALLBACK_PREFIX
        normalized = _NON_ALPHANUMERIC.sub("", _WHITESPACE.sub("", company_name))
        return normalized.upper() or FALLBACK_PREFIX

    def __str__(self) -> str:
        return self.value
