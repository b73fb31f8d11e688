"""Per vendor type field-sets deciding what a submission must contain."""

from dataclasses import dataclass
from typing import Any, Mapping

from domain.enums import VendorType


COMMON_REQUIRED_FIELDS: tuple[str, ...] = (
    "company_name",
    "business_type",
    "industry",
    "primary_contact_name",
    "primary_contact_email",
    "country",
)

COMMON_OPTIONAL_FIELDS: tuple[str, ...] = (
    "years_in_business",
    "annual_revenue_range",
    "website",
    "services_offered",
    "primary_contact_phone",
    "business_address",
    "city",
    "state",
    "zip_code",
    "import_export_license_url",
    "compliance_certificates_url",
)

DOMESTIC_ONLY_FIELDS: tuple[str, ...] = ("tax_id", "business_license_url")

INTERNATIONAL_ONLY_FIELDS: tuple[str, ...] = (
    "vat_number",
    "country_of_incorporation",
    "business_registration_url",
    "vat_registration_url",
    "certificate_of_good_standing_url",
    "bank_details_document_url",
    "bank_name",
    "bank_account_number",
    "swift_code",
    "iban",
    "preferred_currency",
)


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after trimming."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(frozen=True)
class FieldSet:
    """
    Immutable description of the fields relevant to one vendor type.

    Attributes:
        vendor_type: Vendor type this field-set belongs to
        required: Fields that must be filled before submission, in display order
        optional: Fields that may be filled but never block submission
        exclusive: Fields that only make sense for this vendor type
    """

    vendor_type: VendorType
    required: tuple[str, ...]
    optional: tuple[str, ...]
    exclusive: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate that no field is both required and optional."""
        overlap = set(self.required) & set(self.optional)
        if overlap:
            raise ValueError(f"Fields cannot be required and optional: {sorted(overlap)}")

    @property
    def relevant(self) -> tuple[str, ...]:
        return self.required + self.optional

    def missing(self, values: Mapping[str, Any]) -> list[str]:
        """Required fields that are absent or blank in ``values``."""
        return [name for name in self.required if is_blank(values.get(name))]


DOMESTIC_FIELD_SET = FieldSet(
    vendor_type=VendorType.DOMESTIC,
    required=COMMON_REQUIRED_FIELDS + (
        "tax_id",
        "business_license_url",
        "tax_document_url",
        "insurance_certificate_url",
    ),
    optional=COMMON_OPTIONAL_FIELDS,
    exclusive=DOMESTIC_ONLY_FIELDS,
)

INTERNATIONAL_FIELD_SET = FieldSet(
    vendor_type=VendorType.INTERNATIONAL,
    required=COMMON_REQUIRED_FIELDS + (
        "vat_number",
        "country_of_incorporation",
        "business_registration_url",
        "tax_document_url",
        "vat_registration_url",
        "certificate_of_good_standing_url",
        "bank_details_document_url",
    ),
    optional=COMMON_OPTIONAL_FIELDS + (
        "insurance_certificate_url",
        "bank_name",
        "bank_account_number",
        "swift_code",
        "iban",
        "preferred_currency",
    ),
    exclusive=INTERNATIONAL_ONLY_FIELDS,
)

_FIELD_SETS = {
    VendorType.DOMESTIC: DOMESTIC_FIELD_SET,
    VendorType.INTERNATIONAL: INTERNATIONAL_FIELD_SET,
}


def field_set_for(vendor_type: VendorType) -> FieldSet:
    """Get the field-set of a vendor type."""
    return _FIELD_SETS[vendor_type]
