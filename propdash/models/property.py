"""Rental property model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from propdash.models.base import UNSET, Patch
from propdash.models.enums import PropertyStatus, PropertyType


@dataclass(frozen=True)
class Property:
    """A rental unit owned by the landlord."""

    address: str
    city: str
    state: str
    zip_code: str
    property_type: PropertyType
    bedrooms: int
    bathrooms: float  # Half baths allowed (2.5)
    square_feet: int
    monthly_rent: Decimal
    status: PropertyStatus
    description: str | None = None
    image_url: str | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PropertyPatch(Patch):
    """Partial update for a property."""

    address: str = UNSET
    city: str = UNSET
    state: str = UNSET
    zip_code: str = UNSET
    property_type: PropertyType = UNSET
    bedrooms: int = UNSET
    bathrooms: float = UNSET
    square_feet: int = UNSET
    monthly_rent: Decimal = UNSET
    status: PropertyStatus = UNSET
    description: str | None = UNSET
    image_url: str | None = UNSET
