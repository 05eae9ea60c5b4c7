"""Property generator."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from propdash.generators.base import BaseGenerator
from propdash.models import Property, PropertyStatus, PropertyType


class PropertyGenerator(BaseGenerator):
    """Generate synthetic rental units."""

    PROPERTY_TYPES = list(PropertyType)
    PROPERTY_TYPE_WEIGHTS = [0.45, 0.25, 0.20, 0.10]

    # (bedrooms, bathrooms, square feet range) per unit size
    LAYOUTS = [
        (0, 1.0, (400, 600)),
        (1, 1.0, (550, 850)),
        (2, 1.5, (800, 1200)),
        (2, 2.0, (900, 1300)),
        (3, 2.0, (1200, 1800)),
        (3, 2.5, (1400, 2000)),
        (4, 3.0, (1800, 2800)),
    ]

    RENT_PER_SQFT = (Decimal("1.80"), Decimal("3.40"))

    def generate(self, status: PropertyStatus | None = None) -> Property:
        """Generate a single property.

        Parameters
        ----------
        status : PropertyStatus | None
            Fixed occupancy status; drawn at random when omitted.

        Returns
        -------
        Property
            Generated property without id or timestamps.
        """
        property_type = random.choices(
            self.PROPERTY_TYPES, weights=self.PROPERTY_TYPE_WEIGHTS, k=1
        )[0]
        bedrooms, bathrooms, sqft_range = random.choice(self.LAYOUTS)
        if property_type == PropertyType.HOUSE and bedrooms < 2:
            bedrooms, bathrooms, sqft_range = self.LAYOUTS[4]
        square_feet = random.randint(*sqft_range)

        low, high = self.RENT_PER_SQFT
        rate = low + (high - low) * Decimal(str(round(random.random(), 2)))
        # Rents are quoted in multiples of 25
        monthly_rent = (square_feet * rate / 25).quantize(Decimal("1")) * 25

        return Property(
            address=self.fake.street_address(),
            city=self.fake.city(),
            state=self.fake.state_abbr(),
            zip_code=self.fake.postcode(),
            property_type=property_type,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            square_feet=square_feet,
            monthly_rent=monthly_rent,
            status=status or random.choice(list(PropertyStatus)),
            description=self.fake.sentence(nb_words=8),
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties."""
        for _ in range(count):
            yield self.generate()
