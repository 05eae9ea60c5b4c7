"""Tenant generator."""

from __future__ import annotations

import random

from propdash.generators.base import BaseGenerator
from propdash.models import EmergencyContact, Tenant, TenantStatus


class TenantGenerator(BaseGenerator):
    """Generate synthetic tenants with emergency contacts."""

    RELATIONSHIPS = ["Spouse", "Partner", "Parent", "Father", "Mother", "Sibling", "Friend"]

    def generate(self, status: TenantStatus = TenantStatus.ACTIVE) -> Tenant:
        """Generate a single tenant.

        Parameters
        ----------
        status : TenantStatus
            Lifecycle status of the tenant.

        Returns
        -------
        Tenant
            Generated tenant without id or timestamps.
        """
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()
        relationship = random.choice(self.RELATIONSHIPS)
        contact_last = last_name if relationship != "Friend" else self.fake.last_name()

        return Tenant(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name}.{last_name}@{self.fake.free_email_domain()}".lower(),
            phone=self.fake.phone_number(),
            emergency_contact=EmergencyContact(
                name=f"{self.fake.first_name()} {contact_last}",
                phone=self.fake.phone_number(),
                relationship=relationship,
            ),
            status=status,
        )
