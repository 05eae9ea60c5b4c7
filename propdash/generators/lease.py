"""Lease and payment schedule generator."""

from __future__ import annotations

import calendar
import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from propdash.generators.base import BaseGenerator
from propdash.models import Lease, LeaseStatus, Payment, PaymentMethod, PaymentStatus


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole months, clamping to the last day of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class LeaseGenerator(BaseGenerator):
    """Generate leases and the monthly payments due under them."""

    TERM_MONTHS = [6, 12, 12, 12, 18, 24]
    TERMS = [
        "12-month lease, utilities not included",
        "Tenant responsible for utilities",
        "No pets, no smoking",
        "Landscaping included",
        None,
    ]

    # Outcome weights for installments already past due
    PAST_DUE_OUTCOMES = [PaymentStatus.PAID, PaymentStatus.LATE, PaymentStatus.OVERDUE]
    PAST_DUE_WEIGHTS = [0.85, 0.10, 0.05]

    PAYMENT_METHODS = list(PaymentMethod)
    PAYMENT_METHOD_WEIGHTS = [0.05, 0.15, 0.60, 0.20]

    def generate(
        self,
        property_id: str,
        tenant_id: str,
        monthly_rent: Decimal,
        start_date: date | None = None,
        status: LeaseStatus = LeaseStatus.ACTIVE,
        today: date | None = None,
    ) -> Lease:
        """Generate a lease between a property and a tenant.

        Parameters
        ----------
        property_id : str
            Leased property id.
        tenant_id : str
            Tenant id.
        monthly_rent : Decimal
            Agreed rent; the security deposit equals one month.
        start_date : date | None
            First day of the lease; defaults to the first of a recent
            month, chosen so that the lease is still running.
        status : LeaseStatus
            Lease status. An active lease whose end date is before
            ``today`` is generated as expired instead.
        today : date | None
            Reference date; defaults to the current date.

        Returns
        -------
        Lease
            Generated lease without id or timestamps.
        """
        today = today or date.today()
        term = random.choice(self.TERM_MONTHS)
        if start_date is None:
            # At most term-1 months back, so the lease runs past this month
            months_back = random.randint(0, min(11, term - 1))
            start_date = add_months(today.replace(day=1), -months_back)
        end_date = add_months(start_date, term) - timedelta(days=1)
        if status == LeaseStatus.ACTIVE and end_date < today:
            status = LeaseStatus.EXPIRED

        return Lease(
            property_id=property_id,
            tenant_id=tenant_id,
            start_date=start_date,
            end_date=end_date,
            monthly_rent=monthly_rent,
            security_deposit=monthly_rent,
            status=status,
            terms=random.choice(self.TERMS),
        )

    def payment_schedule(
        self,
        lease: Lease,
        count: int,
        today: date | None = None,
    ) -> Iterator[Payment]:
        """Yield up to ``count`` monthly payments for a stored lease.

        Payments due before ``today`` are mostly paid, with a share of
        late and overdue ones; later payments are pending.
        """
        today = today or date.today()
        for month in range(count):
            due = add_months(lease.start_date, month)
            if due > lease.end_date:
                break
            yield self._payment(lease, due, today)

    def _payment(self, lease: Lease, due: date, today: date) -> Payment:
        if due >= today:
            status = PaymentStatus.PENDING
        else:
            status = random.choices(self.PAST_DUE_OUTCOMES, weights=self.PAST_DUE_WEIGHTS, k=1)[0]

        paid_date = None
        method = None
        if status == PaymentStatus.PAID:
            paid_date = due - timedelta(days=random.randint(0, 5))
        elif status == PaymentStatus.LATE:
            paid_date = min(today, due + timedelta(days=random.randint(1, 20)))
        if paid_date is not None:
            method = random.choices(
                self.PAYMENT_METHODS, weights=self.PAYMENT_METHOD_WEIGHTS, k=1
            )[0]

        return Payment(
            lease_id=lease.id,
            tenant_id=lease.tenant_id,
            amount=lease.monthly_rent,
            due_date=due,
            status=status,
            paid_date=paid_date,
            payment_method=method,
        )
