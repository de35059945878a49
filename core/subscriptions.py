import calendar
from dataclasses import dataclass
from datetime import date

from core.models import PaymentStatus, PlanType

PLAN_MONTHS = {
    PlanType.monthly: 1,
    PlanType.quarterly: 3,
    PlanType.yearly: 12,
}

EXPIRING_SOON_DAYS = 7


def add_months(start: date, months: int) -> date:
    """Move ``start`` forward by whole calendar months.

    The day is clamped to the last day of the target month, so
    2024-01-31 + 1 month is 2024-02-29 and 2024-02-29 + 12 months is
    2025-02-28.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def compute_end_date(start: date, plan_type) -> date:
    return add_months(start, PLAN_MONTHS[PlanType(plan_type)])


@dataclass(frozen=True)
class SubscriptionStatus:
    status: PaymentStatus
    days_left: int
    expiring_soon: bool

    @property
    def label(self):
        return self.status.value


def subscription_status(end_date: date, today: date = None, soon_days: int = EXPIRING_SOON_DAYS) -> SubscriptionStatus:
    today = today or date.today()
    days_left = (end_date - today).days

    if days_left < 0:
        return SubscriptionStatus(PaymentStatus.expired, days_left, False)

    return SubscriptionStatus(PaymentStatus.active, days_left, days_left <= soon_days)
