from collections import Counter
from datetime import date

from core.models import Condition, PaymentStatus, Role
from core.subscriptions import EXPIRING_SOON_DAYS, subscription_status


def summary_cards(identity, db, view):
    # members only ever count themselves; staff see the whole roster size
    members = view.members if identity.role is Role.member else db.members
    return [
        {"label": "Total Members", "value": len(members)},
        {"label": "Active Captains", "value": len(db.captains)},
        {"label": "Equipment Count", "value": sum(e.quantity for e in db.equipment)},
        {"label": "Total Workouts", "value": len(view.workouts)},
    ]


def workouts_by_date(workouts):
    counts = Counter(w.date for w in workouts)
    return [{"date": d, "workouts": counts[d]} for d in sorted(counts)]


def equipment_by_condition(equipment):
    counts = Counter(e.condition for e in equipment)
    return [{"condition": c.value, "count": counts[c]} for c in Condition if counts[c]]


def subscription_counts(payments, today=None, soon_days=EXPIRING_SOON_DAYS):
    today = today or date.today()
    active = expired = expiring = 0
    for payment in payments:
        status = subscription_status(payment.end_date, today, soon_days)
        if status.status is PaymentStatus.expired:
            expired += 1
        else:
            active += 1
            if status.expiring_soon:
                expiring += 1
    return {"active": active, "expired": expired, "expiring_soon": expiring}


def expiring_payments(payments, today=None, soon_days=EXPIRING_SOON_DAYS):
    today = today or date.today()
    rows = [p for p in payments if subscription_status(p.end_date, today, soon_days).expiring_soon]
    return sorted(rows, key=lambda p: p.end_date)


# ---------- SEARCH ----------
def search_members(members, term):
    term = (term or "").strip().lower()
    if not term:
        return list(members)
    return [m for m in members if term in m.name.lower() or term in m.email.lower()]


def search_payments(payments, member_names, term):
    term = (term or "").strip().lower()
    if not term:
        return list(payments)
    return [
        p for p in payments
        if term in member_names.get(p.member_id, "").lower() or term in p.plan_type.value.lower()
    ]
