from dataclasses import dataclass
from datetime import date
from enum import Enum


class Role(str, Enum):
    admin = "admin"
    captain = "captain"
    member = "member"


class Condition(str, Enum):
    good = "Good"
    fair = "Fair"
    poor = "Poor"


class EquipmentType(str, Enum):
    cardio = "Cardio"
    weights = "Weights"
    machine = "Machine"
    accessory = "Accessory"


class PlanType(str, Enum):
    monthly = "Monthly"
    quarterly = "Quarterly"
    yearly = "Yearly"


class PaymentStatus(str, Enum):
    active = "Active"
    expired = "Expired"


# ---------- RECORDS ----------
# Records are never edited in place; the store only inserts and deletes.

@dataclass(frozen=True)
class Captain:
    id: str
    name: str
    specialization: str
    experience: str


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    email: str
    join_date: date
    captain_id: str


@dataclass(frozen=True)
class Equipment:
    id: str
    name: str
    type: EquipmentType
    condition: Condition
    quantity: int


@dataclass(frozen=True)
class Workout:
    id: str
    member_id: str
    equipment_id: str
    date: date
    sets: int
    reps: int
    weight: float
    duration: int  # minutes


@dataclass(frozen=True)
class Payment:
    """A subscription payment.

    ``status`` is what was recorded at creation time (always Active). Pages
    show the status derived from ``end_date`` instead, see
    ``core.subscriptions.subscription_status``.
    """

    id: str
    member_id: str
    amount: float
    start_date: date
    end_date: date
    plan_type: PlanType
    status: PaymentStatus = PaymentStatus.active
