import logging
from datetime import date

from core.models import Captain, Condition, Equipment, EquipmentType, Member, Payment, PlanType, Workout
from core.subscriptions import compute_end_date

logger = logging.getLogger(__name__)


def _payment(id, member_id, amount, start_date, plan_type):
    return Payment(
        id=id,
        member_id=member_id,
        amount=amount,
        start_date=start_date,
        end_date=compute_end_date(start_date, plan_type),
        plan_type=plan_type,
    )


def seed_demo_data(db):
    db.captains = [
        Captain("c1", "John Doe", "Strength Training", "5 years"),
        Captain("c2", "Sarah Smith", "Cardio & HIIT", "3 years"),
        Captain("c3", "Mike Johnson", "Rehabilitation", "8 years"),
    ]
    db.members = [
        Member("m1", "Alice Brown", "alice@example.com", date(2024, 1, 15), "c1"),
        Member("m2", "Bob Wilson", "bob@example.com", date(2024, 2, 1), "c2"),
    ]
    db.equipment = [
        Equipment("e1", "Treadmill 3000", EquipmentType.cardio, Condition.good, 5),
        Equipment("e2", "Dumbbell Set", EquipmentType.weights, Condition.good, 10),
        Equipment("e3", "Leg Press Machine", EquipmentType.machine, Condition.fair, 2),
    ]
    db.workouts = [
        Workout("w1", "m1", "e2", date(2024, 3, 10), 3, 12, 15, 45),
        Workout("w2", "m2", "e1", date(2024, 3, 11), 1, 1, 0, 30),
        Workout("w3", "m1", "e1", date(2024, 3, 12), 1, 20, 0, 20),
        Workout("w4", "m2", "e3", date(2024, 3, 12), 4, 10, 120, 50),
    ]
    db.payments = [
        _payment("p1", "m1", 50, date(2024, 3, 1), PlanType.monthly),
        _payment("p2", "m2", 500, date(2024, 1, 1), PlanType.yearly),
    ]
    logger.info("Seeded demo data")
    return db
