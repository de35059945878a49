import logging
import uuid

from flask import current_app

from core import rules
from core.errors import DeleteBlocked, FormError, NotFound
from core.models import (
    Captain,
    Condition,
    Equipment,
    EquipmentType,
    Member,
    Payment,
    PaymentStatus,
    PlanType,
    Workout,
)
from core.seed import seed_demo_data
from core.subscriptions import compute_end_date

logger = logging.getLogger(__name__)

EXTENSION_KEY = "gym_db"


def new_id(prefix):
    return f"{prefix}{uuid.uuid4().hex}"


class GymDB:
    """In-memory application state: the five collections and their mutations.

    Every mutation builds new lists and swaps them in; nothing is edited in
    place. State lives as long as the Flask app that owns it.
    """

    def __init__(self):
        self.captains = []
        self.members = []
        self.equipment = []
        self.workouts = []
        self.payments = []

    # ---------- LOOKUPS ----------
    def _find(self, records, kind, record_id):
        for record in records:
            if record.id == record_id:
                return record
        raise NotFound(kind, record_id)

    def get_captain(self, captain_id):
        return self._find(self.captains, "Captain", captain_id)

    def get_member(self, member_id):
        return self._find(self.members, "Member", member_id)

    def get_equipment(self, equipment_id):
        return self._find(self.equipment, "Equipment", equipment_id)

    def get_workout(self, workout_id):
        return self._find(self.workouts, "Workout", workout_id)

    def has_captain(self, captain_id):
        return any(c.id == captain_id for c in self.captains)

    def has_member(self, member_id):
        return any(m.id == member_id for m in self.members)

    def has_equipment(self, equipment_id):
        return any(e.id == equipment_id for e in self.equipment)

    def member_names(self):
        return {m.id: m.name for m in self.members}

    # ---------- INSERTS ----------
    def add_captain(self, name, specialization, experience):
        captain = Captain(
            id=new_id("c"),
            name=name,
            specialization=specialization,
            experience=experience,
        )
        self.captains = [*self.captains, captain]
        logger.info("Added captain %s (%s)", captain.id, captain.name)
        return captain

    def add_member(self, name, email, join_date, captain_id):
        if not self.has_captain(captain_id):
            raise FormError({"captain_id": "Captain does not exist"})

        member = Member(
            id=new_id("m"),
            name=name,
            email=email,
            join_date=join_date,
            captain_id=captain_id,
        )
        self.members = [*self.members, member]
        logger.info("Added member %s (%s) under captain %s", member.id, member.name, captain_id)
        return member

    def add_equipment(self, name, type, condition, quantity):
        if quantity < 0:
            raise FormError({"quantity": "Quantity cannot be negative"})

        item = Equipment(
            id=new_id("e"),
            name=name,
            type=EquipmentType(type),
            condition=Condition(condition),
            quantity=quantity,
        )
        self.equipment = [*self.equipment, item]
        logger.info("Added equipment %s (%s x%d)", item.id, item.name, item.quantity)
        return item

    def add_workout(self, member_id, equipment_id, date, sets, reps, weight, duration):
        errors = {}
        if not self.has_member(member_id):
            errors["member_id"] = "Member does not exist"
        if not self.has_equipment(equipment_id):
            errors["equipment_id"] = "Equipment does not exist"
        if errors:
            raise FormError(errors)

        workout = Workout(
            id=new_id("w"),
            member_id=member_id,
            equipment_id=equipment_id,
            date=date,
            sets=sets,
            reps=reps,
            weight=weight,
            duration=duration,
        )
        self.workouts = [*self.workouts, workout]
        logger.info("Recorded workout %s for member %s", workout.id, member_id)
        return workout

    def add_payment(self, member_id, amount, start_date, plan_type):
        if not self.has_member(member_id):
            raise FormError({"member_id": "Member does not exist"})

        plan_type = PlanType(plan_type)
        payment = Payment(
            id=new_id("p"),
            member_id=member_id,
            amount=amount,
            start_date=start_date,
            end_date=compute_end_date(start_date, plan_type),
            plan_type=plan_type,
            status=PaymentStatus.active,
        )
        # newest first
        self.payments = [payment, *self.payments]
        logger.info(
            "Added %s payment %s for member %s until %s",
            plan_type.value, payment.id, member_id, payment.end_date,
        )
        return payment

    # ---------- DELETES ----------
    def delete_captain(self, captain_id):
        captain = self.get_captain(captain_id)

        blocking = rules.blocking_members(self.members, captain_id)
        if blocking:
            logger.warning("Refused to delete captain %s: %d members assigned", captain_id, len(blocking))
            raise DeleteBlocked(
                f"Cannot delete captain. They are currently assigned to {len(blocking)} members.",
                len(blocking),
            )

        self.captains = [c for c in self.captains if c.id != captain_id]
        logger.info("Deleted captain %s", captain_id)
        return captain

    def delete_equipment(self, equipment_id):
        item = self.get_equipment(equipment_id)

        blocking = rules.blocking_workouts(self.workouts, equipment_id)
        if blocking:
            logger.warning("Refused to delete equipment %s: %d workouts reference it", equipment_id, len(blocking))
            raise DeleteBlocked(
                f"Cannot delete this equipment because it is referenced in {len(blocking)} workouts.",
                len(blocking),
            )

        self.equipment = [e for e in self.equipment if e.id != equipment_id]
        logger.info("Deleted equipment %s", equipment_id)
        return item

    def delete_member(self, member_id):
        member = self.get_member(member_id)

        members, workouts = rules.cascade_member_delete(self.members, self.workouts, member_id)
        removed_workouts = len(self.workouts) - len(workouts)
        # both collections swap together
        self.members, self.workouts = members, workouts

        logger.info("Deleted member %s and %d workouts", member_id, removed_workouts)
        orphans = rules.orphaned_payments(self.payments, member_id)
        if orphans:
            logger.warning("Member %s deleted with %d payments still referencing it", member_id, len(orphans))
        return member

    def delete_workout(self, workout_id):
        workout = self.get_workout(workout_id)
        self.workouts = [w for w in self.workouts if w.id != workout_id]
        logger.info("Deleted workout %s", workout_id)
        return workout


# ---------- APP STATE ----------
def init_db(app, seed=False):
    db = GymDB()
    if seed:
        seed_demo_data(db)
    app.extensions[EXTENSION_KEY] = db
    return db


def get_db():
    return current_app.extensions[EXTENSION_KEY]
