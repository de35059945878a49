"""Role-based visibility.

Every function here is a pure function of an identity and the raw
collections. Views call them on each request; results are never stored.
"""
from dataclasses import dataclass

from core.models import Role


def _unknown(identity):
    return TypeError(f"unhandled role {identity.role!r}")


def visible_members(identity, members):
    if identity.role is Role.admin:
        return list(members)
    if identity.role is Role.captain:
        return [m for m in members if m.captain_id == identity.id]
    if identity.role is Role.member:
        return [m for m in members if m.id == identity.id]
    raise _unknown(identity)


def visible_workouts(identity, members, workouts):
    if identity.role is Role.admin:
        return list(workouts)
    if identity.role is Role.captain:
        member_ids = {m.id for m in visible_members(identity, members)}
        return [w for w in workouts if w.member_id in member_ids]
    if identity.role is Role.member:
        return [w for w in workouts if w.member_id == identity.id]
    raise _unknown(identity)


def visible_payments(identity, payments):
    if identity.role is Role.admin:
        return list(payments)
    if identity.role is Role.captain:
        return []
    if identity.role is Role.member:
        return [p for p in payments if p.member_id == identity.id]
    raise _unknown(identity)


def visible_captains(identity, captains):
    return list(captains)


def visible_equipment(identity, equipment):
    return list(equipment)


@dataclass(frozen=True)
class VisibleView:
    captains: list
    members: list
    equipment: list
    workouts: list
    payments: list


def visible_view(identity, db):
    return VisibleView(
        captains=visible_captains(identity, db.captains),
        members=visible_members(identity, db.members),
        equipment=visible_equipment(identity, db.equipment),
        workouts=visible_workouts(identity, db.members, db.workouts),
        payments=visible_payments(identity, db.payments),
    )
