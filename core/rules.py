"""Referential integrity rules for deletes.

These are pure functions over the collections; ``core.db.GymDB`` consults
them before it replaces anything.
"""


def blocking_members(members, captain_id):
    return [m for m in members if m.captain_id == captain_id]


def can_delete_captain(members, captain_id):
    return not blocking_members(members, captain_id)


def blocking_workouts(workouts, equipment_id):
    return [w for w in workouts if w.equipment_id == equipment_id]


def can_delete_equipment(workouts, equipment_id):
    return not blocking_workouts(workouts, equipment_id)


def cascade_member_delete(members, workouts, member_id):
    """Return ``(members, workouts)`` without the member and its workouts.

    Payments are deliberately left alone: the member's payments stay behind
    and reference a member that no longer exists.
    """
    remaining_members = [m for m in members if m.id != member_id]
    remaining_workouts = [w for w in workouts if w.member_id != member_id]
    return remaining_members, remaining_workouts


def orphaned_payments(payments, member_id):
    return [p for p in payments if p.member_id == member_id]
