from datetime import date

import pytest

from core.auth import Identity
from core.models import Role
from core.visibility import (
    visible_members,
    visible_payments,
    visible_view,
    visible_workouts,
)

ADMIN = Identity(Role.admin, "admin", "System Administrator")
CAPTAIN_JOHN = Identity(Role.captain, "c1", "John Doe")
CAPTAIN_MIKE = Identity(Role.captain, "c3", "Mike Johnson")
ALICE = Identity(Role.member, "m1", "Alice Brown")


def test_admin_sees_everything(seeded):
    view = visible_view(ADMIN, seeded)

    assert view.members == seeded.members
    assert view.workouts == seeded.workouts
    assert view.payments == seeded.payments
    assert view.captains == seeded.captains
    assert view.equipment == seeded.equipment


@pytest.mark.parametrize("captain", [CAPTAIN_JOHN, CAPTAIN_MIKE])
def test_captain_sees_only_assigned_members(seeded, captain):
    seeded.add_member("Carol", "carol@example.com", date(2024, 5, 1), "c1")

    expected = [m for m in seeded.members if m.captain_id == captain.id]
    assert visible_members(captain, seeded.members) == expected


def test_captain_sees_workouts_of_their_members(seeded):
    workouts = visible_workouts(CAPTAIN_JOHN, seeded.members, seeded.workouts)
    assert [w.id for w in workouts] == ["w1", "w3"]


def test_captain_never_sees_payments(seeded):
    assert visible_payments(CAPTAIN_JOHN, seeded.payments) == []
    assert visible_view(CAPTAIN_JOHN, seeded).payments == []


def test_captain_sees_all_captains_and_equipment(seeded):
    view = visible_view(CAPTAIN_MIKE, seeded)
    assert view.captains == seeded.captains
    assert view.equipment == seeded.equipment
    assert view.members == []
    assert view.workouts == []


def test_member_sees_only_own_records(seeded):
    view = visible_view(ALICE, seeded)

    assert [m.id for m in view.members] == ["m1"]
    assert view.workouts == [w for w in seeded.workouts if w.member_id == "m1"]
    assert [p.id for p in view.payments] == ["p1"]
    assert view.captains == seeded.captains


def test_visibility_follows_current_state(seeded):
    assert len(visible_view(ALICE, seeded).workouts) == 2
    seeded.delete_workout("w1")
    assert [w.id for w in visible_view(ALICE, seeded).workouts] == ["w3"]
