from datetime import date, timedelta

from core.models import Payment, PlanType


def _ending_in(days, member_id):
    end = date.today() + timedelta(days=days)
    return Payment("p-soon", member_id, 60, end - timedelta(days=30), end, PlanType.monthly)


# ---------- LOGIN / LOGOUT ----------
def test_landing_lists_every_account(client):
    resp = client.get("/")
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "System Administrator" in body
    for name in ("John Doe", "Sarah Smith", "Mike Johnson", "Alice Brown", "Bob Wilson"):
        assert name in body


def test_protected_pages_redirect_to_landing(client):
    for url in ("/dashboard", "/members", "/captains", "/workouts", "/subscription"):
        resp = client.get(url)
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/")


def test_login_as_member_without_credentials(client, login):
    resp = login("member", "m1")
    assert resp.status_code == 302

    with client.session_transaction() as sess:
        assert sess["role"] == "member"
        assert sess["identity_id"] == "m1"

    body = client.get("/dashboard").get_data(as_text=True)
    assert "Alice Brown" in body
    assert "My Subscription" in body


def test_login_unknown_identity_is_404(client, login):
    assert login("captain", "c404").status_code == 404
    assert client.post("/login/wizard/x").status_code == 404


def test_logout_clears_session(client, login):
    login("admin")
    client.get("/logout")

    assert client.get("/dashboard").status_code == 302
    with client.session_transaction() as sess:
        assert "role" not in sess


def test_session_dropped_when_identity_deleted(app, client, login, db):
    login("member", "m1")
    db.delete_member("m1")

    assert client.get("/dashboard").status_code == 302


# ---------- ROLE GATING ----------
def test_captain_cannot_reach_admin_pages(client, login):
    login("captain", "c1")
    assert client.get("/captains").status_code == 403
    assert client.get("/payments").status_code == 403
    assert client.get("/subscription").status_code == 403


def test_member_cannot_manage_members_or_equipment(client, login):
    login("member", "m1")
    assert client.get("/members").status_code == 403
    assert client.get("/equipment").status_code == 200
    resp = client.post("/equipment", data={"name": "Bench", "type": "Weights", "quantity": "1"})
    assert resp.status_code == 403


def test_captain_members_page_shows_only_own_members(client, login):
    login("captain", "c1")
    body = client.get("/members").get_data(as_text=True)

    assert "My Members" in body
    assert "Alice Brown" in body
    assert "bob@example.com" not in body


def test_member_workouts_page_shows_only_own(client, login):
    login("member", "m2")
    body = client.get("/workouts").get_data(as_text=True)

    assert "2 Records" in body
    assert "Alice Brown" not in body


# ---------- MEMBERS ----------
def test_admin_registers_member(client, login, db):
    login("admin")
    resp = client.post("/members", data={
        "name": "Carol King",
        "email": "carol@example.com",
        "join_date": "2024-05-01",
        "captain_id": "c3",
    })

    assert resp.status_code == 302
    carol = db.members[-1]
    assert carol.name == "Carol King"
    assert carol.captain_id == "c3"
    assert carol.join_date == date(2024, 5, 1)


def test_member_form_errors_render_inline(client, login, db):
    login("admin")
    resp = client.post("/members", data={"name": "", "email": "x@example.com", "join_date": "2024-05-01"})
    body = resp.get_data(as_text=True)

    assert resp.status_code == 400
    assert "Name is required" in body
    assert "Captain is required" in body
    assert len(db.members) == 2


def test_member_form_rejects_unknown_captain(client, login, db):
    login("admin")
    resp = client.post("/members", data={
        "name": "Carol", "email": "carol@example.com", "join_date": "2024-05-01", "captain_id": "c404",
    })

    assert resp.status_code == 400
    assert "Captain does not exist" in resp.get_data(as_text=True)
    assert len(db.members) == 2


def test_captain_registers_member_under_themselves(client, login, db):
    login("captain", "c2")
    client.post("/members", data={
        "name": "Dan", "email": "dan@example.com", "join_date": "2024-06-01", "captain_id": "c1",
    })

    assert db.members[-1].captain_id == "c2"


def test_search_members(client, login):
    login("admin")
    body = client.get("/members?q=bob").get_data(as_text=True)
    assert "Bob Wilson" in body
    assert "alice@example.com" not in body


def test_delete_member_cascades_workouts(client, login, db):
    login("admin")
    resp = client.post("/members/delete/m1")

    assert resp.status_code == 302
    assert [m.id for m in db.members] == ["m2"]
    assert all(w.member_id != "m1" for w in db.workouts)
    # payments are left alone
    assert any(p.member_id == "m1" for p in db.payments)
    assert "Unknown member" in client.get("/payments").get_data(as_text=True)


def test_captain_cannot_delete_other_captains_member(client, login, db):
    login("captain", "c1")
    assert client.post("/members/delete/m2").status_code == 403
    assert len(db.members) == 2


def test_delete_missing_member_is_404(client, login):
    login("admin")
    assert client.post("/members/delete/m404").status_code == 404


# ---------- CAPTAINS ----------
def test_delete_assigned_captain_is_blocked(client, login, db):
    login("admin")
    resp = client.post("/captains/delete/c1", follow_redirects=True)

    assert "Cannot delete captain. They are currently assigned to 1 members." in resp.get_data(as_text=True)
    assert [c.id for c in db.captains] == ["c1", "c2", "c3"]


def test_delete_free_captain(client, login, db):
    login("admin")
    client.post("/captains/delete/c3")
    assert [c.id for c in db.captains] == ["c1", "c2"]


def test_add_captain_requires_all_fields(client, login, db):
    login("admin")
    resp = client.post("/captains", data={"name": "Eve", "specialization": "Yoga"})

    assert resp.status_code == 400
    assert "Experience is required" in resp.get_data(as_text=True)
    assert len(db.captains) == 3

    client.post("/captains", data={"name": "Eve", "specialization": "Yoga", "experience": "2 years"})
    assert db.captains[-1].name == "Eve"


# ---------- EQUIPMENT ----------
def test_delete_used_equipment_is_blocked(client, login, db):
    login("captain", "c1")
    resp = client.post("/equipment/delete/e2", follow_redirects=True)

    assert "Cannot delete this equipment because it is referenced in 1 workouts." in resp.get_data(as_text=True)
    assert len(db.equipment) == 3


def test_add_and_delete_unused_equipment(client, login, db):
    login("admin")
    client.post("/equipment", data={"name": "Kettlebell", "type": "Weights", "quantity": "4", "condition": "Fair"})
    item = db.equipment[-1]
    assert item.name == "Kettlebell"

    client.post(f"/equipment/delete/{item.id}")
    assert all(e.id != item.id for e in db.equipment)


def test_equipment_quantity_validation(client, login, db):
    login("admin")
    resp = client.post("/equipment", data={"name": "Kettlebell", "type": "Weights", "quantity": "0"})
    assert resp.status_code == 400
    assert len(db.equipment) == 3


# ---------- WORKOUTS ----------
def test_member_records_own_workout(client, login, db):
    login("member", "m1")
    resp = client.post("/workouts", data={
        "member_id": "m2",  # ignored for members
        "equipment_id": "e1",
        "date": "2024-04-01",
        "sets": "3",
        "reps": "10",
        "weight": "0",
        "duration": "25",
    })

    assert resp.status_code == 302
    assert db.workouts[-1].member_id == "m1"


def test_captain_cannot_record_for_other_captains_member(client, login, db):
    login("captain", "c1")
    resp = client.post("/workouts", data={
        "member_id": "m2", "equipment_id": "e1", "date": "2024-04-01",
        "sets": "3", "reps": "10", "weight": "0", "duration": "25",
    })

    assert resp.status_code == 400
    assert "You cannot record workouts for this member" in resp.get_data(as_text=True)
    assert len(db.workouts) == 4


def test_workout_range_errors(client, login, db):
    login("admin")
    resp = client.post("/workouts", data={
        "member_id": "m1", "equipment_id": "e1", "date": "2024-04-01",
        "sets": "0", "reps": "10", "weight": "0", "duration": "25",
    })
    assert resp.status_code == 400
    assert len(db.workouts) == 4


def test_member_cannot_delete_someone_elses_workout(client, login, db):
    login("member", "m1")
    assert client.post("/workouts/delete/w2").status_code == 403
    assert client.post("/workouts/delete/w1").status_code == 302
    assert [w.id for w in db.workouts] == ["w2", "w3", "w4"]


# ---------- PAYMENTS ----------
def test_admin_adds_payment_with_derived_end_date(client, login, db):
    login("admin")
    client.post("/payments", data={
        "member_id": "m1", "plan_type": "Monthly", "amount": "50", "start_date": "2024-01-31",
    })

    payment = db.payments[0]
    assert payment.end_date == date(2024, 2, 29)


def test_payment_status_is_derived_on_render(client, login, db):
    login("admin")
    db.payments = [_ending_in(3, "m2"), *db.payments]

    body = client.get("/payments").get_data(as_text=True)
    assert "expiring-soon" in body
    assert "Expired" in body  # seeded 2024 payments


def test_search_payments(client, login):
    login("admin")
    body = client.get("/payments?q=yearly").get_data(as_text=True)
    assert "Bob Wilson" in body
    assert "Alice Brown" not in body.split("<h3>New Subscription Payment</h3>")[0]


def test_expiring_page(client, login, db):
    login("admin")
    db.payments = [_ending_in(2, "m1"), *db.payments]
    body = client.get("/expiring").get_data(as_text=True)
    assert "Alice Brown" in body


def test_member_subscription_page(client, login):
    login("member", "m2")
    body = client.get("/subscription").get_data(as_text=True)

    assert "Yearly" in body
    assert "Monthly" not in body
    assert "Sarah Smith" in body


def test_admin_dashboard_counts(client, login):
    login("admin")
    body = client.get("/dashboard").get_data(as_text=True)
    assert "Total Members" in body
    assert "Expired subscriptions: <strong>2</strong>" in body
