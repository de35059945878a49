from flask import abort, current_app, flash, redirect, render_template, request

from core.auth import current_identity, login_required, roles_required
from core.db import get_db
from core.errors import DeleteBlocked, FormError
from core.forms import EquipmentForm, MemberForm, WorkoutForm, validate_form
from core.models import Condition, EquipmentType, Role
from core.stats import (
    equipment_by_condition,
    search_members,
    subscription_counts,
    summary_cards,
    workouts_by_date,
)
from core.visibility import visible_view
from dashboard import dashboard_bp


@dashboard_bp.route("/dashboard")
@login_required
def dashboard():
    db = get_db()
    identity = current_identity()
    view = visible_view(identity, db)

    subscriptions = None
    if identity.role is not Role.captain:
        subscriptions = subscription_counts(
            view.payments, soon_days=current_app.config["EXPIRING_SOON_DAYS"]
        )

    return render_template(
        "dashboard.html",
        stats=summary_cards(identity, db, view),
        activity=workouts_by_date(view.workouts),
        equipment_status=equipment_by_condition(view.equipment),
        subscriptions=subscriptions,
    )


# ---------- MEMBERS ----------
@dashboard_bp.route("/members", methods=["GET", "POST"])
@roles_required(Role.admin, Role.captain)
def members():
    db = get_db()
    identity = current_identity()
    errors = {}

    if request.method == "POST":
        data = request.form.to_dict()
        if identity.role is Role.captain:
            data["captain_id"] = identity.id
        try:
            form = validate_form(MemberForm, data)
            db.add_member(**form.model_dump())
            return redirect("/members")
        except FormError as exc:
            errors = exc.errors

    view = visible_view(identity, db)
    q = request.args.get("q", "")
    captain_names = {c.id: c.name for c in db.captains}

    return render_template(
        "members.html",
        members=search_members(view.members, q),
        captains=view.captains,
        captain_names=captain_names,
        q=q,
        errors=errors,
        form=request.form,
    ), 400 if errors else 200


@dashboard_bp.route("/members/delete/<member_id>", methods=["POST"])
@roles_required(Role.admin, Role.captain)
def delete_member(member_id):
    db = get_db()
    member = db.get_member(member_id)
    if member not in visible_view(current_identity(), db).members:
        abort(403)

    db.delete_member(member_id)
    flash(f"Deleted {member.name} and their workout history.", "info")
    return redirect("/members")


# ---------- EQUIPMENT ----------
@dashboard_bp.route("/equipment", methods=["GET", "POST"])
@login_required
def equipment():
    db = get_db()
    identity = current_identity()
    errors = {}

    if request.method == "POST":
        if identity.role is Role.member:
            abort(403)
        try:
            form = validate_form(EquipmentForm, request.form)
            db.add_equipment(**form.model_dump())
            return redirect("/equipment")
        except FormError as exc:
            errors = exc.errors

    return render_template(
        "equipment.html",
        equipment=visible_view(identity, db).equipment,
        types=list(EquipmentType),
        conditions=list(Condition),
        can_edit=identity.role is not Role.member,
        errors=errors,
        form=request.form,
    ), 400 if errors else 200


@dashboard_bp.route("/equipment/delete/<equipment_id>", methods=["POST"])
@roles_required(Role.admin, Role.captain)
def delete_equipment(equipment_id):
    try:
        get_db().delete_equipment(equipment_id)
    except DeleteBlocked as exc:
        flash(exc.message, "error")
    return redirect("/equipment")


# ---------- WORKOUTS ----------
@dashboard_bp.route("/workouts", methods=["GET", "POST"])
@login_required
def workouts():
    db = get_db()
    identity = current_identity()
    view = visible_view(identity, db)
    errors = {}

    if request.method == "POST":
        data = request.form.to_dict()
        if identity.role is Role.member:
            data["member_id"] = identity.id
        try:
            form = validate_form(WorkoutForm, data)
            if db.has_member(form.member_id) and form.member_id not in {m.id for m in view.members}:
                raise FormError({"member_id": "You cannot record workouts for this member"})
            db.add_workout(**form.model_dump())
            return redirect("/workouts")
        except FormError as exc:
            errors = exc.errors

    return render_template(
        "workouts.html",
        workouts=sorted(view.workouts, key=lambda w: w.date, reverse=True),
        members=view.members,
        equipment=view.equipment,
        member_names=db.member_names(),
        equipment_names={e.id: e.name for e in db.equipment},
        errors=errors,
        form=request.form,
    ), 400 if errors else 200


@dashboard_bp.route("/workouts/delete/<workout_id>", methods=["POST"])
@login_required
def delete_workout(workout_id):
    db = get_db()
    workout = db.get_workout(workout_id)
    if workout not in visible_view(current_identity(), db).workouts:
        abort(403)

    db.delete_workout(workout_id)
    return redirect("/workouts")
