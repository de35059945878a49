from flask import current_app, flash, redirect, render_template, request

from core.auth import admin_required
from core.db import get_db
from core.errors import DeleteBlocked, FormError
from core.forms import CaptainForm, PaymentForm, validate_form
from core.models import PlanType
from core.stats import expiring_payments, search_payments
from core.subscriptions import subscription_status
from admin import admin_bp


def _with_status(payments):
    soon_days = current_app.config["EXPIRING_SOON_DAYS"]
    return [(p, subscription_status(p.end_date, soon_days=soon_days)) for p in payments]


# ---------- CAPTAINS ----------
@admin_bp.route("/captains", methods=["GET", "POST"])
@admin_required
def captains():
    db = get_db()
    errors = {}

    if request.method == "POST":
        try:
            form = validate_form(CaptainForm, request.form)
            db.add_captain(**form.model_dump())
            return redirect("/captains")
        except FormError as exc:
            errors = exc.errors

    assigned = {c.id: 0 for c in db.captains}
    for m in db.members:
        if m.captain_id in assigned:
            assigned[m.captain_id] += 1

    return render_template(
        "admin/captains.html",
        captains=db.captains,
        assigned=assigned,
        errors=errors,
        form=request.form,
    ), 400 if errors else 200


@admin_bp.route("/captains/delete/<captain_id>", methods=["POST"])
@admin_required
def delete_captain(captain_id):
    try:
        get_db().delete_captain(captain_id)
    except DeleteBlocked as exc:
        flash(exc.message, "error")
    return redirect("/captains")


# ---------- PAYMENTS ----------
@admin_bp.route("/payments", methods=["GET", "POST"])
@admin_required
def payments():
    db = get_db()
    errors = {}

    if request.method == "POST":
        try:
            form = validate_form(PaymentForm, request.form)
            db.add_payment(**form.model_dump())
            return redirect("/payments")
        except FormError as exc:
            errors = exc.errors

    q = request.args.get("q", "")
    member_names = db.member_names()
    rows = search_payments(db.payments, member_names, q)

    return render_template(
        "admin/payments.html",
        rows=_with_status(rows),
        members=db.members,
        member_names=member_names,
        plan_types=list(PlanType),
        q=q,
        errors=errors,
        form=request.form,
    ), 400 if errors else 200


@admin_bp.route("/expiring")
@admin_required
def expiring():
    db = get_db()
    rows = expiring_payments(db.payments, soon_days=current_app.config["EXPIRING_SOON_DAYS"])

    return render_template(
        "admin/expiring.html",
        rows=_with_status(rows),
        member_names=db.member_names(),
    )
