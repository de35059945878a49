from flask import current_app, render_template

from core.auth import current_identity, roles_required
from core.db import get_db
from core.models import Role
from core.subscriptions import subscription_status
from core.visibility import visible_payments
from member import member_bp


@member_bp.route("/subscription")
@roles_required(Role.member)
def subscription():
    db = get_db()
    identity = current_identity()
    soon_days = current_app.config["EXPIRING_SOON_DAYS"]

    payments = visible_payments(identity, db.payments)
    rows = [(p, subscription_status(p.end_date, soon_days=soon_days)) for p in payments]
    member = db.get_member(identity.id)

    return render_template(
        "member/subscription.html",
        member=member,
        captain=db.get_captain(member.captain_id) if db.has_captain(member.captain_id) else None,
        rows=rows,
    )
