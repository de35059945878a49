"""Session identity.

"Login" here is account selection: choosing the administrator, a captain or
a member puts that identity in the session with no credential check. That
is a known simplification of this dashboard, not an authentication layer.
"""
import logging
from dataclasses import dataclass
from functools import wraps

from flask import abort, redirect, session

from core.db import get_db
from core.errors import NotFound
from core.models import Role

logger = logging.getLogger(__name__)

ADMIN_ID = "admin"
ADMIN_NAME = "System Administrator"
ADMIN_EMAIL = "admin@bbg.com"


@dataclass(frozen=True)
class Identity:
    role: Role
    id: str
    name: str
    email: str = None

    @property
    def is_admin(self):
        return self.role is Role.admin


def admin_identity():
    return Identity(Role.admin, ADMIN_ID, ADMIN_NAME, ADMIN_EMAIL)


def captain_identity(captain):
    email = captain.name.lower().replace(" ", ".", 1) + "@bbg.com"
    return Identity(Role.captain, captain.id, captain.name, email)


def member_identity(member):
    return Identity(Role.member, member.id, member.name, member.email)


def resolve_identity(db, role, identity_id):
    """Build the identity for ``role``/``identity_id`` from current store state."""
    role = Role(role)
    if role is Role.admin:
        return admin_identity()
    if role is Role.captain:
        return captain_identity(db.get_captain(identity_id))
    if role is Role.member:
        return member_identity(db.get_member(identity_id))
    raise TypeError(f"unhandled role {role!r}")


def login(role, identity_id=ADMIN_ID):
    identity = resolve_identity(get_db(), role, identity_id)
    session.clear()
    session["role"] = identity.role.value
    session["identity_id"] = identity.id
    logger.info("Logged in as %s %s", identity.role.value, identity.id)
    return identity


def logout():
    if "role" in session:
        logger.info("Logged out %s %s", session.get("role"), session.get("identity_id"))
    session.clear()


def current_identity():
    role = session.get("role")
    if role is None:
        return None

    try:
        return resolve_identity(get_db(), role, session.get("identity_id"))
    except (NotFound, ValueError):
        # the selected captain/member was deleted, or the cookie is junk
        logger.info("Dropping stale session for %s %s", role, session.get("identity_id"))
        session.clear()
        return None


def login_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if current_identity() is None:
            return redirect("/")
        return f(*args, **kwargs)
    return decorated


def roles_required(*roles):
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            identity = current_identity()
            if identity is None:
                return redirect("/")
            if identity.role not in roles:
                abort(403)
            return f(*args, **kwargs)
        return decorated
    return decorator


admin_required = roles_required(Role.admin)
