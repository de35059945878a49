import logging
from datetime import date

from flask import Flask, abort, redirect, render_template, request

from core.auth import current_identity, login, logout
from core.config import load_config
from core.db import get_db, init_db
from core.errors import NotFound
from core.logging_config import setup_logging
from core.models import Role

logger = logging.getLogger(__name__)

# sidebar entries per role: (endpoint url, label)
NAVIGATION = {
    Role.admin: [
        ("/dashboard", "Dashboard"),
        ("/members", "Members"),
        ("/captains", "Captains"),
        ("/equipment", "Equipment"),
        ("/workouts", "Workouts"),
        ("/payments", "Payments"),
        ("/expiring", "Expiring"),
    ],
    Role.captain: [
        ("/dashboard", "Dashboard"),
        ("/members", "My Members"),
        ("/equipment", "Equipment"),
        ("/workouts", "Workouts"),
    ],
    Role.member: [
        ("/dashboard", "Dashboard"),
        ("/equipment", "Equipment"),
        ("/workouts", "My Workouts"),
        ("/subscription", "My Subscription"),
    ],
}


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(load_config())
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])
    init_db(app, seed=app.config["SEED_DEMO_DATA"])

    from admin import admin_bp
    from dashboard import dashboard_bp
    from member import member_bp

    app.register_blueprint(dashboard_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(member_bp)

    register_routes(app)
    register_error_handlers(app)

    @app.context_processor
    def inject_user():
        identity = current_identity()
        nav = NAVIGATION[identity.role] if identity else []
        return {"current_user": identity, "nav": nav, "today": date.today()}

    logger.info("Gym dashboard ready (seeded=%s)", app.config["SEED_DEMO_DATA"])
    return app


def register_routes(app):

    # ---------- LANDING / ACCOUNT SELECTION ----------
    @app.route("/")
    @app.route("/landing")
    def landing():
        if current_identity() is not None:
            return redirect("/dashboard")
        db = get_db()
        return render_template("landing.html", captains=db.captains, members=db.members)

    @app.route("/login/admin", methods=["POST"])
    def login_admin():
        login(Role.admin)
        return redirect("/dashboard")

    @app.route("/login/<role>/<identity_id>", methods=["POST"])
    def login_as(role, identity_id):
        if role not in (Role.captain.value, Role.member.value):
            abort(404)
        login(role, identity_id)
        return redirect("/dashboard")

    @app.route("/logout")
    def logout_view():
        logout()
        return redirect("/")


def register_error_handlers(app):

    @app.errorhandler(NotFound)
    def not_found(exc):
        return render_template("error.html", code=404, message=str(exc)), 404

    @app.errorhandler(403)
    def forbidden(exc):
        return render_template("error.html", code=403, message="You are not allowed to do that."), 403

    @app.errorhandler(404)
    def page_not_found(exc):
        return render_template("error.html", code=404, message="Page not found."), 404


# ---------- RUN ----------
if __name__ == "__main__":
    create_app().run(debug=True)
