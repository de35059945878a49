"""Runtime settings, read from the environment with development defaults.

SECRET_KEY          Flask session signing key.
LOG_LEVEL           root logging level (default INFO).
SEED_DEMO_DATA      "true"/"false", start with the demo records (default true).
EXPIRING_SOON_DAYS  days before end date a subscription counts as expiring (default 7).
"""
import os


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config():
    return {
        "SECRET_KEY": os.environ.get("SECRET_KEY", "dev-secret-key"),
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO").upper(),
        "SEED_DEMO_DATA": _env_bool("SEED_DEMO_DATA", True),
        "EXPIRING_SOON_DAYS": int(os.environ.get("EXPIRING_SOON_DAYS", "7")),
    }
