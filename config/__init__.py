"""Settings modules for the attendance tracker.

Each module exposes ``DATA_CONFIG`` (where the roster, the per-date snapshots
and the audit log live), ``LOG_LEVEL`` for diagnostics on stderr, and ``DEBUG``.
"""

import os

DEFAULT_ENV = "development"

_SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # APP_ENV selects the settings module; anything unknown means development
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    return _SETTINGS_MODULES.get(env, _SETTINGS_MODULES[DEFAULT_ENV])
