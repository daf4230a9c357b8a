"""
Runtime configuration for the employee admin API.

Values come from the environment (a .env file is loaded by main.py before
this module is imported). Override any of them in .env, e.g.:
  ADMIN_USERNAME=root
  ADMIN_PASSWORD=hunter2
  SEED_EMPLOYEES=false
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# The single administrator account
ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "password123")

# Start with the two demo employees (ids 1 and 2)
SEED_EMPLOYEES = _env_flag("SEED_EMPLOYEES", True)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_JSON = _env_flag("LOG_JSON", False)

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3000"))
