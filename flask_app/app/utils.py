# utils.py
# Location: flask_app/app/utils.py
# Shared helpers for the zone service layer.

from flask_app.setup_imports import *
from datetime import datetime, timezone


def log_error_and_continue(context: str, exc: Exception | None = None):
    """
    Logs an error with optional exception details, keeping callsites consistent.
    """
    if exc is not None:
        logging.error(f"❌ {context}: {exc}")
    else:
        logging.error(f"❌ {context}")


def get_current_utc_timestamp():
    """
    Returns current UTC time as a formatted string.
    """
    return datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]


def parse_float_arg(value):
    """
    Parses a request/env value into float. Returns None for missing or non-numeric input.
    'nan' is accepted and returned as NaN.
    """
    if value is None:
        return None
    try:
        return float(str(value).strip())
    except (ValueError, TypeError):
        return None


def get_env_float(name: str, default: float) -> float:
    value = parse_float_arg(os.environ.get(name))
    return default if value is None else value


def none_if_missing(v):
    """
    NaN/NA -> None so records serialize cleanly.
    """
    if v is None:
        return None
    try:
        return None if pd.isna(v) else v
    except (TypeError, ValueError):
        return v
