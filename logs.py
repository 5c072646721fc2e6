from datetime import datetime, timezone, timedelta
import traceback

import config

LOG_TIMEZONE = timezone(timedelta(hours=config.LOG_UTC_OFFSET))


def format_log_time() -> str:
    return datetime.now(LOG_TIMEZONE).strftime("%Y-%m-%d %H:%M:%S %Z")


def log_message(scope: str, message: str):
    """Log a message tagged with its scope and the current time"""
    print(f"[{format_log_time()}] [{scope}] {message}")


def log_error(scope: str, message: str, error: Exception = None):
    """Log an error, with its traceback when an exception is given"""
    error_msg = f"❌ {message}"
    if error:
        error_msg += f": {str(error)}"
    print(f"[{format_log_time()}] [{scope}] {error_msg}")
    if error:
        traceback.print_exception(type(error), error, error.__traceback__)
