import os
from flask import has_app_context, current_app
from utils import clock

DEFAULT_AUDIT_LOG_FILE = os.path.join("logs", "audit.log")


def _audit_log_file():
    if has_app_context():
        return current_app.config.get("AUDIT_LOG_FILE") or DEFAULT_AUDIT_LOG_FILE
    return DEFAULT_AUDIT_LOG_FILE


def log_event(event_type, user_id=None, ip=None, description=None, level="INFO", print_to_console=False):
    """
    Logs a security or audit-related event to a file.

    Parameters:
        event_type (str): The type of the event (e.g., LOGIN_SUCCESS, BOOK_ISSUED).
        user_id (str|None): The acting user's ID, if available.
        ip (str|None): IP address, if available.
        description (str|None): Additional context.
        level (str): Log level (e.g., INFO, WARNING, ERROR).
        print_to_console (bool): Optionally print to stdout (for debugging/dev).
    """
    log_file_path = _audit_log_file()
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    timestamp = clock.now().strftime('%Y-%m-%d %H:%M:%S')
    log_entry = (
        f"[{timestamp}] [{level.upper()}] EVENT: {event_type} | "
        f"USER: {user_id or 'N/A'} | IP: {ip or 'N/A'} | DESC: {description or 'N/A'}\n"
    )

    with open(log_file_path, "a") as log_file:
        log_file.write(log_entry)

    if print_to_console:
        print(log_entry.strip())
