import datetime
import os
from flask import current_app, g, has_app_context

DEFAULT_LOG_DIR = "storage"

def log_debug(msg, request_id=None):
    """Append one line to <LOG_DIR>/error_debug.log. Logging problems never fail the request."""
    log_dir = DEFAULT_LOG_DIR
    rid = request_id
    if has_app_context():
        log_dir = current_app.config.get("LOG_DIR", DEFAULT_LOG_DIR)
        rid = rid or g.get("request_id")
    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(os.path.join(log_dir, "error_debug.log"), "a", encoding="utf-8") as fh:
            fh.write(f"{datetime.datetime.now(datetime.timezone.utc).isoformat()} [{rid or 'unknown'}] {msg}\n")
    except OSError:
        pass
