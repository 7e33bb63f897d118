import os

UPLOAD_DIR = os.path.join(os.getcwd(), "uploads")
LOG_DIR = "storage"

MAX_FILE_SIZE = 10 * 1024 * 1024      # 10 MB
# whole request body cap; leaves room for multipart boundaries and headers
MULTIPART_OVERHEAD = 64 * 1024

ALLOWED_TYPES = (
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

STRICT_CONTENT_CHECK = False
LANGUAGE = "en"


def _flag(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(overrides=None):
    """
    Build the settings dict the app factory copies into app.config.
    Environment variables win over module defaults, explicit overrides win over both.
    """
    cfg = {
        "UPLOAD_DIR": os.environ.get("PATENTLENS_UPLOAD_DIR", UPLOAD_DIR),
        "LOG_DIR": os.environ.get("PATENTLENS_LOG_DIR", LOG_DIR),
        "MAX_FILE_SIZE": MAX_FILE_SIZE,
        "ALLOWED_TYPES": ALLOWED_TYPES,
        "STRICT_CONTENT_CHECK": _flag(os.environ.get("PATENTLENS_STRICT_CONTENT", STRICT_CONTENT_CHECK)),
        "LANGUAGE": os.environ.get("PATENTLENS_LANGUAGE", LANGUAGE),
    }
    if overrides:
        cfg.update(overrides)
    cfg["STRICT_CONTENT_CHECK"] = _flag(cfg["STRICT_CONTENT_CHECK"])
    cfg["MAX_CONTENT_LENGTH"] = cfg["MAX_FILE_SIZE"] + MULTIPART_OVERHEAD
    return cfg
