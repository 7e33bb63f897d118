import datetime
import traceback
from flask import Blueprint, current_app, jsonify, request

from messages import message
from observability.debug_log import log_debug
from observability.metrics import inc
from services.documents.storage import store_document
from services.documents.validation import SNIFF_BYTES, check_upload, sniff_matches

upload_bp = Blueprint("document_upload", __name__)


def _text(key):
    return message(key, current_app.config.get("LANGUAGE", "en"))


def reject(key):
    inc("upload_rejections")
    log_debug(f"Rejected upload: {key}")
    return jsonify({"error": _text(key)}), 400


def _iso_now():
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@upload_bp.route("/upload", methods=["POST"])
def upload_document():
    inc("upload_requests")
    f = request.files.get("file")

    # ---- VALIDATION (presence, size, type) ----
    problem = check_upload(f, current_app.config["MAX_FILE_SIZE"], current_app.config["ALLOWED_TYPES"])
    if problem:
        return reject(problem)
    # ---- END VALIDATION ----

    storage = current_app.extensions["document_storage"]
    sequence = current_app.extensions["document_sequence"]
    try:
        data = f.read()
        if current_app.config.get("STRICT_CONTENT_CHECK") and not sniff_matches(f.mimetype, data[:SNIFF_BYTES]):
            return reject("content_mismatch")

        stamp, file_name, path = store_document(storage, sequence, f.filename, data)
        size = storage.size(path)
    except Exception as e:
        inc("upload_failures")
        log_debug(f"Upload failed for {f.filename!r}: {e}\n{traceback.format_exc()}")
        return jsonify({"error": _text("upload_error")}), 500

    descriptor = {
        "success": True,
        "fileId": str(stamp),
        "originalName": f.filename,
        "fileName": file_name,
        "size": size,
        "type": f.mimetype,
        "uploadTime": _iso_now(),
        "message": _text("uploaded"),
    }
    inc("upload_success")
    inc("upload_bytes_total", size)
    log_debug(
        f"File uploaded: originalName={f.filename!r} size={size} "
        f"type={f.mimetype} uploadTime={descriptor['uploadTime']}"
    )
    return jsonify(descriptor)
