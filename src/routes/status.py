from flask import Blueprint, current_app, jsonify
from observability.metrics import snapshot

status_bp = Blueprint("status", __name__)

@status_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})

@status_bp.route("/metrics", methods=["GET"])
def metrics():
    return jsonify(snapshot())

@status_bp.route("/limits", methods=["GET"])
def limits():
    # lets the upload page show the same limits the endpoint enforces
    return jsonify({
        "maxFileSize": current_app.config["MAX_FILE_SIZE"],
        "allowedTypes": list(current_app.config["ALLOWED_TYPES"]),
    })
