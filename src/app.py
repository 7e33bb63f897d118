from flask import Flask, send_from_directory, jsonify
import os
from werkzeug.exceptions import RequestEntityTooLarge

from config import load_config
from messages import message
from observability.debug_log import log_debug
from observability.metrics import inc
from observability.request_context import start_request, end_request
from routes.document_upload import upload_bp
from routes.status import status_bp
from services.documents.naming import TimestampSequence
from services.documents.storage import FileSystemStorage

def create_app(config=None, storage=None):
    # static_folder set relative to src file location -> "../frontend" points to project_root/frontend
    app = Flask(__name__, static_folder=os.path.join(os.path.dirname(__file__), "..", "frontend"), static_url_path="/")
    app.config.update(load_config(config))

    app.extensions["document_storage"] = storage or FileSystemStorage(app.config["UPLOAD_DIR"])
    app.extensions["document_sequence"] = TimestampSequence()

    app.register_blueprint(status_bp, url_prefix="/api")
    app.register_blueprint(upload_bp, url_prefix="/api")

    @app.route("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(e):
        # body over MAX_CONTENT_LENGTH: same answer as an oversized file part
        inc("upload_rejections")
        log_debug(f"Rejected request body over {app.config['MAX_CONTENT_LENGTH']} bytes")
        return jsonify({"error": message("too_large", app.config["LANGUAGE"])}), 400

    @app.before_request
    def _before():
        start_request()

    @app.after_request
    def _after(response):
        return end_request(response)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8080)))
