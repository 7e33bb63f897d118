import uuid
import time
from flask import g, request

REQUEST_ID_HEADER = "X-Request-ID"

def start_request():
    # reuse the caller's id when a proxy already assigned one
    g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    g.start_time = time.time()

def end_request(response):
    response.headers[REQUEST_ID_HEADER] = g.request_id
    access = {
        "request_id": g.request_id,
        "method": request.method,
        "path": request.path,
        "status": response.status_code,
        "duration_ms": int((time.time() - g.start_time) * 1000),
        "request_bytes": request.content_length,
        "response_bytes": response.content_length,
    }
    print(f"[REQUEST] {access}")
    return response
