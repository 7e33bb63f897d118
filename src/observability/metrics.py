import threading

_LOCK = threading.Lock()

METRICS = {
    "upload_requests": 0,
    "upload_success": 0,
    "upload_rejections": 0,
    "upload_failures": 0,
    "upload_bytes_total": 0,
}

def inc(key, value=1):
    with _LOCK:
        METRICS[key] = METRICS.get(key, 0) + value

def snapshot():
    with _LOCK:
        return dict(METRICS)

def reset():
    with _LOCK:
        for key in METRICS:
            METRICS[key] = 0
