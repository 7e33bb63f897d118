import math
import mimetypes
import os

import requests

from messages import DEFAULT_LANGUAGE, message

DEFAULT_ENDPOINT = "http://localhost:8080/api/upload"

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_size(num_bytes: int) -> str:
    """1536 -> "1.5 KB". Zero is special-cased since log(0) is undefined."""
    if num_bytes == 0:
        return "0 Bytes"
    i = min(int(math.floor(math.log(num_bytes, 1024))), len(SIZE_UNITS) - 1)
    # guard against log() rounding just below an exact power of 1024
    if i + 1 < len(SIZE_UNITS) and num_bytes >= 1024 ** (i + 1):
        i += 1
    value = f"{num_bytes / 1024 ** i:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[i]}"


class SelectedFile:
    """A local file picked for upload: name, declared type and size like a browser File."""

    def __init__(self, path, mimetype=None):
        self.path = path
        self.name = os.path.basename(path)
        self.type = mimetype or mimetypes.guess_type(self.name)[0] or ""
        self.size = os.path.getsize(path)


class UploadForm:
    """
    Holds one selected file and posts it to the upload endpoint.

    State after submit():
      result    descriptor dict from a 2xx response, selection cleared
      error     user-facing message from a failed attempt, selection kept
      uploading always False once submit() returns
    """

    def __init__(self, endpoint=DEFAULT_ENDPOINT, language=DEFAULT_LANGUAGE, timeout=None):
        self.endpoint = endpoint
        self.language = language
        self.timeout = timeout
        self.file = None
        self.uploading = False
        self.result = None
        self.error = None

    def select_file(self, file):
        if isinstance(file, (str, os.PathLike)):
            file = SelectedFile(os.fspath(file))
        self.file = file
        self.error = None
        self.result = None

    def clear_file(self):
        self.file = None

    @property
    def can_submit(self):
        return self.file is not None and not self.uploading

    def submit(self):
        if self.file is None:
            self.error = message("select_file", self.language)
            return None

        self.uploading = True
        self.error = None
        try:
            with open(self.file.path, "rb") as fh:
                files = {"file": (self.file.name, fh, self.file.type or "application/octet-stream")}
                response = requests.post(self.endpoint, files=files, timeout=self.timeout)

            try:
                body = response.json()
            except ValueError:
                body = {}

            if 200 <= response.status_code < 300:
                self.result = body
                self.clear_file()
            else:
                error = body.get("error") if isinstance(body, dict) else None
                self.error = error or message("upload_failed", self.language)
        except requests.RequestException:
            self.error = message("network_error", self.language)
        except OSError:
            # selected file vanished or became unreadable after selection
            self.error = message("file_read_error", self.language)
        finally:
            self.uploading = False
        return self.result
