import os

from services.documents.naming import stored_name

MAX_NAME_ATTEMPTS = 5


class FileSystemStorage:
    """Flat directory of uploaded documents. The directory is created on first write."""

    def __init__(self, root: str):
        self.root = root

    def put(self, name: str, data: bytes) -> str:
        os.makedirs(self.root, exist_ok=True)
        path = os.path.join(self.root, name)
        # "xb" refuses to clobber a file another request already wrote
        with open(path, "xb") as fh:
            fh.write(data)
        return path

    def size(self, path: str) -> int:
        return os.stat(path).st_size


class MemoryStorage:
    def __init__(self):
        self.files = {}

    def put(self, name: str, data: bytes) -> str:
        if name in self.files:
            raise FileExistsError(name)
        self.files[name] = bytes(data)
        return name

    def size(self, path: str) -> int:
        return len(self.files[path])


def store_document(storage, sequence, original_name: str, data: bytes):
    """
    Persist one upload under "<stamp>_<sanitized name>".
    Returns (stamp, file_name, path). A name that already exists gets a fresh
    stamp; after MAX_NAME_ATTEMPTS the FileExistsError propagates.
    """
    for attempt in range(MAX_NAME_ATTEMPTS):
        stamp = sequence.next()
        file_name = stored_name(stamp, original_name)
        try:
            path = storage.put(file_name, data)
        except FileExistsError:
            if attempt == MAX_NAME_ATTEMPTS - 1:
                raise
            continue
        return stamp, file_name, path
