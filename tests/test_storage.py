import pytest

from services.documents.naming import TimestampSequence
from services.documents.storage import (
    MAX_NAME_ATTEMPTS,
    FileSystemStorage,
    MemoryStorage,
    store_document,
)


def test_filesystem_creates_directory_on_first_put(tmp_path):
    root = tmp_path / "uploads"
    storage = FileSystemStorage(str(root))
    assert not root.exists()

    path = storage.put("1_a.txt", b"hello")

    assert path == str(root / "1_a.txt")
    assert storage.size(path) == 5


def test_filesystem_refuses_to_overwrite(tmp_path):
    storage = FileSystemStorage(str(tmp_path))
    storage.put("1_a.txt", b"first")
    with pytest.raises(FileExistsError):
        storage.put("1_a.txt", b"second")
    assert (tmp_path / "1_a.txt").read_bytes() == b"first"


def test_store_document_retries_on_collision():
    storage = MemoryStorage()
    storage.put("1000_a.pdf", b"old")
    seq = TimestampSequence(clock=lambda: 1000)

    stamp, file_name, path = store_document(storage, seq, "A.pdf", b"new")

    assert (stamp, file_name) == (1001, "1001_a.pdf")
    assert storage.files["1000_a.pdf"] == b"old"
    assert storage.size(path) == 3


class AlwaysTaken:
    def __init__(self):
        self.attempts = 0

    def put(self, name, data):
        self.attempts += 1
        raise FileExistsError(name)


def test_store_document_gives_up_after_bounded_attempts():
    storage = AlwaysTaken()
    with pytest.raises(FileExistsError):
        store_document(storage, TimestampSequence(), "a.pdf", b"x")
    assert storage.attempts == MAX_NAME_ATTEMPTS
