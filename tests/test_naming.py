import threading

from services.documents.naming import TimestampSequence, sanitize_filename, stored_name


def test_sanitize_replaces_and_lowercases():
    assert sanitize_filename("My Patent #1.pdf") == "my_patent__1.pdf"
    assert sanitize_filename("Spec-v2_FINAL.DOCX") == "spec-v2_final.docx"


def test_sanitize_neutralizes_path_separators():
    assert sanitize_filename("../../etc/passwd") == ".._.._etc_passwd"
    assert sanitize_filename("C:\\docs\\a.txt") == "c__docs_a.txt"


def test_sanitize_non_ascii():
    assert sanitize_filename("特許.pdf") == "__.pdf"


def test_stored_name():
    assert stored_name(1700000000000, "A B.txt") == "1700000000000_a_b.txt"


def test_sequence_follows_clock():
    ticks = iter([5, 9, 20])
    seq = TimestampSequence(clock=lambda: next(ticks))
    assert [seq.next(), seq.next(), seq.next()] == [5, 9, 20]


def test_sequence_never_repeats_or_goes_back():
    ticks = iter([100, 100, 100, 50, 200])
    seq = TimestampSequence(clock=lambda: next(ticks))
    assert [seq.next() for _ in range(5)] == [100, 101, 102, 103, 200]


def test_sequence_is_unique_across_threads():
    seq = TimestampSequence(clock=lambda: 1)
    seen = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = seq.next()
            with lock:
                seen.append(value)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == len(set(seen)) == 800
