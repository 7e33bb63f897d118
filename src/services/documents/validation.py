import os

PDF = "application/pdf"
TEXT = "text/plain"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SIGNATURES = {
    PDF: (b"%PDF-",),
    DOC: (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1",),
    DOCX: (b"PK\x03\x04",),
}

SNIFF_BYTES = 512


def declared_size(f) -> int:
    """Size of a received multipart part, measured on its spooled stream."""
    stream = f.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def check_upload(f, max_size, allowed_types):
    """
    Returns the message key of the first failed check, or None.
    Order: presence, size, type.
    """
    if not f:
        return "no_file"
    if declared_size(f) > max_size:
        return "too_large"
    if f.mimetype not in allowed_types:
        return "unsupported_type"
    return None


def sniff_matches(mimetype: str, head: bytes) -> bool:
    if mimetype == TEXT:
        if b"\x00" in head:
            return False
        try:
            head.decode("utf-8")
        except UnicodeDecodeError as e:
            # a multibyte char cut off at the end of the sample is still text
            return e.start >= len(head) - 3 and e.reason == "unexpected end of data"
        return True
    signatures = SIGNATURES.get(mimetype)
    if signatures is None:
        return False
    return head.startswith(signatures)
