from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile, ZipFile

ALLOWED_EXTENSIONS = ("txt", "pdf", "docx")

RESUME_CONTENT_TYPE_EXTENSION_HINTS = {
    "text/plain": "txt",
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}

INVALID_FILE_MESSAGE = "Please upload a valid resume file (.txt, .pdf, or .docx)"
UNREADABLE_FILE_MESSAGE = "Error reading file. Please try again."

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


class InvalidUploadError(ValueError):
    """The artifact is not a supported resume file."""


class UnreadableUploadError(ValueError):
    """The artifact has a supported type but its content cannot be read as text."""


def extension_from_filename(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].strip().lower()[:20]


def extension_from_content_type(content_type: str | None) -> str:
    sanitized = (content_type or "").split(";")[0].strip().lower()
    return RESUME_CONTENT_TYPE_EXTENSION_HINTS.get(sanitized, "")


def resolve_resume_extension(filename: str, content_type: str | None = None) -> str:
    """Accept a file when either its name or its declared type is supported."""
    ext = extension_from_filename(filename)
    if ext in ALLOWED_EXTENSIONS:
        return ext
    hinted = extension_from_content_type(content_type)
    if hinted:
        return hinted
    raise InvalidUploadError(INVALID_FILE_MESSAGE)


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except (BadZipFile, OSError):
        return False
    return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)


def _is_probably_text_payload(content: bytes) -> bool:
    sample = content[:4096]
    if b"\x00" in sample:
        return False
    # Bytes >= 0x80 belong to multi-byte UTF-8 sequences and count as text.
    printable = sum(1 for byte in sample if byte in (9, 10, 13) or byte >= 32)
    return (printable / len(sample)) >= 0.75


def validate_upload_signature(*, ext: str, content: bytes) -> None:
    if ext == "pdf":
        if not content.startswith(PDF_MAGIC):
            raise InvalidUploadError("File signature does not match .pdf content.")
        return

    if ext == "docx":
        if not _is_zip_payload(content) or not _zip_has_paths(content, ("word/",)):
            raise InvalidUploadError("File signature does not match .docx content.")
        return

    if ext == "txt":
        # An empty text file decodes to "" and is still analyzed.
        if content and not _is_probably_text_payload(content):
            raise InvalidUploadError("File signature does not match .txt text content.")
        return

    raise InvalidUploadError(INVALID_FILE_MESSAGE)
