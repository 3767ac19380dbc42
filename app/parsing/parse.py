from __future__ import annotations

import mimetypes
from pathlib import Path

from .file_security import (
    UNREADABLE_FILE_MESSAGE,
    UnreadableUploadError,
    resolve_resume_extension,
    validate_upload_signature,
)
from .models import ParsedDoc


def _decode_txt(content: bytes) -> tuple[str, list[str]]:
    try:
        return content.decode("utf-8-sig"), []
    except UnicodeDecodeError as exc:
        raise UnreadableUploadError(UNREADABLE_FILE_MESSAGE) from exc


def _decode_binary_as_text(content: bytes, ext: str) -> tuple[str, list[str]]:
    text = content.decode("utf-8", errors="replace")
    return text, [f".{ext} content was read as plain text; layout and embedded text are not extracted."]


def parse_upload(*, filename: str, content: bytes, content_type: str | None = None) -> ParsedDoc:
    """Validate an uploaded resume and decode it to plain text.

    Raises InvalidUploadError for unsupported or mismatched files and
    UnreadableUploadError when the payload cannot be decoded.
    """
    ext = resolve_resume_extension(filename, content_type)
    validate_upload_signature(ext=ext, content=content)

    if ext == "txt":
        text, warnings = _decode_txt(content)
    else:
        text, warnings = _decode_binary_as_text(content, ext)

    return ParsedDoc(
        source_type=ext,
        file_name=filename,
        text=text,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    content_type, _ = mimetypes.guess_type(path.name)
    return parse_upload(filename=path.name, content=path.read_bytes(), content_type=content_type)
