"""String helpers for content handling."""
from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime, timezone
from typing import BinaryIO, Dict, Iterator, Mapping, Optional

AMPERSAND_PLACEHOLDER = "~VsntAmp~"
DEFAULT_ENCODING = "utf-8"

_BASE64_PATTERN = re.compile(r"^[a-zA-Z0-9+/]*={0,3}$")
_EMAIL_PATTERN = re.compile(
    r"\A(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)\Z",
    re.IGNORECASE,
)
_INLINE_MARKER_ATTRIBUTE = ' TGID="'


def to_bytes(content: Optional[str], encoding: str = DEFAULT_ENCODING) -> bytes:
    return (content or "").encode(encoding)


def bytes_to_string(data: Optional[bytes], encoding: str = DEFAULT_ENCODING) -> str:
    return data.decode(encoding) if data is not None else ""


def write_string(stream: BinaryIO, content: Optional[str], encoding: str = DEFAULT_ENCODING) -> None:
    """Encode ``content`` and write it to a binary stream."""
    if stream is None:
        raise ValueError("stream must not be None")
    stream.write(to_bytes(content, encoding))


def read_string(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the rest of a binary stream as text."""
    if stream is None:
        raise ValueError("stream must not be None")
    return bytes_to_string(stream.read(), encoding)


def is_base64_string(content: Optional[str]) -> bool:
    if content is None:
        return False
    content = content.strip()
    return len(content) % 4 == 0 and _BASE64_PATTERN.match(content) is not None


def base64_encode(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


def base64_decode(content: str) -> bytes:
    """Decode base64 text; anything else is returned as its UTF-8 bytes."""
    if is_base64_string(content):
        try:
            return base64.b64decode(content.strip(), validate=True)
        except binascii.Error:
            pass
    return content.encode("utf-8")


def strip_orphaned_inline_tags(text: Optional[str]) -> str:
    """Remove every ``<... TGID="...">`` inline marker from ``text``."""
    result = text or ""
    attr_idx = result.find(_INLINE_MARKER_ATTRIBUTE)
    while attr_idx != -1:
        start = result.rfind("<", 0, attr_idx)
        if start == -1:
            break
        end = result.find(">", attr_idx)
        if end == -1:
            break
        result = result[:start] + result[end + 1:]
        attr_idx = result.find(_INLINE_MARKER_ATTRIBUTE)
    return result


def chop(text: Optional[str], max_length: int) -> Iterator[str]:
    """Yield consecutive chunks of at most ``max_length`` characters.

    Raises:
        ValueError: If ``max_length`` is not positive
    """
    if max_length <= 0:
        raise ValueError("max_length must be greater than zero")
    return _chop(text or "", max_length)


def _chop(text: str, max_length: int) -> Iterator[str]:
    for start in range(0, len(text), max_length):
        yield text[start:start + max_length]


def matches(text: str, pattern: str) -> bool:
    """Whether ``pattern`` matches anywhere in ``text``."""
    return re.search(pattern, text) is not None


def is_email(address: Optional[str]) -> bool:
    return bool(address) and _EMAIL_PATTERN.match(address) is not None


def encode_ampersands(text: str) -> str:
    if text is None:
        raise ValueError("text must not be None")
    return text.replace("&", AMPERSAND_PLACEHOLDER)


def decode_ampersands(text: str) -> str:
    if text is None:
        raise ValueError("text must not be None")
    return text.replace(AMPERSAND_PLACEHOLDER, "&")


def replace_tokens(content: Optional[str], values: Optional[Mapping[str, str]]) -> Optional[str]:
    """Replace ``$KEY$`` tokens in ``content``.

    ``DATETIME``, ``DATE`` and ``TIME`` (UTC) are supplied unless ``values``
    already carries them. ``values`` itself is left untouched.
    """
    if content is None or values is None:
        return content

    now = datetime.now(timezone.utc)
    tokens: Dict[str, str] = dict(values)
    tokens.setdefault("DATETIME", now.strftime("%m/%d/%Y %H:%M:%S"))
    tokens.setdefault("DATE", now.strftime("%m/%d/%Y"))
    tokens.setdefault("TIME", now.strftime("%H:%M"))

    result = content
    for key, value in tokens.items():
        result = result.replace(f"${key.upper()}$", str(value))
    return result


def before(source: str, char: str) -> str:
    """Text before the first ``char``; all of ``source`` when it is absent."""
    if source is None:
        raise ValueError("source must not be None")
    idx = source.find(char)
    if idx == -1:
        return source
    return source[:idx]


def after(source: str, char: str) -> str:
    """Text after the first ``char``.

    ``source`` is returned unchanged when ``char`` is absent or is the last
    character.
    """
    if source is None:
        raise ValueError("source must not be None")
    idx = source.find(char) + 1
    if 0 < idx < len(source):
        return source[idx:]
    return source


def empty_to_none(source: Optional[str]) -> Optional[str]:
    return None if source is None or not source.strip() else source


__all__ = [
    "AMPERSAND_PLACEHOLDER",
    "after",
    "base64_decode",
    "base64_encode",
    "before",
    "bytes_to_string",
    "chop",
    "decode_ampersands",
    "empty_to_none",
    "encode_ampersands",
    "is_base64_string",
    "is_email",
    "matches",
    "read_string",
    "replace_tokens",
    "strip_orphaned_inline_tags",
    "to_bytes",
    "write_string",
]
