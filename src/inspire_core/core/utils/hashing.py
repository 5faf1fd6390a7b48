"""SHA-2 digests for text, bytes and files."""
from __future__ import annotations

import hashlib
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

_CHUNK_SIZE = 64 * 1024


class HashMethod(str, Enum):
    SHA256 = "sha256"
    SHA512 = "sha512"

    def new(self) -> "hashlib._Hash":
        return hashlib.new(self.value)


def to_hash(
    data: Union[str, bytes],
    method: HashMethod = HashMethod.SHA256,
    maximum_length: int = 0,
) -> bytes:
    """Digest ``data``; ``str`` input is UTF-8 encoded.

    A positive ``maximum_length`` truncates the digest to that many bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    hasher = HashMethod(method).new()
    hasher.update(data)
    digest = hasher.digest()
    return digest[:maximum_length] if maximum_length > 0 else digest


def to_hex_string(data: Iterable[int]) -> str:
    return "".join(f"{b:02x}" for b in data)


def to_hash_string(
    data: Union[str, bytes],
    method: HashMethod = HashMethod.SHA256,
    maximum_length: int = 0,
) -> str:
    return to_hex_string(to_hash(data, method, maximum_length))


def to_xml_hash_string(
    text: str,
    method: HashMethod = HashMethod.SHA256,
    maximum_length: int = 0,
) -> str:
    """Hash of the UTF-16-LE encoding of ``text``."""
    return to_hash_string(text.encode("utf-16-le"), method, maximum_length)


def file_hash_string(path: Optional[Union[str, Path]], method: HashMethod = HashMethod.SHA256) -> str:
    """Hex digest of a file's contents, read in chunks."""
    if path is None:
        raise ValueError("path must not be None")
    hasher = HashMethod(method).new()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


__all__ = [
    "HashMethod",
    "file_hash_string",
    "to_hash",
    "to_hash_string",
    "to_hex_string",
    "to_xml_hash_string",
]
