"""Dataclass <-> YAML serialization."""
from __future__ import annotations

import dataclasses
import types
import typing
import uuid
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from inspire_core.core.utils.io import dump_yaml_string, parse_yaml_string, read_text, write_text

from .resources import get_resource_string

T = TypeVar("T")


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return _to_plain(value.value)
    if isinstance(value, (uuid.UUID, Decimal, Path)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(v) for v in value]
    return value


def serialize(value: Any, path: Optional[Union[str, Path]] = None) -> str:
    """Render ``value`` as YAML; when ``path`` is given, also write it there atomically.

    Raises:
        ValueError: If ``path`` is given but blank
    """
    if path is not None and not str(path).strip():
        raise ValueError(get_resource_string("InvalidFileArgumentErrorText"))
    text = dump_yaml_string(_to_plain(value))
    if path is not None:
        write_text(path, text)
    return text


def _from_plain(value: Any, hint: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is Union or origin is types.UnionType:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _from_plain(value, arg)
            except (TypeError, ValueError):
                continue
        return value
    if origin in (list, tuple, set, frozenset):
        item_hint = args[0] if args else Any
        items = [_from_plain(v, item_hint) for v in value]
        return origin(items) if origin is not list else items
    if origin is dict:
        value_hint = args[1] if len(args) == 2 else Any
        return {k: _from_plain(v, value_hint) for k, v in value.items()}

    if isinstance(hint, type):
        if dataclasses.is_dataclass(hint):
            return _build(value, hint)
        if issubclass(hint, Enum):
            return hint(value)
        if hint is uuid.UUID:
            return uuid.UUID(str(value))
        if hint is Decimal:
            return Decimal(str(value))
        if hint is Path:
            return Path(value)
        if hint is datetime and isinstance(value, str):
            return datetime.fromisoformat(value)
        if hint is date and isinstance(value, str):
            return date.fromisoformat(value)
    return value


def _build(data: Any, cls: Type[T]) -> T:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")
    hints = typing.get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.init and f.name in data:
            kwargs[f.name] = _from_plain(data[f.name], hints.get(f.name, Any))
    return cls(**kwargs)


def deserialize(text: Optional[str], cls: Type[T]) -> Optional[T]:
    """Build ``cls`` from YAML ``text``; blank text gives None."""
    if not text or not text.strip():
        return None
    data = parse_yaml_string(text)
    if data is None:
        return None
    if dataclasses.is_dataclass(cls):
        return _build(data, cls)
    return _from_plain(data, cls)


def deserialize_file(path: Union[str, Path], cls: Type[T]) -> Optional[T]:
    """Raises:
        ValueError: If ``path`` is None
        FileNotFoundError: If the file does not exist
    """
    if path is None:
        raise ValueError(get_resource_string("InvalidFileArgumentErrorText"))
    target = Path(path)
    if not target.is_file():
        raise FileNotFoundError(f"{get_resource_string('DeserializeFileNotFoundErrorText')} {target}")
    return deserialize(read_text(target), cls)


__all__ = ["deserialize", "deserialize_file", "serialize"]
