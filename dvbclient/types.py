"""Value types shared by several API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _fields(data: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return data if data is not None else {}


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _number(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return 0 if value is None else int(value)


def _strings(data: Mapping[str, Any], key: str) -> list[str]:
    return [str(item) for item in data.get(key) or []]


def _optional_text(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)


def _flag(value: bool) -> str:
    """Format a boolean the way the API expects it in a query string."""
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {type(value).__name__}")
    return str(value).lower()


@dataclass
class Status:
    """Status block that accompanies every API response."""

    code: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Status":
        data = _fields(data)
        return cls(code=_text(data, "Code"), message=_text(data, "Message"))


@dataclass
class Diva:
    """DIVA identifiers of a line within a transport network."""

    number: str = ""
    network: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Diva":
        data = _fields(data)
        return cls(number=_text(data, "Number"), network=_text(data, "Network"))


@dataclass
class Platform:
    """A platform or stop position where passengers board."""

    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Platform":
        data = _fields(data)
        return cls(name=_text(data, "Name"), type=_text(data, "Type"))