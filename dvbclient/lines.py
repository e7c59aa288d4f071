"""Lines serving a stop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .types import Diva, Status, _fields, _strings, _text


@dataclass
class GetLinesParams:
    """Parameters for looking up the lines that serve a stop."""

    stop_id: str
    format: Optional[str] = None

    def to_query(self) -> dict[str, str]:
        """Build the query string parameters, validating the stop id."""
        if not self.stop_id:
            raise ValueError("stopid can not be empty")
        query = {"stopid": self.stop_id}
        if self.format:
            query["format"] = self.format
        return query


@dataclass
class TimeTable:
    """One timetable variant of a line direction."""

    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TimeTable":
        data = _fields(data)
        return cls(id=_text(data, "Id"), name=_text(data, "Name"))


@dataclass
class Direction:
    """A destination a line travels towards from the stop."""

    name: str = ""
    time_tables: list[TimeTable] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Direction":
        data = _fields(data)
        return cls(
            name=_text(data, "Name"),
            time_tables=[TimeTable.from_dict(item) for item in data.get("TimeTables") or []],
        )


@dataclass
class Line:
    """A public transport line serving a stop."""

    name: str = ""
    mot: str = ""
    changes: list[str] = field(default_factory=list)
    directions: list[Direction] = field(default_factory=list)
    diva: Diva = field(default_factory=Diva)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Line":
        data = _fields(data)
        return cls(
            name=_text(data, "Name"),
            mot=_text(data, "Mot"),
            changes=_strings(data, "Changes"),
            directions=[Direction.from_dict(item) for item in data.get("Directions") or []],
            diva=Diva.from_dict(data.get("Diva")),
        )


@dataclass
class GetLinesResponse:
    """Response of the lines endpoint."""

    lines: list[Line] = field(default_factory=list)
    status: Status = field(default_factory=Status)
    expiration_time: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GetLinesResponse":
        data = _fields(data)
        return cls(
            lines=[Line.from_dict(item) for item in data.get("Lines") or []],
            status=Status.from_dict(data.get("Status")),
            expiration_time=_text(data, "ExpirationTime"),
        )