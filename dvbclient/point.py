"""Point finder: search stops and places."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .types import Status, _fields, _flag, _strings, _text


@dataclass
class GetPointParams:
    """Parameters for the point finder search."""

    query: str
    format: Optional[str] = None
    stops_only: Optional[bool] = None
    assigned_stops: Optional[bool] = None
    limit: Optional[int] = None
    dvb: Optional[bool] = None

    def to_query(self) -> dict[str, str]:
        """Build the query string parameters, validating the search term."""
        if not self.query:
            raise ValueError("query can not be empty")
        query = {"query": self.query}
        if self.format:
            query["format"] = self.format
        if self.limit is not None and self.limit > 0:
            query["limit"] = str(self.limit)
        if self.stops_only is not None:
            query["stopsOnly"] = _flag(self.stops_only)
        if self.assigned_stops is not None:
            query["assignedStops"] = _flag(self.assigned_stops)
        if self.dvb is not None:
            query["dvb"] = _flag(self.dvb)
        return query


@dataclass
class GetPointResponse:
    """Response of the point finder endpoint."""

    point_status: str = ""
    status: Status = field(default_factory=Status)
    points: list[str] = field(default_factory=list)
    expiration_time: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GetPointResponse":
        data = _fields(data)
        return cls(
            point_status=_text(data, "PointStatus"),
            status=Status.from_dict(data.get("Status")),
            points=_strings(data, "Points"),
            expiration_time=_text(data, "ExpirationTime"),
        )