import pytest

from dvbclient.point import GetPointParams, GetPointResponse
from dvbclient.types import Status


def test_query_only():
    assert GetPointParams(query="Hauptbahnhof").to_query() == {"query": "Hauptbahnhof"}


def test_all_options():
    params = GetPointParams(
        query="Hauptbahnhof",
        format="json",
        stops_only=True,
        assigned_stops=False,
        limit=5,
        dvb=True,
    )
    assert params.to_query() == {
        "query": "Hauptbahnhof",
        "format": "json",
        "limit": "5",
        "stopsOnly": "true",
        "assignedStops": "false",
        "dvb": "true",
    }


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_is_left_out(limit):
    query = GetPointParams(query="Neustadt", limit=limit).to_query()
    assert "limit" not in query


def test_flags_differ_by_value():
    on = GetPointParams(query="x", dvb=True).to_query()["dvb"]
    off = GetPointParams(query="x", dvb=False).to_query()["dvb"]
    assert on != off
    assert {on, off} == {
        GetPointParams(query="x", stops_only=True).to_query()["stopsOnly"],
        GetPointParams(query="x", stops_only=False).to_query()["stopsOnly"],
    }


def test_empty_query_raises():
    with pytest.raises(ValueError, match="query can not be empty"):
        GetPointParams(query="").to_query()


def test_response_from_dict():
    data = {
        "PointStatus": "List",
        "Status": {"Code": "Ok"},
        "Points": ["33000028|||Hauptbahnhof", "33000037|||Postplatz"],
        "ExpirationTime": "/Date(1700000000000+0100)/",
    }
    response = GetPointResponse.from_dict(data)
    assert response.point_status == "List"
    assert response.status == Status(code="Ok")
    assert response.points == data["Points"]
    assert response.expiration_time == data["ExpirationTime"]


def test_response_empty_is_default():
    assert GetPointResponse.from_dict({}) == GetPointResponse()