import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from dvbclient.client import Client
from dvbclient.errors import ApiError, DvbError
from dvbclient.lines import GetLinesParams
from dvbclient.monitor import MonitorStopParams
from dvbclient.point import GetPointParams
from dvbclient.route import GetRouteParams

BASE = "https://webapi.vvo-online.de"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def client():
    with Client() as c:
        yield c


def _sent(rsps):
    url = urlsplit(rsps.calls[0].request.url)
    return url.path, {k: v[0] for k, v in parse_qs(url.query).items()}


def test_defaults():
    c = Client()
    assert c.base_url == BASE
    assert c.timeout == 30
    c.close()


def test_custom_settings():
    c = Client(base_url="http://localhost:8080", user_agent="agent/2", timeout=5)
    assert (c.base_url, c.user_agent, c.timeout) == ("http://localhost:8080", "agent/2", 5)
    c.close()


def test_get_lines(rsps, client):
    rsps.add(
        responses.GET,
        BASE + "/stt/lines",
        json={"Lines": [{"Name": "3", "Mot": "Tram"}], "Status": {"Code": "Ok"}},
    )
    result = client.get_lines(GetLinesParams(stop_id="33000028"))
    assert [line.name for line in result.lines] == ["3"]
    assert result.status.code == "Ok"
    assert _sent(rsps) == ("/stt/lines", {"stopid": "33000028"})


def test_user_agent_header(rsps):
    rsps.add(responses.GET, BASE + "/dm", json={"Name": "Hub"})
    with Client(user_agent="agent/2") as c:
        result = c.monitor_stop(MonitorStopParams(stop_id="1"))
    assert result.name == "Hub"
    assert rsps.calls[0].request.headers["User-Agent"] == "agent/2"


def test_monitor_stop(rsps, client):
    rsps.add(
        responses.GET,
        BASE + "/dm",
        json={"Name": "Hauptbahnhof", "Departures": [{"LineName": "7"}]},
    )
    result = client.monitor_stop(MonitorStopParams(stop_id="33000028", limit=10, is_arrival=False))
    assert result.name == "Hauptbahnhof"
    assert result.departures[0].line_name == "7"
    path, query = _sent(rsps)
    assert path == "/dm"
    assert query == {"stopid": "33000028", "limit": "10", "isarrival": "false"}


def test_get_point(rsps, client):
    rsps.add(responses.GET, BASE + "/tr/pointfinder", json={"Points": ["a|b", "c|d"]})
    result = client.get_point(GetPointParams(query="Dresden Hauptbahnhof", limit=1))
    assert result.points == ["a|b", "c|d"]
    path, query = _sent(rsps)
    assert path == "/tr/pointfinder"
    assert query == {"query": "Dresden Hauptbahnhof", "limit": "1"}


def test_get_route(rsps, client):
    rsps.add(
        responses.GET,
        BASE + "/tr/trips",
        json={"SessionId": "s1", "Routes": [{"RouteId": 4, "Duration": 12}]},
    )
    result = client.get_route(GetRouteParams(origin="33000742", destination="33000037"))
    assert result.session_id == "s1"
    assert result.routes[0].route_id == 4
    assert result.routes[0].duration == 12
    path, query = _sent(rsps)
    assert path == "/tr/trips"
    assert query == {"origin": "33000742", "destination": "33000037"}


def test_no_params_sends_empty_query(rsps, client):
    rsps.add(responses.GET, BASE + "/dm", json={"Name": "Somewhere"})
    result = client.monitor_stop()
    assert result.name == "Somewhere"
    assert result.departures == []
    assert urlsplit(rsps.calls[0].request.url).query == ""


def test_validation_happens_before_request(rsps, client):
    with pytest.raises(ValueError, match="origin can not be empty"):
        client.get_route(GetRouteParams(origin="", destination="x"))
    assert len(rsps.calls) == 0


def test_api_error_with_json_message(rsps, client):
    rsps.add(responses.GET, BASE + "/dm", json={"message": "not found"}, status=404)
    with pytest.raises(ApiError) as info:
        client.monitor_stop(MonitorStopParams(stop_id="1"))
    assert info.value.status_code == 404
    assert info.value.message == "not found"
    assert str(info.value) == "API error 404: not found"


def test_api_error_with_plain_body(rsps, client):
    rsps.add(responses.GET, BASE + "/dm", body="oops", status=500)
    with pytest.raises(ApiError) as info:
        client.monitor_stop(MonitorStopParams(stop_id="1"))
    assert info.value.status_code == 500
    assert info.value.message == "HTTP 500: oops"


def test_api_error_is_dvb_error(rsps, client):
    rsps.add(responses.GET, BASE + "/tr/trips", body="", status=503)
    with pytest.raises(DvbError):
        client.get_route(GetRouteParams(origin="a", destination="b"))


def test_empty_body_gives_defaults(rsps, client):
    rsps.add(responses.GET, BASE + "/tr/pointfinder", body="")
    result = client.get_point(GetPointParams(query="x"))
    assert result.points == []
    assert result.point_status == ""


def test_invalid_json_raises(rsps, client):
    rsps.add(responses.GET, BASE + "/stt/lines", body="{not json")
    with pytest.raises(DvbError, match="failed to unmarshal response"):
        client.get_lines(GetLinesParams(stop_id="1"))


def test_connection_failure(rsps, client):
    rsps.add(responses.GET, BASE + "/dm", body=requests.ConnectionError("boom"))
    with pytest.raises(DvbError, match="request failed"):
        client.monitor_stop(MonitorStopParams(stop_id="1"))


def test_request_with_body_and_headers(rsps, client):
    rsps.add(responses.POST, BASE + "/echo", json={})
    response = client.request("POST", "/echo", None, {"a": 1}, {"X-Extra": "yes"})
    assert response.status_code == 200
    sent = rsps.calls[0].request
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["X-Extra"] == "yes"
    assert json.loads(sent.body) == {"a": 1}


def test_request_without_body_has_no_content_type(rsps, client):
    rsps.add(responses.GET, BASE + "/dm", json={"Name": "Y"})
    response = client.request("GET", "/dm", {"stopid": "1"})
    assert response.status_code == 200
    assert response.json() == {"Name": "Y"}
    assert "Content-Type" not in rsps.calls[0].request.headers


def test_base_url_path_is_replaced(rsps):
    rsps.add(responses.GET, "http://localhost:8080/dm", json={"Name": "X"})
    with Client(base_url="http://localhost:8080/ignored") as c:
        result = c.monitor_stop(MonitorStopParams(stop_id="1"))
    assert result.name == "X"
    assert urlsplit(rsps.calls[0].request.url).path == "/dm"


class _TrackingSession(requests.Session):
    def __init__(self):
        super().__init__()
        self.closed = False

    def close(self):
        self.closed = True
        super().close()


def test_provided_session_is_not_closed():
    session = _TrackingSession()
    with Client(session=session) as c:
        assert c.session is session
    assert session.closed is False


def test_owned_session_is_closed():
    c = Client()
    session = _TrackingSession()
    c.session = session
    with c:
        pass
    assert session.closed is True