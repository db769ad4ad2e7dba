import pytest
import requests

from toolshub.client import ApiClientError, ToolsHubClient


class FlaskResponse:
    """Wraps a Flask test response in the parts of the requests API the client uses."""

    def __init__(self, response):
        self.status_code = response.status_code
        self.headers = response.headers
        self._response = response

    def json(self):
        return self._response.get_json(force=True)


class FlaskSession:
    """Routes requests.Session calls into a Flask test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append((method, url, json, headers, timeout))
        path = url.replace("http://testserver", "", 1)
        return FlaskResponse(self.client.open(path, method=method, json=json, headers=headers))


class FakeResponse:

    def __init__(self, status_code=200, body=None, content_type="application/json", text=None):
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self._body = body
        self._text = text

    def json(self):
        if self._text is not None:
            raise ValueError("not json")
        return self._body


class FakeSession:

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error

    def request(self, method, url, **kwargs):
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def session(client):
    return FlaskSession(client)


@pytest.fixture
def api(session):
    return ToolsHubClient(base_url="http://testserver/api/", session=session)


def test_resolve_url():
    api = ToolsHubClient(base_url="https://api.example.com/api/", session=FakeSession())

    assert api.resolve_url("/tools") == "https://api.example.com/api/tools"
    assert api.resolve_url("tools/x") == "https://api.example.com/api/tools/x"
    assert api.resolve_url("https://other.example.com/x") == "https://other.example.com/x"


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("TOOLSHUB_API_BASE_URL", "https://env.example.com/api")

    assert ToolsHubClient(session=FakeSession()).base_url == "https://env.example.com/api"


def test_base_url_fallback(monkeypatch):
    monkeypatch.delenv("TOOLSHUB_API_BASE_URL", raising=False)

    assert ToolsHubClient(session=FakeSession()).base_url == "http://localhost:5000/api"


def test_requests_carry_timeout(api, session):
    api.get_all_tools()

    assert session.calls[0][4] == 10


def test_reads_against_live_app(api, client, category_payload, tool_payload):
    client.post("/api/categories/add", json=category_payload)
    client.post("/api/tools/add", json=tool_payload)

    assert [t["slug"] for t in api.get_all_tools()] == ["pdf-to-word-converter"]
    assert api.get_tool("pdf-to-word-converter")["name"] == "PDF to Word Converter"
    assert [c["slug"] for c in api.get_all_categories()] == ["pdf-tools"]
    assert len(api.get_tools_by_category("pdf-tools")) == 1
    assert api.get_comments_for_tool("pdf-to-word-converter") == []
    assert api.get_all_comments() == []


def test_missing_resources_read_as_empty(api):
    assert api.get_tool("missing") is None
    assert api.get_tools_by_category("missing") == []
    assert api.get_comments_for_tool("missing") == []


def test_writes_against_live_app(api, category_payload, tool_payload):
    category = api.add_category(category_payload)
    tool = api.add_tool(dict(tool_payload, image=None))
    comment = api.add_comment(tool["slug"], "Ana", "Great")

    assert category["slug"] == "pdf-tools"
    assert tool["image"] == "https://picsum.photos/seed/pdf-to-word-converter/600/400"
    assert comment["toolSlug"] == "pdf-to-word-converter"
    assert [c["name"] for c in api.get_all_comments()] == ["Ana"]


def test_write_failure_raises_with_server_message(api, category_payload):
    api.add_category(category_payload)

    with pytest.raises(ApiClientError) as exc_info:
        api.add_category(category_payload)

    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Category with slug 'pdf-tools' already exists."


def test_featured_and_related_computed_from_listing(api, make_tool):
    make_tool(name="Best", rating=5)
    make_tool(name="Good", rating=4)
    make_tool(name="Other", rating=3, categorySlug="image-tools")

    assert [t["slug"] for t in api.get_featured_tools()] == ["best", "good", "other"]

    current = api.get_tool("best")
    assert [t["slug"] for t in api.get_related_tools(current)] == ["good", "other"]


def test_login_stores_token(api, session):
    token = api.login("admin", "s3cret-pass")

    assert api.token == token
    api.get_all_tools()
    assert session.calls[-1][3]["Authorization"] == f"Bearer {token}"


def test_login_failure_raises(api):
    with pytest.raises(ApiClientError) as exc_info:
        api.login("admin", "wrong")

    assert exc_info.value.status_code == 401
    assert api.token is None


@pytest.mark.parametrize("fake_session", [
    FakeSession(error=requests.exceptions.ConnectionError("refused")),
    FakeSession(error=requests.exceptions.Timeout()),
    FakeSession(FakeResponse(200, content_type="text/html")),
    FakeSession(FakeResponse(200, text="<html>")),
    FakeSession(FakeResponse(200, body=["not", "an", "envelope"])),
    FakeSession(FakeResponse(200, body={"success": False, "data": None, "error": "boom"})),
    FakeSession(FakeResponse(500, body={"success": False, "data": None, "error": "boom"})),
])
def test_reads_degrade_to_defaults(fake_session):
    api = ToolsHubClient(base_url="https://api.example.com/api", session=fake_session)

    assert api.get_all_tools() == []
    assert api.get_tool("anything") is None
    assert api.get_featured_tools() == []
    assert api.get_related_tools(api.get_tool("anything")) == []


def test_write_transport_error_raises():
    api = ToolsHubClient(
        base_url="https://api.example.com/api",
        session=FakeSession(error=requests.exceptions.ConnectionError("refused")),
    )

    with pytest.raises(ApiClientError, match="failed"):
        api.add_comment("tool", "Ana", "Hi")


def test_write_non_json_response_raises():
    api = ToolsHubClient(
        base_url="https://api.example.com/api",
        session=FakeSession(FakeResponse(502, content_type="text/html")),
    )

    with pytest.raises(ApiClientError) as exc_info:
        api.add_tool({"name": "x"})

    assert exc_info.value.status_code == 502


def test_related_for_missing_tool_is_empty(api, make_tool):
    make_tool(name="Only Tool")

    assert api.get_related_tools(api.get_tool("missing")) == []
    assert api.get_related_tools(None) == []
