import pytest
from fastapi.testclient import TestClient

from kumitate.server import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.mark.ci
def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.ci
def test_expand(client):
    response = client.get(
        "/expand",
        params={"shorthand": "div.a.b>span{1<2}", "prefix": "styles"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["markup"] == "\n".join([
        "<div className={`${styles.a} ${styles.b}`}>",
        "  <span>1&lt;2</span>",
        "</div>",
    ])
    assert body["tree"]["children"] == [{"tag": "span", "text": "1<2"}]


@pytest.mark.ci
def test_expand_nothing(client):
    response = client.get("/expand", params={"shorthand": ">>>"})
    assert response.status_code == 404


@pytest.mark.ci
def test_expand_line(client):
    response = client.get("/expand/line", params={"line": "  div#x"})
    assert response.status_code == 200
    body = response.json()
    assert body["token"] == "div#x"
    assert body["start"] == 2
    assert body["end"] == 7
    assert body["markup"] == '<div id="x"></div>'
    assert body["cursor"] == 2 + len('<div id="x">')


@pytest.mark.ci
def test_expand_line_nothing(client):
    response = client.get("/expand/line", params={"line": "   "})
    assert response.status_code == 404


@pytest.mark.ci
def test_expand_deep_chain(client):
    depth = 600
    response = client.get("/expand", params={"shorthand": ">".join(["a"] * depth)})
    assert response.status_code == 200
    body = response.json()
    assert len(body["markup"].split("\n")) == 2 * depth - 1
    assert body["markup"].endswith("\n</a>")


@pytest.mark.ci
def test_expand_refuses_overlong_shorthand(client):
    response = client.get("/expand", params={"shorthand": "a" * 2001})
    assert response.status_code == 422
