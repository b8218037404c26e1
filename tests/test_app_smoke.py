from __future__ import annotations

from fastapi.testclient import TestClient


def test_app_smoke_routes(reload_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    # no index page installed in the sandbox
    r = client.get("/")
    assert r.status_code == 200
    assert "Document Editor" in r.text

    r = client.post("/LoadFile", json={})
    assert r.status_code == 404
    assert r.json()["error"] == "not_found"

    r = client.post("/SaveFile", json={"path": "/doc/a", "json_content": '{"x":1}'})
    assert r.status_code == 200
    assert r.json() == {}

    r = client.post("/LoadFile", json={"path": "/doc/a"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"json_content": '{"x":1}'}

    assert (reload_endpoints / "data" / "document.json").read_text(encoding="utf-8") == '{"x":1}'


def test_legacy_route_names(reload_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    r = client.post("/UpdateFile", json={"path": "", "jsonContent": "[]", "elmContent": "module Main"})
    assert r.status_code == 200

    r = client.post("/GetFile", json={"path": ""})
    assert r.status_code == 200
    assert r.json()["json_content"] == "[]"
    assert (reload_endpoints / "data" / "document.json.elm").read_text(encoding="utf-8") == "module Main"


def test_malformed_body_returns_400(reload_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    r = client.post("/SaveFile", content=b"{oops", headers={"content-type": "application/json"})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "invalid_request"
    assert body["detail"]


def test_index_page_served_when_present(reload_endpoints):
    page = reload_endpoints / "static" / "index.html"
    page.parent.mkdir(parents=True, exist_ok=True)
    page.write_text("<html><body>custom editor</body></html>", encoding="utf-8")

    import app as app_module

    client = TestClient(app_module.create_app())
    r = client.get("/")
    assert r.status_code == 200
    assert "custom editor" in r.text


def test_rooted_policy_keeps_documents_apart(rooted_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    assert client.post("/SaveFile", json={"path": "/doc/a", "json_content": "A"}).status_code == 200
    assert client.post("/SaveFile", json={"path": "/doc/b", "json_content": "B"}).status_code == 200
    assert client.post("/LoadFile", json={"path": "/doc/a"}).json() == {"json_content": "A"}
    assert client.post("/LoadFile", json={"path": "/doc/b"}).json() == {"json_content": "B"}

    r = client.post("/LoadFile", json={"path": "/../../etc/passwd"})
    assert r.status_code == 400
    assert r.json()["error"] == "invalid_locator"
