def test_validate_endpoint_returns_engine_output(client) -> None:
    response = client.post("/api/v1/validate", json={"code": "<div><p>text</p>", "language": "html"})

    assert response.status_code == 200
    body = response.json()
    assert body["supported"] is True
    assert body["summary"] == {"error": 1, "warning": 0, "info": 0}
    assert body["diagnostics"] == [{
        "line": 1,
        "column": 1,
        "message": "Unclosed tag: <div>",
        "severity": "error",
        "type": "syntax",
    }]


def test_validate_unknown_language_is_not_an_error(client) -> None:
    response = client.post("/api/v1/validate", json={"code": "puts 1", "language": "ruby"})

    assert response.status_code == 200
    assert response.json()["diagnostics"] == []
    assert response.json()["supported"] is False


def test_validate_rejects_oversized_code(client, monkeypatch) -> None:
    from codecraft.config import get_settings

    monkeypatch.setattr(get_settings(), "MAX_CODE_LENGTH", 10)

    response = client.post("/api/v1/validate", json={"code": "x" * 11, "language": "css"})

    assert response.status_code == 422


def test_languages(client) -> None:
    response = client.get("/api/v1/languages")

    assert response.json() == {
        "validation": ["html", "css", "javascript", "python", "sql"],
        "execution": ["python"],
    }


def test_execute_passes_code_to_executor(client, executor) -> None:
    response = client.post("/api/v1/execute/python", json={"code": "print(1)"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "output": "ok\n"}
    assert executor.calls == [("python", "print(1)")]


def test_execute_accepts_query_field_for_sql(client, executor) -> None:
    client.post("/api/v1/execute/sql", json={"query": "SELECT 1;"})

    assert executor.calls == [("sql", "SELECT 1;")]


def test_execute_requires_code(client, executor) -> None:
    response = client.post("/api/v1/execute/python", json={"code": "  "})

    assert response.status_code == 400
    assert response.json()["detail"] == "No code provided"
    assert executor.calls == []


def test_execute_unknown_language(client) -> None:
    assert client.post("/api/v1/execute/ruby", json={"code": "puts 1"}).status_code == 404


def test_execute_is_rate_limited(client) -> None:
    statuses = [
        client.post("/api/v1/execute/python", json={"code": "print(1)"}).status_code
        for _ in range(3)
    ]

    assert statuses == [200, 200, 429]


def test_health_reports_redis(client) -> None:
    body = client.get("/api/v1/health").json()

    assert body["status"] == "healthy"
    assert body["dependencies"]["redis"]["status"] == "healthy"


def test_project_endpoints_unavailable_without_store(client) -> None:
    from codecraft.main import app

    app.state.project_store = None

    assert client.get("/api/v1/projects").status_code == 503


def test_project_lifecycle(client) -> None:
    created = client.post("/api/v1/projects", json={"name": " Landing page ", "language": "html-css-js"})
    assert created.status_code == 201
    project = created.json()
    assert project["name"] == "Landing page"

    files = client.get(f"/api/v1/projects/{project['id']}/files").json()
    assert [f["name"] for f in files] == ["index.html", "style.css", "script.js"]
    assert [f["order_index"] for f in files] == [0, 1, 2]
    assert files[0]["is_main"] is True

    # Seeding happens once
    again = client.get(f"/api/v1/projects/{project['id']}/files").json()
    assert [f["id"] for f in again] == [f["id"] for f in files]

    added = client.post(f"/api/v1/projects/{project['id']}/files", json={"name": "utils.js"}).json()
    assert added["file_type"] == "js"
    assert added["order_index"] == 3
    assert added["language"] == "html-css-js"
    assert added["is_main"] is False

    duplicate = client.post(f"/api/v1/projects/{project['id']}/files", json={"name": "utils.js"})
    assert duplicate.status_code == 422

    patched = client.patch(f"/api/v1/projects/{project['id']}", json={"description": "demo"}).json()
    assert patched["description"] == "demo"
    assert patched["name"] == "Landing page"

    assert client.delete(f"/api/v1/projects/{project['id']}").status_code == 204
    assert client.get(f"/api/v1/projects/{project['id']}").status_code == 404


def test_blank_project_name_is_rejected(client) -> None:
    assert client.post("/api/v1/projects", json={"name": "   "}).status_code == 422


def test_save_and_validate_file(client) -> None:
    project = client.post("/api/v1/projects", json={"name": "Scripts", "language": "python"}).json()
    main_file = client.get(f"/api/v1/projects/{project['id']}/files").json()[0]
    assert main_file["name"] == "main.py"

    url = f"/api/v1/projects/{project['id']}/files/{main_file['id']}"
    saved = client.put(url, json={"content": "if ready\n    go()"})
    assert saved.status_code == 200
    assert saved.json()["content"] == "if ready\n    go()"

    report = client.get(f"{url}/validate").json()
    assert report["language"] == "python"
    assert [d["message"] for d in report["diagnostics"]] == ["Missing colon at end of statement"]


def test_starter_files_validate(client) -> None:
    project = client.post("/api/v1/projects", json={"name": "Site"}).json()
    files = {f["name"]: f for f in client.get(f"/api/v1/projects/{project['id']}/files").json()}

    def messages(name):
        url = f"/api/v1/projects/{project['id']}/files/{files[name]['id']}/validate"
        return [d["message"] for d in client.get(url).json()["diagnostics"]]

    assert messages("index.html") == []
    # Braces opened on a selector line always count as mismatched
    assert messages("style.css") == ["Mismatched braces"] * 3


def test_missing_file_is_404(client) -> None:
    project = client.post("/api/v1/projects", json={"name": "Empty"}).json()

    response = client.put(f"/api/v1/projects/{project['id']}/files/nope", json={"content": ""})

    assert response.status_code == 404


def test_websocket_validation(client) -> None:
    with client.websocket_connect("/ws/validate") as ws:
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

        ws.send_json({"type": "validate", "code": "body {", "language": "css"})
        message = ws.receive_json()
        assert message["type"] == "diagnostics"
        assert [d["type"] for d in message["diagnostics"]] == ["syntax"]

        ws.send_text("not json")
        assert ws.receive_json() == {"type": "error", "message": "Invalid JSON"}


def test_websocket_survives_non_string_language(client) -> None:
    with client.websocket_connect("/ws/validate") as ws:
        ws.send_json({"type": "validate", "code": "x", "language": ["html"]})
        message = ws.receive_json()
        assert message["type"] == "diagnostics"
        assert message["supported"] is False

        ws.send_json({"type": "validate", "code": "x", "language": 5})
        assert ws.receive_json()["type"] == "diagnostics"

        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}


def test_added_file_validates_as_project_language(client) -> None:
    project = client.post("/api/v1/projects", json={"name": "Scripts", "language": "python"}).json()
    added = client.post(f"/api/v1/projects/{project['id']}/files", json={"name": "helpers.py"}).json()
    assert added["file_type"] == "py"

    url = f"/api/v1/projects/{project['id']}/files/{added['id']}"
    client.put(url, json={"content": "if ready\n    go()"})

    report = client.get(f"{url}/validate").json()
    assert report["language"] == "python"
    assert [d["message"] for d in report["diagnostics"]] == ["Missing colon at end of statement"]


def test_added_script_in_web_project_validates_as_javascript(client) -> None:
    project = client.post("/api/v1/projects", json={"name": "Site"}).json()
    added = client.post(f"/api/v1/projects/{project['id']}/files", json={"name": "utils.js"}).json()

    url = f"/api/v1/projects/{project['id']}/files/{added['id']}"
    client.put(url, json={"content": "let total ="})

    report = client.get(f"{url}/validate").json()
    assert report["language"] == "javascript"
    assert [d["message"] for d in report["diagnostics"]] == ["Variable declaration without initialization"]


def test_execute_limits_each_language_separately(client) -> None:
    for _ in range(2):
        client.post("/api/v1/execute/python", json={"code": "print(1)"})

    assert client.post("/api/v1/execute/python", json={"code": "print(1)"}).status_code == 429
    assert client.post("/api/v1/execute/sql", json={"code": "SELECT 1;"}).status_code == 200
