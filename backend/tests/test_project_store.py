def test_projects_are_listed_newest_first(store, run, redis_client) -> None:
    first = run(store.create_project("first", "python"))
    second = run(store.create_project("second", "sql"))
    redis_client.sorted_sets["codecraft:projects"][first["id"]] = 1.0
    redis_client.sorted_sets["codecraft:projects"][second["id"]] = 2.0

    names = [p["name"] for p in run(store.list_projects())]

    assert names == ["second", "first"]


def test_unknown_language_seeds_html_starter(store, run) -> None:
    project = run(store.create_project("misc", "cobol"))

    files = run(store.seed_starter_files(project))

    assert [f["file_type"] for f in files] == ["html", "css", "javascript"]
    assert [f["name"] for f in run(store.list_files(project["id"]))] == ["index.html", "style.css", "script.js"]


def test_file_type_comes_from_extension(store, run) -> None:
    project = run(store.create_project("p", "python"))

    assert run(store.create_file(project, "helpers.PY"))["file_type"] == "py"
    assert run(store.create_file(project, "README"))["file_type"] == "txt"
    assert run(store.create_file(project, "notes."))["file_type"] == "txt"


def test_file_lookup_is_scoped_to_project(store, run) -> None:
    one = run(store.create_project("one", "python"))
    two = run(store.create_project("two", "python"))
    record = run(store.create_file(one, "a.py"))

    assert run(store.get_file(two["id"], record["id"])) is None
    assert run(store.delete_file(two["id"], record["id"])) is False
    assert run(store.get_file(one["id"], record["id"]))["name"] == "a.py"


def test_update_file_bumps_updated_at(store, run) -> None:
    project = run(store.create_project("p", "sql"))
    record = run(store.create_file(project, "q.sql"))

    updated = run(store.update_file_content(project["id"], record["id"], "SELECT 1;"))

    assert updated["content"] == "SELECT 1;"
    assert updated["updated_at"] >= record["updated_at"]
    assert updated["created_at"] == record["created_at"]


def test_delete_project_removes_files(store, run, redis_client) -> None:
    project = run(store.create_project("p", "python"))
    run(store.seed_starter_files(project))

    assert run(store.delete_project(project["id"])) is True

    assert redis_client.keys_matching("codecraft:file:*") == []
    assert redis_client.keys_matching(f"codecraft:project:{project['id']}*") == []
    assert run(store.list_projects()) == []
    assert run(store.delete_project(project["id"])) is False
