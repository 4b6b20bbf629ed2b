import pytest
from conftest import make_record
from fastapi.testclient import TestClient
from history_parser import app as app_module
from history_parser.app import app
from history_parser.parser.parser_configuration import ParserConfiguration


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setattr(app_module, "CONFIG", ParserConfiguration(history_dir=str(tmp_path)))
    return TestClient(app)


def test_parse_returns_summary(client, write_history, dag_1_records):
    path = write_history(dag_1_records)
    resp = client.post("/dags/dag_1/parse", json={"path": str(path)})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "dag_1"
    assert body["name"] == "wordcount"
    [vertex] = body["vertices"]
    assert vertex["name"] == "tokenizer"
    [task] = vertex["tasks"]
    [attempt] = task["attempts"]
    assert attempt["node_id"] == "host1"
    assert attempt["container_id"] == "c1"


def test_status_codes(client, write_history, dag_1_records, tmp_path):
    good = write_history(dag_1_records)
    bad = write_history([make_record("dag_1", "TEZ_DAG_ID", {}), "{oops"], name="bad.txt")
    assert client.post("/dags/dag_2/parse", json={"path": str(good)}).status_code == 404
    assert client.post("/dags/dag_1/parse", json={"path": str(bad)}).status_code == 422
    assert client.post("/dags/dag_1/parse", json={"path": str(tmp_path / "nope")}).status_code == 400


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_relative_path_resolved_in_history_dir(client, write_history, dag_1_records):
    write_history(dag_1_records, name="dag_1.history")
    resp = client.post("/dags/dag_1/parse", json={"path": "dag_1.history"})
    assert resp.status_code == 200
    assert resp.json()["id"] == "dag_1"


@pytest.mark.parametrize("path", ["/etc/passwd", "/etc/no_such_file", "../outside.txt"])
def test_paths_outside_history_dir_rejected(client, path):
    resp = client.post("/dags/dag_1/parse", json={"path": path})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Path is outside the history directory"
