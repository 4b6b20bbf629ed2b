import json

import pytest


def make_record(entity, entity_type, other_info=None, related=None):
    rec = {"entity": entity, "entitytype": entity_type}
    if other_info is not None:
        rec["otherInfo"] = other_info
    if related is not None:
        rec["relatedEntities"] = related
    return rec


@pytest.fixture
def write_history(tmp_path):
    # records may be dicts (dumped as JSON) or raw strings (written as is)
    def _write(records, separator="\n", name="history.txt"):
        path = tmp_path / name
        chunks = [r if isinstance(r, str) else json.dumps(r) for r in records]
        path.write_text(separator.join(chunks) + separator, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def dag_1_records():
    # one entity of each kind, DAG and vertex split across start/finish records
    return [
        make_record("dag_1", "TEZ_DAG_ID", {"startTime": 100, "status": "RUNNING",
                                            "dagPlan": {"dagName": "wordcount"},
                                            "vertexNameIdMapping": {"tokenizer": "dag_1_vertex_1"}}),
        make_record("dag_1_vertex_1", "TEZ_VERTEX_ID", {"startTime": 110, "numTasks": 1}),
        make_record("dag_1_vertex_1_task_1", "TEZ_TASK_ID", {"startTime": 120, "status": "SUCCEEDED"}),
        make_record(
            "dag_1_vertex_1_task_1_attempt_1", "TEZ_TASK_ATTEMPT_ID", {"startTime": 121},
            related=[{"entity": "host1", "entitytype": "nodeId"},
                     {"entity": "c1", "entitytype": "containerId"}],
        ),
        make_record("dag_1_vertex_1", "TEZ_VERTEX_ID", {"endTime": 190, "status": "SUCCEEDED"}),
        make_record("dag_1", "TEZ_DAG_ID", {"endTime": 200, "status": "SUCCEEDED"}),
    ]
