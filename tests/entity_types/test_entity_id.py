import pytest
from history_parser.entity_types.entity_id import DagId, TaskAttemptId, TaskId, VertexId
from history_parser.entity_types.entity_kind import EntityKind
from history_parser.errors import MalformedInputError


def test_embedded_ids_walk_to_dag():
    attempt = TaskAttemptId.parse("dag_1_vertex_1_task_2_attempt_3")
    assert attempt.seq == 3
    assert str(attempt.task_id) == "dag_1_vertex_1_task_2"
    assert attempt.task_id.seq == 2
    assert str(attempt.task_id.vertex_id) == "dag_1_vertex_1"
    assert attempt.dag_id == DagId("dag_1")


def test_native_ids_walk_to_dag():
    attempt = TaskAttemptId.parse("attempt_1438652049951_0008_1_00_000152_0")
    assert str(attempt.task_id) == "task_1438652049951_0008_1_00_000152"
    assert attempt.task_id.seq == 152
    assert str(attempt.task_id.vertex_id) == "vertex_1438652049951_0008_1_00"
    assert str(attempt.dag_id) == "dag_1438652049951_0008_1"


def test_vertex_id_keeps_source_text():
    vid = VertexId.parse(" vertex_1438652049951_0008_1_01 ")
    assert str(vid) == "vertex_1438652049951_0008_1_01"
    assert vid.seq == 1
    assert vid == VertexId.parse("vertex_1438652049951_0008_1_01")


def test_task_id_of_other_dag():
    tid = TaskId.parse("dag_2_vertex_1_task_1")
    assert str(tid.dag_id) == "dag_2"


@pytest.mark.parametrize("cls, text", [
    (VertexId, "not_a_vertex"),
    (VertexId, "_vertex_1"),
    (VertexId, "application_1_vertex_1"),
    (TaskId, "application_1_vertex_1_task_1"),
    (TaskId, "dag_1_vertex_1"),
    (TaskId, "task_123"),
    (TaskAttemptId, "dag_1_vertex_1_task_1"),
    (TaskAttemptId, "dag_1_vertex_x_task_1_attempt_1"),
    (DagId, "   "),
])
def test_malformed_ids_raise(cls, text):
    with pytest.raises(MalformedInputError):
        cls.parse(text)


@pytest.mark.parametrize("value, kind", [
    ("TEZ_DAG_ID", EntityKind.DAG),
    ("DAG_ID", EntityKind.DAG),
    ("DAG", EntityKind.DAG),
    ("TEZ_VERTEX_ID", EntityKind.VERTEX),
    ("TASK_ID", EntityKind.TASK),
    ("TEZ_TASK_ATTEMPT_ID", EntityKind.TASK_ATTEMPT),
    ("TASK_ATTEMPT", EntityKind.TASK_ATTEMPT),
    ("TEZ_APPLICATION", None),
    ("applicationId", None),
])
def test_entity_kind_from_type(value, kind):
    assert EntityKind.from_type(value) is kind
