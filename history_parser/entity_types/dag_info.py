from dataclasses import dataclass, field
from typing import Any

from history_parser.entity_types.entity_id import TaskAttemptId, TaskId
from history_parser.entity_types.entity_info import EntityInfo, as_str
from history_parser.entity_types.history_record import HistoryRecord
from history_parser.entity_types.task_attempt_info import TaskAttemptInfo
from history_parser.entity_types.task_info import TaskInfo
from history_parser.entity_types.vertex_info import VertexInfo

DAG_PLAN = "dagPlan"
DAG_NAME = "dagName"
VERTEX_NAME_ID_MAPPING = "vertexNameIdMapping"


@dataclass
class DagInfo(EntityInfo):
    name: str | None = None
    vertex_name_id_mapping: dict[str, str] = field(default_factory=dict)
    vertices: dict[str, VertexInfo] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, record: HistoryRecord) -> "DagInfo":
        fields = cls.common_fields(record)
        other_info = fields["other_info"]
        plan = other_info.get(DAG_PLAN)
        name = plan.get(DAG_NAME) if isinstance(plan, dict) else None
        return cls(
            **fields,
            name=as_str(name),
            vertex_name_id_mapping=_string_mapping(other_info.get(VERTEX_NAME_ID_MAPPING)),
        )

    def add_vertex(self, vertex: VertexInfo) -> None:
        # the vertex record may predate the name; the DAG plan always has it
        if vertex.vertex_name is None:
            for name, vertex_id in self.vertex_name_id_mapping.items():
                if vertex_id == vertex.id:
                    vertex.vertex_name = name
                    break
        vertex.dag = self
        self.vertices[vertex.id] = vertex

    def get_vertex(self, vertex_id: str) -> VertexInfo | None:
        return self.vertices.get(vertex_id)

    def get_vertex_by_name(self, name: str) -> VertexInfo | None:
        for vertex in self.vertices.values():
            if vertex.vertex_name == name:
                return vertex
        return None

    def get_task(self, task_id: str) -> TaskInfo | None:
        vertex = self.get_vertex(str(TaskId.parse(task_id).vertex_id))
        return vertex.get_task(task_id) if vertex else None

    def get_attempt(self, attempt_id: str) -> TaskAttemptInfo | None:
        task = self.get_task(str(TaskAttemptId.parse(attempt_id).task_id))
        return task.get_attempt(attempt_id) if task else None

    @property
    def tasks(self) -> list[TaskInfo]:
        return [t for v in self.vertices.values() for t in v.tasks.values()]

    @property
    def attempts(self) -> list[TaskAttemptInfo]:
        return [a for v in self.vertices.values() for a in v.attempts]


def _string_mapping(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}
