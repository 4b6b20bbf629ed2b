from dataclasses import dataclass, field

from history_parser.entity_types.entity_id import VertexId
from history_parser.entity_types.entity_info import EntityInfo, as_int, as_str
from history_parser.entity_types.history_record import HistoryRecord
from history_parser.entity_types.task_attempt_info import TaskAttemptInfo
from history_parser.entity_types.task_info import TaskInfo

VERTEX_NAME = "vertexName"
NUM_TASKS = "numTasks"
INIT_TIME = "initTime"


@dataclass
class VertexInfo(EntityInfo):
    vertex_name: str | None = None
    num_tasks: int | None = None
    init_time: int | None = None
    tasks: dict[str, TaskInfo] = field(default_factory=dict, repr=False)
    dag: "DagInfo | None" = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, record: HistoryRecord) -> "VertexInfo":
        fields = cls.common_fields(record)
        other_info = fields["other_info"]
        return cls(
            **fields,
            vertex_name=as_str(other_info.get(VERTEX_NAME)),
            num_tasks=as_int(other_info.get(NUM_TASKS)),
            init_time=as_int(other_info.get(INIT_TIME)),
        )

    @property
    def vertex_id(self) -> VertexId:
        return VertexId.parse(self.id)

    def add_task(self, task: TaskInfo) -> None:
        task.vertex = self
        self.tasks[task.id] = task

    def get_task(self, task_id: str) -> TaskInfo | None:
        return self.tasks.get(task_id)

    @property
    def attempts(self) -> list[TaskAttemptInfo]:
        return [a for t in self.tasks.values() for a in t.attempts.values()]
