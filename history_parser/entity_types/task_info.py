from dataclasses import dataclass, field

from history_parser.entity_types.entity_id import TaskId
from history_parser.entity_types.entity_info import EntityInfo, as_str
from history_parser.entity_types.history_record import HistoryRecord
from history_parser.entity_types.task_attempt_info import TaskAttemptInfo

SUCCESSFUL_ATTEMPT_ID = "successfulAttemptId"


@dataclass
class TaskInfo(EntityInfo):
    successful_attempt_id: str | None = None
    attempts: dict[str, TaskAttemptInfo] = field(default_factory=dict, repr=False)
    vertex: "VertexInfo | None" = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, record: HistoryRecord) -> "TaskInfo":
        fields = cls.common_fields(record)
        return cls(
            **fields,
            successful_attempt_id=as_str(fields["other_info"].get(SUCCESSFUL_ATTEMPT_ID)),
        )

    @property
    def task_id(self) -> TaskId:
        return TaskId.parse(self.id)

    def add_attempt(self, attempt: TaskAttemptInfo) -> None:
        attempt.task = self
        self.attempts[attempt.id] = attempt

    def get_attempt(self, attempt_id: str) -> TaskAttemptInfo | None:
        return self.attempts.get(attempt_id)

    @property
    def successful_attempt(self) -> TaskAttemptInfo | None:
        if self.successful_attempt_id is None:
            return None
        return self.attempts.get(self.successful_attempt_id)
