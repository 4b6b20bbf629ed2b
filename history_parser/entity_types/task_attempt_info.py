from dataclasses import dataclass, field

from history_parser.entity_types.entity_id import TaskAttemptId
from history_parser.entity_types.entity_info import EntityInfo, as_str
from history_parser.entity_types.history_record import HistoryRecord

NODE_ID = "nodeId"
CONTAINER_ID = "containerId"


@dataclass
class TaskAttemptInfo(EntityInfo):
    node_id: str | None = None
    container_id: str | None = None
    task: "TaskInfo | None" = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, record: HistoryRecord) -> "TaskAttemptInfo":
        fields = cls.common_fields(record)
        other_info = fields["other_info"]
        return cls(
            **fields,
            node_id=as_str(other_info.get(NODE_ID)),
            container_id=as_str(other_info.get(CONTAINER_ID)),
        )

    @property
    def attempt_id(self) -> TaskAttemptId:
        return TaskAttemptId.parse(self.id)
