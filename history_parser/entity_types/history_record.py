from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from history_parser.entity_types.entity_id import DagId, TaskAttemptId, TaskId, VertexId
from history_parser.entity_types.entity_kind import EntityKind


class HistoryRecord(BaseModel):
    """One decoded log record. Fields the parser does not know pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    kind: ClassVar[EntityKind]
    id_type: ClassVar[type]

    entity: str
    entity_type: str = Field(validation_alias=AliasChoices("entitytype", "entityType"))
    other_info: dict[str, Any] | None = Field(default=None, alias="otherInfo")

    def entity_id(self):
        return self.id_type.parse(self.entity)


class DagRecord(HistoryRecord):
    kind: ClassVar[EntityKind] = EntityKind.DAG
    id_type: ClassVar[type] = DagId


class VertexRecord(HistoryRecord):
    kind: ClassVar[EntityKind] = EntityKind.VERTEX
    id_type: ClassVar[type] = VertexId


class TaskRecord(HistoryRecord):
    kind: ClassVar[EntityKind] = EntityKind.TASK
    id_type: ClassVar[type] = TaskId


class TaskAttemptRecord(HistoryRecord):
    kind: ClassVar[EntityKind] = EntityKind.TASK_ATTEMPT
    id_type: ClassVar[type] = TaskAttemptId

    # left untyped, the relation lookup tolerates any shape
    related_entities: Any = Field(default=None, alias="relatedEntities")


RECORD_TYPES: dict[EntityKind, type[HistoryRecord]] = {
    EntityKind.DAG: DagRecord,
    EntityKind.VERTEX: VertexRecord,
    EntityKind.TASK: TaskRecord,
    EntityKind.TASK_ATTEMPT: TaskAttemptRecord,
}
