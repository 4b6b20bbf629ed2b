from enum import Enum


class EntityKind(str, Enum):
    DAG = "DAG"
    VERTEX = "VERTEX"
    TASK = "TASK"
    TASK_ATTEMPT = "TASK_ATTEMPT"

    @classmethod
    def from_type(cls, entity_type: str) -> "EntityKind | None":
        # TEZ_DAG_ID, DAG_ID and DAG all name the same kind
        name = entity_type.strip().upper()
        if name.startswith("TEZ_"):
            name = name[len("TEZ_"):]
        if name.endswith("_ID"):
            name = name[: -len("_ID")]
        try:
            return cls(name)
        except ValueError:
            return None
