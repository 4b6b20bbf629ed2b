from dataclasses import dataclass, field

from history_parser.entity_types.entity_kind import EntityKind
from history_parser.entity_types.history_record import HistoryRecord


@dataclass
class MergeBucket:
    kind: EntityKind
    records: dict[str, HistoryRecord] = field(default_factory=dict)   # entity id → canonical record

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class ParserState:
    dag_id: str
    buckets: dict[EntityKind, MergeBucket] = field(
        default_factory=lambda: {kind: MergeBucket(kind) for kind in EntityKind}
    )
    skipped: int = 0        # records owned by another run

    def bucket(self, kind: EntityKind) -> MergeBucket:
        return self.buckets[kind]
