from dataclasses import dataclass, field
from typing import Any

from history_parser.entity_types.history_record import HistoryRecord

# otherInfo keys shared by every entity kind
START_TIME = "startTime"
END_TIME = "endTime"
TIME_TAKEN = "timeTaken"
STATUS = "status"
DIAGNOSTICS = "diagnostics"


def as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass
class EntityInfo:
    id: str
    start_time: int | None = None
    finish_time: int | None = None
    status: str | None = None
    diagnostics: str | None = None
    other_info: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def common_fields(record: HistoryRecord) -> dict[str, Any]:
        """Fields every kind reads from a merged record. otherInfo is copied."""
        other_info = dict(record.other_info or {})
        return {
            "id": record.entity.strip(),
            "start_time": as_int(other_info.get(START_TIME)),
            "finish_time": as_int(other_info.get(END_TIME)),
            "status": as_str(other_info.get(STATUS)),
            "diagnostics": as_str(other_info.get(DIAGNOSTICS)),
            "other_info": other_info,
        }

    @property
    def time_taken(self) -> int | None:
        taken = as_int(self.other_info.get(TIME_TAKEN))
        if taken is not None:
            return taken
        if self.start_time is None or self.finish_time is None:
            return None
        return self.finish_time - self.start_time
