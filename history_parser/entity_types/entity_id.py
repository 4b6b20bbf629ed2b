import re
from dataclasses import dataclass

from history_parser.errors import MalformedInputError

# Two grammars are in use: the native one ("vertex_1438652049951_0008_1_00")
# and the embedded one, where each id is its parent id plus a suffix
# ("dag_1_vertex_1").
NATIVE_VERTEX = re.compile(r"^vertex_(\d+_\d+_\d+)_(\d+)$")
NATIVE_TASK = re.compile(r"^task_(\d+_\d+_\d+_\d+)_(\d+)$")
NATIVE_ATTEMPT = re.compile(r"^attempt_(\d+_\d+_\d+_\d+_\d+)_(\d+)$")
EMBEDDED_VERTEX = re.compile(r"^(dag_\w+)_vertex_(\d+)$")
EMBEDDED_TASK = re.compile(r"^(.+)_task_(\d+)$")
EMBEDDED_ATTEMPT = re.compile(r"^(.+)_attempt_(\d+)$")


def _split(text: str, native: re.Pattern, embedded: re.Pattern, prefix: str, kind: str) -> tuple[str, int]:
    """Return (parent id text, sequence number) for a child identifier."""
    if not isinstance(text, str):
        raise MalformedInputError(f"{kind} id must be a string, got {text!r}")
    text = text.strip()
    m = native.match(text)
    if m:
        return f"{prefix}_{m.group(1)}", int(m.group(2))
    m = embedded.match(text)
    if m:
        return m.group(1), int(m.group(2))
    raise MalformedInputError(f"Cannot parse {kind} id from {text!r}")


@dataclass(frozen=True)
class DagId:
    text: str

    @classmethod
    def parse(cls, text: str) -> "DagId":
        if not isinstance(text, str) or not text.strip():
            raise MalformedInputError(f"Cannot parse dag id from {text!r}")
        return cls(text.strip())

    @property
    def dag_id(self) -> "DagId":
        return self

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class VertexId:
    text: str
    parent: DagId
    seq: int

    @classmethod
    def parse(cls, text: str) -> "VertexId":
        parent, seq = _split(text, NATIVE_VERTEX, EMBEDDED_VERTEX, "dag", "vertex")
        return cls(text.strip(), DagId.parse(parent), seq)

    @property
    def dag_id(self) -> DagId:
        return self.parent

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TaskId:
    text: str
    parent: VertexId
    seq: int

    @classmethod
    def parse(cls, text: str) -> "TaskId":
        parent, seq = _split(text, NATIVE_TASK, EMBEDDED_TASK, "vertex", "task")
        return cls(text.strip(), VertexId.parse(parent), seq)

    @property
    def vertex_id(self) -> VertexId:
        return self.parent

    @property
    def dag_id(self) -> DagId:
        return self.parent.dag_id

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TaskAttemptId:
    text: str
    parent: TaskId
    seq: int

    @classmethod
    def parse(cls, text: str) -> "TaskAttemptId":
        parent, seq = _split(text, NATIVE_ATTEMPT, EMBEDDED_ATTEMPT, "task", "attempt")
        return cls(text.strip(), TaskId.parse(parent), seq)

    @property
    def task_id(self) -> TaskId:
        return self.parent

    @property
    def dag_id(self) -> DagId:
        return self.parent.dag_id

    def __str__(self) -> str:
        return self.text
