from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from pathlib import Path
from typing import Optional

from history_parser.entity_types.dag_info import DagInfo
from history_parser.errors import (
    HistoryIOError,
    IncompleteLogError,
    InvalidArgumentError,
    MalformedInputError,
)
from history_parser.parser.history_parser import parse
from history_parser.parser.parser_configuration import ParserConfiguration

app = FastAPI(title="DAG History Parser API", version="0.1.0")

CONFIG = ParserConfiguration()

# --- Pydantic DTOs -------------------------------------------------------------
class ParseRequest(BaseModel):
    path: str = Field(..., description="History log file, relative to the history directory")

class AttemptSummary(BaseModel):
    id: str
    status: Optional[str] = None
    node_id: Optional[str] = None
    container_id: Optional[str] = None

class TaskSummary(BaseModel):
    id: str
    status: Optional[str] = None
    attempts: list[AttemptSummary]

class VertexSummary(BaseModel):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    tasks: list[TaskSummary]

class DagSummary(BaseModel):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    time_taken: Optional[int] = None
    vertices: list[VertexSummary]


def summarize(dag: DagInfo) -> DagSummary:
    vertices = []
    for v in dag.vertices.values():
        tasks = [
            TaskSummary(
                id=t.id,
                status=t.status,
                attempts=[
                    AttemptSummary(id=a.id, status=a.status, node_id=a.node_id, container_id=a.container_id)
                    for a in t.attempts.values()
                ],
            )
            for t in v.tasks.values()
        ]
        vertices.append(VertexSummary(id=v.id, name=v.vertex_name, status=v.status, tasks=tasks))
    return DagSummary(id=dag.id, name=dag.name, status=dag.status, time_taken=dag.time_taken, vertices=vertices)


def resolve_history_path(path: str) -> Path:
    base = Path(CONFIG.history_dir).resolve()
    target = (base / path).resolve()
    if not target.is_relative_to(base):
        raise HTTPException(status_code=400, detail="Path is outside the history directory")
    return target

# --- Routes --------------------------------------------------------------------
@app.post("/dags/{dag_id}/parse", response_model=DagSummary)
def parse_dag(dag_id: str, req: ParseRequest):
    try:
        dag = parse(resolve_history_path(req.path), dag_id, CONFIG)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=e.reason)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=e.reason)
    except IncompleteLogError as e:
        raise HTTPException(status_code=404, detail=e.reason)
    except HistoryIOError as e:
        raise HTTPException(status_code=500, detail=e.reason)
    return summarize(dag)


@app.get("/health")
def health():
    return {"status": "ok"}

# To run:
#   uvicorn history_parser.app:app --reload
