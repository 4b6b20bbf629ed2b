import logging

from history_parser.entity_types.dag_info import DagInfo
from history_parser.entity_types.entity_id import TaskAttemptId, TaskId
from history_parser.entity_types.entity_kind import EntityKind
from history_parser.entity_types.task_attempt_info import TaskAttemptInfo
from history_parser.entity_types.task_info import TaskInfo
from history_parser.entity_types.vertex_info import VertexInfo
from history_parser.errors import IncompleteLogError
from history_parser.parser.parser_state import ParserState
from history_parser.parser.relations import extract_relations

logger = logging.getLogger(__name__)


def build_dag(state: ParserState) -> DagInfo:
    dag_records = state.bucket(EntityKind.DAG).records
    if not dag_records:
        logger.error("Dag is not yet parsed. Looks like partial file.")
        raise IncompleteLogError(
            f"Please provide a valid/complete history log file containing {state.dag_id}"
        )
    dag = DagInfo.create(next(iter(dag_records.values())))

    # fixed order: tasks need their vertex linked, attempts their task
    for record in state.bucket(EntityKind.VERTEX).records.values():
        vertex = VertexInfo.create(record)
        dag.add_vertex(vertex)
        logger.debug(f"Parsed vertex {vertex.id} ({vertex.vertex_name})")

    for record in state.bucket(EntityKind.TASK).records.values():
        task = TaskInfo.create(record)
        vertex_id = str(TaskId.parse(task.id).vertex_id)
        vertex = dag.get_vertex(vertex_id)
        if vertex is None:
            logger.error(f"VertexInfo for {vertex_id} not found for task {task.id}")
            raise IncompleteLogError(f"VertexInfo for {vertex_id} can't be null")
        vertex.add_task(task)
        logger.debug(f"Parsed task {task.id}")

    for record in state.bucket(EntityKind.TASK_ATTEMPT).records.values():
        attempt = TaskAttemptInfo.create(extract_relations(record))
        task_id = str(TaskAttemptId.parse(attempt.id).task_id)
        task = dag.get_task(task_id)
        if task is None:
            logger.error(f"TaskInfo for {task_id} not found for attempt {attempt.id}")
            raise IncompleteLogError(f"TaskInfo for {task_id} can't be null")
        task.add_attempt(attempt)
        logger.debug(f"Parsed task attempt {attempt.id}")

    return dag
