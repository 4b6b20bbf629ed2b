import logging

from history_parser.entity_types.entity_kind import EntityKind
from history_parser.entity_types.history_record import HistoryRecord
from history_parser.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def normalize_dag_id(dag_id) -> str:
    if not isinstance(dag_id, str) or not dag_id.strip():
        raise InvalidArgumentError("Please provide valid dagId")
    return dag_id.strip()


def belongs_to(record: HistoryRecord, dag_id: str) -> bool:
    """True when the record's root DAG is dag_id. Unparsable ids raise."""
    if record.kind is EntityKind.DAG:
        owner = record.entity.strip()
        if owner != dag_id:
            logger.warning(f"{dag_id} is not matching with {owner}")
            return False
        return True
    owner = str(record.entity_id().dag_id)
    if owner != dag_id:
        logger.warning(f"{record.entity} does not belong to {dag_id}")
        return False
    return True
