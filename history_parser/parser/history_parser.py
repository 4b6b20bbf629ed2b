import logging
from pathlib import Path

from history_parser.entity_types.dag_info import DagInfo
from history_parser.errors import HistoryIOError, InvalidArgumentError
from history_parser.parser.linker import build_dag
from history_parser.parser.merge import accept
from history_parser.parser.ownership import belongs_to, normalize_dag_id
from history_parser.parser.parser_configuration import ParserConfiguration
from history_parser.parser.parser_state import ParserState
from history_parser.parser.record_reader import decode_record, read_records
from history_parser.parser.router import route

logger = logging.getLogger(__name__)


def ingest(path: Path, dag_id: str, cfg: ParserConfiguration) -> ParserState:
    state = ParserState(dag_id=dag_id)
    try:
        with open(path, encoding=cfg.encoding) as handle:
            for chunk in read_records(handle, cfg.record_separator, cfg.block_size):
                record = route(decode_record(chunk))
                if record is None:
                    continue
                if not belongs_to(record, dag_id):
                    state.skipped += 1
                    continue
                accept(state, record)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error in reading DAG from {path}: {e}")
        raise HistoryIOError(f"Error in reading {path}", details=str(e)) from e
    return state


def parse(path, dag_id: str, cfg: ParserConfiguration | None = None) -> DagInfo:
    """Parse one history file into the linked model of dag_id."""
    dag_id = normalize_dag_id(dag_id)
    if path is None or not Path(path).is_file():
        raise InvalidArgumentError(f"{path} does not exist")
    state = ingest(Path(path), dag_id, cfg or ParserConfiguration())
    dag = build_dag(state)
    logger.info(
        f"Parsed {dag.id}: {len(dag.vertices)} vertices, {len(dag.tasks)} tasks, "
        f"{len(dag.attempts)} attempts ({state.skipped} foreign records skipped)"
    )
    return dag


class HistoryParser:
    def __init__(self, history_file, cfg: ParserConfiguration | None = None):
        if history_file is None or not Path(history_file).is_file():
            raise InvalidArgumentError(f"{history_file} does not exist")
        self.history_file = Path(history_file)
        self.cfg = cfg or ParserConfiguration()

    def get_dag_data(self, dag_id: str) -> DagInfo:
        return parse(self.history_file, dag_id, self.cfg)
