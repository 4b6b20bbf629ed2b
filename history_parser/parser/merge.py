import logging

from history_parser.entity_types.history_record import HistoryRecord
from history_parser.parser.parser_state import MergeBucket, ParserState

logger = logging.getLogger(__name__)


def merge_other_info(target: HistoryRecord, source: HistoryRecord) -> None:
    if source.other_info is None or source.other_info is target.other_info:
        return
    if target.other_info is None:
        target.other_info = dict(source.other_info)
        return
    # shallow: nested objects are replaced, not merged
    for key, value in source.other_info.items():
        target.other_info[key] = value


def merge_record(bucket: MergeBucket, record: HistoryRecord) -> MergeBucket:
    # first record for an id is the scaffold, later ones only add otherInfo
    key = record.entity.strip()
    canonical = bucket.records.get(key)
    if canonical is None:
        bucket.records[key] = record
        return bucket
    merge_other_info(canonical, record)
    return bucket


def accept(state: ParserState, record: HistoryRecord) -> ParserState:
    merge_record(state.bucket(record.kind), record)
    return state
