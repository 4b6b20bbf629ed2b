from history_parser.entity_types.history_record import TaskAttemptRecord
from history_parser.entity_types.task_attempt_info import CONTAINER_ID, NODE_ID

ENTITY = "entity"
ENTITY_TYPE = "entitytype"

# relatedEntities position consulted for each tag
RELATION_SLOTS = ((0, NODE_ID), (1, CONTAINER_ID))


def related_entity_at(record: TaskAttemptRecord, index: int, entity_type: str) -> str | None:
    """Value of relatedEntities[index] when that entry is tagged entity_type."""
    related = record.related_entities
    if not isinstance(related, list) or index >= len(related):
        return None
    entry = related[index]
    if not isinstance(entry, dict):
        return None
    tag = entry.get(ENTITY_TYPE)
    if not isinstance(tag, str) or tag.lower() != entity_type.lower():
        return None
    # a tagged entry always yields a string, empty when the value is missing
    value = entry.get(ENTITY)
    return "" if value is None else str(value)


def extract_relations(record: TaskAttemptRecord) -> TaskAttemptRecord:
    if record.other_info is None:
        return record
    for index, entity_type in RELATION_SLOTS:
        value = related_entity_at(record, index, entity_type)
        if value is not None:
            record.other_info[entity_type] = value
    return record
