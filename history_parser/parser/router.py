import logging
from typing import Any

from pydantic import ValidationError

from history_parser.entity_types.entity_kind import EntityKind
from history_parser.entity_types.history_record import RECORD_TYPES, HistoryRecord
from history_parser.errors import MalformedInputError

logger = logging.getLogger(__name__)

ENTITY = "entity"
ENTITY_TYPE_KEYS = ("entitytype", "entityType")


def classify(raw: dict[str, Any]) -> EntityKind | None:
    entity = raw.get(ENTITY)
    entity_type = next((raw[k] for k in ENTITY_TYPE_KEYS if k in raw), None)
    if not isinstance(entity, str) or not isinstance(entity_type, str):
        raise MalformedInputError(
            f"Record without string '{ENTITY}'/'entitytype': {entity!r}, {entity_type!r}"
        )
    kind = EntityKind.from_type(entity_type)
    if kind is None:
        logger.debug(f"Ignoring {entity} of unknown type {entity_type}")
    return kind


def route(raw: dict[str, Any]) -> HistoryRecord | None:
    kind = classify(raw)
    if kind is None:
        return None
    try:
        return RECORD_TYPES[kind].model_validate(raw)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid {kind.value} record {raw.get(ENTITY)}", details=str(e)) from e
