import json
import logging
import re
from typing import Any, Iterator, TextIO

from history_parser.errors import MalformedInputError

logger = logging.getLogger(__name__)

# tail kept for rescanning, bounds the length of a separator that can span blocks
MIN_OVERLAP = 1024


def read_records(handle: TextIO, separator: str, block_size: int = 64 * 1024) -> Iterator[str]:
    """Lazily split the handle into record chunks. Blank chunks are dropped.

    Each block is scanned together with a bounded carried tail, so a
    record spanning many blocks is collected in pieces instead of rescanned.
    """
    pattern = re.compile(separator)
    overlap = max(block_size, MIN_OVERLAP)
    pending: list[str] = []     # pieces of the record being read
    carry = ""
    while True:
        block = handle.read(block_size)
        text = carry + block
        cut = 0
        for m in pattern.finditer(text):
            # a separator touching the end may continue in the next block
            if block and m.end() == len(text):
                break
            pending.append(text[cut:m.start()])
            chunk = "".join(pending)
            pending = []
            if chunk.strip():
                yield chunk
            cut = m.end()
        if not block:
            pending.append(text[cut:])
            break
        keep = max(cut, len(text) - overlap)
        pending.append(text[cut:keep])
        carry = text[keep:]
    chunk = "".join(pending)
    if chunk.strip():
        yield chunk


def decode_record(chunk: str) -> dict[str, Any]:
    try:
        value = json.loads(chunk)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Undecodable record: {e}", details=chunk[:200]) from e
    if not isinstance(value, dict):
        raise MalformedInputError(
            f"Record is not a JSON object: {type(value).__name__}", details=chunk[:200]
        )
    return value
