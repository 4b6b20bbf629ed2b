from dataclasses import dataclass

# newline or the \x01 marker the simple history sink writes between records
DEFAULT_RECORD_SEPARATOR = r"[\r\n\x01]+"


@dataclass
class ParserConfiguration:
    record_separator: str = DEFAULT_RECORD_SEPARATOR
    encoding: str = "utf-8"
    block_size: int = 64 * 1024
    # the HTTP surface only opens files below this directory
    history_dir: str = "."
