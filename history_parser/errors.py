class HistoryParserError(Exception):
    def __init__(self, reason, details=None):
        self.reason = reason
        self.details = details
        super().__init__(reason)


class InvalidArgumentError(HistoryParserError, ValueError):
    pass


class HistoryIOError(HistoryParserError):
    pass


class MalformedInputError(HistoryParserError):
    pass


class IncompleteLogError(HistoryParserError):
    pass
