"""Exception types raised by snowseq."""


class SequenceError(Exception):
    """Base class for all snowseq errors."""


class ExecutionError(SequenceError):
    """The store rejected or failed to run a statement."""

    def __init__(self, statement: str, cause: Exception | None = None) -> None:
        self.statement = statement
        message = f"unable to execute {statement}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DecodeError(SequenceError):
    """A result row could not be mapped onto a SequenceRecord."""

    def __init__(self, message: str, column: str | None = None) -> None:
        self.column = column
        super().__init__(message)
