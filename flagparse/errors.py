from __future__ import annotations


class FlagParseError(Exception):
    """Base class for everything `flagparse.parse` can raise."""

    def __init__(self, message: str, *, flag: str | None = None) -> None:
        super().__init__(message)
        self.flag = flag

    def __str__(self) -> str:
        msg = super().__str__()
        if self.flag is None:
            return msg
        return f"--{self.flag}: {msg}"


class EmptyValueList(FlagParseError, ValueError):
    """A flag's values were empty after trimming (e.g. a literal `[]`)."""


class UnparseableCommand(FlagParseError, ValueError):
    """Reserved: the tokenizer currently accepts every input."""


class ConversionInvariantViolation(FlagParseError, RuntimeError):
    """
    A value the classifier accepted failed to convert.

    This is an engine bug, not bad input; it is kept apart from the
    ValueError family so callers can tell the two apart.
    """
