from flagparse.collection import TypedCollection
from flagparse.errors import (
    ConversionInvariantViolation,
    EmptyValueList,
    FlagParseError,
    UnparseableCommand,
)
from flagparse.inference import TypeVariant, classify, convert, infer
from flagparse.parser import parse
from flagparse.tokenizer import accumulate

__all__ = [
    "parse",
    "accumulate",
    "classify",
    "convert",
    "infer",
    "TypeVariant",
    "TypedCollection",
    "FlagParseError",
    "EmptyValueList",
    "UnparseableCommand",
    "ConversionInvariantViolation",
]

__version__ = "0.1.0"
