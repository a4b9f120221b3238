"""Exceptions raised by lexbench."""


class LexbenchError(Exception):
    """Base class for lexbench errors."""


class EmptyLexemePoolError(LexbenchError, ValueError):
    """Raised when code text yields no lexemes to seed the structures with."""

    def __init__(self, message: str = "No lexemes available for performance analysis"):
        super().__init__(message)
