from dataclasses import dataclass

from typing_extensions import TypedDict, override

__all__ = (
    "ApplicationError",
    "GenerationError",
    "InvalidLengthError",
    "OverconstrainedRequestError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class GenerationError(ApplicationError):
    """
    Base class for errors raised while generating a password from a request that
    cannot be satisfied.
    """


@dataclass(slots=True)
class InvalidLengthError(GenerationError):
    """Raised when a password shorter than one character is requested."""

    class Context(TypedDict):
        length: int

    ctx: Context


@dataclass(slots=True)
class OverconstrainedRequestError(GenerationError):
    """
    Raised when the per-class minimum counts of a request add up to more characters
    than the requested password length.
    """

    class Context(TypedDict):
        """
        Attributes:
            required: The sum of all present per-class minimum counts.
            length: The requested password length.
        """

        required: int
        length: int

    ctx: Context
