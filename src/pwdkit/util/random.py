import random
import threading
from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol, TypeVar

__all__ = "RandomSource", "default_source", "secure_source"

T = TypeVar("T")

_local = threading.local()


class RandomSource(Protocol):
    """
    The subset of :class:`random.Random` the generator relies on. Any instance of
    :class:`random.Random` (seeded or not) or :class:`random.SystemRandom` fits.
    """

    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def default_source() -> RandomSource:
    """
    Returns a :class:`random.Random` instance private to the calling thread.
    """
    try:
        return _local.rng  # type: ignore[no-any-return]
    except AttributeError:
        _local.rng = random.Random()
        return _local.rng  # type: ignore[no-any-return]


def secure_source() -> RandomSource:
    """Returns a source backed by :func:`os.urandom`."""
    return random.SystemRandom()
