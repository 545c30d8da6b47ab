from types import MappingProxyType

from ..charset import CharacterClass
from .abstract import AbstractDTO, Count

DEFAULT_LENGTH = 12

_COUNT_FIELDS = MappingProxyType(
    {
        CharacterClass.UPPERCASE: "uppercase_count",
        CharacterClass.LOWERCASE: "lowercase_count",
        CharacterClass.DIGIT: "numbers_count",
        CharacterClass.SPECIAL: "special_characters_count",
    }
)


class GenerationRequest(AbstractDTO):
    """
    Describes the password to generate.

    A per-class count left as ``None`` excludes the class from the password
    altogether, while ``0`` keeps the class eligible for the filler positions
    without guaranteeing any of its characters. When every count is ``None``, each
    class is required at least once.

    The length is not constrained here: a length below one is reported by the
    generator as :class:`~pwdkit.exc.InvalidLengthError`.
    """

    length: int = DEFAULT_LENGTH
    uppercase_count: Count = None
    lowercase_count: Count = None
    numbers_count: Count = None
    special_characters_count: Count = None

    def counts(self) -> dict[CharacterClass, int | None]:
        return {cls: getattr(self, name) for cls, name in _COUNT_FIELDS.items()}

    def minimums(self) -> dict[CharacterClass, int]:
        """
        Returns the minimum count of every active class, in registry order.
        """
        counts = self.counts()
        if all(count is None for count in counts.values()):
            return dict.fromkeys(counts, 1)
        return {cls: count for cls, count in counts.items() if count is not None}
