import logging
from dataclasses import dataclass

from .. import dto
from ..charset import alphabet
from ..exc import InvalidLengthError, OverconstrainedRequestError
from ..util.random import RandomSource, default_source

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PasswordGenerator:
    """
    Generates passwords that honour the per-class minimum counts of a
    :class:`~pwdkit.dto.GenerationRequest`.

    Attributes:
        rng: The randomness source. When left unset, every call draws from a
            generator private to the calling thread.
    """

    rng: RandomSource | None = None

    def generate(self, request: dto.GenerationRequest) -> str:
        """
        Raises:
            InvalidLengthError: If the requested length is less than one.
            OverconstrainedRequestError: If the per-class minimums add up to more
                than the requested length.
        """
        if request.length < 1:
            raise InvalidLengthError(
                "Password length must be at least 1",
                InvalidLengthError.Context(length=request.length),
            )

        minimums = request.minimums()
        required = sum(minimums.values())
        if required > request.length:
            raise OverconstrainedRequestError(
                "Sum of required character counts ({ctx[required]}) exceeds "
                "password length ({ctx[length]})",
                OverconstrainedRequestError.Context(
                    required=required, length=request.length
                ),
            )

        rng = self.rng if self.rng is not None else default_source()
        chars = [
            rng.choice(alphabet(cls))
            for cls, count in minimums.items()
            for _ in range(count)
        ]

        # the filler is uniform over the joined pool, so larger alphabets fill
        # proportionally more of the remaining positions
        pool = "".join(alphabet(cls) for cls in minimums)
        chars.extend(rng.choice(pool) for _ in range(request.length - required))

        rng.shuffle(chars)

        logger.debug(
            "generated a %d-character password from classes %s",
            request.length,
            ", ".join(minimums),
        )
        return "".join(chars)
