"""
Password Generator
===================

Builds suggestion passwords that satisfy every class of the requirement
checklist: at least one lowercase letter, one uppercase letter, one digit,
and one special character.  Remaining positions are drawn uniformly from
the union of all four classes and the result is shuffled.

The random source is injected so tests can pass a seeded
:class:`random.Random`; the default is the operating system CSPRNG.
"""

from __future__ import annotations

import secrets
import string
from typing import MutableSequence, Optional, Protocol, Sequence, TypeVar

_T = TypeVar("_T")

LOWERS = string.ascii_lowercase
UPPERS = string.ascii_uppercase
DIGITS = string.digits
SPECIALS = "!@#$%&*?_-+="
ALL_CHARACTERS = LOWERS + UPPERS + DIGITS + SPECIALS

MIN_LENGTH = 4


class RandomSource(Protocol):
    """The subset of :class:`random.Random` the generator relies on."""

    def choice(self, seq: Sequence[_T]) -> _T: ...

    def shuffle(self, x: MutableSequence[object]) -> None: ...


class PasswordGenerator:
    """Generate passwords containing every required character class.

    Usage::

        PasswordGenerator().generate(14)
        PasswordGenerator(random.Random(7)).generate(20)

    Args:
        rng: Random source; defaults to :class:`secrets.SystemRandom`.
        default_length: Length used when :meth:`generate` gets none.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        default_length: int = 14,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else secrets.SystemRandom()
        self.default_length = self._check_length(default_length)

    def generate(self, length: Optional[int] = None) -> str:
        """Return a new password of *length* characters.

        Raises:
            ValueError: If *length* is below 4, the number of required
                classes.
        """
        size = self.default_length if length is None else self._check_length(length)

        chars = [self._rng.choice(pool) for pool in (LOWERS, UPPERS, DIGITS, SPECIALS)]
        chars.extend(self._rng.choice(ALL_CHARACTERS) for _ in range(size - len(chars)))
        self._rng.shuffle(chars)
        return "".join(chars)

    @staticmethod
    def _check_length(length: int) -> int:
        if length < MIN_LENGTH:
            raise ValueError(
                f"password length must be at least {MIN_LENGTH}, got {length}"
            )
        return length
