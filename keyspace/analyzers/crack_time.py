"""
Crack Time Simulator
=====================

Projects how long an exhaustive brute-force search would take against a
password, given the charset profile and an assumed attacker guess rate.

The search space is ``effective_size ** length``.  For long or
high-entropy passwords that number leaves the IEEE-754 double range
(about 1.8e308), so once ``length * log10(effective_size)`` exceeds 308
the projection is carried out on logarithms instead:

    log10(seconds) = log10(total) - log10(guess_rate)

and the result is only reported as infinite if the *seconds* themselves
overflow.

A small dictionary of known-weak passwords is checked first against the
lowercased candidate; a hit is treated as instantly guessable regardless
of the guess rate.

Attack speed reference:
    - Offline fast hash (MD5/SHA-1 on a consumer GPU): ~10^9 guesses/s.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from keyspace.core.errors import DomainError
from keyspace.core.models import CharsetProfile, CrackEstimate

# Largest base-10 exponent that still fits in a float
MAX_LOG10 = 308

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000  # 365-day year

INSTANT_DISPLAY = "< 1 second"


def human_time(seconds: float) -> str:
    """Format a duration with two decimals in the largest fitting unit.

    >>> human_time(90)
    '1.50 minutes'
    >>> human_time(float("inf"))
    '∞'
    """
    if not math.isfinite(seconds):
        return "∞"
    if seconds < SECONDS_PER_MINUTE:
        return f"{seconds:.2f} seconds"
    if seconds < SECONDS_PER_HOUR:
        return f"{seconds / SECONDS_PER_MINUTE:.2f} minutes"
    if seconds < SECONDS_PER_DAY:
        return f"{seconds / SECONDS_PER_HOUR:.2f} hours"
    if seconds < SECONDS_PER_YEAR:
        return f"{seconds / SECONDS_PER_DAY:.2f} days"
    return f"{seconds / SECONDS_PER_YEAR:.2f} years"


def attack_duration_ms(seconds: float, max_ms: float = 2500.0) -> float:
    """Progress-bar animation length for a projected crack time.

    Grows with the order of magnitude of *seconds*, starting at 400 ms and
    capped at *max_ms*.
    """
    if not math.isfinite(seconds):
        return max_ms
    return min(max_ms, 400 + math.log10(max(seconds, 0.0) + 1) * 600)


class CrackTimeSimulator:
    """Brute-force crack time projection with a dictionary short-circuit.

    Usage::

        simulator = CrackTimeSimulator(guess_rate=2e9, dictionary={"password"})
        estimate = simulator.simulate("hunter2", analyze("hunter2"))
        print(estimate.human_readable)

    Args:
        guess_rate: Default attacker throughput in guesses per second.
        dictionary: Default known-weak passwords. Only the candidate is
            lowercased before lookup, so entries should be lowercase.
    """

    def __init__(
        self,
        guess_rate: float = 2e9,
        dictionary: Iterable[str] = (),
    ) -> None:
        self.guess_rate = self._check_rate(guess_rate)
        self.dictionary = frozenset(dictionary)

    def simulate(
        self,
        candidate: str,
        profile: CharsetProfile,
        guess_rate: float | None = None,
        dictionary: Iterable[str] | None = None,
    ) -> CrackEstimate:
        """Project the time to brute-force *candidate*.

        Args:
            candidate: Non-empty password being evaluated.
            profile: Charset profile of *candidate*.
            guess_rate: Overrides the simulator's guess rate.
            dictionary: Overrides the simulator's known-weak list.

        Returns:
            CrackEstimate for the first matching branch: dictionary hit,
            direct exponentiation, or the logarithmic path.

        Raises:
            ValueError: If *candidate* is empty or *guess_rate* is not
                positive.
            DomainError: If *profile* has no classified characters.
        """
        if not candidate:
            raise ValueError("cannot simulate an attack on an empty password")

        rate = self.guess_rate if guess_rate is None else self._check_rate(guess_rate)
        words = self.dictionary if dictionary is None else frozenset(dictionary)

        if candidate.lower() in words:
            return CrackEstimate(
                seconds=0.0,
                human_readable=INSTANT_DISPLAY,
                guess_rate=rate,
                dictionary_hit=True,
            )

        size = profile.effective_size
        if size == 0:
            raise DomainError("no printable characters")

        length = len(candidate)
        log10_total = length * math.log10(size)

        if log10_total > MAX_LOG10:
            total = math.inf
            log10_seconds = log10_total - math.log10(rate)
            seconds = math.inf if log10_seconds > MAX_LOG10 else 10 ** log10_seconds
        else:
            total = float(size) ** length
            seconds = total / rate

        return CrackEstimate(
            total_guesses=total,
            log10_guesses=log10_total,
            seconds=seconds,
            human_readable=human_time(seconds),
            guess_rate=rate,
        )

    @staticmethod
    def _check_rate(guess_rate: float) -> float:
        if not guess_rate > 0:
            raise ValueError(f"guess rate must be positive, got {guess_rate}")
        return float(guess_rate)


_default_simulator = CrackTimeSimulator()


def simulate(
    candidate: str,
    profile: CharsetProfile,
    guess_rate: float,
    dictionary: Iterable[str],
) -> CrackEstimate:
    """Module-level shortcut for :meth:`CrackTimeSimulator.simulate`."""
    return _default_simulator.simulate(candidate, profile, guess_rate, dictionary)
