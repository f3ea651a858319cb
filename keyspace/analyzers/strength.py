"""
Strength Estimator
===================

Combinatorial entropy estimate for a password, assuming each character
is drawn uniformly from the charset profile's effective alphabet:

    H = length * log2(effective_size)

The estimate is rounded to two decimal places and banded into a
qualitative label.  A strength-meter fill percentage is derived by
clamping the bits to ``[0, max_bits]`` and scaling to ``[0, 100]``.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math

from keyspace.core.models import CharsetProfile, EntropyEstimate, PasswordStrength

DEFAULT_MAX_BITS = 80.0

# Lower bound (inclusive) of each band, strongest first
_STRENGTH_BANDS: list[tuple[float, PasswordStrength]] = [
    (80.0, PasswordStrength.VERY_STRONG),
    (60.0, PasswordStrength.STRONG),
    (36.0, PasswordStrength.FAIR),
    (28.0, PasswordStrength.WEAK),
]


def strength_label(bits: float) -> PasswordStrength:
    """Map entropy *bits* onto its half-open strength band.

    >>> strength_label(27.99)
    <PasswordStrength.VERY_WEAK: 'very_weak'>
    >>> strength_label(28.0)
    <PasswordStrength.WEAK: 'weak'>
    """
    for lower, label in _STRENGTH_BANDS:
        if bits >= lower:
            return label
    return PasswordStrength.VERY_WEAK


def entropy_to_percent(bits: float, max_bits: float = DEFAULT_MAX_BITS) -> int:
    """Scale *bits* to a 0-100 meter fill, clamped at *max_bits*.

    Rounds half up, so 0.5% shows as 1%.
    """
    clamped = max(0.0, min(bits, max_bits))
    return int(math.floor(clamped / max_bits * 100 + 0.5))


class StrengthEstimator:
    """Turns a candidate and its charset profile into an entropy estimate.

    Args:
        max_bits: Entropy at which the meter reads 100%.
    """

    def __init__(self, max_bits: float = DEFAULT_MAX_BITS) -> None:
        if max_bits <= 0:
            raise ValueError(f"max_bits must be positive, got {max_bits}")
        self.max_bits = max_bits

    def estimate(self, candidate: str, profile: CharsetProfile) -> EntropyEstimate:
        """Estimate the entropy of *candidate*.

        Args:
            candidate: The password being evaluated.
            profile: Charset profile of *candidate*.

        Returns:
            EntropyEstimate with bits, label, and meter percentage.
        """
        bits = self.entropy_bits(len(candidate), profile.effective_size)
        return EntropyEstimate(
            bits=bits,
            label=strength_label(bits),
            percent=entropy_to_percent(bits, self.max_bits),
        )

    @staticmethod
    def entropy_bits(length: int, pool_size: int) -> float:
        """Combinatorial entropy ``length * log2(pool_size)``, 2 places.

        Zero for an empty candidate and for pools of size 0 or 1, where the
        logarithm would be zero or undefined.
        """
        if length <= 0 or pool_size <= 1:
            return 0.0
        return round(length * math.log2(pool_size), 2)


_default_estimator = StrengthEstimator()


def estimate(candidate: str, profile: CharsetProfile) -> EntropyEstimate:
    """Module-level shortcut for :meth:`StrengthEstimator.estimate`."""
    return _default_estimator.estimate(candidate, profile)
