"""
Keyspace Core Data Models
==========================

Pydantic models for the strength meter and the brute-force simulator.
Every model is derived per evaluation and never persisted; all of them
serialise to JSON for the report generator.

The charset profile is a fixed-class approximation of the alphabet an
attacker must search: 26 lowercase, 26 uppercase, 10 digits, and 32
"special" symbols, summed over the classes a password touches.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import enum
import math
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer


# ===================================================================== #
#  Class sizes
# ===================================================================== #

LOWER_SIZE = 26
UPPER_SIZE = 26
DIGIT_SIZE = 10
SPECIAL_SIZE = 32  # approximate printable symbol count

# JSON stand-in for an overflowed guess count or crack time
INFINITY_TOKEN = "inf"


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PasswordStrength(str, enum.Enum):
    """Qualitative strength label derived from entropy bits.

    Half-open bands: [0, 28) very weak, [28, 36) weak, [36, 60) fair,
    [60, 80) strong, [80, inf) very strong.
    """

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def display(self) -> str:
        """Title-cased label, e.g. ``"Very Weak"``."""
        return self.value.replace("_", " ").title()


class AttackOutcome(str, enum.Enum):
    """Which branch an attack simulation ended in."""

    EMPTY = "empty"
    DICTIONARY = "dictionary"
    BRUTE_FORCE = "brute_force"
    INVALID = "invalid"


# ===================================================================== #
#  Core Models
# ===================================================================== #


class CharsetProfile(BaseModel):
    """Character classes present in a candidate password.

    Attributes:
        has_lower: Any of ``a``-``z``.
        has_upper: Any of ``A``-``Z``.
        has_digit: Any of ``0``-``9``.
        has_special: Any character that is not an ASCII letter or digit.
        effective_size: Sum of the fixed class sizes for classes present.
    """

    model_config = ConfigDict(frozen=True)

    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_special: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_size(self) -> int:
        size = 0
        if self.has_lower:
            size += LOWER_SIZE
        if self.has_upper:
            size += UPPER_SIZE
        if self.has_digit:
            size += DIGIT_SIZE
        if self.has_special:
            size += SPECIAL_SIZE
        return size


class EntropyEstimate(BaseModel):
    """Entropy estimate for a candidate password.

    Attributes:
        bits: ``length * log2(effective_size)`` rounded to 2 places.
        label: Qualitative strength band.
        percent: Strength-meter fill in [0, 100].
    """

    model_config = ConfigDict(frozen=True)

    bits: float = Field(default=0.0, ge=0.0)
    label: PasswordStrength = PasswordStrength.VERY_WEAK
    percent: int = Field(default=0, ge=0, le=100)


class CrackEstimate(BaseModel):
    """Projected brute-force crack time.

    Attributes:
        total_guesses: Size of the search space; ``inf`` past the float
            range, ``None`` for a dictionary hit.
        log10_guesses: Base-10 logarithm of the search space, ``None`` for
            a dictionary hit.
        seconds: Time to exhaust the search space at *guess_rate*; may be
            ``inf``.
        human_readable: Formatted duration (``"12.34 years"``, ``"∞"``).
        guess_rate: Assumed guesses per second.
        dictionary_hit: Whether the candidate is a known-weak password.
    """

    model_config = ConfigDict(frozen=True)

    total_guesses: Optional[float] = None
    log10_guesses: Optional[float] = None
    seconds: float = 0.0
    human_readable: str = ""
    guess_rate: float = Field(..., gt=0.0)
    dictionary_hit: bool = False

    @field_serializer("total_guesses", "seconds", when_used="json")
    def _serialize_unbounded(self, value: Optional[float]) -> Union[float, str, None]:
        """JSON has no infinity literal; overflowed values become ``"inf"``."""
        if value is not None and math.isinf(value):
            return INFINITY_TOKEN
        return value


# ===================================================================== #
#  Presentation Models
# ===================================================================== #


class RequirementCheck(BaseModel):
    """One line of the requirement checklist.

    Attributes:
        key: Stable identifier (``lowercase``, ``length``, ``match`` ...).
        label: Human-readable requirement text.
        met: Whether the candidate satisfies it.
    """

    key: str
    label: str
    met: bool = False

    @property
    def marker(self) -> str:
        return "✓" if self.met else "✗"


class MeterReading(BaseModel):
    """Everything the strength meter displays for one candidate."""

    password_masked: str = ""
    length: int = 0
    profile: CharsetProfile = Field(default_factory=CharsetProfile)
    estimate: EntropyEstimate = Field(default_factory=EntropyEstimate)
    display_label: str = ""
    requirements: list[RequirementCheck] = Field(default_factory=list)

    @property
    def unmet_requirements(self) -> list[RequirementCheck]:
        return [r for r in self.requirements if not r.met]


class AttackReport(BaseModel):
    """Result of an attack simulation as shown to the user.

    Attributes:
        outcome: Branch the simulation ended in.
        headline: Short result line.
        time_text: Estimated-time line, empty when no time was computed.
        crack: Underlying estimate, ``None`` for empty or invalid input.
        fill_percent: Attack progress-bar fill (0 or 100).
        animation_ms: Suggested progress-bar animation duration.
    """

    outcome: AttackOutcome
    headline: str
    time_text: str = ""
    crack: Optional[CrackEstimate] = None
    fill_percent: int = Field(default=0, ge=0, le=100)
    animation_ms: float = Field(default=0.0, ge=0.0)
