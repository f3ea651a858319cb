"""
Keyspace Core Module
=====================

Data models and error types for the Keyspace strength meter. The engine
lives in :mod:`keyspace.core.engine`.
"""

from keyspace.core.errors import DomainError
from keyspace.core.models import (
    AttackOutcome,
    AttackReport,
    CharsetProfile,
    CrackEstimate,
    EntropyEstimate,
    MeterReading,
    PasswordStrength,
    RequirementCheck,
)

__all__ = [
    "AttackOutcome",
    "AttackReport",
    "CharsetProfile",
    "CrackEstimate",
    "DomainError",
    "EntropyEstimate",
    "MeterReading",
    "PasswordStrength",
    "RequirementCheck",
]
