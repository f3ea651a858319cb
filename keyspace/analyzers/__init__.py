"""
Keyspace Analyzers
===================

Charset classification, entropy estimation, crack time projection, and
password generation.
"""

from keyspace.analyzers.charset import CharsetAnalyzer
from keyspace.analyzers.crack_time import CrackTimeSimulator
from keyspace.analyzers.generator import PasswordGenerator
from keyspace.analyzers.strength import StrengthEstimator

__all__ = [
    "CharsetAnalyzer",
    "CrackTimeSimulator",
    "PasswordGenerator",
    "StrengthEstimator",
]
