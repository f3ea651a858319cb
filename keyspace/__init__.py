"""
Keyspace -- Password Strength Meter & Brute-Force Simulator
============================================================

Estimates password entropy from a fixed-class charset heuristic and
projects brute-force crack time at an assumed guess rate, routing the
arithmetic through logarithms once the search space leaves float range.

The three core operations are pure and deterministic::

    from keyspace import analyze, estimate, simulate

    profile = analyze("Tr0ub4dor&3")
    estimate("Tr0ub4dor&3", profile).bits        # 72.1
    simulate("Tr0ub4dor&3", profile, 2e9, set()).human_readable
"""

__version__ = "1.0.0"

from keyspace.analyzers.charset import analyze
from keyspace.analyzers.crack_time import human_time, simulate
from keyspace.analyzers.strength import entropy_to_percent, estimate, strength_label
from keyspace.core.errors import DomainError

__all__ = [
    "DomainError",
    "__version__",
    "analyze",
    "entropy_to_percent",
    "estimate",
    "human_time",
    "simulate",
    "strength_label",
]
