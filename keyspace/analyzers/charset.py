"""
Charset Analyzer
=================

Classifies which character classes a password uses and derives the
effective alphabet size used as the base of the entropy exponent.

Only ASCII letters and digits are recognised as their own classes; every
other character (punctuation, whitespace, accented or non-Latin letters,
emoji) counts as "special".  The size is a per-class approximation, not a
count of distinct symbols: ``"1111"`` scores 10 and both ``"aaaa"`` and
``"abcd"`` score 26.
"""

from __future__ import annotations

import string

from keyspace.core.models import CharsetProfile

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


class CharsetAnalyzer:
    """Builds a :class:`CharsetProfile` for a candidate string.

    Usage::

        profile = CharsetAnalyzer().analyze("Tr0ub4dor&3")
        profile.effective_size  # 94
    """

    def analyze(self, candidate: str) -> CharsetProfile:
        """Classify *candidate*. Total over all strings, including ``""``."""
        return CharsetProfile(
            has_lower=any(c in string.ascii_lowercase for c in candidate),
            has_upper=any(c in string.ascii_uppercase for c in candidate),
            has_digit=any(c in string.digits for c in candidate),
            has_special=any(c not in _ASCII_ALNUM for c in candidate),
        )


_default_analyzer = CharsetAnalyzer()


def analyze(candidate: str) -> CharsetProfile:
    """Module-level shortcut for :meth:`CharsetAnalyzer.analyze`."""
    return _default_analyzer.analyze(candidate)
