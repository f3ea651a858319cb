"""
Keyspace Engine
================

Central controller for the Keyspace strength meter. The KeyspaceEngine
class composes the charset analyzer, strength estimator, and crack time
simulator in order and maps their numbers onto display-ready models: the
strength meter reading, the requirement checklist, the confirmation
match, and the attack simulation report.

The analyzers stay free of rendering concerns; everything the user sees
as text is produced here. The engine also guards the simulator's
precondition (non-empty input) and turns a :class:`DomainError` into an
``invalid`` attack outcome.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import Optional

from shared.config import KeyspaceConfig
from shared.logger import KeyspaceLogger
from shared.models import Finding, ScanResult, Severity

from keyspace.analyzers.charset import CharsetAnalyzer
from keyspace.analyzers.crack_time import CrackTimeSimulator, attack_duration_ms
from keyspace.analyzers.generator import PasswordGenerator, RandomSource
from keyspace.analyzers.strength import StrengthEstimator
from keyspace.core.errors import DomainError
from keyspace.core.models import (
    AttackOutcome,
    AttackReport,
    CharsetProfile,
    MeterReading,
    PasswordStrength,
    RequirementCheck,
)

EMPTY_PROMPT = "Type a password"

_STRENGTH_SEVERITY: dict[PasswordStrength, Severity] = {
    PasswordStrength.VERY_WEAK: Severity.CRITICAL,
    PasswordStrength.WEAK: Severity.HIGH,
    PasswordStrength.FAIR: Severity.MEDIUM,
    PasswordStrength.STRONG: Severity.LOW,
    PasswordStrength.VERY_STRONG: Severity.INFO,
}


class KeyspaceEngine:
    """Orchestrates strength evaluation and attack simulation.

    Usage::

        engine = KeyspaceEngine()
        reading = engine.evaluate("P@ssw0rd!")
        report = engine.simulate_attack("P@ssw0rd!")
        suggestion = engine.suggest()

    Attributes:
        config: Keyspace configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[KeyspaceConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or KeyspaceConfig()
        settings = self.config.global_settings
        self.logger = KeyspaceLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

        meter = self.config.meter
        self._charset_analyzer = CharsetAnalyzer()
        self._strength_estimator = StrengthEstimator(max_bits=meter.max_entropy_bits)
        self._simulator = CrackTimeSimulator(
            guess_rate=meter.guess_rate,
            dictionary=meter.dictionary,
        )
        self._generator = PasswordGenerator(rng, default_length=meter.generator_length)

    # ------------------------------------------------------------------ #
    #  Strength Meter
    # ------------------------------------------------------------------ #

    def evaluate(self, candidate: str) -> MeterReading:
        """Compute the strength meter reading for *candidate*.

        Args:
            candidate: The password to evaluate; may be empty.

        Returns:
            MeterReading with profile, entropy estimate, requirement
            checklist, and display label.
        """
        profile = self._charset_analyzer.analyze(candidate)
        estimate = self._strength_estimator.estimate(candidate, profile)
        label = estimate.label.display if candidate else EMPTY_PROMPT

        self.logger.debug(
            "Evaluated candidate: %.2f bits (%s)",
            estimate.bits,
            estimate.label.value,
            length=len(candidate),
            pool_size=profile.effective_size,
        )

        return MeterReading(
            password_masked=self.mask(candidate),
            length=len(candidate),
            profile=profile,
            estimate=estimate,
            display_label=label,
            requirements=self.requirements(candidate, profile),
        )

    def requirements(
        self,
        candidate: str,
        profile: Optional[CharsetProfile] = None,
    ) -> list[RequirementCheck]:
        """Build the requirement checklist for *candidate*."""
        profile = profile or self._charset_analyzer.analyze(candidate)
        min_length = self.config.meter.min_length
        return [
            RequirementCheck(key="lowercase", label="Lowercase letter", met=profile.has_lower),
            RequirementCheck(key="uppercase", label="Uppercase letter", met=profile.has_upper),
            RequirementCheck(key="number", label="Number", met=profile.has_digit),
            RequirementCheck(
                key="special",
                label="Special character (@, #, $, etc.)",
                met=profile.has_special,
            ),
            RequirementCheck(
                key="length",
                label=f"At least {min_length} characters",
                met=len(candidate) >= min_length,
            ),
        ]

    @staticmethod
    def check_match(candidate: str, confirmation: str) -> RequirementCheck:
        """Compare a confirmation entry against the candidate."""
        met = bool(confirmation) and confirmation == candidate
        return RequirementCheck(
            key="match",
            label="Passwords match" if met else "Passwords do not match",
            met=met,
        )

    # ------------------------------------------------------------------ #
    #  Attack Simulation
    # ------------------------------------------------------------------ #

    def simulate_attack(
        self,
        candidate: str,
        guess_rate: Optional[float] = None,
    ) -> AttackReport:
        """Simulate a dictionary then brute-force attack on *candidate*.

        Args:
            candidate: The password to attack; empty input is reported,
                not simulated.
            guess_rate: Overrides the configured guesses per second.

        Returns:
            AttackReport describing the outcome.

        Raises:
            ValueError: If *guess_rate* is not positive.
        """
        with self.logger.operation("simulate_attack"):
            if not candidate:
                return AttackReport(
                    outcome=AttackOutcome.EMPTY,
                    headline="Enter a password to simulate attack!",
                )

            profile = self._charset_analyzer.analyze(candidate)
            try:
                with self.logger.timed("crack time projection"):
                    crack = self._simulator.simulate(candidate, profile, guess_rate)
            except DomainError as exc:
                self.logger.warning(
                    "Attack simulation rejected: %s", exc, outcome=AttackOutcome.INVALID.value
                )
                return AttackReport(
                    outcome=AttackOutcome.INVALID,
                    headline="Password must contain printable characters.",
                )

            if crack.dictionary_hit:
                self.logger.info(
                    "Candidate found in dictionary",
                    outcome=AttackOutcome.DICTIONARY.value,
                    length=len(candidate),
                )
                return AttackReport(
                    outcome=AttackOutcome.DICTIONARY,
                    headline="Dictionary Attack: Very common password!",
                    time_text=f"Estimated time: {crack.human_readable}",
                    crack=crack,
                    fill_percent=100,
                )

            self.logger.info(
                "Brute-force projection: %s",
                crack.human_readable,
                outcome=AttackOutcome.BRUTE_FORCE.value,
                length=len(candidate),
                pool_size=profile.effective_size,
                log10_guesses=crack.log10_guesses,
            )
            return AttackReport(
                outcome=AttackOutcome.BRUTE_FORCE,
                headline="Brute-Force Attack estimate:",
                time_text=f"Estimated time to crack: {crack.human_readable}",
                crack=crack,
                fill_percent=100,
                animation_ms=attack_duration_ms(
                    crack.seconds, self.config.meter.animation_max_ms
                ),
            )

    # ------------------------------------------------------------------ #
    #  Suggestions
    # ------------------------------------------------------------------ #

    def suggest(self, length: Optional[int] = None) -> str:
        """Generate a password meeting every character-class requirement."""
        return self._generator.generate(length)

    # ------------------------------------------------------------------ #
    #  Report assembly
    # ------------------------------------------------------------------ #

    def analyze_password(
        self,
        candidate: str,
        guess_rate: Optional[float] = None,
    ) -> ScanResult:
        """Evaluate and attack *candidate*, collecting findings for reports.

        Args:
            candidate: The password to analyse.
            guess_rate: Overrides the configured guesses per second.

        Returns:
            ScanResult with strength, attack, and requirement findings.
        """
        reading = self.evaluate(candidate)
        attack = self.simulate_attack(candidate, guess_rate)

        result = ScanResult(
            tool_name="keyspace",
            target=reading.password_masked or "[empty]",
        )
        attack_data = attack.model_dump(mode="json")
        result.metadata = {
            "reading": reading.model_dump(mode="json"),
            "attack": attack_data,
        }

        estimate = reading.estimate
        result.add_finding(Finding(
            title=f"Password Strength: {reading.display_label}",
            description=(
                f"Entropy: {estimate.bits:.2f} bits. "
                f"Character pool: {reading.profile.effective_size}. "
                f"Length: {reading.length}. Meter: {estimate.percent}%."
            ),
            severity=(
                _STRENGTH_SEVERITY[estimate.label] if candidate else Severity.INFO
            ),
            evidence={
                "entropy_bits": estimate.bits,
                "char_pool_size": reading.profile.effective_size,
                "length": reading.length,
                "strength": estimate.label.value,
            },
        ))

        if attack.outcome == AttackOutcome.DICTIONARY:
            result.add_finding(Finding(
                title="Common Password",
                description=f"{attack.headline} {attack.time_text}",
                severity=Severity.CRITICAL,
                recommendation="Choose a password that is not on common-password lists.",
            ))
        elif attack.outcome == AttackOutcome.BRUTE_FORCE and attack.crack is not None:
            result.add_finding(Finding(
                title="Brute-Force Estimate",
                description=(
                    f"{attack.time_text} at "
                    f"{attack.crack.guess_rate:.0e} guesses/second."
                ),
                severity=Severity.INFO,
                evidence={
                    "log10_guesses": attack_data["crack"]["log10_guesses"],
                    "seconds": attack_data["crack"]["seconds"],
                },
            ))
        elif attack.outcome != AttackOutcome.EMPTY:
            result.add_finding(Finding(
                title="Attack Not Simulated",
                description=attack.headline,
                severity=Severity.MEDIUM,
            ))

        for check in reading.unmet_requirements:
            result.add_finding(Finding(
                title=f"Missing: {check.label}",
                description=f"The password does not satisfy: {check.label}.",
                severity=Severity.LOW,
                recommendation=f"Add: {check.label.lower()}.",
            ))

        return result.finalize(
            f"Password analysis: {reading.display_label}, "
            f"entropy={estimate.bits:.2f} bits"
            + (f", crack time {attack.crack.human_readable}" if attack.crack else "")
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def mask(candidate: str) -> str:
        """Show only the first and last character of *candidate*."""
        if len(candidate) <= 2:
            return "*" * len(candidate)
        return candidate[0] + "*" * (len(candidate) - 2) + candidate[-1]
