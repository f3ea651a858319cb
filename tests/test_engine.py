import json
import math
import random

import pytest

from keyspace.core.engine import EMPTY_PROMPT, KeyspaceEngine
from keyspace.core.models import AttackOutcome, CharsetProfile, PasswordStrength
from shared.models import Severity


# ---------------------------------------------------------------------- #
#  Strength meter
# ---------------------------------------------------------------------- #


def test_empty_reading_shows_prompt(engine):
    reading = engine.evaluate("")
    assert reading.display_label == EMPTY_PROMPT
    assert reading.estimate.bits == 0
    assert reading.estimate.percent == 0
    assert reading.password_masked == ""
    assert all(not check.met for check in reading.requirements)


def test_reading_for_mixed_password(engine):
    reading = engine.evaluate("Passw0rd!")
    assert reading.length == 9
    assert reading.profile.effective_size == 94
    assert reading.estimate.bits == 58.99
    assert reading.estimate.label == PasswordStrength.FAIR
    assert reading.display_label == "Fair"
    assert reading.unmet_requirements == []
    assert reading.password_masked == "P*******!"


def test_requirement_checklist(engine):
    checks = {check.key: check.met for check in engine.evaluate("abc1").requirements}
    assert checks == {
        "lowercase": True,
        "uppercase": False,
        "number": True,
        "special": False,
        "length": False,
    }


def test_min_length_comes_from_config(config):
    config.meter.min_length = 4
    engine = KeyspaceEngine(config)
    length_check = engine.evaluate("abcd").requirements[-1]
    assert length_check.met
    assert length_check.label == "At least 4 characters"


@pytest.mark.parametrize(
    "candidate, confirmation, met",
    [
        ("secret", "secret", True),
        ("secret", "Secret", False),
        ("secret", "", False),
        ("", "", False),
    ],
)
def test_check_match(candidate, confirmation, met):
    check = KeyspaceEngine.check_match(candidate, confirmation)
    assert check.met is met
    assert check.label == ("Passwords match" if met else "Passwords do not match")


@pytest.mark.parametrize(
    "candidate, masked",
    [("", ""), ("a", "*"), ("ab", "**"), ("abc", "a*c"), ("hunter2", "h*****2")],
)
def test_mask(candidate, masked):
    assert KeyspaceEngine.mask(candidate) == masked


# ---------------------------------------------------------------------- #
#  Attack simulation
# ---------------------------------------------------------------------- #


def test_empty_password_is_not_simulated(engine, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("simulator must not be called for empty input")

    monkeypatch.setattr(engine._simulator, "simulate", fail)
    report = engine.simulate_attack("")
    assert report.outcome == AttackOutcome.EMPTY
    assert report.headline == "Enter a password to simulate attack!"
    assert report.crack is None
    assert report.fill_percent == 0


def test_dictionary_attack(engine):
    report = engine.simulate_attack("Welcome")
    assert report.outcome == AttackOutcome.DICTIONARY
    assert report.headline == "Dictionary Attack: Very common password!"
    assert report.time_text == "Estimated time: < 1 second"
    assert report.crack.seconds == 0
    assert report.fill_percent == 100


def test_brute_force_attack(engine):
    report = engine.simulate_attack("zebra")
    assert report.outcome == AttackOutcome.BRUTE_FORCE
    assert report.headline == "Brute-Force Attack estimate:"
    assert report.time_text == "Estimated time to crack: 0.01 seconds"
    assert report.fill_percent == 100
    assert report.animation_ms == pytest.approx(
        400 + math.log10(26 ** 5 / 2e9 + 1) * 600
    )


def test_infinite_attack_uses_maximum_animation(engine):
    report = engine.simulate_attack("aA1!" * 125)
    assert report.crack.seconds == math.inf
    assert report.time_text == "Estimated time to crack: ∞"
    assert report.animation_ms == 2500


def test_guess_rate_override(engine):
    slow = engine.simulate_attack("zebra", guess_rate=1.0)
    assert slow.crack.guess_rate == 1.0
    assert slow.crack.seconds == pytest.approx(26 ** 5)


def test_invalid_guess_rate_propagates(engine):
    with pytest.raises(ValueError):
        engine.simulate_attack("zebra", guess_rate=-1)


def test_domain_error_becomes_invalid_outcome(engine, monkeypatch):
    monkeypatch.setattr(engine._charset_analyzer, "analyze", lambda candidate: CharsetProfile())
    report = engine.simulate_attack("zebra")
    assert report.outcome == AttackOutcome.INVALID
    assert report.headline == "Password must contain printable characters."
    assert report.crack is None
    assert report.fill_percent == 0


def test_custom_dictionary(custom_dictionary_config):
    engine = KeyspaceEngine(custom_dictionary_config)
    assert engine.simulate_attack("HUNTER2").outcome == AttackOutcome.DICTIONARY
    assert engine.simulate_attack("Tr0ub4dor").outcome == AttackOutcome.DICTIONARY
    assert engine.simulate_attack("password").outcome == AttackOutcome.BRUTE_FORCE


# ---------------------------------------------------------------------- #
#  Suggestions
# ---------------------------------------------------------------------- #


def test_suggestion_meets_every_requirement(engine):
    suggestion = engine.suggest()
    assert len(suggestion) == 14
    assert engine.evaluate(suggestion).unmet_requirements == []


def test_suggestions_are_reproducible_with_seeded_source(config):
    first = KeyspaceEngine(config, rng=random.Random(3)).suggest(20)
    second = KeyspaceEngine(config, rng=random.Random(3)).suggest(20)
    assert first == second


def test_suggestion_length_validation(engine):
    with pytest.raises(ValueError):
        engine.suggest(3)


# ---------------------------------------------------------------------- #
#  Report assembly
# ---------------------------------------------------------------------- #


def test_analyze_common_password(engine):
    result = engine.analyze_password("password")
    titles = [f.title for f in result.findings]
    assert "Common Password" in titles
    assert result.highest_severity == Severity.CRITICAL
    assert result.target == "p******d"
    assert result.end_time is not None
    assert result.metadata["attack"]["outcome"] == "dictionary"
    assert result.metadata["reading"]["password_masked"] == "p******d"


def test_analyze_strong_password(engine):
    result = engine.analyze_password("Xk#9pL!2vQ@7mZ$4")
    titles = [f.title for f in result.findings]
    assert titles[0] == "Password Strength: Very Strong"
    assert "Brute-Force Estimate" in titles
    assert not any(t.startswith("Missing:") for t in titles)
    assert result.findings[0].severity == Severity.INFO
    assert "crack time" in result.summary


def test_analyze_empty_password(engine):
    result = engine.analyze_password("")
    assert result.target == "[empty]"
    assert result.metadata["attack"]["outcome"] == "empty"
    missing = [f for f in result.findings if f.title.startswith("Missing:")]
    assert len(missing) == 5


def test_analyze_password_uses_guess_rate_override(engine):
    result = engine.analyze_password("zebra", guess_rate=1.0)
    assert result.metadata["attack"]["crack"]["guess_rate"] == 1.0
    assert "days" in result.summary


def test_overflowed_report_is_strict_json(engine):
    result = engine.analyze_password("aA1!" * 125)
    assert result.metadata["attack"]["crack"]["seconds"] == "inf"
    estimate = next(f for f in result.findings if f.title == "Brute-Force Estimate")
    assert json.loads(estimate.evidence)["seconds"] == "inf"
    json.dumps(result.metadata, allow_nan=False)
