import json

import pytest
from click.testing import CliRunner

from keyspace.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args, **kwargs):
    return runner.invoke(cli, list(args), obj={}, catch_exceptions=False, **kwargs)


def test_check_json_with_confirmation(runner):
    result = invoke(runner, "-o", "json", "check", "Passw0rd!", "--confirm", "Passw0rd!")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["reading"]["estimate"]["bits"] == 58.99
    assert payload["reading"]["display_label"] == "Fair"
    assert payload["reading"]["profile"]["effective_size"] == 94
    assert payload["match"]["met"] is True


def test_check_json_without_confirmation(runner):
    result = invoke(runner, "-o", "json", "check", "abc")
    payload = json.loads(result.stdout)
    assert "match" not in payload
    assert payload["reading"]["password_masked"] == "a*c"


def test_check_console(runner):
    result = invoke(runner, "-q", "check", "abc")
    assert result.exit_code == 0
    assert "Very Weak" in result.stdout
    assert "Lowercase letter" in result.stdout


def test_check_prompts_for_password(runner):
    result = invoke(runner, "-o", "json", "check", input="zebra\n")
    assert result.exit_code == 0
    payload = json.loads(result.stdout[result.stdout.index("{"):])
    assert payload["reading"]["length"] == 5


def test_simulate_dictionary_hit(runner):
    result = invoke(runner, "-o", "json", "simulate", "password")
    attack = json.loads(result.stdout)["attack"]
    assert attack["outcome"] == "dictionary"
    assert attack["time_text"] == "Estimated time: < 1 second"


def test_simulate_overflowing_password(runner):
    result = invoke(runner, "-o", "json", "simulate", "aA1!" * 125)
    attack = json.loads(result.stdout)["attack"]
    assert attack["outcome"] == "brute_force"
    assert attack["time_text"] == "Estimated time to crack: ∞"


def test_simulate_console(runner):
    result = invoke(runner, "-q", "simulate", "zebra")
    assert result.exit_code == 0
    assert "Brute-Force Attack estimate:" in result.stdout
    assert "0.01 seconds" in result.stdout


def test_simulate_rejects_negative_rate(runner):
    result = runner.invoke(cli, ["simulate", "zebra", "--guess-rate", "-5"], obj={})
    assert result.exit_code == 2


def test_generate_json(runner):
    result = invoke(runner, "-o", "json", "generate", "--count", "3", "--length", "20")
    suggestions = json.loads(result.stdout)["suggestions"]
    assert len(suggestions) == 3
    assert all(len(s["password"]) == 20 for s in suggestions)
    assert all(s["strength"] == "very_strong" for s in suggestions)


def test_generate_rejects_short_length(runner):
    result = runner.invoke(cli, ["generate", "--length", "2"], obj={})
    assert result.exit_code == 2


def test_generate_rejects_zero_count(runner):
    result = runner.invoke(cli, ["generate", "--count", "0"], obj={})
    assert result.exit_code == 2


def test_report_html_file(runner, tmp_path):
    target = tmp_path / "report.html"
    result = invoke(runner, "-o", "html", "-f", str(target), "report", "letmein")
    assert result.exit_code == 0
    content = target.read_text(encoding="utf-8")
    assert "Keyspace Password Report" in content
    assert "Common Password" in content
    assert "letmein" not in content


def test_report_json_stdout(runner):
    result = invoke(runner, "-o", "json", "report", "zebra")
    payload = json.loads(result.stdout)
    titles = [f["title"] for f in payload["findings"]]
    assert "Brute-Force Estimate" in titles


def test_config_file_dictionary(runner, tmp_path):
    config_file = tmp_path / "keyspace.toml"
    config_file.write_text(
        '[meter]\ndictionary = ["hunter2"]\nguess_rate = 1000.0\n',
        encoding="utf-8",
    )
    result = invoke(runner, "-c", str(config_file), "-o", "json", "simulate", "Hunter2")
    assert json.loads(result.stdout)["attack"]["outcome"] == "dictionary"

    result = invoke(runner, "-c", str(config_file), "-o", "json", "simulate", "password")
    attack = json.loads(result.stdout)["attack"]
    assert attack["outcome"] == "brute_force"
    assert attack["crack"]["guess_rate"] == 1000.0


def test_version(runner):
    result = invoke(runner, "--version")
    assert "1.0.0" in result.stdout


def strict_loads(text):
    def reject(token):
        raise ValueError(f"non-standard JSON constant {token}")

    return json.loads(text, parse_constant=reject)


def test_overflowing_password_is_strict_json(runner):
    result = invoke(runner, "-o", "json", "simulate", "aA1!" * 125)
    crack = strict_loads(result.stdout)["attack"]["crack"]
    assert crack["seconds"] == "inf"
    assert crack["total_guesses"] == "inf"

    result = invoke(runner, "-o", "json", "report", "aA1!" * 125)
    assert strict_loads(result.stdout)["metadata"]["attack"]["crack"]["seconds"] == "inf"


def test_check_html_writes_report(runner, tmp_path):
    target = tmp_path / "check.html"
    result = invoke(runner, "-o", "html", "-f", str(target), "check", "zebra")
    assert result.exit_code == 0
    assert "HTML report saved" in result.stdout
    assert not result.stdout.lstrip().startswith("{")
    page = target.read_text(encoding="utf-8")
    assert "<html" in page
    assert "Password Strength: Very Weak" in page


def test_simulate_html_keeps_guess_rate(runner, tmp_path):
    target = tmp_path / "simulate.html"
    result = invoke(
        runner, "-o", "html", "-f", str(target), "simulate", "zebra", "--guess-rate", "1"
    )
    assert result.exit_code == 0
    assert "&quot;guess_rate&quot;: 1.0" in target.read_text(encoding="utf-8")


def test_generate_rejects_html(runner):
    result = runner.invoke(cli, ["-o", "html", "generate"], obj={})
    assert result.exit_code == 2
    assert "console and json" in result.output


@pytest.mark.parametrize(
    "setting",
    ["generator_length = 2", "max_entropy_bits = 0", "guess_rate = -1.0"],
)
def test_invalid_config_values_are_usage_errors(runner, tmp_path, setting):
    config_file = tmp_path / "bad.toml"
    config_file.write_text(f"[meter]\n{setting}\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config_file), "generate"], obj={})
    assert result.exit_code == 2
    assert "--config" in result.output


def test_malformed_config_is_usage_error(runner, tmp_path):
    config_file = tmp_path / "broken.toml"
    config_file.write_text("[meter\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config_file), "check", "abc"], obj={})
    assert result.exit_code == 2
