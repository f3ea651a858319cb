import pytest

from shared.config import (
    DEFAULT_DICTIONARY,
    DEFAULT_GUESS_RATE,
    KeyspaceConfig,
    get_config,
)


def test_defaults():
    config = KeyspaceConfig()
    assert config.meter.guess_rate == DEFAULT_GUESS_RATE == 2e9
    assert config.meter.dictionary == list(DEFAULT_DICTIONARY)
    assert config.meter.min_length == 8
    assert config.global_settings.log_level == "WARNING"


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "[meter]\n"
        "guess_rate = 1e12\n"
        "min_length = 12\n",
        encoding="utf-8",
    )
    config = KeyspaceConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.meter.guess_rate == 1e12
    assert config.meter.min_length == 12
    assert config.meter.max_entropy_bits == 80.0


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[meter]\nfuture_option = true\ngenerator_length = 18\n[other]\nx = 1\n",
        encoding="utf-8",
    )
    config = KeyspaceConfig.load(path)
    assert config.meter.generator_length == 18
    assert not hasattr(config.meter, "future_option")


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        KeyspaceConfig.load(tmp_path / "absent.toml")


def test_bundled_config_matches_defaults():
    config = KeyspaceConfig.load()
    assert config.meter.guess_rate == 2e9
    assert config.meter.dictionary == list(DEFAULT_DICTIONARY)


def test_to_dict():
    data = KeyspaceConfig().to_dict()
    assert data["meter"]["guess_rate"] == 2e9
    assert data["global_settings"]["output_dir"] == "output"


def test_get_config_caches(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[meter]\nmin_length = 10\n", encoding="utf-8")
    loaded = get_config(path)
    assert loaded.meter.min_length == 10
    assert get_config() is loaded
