import random
import sys
from pathlib import Path

import pytest

# Flat layout: make the project root importable when the package is not installed.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from shared.config import GlobalConfig, KeyspaceConfig, MeterConfig  # noqa: E402


@pytest.fixture
def config():
    return KeyspaceConfig(global_settings=GlobalConfig(log_level="WARNING"))


@pytest.fixture
def engine(config):
    from keyspace.core.engine import KeyspaceEngine

    return KeyspaceEngine(config, rng=random.Random(1234))


@pytest.fixture
def custom_dictionary_config():
    return KeyspaceConfig(meter=MeterConfig(dictionary=["hunter2", "tr0ub4dor"]))
