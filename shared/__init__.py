"""
Keyspace Shared Module
======================

Configuration, logging, console, and result models shared by the
Keyspace analyzers, engine, and command-line interface.
"""

from shared.config import KeyspaceConfig, get_config

__all__ = ["KeyspaceConfig", "get_config"]
