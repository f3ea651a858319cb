"""Allow running Keyspace as ``python -m keyspace``."""

from keyspace.cli import main

main()
