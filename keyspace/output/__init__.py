"""
Keyspace Output Module
=======================

Console display and report generation for Keyspace results.
"""

from keyspace.output.console import KeyspaceConsoleOutput
from keyspace.output.report import KeyspaceReportGenerator

__all__ = [
    "KeyspaceConsoleOutput",
    "KeyspaceReportGenerator",
]
