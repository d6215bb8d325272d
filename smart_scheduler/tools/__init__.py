"""
Tools Package

Utility functions shared across layers.

Utility Tools:
- time_tool: RFC3339 parsing and formatting
"""

from smart_scheduler.tools import time_tool

__all__ = [
    "time_tool",
]
