"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — interface or escapes written
  1   Violation — manifest does not satisfy its schema
  2   Error — usage error, missing file, unresolvable target, sink failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
