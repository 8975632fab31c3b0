# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for RecordOut.

RecordOut has no configuration files; the only ambient setting is the internal log
level, resolved from the environment by `recordout.config.logging`.
"""

from __future__ import annotations
