# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, stream-agnostic building blocks for RecordOut.

Public modules:
    - recordout.core.fields
    - recordout.core.formats
    - recordout.core.normalize
    - recordout.core.stringify
"""

from __future__ import annotations
