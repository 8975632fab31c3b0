# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record renderers for RecordOut.

Each renderer writes one complete document for a sequence of records to a text
stream. Errors raised while encoding or writing propagate unchanged.

Public modules:
    - recordout.rendering.base
    - recordout.rendering.structured
    - recordout.rendering.tabular
"""

from __future__ import annotations

from recordout.rendering.base import RecordRenderer
from recordout.rendering.structured import StructuredRenderer
from recordout.rendering.tabular import TabularRenderer

__all__ = [
    "RecordRenderer",
    "StructuredRenderer",
    "TabularRenderer",
]
