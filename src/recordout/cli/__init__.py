# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordOut CLI package.

This package groups the Click command definitions and supporting utilities
for the ``recordout`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        recordout = "recordout.cli.main:cli"

All subcommands live in [`recordout.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
