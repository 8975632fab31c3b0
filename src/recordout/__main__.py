# topmark:header:start
#
#   project      : RecordOut
#   file         : __main__.py
#   file_relpath : src/recordout/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RecordOut via ``python -m recordout``.

It delegates directly to :func:`recordout.cli.main.cli`, so the module interface and
the ``recordout`` console script share a single entry point.

Examples:
    Render NDJSON from STDIN as CSV::

        cat records.ndjson | python -m recordout render --format csv
"""

from __future__ import annotations

from recordout.cli.main import cli

if __name__ == "__main__":
    cli()
