# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``recordout`` CLI."""
