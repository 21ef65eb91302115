# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor CLI subcommands."""
