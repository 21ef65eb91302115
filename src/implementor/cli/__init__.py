# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for Implementor."""
