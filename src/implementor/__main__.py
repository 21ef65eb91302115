# topmark:header:start
#
#   project      : Implementor
#   file         : __main__.py
#   file_relpath : src/implementor/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Implementor via ``python -m implementor``.

It delegates directly to :func:`implementor.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Implementor is launched.

Examples:
    Generate a stub module under ``build/``::

        python -m implementor source mypkg.storage:Store build
"""

from __future__ import annotations

from implementor.cli.main import cli

if __name__ == "__main__":
    cli()
