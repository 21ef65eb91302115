# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : tests/fixtures/impl_samples/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample interfaces used by the Implementor test suite.

The package is importable as ``impl_samples`` (``tests/fixtures`` is on the
pytest ``pythonpath``), so its code-source root is ``tests/fixtures``.
"""
