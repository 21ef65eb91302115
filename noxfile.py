# topmark:header:start
#
#   project      : Implementor
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nox sessions for Implementor.

``nox`` alone runs ``lint``, ``format_check`` and ``unit``. The ``qa`` session
runs the full test suite and pyright once per Python version listed in the
``pyproject.toml`` classifiers.

Examples:
  - ``nox -s qa``
  - ``nox -s unit -- -k encoding``
  - ``nox -s package_check``
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
CLASSIFIER_PREFIX: str = "Programming Language :: Python :: "


def _read_classifiers() -> list[str]:
    """Return the ``[project].classifiers`` of ``pyproject.toml``.

    Only the standard library (or ``toml``) is used here: the noxfile is imported
    before any project dependency is installed.
    """
    path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        project: Any = _toml_loads(path.read_text(encoding="utf-8")).get("project", {})
    except (OSError, ValueError):
        return []
    classifiers: Any = project.get("classifiers") if isinstance(project, dict) else None
    return cast("list[str]", classifiers) if isinstance(classifiers, list) else []


def get_supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions named by the classifiers, oldest first.

    Falls back to the running interpreter (with a warning) when none are listed.
    """
    versions: set[tuple[int, int]] = set()
    for classifier in _read_classifiers():
        if not classifier.startswith(CLASSIFIER_PREFIX):
            continue
        parts = classifier.removeprefix(CLASSIFIER_PREFIX).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add((int(parts[0]), int(parts[1])))

    if not versions:
        warnings.warn(
            f"No Python version classifiers in pyproject.toml; using {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(versions)]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check", "unit"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the whole test suite, then pyright."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", *session.posargs)

    # Typed loosely by nox; a running session always has a version string.
    python = session.python
    if not isinstance(python, str) or not python:
        raise RuntimeError(f"Unexpected session.python value: {python!r}")
    session.run("pyright", "--pythonversion", python)


@nox.session(python=CURRENT_PYTHON_VERSION)
def unit(session: nox.Session) -> None:
    """Run the tests that do not spawn a compiler interpreter."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "not integration", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Check the tree with ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Apply ruff's automatic fixes."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if ruff would reformat anything."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Reformat the tree with ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build the sdist and wheel from a clean ``dist/`` and run ``twine check``."""
    session.install("build", "twine")
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
