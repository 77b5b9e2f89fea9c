# topmark:header:start
#
#   project      : StatusTree
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree project automation via Nox.

Sessions:
  - `lint`: Ruff lint checks.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomlkit as tomllib

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml`.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table), or an empty dict.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    try:
        return dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except Exception:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project: Any = _parse_pyproject_toml().get("project", {})
    classifiers: Any = project.get("classifiers", []) if isinstance(project, dict) else []

    prefix = "Programming Language :: Python :: "
    versions: set[tuple[int, int]] = set()
    for c in classifiers:
        if not isinstance(c, str) or not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add((int(parts[0]), int(parts[1])))

    if not versions:
        warnings.warn(
            f"No Python versions found in classifiers. Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(versions)]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install("-e", ".[dev]")

    session.run("pytest", "-q", "tests", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")
    session.run("pyright", "--pythonversion", py_ver)
