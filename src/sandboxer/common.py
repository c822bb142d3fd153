"""Shared helpers: console output, file primitives and version comparison."""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console

COMPATIBLE_VERSION = "1.0.0"

LINE_LENGTH = 80
STAR_LINE = "*" * LINE_LENGTH

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

# Plain console for user-facing text; paths and JSON must print verbatim.
console = Console(soft_wrap=True, highlight=False, emoji=False, markup=False)


def compatible_version() -> str:
    """Return the oldest defaults version this tool accepts."""
    return COMPATIBLE_VERSION


def version_to_list(version: str) -> list[int]:
    """Split a version string into its ``[major, minor, patch]`` components.

    The first ``N.N.N`` triple found in the string is used, so prefixed
    versions such as ``ps5.7.22`` are accepted.

    Args:
        version: Version string to parse.

    Returns:
        The three integer components, or ``[-1]`` when no triple is found.
    """
    match = _VERSION_RE.search(version)
    if match is None:
        return [-1]
    return [int(part) for part in match.groups()]


def greater_or_equal_version(version: str, reference: list[int]) -> bool:
    """Check whether ``version`` is at least the ``reference`` components."""
    return version_to_list(version) >= reference


def file_exists(path: Path) -> bool:
    return path.is_file()


def dir_exists(path: Path) -> bool:
    return path.is_dir()


def mkdir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def slurp_as_bytes(path: Path) -> bytes:
    """Read the whole file at ``path``."""
    return path.read_bytes()


def write_string(contents: str, path: Path) -> None:
    """Replace the contents of ``path``.

    Data goes to a sibling temporary file first and is then renamed over the
    target, so readers see either the old or the new contents.
    """
    tmp_path = path.with_name(f".{path.name}.tmp")
    tmp_path.write_text(contents)
    tmp_path.replace(path)
