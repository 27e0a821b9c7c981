"""Input classification and root directory helpers.

Input strings are classified by shape alone, independent of the host
operating system:

- ``@name``                       -> REFERENCE
- contains ``://`` or starts ``//`` -> REMOTE
- ``/x``, ``\\x``, ``C:/x``, ``C:\\x`` -> ABSOLUTE_PATH
- anything else (including ``""``)  -> RELATIVE_PATH

Example:
    >>> classify("@jquery").kind
    <InputKind.REFERENCE: 'reference'>
    >>> classify("http://cdn/x.js").kind
    <InputKind.REMOTE: 'remote'>
    >>> is_absolute_path("C:\\\\app.css")
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

REFERENCE_SENTINEL = "@"
GLOB_MARKER = "*"
SEPARATORS = "/\\"


class InputKind(str, Enum):
    """Resolution strategy for an input descriptor."""

    REFERENCE = "reference"
    REMOTE = "remote"
    ABSOLUTE_PATH = "absolute_path"
    RELATIVE_PATH = "relative_path"


class ClassifiedInput(BaseModel):
    """An input descriptor tagged with its resolution strategy.

    Attributes:
        kind: Resolution strategy.
        value: Reference name (sentinel stripped) for REFERENCE, otherwise
            the input string unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: InputKind
    value: str = Field(description="Reference name, URL or path")

    @property
    def is_glob(self) -> bool:
        """Whether the value carries the glob wildcard."""
        return GLOB_MARKER in self.value


def is_remote(value: str) -> bool:
    """Check for an absolute or protocol-relative URL."""
    return "://" in value or value.startswith("//")


def is_absolute_path(path: str) -> bool:
    """Check whether a path is absolute on any platform.

    A path is absolute when it starts with ``/`` or ``\\``, or when it is a
    drive-letter path longer than three characters (``C:/x``, ``C:\\x``).

    Args:
        path: Filesystem path.

    Returns:
        True if the path is absolute.
    """
    if not path:
        return False
    if path[0] in SEPARATORS:
        return True
    return len(path) > 3 and path[0].isalpha() and path[1] == ":" and path[2] in SEPARATORS


def classify(value: str) -> ClassifiedInput:
    """Classify an input string.

    Classification is total: every string maps to exactly one kind.

    Args:
        value: Raw input descriptor.

    Returns:
        ClassifiedInput for the string.
    """
    if value.startswith(REFERENCE_SENTINEL):
        return ClassifiedInput(kind=InputKind.REFERENCE, value=value[1:])
    if is_remote(value):
        return ClassifiedInput(kind=InputKind.REMOTE, value=value)
    if is_absolute_path(value):
        return ClassifiedInput(kind=InputKind.ABSOLUTE_PATH, value=value)
    return ClassifiedInput(kind=InputKind.RELATIVE_PATH, value=value)


def normalize_root(root: str) -> str:
    """Strip trailing separators from a root directory.

    A root made only of separators collapses to a single ``/``.
    """
    stripped = root.rstrip(SEPARATORS)
    if not stripped and root:
        return "/"
    return stripped


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def find_root_dir(path: str, roots: str | Iterable[str] | None) -> str | None:
    """Find the root directory that owns an absolute path.

    A root owns a path when, after converting backslashes to slashes and
    stripping trailing separators, the path equals the root or starts with
    the root followed by a separator. When several roots match, the longest
    one wins.

    Args:
        path: Absolute path.
        roots: Candidate root directory, or several candidates.

    Returns:
        The matching root (trailing separators stripped), or None.

    Example:
        >>> find_root_dir("/site/css/app.css", ["/site", "/site/css"])
        '/site/css'
        >>> find_root_dir("/elsewhere/app.css", "/site") is None
        True
    """
    if roots is None:
        return None
    candidates = [roots] if isinstance(roots, str) else list(roots)

    target = _normalize(path)
    best: str | None = None
    for candidate in candidates:
        if not candidate:
            continue
        root = normalize_root(candidate)
        prefix = _normalize(root)
        if prefix == "/":
            matched = target.startswith("/")
        else:
            matched = target == prefix or target.startswith(prefix + "/")
        if matched and (best is None or len(root) > len(best)):
            best = root
    return best


def relative_to_root(path: str, root: str) -> str:
    """Strip ``root`` from ``path`` and trim leading separators."""
    return path[len(root) :].lstrip(SEPARATORS)
