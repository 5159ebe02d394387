"""Loading edge lists from files and writing computed orders."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError

from ._edge import NO_VERTEX, Edge
from ._errors import DagsortError

logger = logging.getLogger(__name__)


class EdgeFileError(DagsortError):
    """Raised when an edge file cannot be parsed."""


class FileFormat(StrEnum):
    """Supported edge-list and order file formats."""

    TEXT = "text"
    JSON = "json"
    TOML = "toml"

    @classmethod
    def from_path(cls, path: Path) -> FileFormat:
        """Guess the format from a file suffix, falling back to text."""
        match path.suffix.lower():
            case ".toml":
                return cls.TOML
            case ".json":
                return cls.JSON
            case _:
                return cls.TEXT


class EdgeDocument(BaseModel):
    """Structured edge document used by the TOML and JSON formats.

    ``edges`` holds ``[source, destination]`` pairs. In JSON either slot may be
    ``null`` to declare a single vertex; TOML has no null, so isolated vertices
    go in ``vertices`` instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    edges: list[tuple[str | None, str | None]] = []
    vertices: list[str] = []

    def to_edges(self) -> list[Edge[str]]:
        """Convert the document to Edge values, declarations last."""
        edges = [
            Edge(NO_VERTEX if src is None else src, NO_VERTEX if dst is None else dst) for src, dst in self.edges
        ]
        edges.extend(Edge.vertex(v) for v in self.vertices)
        return edges


def _parse_text(text: str) -> list[Edge[str]]:
    """Parse tsort-style text: one edge or one vertex per line."""
    edges: list[Edge[str]] = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = line.split()
        match tokens:
            case [vertex]:
                edges.append(Edge.vertex(vertex))
            case [src, dst]:
                edges.append(Edge(src, dst))
            case _:
                msg = f"line {lineno}: expected 1 or 2 vertices, got {len(tokens)}"
                raise EdgeFileError(msg)
    return edges


def _parse_document(data: object) -> list[Edge[str]]:
    try:
        document = EdgeDocument.model_validate(data)
    except ValidationError as e:
        msg = f"invalid edge document: {e}"
        raise EdgeFileError(msg) from e
    return document.to_edges()


def parse_edges(text: str, fmt: FileFormat | str = FileFormat.TEXT) -> list[Edge[str]]:
    """Parse an edge list from a string.

    Args:
        text: The document contents.
        fmt: One of ``text``, ``json`` or ``toml``.

    Returns:
        The edges in document order.

    Raises:
        EdgeFileError: If the document is malformed.

    """
    match FileFormat(fmt):
        case FileFormat.TEXT:
            return _parse_text(text)
        case FileFormat.JSON:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                msg = f"invalid JSON: {e}"
                raise EdgeFileError(msg) from e
            return _parse_document(data)
        case FileFormat.TOML:
            try:
                data = tomllib.loads(text)
            except tomllib.TOMLDecodeError as e:
                msg = f"invalid TOML: {e}"
                raise EdgeFileError(msg) from e
            return _parse_document(data)


def load_edges(path: Path, fmt: FileFormat | str | None = None) -> list[Edge[str]]:
    """Load an edge list from a file.

    Args:
        path: File to read.
        fmt: File format. Guessed from the suffix if None.

    Returns:
        The edges in file order.

    Raises:
        EdgeFileError: If the file cannot be read as UTF-8 text or is malformed.

    """
    file_format = FileFormat.from_path(path) if fmt is None else FileFormat(fmt)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"cannot read {path}: {e}"
        raise EdgeFileError(msg) from e
    edges = parse_edges(text, file_format)
    logger.debug(f"Loaded {len(edges)} edges from {path} ({file_format})")
    return edges


def format_order(order: Sequence[object], fmt: FileFormat | str = FileFormat.TEXT) -> str:
    """Render a vertex order in the given format."""
    names = [str(v) for v in order]
    match FileFormat(fmt):
        case FileFormat.TEXT:
            return "".join(f"{name}\n" for name in names)
        case FileFormat.JSON:
            return json.dumps({"order": names}, indent=2) + "\n"
        case FileFormat.TOML:
            return tomli_w.dumps({"order": names})


def dump_order(order: Sequence[object], path: Path | None, fmt: FileFormat | str | None = None) -> str:
    """Render a vertex order and optionally write it to a file.

    Args:
        order: The sorted vertices.
        path: Output file. Nothing is written if None.
        fmt: Output format. Guessed from ``path`` if None, text otherwise.

    Returns:
        The rendered document.

    """
    if fmt is None:
        fmt = FileFormat.TEXT if path is None else FileFormat.from_path(path)
    text = format_order(order, fmt)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {len(order)} vertices to {path}")
    return text
