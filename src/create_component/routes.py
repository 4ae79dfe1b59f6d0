"""Route table registration for generated pages.

The route file is JavaScript, so it is not parsed in full. A small scanner
skips string literals and comments, balances brackets and picks the last
top-level array literal in the file (``export default [...]`` or
``const routes = [...]``). The elements of that array become
``RouteRecord`` objects, and new routes are appended as a last element.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from create_component.dialects import Dialect
from create_component.exceptions import RouteTableError
from create_component.models import RouteStatus

log = logging.getLogger(__name__)

QUOTES = "'\"`"
OPENERS = {")": "(", "]": "[", "}": "{"}
DEFAULT_INDENT = "  "

_PATH_RE = re.compile(r"""\bpath\s*:\s*(['"`])(.*?)\1""", re.DOTALL)


def _tokens(source: str, start: int = 0, end: Optional[int] = None) -> Iterator[Tuple[int, int, str]]:
    """Yield (start, end, kind) for significant tokens in source[start:end].

    Whitespace and comments are dropped. A string literal is a single token
    of kind ``"str"``; any other character is its own token.
    """
    i = start
    n = len(source) if end is None else end
    while i < n:
        c = source[i]
        if c.isspace():
            i += 1
            continue
        if source.startswith("//", i):
            newline = source.find("\n", i, n)
            i = n if newline == -1 else newline + 1
            continue
        if source.startswith("/*", i):
            close = source.find("*/", i + 2, n)
            i = n if close == -1 else close + 2
            continue
        if c in QUOTES:
            j = i + 1
            while j < n and source[j] != c:
                j += 2 if source[j] == "\\" else 1
            token_end = min(j + 1, n)
            yield i, token_end, "str"
            i = token_end
            continue
        yield i, i + 1, c
        i += 1


def _line_start(source: str, index: int) -> int:
    return source.rfind("\n", 0, index) + 1


def _indent_at(source: str, index: int) -> Optional[str]:
    """Leading whitespace of the line at index, if only whitespace precedes index."""
    prefix = source[_line_start(source, index):index]
    return prefix if not prefix.strip() else None


@dataclass
class RouteRecord:
    """One element of the route array."""

    text: str
    start: int
    end: int

    @property
    def path(self) -> Optional[str]:
        match = _PATH_RE.search(self.text)
        return match.group(2) if match else None


@dataclass
class RouteTable:
    """The route array found in a route file's source."""

    source: str
    open_index: int
    close_index: int
    records: List[RouteRecord] = field(default_factory=list)
    trailing_comma: bool = False

    @classmethod
    def parse(cls, source: str) -> "RouteTable":
        """Locate the last top-level array literal and split its elements."""
        stack: List[Tuple[str, int]] = []
        arrays: List[Tuple[int, int]] = []

        for start, _, kind in _tokens(source):
            if kind in ("(", "[", "{"):
                stack.append((kind, start))
            elif kind in OPENERS:
                if not stack or stack[-1][0] != OPENERS[kind]:
                    raise RouteTableError(f"Unbalanced '{kind}' at offset {start}")
                _, open_index = stack.pop()
                if kind == "]" and not stack:
                    arrays.append((open_index, start))

        if stack:
            kind, index = stack[-1]
            raise RouteTableError(f"Unclosed '{kind}' at offset {index}")
        if not arrays:
            raise RouteTableError("No top-level array literal found")

        open_index, close_index = arrays[-1]
        table = cls(source=source, open_index=open_index, close_index=close_index)
        table._split_records()
        return table

    def _split_records(self) -> None:
        depth = 0
        elem_start: Optional[int] = None
        elem_end = 0
        self.trailing_comma = False

        for start, end, kind in _tokens(self.source, self.open_index + 1, self.close_index):
            if depth == 0 and kind == ",":
                if elem_start is not None:
                    self._add_record(elem_start, elem_end)
                    elem_start = None
                self.trailing_comma = True
                continue

            self.trailing_comma = False
            if elem_start is None:
                elem_start = start
            elem_end = end
            if kind in ("(", "[", "{"):
                depth += 1
            elif kind in OPENERS:
                depth -= 1

        if elem_start is not None:
            self._add_record(elem_start, elem_end)

    def _add_record(self, start: int, end: int) -> None:
        self.records.append(RouteRecord(text=self.source[start:end], start=start, end=end))

    @property
    def newline(self) -> str:
        """Line ending used by the source, so inserted lines match the file."""
        return "\r\n" if "\r\n" in self.source else "\n"

    @property
    def paths(self) -> List[str]:
        return [r.path for r in self.records if r.path is not None]

    def find_duplicate(self, path: str, name: str) -> Optional[RouteRecord]:
        """Return the record already registering path or naming name.

        Paths compare case-insensitively; the name must appear as a whole
        word inside the record.
        """
        word = re.compile(rf"\b{re.escape(name)}\b")
        for record in self.records:
            if record.path is not None and record.path.lower() == path.lower():
                return record
            if word.search(record.text):
                return record
        return None

    def insert(self, entry: str) -> str:
        """Return the source with entry appended as the array's last element."""
        source = self.source
        close = self.close_index
        nl = self.newline
        close_indent = _indent_at(source, close)
        last = self.records[-1] if self.records else None

        indent = _indent_at(source, last.start) if last else None
        if indent is None:
            indent = (close_indent or "") + DEFAULT_INDENT

        if close_indent is not None:
            # Closing bracket on its own line: the new element goes on the line above it
            line_start = _line_start(source, close)
            new_line = f"{indent}{entry}{',' if self.trailing_comma else ''}{nl}"
            if last and not self.trailing_comma:
                return source[:last.end] + "," + source[last.end:line_start] + new_line + source[line_start:]
            return source[:line_start] + new_line + source[line_start:]

        if last:
            return source[:last.end] + f",{nl}{indent}{entry}" + source[last.end:]
        return source[:self.open_index + 1] + f"{nl}{indent}{entry}{nl}" + source[close:]


def module_import_path(routes_path: Path, artifact_path: Path, keep_extension: bool) -> str:
    """Import specifier for artifact_path as seen from the route file."""
    target = artifact_path if keep_extension else artifact_path.with_suffix("")
    relative = Path(os.path.relpath(target, routes_path.parent)).as_posix()
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative


def patch_routes(
    routes_path: Path,
    dialect: Dialect,
    name: str,
    raw_name: str,
    artifact_path: Path,
) -> RouteStatus:
    """Register a lazily-loaded route for a new page."""
    if not routes_path.exists():
        log.warning(f"Route file not found, skipping route registration: {routes_path}")
        return RouteStatus.MISSING

    # Bytes round-trip keeps the file's own line endings
    try:
        source = routes_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f"Could not read {routes_path.name} ({e}), skipping route registration")
        return RouteStatus.UNPATCHABLE

    try:
        table = RouteTable.parse(source)
    except RouteTableError as e:
        log.warning(f"Could not register route in {routes_path.name}: {e}")
        return RouteStatus.UNPATCHABLE

    route_path = f"/{raw_name}"
    duplicate = table.find_duplicate(route_path, name)
    if duplicate is not None:
        log.warning(f"Route already registered, skipping: {duplicate.text.splitlines()[0]}")
        return RouteStatus.DUPLICATE

    import_path = module_import_path(routes_path, artifact_path, dialect.import_with_extension)
    entry = dialect.route_entry(name, raw_name, import_path)
    routes_path.write_bytes(table.insert(entry).encode("utf-8"))
    log.info(f"Registered route {route_path} in {routes_path.name}")
    return RouteStatus.ADDED
