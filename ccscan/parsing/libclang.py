"""
libclang frontend adapter.

Wraps ``clang.cindex`` behind the small set of queries the complexity
analysis needs: node kind, location, spelling, children and tokens.
Cursor kinds are narrowed to the closed ``Kind`` enumeration here so the
analysis never touches libclang types directly.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from clang import cindex
from clang.cindex import CursorKind

from ccscan.core.errors import ParseFailure
from ccscan.logging_config import get_logger


logger = get_logger(__name__)


class Kind(enum.Enum):
    IF_STMT = "if"
    FOR_STMT = "for"
    WHILE_STMT = "while"
    DEFAULT_STMT = "default"
    CASE_STMT = "case"
    CONDITIONAL_OPERATOR = "conditional"
    BINARY_OPERATOR = "binary"
    FUNCTION_DECL = "function"
    OTHER = "other"


CURSOR_KINDS: Dict[CursorKind, Kind] = {
    CursorKind.IF_STMT: Kind.IF_STMT,
    CursorKind.FOR_STMT: Kind.FOR_STMT,
    CursorKind.WHILE_STMT: Kind.WHILE_STMT,
    CursorKind.DEFAULT_STMT: Kind.DEFAULT_STMT,
    CursorKind.CASE_STMT: Kind.CASE_STMT,
    CursorKind.CONDITIONAL_OPERATOR: Kind.CONDITIONAL_OPERATOR,
    CursorKind.BINARY_OPERATOR: Kind.BINARY_OPERATOR,
    CursorKind.FUNCTION_DECL: Kind.FUNCTION_DECL,
}


@dataclass(frozen=True)
class ParsedUnit:
    name: str
    source: str
    tu: cindex.TranslationUnit

    @property
    def root(self) -> cindex.Cursor:
        return self.tu.cursor

    @property
    def error_count(self) -> int:
        return sum(1 for diag in self.tu.diagnostics if diag.severity >= cindex.Diagnostic.Error)


class ClangFrontend:
    def __init__(self, clang_args: Sequence[str] = (), library_file: Optional[str] = None) -> None:
        self.clang_args = list(clang_args)
        self.library_file = library_file
        self._index: Optional[cindex.Index] = None

    @property
    def index(self) -> cindex.Index:
        if self._index is None:
            # set_library_file is only honoured before the library is first loaded.
            if self.library_file and not cindex.Config.loaded:
                cindex.Config.set_library_file(self.library_file)
            try:
                self._index = cindex.Index.create()
            except cindex.LibclangError as exc:
                raise ParseFailure("libclang is not available", {"library": str(self.library_file)}) from exc
        return self._index

    def parse(self, name: str, content: str, fail_on_errors: bool = False) -> ParsedUnit:
        """
        Parse ``content`` as an unsaved file called ``name``.

        Raises ParseFailure when libclang produces no translation unit, or,
        with ``fail_on_errors``, when any error diagnostic was reported.
        """
        try:
            tu = self.index.parse(
                name,
                args=self.clang_args,
                unsaved_files=[(name, content)],
                options=cindex.TranslationUnit.PARSE_NONE,
            )
        except cindex.TranslationUnitLoadError as exc:
            raise ParseFailure("Unable to parse translation unit", {"name": name}) from exc

        unit = ParsedUnit(name=name, source=content, tu=tu)
        self._log_diagnostics(unit)
        if fail_on_errors and unit.error_count:
            raise ParseFailure(
                "Translation unit has errors",
                {"name": name, "errors": str(unit.error_count)},
            )
        return unit

    def _log_diagnostics(self, unit: ParsedUnit) -> None:
        for diag in unit.tu.diagnostics:
            loc = diag.location
            where = f"{loc.file.name if loc.file else unit.name}:{loc.line}:{loc.column}"
            if diag.severity >= cindex.Diagnostic.Warning:
                logger.warning("%s: %s", where, diag.spelling)
            else:
                logger.debug("%s: %s", where, diag.spelling)

    def kind(self, node: cindex.Cursor) -> Kind:
        try:
            return CURSOR_KINDS.get(node.kind, Kind.OTHER)
        except ValueError:
            # Cursor kinds newer than the bindings are not decision points.
            return Kind.OTHER

    def location(self, node: cindex.Cursor) -> Tuple[int, int]:
        loc = node.location
        return loc.line, loc.column

    def spelling(self, node: cindex.Cursor) -> str:
        return node.spelling

    def first_child(self, node: cindex.Cursor) -> Optional[cindex.Cursor]:
        return next(iter(node.get_children()), None)

    def children(self, node: cindex.Cursor) -> List[cindex.Cursor]:
        return list(node.get_children())

    def tokenize(self, node: cindex.Cursor) -> List[str]:
        return [token.spelling for token in node.get_tokens()]

    def is_definition(self, node: cindex.Cursor) -> bool:
        return node.is_definition()

    def in_main_file(self, node: cindex.Cursor, unit: ParsedUnit) -> bool:
        source_file = node.location.file
        return source_file is not None and source_file.name == unit.name
