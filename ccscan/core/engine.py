"""
Analysis driver.

Finds every function declaration in a parsed unit, at any depth, and
turns each one into a ComplexityRecord.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from ccscan.analysis.complexity import cyclomatic_complexity, iter_nodes, tally_decisions
from ccscan.core.config import Config
from ccscan.core.records import ComplexityRecord
from ccscan.logging_config import get_logger
from ccscan.parsing.libclang import ClangFrontend, Kind, ParsedUnit
from ccscan.reporting.writer import ReportWriter


logger = get_logger(__name__)


class ComplexityEngine:
    def __init__(self, config: Optional[Config] = None, frontend: Optional[ClangFrontend] = None) -> None:
        self.config = config or Config.load(None)
        self.frontend = frontend or ClangFrontend(
            clang_args=self.config.clang_args(),
            library_file=self.config.libclang_path(),
        )

    def parse(self, content: str, name: Optional[str] = None) -> ParsedUnit:
        return self.frontend.parse(
            name or self.config.source_filename(),
            content,
            fail_on_errors=self.config.fail_on_errors(),
        )

    def iter_records(self, unit: ParsedUnit) -> Iterator[ComplexityRecord]:
        for node in iter_nodes(self.frontend, unit.root):
            if self.frontend.kind(node) is not Kind.FUNCTION_DECL:
                continue
            if not self._wanted(node, unit):
                continue
            yield self.measure(node)

    def measure(self, node) -> ComplexityRecord:
        line, _ = self.frontend.location(node)
        name = self.frontend.spelling(node)
        tally = tally_decisions(self.frontend, node)
        complexity = cyclomatic_complexity(tally)
        logger.debug("%s at line %d: edges=%d nodes=%d complexity=%d", name, line, tally.edges, tally.nodes, complexity)
        return ComplexityRecord(line=line, name=name, complexity=complexity)

    def analyze(self, content: str, name: Optional[str] = None) -> List[ComplexityRecord]:
        return list(self.iter_records(self.parse(content, name)))

    def run(self, content: str, report: ReportWriter, name: Optional[str] = None) -> int:
        """Parse ``content`` and append one record per function to ``report``."""
        unit = self.parse(content, name)
        written = report.write_all(self.iter_records(unit))
        logger.info("Wrote %d records for %s to %s", written, unit.name, report.path)
        return written

    def _wanted(self, node, unit: ParsedUnit) -> bool:
        if self.config.definitions_only() and not self.frontend.is_definition(node):
            return False
        if self.config.main_file_only() and not self.frontend.in_main_file(node, unit):
            return False
        return True
