"""
ccscan

Per-function cyclomatic complexity for C and C++ source, computed over
the libclang syntax tree.
"""

__version__ = "1.0.0"

from typing import List, Optional

from ccscan.core.config import Config
from ccscan.core.engine import ComplexityEngine
from ccscan.core.errors import CcscanError, ParseFailure
from ccscan.core.records import ComplexityRecord, DecisionTally


def analyze_source(content: str, config: Optional[Config] = None) -> List[ComplexityRecord]:
    """Analyze ``content`` and return its records without writing a report."""
    return ComplexityEngine(config).analyze(content)


__all__ = [
    "analyze_source",
    "ComplexityEngine",
    "ComplexityRecord",
    "DecisionTally",
    "Config",
    "CcscanError",
    "ParseFailure",
]
