"""Source frontend adapters."""

from ccscan.parsing.libclang import ClangFrontend, Kind, ParsedUnit

__all__ = ["ClangFrontend", "Kind", "ParsedUnit"]
