"""
Tests for the analysis driver against real libclang parses.
"""

import pytest
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clang import cindex

from ccscan import analyze_source
from ccscan.core.config import Config
from ccscan.core.engine import ComplexityEngine
from ccscan.core.errors import ParseFailure
from ccscan.core.records import ComplexityRecord
from ccscan.parsing.libclang import ClangFrontend, Kind


def complexities(code, config=None):
    return {record.name: record.complexity for record in analyze_source(code, config)}


class TestComplexity:
    """Tests for per-function complexity values."""

    def test_straight_line_function(self):
        """A function without decisions has complexity 1."""
        assert complexities("int f(void) { return 0; }") == {"f": 1}

    def test_arithmetic_does_not_count(self):
        """Non-logical binary operators never change complexity."""
        assert complexities("int f(int x){ return x + 1; }") == {"f": 1}

    def test_comparison_and_assignment_do_not_count(self):
        """== and = are not decision points."""
        code = (
            "int f(int x) {\n"
            "    int y;\n"
            "    y = x == 2;\n"
            "    return y;\n"
            "}\n"
        )
        assert complexities(code) == {"f": 1}

    def test_nested_ifs(self):
        """Nested decisions each count."""
        code = (
            "void f(int a, int b) {\n"
            "    if (a) {\n"
            "        if (b) {\n"
            "        }\n"
            "    }\n"
            "}\n"
        )
        assert complexities(code) == {"f": 3}

    def test_short_circuit_chain(self):
        """if (a && b || c) counts the if, the && and the ||."""
        code = "void f(int a, int b, int c) { if (a && b || c) {} }"
        assert complexities(code) == {"f": 4}

    def test_short_circuit_outside_condition(self):
        """Connectives count wherever they appear."""
        code = (
            "int f(int a, int b, int c) {\n"
            "    int x;\n"
            "    x = a || b;\n"
            "    return x && c;\n"
            "}\n"
        )
        assert complexities(code) == {"f": 3}

    def test_parenthesized_left_operand(self):
        """Parentheses around the left operand are part of its token range."""
        code = "int f(int a, int b) { return (a + 1) && b; }"
        assert complexities(code) == {"f": 2}

    def test_switch(self):
        """Each case and the default branch count."""
        code = (
            "int f(int x) {\n"
            "    switch (x) {\n"
            "    case 1:\n"
            "        return 1;\n"
            "    case 2:\n"
            "        return 2;\n"
            "    default:\n"
            "        return 0;\n"
            "    }\n"
            "}\n"
        )
        assert complexities(code) == {"f": 4}

    def test_loops_and_ternary(self):
        """for, while and ?: each count once."""
        code = (
            "int f(int n) {\n"
            "    int total = 0;\n"
            "    for (int i = 0; i < n; i++) {\n"
            "        total += i;\n"
            "    }\n"
            "    while (total > 100) {\n"
            "        total = total / 2;\n"
            "    }\n"
            "    return total > 10 ? total : 0;\n"
            "}\n"
        )
        assert complexities(code) == {"f": 4}

    def test_do_while_is_not_counted(self):
        """do/while is not one of the counted decision kinds."""
        code = "void f(int x) { do { x--; } while (x); }"
        assert complexities(code) == {"f": 1}


class TestDiscovery:
    """Tests for function discovery and record order."""

    CODE = (
        "int first(void) { return 1; }\n"
        "\n"
        "int second(int a) {\n"
        "    if (a) return 1;\n"
        "    return 0;\n"
        "}\n"
        "int third(int);\n"
    )

    def test_records_in_source_order(self):
        """One record per function, in declaration order, with its line."""
        assert analyze_source(self.CODE) == [
            ComplexityRecord(line=1, name="first", complexity=1),
            ComplexityRecord(line=3, name="second", complexity=2),
            ComplexityRecord(line=7, name="third", complexity=1),
        ]

    def test_definitions_only(self):
        """Prototypes can be excluded."""
        config = Config.load(None).with_overrides({"analysis": {"definitions_only": True}})
        names = [record.name for record in analyze_source(self.CODE, config)]
        assert names == ["first", "second"]

    def test_main_file_only(self, tmp_path):
        """Functions declared in an included header can be excluded."""
        (tmp_path / "helpers.h").write_text("int helper(int a) { return a ? 1 : 0; }\n")
        code = '#include "helpers.h"\nint f(void) { return 0; }\n'
        config = Config.load(None).with_overrides({"source": {"clang_args": ["-I", str(tmp_path)]}})
        assert [record.name for record in analyze_source(code, config)] == ["helper", "f"]
        config = config.with_overrides({"analysis": {"main_file_only": True}})
        assert analyze_source(code, config) == [ComplexityRecord(line=2, name="f", complexity=1)]

    def test_record_count_matches_function_nodes(self):
        """Every FUNCTION_DECL node yields exactly one record."""
        engine = ComplexityEngine()
        unit = engine.parse(self.CODE)
        frontend = engine.frontend
        stack = [unit.root]
        count = 0
        while stack:
            node = stack.pop()
            if frontend.kind(node) is Kind.FUNCTION_DECL:
                count += 1
            stack.extend(frontend.children(node))
        assert len(list(engine.iter_records(unit))) == count == 3

    def test_nested_declaration(self):
        """Function declarations below the top level are found."""
        code = (
            "void outer(void) {\n"
            "    int inner(int);\n"
            "}\n"
        )
        assert analyze_source(code) == [
            ComplexityRecord(line=1, name="outer", complexity=1),
            ComplexityRecord(line=2, name="inner", complexity=1),
        ]

    def test_namespace_function(self):
        """Functions inside a C++ namespace are reported."""
        code = (
            "namespace outer {\n"
            "int helper(int x) {\n"
            "    return x > 0 ? x : -x;\n"
            "}\n"
            "}\n"
        )
        config = Config.load(None).with_overrides({"source": {"filename": "unsaved.cpp"}})
        assert analyze_source(code, config) == [ComplexityRecord(line=2, name="helper", complexity=2)]

    def test_empty_source(self):
        """Source without functions yields no records."""
        assert analyze_source("") == []


class TestParsing:
    """Tests for parse failure handling."""

    def test_errors_tolerated_by_default(self):
        """Recoverable syntax errors still produce a unit."""
        records = analyze_source("int f(void) { return 0 }\n")
        assert [record.name for record in records] == ["f"]

    def test_fail_on_errors(self):
        """Error diagnostics become ParseFailure when requested."""
        config = Config.load(None).with_overrides({"analysis": {"fail_on_errors": True}})
        with pytest.raises(ParseFailure) as excinfo:
            analyze_source("int f( {\n", config)
        assert excinfo.value.details["name"] == "unsaved.c"

    def test_load_error(self):
        """A translation unit load error is surfaced as ParseFailure."""

        class BrokenIndex:
            def parse(self, *args, **kwargs):
                raise cindex.TranslationUnitLoadError("Error parsing translation unit.")

        frontend = ClangFrontend()
        frontend._index = BrokenIndex()
        with pytest.raises(ParseFailure):
            frontend.parse("unsaved.c", "int f(void);")
