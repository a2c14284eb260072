"""
Dynamic import rewriting tests.
"""

import pytest

from codegraph_globals.analysis.syntax import decode_escape
from codegraph_globals.rewrite.dynamic_imports import get_dynamic_import_source

NAMES = {"a": "A"}


class TestGetDynamicImportSource:
    def test_literal_specifier(self, parse, find):
        tree = parse('import("a");')

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) == "a"

    def test_escaped_specifier(self, parse, find):
        tree = parse('import("\\x61");')

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) == "a"

    def test_code_point_escape_specifier(self, parse, find):
        tree = parse('import("\\u{61}");')

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) == "a"

    def test_surrogate_pair_specifier(self, parse, find):
        """Test a UTF-16 surrogate pair decodes to one code point."""
        tree = parse('import("\\uD83D\\uDE00");')

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) == "\U0001F600"

    def test_ordinary_call(self, parse, find):
        tree = parse('load("a");')

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) is None

    def test_computed_specifier(self, parse, find):
        tree = parse("import(name);")

        assert get_dynamic_import_source(find(tree.root, "call_expression")[0]) is None


class TestDecodeEscape:
    @pytest.mark.parametrize(
        "escape,value",
        [
            ("\\n", "\n"),
            ("\\'", "'"),
            ("\\x41", "A"),
            ("\\u0041", "A"),
            ("\\u{1F600}", "\U0001F600"),
            ("\\101", "A"),
            ("\\0", "\0"),
            ("\\\n", ""),
            ("\\q", "q"),
        ],
    )
    def test_decode(self, escape, value):
        assert decode_escape(escape) == value


class TestDynamicImportRewriting:
    def test_rewritten_to_resolved_promise(self, rewrite):
        code, touched = rewrite('import("a").then(m => m.run());', NAMES)

        assert touched is True
        assert code == "Promise.resolve(A).then(m => m.run());"

    def test_nested_in_function(self, rewrite):
        code, _ = rewrite("const load = () => import('a');", NAMES)

        assert code == "const load = () => Promise.resolve(A);"

    def test_leading_comment_argument(self, rewrite):
        code, _ = rewrite('import(/* chunk */ "a");', NAMES)

        assert code == "Promise.resolve(A);"

    @pytest.mark.parametrize(
        "source",
        [
            "import(name);",
            'import("b");',
            "import(`a`);",
        ],
    )
    def test_untouched(self, rewrite, source):
        code, touched = rewrite(source, NAMES)

        assert touched is False
        assert code == source
