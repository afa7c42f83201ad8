from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from sittervendor.core.errors import PatchError
from sittervendor.core.models import RewriteRule
from sittervendor.processing import (
    CANONICAL_PARSER_RULE,
    ENGINE_NAMESPACE_RULE,
    SHARED_SCANNER_RULE,
    TextPatcher,
)


class PatcherTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.patcher = TextPatcher()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, name: str, body: str) -> Path:
        path = self.root / name
        path.write_text(body, encoding="utf-8")
        return path


class RewriteIncludesTests(PatcherTestCase):
    def test_canonical_include_becomes_local(self) -> None:
        path = self.write("parser.c", "#include <tree_sitter/parser.h>\nint x;\n#include <tree_sitter/parser.h>\n")
        counts = self.patcher.rewrite_includes(path, [CANONICAL_PARSER_RULE])
        self.assertEqual(counts, [2])
        self.assertEqual(path.read_text(), '#include "parser.h"\nint x;\n#include "parser.h"\n')

    def test_rules_apply_in_order(self) -> None:
        path = self.write("scanner.c", '#include "../../common/scanner.h"\n#include <tree_sitter/parser.h>\n')
        counts = self.patcher.rewrite_includes(path, [SHARED_SCANNER_RULE, CANONICAL_PARSER_RULE])
        self.assertEqual(counts, [1, 1])
        self.assertEqual(path.read_text(), '#include "scanner.h"\n#include "parser.h"\n')

    def test_no_match_leaves_file_untouched(self) -> None:
        body = "/* nothing to see */\n"
        path = self.write("plain.c", body)
        before = path.stat().st_mtime_ns
        self.assertEqual(self.patcher.rewrite_includes(path, [CANONICAL_PARSER_RULE]), [0])
        self.assertEqual(path.read_text(), body)
        self.assertEqual(path.stat().st_mtime_ns, before)

    def test_required_rule_without_match_raises(self) -> None:
        path = self.write("api.c", "int main(void);\n")
        with self.assertRaises(PatchError) as ctx:
            self.patcher.rewrite_includes(path, [ENGINE_NAMESPACE_RULE])
        self.assertEqual(ctx.exception.path, path)

    def test_replacement_is_literal(self) -> None:
        path = self.write("a.txt", "foo foo\n")
        rule = RewriteRule(pattern="foo", replacement=r"\1\g<0>")
        self.patcher.rewrite_includes(path, [rule])
        self.assertEqual(path.read_text(), "\\1\\g<0> \\1\\g<0>\n")

    def test_non_utf8_bytes_round_trip(self) -> None:
        path = self.root / "latin1.c"
        path.write_bytes(b"/* caf\xe9 */\n#include <tree_sitter/parser.h>\n")
        self.patcher.rewrite_includes(path, [CANONICAL_PARSER_RULE])
        self.assertEqual(path.read_bytes(), b'/* caf\xe9 */\n#include "parser.h"\n')

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(PatchError):
            self.patcher.rewrite_includes(self.root / "missing.c", [CANONICAL_PARSER_RULE])

    def test_invalid_pattern_raises(self) -> None:
        path = self.write("x.c", "x\n")
        with self.assertRaises(PatchError):
            self.patcher.rewrite_includes(path, [RewriteRule(pattern="(", replacement="")])


class RewriteManyTests(PatcherTestCase):
    def test_required_rule_counts_across_files(self) -> None:
        a = self.write("a.c", '#include "tree_sitter/api.h"\n')
        b = self.write("b.c", "int b;\n")
        self.assertEqual(self.patcher.rewrite_many([a, b], [ENGINE_NAMESPACE_RULE]), [1])
        self.assertEqual(a.read_text(), '#include "api.h"\n')

    def test_required_rule_missing_everywhere_raises(self) -> None:
        a = self.write("a.c", "int a;\n")
        with self.assertRaises(PatchError):
            self.patcher.rewrite_many([a], [ENGINE_NAMESPACE_RULE])


class InsertIncludeTests(PatcherTestCase):
    LINE = '#include "language.h"'

    def test_prepends_line_and_keeps_content(self) -> None:
        body = '#include "tree_sitter/api.h"\nstatic int q;\n'
        path = self.write("query.c", body)
        self.assertTrue(self.patcher.insert_include(path, self.LINE))
        text = path.read_text()
        self.assertEqual(text.splitlines()[0], self.LINE)
        self.assertEqual(text, f"{self.LINE}\n{body}")

    def test_second_application_is_a_no_op(self) -> None:
        path = self.write("query.c", "static int q;\n")
        self.patcher.insert_include(path, self.LINE)
        once = path.read_text()
        self.assertFalse(self.patcher.insert_include(path, self.LINE))
        self.assertEqual(path.read_text(), once)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(PatchError):
            self.patcher.insert_include(self.root / "query.c", self.LINE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
