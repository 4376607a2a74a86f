"""
Tests for removing functions from the original files.
"""

from pathlib import Path

import pytest

from fsplit.errors import WriteError
from fsplit.source_index.comments import is_comment_kept
from fsplit.source_index.loader import parse_source
from fsplit.split.rewriter import remove_functions, render_without_functions
from fsplit.types import CommentBlock, DeclKind, Declaration, Span

from go_fixtures import EXAMPLE_A, MIXED, PassThroughFormatter


def parse(text, name='m.go'):
    return parse_source(Path(name), text.encode('utf-8'))


class TestCommentOwnership:

    def setup_method(self):
        self.doc = CommentBlock(Span(10, 20), '// F')
        self.inner = CommentBlock(Span(40, 50), '// body')
        self.loose = CommentBlock(Span(100, 110), '// loose')
        self.func = Declaration(DeclKind.FUNCTION, Span(21, 60), name='F', doc=self.doc)
        self.var = Declaration(DeclKind.OTHER, Span(70, 90))
        self.decls = [self.func, self.var]

    def removed(self, d):
        return d.kind == DeclKind.FUNCTION

    def test_doc_comment_of_removed_function_is_dropped(self):
        assert not is_comment_kept(self.doc, self.decls, self.removed)

    def test_comment_inside_removed_function_is_dropped(self):
        assert not is_comment_kept(self.inner, self.decls, self.removed)

    def test_unassociated_comment_is_kept(self):
        assert is_comment_kept(self.loose, self.decls, self.removed)

    def test_comment_of_surviving_declaration_is_kept(self):
        var_doc = CommentBlock(Span(62, 69), '// v')
        self.var.doc = var_doc
        assert is_comment_kept(var_doc, self.decls, self.removed)

    def test_comment_at_declaration_start_is_not_inside(self):
        edge = CommentBlock(Span(21, 25), '/**/')
        assert not self.func.span.contains(21)
        assert is_comment_kept(edge, [self.func], self.removed)


class TestRender:

    def test_example_file(self):
        out = render_without_functions(parse(EXAMPLE_A))
        assert out == '// Package p is an example.\npackage p\n\nimport "fmt"\n'

    def test_keeps_non_function_declarations_verbatim(self):
        out = render_without_functions(parse(MIXED))
        assert out == (
            'package p\n'
            '\n'
            'import (\n'
            '    "fmt"\n'
            '    "strings"\n'
            ')\n'
            '\n'
            '// Limit bounds the stack size.\n'
            'const Limit = 10\n'
            '\n'
            '// Stack is a LIFO.\n'
            'type Stack struct {\n'
            '    items []string\n'
            '}\n'
            '\n'
            'var names = []string{"a", "b"} // default names\n'
            '\n'
            '// trailing file comment\n'
        )

    def test_rendered_file_reparses_to_remaining_declarations(self):
        before = parse(MIXED)
        after = parse(render_without_functions(before))
        kept = [before.slice(d.span.start, d.span.end) for d in before.declarations if d.kind != DeclKind.FUNCTION]
        assert [after.slice(d.span.start, d.span.end) for d in after.declarations] == kept

    def test_raw_string_blank_lines_untouched(self):
        src = 'package p\n\nvar s = `a\n\n\n\nb`\n\nfunc A() {}\n\nfunc B() {}\n'
        assert render_without_functions(parse(src)) == 'package p\n\nvar s = `a\n\n\n\nb`\n'


class TestRemoveFunctions:

    def test_rewrites_only_targets(self, make_pkg):
        one = 'package p\n\nfunc One() {}\n'
        pkg_dir = make_pkg({'a.go': EXAMPLE_A, 'one.go': one})
        fmt = PassThroughFormatter()
        rewritten = remove_functions(pkg_dir, fmt)
        assert rewritten == [str(pkg_dir / 'a.go')]
        assert (pkg_dir / 'one.go').read_text() == one
        assert [Path(name).name for name, _ in fmt.calls] == ['a.go']

    def test_failure_does_not_block_other_files(self, make_pkg):
        pkg_dir = make_pkg({'a.go': EXAMPLE_A, 'b.go': MIXED, 'c.go': EXAMPLE_A})
        fmt = PassThroughFormatter(fail_on={'a.go', 'c.go'})
        with pytest.raises(WriteError) as exc:
            remove_functions(pkg_dir, fmt)
        # first error wins
        assert exc.value.path == str(pkg_dir / 'a.go')
        assert 'formatting failed' in str(exc.value)
        assert (pkg_dir / 'a.go').read_text() == EXAMPLE_A
        assert 'func' not in (pkg_dir / 'b.go').read_text()
        assert [Path(name).name for name, _ in fmt.calls] == ['a.go', 'b.go', 'c.go']
