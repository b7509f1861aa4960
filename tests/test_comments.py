"""Tests for comment stripping"""

import pytest

from repotyper.core.comments import remove_comments, strip_comments
from repotyper.core.languages import get_profile


JS_SOURCE = """const a = 1; // one
/* block
   still */
const b = 2;


// full line
const c = `x`;
"""

PY_SOURCE = '''#!/usr/bin/env python
"""Module doc."""
import os  # os

def f():
    \'\'\'
    Doc
    \'\'\'
    return "#notcomment"
'''

HTML_SOURCE = """<div>
<!-- note -->
<p>hi</p>
<!--
multi
-->
</div>"""


def test_javascript_comments():
    """Test line, trailing and block comments are removed"""
    result = remove_comments(JS_SOURCE, "javascript")

    assert result == "const a = 1; \n\nconst b = 2;\n\nconst c = `x`;"


def test_url_is_not_treated_as_comment():
    """Test '://' survives while the trailing comment is cut"""
    line = 'let x = "http://example.com"; // comment'

    assert remove_comments(line, "javascript") == 'let x = "http://example.com";'


def test_marker_inside_string_is_kept():
    """Test odd quote count before a marker keeps the line intact"""
    line = 'const s = "a // b";'

    assert remove_comments(line, "typescript") == line


def test_later_marker_after_string_is_cut():
    """Test a marker inside a string is skipped but a later one is used"""
    line = 'const s = "a // b"; // trailing'

    assert remove_comments(line, "typescript") == 'const s = "a // b";'


def test_python_comments_and_docstrings():
    """Test Python hash comments and triple-quoted blocks"""
    result = remove_comments(PY_SOURCE, "python")

    assert not result.startswith("#!")
    assert "Module doc" not in result
    assert "Doc" not in result
    assert "import os" in result
    assert "# os" not in result
    assert 'return "#notcomment"' in result


def test_python_block_closes_on_matching_quotes():
    """Test a triple-quoted block only closes on the delimiter that opened it"""
    assert remove_comments("'''He said \"\"\"hi\"\"\" '''\nx = 1", "python") == "x = 1"

    text = "a = 1\n\"\"\"\nq = '''\n\"\"\"\nb = 2"
    assert remove_comments(text, "python") == "a = 1\n\nb = 2"


def test_html_comments():
    """Test HTML block comments on one and several lines"""
    assert remove_comments(HTML_SOURCE, "html") == "<div>\n\n<p>hi</p>\n\n</div>"


def test_css_has_no_inline_heuristic():
    """Test '#' selectors survive in CSS"""
    result = remove_comments("a { color: red; } /* x */ #id {}", "css")

    assert result == "a { color: red; }  #id {}"


def test_several_block_comments_on_one_line():
    """Test every closed block comment on a line is removed"""
    result = remove_comments("a /* 1 */ b /* 2 */ c", "go")

    assert result == "a  b  c"


def test_unterminated_block_consumes_rest():
    """Test an unclosed block comment swallows the rest of the file"""
    result = remove_comments("a\n/* open\nb\nc", "rust")

    assert result == "a"


def test_blank_lines_collapse():
    """Test runs of blank lines collapse to one"""
    assert remove_comments("a\n\n\n\nb", "javascript") == "a\n\nb"


def test_surrounding_whitespace_trimmed():
    """Test leading and trailing blank lines are trimmed"""
    assert remove_comments("\n\n# head\nx = 1\n\n", "python") == "x = 1"


def test_unknown_language_is_identity():
    """Test text is returned unchanged without a profile"""
    text = "// not stripped\n\n\n\n  x  "

    assert remove_comments(text, "plaintext") == text
    assert strip_comments(text, None) == text


def test_shell_comments():
    """Test shell comments and shebang lines"""
    result = remove_comments("#!/bin/sh\necho hi # greet\n# done", "shell")

    assert result == "echo hi"


@pytest.mark.parametrize(
    "text,language",
    [
        (JS_SOURCE, "javascript"),
        (PY_SOURCE, "python"),
        (HTML_SOURCE, "html"),
        ("a { b: c; } /* d */\n\n\n/* e\nf */ g {}", "css"),
        ("key: value # note\n\n\n# full\nother: 1", "yaml"),
    ],
)
def test_strip_is_idempotent(text, language):
    """Test stripping twice gives the same result as stripping once"""
    profile = get_profile(language)
    once = strip_comments(text, profile)

    assert strip_comments(once, profile) == once
