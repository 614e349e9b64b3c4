import pytest

from data_designer_code_audit.highlight import (
    PLACEHOLDER,
    Token,
    _scanner,
    escape_html,
    keywords_for,
    render_markup,
    tokenize,
)
from data_designer_code_audit.samples import EXAMPLE_CODE


class TestTokenize:
    @pytest.mark.parametrize("language", sorted(EXAMPLE_CODE))
    def test_tokens_rebuild_escaped_text(self, language):
        text = EXAMPLE_CODE[language]
        assert "".join(t.text for t in tokenize(text, language)) == escape_html(text)

    def test_keyword(self):
        assert tokenize("return x;", "java") == [Token("return", "keyword"), Token(" x;")]

    def test_keyword_inside_comment_stays_comment(self):
        assert tokenize("// return x", "java") == [Token("// return x", "comment")]

    def test_keyword_inside_string_stays_string(self):
        assert tokenize('x = "if";', "java") == [Token("x = "), Token('"if"', "string"), Token(";")]

    def test_block_comment_spans_lines(self):
        tokens = tokenize("/* a\nb */ x", "java")
        assert tokens[0] == Token("/* a\nb */", "comment")

    def test_number(self):
        assert tokenize("x = 3.14", "python") == [Token("x = "), Token("3.14", "number")]

    def test_digits_inside_identifier_are_plain(self):
        assert tokenize("abc123", "java") == [Token("abc123")]

    def test_language_specific_keywords(self):
        assert tokenize("def f", "java") == [Token("def f")]
        assert tokenize("def f", "python") == [Token("def", "keyword"), Token(" f")]

    def test_keyword_inside_identifier_is_plain(self):
        assert tokenize("format", "java") == [Token("format")]

    def test_symbolic_keywords(self):
        assert tokenize("a => b", "javascript") == [Token("a "), Token("=&gt;", "keyword"), Token(" b")]
        assert tokenize("<?php echo", "php") == [
            Token("&lt;?php", "keyword"),
            Token(" "),
            Token("echo", "keyword"),
        ]

    def test_hash_include_is_a_comment(self):
        assert tokenize("#include <stdio.h>", "cpp") == [Token("#include &lt;stdio.h&gt;", "comment")]

    def test_unknown_languages_share_one_scanner(self):
        for i in range(40):
            assert tokenize("return x", f"lang{i}") == [Token("return", "keyword"), Token(" x")]
        assert _scanner.cache_info().currsize <= 16

    def test_entities_are_atomic(self):
        assert tokenize("a < b", "java") == [Token("a "), Token("&lt;"), Token(" b")]


class TestKeywords:
    def test_common_keywords_come_first(self):
        keywords = keywords_for("java")
        assert keywords[0] == "return"
        assert keywords[-1] == "extends"
        assert len(keywords) == len(set(keywords))

    def test_unknown_language_gets_common_only(self):
        assert "def" not in keywords_for("cobol")
        assert "return" in keywords_for("cobol")


class TestRenderMarkup:
    def test_script_tag_is_escaped(self):
        markup = render_markup("<script>alert(1)</script>", "javascript")
        assert "<script>" not in markup
        assert "&lt;script&gt;" in markup

    def test_inserted_markup_is_not_rematched(self):
        # "class" is a keyword and also appears in every span's attribute.
        markup = render_markup("class Foo", "java")
        assert markup == (
            '<pre class="code-preview"><code>'
            '<span class="text-purple-300 font-semibold">class</span> Foo'
            "</code></pre>"
        )

    def test_custom_style_classes(self):
        styles = {"comment": "c", "string": "s", "number": "n", "keyword": "k"}
        markup = render_markup("return 7", "java", styles)
        assert '<span class="k">return</span> <span class="n">7</span>' in markup

    def test_partial_style_classes_fall_back_to_defaults(self):
        markup = render_markup("return 7", "java", {"keyword": "k"})
        assert '<span class="k">return</span> <span class="text-yellow-300">7</span>' in markup

    def test_empty_text_renders_placeholder(self):
        assert PLACEHOLDER in render_markup("", "java")

    def test_deterministic(self):
        text = EXAMPLE_CODE["cpp"]
        assert render_markup(text, "cpp") == render_markup(text, "cpp")
