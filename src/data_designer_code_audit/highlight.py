"""Lightweight syntax highlighting for code previews.

The input is HTML-escaped first, then scanned once into a flat list of
non-overlapping tokens. Each token is rendered exactly once, so markup
inserted for one token is never re-matched by a later rule.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from functools import lru_cache

_COMMON_KEYWORDS = [
    "return", "const", "let", "var", "if", "else", "for", "while", "switch", "case",
    "break", "continue", "class", "new", "throw", "try", "catch", "finally",
    "import", "from", "export",
]
_LANGUAGE_KEYWORDS = {
    "java": ["public", "private", "protected", "void", "throws", "implements", "extends"],
    "python": ["def", "None", "True", "False", "self", "elif", "lambda", "with", "as"],
    "javascript": ["async", "await", "=>", "function"],
    "cpp": ["#include", "std::", "template", "typename", "constexpr"],
    "php": ["<?php", "echo", "$this"],
    "csharp": ["using", "namespace", "Console", "static"],
}

STYLE_CLASSES = {
    "comment": "text-slate-400",
    "string": "text-green-300",
    "number": "text-yellow-300",
    "keyword": "text-purple-300 font-semibold",
}

PLACEHOLDER = "// Preview will appear here"

_COMMENT = r"/\*[\s\S]*?\*/|//[^\n]*|#[^\n]*"
_STRING = r'"[^"]*"|\'[^\']*\'|`[^`]*`'
_NUMBER = r"\b[0-9]+(?:\.[0-9]+)?\b"
_ENTITY = r"&(?:amp|lt|gt);"


@dataclass(frozen=True)
class Token:
    text: str
    style: str | None = None


def escape_html(text: str) -> str:
    return html.escape(text, quote=False)


def keywords_for(language: str) -> list[str]:
    """Common keywords followed by the language's own, without duplicates."""
    seen: set[str] = set()
    out: list[str] = []
    for kw in _COMMON_KEYWORDS + _LANGUAGE_KEYWORDS.get(language, []):
        if kw not in seen:
            seen.add(kw)
            out.append(kw)
    return out


def _keyword_pattern(keyword: str) -> str:
    escaped = escape_html(keyword)
    pattern = re.escape(escaped)
    # Whole-word only on edges that are word characters ("=>" has none).
    if re.match(r"\w", escaped):
        pattern = r"(?<!\w)" + pattern
    if re.search(r"\w$", escaped):
        pattern = pattern + r"(?!\w)"
    return pattern


@lru_cache(maxsize=16)
def _scanner(language: str) -> re.Pattern[str]:
    keywords = "|".join(_keyword_pattern(kw) for kw in keywords_for(language))
    return re.compile(
        f"(?P<comment>{_COMMENT})"
        f"|(?P<string>{_STRING})"
        f"|(?P<number>{_NUMBER})"
        f"|(?P<keyword>{keywords})"
        f"|(?P<entity>{_ENTITY})"
    )


def tokenize(text: str, language: str) -> list[Token]:
    """Split escaped ``text`` into classified tokens.

    Joining the ``text`` of every token gives back ``escape_html(text)``.
    """
    escaped = escape_html(text)
    tokens: list[Token] = []
    pos = 0
    key = language if language in _LANGUAGE_KEYWORDS else ""
    for m in _scanner(key).finditer(escaped):
        if m.start() > pos:
            tokens.append(Token(escaped[pos : m.start()]))
        style = None if m.lastgroup == "entity" else m.lastgroup
        tokens.append(Token(m.group(0), style))
        pos = m.end()
    if pos < len(escaped):
        tokens.append(Token(escaped[pos:]))
    return tokens


def render_tokens(tokens: list[Token], style_classes: dict[str, str] | None = None) -> str:
    classes = {**STYLE_CLASSES, **(style_classes or {})}
    parts = []
    for token in tokens:
        if token.style is None:
            parts.append(token.text)
        else:
            parts.append(f'<span class="{classes[token.style]}">{token.text}</span>')
    return "".join(parts)


def render_markup(text: str, language: str, style_classes: dict[str, str] | None = None) -> str:
    """Render ``text`` as a highlighted ``<pre><code>`` preview block."""
    if not text:
        return f'<pre class="code-preview"><code>{PLACEHOLDER}</code></pre>'
    body = render_tokens(tokenize(text, language), style_classes)
    return f'<pre class="code-preview"><code>{body}</code></pre>'
