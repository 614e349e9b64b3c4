# Heuristic source-code analyzer for documentation prompts.
#
# Guesses a language, counts lines and declarations, flags a fixed catalog of
# quality issues with compiled regex checks, and derives explainable 0-100
# quality scores. Everything here is a pure function of its inputs.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Literal

from data_designer_code_audit.highlight import render_markup

LanguageTag = Literal["java", "python", "javascript", "cpp", "php", "csharp"]
Complexity = Literal["Low", "Medium", "High"]

LANGUAGES: tuple[str, ...] = ("java", "python", "javascript", "cpp", "php", "csharp")
COMPLEXITY_LEVELS: tuple[str, ...] = ("Low", "Medium", "High")

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Thresholds:
    """Tunable thresholds, caps, and penalties used by the analyzer."""

    high_line_count: int = 100
    high_function_count: int = 10
    medium_line_count: int = 50
    medium_function_count: int = 5

    lines_per_comment: int = 10
    deep_nesting_min: int = 4
    long_function_chars: int = 500

    comment_weight: float = 1.2
    complexity_penalty_high: int = 30
    complexity_penalty_medium: int = 15
    complexity_penalty_low: int = 5
    nesting_penalty_step: int = 10
    nesting_penalty_cap: int = 40
    long_function_penalty_step: int = 10
    long_function_penalty_cap: int = 30
    magic_penalty_step: int = 8
    magic_penalty_cap: int = 40
    missing_comments_penalty: int = 25
    sub_score_floor: int = 10
    doc_comment_weight: int = 5
    doc_presence_bonus: int = 30
    risk_per_issue: int = 15

    score_min: int = 0
    score_max: int = 100


DEFAULT_THRESHOLDS = Thresholds()


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StructuralStats:
    line_count: int
    function_count: int
    complexity: Complexity

    def to_payload(self) -> dict[str, object]:
        return {
            "line_count": self.line_count,
            "function_count": self.function_count,
            "complexity": self.complexity,
        }


@dataclass(frozen=True)
class Issue:
    kind: str
    detail: str

    def to_payload(self) -> dict[str, str]:
        return {"kind": self.kind, "detail": self.detail}


@dataclass(frozen=True)
class QualityReport:
    maintainability: int
    comment_score: int
    complexity_score: int
    clarity_score: int
    doc_completeness: int
    risk: int

    def to_payload(self) -> dict[str, int]:
        return {
            "maintainability": self.maintainability,
            "comment_score": self.comment_score,
            "complexity_score": self.complexity_score,
            "clarity_score": self.clarity_score,
            "doc_completeness": self.doc_completeness,
            "risk": self.risk,
        }


EMPTY_STATS = StructuralStats(line_count=0, function_count=0, complexity="Low")

# Issue kinds, in scan order.
TODOS = "TODOs"
MISSING_COMMENTS = "Missing Comments"
MAGIC_NUMBERS = "Magic Numbers"
DEPRECATED_PATTERNS = "Deprecated patterns"
NULL_CHECKS = "Null checks"
DEEP_NESTING = "Deep nesting"
LONG_FUNCTIONS = "Long functions"

ISSUE_KINDS: tuple[str, ...] = (
    TODOS, MISSING_COMMENTS, MAGIC_NUMBERS, DEPRECATED_PATTERNS,
    NULL_CHECKS, DEEP_NESTING, LONG_FUNCTIONS,
)

_Check = Callable[[str, list[str], Thresholds], "Issue | None"]

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

# First match wins; python must stay ahead of javascript.
_LANGUAGE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\bdef\b|\bimport\b"), "python"),
    (re.compile(r"\bfunction\b|\bconst\b|\blet\b"), "javascript"),
    (re.compile(r"\bpublic class\b|\bprivate\b|\bthrows\b"), "java"),
    (re.compile(r"\busing\b|\bnamespace\b|\bconsole\.writeline\b"), "csharp"),
    (re.compile(r"#include|std::"), "cpp"),
    (re.compile(r"<\?php|\becho\b"), "php"),
]

_FUNCTION_RE = re.compile(r"function|def |public |private |protected |class ")
_COMMENT_RE = re.compile(r"/\*|\*/|//|# ")
_TODO_RE = re.compile(r"TODO|FIXME|XXX", re.IGNORECASE)
# Boundaries are consumed, so "42 43" counts once.
_MAGIC_NUMBER_RE = re.compile(r"[^A-Za-z0-9_](?:[1-9][0-9]{2,}|[2-9][0-9])[^A-Za-z0-9_]")
_DEPRECATED_RE = re.compile(r"auto_ptr|register|gets\s*\(", re.IGNORECASE)
_NULL_RE = re.compile(r"null|NULL|None")
_NULL_CHECK_RE = re.compile(r"==\s*null|!=\s*null|is not None|is None")
_NESTING_OPEN_RE = re.compile(r"\b(?:for|while|if|switch)\b")
_NESTING_CLOSE_RE = re.compile(r"\}|\bend\b")
_FUNCTION_SPLIT_RE = re.compile(r"\bfunction\b|\bdef\b|\bpublic\b|\bprivate\b")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _round(value: float) -> int:
    # Half-up, so 2.5 scores as 3 rather than 2.
    return int(math.floor(value + 0.5))


def _line_count(text: str) -> int:
    return len(text.split("\n"))


def _comment_count(text: str) -> int:
    return len(_COMMENT_RE.findall(text))


def _clamp(value: int, hp: Thresholds) -> int:
    return max(hp.score_min, min(hp.score_max, value))


# ---------------------------------------------------------------------------
# Language detection and structure
# ---------------------------------------------------------------------------


def detect_language(text: str, current_language: str = "java") -> str:
    """Guess the language of ``text``, falling back to ``current_language``.

    Rules are checked in a fixed order and the first hit wins, so a snippet
    mentioning both ``def`` and ``function`` is reported as python.
    """
    if not text:
        return current_language
    lower = text.lower()
    for pattern, language in _LANGUAGE_RULES:
        if pattern.search(lower):
            return language
    return current_language


def classify_complexity(line_count: int, function_count: int, thresholds: Thresholds | None = None) -> Complexity:
    hp = thresholds or DEFAULT_THRESHOLDS
    if line_count > hp.high_line_count or function_count > hp.high_function_count:
        return "High"
    if line_count > hp.medium_line_count or function_count > hp.medium_function_count:
        return "Medium"
    return "Low"


def structural_stats(text: str, language: str | None = None, thresholds: Thresholds | None = None) -> StructuralStats:
    """Count lines and declaration keywords and classify complexity.

    ``language`` is accepted for symmetry with the highlighter; the counts
    use the same keyword set for every language.
    """
    lines = _line_count(text)
    functions = len(_FUNCTION_RE.findall(text))
    return StructuralStats(
        line_count=lines,
        function_count=functions,
        complexity=classify_complexity(lines, functions, thresholds),
    )


# ---------------------------------------------------------------------------
# Checks: each returns one Issue or None
# ---------------------------------------------------------------------------


def _check_todos(text: str, _lines: list[str], _hp: Thresholds) -> Issue | None:
    count = len(_TODO_RE.findall(text))
    if count > 0:
        return Issue(TODOS, f"{count} TODO/FIXME/XXX markers")
    return None


def _check_missing_comments(text: str, lines: list[str], hp: Thresholds) -> Issue | None:
    comments = _comment_count(text)
    if comments < max(1, len(lines) // hp.lines_per_comment):
        return Issue(MISSING_COMMENTS, f"{comments} comments for {len(lines)} lines")
    return None


def _check_magic_numbers(text: str, _lines: list[str], _hp: Thresholds) -> Issue | None:
    count = len(_MAGIC_NUMBER_RE.findall(text))
    if count > 0:
        return Issue(MAGIC_NUMBERS, f"{count} suspicious numeric literals")
    return None


def _check_deprecated(text: str, _lines: list[str], _hp: Thresholds) -> Issue | None:
    if _DEPRECATED_RE.search(text):
        return Issue(DEPRECATED_PATTERNS, "Use of deprecated/unsafe APIs detected")
    return None


def _check_null_checks(text: str, _lines: list[str], _hp: Thresholds) -> Issue | None:
    if _NULL_RE.search(text) and not _NULL_CHECK_RE.search(text):
        return Issue(NULL_CHECKS, "Possible missing null checks")
    return None


def _check_deep_nesting(_text: str, lines: list[str], hp: Thresholds) -> Issue | None:
    depth = 0
    max_depth = 0
    for line in lines:
        if _NESTING_OPEN_RE.search(line):
            depth += 1
        if _NESTING_CLOSE_RE.search(line):
            depth = max(0, depth - 1)
        max_depth = max(max_depth, depth)
    if max_depth >= hp.deep_nesting_min:
        return Issue(DEEP_NESTING, f"Max nesting depth ~{max_depth}")
    return None


def _check_long_functions(text: str, _lines: list[str], hp: Thresholds) -> Issue | None:
    count = sum(1 for block in _FUNCTION_SPLIT_RE.split(text) if len(block) > hp.long_function_chars)
    if count > 0:
        return Issue(LONG_FUNCTIONS, f"{count} very long function(s) detected")
    return None


_CHECKS: list[_Check] = [
    _check_todos,
    _check_missing_comments,
    _check_magic_numbers,
    _check_deprecated,
    _check_null_checks,
    _check_deep_nesting,
    _check_long_functions,
]


def scan_issues(text: str, thresholds: Thresholds | None = None) -> list[Issue]:
    """Run every check in order and collect the issues they report."""
    if not text:
        return []
    hp = thresholds or DEFAULT_THRESHOLDS
    lines = text.split("\n")
    issues = []
    for check in _CHECKS:
        issue = check(text, lines, hp)
        if issue is not None:
            issues.append(issue)
    return issues


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def _complexity_penalty(complexity: str, hp: Thresholds) -> int:
    if complexity == "High":
        return hp.complexity_penalty_high
    if complexity == "Medium":
        return hp.complexity_penalty_medium
    return hp.complexity_penalty_low


def _count_kind(issues: list[Issue], kind: str) -> int:
    return sum(1 for issue in issues if issue.kind == kind)


def score_quality(
    text: str,
    issues: list[Issue],
    doc_text: str = "",
    complexity: str = "Low",
    thresholds: Thresholds | None = None,
) -> QualityReport:
    """Derive the quality report from the text, its issues, and any docs.

    Penalties count issue records, not the occurrences embedded in each
    issue's detail, so one magic number costs as much as ten.
    """
    hp = thresholds or DEFAULT_THRESHOLDS
    lines = _line_count(text) if text else 0
    comments = _comment_count(text)

    comment_score = min(hp.score_max, _round(comments / max(1, lines) * 100 * hp.comment_weight))

    complexity_penalty = _complexity_penalty(complexity, hp)
    nesting_penalty = min(hp.nesting_penalty_cap, _count_kind(issues, DEEP_NESTING) * hp.nesting_penalty_step)
    long_func_penalty = min(hp.long_function_penalty_cap, _count_kind(issues, LONG_FUNCTIONS) * hp.long_function_penalty_step)
    complexity_score = max(hp.sub_score_floor, hp.score_max - complexity_penalty - nesting_penalty - long_func_penalty)

    magic_penalty = min(hp.magic_penalty_cap, _count_kind(issues, MAGIC_NUMBERS) * hp.magic_penalty_step)
    missing_comments = hp.missing_comments_penalty if _count_kind(issues, MISSING_COMMENTS) else 0
    clarity_score = max(hp.sub_score_floor, hp.score_max - magic_penalty - missing_comments)

    maintainability = _round((comment_score + complexity_score + clarity_score) / 3)

    doc_presence = hp.doc_presence_bonus if doc_text.strip() else 0
    doc_completeness = min(hp.score_max, _round(comments * hp.doc_comment_weight + doc_presence))

    risk = min(hp.score_max, _round(len(issues) * hp.risk_per_issue + complexity_penalty))

    return QualityReport(
        maintainability=_clamp(maintainability, hp),
        comment_score=_clamp(comment_score, hp),
        complexity_score=_clamp(complexity_score, hp),
        clarity_score=_clamp(clarity_score, hp),
        doc_completeness=_clamp(doc_completeness, hp),
        risk=_clamp(risk, hp),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_code(
    text: str,
    language: str = "java",
    doc_text: str = "",
    auto_detect: bool = True,
    thresholds: Thresholds | None = None,
) -> dict:
    """Run the full analysis pipeline over one piece of source code.

    Args:
        text: The source code to analyze.
        language: Current language tag; used as-is, or as the fallback when
            ``auto_detect`` finds no marker.
        doc_text: Free-form documentation written for the code, if any.
        auto_detect: Guess the language from ``text`` before analyzing.
        thresholds: Optional tuning overrides. Uses sensible defaults if omitted.

    Returns:
        Dict with keys: language, stats, issues, quality, markup. ``quality``
        is None for blank input.
    """
    hp = thresholds or DEFAULT_THRESHOLDS
    lang = detect_language(text, language) if auto_detect else language

    if not text.strip():
        return {
            "language": lang,
            "stats": EMPTY_STATS,
            "issues": [],
            "quality": None,
            "markup": render_markup(text, lang),
        }

    stats = structural_stats(text, lang, hp)
    issues = scan_issues(text, hp)
    quality = score_quality(text, issues, doc_text, stats.complexity, hp)
    return {
        "language": lang,
        "stats": stats,
        "issues": issues,
        "quality": quality,
        "markup": render_markup(text, lang),
    }
