from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_code_audit.core import LanguageTag


class CodeAuditColumnConfig(SingleColumnConfig):
    """Audit source-code columns with heuristic, regex-based quality checks.

    Detects the language, counts lines and declarations, flags issues such as
    TODO markers, magic numbers and deep nesting, and scores maintainability,
    comment density, complexity, clarity, documentation completeness and risk
    (each 0-100).

    Attributes:
        target_columns: Columns whose text is joined with newlines and audited.
        language: Language tag assumed when detection finds no marker, or used
            as-is when ``auto_detect_language`` is off.
        auto_detect_language: Guess each row's language from its code.
        documentation_column: Optional column holding documentation already
            written for the code; raises the doc-completeness score.
        min_maintainability: Minimum maintainability score for ``is_valid=True``.
        include_issues: Include the issue list (kind and detail) in output.
        include_markup: Include the highlighted HTML preview in output.
    """

    target_columns: list[str] = Field(min_length=1)
    language: LanguageTag = "java"
    auto_detect_language: bool = Field(default=True, description="Guess the language of each row from its code")
    documentation_column: str | None = Field(default=None, description="Column with existing documentation text")
    min_maintainability: int = Field(default=50, ge=0, le=100, description="Minimum maintainability score for is_valid=True")
    include_issues: bool = Field(default=True, description="Include detected issues in output")
    include_markup: bool = Field(default=False, description="Include the highlighted HTML preview in output")
    column_type: Literal["code-audit"] = "code-audit"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50e"

    @property
    def required_columns(self) -> list[str]:
        if self.documentation_column and self.documentation_column not in self.target_columns:
            return [*self.target_columns, self.documentation_column]
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
