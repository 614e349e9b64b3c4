from __future__ import annotations

import logging

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_code_audit.config import CodeAuditColumnConfig
from data_designer_code_audit.core import analyze_code

logger = logging.getLogger(__name__)


def _cell_text(value: object) -> str:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def audit_row(code: str, doc_text: str, config: CodeAuditColumnConfig) -> dict:
    """Analyze one row's code and shape the result for the output column."""
    analysis = analyze_code(
        code,
        language=config.language,
        doc_text=doc_text,
        auto_detect=config.auto_detect_language,
    )
    stats = analysis["stats"]
    quality = analysis["quality"]
    output: dict = {
        "is_valid": quality is not None and quality.maintainability >= config.min_maintainability,
        "language": analysis["language"],
        "line_count": stats.line_count,
        "function_count": stats.function_count,
        "complexity": stats.complexity,
        "quality": quality.to_payload() if quality is not None else None,
        "issue_kinds": [issue.kind for issue in analysis["issues"]],
    }
    if config.include_issues:
        output["issues"] = [issue.to_payload() for issue in analysis["issues"]]
    if config.include_markup:
        output["markup"] = analysis["markup"]
    return output


def audit_frame(data: pd.DataFrame, config: CodeAuditColumnConfig) -> list[dict]:
    """Audit every row of ``data``, joining non-empty target cells with newlines."""
    doc_column = config.documentation_column
    results = []
    for index, row in data.iterrows():
        parts = [_cell_text(row[c]) for c in config.target_columns]
        code = "\n".join(p for p in parts if p)
        doc_text = _cell_text(row[doc_column]) if doc_column else ""
        if not code.strip():
            logger.debug(f"   row {index}: blank code")
        results.append(audit_row(code, doc_text, config))
    return results


class CodeAuditColumnGenerator(ColumnGeneratorFullColumn[CodeAuditColumnConfig]):
    """Column generator that audits source code via heuristic regex analysis."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50e Auditing code for column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_maintainability: {self.config.min_maintainability}")

        results = audit_frame(data, self.config)

        data = data.copy()
        data[self.config.name] = results
        return data
