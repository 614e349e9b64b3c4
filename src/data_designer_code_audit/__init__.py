# SPDX-License-Identifier: Apache-2.0
"""Code Audit plugin for NeMo Data Designer.

Adds a ``code-audit`` column type that inspects source code with compiled
regex heuristics: language detection, line and declaration counts, a fixed
catalog of quality issues, explainable 0-100 scores, and a highlighted HTML
preview. No LLM calls, no API dependencies.

Usage::

    from data_designer_code_audit import CodeAuditColumnConfig

    builder.add_column(CodeAuditColumnConfig(
        name="code_audit",
        target_columns=["source"],
        min_maintainability=60,
    ))
"""

from data_designer_code_audit.config import CodeAuditColumnConfig
from data_designer_code_audit.core import Thresholds, analyze_code

__all__ = ["CodeAuditColumnConfig", "analyze_code", "Thresholds"]
