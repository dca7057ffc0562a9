"""AI analysis module for GitHub issue triage."""

from .analysis import (
    IssueAnalyzer,
    extract_json_block,
    format_issue_prompt,
    parse_analysis,
)
from .inference import InferenceClient
from .models import AnalyzedIssue, Category, Effort, IssueAnalysis, Priority

__all__ = [
    "AnalyzedIssue",
    "Category",
    "Effort",
    "InferenceClient",
    "IssueAnalysis",
    "IssueAnalyzer",
    "Priority",
    "extract_json_block",
    "format_issue_prompt",
    "parse_analysis",
]
