"""Pydantic models for AI issue analysis."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..github_client.models import GitHubIssue


class Priority(str, Enum):
    """Triage priority."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Category(str, Enum):
    """Issue category."""

    BUG = "Bug"
    FEATURE_REQUEST = "Feature Request"
    QUESTION = "Question"
    DOCUMENTATION = "Documentation"
    ENHANCEMENT = "Enhancement"
    OTHER = "Other"


class Effort(str, Enum):
    """Rough effort estimate."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


DEFAULT_SUGGESTED_ACTION = "Review the issue manually"


class IssueAnalysis(BaseModel):
    """Structured response for issue triage.

    Field aliases match the camelCase keys the model is asked to return.
    """

    model_config = ConfigDict(
        extra="ignore",
        use_enum_values=True,
        populate_by_name=True,
        frozen=True,
    )

    priority: Priority
    category: Category
    summary: str = Field(description="1-2 sentence summary of the issue")
    suggested_action: str = Field(
        alias="suggestedAction",
        description="Recommended next step for the maintainer",
    )
    estimated_effort: Effort = Field(alias="estimatedEffort")

    @classmethod
    def default_for(cls, issue: GitHubIssue) -> "IssueAnalysis":
        """Fallback analysis used when the model reply cannot be parsed."""
        return cls(
            priority=Priority.MEDIUM,
            category=Category.OTHER,
            summary=issue.title,
            suggested_action=DEFAULT_SUGGESTED_ACTION,
            estimated_effort=Effort.MEDIUM,
        )


class AnalyzedIssue(BaseModel):
    """An issue paired with its analysis, as handed to the notifiers."""

    issue: GitHubIssue
    analysis: IssueAnalysis
