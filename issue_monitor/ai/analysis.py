"""Issue analysis: prompt construction, inference, and reply parsing."""

import json
import logging
import re

from pydantic import ValidationError

from ..github_client.models import GitHubIssue
from .inference import InferenceClient
from .models import IssueAnalysis
from .prompts import ISSUE_ANALYSIS_PROMPT, NO_BODY_PLACEHOLDER, NO_LABELS_PLACEHOLDER

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_PLAIN_FENCE = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)


def format_issue_prompt(issue: GitHubIssue) -> str:
    """Format issue data for the analysis prompt."""
    return ISSUE_ANALYSIS_PROMPT.format(
        title=issue.title,
        body=issue.body or NO_BODY_PLACEHOLDER,
        labels=", ".join(issue.label_names) or NO_LABELS_PLACEHOLDER,
        author=issue.user.login,
    )


def extract_json_block(text: str) -> str:
    """Return the contents of a ```json fence, a plain fence, or the text itself."""
    match = _JSON_FENCE.search(text) or _PLAIN_FENCE.search(text)
    candidate = match.group(1) if match else text
    return candidate.strip()


def parse_analysis(text: str, issue: GitHubIssue) -> IssueAnalysis:
    """Parse a model reply into an analysis.

    Any reply that is not a JSON object of the expected shape is replaced
    wholesale by ``IssueAnalysis.default_for(issue)``.
    """
    try:
        return IssueAnalysis.model_validate(json.loads(extract_json_block(text)))
    except (ValueError, RecursionError, ValidationError) as e:
        logger.warning(
            f"Could not parse analysis for issue #{issue.number}, "
            f"using default: {e}"
        )
        return IssueAnalysis.default_for(issue)


class IssueAnalyzer:
    """Classifies issues with one inference request each."""

    def __init__(self, client: InferenceClient):
        self.client = client

    async def analyze(self, issue: GitHubIssue) -> IssueAnalysis:
        """Analyze a single issue.

        Unparsable replies fall back to the default analysis; transport and
        HTTP status failures propagate.
        """
        text = await self.client.complete(format_issue_prompt(issue))
        return parse_analysis(text, issue)
