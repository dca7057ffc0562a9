"""Prompt templates for AI issue analysis."""

ISSUE_ANALYSIS_PROMPT = """Analyze this GitHub issue and provide a JSON response with your analysis.

Issue Title: {title}
Issue Body: {body}
Labels: {labels}
Author: {author}

Respond with ONLY valid JSON in this exact format:
{{
  "priority": "Critical" | "High" | "Medium" | "Low",
  "category": "Bug" | "Feature Request" | "Question" | "Documentation" | "Enhancement" | "Other",
  "summary": "1-2 sentence summary of the issue",
  "suggestedAction": "Recommended next step for the maintainer",
  "estimatedEffort": "Small" | "Medium" | "Large"
}}"""

NO_BODY_PLACEHOLDER = "No description provided"
NO_LABELS_PLACEHOLDER = "None"
