"""Run configuration for the issue monitor."""

import os

from pydantic import BaseModel, Field

DEFAULT_MODELS_ENDPOINT = "https://models.inference.ai.azure.com/chat/completions"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_SENDER_EMAIL = "noreply@github-issue-monitor.com"


class MonitorConfig(BaseModel):
    """Credentials, addresses and tuning for a single monitor run.

    Built once (usually by ``from_env``) and handed to every component, so
    nothing below the CLI reads the process environment directly.
    """

    repo_owner: str = Field("", description="Owner of the monitored repository")
    repo_name: str = Field("", description="Name of the monitored repository")
    github_token: str | None = Field(None, description="GitHub API token")
    models_token: str | None = Field(
        None, description="Token for the inference endpoint (defaults to GitHub)"
    )
    models_endpoint: str = Field(
        DEFAULT_MODELS_ENDPOINT, description="Chat-completions endpoint URL"
    )
    model: str = Field(DEFAULT_MODEL, description="Model identifier")
    max_tokens: int = Field(500, gt=0, description="Completion token cap")
    temperature: float = Field(0.3, ge=0.0, le=2.0)
    request_timeout: float = Field(
        60.0, gt=0, description="Timeout in seconds for outbound HTTP calls"
    )
    lookback_hours: int = Field(24, gt=0, description="Trailing issue window")
    slack_webhook_url: str | None = None
    sendgrid_api_key: str | None = None
    notify_email: str | None = None
    sender_email: str = DEFAULT_SENDER_EMAIL

    @classmethod
    def from_env(cls) -> "MonitorConfig":
        """Build configuration from environment variables.

        Empty variables are treated as unset.
        """

        def env(name: str) -> str | None:
            value = os.getenv(name)
            return value.strip() if value and value.strip() else None

        overrides: dict[str, object] = {
            "models_endpoint": env("MODELS_ENDPOINT"),
            "model": env("MODEL_NAME"),
            "max_tokens": env("MODEL_MAX_TOKENS"),
            "temperature": env("MODEL_TEMPERATURE"),
            "request_timeout": env("REQUEST_TIMEOUT"),
            "lookback_hours": env("LOOKBACK_HOURS"),
            "sender_email": env("SENDER_EMAIL"),
        }
        return cls(
            repo_owner=env("REPO_OWNER") or "",
            repo_name=env("REPO_NAME") or "",
            github_token=env("GITHUB_TOKEN"),
            models_token=env("MODELS_TOKEN"),
            slack_webhook_url=env("SLACK_WEBHOOK_URL"),
            sendgrid_api_key=env("SENDGRID_API_KEY"),
            notify_email=env("NOTIFY_EMAIL"),
            **{key: value for key, value in overrides.items() if value is not None},
        )

    @property
    def repository(self) -> str:
        """Repository in ``owner/repo`` form."""
        return f"{self.repo_owner}/{self.repo_name}"

    @property
    def inference_token(self) -> str | None:
        return self.models_token or self.github_token

    def slack_configured(self) -> bool:
        """Check if the Slack webhook is set."""
        return bool(self.slack_webhook_url)

    def email_configured(self) -> bool:
        """Check if SendGrid has both an API key and a recipient."""
        return bool(self.sendgrid_api_key and self.notify_email)

    def check_required(self) -> None:
        """Validate required settings and raise error if any are missing."""
        missing = []
        if not self.repo_owner:
            missing.append("REPO_OWNER")
        if not self.repo_name:
            missing.append("REPO_NAME")
        if not self.github_token:
            missing.append("GITHUB_TOKEN")

        if missing:
            raise ValueError(
                f"Environment variables required for the issue monitor: "
                f"{', '.join(missing)}"
            )
