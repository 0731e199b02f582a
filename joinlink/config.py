"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class InvitationSettings(BaseModel):
    """Invitation lifecycle configuration."""

    # Days an invitation stays usable after it was (re)assigned
    ttl_days: int = 30

    # Days before expiry at which "expiring soon" warnings start.
    # Independent of ttl_days on purpose: a 90 day TTL still warns 5 days out.
    warning_days: int = 5

    # Substrings a URL must contain to be considered a Slack invitation
    allowed_hosts: list[str] = ["join.slack.com", "slack.com/signup"]

    # Liveness probe
    probe_timeout_seconds: float = 10.0
    probe_user_agent: str = "SlackInviteValidator/1.0"


class StorageSettings(BaseModel):
    """Invitation record storage configuration."""

    # "edge_config" stores the record in Vercel Edge Config,
    # "file" keeps it in a local JSON file
    backend: Literal["edge_config", "file"] = "file"

    # Edge Config connection string:
    # https://edge-config.vercel.com/<id>?token=<read token>
    edge_config: str | None = None

    # Vercel REST API token (required for writes to Edge Config)
    api_token: str | None = None
    team_id: str | None = None

    # Key the record lives under
    item_key: str = "slack_invite"

    # Local file backend
    file_path: str = "data/invite.json"

    # Append the local file to the Edge Config read chain
    file_fallback: bool = False

    # Timeout for store requests
    timeout_seconds: float = 10.0


class SlackSettings(BaseModel):
    """Slack notification configuration."""

    # Incoming webhook URL (notifications are skipped when unset)
    webhook_url: str | None = None
    timeout_seconds: float = 10.0


class CronSettings(BaseModel):
    """Scheduled check configuration."""

    # Shared secret sent by the scheduler as "Authorization: Bearer <secret>"
    # When unset every scheduled check request is rejected
    secret: str | None = None


class AuthSettings(BaseModel):
    """Admin authentication configuration."""

    # JWT settings for admin sessions issued by the identity provider
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"

    # Emails allowed to administer the invitation
    # Empty list: any holder of a valid session token is an admin
    admin_emails: list[str] = []


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    All values come from environment variables (or a .env file). Nested
    settings use a double underscore:

        INVITATION__TTL_DAYS=30
        STORAGE__BACKEND=edge_config
        STORAGE__EDGE_CONFIG=https://edge-config.vercel.com/ecfg_abc?token=...
        STORAGE__API_TOKEN=...
        SLACK__WEBHOOK_URL=https://hooks.slack.com/services/...
        CRON__SECRET=...
        AUTH__JWT_SECRET=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__BACKEND syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    invitation: InvitationSettings = InvitationSettings()
    storage: StorageSettings = StorageSettings()
    slack: SlackSettings = SlackSettings()
    cron: CronSettings = CronSettings()
    auth: AuthSettings = AuthSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    def model_post_init(self, __context) -> None:
        if self.git_sha == "unknown":
            self.git_sha = self._load_git_sha()

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
