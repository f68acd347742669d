import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_PORT = 3000


def _parse_port(raw, default=DEFAULT_PORT):
    try:
        port = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if not 1 <= port <= 65535:
        return default
    return port


def _clean_url(raw):
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


# Configurações globais de ambiente
TEAMS_WEBHOOK_URL = _clean_url(os.getenv("TEAMS_WEBHOOK_URL"))
APP_PORT = _parse_port(os.getenv("PORT"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Configuração do processo, lida uma única vez no startup."""

    teams_webhook_url: Optional[str] = None
    port: int = DEFAULT_PORT
    debug: bool = False

    @property
    def webhook_configured(self) -> bool:
        return bool(self.teams_webhook_url)

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        if environ is None:
            return cls(teams_webhook_url=TEAMS_WEBHOOK_URL, port=APP_PORT, debug=DEBUG_MODE)
        return cls(
            teams_webhook_url=_clean_url(environ.get("TEAMS_WEBHOOK_URL")),
            port=_parse_port(environ.get("PORT")),
            debug=environ.get("DEBUG_MODE", "False").lower() == "true",
        )


SERVICE_NAME = "Sentry to Teams Webhook Proxy"

# Adaptive Card (Teams)
CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
CARD_VERSION = "1.2"
VIEW_ACTION_TITLE = "View in Sentry"

# Valores padrão quando o payload do Sentry não traz o campo
DEFAULT_ACTION = "unknown"
DEFAULT_TITLE = "Sentry Alert"
DEFAULT_MESSAGE = "No message available"
DEFAULT_LEVEL = "info"
DEFAULT_PROJECT = "Unknown Project"

# Estilo por nível do Sentry: cor (semântica do Adaptive Card) + emoji
LEVEL_STYLES = {
    "fatal": {"color": "attention", "emoji": "🔴"},
    "error": {"color": "attention", "emoji": "🔴"},
    "warning": {"color": "warning", "emoji": "⚠️"},
    "info": {"color": "good", "emoji": "ℹ️"},
    "debug": {"color": "default", "emoji": "🐛"},
    "default": {"color": "default", "emoji": "📢"},
}
