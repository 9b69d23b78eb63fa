import os

from dotenv import load_dotenv

load_dotenv()

SERVER_NAME = "slack"
SERVER_VERSION = "1.0.0"

TOKEN_ENV_VAR = "SLACK_BOT_TOKEN"
DEFAULT_LOG_FILE = "/tmp/slack-mcp.log"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(Exception):
    """Raised when required configuration is missing at startup."""


def get_slack_token() -> str:
    """Return the Slack bot token, or raise ConfigError if it is unset."""
    token = os.getenv(TOKEN_ENV_VAR)
    if not token:
        raise ConfigError(f"{TOKEN_ENV_VAR} environment variable not set")
    return token


def get_log_file() -> str:
    return os.getenv("SLACK_MCP_LOG_FILE", DEFAULT_LOG_FILE)


def get_log_level() -> str:
    return os.getenv("SLACK_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def strict_arguments_enabled() -> bool:
    """Whether tool arguments are decoded strictly (missing fields raise)."""
    value = os.getenv("SLACK_MCP_STRICT_ARGS", "true")
    return value.strip().lower() not in ("0", "false", "no", "off")
