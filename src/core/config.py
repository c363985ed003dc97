from os import environ

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ECHO_INDENT = 2

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    log_level: str = "INFO"
    log_format: str = Field(default="text", pattern="^(text|json)$")
    echo_indent: int = Field(default=DEFAULT_ECHO_INDENT, ge=0)
    strict_numbers: bool = False


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        log_format=environ.get("LOG_FORMAT", "text").lower(),
        echo_indent=int(environ.get("ECHO_INDENT", str(DEFAULT_ECHO_INDENT))),
        strict_numbers=environ.get("STRICT_NUMBERS", "false").lower() in _TRUTHY,
    )
    return _cached_config
