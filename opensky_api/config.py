"""Configuration settings for the OpenSky API client."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from opensky_api.models.credentials import Credentials

logger = logging.getLogger("opensky_api.config")


def _get_float(env_var: str, default: float) -> float:
    """Parse an environment variable into a float with a default."""

    value = os.getenv(env_var)
    if not value:
        return default

    return float(value)


@lru_cache(maxsize=1)
def _get_ssm_client():
    # Default to a region so lookups do not fail in environments without AWS
    # configuration (e.g. CI test runners).
    return boto3.client(
        "ssm",
        region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
    )


@lru_cache(maxsize=8)
def get_ssm_credentials(parameter_name: str) -> Credentials:
    """Fetch OpenSky credentials from AWS SSM Parameter Store.

    The parameter holds a JSON object with either ``username`` and
    ``password`` or a ``token``. The value is cached in-memory to avoid
    repeated SSM calls.
    """

    try:
        response = _get_ssm_client().get_parameter(Name=parameter_name, WithDecryption=True)
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        raise RuntimeError(f"Unable to load OpenSky credentials from SSM ({parameter_name})") from exc

    if not value:
        raise RuntimeError(f"OpenSky credentials not configured in SSM ({parameter_name})")

    try:
        data = json.loads(value)
    except json.JSONDecodeError as exc:
        raise RuntimeError("OpenSky credentials in SSM are not valid JSON") from exc

    if not isinstance(data, dict):
        raise RuntimeError("OpenSky credentials in SSM must be a JSON object")

    if data.get("token"):
        return Credentials.bearer(data["token"])
    if data.get("username") and data.get("password"):
        return Credentials.basic(data["username"], data["password"])

    raise RuntimeError("OpenSky credentials in SSM need a token or a username and password")


@dataclass
class Settings:
    """Client configuration loaded from environment variables."""

    base_url: str = os.getenv("OPENSKY_BASE_URL", "https://opensky-network.org/api")
    timeout: float = _get_float("OPENSKY_TIMEOUT", 10.0)
    log_level: str = os.getenv("OPENSKY_LOG_LEVEL", "INFO")

    # Credentials, all optional; anonymous access is used when none are set
    username: str | None = os.getenv("OPENSKY_USERNAME")
    password: str | None = os.getenv("OPENSKY_PASSWORD")
    token: str | None = os.getenv("OPENSKY_TOKEN")
    ssm_credentials_parameter: str | None = os.getenv("OPENSKY_SSM_CREDENTIALS_PARAMETER")


settings = Settings()


def load_credentials(config: Settings | None = None) -> Credentials | None:
    """Resolve credentials from settings.

    A bearer token wins over a username/password pair, which wins over the
    SSM parameter. Returns ``None`` for anonymous access.
    """

    config = config or settings
    if config.token:
        logger.debug("Using bearer token credentials from environment")
        return Credentials.bearer(config.token)
    if config.username and config.password:
        logger.debug("Using basic credentials for user %s", config.username)
        return Credentials.basic(config.username, config.password)
    if config.username or config.password:
        logger.warning("Only one of OPENSKY_USERNAME / OPENSKY_PASSWORD is set; ignoring both")
    if config.ssm_credentials_parameter:
        logger.debug("Loading credentials from SSM parameter %s", config.ssm_credentials_parameter)
        return get_ssm_credentials(config.ssm_credentials_parameter)
    return None


__all__ = ["settings", "Settings", "get_ssm_credentials", "load_credentials"]
