"""Credentials attached to authenticated OpenSky requests."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator
from pydantic import ValidationError as PydanticValidationError

from opensky_api.errors import ValidationError


class Credentials(BaseModel):
    """Either a username/password pair (HTTP basic) or a bearer token.

    Build them with :meth:`basic` or :meth:`bearer`, which raise
    :class:`opensky_api.errors.ValidationError` for invalid input. Calling the
    constructor directly raises ``pydantic.ValidationError`` instead.
    """

    username: Optional[str] = Field(default=None, description="OpenSky account name")
    password: Optional[SecretStr] = Field(default=None, description="OpenSky account password")
    token: Optional[SecretStr] = Field(default=None, description="OAuth2 access token")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_mode(self) -> "Credentials":
        has_basic = self.username is not None or self.password is not None
        if self.token is not None and has_basic:
            raise ValueError("Use either a token or a username and password, not both")
        if self.token is None and (self.username is None or self.password is None):
            raise ValueError("Basic credentials need both a username and a password")

        if self.token is not None and not self.token.get_secret_value().strip():
            raise ValueError("Bearer token must not be empty")
        if self.username is not None and not self.username.strip():
            raise ValueError("Username must not be empty")
        if self.password is not None and not self.password.get_secret_value():
            raise ValueError("Password must not be empty")
        return self

    @classmethod
    def basic(cls, username: str, password: str) -> "Credentials":
        try:
            return cls(username=username, password=password)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid basic credentials: {exc.errors()[0]['msg']}") from exc

    @classmethod
    def bearer(cls, token: str) -> "Credentials":
        try:
            return cls(token=token)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid bearer token: {exc.errors()[0]['msg']}") from exc

    @property
    def is_bearer(self) -> bool:
        return self.token is not None


__all__ = ["Credentials"]
