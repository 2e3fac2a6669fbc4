"""Login credentials passed to the admin session."""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(frozen=True, slots=True)
class Credentials:
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    api_key: str | None = field(default=None, repr=False)

    @classmethod
    def from_password(cls, username: str, password: str) -> Credentials:
        return cls(username=username, password=password)

    @classmethod
    def from_api_key(cls, api_key: str) -> Credentials:
        return cls(api_key=api_key)

    @property
    def uses_api_key(self) -> bool:
        return self.api_key is not None


__all__ = ["Credentials"]
