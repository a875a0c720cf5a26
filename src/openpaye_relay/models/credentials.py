"""Stored OpenPaye access for one client."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr


class Credential(BaseModel):
    """Credential record keyed by an externally chosen client id."""

    client_id: str
    dossier_id: str  # OpenPaye company/dossier scoping every API path
    api_key: SecretStr = Field(repr=False)

    model_config = {"frozen": True}

    @property
    def bearer(self) -> str:
        return f"Bearer {self.api_key.get_secret_value()}"
