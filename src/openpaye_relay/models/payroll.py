"""Tool input payloads and the uniform tool result envelope."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer


class EmployeeInput(BaseModel):
    """Employee body forwarded to OpenPaye's employee-creation endpoint."""

    firstname: str
    lastname: str
    email: Optional[str] = None
    start_date: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ContractInput(BaseModel):
    """Contract body forwarded under an existing employee."""

    start_date: str
    end_date: Optional[str] = None
    position: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ToolEnvelope(BaseModel):
    """Result shape shared by every tool: ``ok`` discriminates data from error."""

    ok: bool
    data: Optional[Any] = Field(default=None, description="Parsed OpenPaye response on success")
    error: Optional[str] = Field(default=None, description="Failure reason when ok is false")

    @classmethod
    def success(cls, data: Any) -> ToolEnvelope:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> ToolEnvelope:
        return cls(ok=False, error=error)

    @model_serializer(mode="wrap")
    def _drop_absent_side(self, handler: SerializerFunctionWrapHandler):
        # success carries no error key, failure carries no data key
        serialized = handler(self)
        serialized.pop("error" if self.ok else "data", None)
        return serialized
