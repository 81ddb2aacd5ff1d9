"""Data models for hello-relay."""

from dataclasses import dataclass
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .transport import OutboundTransport


@dataclass(frozen=True)
class RelayConfig:
    """Process-wide relay configuration.

    Built once at startup and shared by every request. Frozen, so concurrent
    handlers can read it without locking.
    """

    target_url: str
    transport: OutboundTransport


class RequestPattern(BaseModel):
    """WireMock request matcher."""

    model_config = ConfigDict(populate_by_name=True)

    method: str = Field("GET", description="HTTP method to match")
    url: Optional[str] = Field(None, description="Exact URL (path and query) to match")
    url_path: Optional[str] = Field(
        None, alias="urlPath", description="URL path to match, ignoring the query"
    )

    @model_validator(mode="after")
    def _check_url(self) -> "RequestPattern":
        if self.url is None and self.url_path is None:
            raise ValueError("either url or url_path is required")
        return self


class ResponseDefinition(BaseModel):
    """WireMock canned response."""

    status: int = Field(..., ge=100, le=599, description="HTTP status code to return")
    body: Optional[str] = Field(None, description="Response body")
    headers: Optional[Dict[str, str]] = Field(None, description="Response headers")


class StubMapping(BaseModel):
    """WireMock stub: a request matcher and the response it produces."""

    request: RequestPattern
    response: ResponseDefinition

    def to_payload(self) -> dict:
        """Serialise to the JSON document expected by the admin API."""
        return self.model_dump(by_alias=True, exclude_none=True)
