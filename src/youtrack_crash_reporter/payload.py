"""Crash event payload delivered with an issue impact change."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AppInfo(BaseModel):
    """The application the crash was reported for."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    bundle_identifier: str


class IssuePayload(BaseModel):
    """A crash-monitoring issue, as sent by the monitoring service."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    method: str
    impact_level: int = Field(ge=0)
    impacted_devices_count: int = Field(ge=0)
    crashes_count: int = Field(ge=0)
    app: AppInfo
    url: str

    @classmethod
    def coerce(cls, payload: IssuePayload | Mapping[str, Any]) -> IssuePayload:
        if isinstance(payload, cls):
            return payload
        return cls.model_validate(dict(payload))
