"""Pydantic models describing the CustomResourceDefinition API payload."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KubernetesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ObjectMeta(KubernetesBaseModel):
    name: str
    finalizers: list[str] = Field(default_factory=list)

    @field_validator("finalizers", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class ConditionPayload(KubernetesBaseModel):
    type: str
    status: str
    reason: str = ""
    message: str = ""
    last_transition_time: datetime | None = Field(default=None, alias="lastTransitionTime")

    @field_validator("reason", "message", mode="before")
    @classmethod
    def _null_to_blank(cls, value: object) -> object:
        return "" if value is None else value


class StatusPayload(KubernetesBaseModel):
    conditions: list[ConditionPayload] = Field(default_factory=list)

    @field_validator("conditions", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class CustomResourceDefinitionPayload(KubernetesBaseModel):
    api_version: str | None = Field(default=None, alias="apiVersion")
    kind: str | None = None
    metadata: ObjectMeta
    status: StatusPayload = Field(default_factory=StatusPayload)


class StatusResponse(KubernetesBaseModel):
    """The ``Status`` object the API server returns alongside error codes."""

    message: str = ""
    reason: str = ""
    code: int | None = None
