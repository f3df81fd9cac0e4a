"""Structured documentation summary models

Field names are camelCase because they mirror the JSON object the completion
service is asked to produce and the front-end renders. Every model allows
extra keys so nothing the model adds is silently dropped. A null value takes
the field default, and list items are kept whatever their type.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _SummaryModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class GettingStartedStep(_SummaryModel):
    """A single onboarding step"""

    title: str = ""
    description: str = ""
    code: str | None = None


class GettingStarted(_SummaryModel):
    steps: list[GettingStartedStep] = Field(default_factory=list)


class Authentication(_SummaryModel):
    """How to authenticate against the API"""

    method: str = ""
    description: str = ""
    example: str | None = None


class UseCase(_SummaryModel):
    """A common task and the endpoints it involves"""

    title: str = ""
    description: str = ""
    endpoints: list[Any] = Field(default_factory=list)
    codeExample: str | None = None
    tips: list[Any] = Field(default_factory=list)


class Endpoint(_SummaryModel):
    """A key endpoint"""

    method: str = ""
    path: str = ""
    description: str = ""
    parameters: list[Any] = Field(default_factory=list)
    example: str | None = None


class RateLimits(_SummaryModel):
    description: str = ""
    limits: list[Any] = Field(default_factory=list)


class SummaryDocument(_SummaryModel):
    """The structured guide produced from API documentation"""

    apiName: str = ""
    description: str = ""
    gettingStarted: GettingStarted = Field(default_factory=GettingStarted)
    authentication: Authentication = Field(default_factory=Authentication)
    commonUseCases: list[UseCase] = Field(default_factory=list)
    keyEndpoints: list[Endpoint] = Field(default_factory=list)
    rateLimits: RateLimits | None = None
    quickTips: list[Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Dump for the wire, leaving out optional sections the model omitted"""
        return self.model_dump(exclude_none=True)
