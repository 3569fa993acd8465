"""Unified data models for extracted SDK method documentation.

The extractor converts OpenAPI operations into these models so the
documentation site can render every platform the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """A single method parameter, from query parameters or body properties."""

    name: str
    description: str = ""
    required: bool = False
    type: str = ""  # string / integer / boolean / array / object
    example: Any = None


class MethodModel(BaseModel):
    """A response model resolved from a schema reference."""

    id: str
    name: str = ""


class MethodResponse(BaseModel):
    """One declared response of a method, keyed by status code."""

    model_config = ConfigDict(populate_by_name=True)

    code: int | str  # "default" and ranges like "2XX" stay as declared
    content_type: str | None = Field(default=None, alias="contentType")
    models: list[MethodModel] = []


class SDKMethod(BaseModel):
    """A single SDK method with its demo snippet."""

    id: str
    title: str = ""
    description: str = ""
    demo: str
    parameters: list[Parameter] = []
    responses: list[MethodResponse] = []


class ServiceInfo(BaseModel):
    """Tag metadata of a service. ``name`` is None when no tag matched."""

    name: str | None
    description: str = ""


class ServiceResult(BaseModel):
    service: ServiceInfo
    methods: list[SDKMethod] = []
