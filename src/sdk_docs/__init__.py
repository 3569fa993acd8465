"""Extract SDK method documentation from versioned OpenAPI specs."""

from sdk_docs.assets import AssetBundle, StaticAssets
from sdk_docs.errors import (
    InvalidReferenceError,
    InvalidSpecError,
    SchemaNotFoundError,
    SdkDocsError,
    SpecNotFoundError,
)
from sdk_docs.parser.base import (
    MethodModel,
    MethodResponse,
    Parameter,
    SDKMethod,
    ServiceInfo,
    ServiceResult,
)
from sdk_docs.parser.openapi import (
    HttpMethod,
    get_id_from_reference,
    get_parameters,
    get_responses,
    get_schema,
    iterate_all_methods,
    resolve_reference,
)
from sdk_docs.platforms import Platform
from sdk_docs.specs import get_api, get_examples, get_service, list_services

__all__ = [
    "AssetBundle",
    "HttpMethod",
    "InvalidReferenceError",
    "InvalidSpecError",
    "MethodModel",
    "MethodResponse",
    "Parameter",
    "Platform",
    "SDKMethod",
    "SchemaNotFoundError",
    "SdkDocsError",
    "ServiceInfo",
    "ServiceResult",
    "SpecNotFoundError",
    "StaticAssets",
    "get_api",
    "get_examples",
    "get_id_from_reference",
    "get_parameters",
    "get_responses",
    "get_schema",
    "get_service",
    "iterate_all_methods",
    "list_services",
    "resolve_reference",
]
