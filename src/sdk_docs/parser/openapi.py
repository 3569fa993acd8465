"""OpenAPI 3.x operation parser.

Normalizes parameters and responses of OpenAPI operations into the
models of :mod:`sdk_docs.parser.base` and resolves ``$ref`` pointers
against ``components.schemas``.
"""

from collections.abc import Iterator
from enum import Enum

from sdk_docs.errors import InvalidReferenceError, SchemaNotFoundError

from .base import MethodModel, MethodResponse, Parameter

JSON_CONTENT_TYPE = "application/json"
NO_CONTENT = "204"


class HttpMethod(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


def iterate_all_methods(api: dict, service: str) -> Iterator[tuple[HttpMethod, dict]]:
    """Yield ``(method, operation)`` for every operation tagged with ``service``.

    Paths are walked in document order; within a path the verbs always
    come out as GET, POST, PUT, PATCH, DELETE.
    """
    for methods in (api.get("paths") or {}).values():
        if not methods:
            continue
        for method in HttpMethod:
            operation = methods.get(method.value)
            if operation and service in (operation.get("tags") or []):
                yield method, operation


def get_parameters(method: HttpMethod, operation: dict) -> list[Parameter]:
    """Unify query parameters (GET) and JSON body properties into Parameters."""
    if method is HttpMethod.GET:
        return _parse_query_parameters(operation.get("parameters") or [])
    return _parse_body_properties(operation.get("requestBody"))


def _parse_query_parameters(params: list[dict]) -> list[Parameter]:
    result = []
    for p in params:
        schema = p.get("schema") or {}
        result.append(
            Parameter(
                name=p["name"],
                description=p.get("description") or "",
                required=p.get("required", False),
                type=schema.get("type") or "",
                example=schema.get("example"),
            )
        )
    return result


def _parse_body_properties(body: dict | None) -> list[Parameter]:
    schema = _json_schema(body)
    if not schema:
        return []

    # Requiredness comes from the body schema, not from the property
    required = schema.get("required") or []
    result = []
    for key, prop in (schema.get("properties") or {}).items():
        example = prop.get("x-example")
        result.append(
            Parameter(
                name=key,
                description=prop.get("description") or "",
                required=key in required,
                type=prop.get("type") or "",
                example="" if example is None else example,
            )
        )
    return result


def get_responses(operation: dict, api: dict) -> list[MethodResponse]:
    """Resolve every declared response of an operation into MethodResponses."""
    result = []
    for code, response in (operation.get("responses") or {}).items():
        response = response or {}
        content = response.get("content")
        models = [] if str(code) == NO_CONTENT else _resolve_models(_json_schema(response), api)

        result.append(
            MethodResponse(
                code=_status_code(code),
                content_type=next(iter(content), None) if content else None,
                models=models,
            )
        )
    return result


def _status_code(code: int | str) -> int | str:
    """Numeric status codes become ints; ``default`` and ``2XX`` stay as keys."""
    code = str(code)
    return int(code) if code.isdigit() else code


def _resolve_models(schema: dict | None, api: dict) -> list[MethodModel]:
    if schema is None:
        return []
    if "oneOf" in schema:
        refs = schema["oneOf"] or []
    else:
        refs = [schema]
    return [_to_model(ref, api) for ref in refs]


def _to_model(reference: dict, api: dict) -> MethodModel:
    resolved = resolve_reference(reference, api)
    return MethodModel(
        id=get_id_from_reference(reference),
        name=resolved.get("description") or "",
    )


def _json_schema(obj: dict | None) -> dict | None:
    """Return ``obj.content['application/json'].schema`` or None."""
    if not obj:
        return None
    media = (obj.get("content") or {}).get(JSON_CONTENT_TYPE) or {}
    return media.get("schema")


def get_id_from_reference(reference: dict) -> str:
    """Return the trailing segment of a ``$ref`` pointer.

    ``{"$ref": "#/components/schemas/user"}`` -> ``"user"``
    """
    ref = reference.get("$ref") if isinstance(reference, dict) else None
    if not isinstance(ref, str):
        raise InvalidReferenceError(reference)
    schema_id = ref.split("/")[-1]
    if not schema_id:
        raise InvalidReferenceError(reference)
    return schema_id


def get_schema(schema_id: str, api: dict) -> dict:
    schemas = (api.get("components") or {}).get("schemas") or {}
    schema = schemas.get(schema_id)
    if schema:
        return schema
    raise SchemaNotFoundError(schema_id)


def resolve_reference(reference: dict, api: dict) -> dict:
    return get_schema(get_id_from_reference(reference), api)
