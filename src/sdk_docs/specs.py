"""Extract per-service SDK method documentation from versioned OpenAPI specs.

Pipeline: load spec -> pick tagged operations -> normalize parameters and
responses -> attach the demo snippet. Methods without a snippet for the
requested version/platform are left out.
"""

import logging

from sdk_docs.assets import EXAMPLE_SUFFIX, AssetBundle, StaticAssets
from sdk_docs.errors import SpecNotFoundError
from sdk_docs.parser.base import SDKMethod, ServiceInfo, ServiceResult
from sdk_docs.parser.detect import decode_spec
from sdk_docs.parser.openapi import get_parameters, get_responses, iterate_all_methods
from sdk_docs.platforms import example_path, get_audience, platform_id

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = ("0.15.x", "1.0.x", "1.1.x", "1.2.x", "1.3.x", "1.4.x")

SPEC_EXTENSIONS = (".json", ".yaml", ".yml")


def spec_filename(version: str, audience: str, extension: str = ".json") -> str:
    return f"open-api3-{version}-{audience}{extension}"


def get_examples(version: str, assets: StaticAssets) -> AssetBundle | None:
    """Return the example snippets of a version family, or None if unsupported."""
    if version not in SUPPORTED_VERSIONS:
        return None
    return assets.examples.subset(prefix=f"{version}/", suffix=EXAMPLE_SUFFIX)


async def get_api(version: str, platform: str, assets: StaticAssets) -> dict:
    """Load and decode the spec document serving ``platform`` at ``version``."""
    audience = get_audience(platform)

    for extension in SPEC_EXTENSIONS:
        filename = spec_filename(version, audience, extension)
        if filename in assets.specs:
            logger.debug("Loading spec %s", filename)
            raw = await assets.specs.read(filename)
            return decode_spec(raw, filename)

    raise SpecNotFoundError(version, audience, spec_filename(version, audience))


async def list_services(version: str, platform: str, assets: StaticAssets) -> list[ServiceInfo]:
    api = await get_api(version, platform, assets)
    return [
        ServiceInfo(name=tag.get("name"), description=tag.get("description") or "")
        for tag in api.get("tags") or []
    ]


async def get_service(
    version: str, platform: str, service: str, assets: StaticAssets
) -> ServiceResult:
    """Collect every documented method of ``service`` for one platform.

    Raises SpecNotFoundError / InvalidSpecError when the spec cannot be
    loaded, and InvalidReferenceError / SchemaNotFoundError when a
    response points at a schema that is not in the document.
    """
    platform = platform_id(platform)
    api = await get_api(version, platform, assets)
    tag = next((t for t in api.get("tags") or [] if t.get("name") == service), None)

    data = ServiceResult(
        service=ServiceInfo(
            name=tag.get("name") if tag else None,
            description=(tag.get("description") if tag else None) or "",
        ),
        methods=[],
    )

    examples = get_examples(version, assets)
    if examples is None:
        logger.debug("No examples for version %s", version)
        return data

    for method, operation in iterate_all_methods(api, service):
        parameters = get_parameters(method, operation)
        responses = get_responses(operation, api)

        extension = operation.get("x-appwrite") or {}
        path = example_path(version, platform, extension.get("demo", ""))
        if path not in examples:
            logger.debug("Skipping %s: no example at %s", extension.get("method"), path)
            continue

        data.methods.append(
            SDKMethod(
                id=extension.get("method", ""),
                title=operation.get("summary") or "",
                description=operation.get("description") or "",
                demo=await examples.read(path),
                parameters=parameters,
                responses=responses,
            )
        )

    return data
