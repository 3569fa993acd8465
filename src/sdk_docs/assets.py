"""Lookup tables of raw text assets: spec documents and example snippets.

Assets are built once at startup, either from the filesystem or from an
in-memory mapping, and passed into the extraction functions.
"""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SPEC_FILE_PATTERN = re.compile(r"^open-api3.*-(client|server|console)\.(json|ya?ml)$")
EXAMPLE_SUFFIX = ".md"

Loader = Callable[[], Awaitable[str]]


class AssetBundle:
    """Read-only map of ``key -> raw text``, where reading is asynchronous.

    Keys are POSIX style paths relative to the bundle root.
    """

    def __init__(self, loaders: Mapping[str, Loader]):
        self._loaders = dict(loaders)

    @classmethod
    def from_mapping(cls, files: Mapping[str, str]) -> "AssetBundle":
        return cls({key: _constant(text) for key, text in files.items()})

    @classmethod
    def from_directory(
        cls, root: Path, accept: Callable[[str], bool] | None = None
    ) -> "AssetBundle":
        """Index every file under ``root``; contents are read lazily."""
        loaders = {}
        if not root.is_dir():
            logger.warning("Asset directory %s does not exist", root)
            return cls(loaders)

        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            key = path.relative_to(root).as_posix()
            if accept is None or accept(key):
                loaders[key] = _file_reader(path)

        logger.debug("Indexed %d assets under %s", len(loaders), root)
        return cls(loaders)

    def __contains__(self, key: object) -> bool:
        return key in self._loaders

    def __iter__(self) -> Iterator[str]:
        return iter(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)

    def keys(self) -> list[str]:
        return list(self._loaders)

    async def read(self, key: str) -> str:
        """Return the raw text of an asset. Raises KeyError if absent."""
        return await self._loaders[key]()

    def subset(self, prefix: str = "", suffix: str = "") -> "AssetBundle":
        return AssetBundle(
            {
                key: loader
                for key, loader in self._loaders.items()
                if key.startswith(prefix) and key.endswith(suffix)
            }
        )


@dataclass(frozen=True)
class StaticAssets:
    """Spec documents and example snippets available to the extractor."""

    specs: AssetBundle
    examples: AssetBundle

    @classmethod
    def from_directories(cls, specs_dir: Path, examples_dir: Path | None = None) -> "StaticAssets":
        """Index spec files and example snippets; no examples when ``examples_dir`` is None."""
        if examples_dir is None:
            examples = AssetBundle({})
        else:
            examples = AssetBundle.from_directory(
                examples_dir, accept=lambda key: key.endswith(EXAMPLE_SUFFIX)
            )
        return cls(specs=AssetBundle.from_directory(specs_dir, accept=_is_spec_file), examples=examples)


def _is_spec_file(key: str) -> bool:
    return "/" not in key and bool(SPEC_FILE_PATTERN.match(key))


def _constant(text: str) -> Loader:
    async def load() -> str:
        return text

    return load


def _file_reader(path: Path) -> Loader:
    async def load() -> str:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    return load
