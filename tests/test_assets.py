import asyncio
from pathlib import Path

import pytest

from sdk_docs.assets import AssetBundle, StaticAssets

FIXTURES = Path(__file__).parent / "fixtures"
SPECS_DIR = FIXTURES / "specs"
EXAMPLES_DIR = FIXTURES / "examples"


class TestAssetBundle:
    def test_from_mapping(self):
        bundle = AssetBundle.from_mapping({"a/b.md": "hello"})
        assert "a/b.md" in bundle
        assert len(bundle) == 1
        assert asyncio.run(bundle.read("a/b.md")) == "hello"

    def test_read_missing_raises(self):
        bundle = AssetBundle.from_mapping({})
        with pytest.raises(KeyError):
            asyncio.run(bundle.read("nope.md"))

    def test_subset_by_prefix_and_suffix(self):
        bundle = AssetBundle.from_mapping(
            {"1.4.x/a.md": "", "1.4.x/b.txt": "", "1.3.x/a.md": "", "1.4.xx/a.md": ""}
        )
        assert bundle.subset(prefix="1.4.x/", suffix=".md").keys() == ["1.4.x/a.md"]

    def test_from_directory_reads_lazily(self, tmp_path):
        f = tmp_path / "1.4.x" / "doc.md"
        f.parent.mkdir()
        f.write_text("first", encoding="utf-8")
        bundle = AssetBundle.from_directory(tmp_path)
        f.write_text("second", encoding="utf-8")
        assert bundle.keys() == ["1.4.x/doc.md"]
        assert asyncio.run(bundle.read("1.4.x/doc.md")) == "second"

    def test_from_missing_directory_is_empty(self, tmp_path):
        assert len(AssetBundle.from_directory(tmp_path / "missing")) == 0


class TestStaticAssets:
    def test_specs_only_index_spec_files(self, tmp_path):
        (tmp_path / "open-api3-1.4.x-server.json").write_text("{}")
        (tmp_path / "open-api3-1.4.x-console.yaml").write_text("{}")
        (tmp_path / "swagger2-1.4.x-server.json").write_text("{}")
        (tmp_path / "notes.json").write_text("{}")
        assets = StaticAssets.from_directories(tmp_path, tmp_path / "examples")
        assert sorted(assets.specs) == ["open-api3-1.4.x-console.yaml", "open-api3-1.4.x-server.json"]

    def test_examples_only_index_markdown(self, tmp_path):
        (tmp_path / "1.4.x").mkdir()
        (tmp_path / "1.4.x" / "a.md").write_text("x")
        (tmp_path / "1.4.x" / "a.json").write_text("x")
        assets = StaticAssets.from_directories(tmp_path / "specs", tmp_path)
        assert list(assets.examples) == ["1.4.x/a.md"]

    def test_fixture_directories(self):
        assets = StaticAssets.from_directories(SPECS_DIR, EXAMPLES_DIR)
        assert "open-api3-1.4.x-server.json" in assets.specs
        assert "1.4.x/client-android/java/account/get.md" in assets.examples
