"""Tests for the source registry, file loading and parallel serialization."""

from pathlib import Path
from typing import Any, Dict

import orjson
import pytest

from dota_serializers.errors import (
    ConfigError,
    MissingFieldError,
    SourceLoadError,
    UnknownSourceError,
)
from dota_serializers.game_data import GameDataFileLoader
from dota_serializers.service import SOURCES, SerializerService


def write_json(path: Path, value: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(value))


@pytest.fixture
def source_dir(
    tmp_path: Path,
    abilities_data: Dict[str, Any],
    abilities_i18n: Dict[str, Any],
    heroes_data: Dict[str, Any],
    items_data: Dict[str, Any],
    items_i18n: Dict[str, Any],
) -> Path:
    """A checkout-like directory holding every registered source file."""
    root = tmp_path / "checkout"
    write_json(root / SOURCES["abilities"].data_path, abilities_data)
    write_json(root / SOURCES["abilities"].i18n_path, abilities_i18n)
    write_json(root / SOURCES["heroes"].data_path, heroes_data)
    write_json(root / SOURCES["items"].data_path, items_data)
    write_json(root / SOURCES["items"].i18n_path, items_i18n)
    return root


class TestSourceRegistry:
    """Test the source registry."""

    def test_registered_sources(self) -> None:
        assert SerializerService.get_source_names() == ["abilities", "heroes", "items"]
        assert SOURCES["heroes"].needs_i18n is False
        assert SOURCES["items"].needs_i18n is True

    def test_unknown_source(self) -> None:
        with pytest.raises(UnknownSourceError):
            SerializerService().serialize("couriers", {})

    def test_localized_source_requires_i18n(self, abilities_data: Dict[str, Any]) -> None:
        with pytest.raises(MissingFieldError):
            SerializerService().serialize("abilities", abilities_data)


class TestSerialization:
    """Test serialization of decoded inputs."""

    def test_serialize_to_json(self, heroes_data: Dict[str, Any]) -> None:
        """Records are encoded compactly with NaN as null."""
        body = SerializerService().serialize_to_json("heroes", heroes_data)
        heroes = orjson.loads(body)

        assert [h["key"] for h in heroes] == ["npc_dota_hero_antimage", "npc_dota_hero_nevermore"]
        assert heroes[0]["base_int"] is None
        assert heroes[0]["roles"] == ["carry", "escape", "nuker"]

    def test_serialize_items_to_json(
        self, items_data: Dict[str, Any], items_i18n: Dict[str, Any]
    ) -> None:
        items = orjson.loads(SerializerService().serialize_to_json("items", items_data, items_i18n))
        blink = items[0]

        assert blink["key"] == "item_blink"
        assert blink["description"][0] == {
            "type": "active",
            "header": "Blink",
            "body": ["Teleport up to 1200 units."],
        }
        assert "header" not in blink["description"][1]


class TestFileLoading:
    """Test loading sources from a local checkout."""

    def test_serialize_all(self, source_dir: Path) -> None:
        """Every source is serialized and returned in registry order."""
        results = SerializerService(source_dir).serialize_all()

        assert list(results) == ["abilities", "heroes", "items"]
        assert len(results["abilities"]) == 4
        assert len(results["heroes"]) == 2
        assert len(results["items"]) == 7

    def test_serialize_subset(self, source_dir: Path) -> None:
        results = SerializerService(source_dir).serialize_all(["items", "heroes"])
        assert list(results) == ["items", "heroes"]

    def test_find_missing_files(self, source_dir: Path) -> None:
        service = SerializerService(source_dir)
        assert service.find_missing_files() == []

        (source_dir / SOURCES["heroes"].data_path).unlink()
        assert service.find_missing_files() == [source_dir / SOURCES["heroes"].data_path]

    def test_decode_failure(self, source_dir: Path) -> None:
        """A broken upstream file fails the load, not silently."""
        (source_dir / SOURCES["heroes"].data_path).write_text("{not json", encoding="utf-8")

        with pytest.raises(SourceLoadError):
            SerializerService(source_dir).serialize_source("heroes")
        with pytest.raises(SourceLoadError):
            SerializerService(source_dir).serialize_all()

    def test_loader_rejects_non_objects(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_bytes(b"[1, 2]")
        with pytest.raises(SourceLoadError):
            GameDataFileLoader().read_json_file(path)

    def test_no_source_dir(self) -> None:
        with pytest.raises(ConfigError):
            SerializerService().serialize_source("heroes")
