"""
Main service for serializing Dota game data sources.

Provides the source registry (which upstream files feed which serializer)
and a high-level API to load sources from a local checkout of the
upstream data repository and serialize them, several at once if asked.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import orjson

from .errors import ConfigError, MissingFieldError, UnknownSourceError
from .game_data.loaders import GameDataFileLoader
from .game_data.models import RawDocument
from .models import compact
from .serializers import AbilitiesSerializer, BaseSerializer, HeroesSerializer, ItemsSerializer


@dataclass(frozen=True)
class SourceDefinition:
    """Where a source's files live upstream and which serializer reads them."""
    name: str
    data_path: str
    i18n_path: Optional[str]
    factory: Callable[..., BaseSerializer]

    @property
    def needs_i18n(self) -> bool:
        """Whether the serializer requires a localization blob."""
        return self.i18n_path is not None

    def create_serializer(
        self, data: RawDocument, i18n: Optional[RawDocument] = None
    ) -> BaseSerializer:
        """Instantiate the serializer for decoded inputs."""
        if not self.needs_i18n:
            return self.factory(data)
        if i18n is None:
            raise MissingFieldError(self.name, "i18n")
        return self.factory(data, i18n)


SOURCES: Dict[str, SourceDefinition] = {
    "abilities": SourceDefinition(
        name="abilities",
        data_path="dota/scripts/npc/npc_abilities.json",
        i18n_path="dota/resource/localization/abilities_english.json",
        factory=AbilitiesSerializer,
    ),
    "heroes": SourceDefinition(
        name="heroes",
        data_path="dota/scripts/npc/npc_heroes.json",
        i18n_path=None,
        factory=HeroesSerializer,
    ),
    "items": SourceDefinition(
        name="items",
        data_path="dota/scripts/npc/items.json",
        i18n_path="dota/resource/dota_english.json",
        factory=ItemsSerializer,
    ),
}


def records_to_json(records: Sequence[Any]) -> bytes:
    """Encode serialized records as compact JSON (NaN becomes null)."""
    return orjson.dumps(compact(list(records)))


class SerializerService:
    """Service for serializing Dota game data.

    Serializers are pure functions of their inputs, so independent sources
    are serialized in parallel without any coordination.
    """

    def __init__(self, source_dir: Optional[str | Path] = None, max_workers: int = 4):
        """Initialize the service.

        Args:
            source_dir: Root of a local upstream checkout (needed only for file-based loading)
            max_workers: Thread pool size used when loading and serializing several sources
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.source_dir = Path(source_dir) if source_dir else None
        self.max_workers = max_workers
        self.loader = GameDataFileLoader()

        self.logger.debug(f"Initializing SerializerService with source dir: {self.source_dir}")

    # Registry

    @staticmethod
    def get_source(name: str) -> SourceDefinition:
        """Return the registered source definition.

        Raises:
            UnknownSourceError: If no source is registered under name
        """
        source = SOURCES.get(name)
        if source is None:
            raise UnknownSourceError(name)
        return source

    @staticmethod
    def get_source_names() -> List[str]:
        """Return registered source names in registry order."""
        return list(SOURCES)

    # Serialization from decoded inputs

    def serialize(
        self, name: str, data: RawDocument, i18n: Optional[RawDocument] = None
    ) -> List[Any]:
        """Serialize already decoded inputs for the named source."""
        source = self.get_source(name)
        records = source.create_serializer(data, i18n).serialize()
        self.logger.info(f"Serialized {len(records)} {name}")
        return records

    def serialize_to_json(
        self, name: str, data: RawDocument, i18n: Optional[RawDocument] = None
    ) -> bytes:
        """Serialize decoded inputs and encode the result as JSON."""
        return records_to_json(self.serialize(name, data, i18n))

    # File-based loading

    def get_source_paths(self, name: str) -> List[Path]:
        """Return the absolute paths of the files feeding the named source."""
        source = self.get_source(name)
        root = self._require_source_dir()
        paths = [root / source.data_path]
        if source.i18n_path:
            paths.append(root / source.i18n_path)
        return paths

    def find_missing_files(self) -> List[Path]:
        """Return registered source files absent from the source directory."""
        missing: List[Path] = []
        for name in SOURCES:
            missing.extend(p for p in self.get_source_paths(name) if not p.exists())
        return missing

    def load_source(self, name: str) -> Tuple[RawDocument, Optional[RawDocument]]:
        """Read and decode the data (and localization) files of a source in parallel."""
        paths = self.get_source_paths(name)
        self.logger.debug(f"Loading source '{name}' from {len(paths)} files")

        with ThreadPoolExecutor(max_workers=len(paths)) as executor:
            documents = list(executor.map(self.loader.read_json_file, paths))

        data = documents[0]
        i18n = documents[1] if len(documents) > 1 else None
        return data, i18n

    def serialize_source(self, name: str) -> List[Any]:
        """Load the named source from disk and serialize it."""
        data, i18n = self.load_source(name)
        return self.serialize(name, data, i18n)

    def serialize_all(self, names: Optional[Sequence[str]] = None) -> Dict[str, List[Any]]:
        """Load and serialize several sources concurrently.

        Any failure is re-raised once every submitted source has finished.

        Returns:
            Mapping of source name to its records, in the requested order
        """
        names = list(names) if names else self.get_source_names()
        for name in names:
            self.get_source(name)

        results: Dict[str, List[Any]] = {}
        errors: List[Exception] = []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_name = {
                executor.submit(self.serialize_source, name): name for name in names
            }

            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    results[name] = future.result()
                except Exception as e:
                    self.logger.error(f"Failed to serialize source '{name}': {e}")
                    errors.append(e)

        if errors:
            raise errors[0]

        return {name: results[name] for name in names}

    def _require_source_dir(self) -> Path:
        if self.source_dir is None:
            raise ConfigError("No source directory configured")
        return self.source_dir
