"""
File loaders for upstream Dota game data.

Reads data and localization JSON files with orjson. Decoding happens
here, at the boundary; serializers only ever see decoded structures.
"""

import logging
from pathlib import Path
from typing import Union

import orjson

from ..errors import SourceLoadError
from .models import RawDocument


class GameDataFileLoader:
    """Loads and decodes game data JSON files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("GameDataFileLoader initialized")

    def read_json_file(self, json_file: Union[str, Path]) -> RawDocument:
        """Read and decode a single JSON file.

        Args:
            json_file: Path to the JSON file to read

        Returns:
            The decoded document (must be a JSON object)

        Raises:
            SourceLoadError: If the file cannot be read, decoded, or is not an object
        """
        path = Path(json_file)

        try:
            with path.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error(f"Error reading JSON file {path}: {e}")
            raise SourceLoadError(str(path), e) from e

        if not isinstance(data, dict):
            self.logger.error(
                f"Unexpected top-level {type(data).__name__} in {path}, expected object"
            )
            raise SourceLoadError(str(path), TypeError("top-level value is not an object"))

        self.logger.debug(f"Loaded {path} ({len(data)} top-level keys)")
        return data
