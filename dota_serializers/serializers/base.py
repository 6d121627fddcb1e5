"""
Shared serializer plumbing.

A serializer reads one raw collection out of a decoded data blob, drops
the keys that are not entities, turns every remaining record into an
output record and returns them sorted by numeric id.
"""

import logging
import math
from typing import Any, List, Optional, Sequence, Set, Tuple

from ..errors import MissingFieldError
from ..game_data.models import VERSION_KEY, RawCollection, RawDocument, RawRecord
from ..text.tokens import TokenRepository


def sort_by_id(records: Sequence[Any]) -> List[Any]:
    """Sort records ascending by numeric id; stable, records without a valid id go last."""
    def sort_key(record: Any) -> Tuple[bool, float]:
        invalid = math.isnan(record.id)
        return invalid, 0.0 if invalid else record.id

    return sorted(records, key=sort_key)


class BaseSerializer:
    """Base class for entity serializers.

    Subclasses set ``collection_key`` and ``ignored_keys`` and implement
    ``serialize_record``.
    """

    collection_key: str = ""
    ignored_keys: Tuple[str, ...] = (VERSION_KEY,)

    def __init__(self, data: RawDocument):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data = data

    @property
    def records(self) -> RawCollection:
        """Return the raw collection this serializer works on."""
        collection = (self.data or {}).get(self.collection_key)
        if not isinstance(collection, dict):
            raise MissingFieldError("data", self.collection_key)
        return collection

    def get_ignored_keys(self) -> Set[str]:
        """Return the keys of non-entity rows to exclude."""
        return set(self.ignored_keys)

    @property
    def keys(self) -> List[str]:
        """Return entity keys in original order, ignored keys removed."""
        ignored = self.get_ignored_keys()
        return [key for key in self.records if key not in ignored]

    def serialize(self) -> List[Any]:
        """Serialize every entity of the collection, sorted by id."""
        records = self.records
        serialized = [self.serialize_record(key, records[key]) for key in self.keys]
        serialized = self.finalize(sort_by_id(serialized))

        self.logger.debug(
            f"Serialized {len(serialized)} records from '{self.collection_key}' "
            f"({len(records) - len(serialized)} ignored)"
        )
        return serialized

    def serialize_record(self, key: str, raw: RawRecord) -> Any:
        """Build the output record for one raw entity."""
        raise NotImplementedError

    def finalize(self, records: List[Any]) -> List[Any]:
        """Post-process the sorted record list. Identity by default."""
        return records


class LocalizedSerializer(BaseSerializer):
    """Serializer whose entities take display text from a localization blob."""

    def __init__(self, data: RawDocument, i18n: Optional[RawDocument]):
        super().__init__(data)
        self.strings = TokenRepository.from_i18n(i18n)

    def get_string(self, key: str, suffix: str = "") -> Optional[str]:
        """Return the tooltip token for key (and optional suffix), or None."""
        return self.strings.get_tooltip(key, suffix)

    def get_notes(self, key: str) -> List[str]:
        """Return Note0, Note1, ... tokens up to the first missing (or empty) one."""
        notes: List[str] = []
        while True:
            note = self.get_string(key, f"Note{len(notes)}")
            if not note:
                return notes
            notes.append(note)
