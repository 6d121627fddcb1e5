"""
Localization token repository.

Upstream localization files spell the tooltip prefix two ways
('DOTA_Tooltip_Ability_' and 'DOTA_Tooltip_ability_'). The repository
normalizes them so that lookups only ever use the lowercase form.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from ..errors import MissingFieldError
from ..game_data.models import I18N_LANG_KEY, I18N_TOKENS_KEY, RawDocument

CAPITALIZED_PREFIX = "DOTA_Tooltip_Ability_"
TOOLTIP_PREFIX = "DOTA_Tooltip_ability_"


def normalize_tokens(tokens: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of tokens with every capitalized tooltip key mirrored in lowercase.

    Original entries are retained. When both spellings exist the
    capitalized value wins and overwrites the lowercase one.
    """
    strings = dict(tokens)

    for key, value in tokens.items():
        if CAPITALIZED_PREFIX in key:
            strings[key.replace(CAPITALIZED_PREFIX, TOOLTIP_PREFIX)] = value

    return strings


class TokenRepository(Mapping[str, str]):
    """Read-only, case-normalized view over a localization token table."""

    def __init__(self, tokens: Mapping[str, str]):
        self._strings = normalize_tokens(tokens)

    @classmethod
    def from_i18n(cls, i18n: Optional[RawDocument]) -> "TokenRepository":
        """Build a repository from a raw localization blob ({lang: {Tokens: ...}}).

        Raises:
            MissingFieldError: If the blob has no lang.Tokens mapping
        """
        lang: Any = (i18n or {}).get(I18N_LANG_KEY)
        tokens = lang.get(I18N_TOKENS_KEY) if isinstance(lang, dict) else None
        if not isinstance(tokens, dict):
            raise MissingFieldError("i18n", f"{I18N_LANG_KEY}.{I18N_TOKENS_KEY}")
        return cls(tokens)

    def get_tooltip(self, key: str, suffix: str = "") -> Optional[str]:
        """Return the tooltip token for an entity key, or None if absent.

        Looks up 'DOTA_Tooltip_ability_<key>' or, with a suffix,
        'DOTA_Tooltip_ability_<key>_<suffix>'.
        """
        name = f"{TOOLTIP_PREFIX}{key}"
        if suffix:
            name = f"{name}_{suffix}"
        return self._strings.get(name)

    # Mapping protocol

    def __getitem__(self, key: str) -> str:
        return self._strings[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)

    def __len__(self) -> int:
        return len(self._strings)
