# music_catalog/domain/models.py

"""Core domain model for media catalog entries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Config key -> attribute name, in display order.
_KEY_TO_ATTR: dict[str, str] = {
    "id": "id",
    "artist": "artist",
    "title": "title",
    "album": "album",
    "released": "released",
    "seconds": "seconds",
    "pause": "pause",
    "notes": "notes",
    "file": "file",
    "spotifyTrackId": "spotify_track_id",
    "youtubeId": "youtube_id",
}

CATALOG_ITEM_KEYS: tuple[str, ...] = tuple(_KEY_TO_ATTR)


@dataclass(slots=True)
class CatalogItem:
    """A single media track with metadata and external references.

    Values are stored as given. Nothing is validated or coerced, so a
    negative ``seconds`` or a string ``id`` is kept as-is.
    """

    # Identity
    id: int = -1  # -1 means "not assigned"

    # Track info
    artist: str = ""
    title: str = ""
    album: str = ""
    released: str = ""  # free-form, e.g. "1997" or "1997-05-21"
    seconds: float = 0

    # Playback
    pause: bool = False
    notes: str = ""

    # External references
    file: str = ""
    spotify_track_id: str = ""
    youtube_id: str = ""

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None = None) -> CatalogItem:
        """Build an item from a mapping of config keys.

        Omitted keys keep their defaults, present keys override them verbatim
        and unknown keys are ignored. Anything that is not a mapping yields
        the defaults.
        """
        if not isinstance(config, Mapping) or not config:
            return cls()

        unknown = [key for key in config if key not in _KEY_TO_ATTR]
        if unknown:
            logger.debug(
                "Ignoring unknown catalog item keys: %s",
                ", ".join(map(str, unknown)),
            )

        return cls(
            **{
                attr: config[key]
                for key, attr in _KEY_TO_ATTR.items()
                if key in config
            }
        )

    def to_config(self) -> dict[str, Any]:
        """Return all config keys with their current values."""
        return {key: getattr(self, attr) for key, attr in _KEY_TO_ATTR.items()}


def catalog_item(config: Mapping[str, Any] | None = None) -> CatalogItem:
    """Shortcut for :meth:`CatalogItem.from_config`."""
    return CatalogItem.from_config(config)
