#!/usr/bin/env python3
"""Manual script to build a catalog item and print it."""

import logging

from music_catalog.config import get_log_level
from music_catalog.domain.models import catalog_item

if __name__ == "__main__":
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    item = catalog_item(
        {
            "artist": "Radiohead",
            "title": "Paranoid Android",
            "album": "OK Computer",
            "released": "1997",
            "seconds": 387,
            "genre": "rock",
        }
    )
    print(item)
