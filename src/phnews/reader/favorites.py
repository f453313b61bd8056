"""Favorites persisted in a single key-value slot."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from phnews.data import Article, Favorite

FAVORITES_KEY = "news_reader_favorites"

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Opaque durable string store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Key-value store that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """Key-value store backed by a JSON object on disk.

    The whole file is read on every ``get`` and rewritten on every ``set``.

    Args:
        path: Location of the JSON file. Parent directories are created on
            first write.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2))

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text() or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self._path}")
        return data


class FavoritesStore:
    """Saved articles keyed by URL, kept in insertion order.

    Every operation reads and rewrites the whole list in ``store``.

    Args:
        store: Key-value collaborator that persists the list.
        key: Slot name in ``store``.
        clock: Returns the current time in milliseconds since the epoch.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = FAVORITES_KEY,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._store = store
        self._key = key
        self._clock = clock or _now_ms

    def list(self) -> list[Favorite]:
        """Return all favorites in the order they were saved."""
        raw = self._store.get(self._key)
        if not raw:
            return []
        return [Favorite.from_dict(item) for item in json.loads(raw)]

    def save(self, article: Article) -> bool:
        """Save ``article`` unless its URL is already saved.

        Returns:
            True if a new favorite was added.
        """
        favorites = self.list()
        if any(fav.url == article.url for fav in favorites):
            return False
        favorites.append(Favorite(url=article.url, article=article, saved_at=self._clock()))
        self._write(favorites)
        return True

    def remove(self, url: str) -> None:
        """Delete the favorite with ``url``, if any."""
        favorites = self.list()
        self._write([fav for fav in favorites if fav.url != url])

    def is_favorited(self, url: str) -> bool:
        return any(fav.url == url for fav in self.list())

    def toggle(self, article: Article) -> bool:
        """Save or remove ``article``.

        Returns:
            True if the article is a favorite afterwards.
        """
        if self.is_favorited(article.url):
            self.remove(article.url)
            return False
        self.save(article)
        return True

    def _write(self, favorites: list[Favorite]) -> None:
        self._store.set(self._key, json.dumps([fav.to_dict() for fav in favorites]))
        logger.debug(f"Stored {len(favorites)} favorites")


def _now_ms() -> int:
    return int(time.time() * 1000)
