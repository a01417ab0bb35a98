"""In-memory movie store, loaded once at startup"""
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass


logger = logging.getLogger(__name__)


class StartupFailure(Exception):
    """Raised when the catalog cannot be prepared for serving"""


class SeedDataError(StartupFailure):
    pass


class StoreAlreadyLoadedError(StartupFailure):
    pass


@dataclass(frozen=True)
class Movie:
    id: int
    title: str
    genre: str
    is_popular: bool

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'genre': self.genre,
            'isPopular': self.is_popular
        }


def _normalize_entry(position, entry):
    """
    Convert one seed entry into a (title, genre, is_popular) tuple

    Args:
        position: index of the entry in the seed list, for error messages
        entry: tuple/list of three values or a mapping with
               'title', 'genre' and 'is_popular' (or 'isPopular')
    """
    if isinstance(entry, Mapping):
        popular_key = 'is_popular' if 'is_popular' in entry else 'isPopular'
        missing = [key for key in ('title', 'genre', popular_key) if key not in entry]
        if missing:
            raise SeedDataError(f"Seed entry {position}: missing field(s) {', '.join(missing)}")
        title, genre, is_popular = entry['title'], entry['genre'], entry[popular_key]
    elif isinstance(entry, (tuple, list)):
        if len(entry) != 3:
            raise SeedDataError(f"Seed entry {position}: expected 3 values, got {len(entry)}")
        title, genre, is_popular = entry
    else:
        raise SeedDataError(f"Seed entry {position}: unsupported type {type(entry).__name__}")

    if not isinstance(title, str) or not title.strip():
        raise SeedDataError(f"Seed entry {position}: title must be non-empty text")
    if not isinstance(genre, str) or not genre.strip():
        raise SeedDataError(f"Seed entry {position}: genre must be non-empty text")
    if not isinstance(is_popular, bool):
        raise SeedDataError(f"Seed entry {position}: is_popular must be a boolean")

    return title, genre, is_popular


class MovieStore:
    """
    Ordered, read-only collection of movies.

    `load` runs once; after it returns, `all()` hands out the same immutable
    tuple to every reader, so queries need no locking.
    """

    def __init__(self):
        self._movies = ()
        self._ready = False
        self._load_lock = threading.Lock()

    def load(self, seed):
        with self._load_lock:
            if self._ready:
                raise StoreAlreadyLoadedError("Movie store has already been loaded")

            rows = [_normalize_entry(position, entry) for position, entry in enumerate(seed)]

            self._movies = tuple(
                Movie(id=movie_id, title=title, genre=genre, is_popular=is_popular)
                for movie_id, (title, genre, is_popular) in enumerate(rows, start=1)
            )
            self._ready = True

        logger.info("Movie store loaded with %d movies", len(self._movies))
        return self

    def all(self):
        return self._movies

    @property
    def ready(self):
        return self._ready

    def __len__(self):
        return len(self._movies)
