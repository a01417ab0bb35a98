"""Seed sources for the movie store"""
import json
import logging

import psycopg2

from database.movie_store import SeedDataError
from database.sample_movies import SAMPLE_MOVIES


logger = logging.getLogger(__name__)

SEED_SOURCES = ('builtin', 'file', 'postgres')


def load_seed_file(path):
    if not path:
        raise SeedDataError("SEED_FILE must be set when SEED_SOURCE is 'file'")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            seed = json.load(f)
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SeedDataError(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(seed, list):
        raise SeedDataError(f"Seed file {path} must contain a JSON array")

    return seed


def load_seed_postgres():
    from database.movies_db import get_seed_movies

    try:
        return get_seed_movies()
    except psycopg2.Error as e:
        raise SeedDataError(f"Cannot read seed movies from PostgreSQL: {e}") from e


def load_seed(source='builtin', path=None):
    """
    Return the ordered seed list for the given source

    Args:
        source: one of 'builtin', 'file', 'postgres'
        path: JSON file path, used by the 'file' source
    """
    if source not in SEED_SOURCES:
        raise SeedDataError(f"Unknown seed source '{source}', expected one of {', '.join(SEED_SOURCES)}")

    logger.info("Loading seed movies from %s", path if source == 'file' else source)

    if source == 'file':
        return load_seed_file(path)
    if source == 'postgres':
        return load_seed_postgres()
    return list(SAMPLE_MOVIES)
