import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from database.movie_store import MovieStore
from database.sample_movies import SAMPLE_MOVIES


@pytest.fixture
def store():
    return MovieStore().load(SAMPLE_MOVIES)


@pytest.fixture
def client(store):
    app = create_app(store)
    app.config['TESTING'] = True
    return app.test_client()
