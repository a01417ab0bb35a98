import threading

import pytest

from database.movie_store import (
    Movie, MovieStore, SeedDataError, StartupFailure, StoreAlreadyLoadedError
)
from database.sample_movies import SAMPLE_MOVIES


def test_load_assigns_sequential_ids_in_seed_order():
    store = MovieStore().load(SAMPLE_MOVIES)

    movies = store.all()
    assert len(movies) == len(SAMPLE_MOVIES)
    assert [movie.id for movie in movies] == list(range(1, len(SAMPLE_MOVIES) + 1))
    assert [movie.title for movie in movies] == [m['title'] for m in SAMPLE_MOVIES]


def test_load_accepts_tuples():
    store = MovieStore().load([
        ('Alien', 'Horror', True),
        ('Heat', 'Crime', False)
    ])

    assert store.all() == (
        Movie(id=1, title='Alien', genre='Horror', is_popular=True),
        Movie(id=2, title='Heat', genre='Crime', is_popular=False)
    )


def test_load_accepts_camel_case_flag():
    store = MovieStore().load([{'title': 'Alien', 'genre': 'Horror', 'isPopular': True}])
    assert store.all()[0].is_popular is True


def test_empty_seed_is_ready_and_empty():
    store = MovieStore().load([])
    assert store.ready
    assert store.all() == ()
    assert len(store) == 0


def test_store_not_ready_before_load():
    store = MovieStore()
    assert not store.ready
    assert store.all() == ()


def test_second_load_fails():
    store = MovieStore().load(SAMPLE_MOVIES)

    with pytest.raises(StoreAlreadyLoadedError):
        store.load(SAMPLE_MOVIES)

    assert len(store) == len(SAMPLE_MOVIES)


def test_concurrent_loads_only_one_wins():
    store = MovieStore()
    errors = []

    def load():
        try:
            store.load(SAMPLE_MOVIES)
        except StoreAlreadyLoadedError as e:
            errors.append(e)

    threads = [threading.Thread(target=load) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(errors) == 4
    assert [movie.id for movie in store.all()] == list(range(1, len(SAMPLE_MOVIES) + 1))


@pytest.mark.parametrize('entry', [
    {'genre': 'Drama', 'is_popular': True},
    {'title': 'Heat', 'is_popular': True},
    {'title': 'Heat', 'genre': 'Crime'},
    {'title': '', 'genre': 'Crime', 'is_popular': True},
    {'title': 'Heat', 'genre': '   ', 'is_popular': True},
    {'title': 'Heat', 'genre': 'Crime', 'is_popular': 'yes'},
    ('Heat', 'Crime'),
    'Heat',
])
def test_malformed_seed_entry_fails(entry):
    store = MovieStore()

    with pytest.raises(SeedDataError):
        store.load([('Alien', 'Horror', True), entry])

    assert not store.ready
    assert store.all() == ()


def test_seed_errors_are_startup_failures():
    assert issubclass(SeedDataError, StartupFailure)
    assert issubclass(StoreAlreadyLoadedError, StartupFailure)


def test_movies_are_immutable():
    movie = MovieStore().load(SAMPLE_MOVIES).all()[0]

    with pytest.raises(AttributeError):
        movie.title = 'Changed'


def test_movie_to_dict():
    movie = Movie(id=3, title='The Dark Knight', genre='Action', is_popular=True)
    assert movie.to_dict() == {
        'id': 3,
        'title': 'The Dark Knight',
        'genre': 'Action',
        'isPopular': True
    }
