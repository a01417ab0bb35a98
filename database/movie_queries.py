def popular_movies(store):
    return [movie for movie in store.all() if movie.is_popular]


def movies_by_genre(store, genre):
    """Exact, case-sensitive match on the genre field"""
    if not genre:
        return []
    return [movie for movie in store.all() if movie.genre == genre]
