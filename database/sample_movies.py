SAMPLE_MOVIES = [
    {
        'title': 'The Shawshank Redemption',
        'genre': 'Drama',
        'is_popular': True
    },
    {
        'title': 'The Godfather',
        'genre': 'Crime',
        'is_popular': True
    },
    {
        'title': 'The Dark Knight',
        'genre': 'Action',
        'is_popular': True
    },
    {
        'title': 'Pulp Fiction',
        'genre': 'Crime',
        'is_popular': True
    },
    {
        'title': 'The Hangover',
        'genre': 'Comedy',
        'is_popular': False
    },
    {
        'title': 'Superbad',
        'genre': 'Comedy',
        'is_popular': False
    },
    {
        'title': 'Mad Max: Fury Road',
        'genre': 'Action',
        'is_popular': False
    },
    {
        'title': 'Die Hard',
        'genre': 'Action',
        'is_popular': False
    }
]
