"""Create the PostgreSQL movies table and seed it with the sample movies"""
import sys

import psycopg2

from database.movies_db import create_movies_table, count_movies, insert_movie
from database.sample_movies import SAMPLE_MOVIES


def init_movies_table():
    print("=" * 50)
    print("Database Initialization")
    print("=" * 50)

    try:
        print("\nCreating 'movies' table...")
        create_movies_table()
        print("Movies table ready!")

        count = count_movies()

        if count == 0:
            print("\nInserting sample movies...")

            for movie in SAMPLE_MOVIES:
                movie_id = insert_movie(movie)
                print(f"  [{movie_id}] {movie['title']} ({movie['genre']})")

            print(f"Inserted {len(SAMPLE_MOVIES)} movies")
        else:
            print(f"\nTable already holds {count} movies, skipping seed")

        return True

    except psycopg2.Error as e:
        print(f"Database error: {e}")
        return False


if __name__ == '__main__':
    sys.exit(0 if init_movies_table() else 1)
