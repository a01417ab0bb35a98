import psycopg2
from psycopg2.extras import RealDictCursor
from config import Config


def get_db_connection():
    return psycopg2.connect(
        host=Config.POSTGRES_HOST,
        port=Config.POSTGRES_PORT,
        database=Config.POSTGRES_DB,
        user=Config.POSTGRES_USER,
        password=Config.POSTGRES_PASSWORD,
        connect_timeout=5
    )


def create_movies_table():
    conn = get_db_connection()
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS movies (
            id SERIAL PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            genre VARCHAR(255) NOT NULL,
            is_popular BOOLEAN NOT NULL DEFAULT FALSE
        );
    """)
    conn.commit()

    cursor.close()
    conn.close()


def insert_movie(movie_data):
    conn = get_db_connection()
    cursor = conn.cursor()

    cursor.execute("""
        INSERT INTO movies (title, genre, is_popular)
        VALUES (%s, %s, %s)
        RETURNING id
    """, (
        movie_data['title'],
        movie_data['genre'],
        movie_data['is_popular']
    ))

    movie_id = cursor.fetchone()[0]
    conn.commit()

    cursor.close()
    conn.close()

    return movie_id


def count_movies():
    conn = get_db_connection()
    cursor = conn.cursor()

    cursor.execute("SELECT COUNT(*) FROM movies")
    count = cursor.fetchone()[0]

    cursor.close()
    conn.close()

    return count


def get_seed_movies():
    conn = get_db_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)

    cursor.execute("""
        SELECT title, genre, is_popular
        FROM movies
        ORDER BY id
    """)

    movies = [dict(row) for row in cursor.fetchall()]

    cursor.close()
    conn.close()

    return movies
