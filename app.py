from flask import Flask, jsonify, request
from flask_cors import CORS
from config import Config
import logging

from database.movie_store import MovieStore, StartupFailure
from database.movie_queries import popular_movies, movies_by_genre
from database.seed_loader import load_seed

from metrics import (
    metrics_endpoint, track_request, count_response,
    MOVIES_LOADED, QUERY_RESULTS_COUNT
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_store(config=Config):
    store = MovieStore()
    store.load(load_seed(config.SEED_SOURCE, config.SEED_FILE))
    return store


def create_app(store=None, config=Config):
    """
    Build the catalog application bound to a movie store

    If no store is given, one is loaded from the configured seed source.
    Startup failures are logged and re-raised so nothing gets served.
    """
    if store is None:
        try:
            store = build_store(config)
        except StartupFailure as e:
            logger.error("Startup failed: %s", e)
            raise

    app = Flask(__name__)
    app.config.from_object(config)

    CORS(app, resources={r'/api/*': {'origins': config.CORS_ORIGINS}})


    def movies_response(query, movies):
        QUERY_RESULTS_COUNT.labels(query=query).observe(len(movies))
        return jsonify([movie.to_dict() for movie in movies]), 200


    app.after_request(count_response)


    @app.before_request
    def readiness_gate():
        if request.path.startswith('/api/') and not store.ready:
            return jsonify({'error': 'Service not ready'}), 503


    @app.route('/api/movies/popular')
    @track_request
    def get_popular_movies():
        return movies_response('popular', popular_movies(store))


    @app.route('/api/movies/genre/<path:genre>')
    @track_request
    def get_movies_by_genre(genre):
        return movies_response('genre', movies_by_genre(store, genre))


    @app.route('/health')
    @track_request
    def health():
        if not store.ready:
            return jsonify({
                'status': 'starting',
                'service': 'movie-catalog',
                'movies_loaded': 0
            }), 503

        return jsonify({
            'status': 'healthy',
            'service': 'movie-catalog',
            'movies_loaded': len(store)
        }), 200


    @app.route('/metrics')
    def metrics():
        MOVIES_LOADED.set(len(store))
        return metrics_endpoint()


    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404


    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
