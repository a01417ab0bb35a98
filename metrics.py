from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'catalog_request_count',
    'Total Movie Catalog Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'catalog_request_duration_seconds',
    'Movie Catalog Request Duration',
    ['method', 'endpoint']
)


MOVIES_LOADED = Gauge(
    'catalog_movies_loaded',
    'Number of movies in the catalog store'
)


QUERY_RESULTS_COUNT = Histogram(
    'catalog_query_results',
    'Number of movies returned per query',
    ['query'],
    buckets=(0, 1, 2, 5, 10, 25, 50, 100, 250, 500)
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            return f(*args, **kwargs)
        finally:
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(time.time() - start_time)

    return wrapper


def count_response(response):
    """
    Count every finished response, including the ones produced by the
    readiness gate and the error handlers.

    Unmatched routes have no endpoint and are labelled 'unmatched'.
    """
    REQUEST_COUNT.labels(
        method=request.method,
        endpoint=request.endpoint or 'unmatched',
        http_status=response.status_code
    ).inc()
    return response


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
