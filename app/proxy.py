"""Credential-injecting relay for the news and movie providers.

The browser never sees NEWS_API_KEY or TMDB_API_KEY: each route checks the key
is configured, validates its own parameters, forwards the call server-side and
hands the provider's status code and JSON body back unchanged.
"""
from typing import Any, Mapping, Optional
from urllib.parse import quote

import requests
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .config import settings
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="app/proxy")

NEWS_API_URL = "https://newsapi.org/v2"
TMDB_API_URL = "https://api.themoviedb.org/3"

session = requests.Session()

router = APIRouter(prefix="/api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _missing_news_key() -> Optional[JSONResponse]:
    if not settings.news_api_key:
        return _error(400, "NEWS_API_KEY not configured on server")
    return None


def _missing_tmdb_key() -> Optional[JSONResponse]:
    if not settings.tmdb_api_key:
        return _error(400, "TMDB_API_KEY not configured on server")
    return None


def _relay(
    url: str,
    *,
    params: Mapping[str, Any],
    failure_message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Forward one GET and pass the provider's status/body through untouched."""
    try:
        resp = session.get(url, params=params, headers=headers, timeout=settings.http_timeout_seconds)
        payload = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning(f"{failure_message}: {url} {exc!r}")
        return _error(500, failure_message)

    logger.debug(f"Relayed {mask_url(resp.url)} -> {resp.status_code}")
    return JSONResponse(status_code=resp.status_code, content=payload)


def _news_headers() -> dict:
    return {"X-Api-Key": settings.news_api_key}


def _tmdb_params(**params: Any) -> dict:
    return {"api_key": settings.tmdb_api_key, **params}


@router.get("/news/top-headlines")
def top_headlines(category: str = "general", country: str = "us"):
    """Top headlines for a category and country."""
    missing = _missing_news_key()
    if missing is not None:
        return missing
    return _relay(
        f"{NEWS_API_URL}/top-headlines",
        params={"category": category, "country": country},
        headers=_news_headers(),
        failure_message="Failed to fetch news",
    )


@router.get("/news/search")
def search_news(q: Optional[str] = None):
    """Full-text article search; `q` is required."""
    missing = _missing_news_key()
    if missing is not None:
        return missing
    if not q:
        return _error(400, "q query param required")
    return _relay(
        f"{NEWS_API_URL}/everything",
        params={"q": q},
        headers=_news_headers(),
        failure_message="Failed to fetch news",
    )


@router.get("/movies/popular")
def popular_movies(page: str = "1"):
    missing = _missing_tmdb_key()
    if missing is not None:
        return missing
    return _relay(
        f"{TMDB_API_URL}/movie/popular",
        params=_tmdb_params(page=page),
        failure_message="Failed to fetch popular movies",
    )


@router.get("/movies/search")
def search_movies(q: Optional[str] = None, page: str = "1"):
    missing = _missing_tmdb_key()
    if missing is not None:
        return missing
    if not q:
        return _error(400, "q query param required")
    return _relay(
        f"{TMDB_API_URL}/search/movie",
        params=_tmdb_params(query=q, page=page),
        failure_message="Failed to search movies",
    )


# Registered before /movies/{movie_id} so "genres" is not read as an id.
@router.get("/movies/genres")
def movie_genres():
    missing = _missing_tmdb_key()
    if missing is not None:
        return missing
    return _relay(
        f"{TMDB_API_URL}/genre/movie/list",
        params=_tmdb_params(),
        failure_message="Failed to fetch genres",
    )


@router.get("/movies/genre/{genre_id}")
def movies_by_genre(genre_id: str, page: str = "1"):
    missing = _missing_tmdb_key()
    if missing is not None:
        return missing
    return _relay(
        f"{TMDB_API_URL}/discover/movie",
        params=_tmdb_params(with_genres=genre_id, page=page),
        failure_message="Failed to fetch movies by genre",
    )


@router.get("/movies/{movie_id}")
def movie_details(movie_id: str):
    missing = _missing_tmdb_key()
    if missing is not None:
        return missing
    return _relay(
        f"{TMDB_API_URL}/movie/{quote(movie_id, safe='')}",
        params=_tmdb_params(),
        failure_message="Failed to fetch movie details",
    )
