"""TMDB movies via the proxy, with bundled demo titles and genres as fallback."""
from __future__ import annotations

from typing import List, Optional

from app.clients import demo_data
from app.clients.base import ProxiedDomainClient, require_positive_int
from app.http_client import encode_segment
from app.models import GenreList, Movie, MovieResponse

TMDB_IMAGE_URL = "https://image.tmdb.org/t/p"
POSTER_PLACEHOLDER_URL = "https://via.placeholder.com/500x750?text=No+Poster"


def get_poster_url(path: Optional[str], size: str = "w500") -> str:
    """Full TMDB image URL for a poster path, or a placeholder when there is none."""
    if not path:
        return POSTER_PLACEHOLDER_URL
    return f"{TMDB_IMAGE_URL}/{size}{path}"


def _demo_page(results: List[Movie], page: int = 1) -> MovieResponse:
    return MovieResponse(page=page, results=results, total_pages=1, total_results=len(results))


class MoviesClient(ProxiedDomainClient):

    async def get_popular_movies(self, page: int = 1) -> MovieResponse:
        require_positive_int(page, "page")
        request = self._request("/api/movies/popular", page=page)

        async def live() -> MovieResponse:
            return await self._fetch_model(request, MovieResponse, context="movies.popular")

        return await self._with_demo_fallback(
            live, lambda: _demo_page(demo_data.movies(), page), context="movies.popular"
        )

    async def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
        """Movie details; falls back to the matching demo title, or None."""
        require_positive_int(movie_id, "movie id")
        request = self._request(f"/api/movies/{encode_segment(movie_id)}")

        async def live() -> Optional[Movie]:
            return await self._fetch_model(request, Movie, context="movies.detail")

        return await self._with_demo_fallback(
            live, lambda: demo_data.movie_by_id(movie_id), context="movies.detail"
        )

    async def search_movies(self, query: str, page: int = 1) -> MovieResponse:
        require_positive_int(page, "page")
        query = (query or "").strip()
        request = self._request("/api/movies/search", q=query, page=page)

        async def live() -> MovieResponse:
            return await self._fetch_model(request, MovieResponse, context="movies.search")

        return await self._with_demo_fallback(
            live, lambda: _demo_page(demo_data.movies(title_query=query)), context="movies.search"
        )

    async def get_genres(self) -> GenreList:
        request = self._request("/api/movies/genres")

        async def live() -> GenreList:
            return await self._fetch_model(request, GenreList, context="movies.genres")

        return await self._with_demo_fallback(
            live, lambda: GenreList(genres=demo_data.genres()), context="movies.genres"
        )

    async def get_movies_by_genre(self, genre_id: int, page: int = 1) -> MovieResponse:
        require_positive_int(genre_id, "genre id")
        require_positive_int(page, "page")
        request = self._request(f"/api/movies/genre/{encode_segment(genre_id)}", page=page)

        async def live() -> MovieResponse:
            return await self._fetch_model(request, MovieResponse, context="movies.by_genre")

        return await self._with_demo_fallback(
            live, lambda: _demo_page(demo_data.movies(genre_id=genre_id)), context="movies.by_genre"
        )
