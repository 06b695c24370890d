"""Bundled offline datasets served when the news/movies proxy is unavailable.

Built once at import time and only ever handed out as deep copies.
"""
from __future__ import annotations

import datetime as dt
from typing import List, Optional, Tuple

from app.models import Genre, Movie, NewsArticle

_LOADED_AT = dt.datetime.now(dt.timezone.utc).replace(microsecond=0)


def _hours_ago(hours: int) -> str:
    return (_LOADED_AT - dt.timedelta(hours=hours)).isoformat().replace("+00:00", "Z")


DEMO_ARTICLES: Tuple[NewsArticle, ...] = tuple(
    NewsArticle.model_validate(article)
    for article in [
        {
            "source": {"id": "bbc-news", "name": "BBC News"},
            "author": "BBC News",
            "title": "Breaking: Major Technology Advances in AI Development",
            "description": "Scientists announce breakthrough in artificial intelligence that could revolutionize multiple industries.",
            "url": "https://example.com/news/1",
            "urlToImage": "https://images.unsplash.com/photo-1677442136019-21780ecad995?w=800",
            "publishedAt": _hours_ago(0),
            "content": "Full article content here...",
        },
        {
            "source": {"id": "cnn", "name": "CNN"},
            "author": "John Smith",
            "title": "Global Markets Rally on Economic Optimism",
            "description": "Stock markets around the world see significant gains as investors respond to positive economic indicators.",
            "url": "https://example.com/news/2",
            "urlToImage": "https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?w=800",
            "publishedAt": _hours_ago(1),
            "content": "Full article content here...",
        },
        {
            "source": {"id": "techcrunch", "name": "TechCrunch"},
            "author": "Jane Doe",
            "title": "New Startup Raises $100M for Green Energy Innovation",
            "description": "Clean energy startup secures major funding round to expand sustainable technology solutions.",
            "url": "https://example.com/news/3",
            "urlToImage": "https://images.unsplash.com/photo-1473341304170-971dccb5ac1e?w=800",
            "publishedAt": _hours_ago(2),
            "content": "Full article content here...",
        },
        {
            "source": {"id": "reuters", "name": "Reuters"},
            "author": "Reuters Staff",
            "title": "Space Agency Announces New Mars Mission Timeline",
            "description": "International space agency reveals updated schedule for upcoming Mars exploration missions.",
            "url": "https://example.com/news/4",
            "urlToImage": "https://images.unsplash.com/photo-1614728263952-84ea256f9679?w=800",
            "publishedAt": _hours_ago(3),
            "content": "Full article content here...",
        },
        {
            "source": {"id": "the-verge", "name": "The Verge"},
            "author": "Tech Reporter",
            "title": "Next-Gen Smartphones Set to Transform Mobile Experience",
            "description": "Industry experts preview upcoming smartphone technologies that will change how we interact with devices.",
            "url": "https://example.com/news/5",
            "urlToImage": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=800",
            "publishedAt": _hours_ago(4),
            "content": "Full article content here...",
        },
        {
            "source": {"id": "wired", "name": "Wired"},
            "author": "Science Writer",
            "title": "Climate Scientists Develop New Carbon Capture Method",
            "description": "Revolutionary technique could significantly reduce atmospheric carbon dioxide levels.",
            "url": "https://example.com/news/6",
            "urlToImage": "https://images.unsplash.com/photo-1569163139599-0f4517e36f31?w=800",
            "publishedAt": _hours_ago(5),
            "content": "Full article content here...",
        },
    ]
)


DEMO_MOVIES: Tuple[Movie, ...] = tuple(
    Movie.model_validate(movie)
    for movie in [
        {
            "id": 1,
            "title": "The Matrix",
            "overview": "A computer hacker learns about the true nature of reality and his role in the war against its controllers.",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
            "release_date": "1999-03-30",
            "vote_average": 8.2,
            "vote_count": 24000,
            "genre_ids": [28, 878],
            "popularity": 89.5,
            "adult": False,
            "original_language": "en",
        },
        {
            "id": 2,
            "title": "Inception",
            "overview": "A thief who steals corporate secrets through dream-sharing technology is given the inverse task of planting an idea.",
            "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Ber.jpg",
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "release_date": "2010-07-15",
            "vote_average": 8.4,
            "vote_count": 35000,
            "genre_ids": [28, 878, 12],
            "popularity": 95.2,
            "adult": False,
            "original_language": "en",
        },
        {
            "id": 3,
            "title": "Interstellar",
            "overview": "A team of explorers travel through a wormhole in space in an attempt to ensure humanity's survival.",
            "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
            "backdrop_path": "/xJHokMbljvjADYdit5fK5VQsXEG.jpg",
            "release_date": "2014-11-05",
            "vote_average": 8.4,
            "vote_count": 32000,
            "genre_ids": [12, 18, 878],
            "popularity": 92.8,
            "adult": False,
            "original_language": "en",
        },
        {
            "id": 4,
            "title": "The Dark Knight",
            "overview": "Batman raises the stakes in his war on crime with the help of allies to dismantle the remaining criminal organizations.",
            "poster_path": "/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
            "backdrop_path": "/hkBaDkMWbLaf8B1lsWsKX7Ew3Xq.jpg",
            "release_date": "2008-07-16",
            "vote_average": 8.5,
            "vote_count": 30000,
            "genre_ids": [28, 80, 18],
            "popularity": 88.7,
            "adult": False,
            "original_language": "en",
        },
        {
            "id": 5,
            "title": "Pulp Fiction",
            "overview": "The lives of two mob hitmen, a boxer, and others intertwine in four tales of violence and redemption.",
            "poster_path": "/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
            "backdrop_path": "/suaEOtk1N1sgg2MTM7oZd2cfVp3.jpg",
            "release_date": "1994-09-10",
            "vote_average": 8.5,
            "vote_count": 26000,
            "genre_ids": [80, 53],
            "popularity": 78.4,
            "adult": False,
            "original_language": "en",
        },
        {
            "id": 6,
            "title": "Fight Club",
            "overview": "An insomniac office worker and a soap salesman build a global organization to help vent male aggression.",
            "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
            "backdrop_path": "/52AfXWuXCHn3UjD17rBruA9f5qb.jpg",
            "release_date": "1999-10-15",
            "vote_average": 8.4,
            "vote_count": 27000,
            "genre_ids": [18],
            "popularity": 85.3,
            "adult": False,
            "original_language": "en",
        },
    ]
)


MOVIE_GENRES: Tuple[Genre, ...] = tuple(
    Genre(id=genre_id, name=name)
    for genre_id, name in [
        (28, "Action"),
        (12, "Adventure"),
        (16, "Animation"),
        (35, "Comedy"),
        (80, "Crime"),
        (99, "Documentary"),
        (18, "Drama"),
        (10751, "Family"),
        (14, "Fantasy"),
        (36, "History"),
        (27, "Horror"),
        (10402, "Music"),
        (9648, "Mystery"),
        (10749, "Romance"),
        (878, "Science Fiction"),
        (53, "Thriller"),
        (10752, "War"),
        (37, "Western"),
    ]
)


def articles(query: Optional[str] = None) -> List[NewsArticle]:
    """Demo articles, optionally narrowed by a case-insensitive title/description match."""
    if not query:
        return [a.model_copy(deep=True) for a in DEMO_ARTICLES]
    needle = query.lower()
    return [
        a.model_copy(deep=True)
        for a in DEMO_ARTICLES
        if needle in a.title.lower() or needle in (a.description or "").lower()
    ]


def movies(*, title_query: Optional[str] = None, genre_id: Optional[int] = None) -> List[Movie]:
    out = []
    for movie in DEMO_MOVIES:
        if title_query and title_query.lower() not in movie.title.lower():
            continue
        if genre_id is not None and genre_id not in movie.genre_ids:
            continue
        out.append(movie.model_copy(deep=True))
    return out


def movie_by_id(movie_id: int) -> Optional[Movie]:
    for movie in DEMO_MOVIES:
        if movie.id == movie_id:
            return movie.model_copy(deep=True)
    return None


def genres() -> List[Genre]:
    return [g.model_copy() for g in MOVIE_GENRES]
