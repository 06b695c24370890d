import unittest

import requests
from fastapi.testclient import TestClient

from app.main import app as fastapi_app


class FakeResp:
    def __init__(self, status_code, payload, url="https://provider.example/x?api_key=sekret"):
        self.status_code = status_code
        self._payload = payload
        self.url = url

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Records every relayed call and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.calls = []
        self._response = response or FakeResp(200, {"ok": True})
        self._error = error

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {})})
        if self._error is not None:
            raise self._error
        return self._response


class TestProxy(unittest.TestCase):
    def setUp(self):
        import app.proxy as proxy_mod
        from app.config import settings

        self.proxy_mod = proxy_mod
        self.settings = settings
        self._orig_session = proxy_mod.session
        self._orig_news_key = settings.news_api_key
        self._orig_tmdb_key = settings.tmdb_api_key
        settings.news_api_key = "news-secret"
        settings.tmdb_api_key = "tmdb-secret"
        self.client = TestClient(fastapi_app)

    def tearDown(self):
        self.proxy_mod.session = self._orig_session
        self.settings.news_api_key = self._orig_news_key
        self.settings.tmdb_api_key = self._orig_tmdb_key

    def _use(self, session):
        self.proxy_mod.session = session
        return session

    def test_top_headlines_injects_header_and_defaults(self):
        session = self._use(FakeSession(FakeResp(200, {"status": "ok", "totalResults": 0, "articles": []})))

        resp = self.client.get("/api/news/top-headlines")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        call = session.calls[0]
        self.assertEqual(call["url"], "https://newsapi.org/v2/top-headlines")
        self.assertEqual(call["params"], {"category": "general", "country": "us"})
        self.assertEqual(call["headers"], {"X-Api-Key": "news-secret"})

    def test_news_search_requires_q(self):
        session = self._use(FakeSession())
        resp = self.client.get("/api/news/search")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "q query param required"})
        self.assertEqual(session.calls, [])

    def test_movie_search_requires_q(self):
        self._use(FakeSession())
        resp = self.client.get("/api/movies/search", params={"page": 2})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())

    def test_missing_news_key_returns_400_for_every_news_route(self):
        self.settings.news_api_key = None
        session = self._use(FakeSession())
        for path in ["/api/news/top-headlines", "/api/news/search?q=mars", "/api/news/search"]:
            resp = self.client.get(path)
            self.assertEqual(resp.status_code, 400, path)
            self.assertEqual(resp.json(), {"error": "NEWS_API_KEY not configured on server"})
        self.assertEqual(session.calls, [])

    def test_missing_tmdb_key_returns_400_for_every_movie_route(self):
        self.settings.tmdb_api_key = None
        self._use(FakeSession())
        for path in [
            "/api/movies/popular",
            "/api/movies/search?q=matrix",
            "/api/movies/603",
            "/api/movies/genres",
            "/api/movies/genre/28?page=2",
        ]:
            resp = self.client.get(path)
            self.assertEqual(resp.status_code, 400, path)
            self.assertEqual(resp.json(), {"error": "TMDB_API_KEY not configured on server"})

    def test_provider_status_and_body_pass_through(self):
        body = {"status": "error", "code": "rateLimited", "message": "Too many requests"}
        self._use(FakeSession(FakeResp(429, body)))
        resp = self.client.get("/api/news/search", params={"q": "mars"})
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.json(), body)

    def test_tmdb_key_goes_in_query_and_never_in_response(self):
        session = self._use(FakeSession(FakeResp(200, {"page": 1, "results": [], "total_pages": 1, "total_results": 0})))
        resp = self.client.get("/api/movies/search", params={"q": "the matrix", "page": 3})

        self.assertEqual(resp.status_code, 200)
        self.assertNotIn("tmdb-secret", resp.text)
        call = session.calls[0]
        self.assertEqual(call["url"], "https://api.themoviedb.org/3/search/movie")
        self.assertEqual(call["params"], {"api_key": "tmdb-secret", "query": "the matrix", "page": "3"})

    def test_genres_route_is_not_treated_as_movie_id(self):
        session = self._use(FakeSession(FakeResp(200, {"genres": []})))
        resp = self.client.get("/api/movies/genres")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(session.calls[0]["url"], "https://api.themoviedb.org/3/genre/movie/list")

    def test_movie_details_and_genre_routes(self):
        session = self._use(FakeSession(FakeResp(200, {"id": 603})))
        self.client.get("/api/movies/603")
        self.client.get("/api/movies/genre/28")
        self.client.get("/api/movies/popular")

        details, by_genre, popular = session.calls
        self.assertEqual(details["url"], "https://api.themoviedb.org/3/movie/603")
        self.assertEqual(by_genre["url"], "https://api.themoviedb.org/3/discover/movie")
        self.assertEqual(by_genre["params"], {"api_key": "tmdb-secret", "with_genres": "28", "page": "1"})
        self.assertEqual(popular["params"]["page"], "1")

    def test_network_failure_returns_500_with_operation_message(self):
        self._use(FakeSession(error=requests.ConnectionError("down")))
        cases = {
            "/api/news/top-headlines": "Failed to fetch news",
            "/api/news/search?q=x": "Failed to fetch news",
            "/api/movies/popular": "Failed to fetch popular movies",
            "/api/movies/search?q=x": "Failed to search movies",
            "/api/movies/603": "Failed to fetch movie details",
            "/api/movies/genres": "Failed to fetch genres",
            "/api/movies/genre/28": "Failed to fetch movies by genre",
        }
        for path, message in cases.items():
            resp = self.client.get(path)
            self.assertEqual(resp.status_code, 500, path)
            self.assertEqual(resp.json(), {"error": message})

    def test_non_json_provider_body_returns_500(self):
        self._use(FakeSession(FakeResp(502, ValueError("not json"))))
        resp = self.client.get("/api/movies/genres")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to fetch genres"})


if __name__ == "__main__":
    unittest.main()
