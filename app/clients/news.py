"""News headlines via the proxy, with the bundled demo articles as fallback."""
from __future__ import annotations

from app.clients import demo_data
from app.clients.base import ProxiedDomainClient
from app.models import NewsResponse


def _demo_response(query: str | None = None) -> NewsResponse:
    found = demo_data.articles(query)
    return NewsResponse(status="ok", total_results=len(found), articles=found)


class NewsClient(ProxiedDomainClient):

    async def get_top_headlines(self, category: str = "general", country: str = "us") -> NewsResponse:
        category = category or "general"
        country = country or "us"
        request = self._request("/api/news/top-headlines", category=category, country=country)

        async def live() -> NewsResponse:
            return await self._fetch_model(request, NewsResponse, context="news.top_headlines")

        return await self._with_demo_fallback(live, _demo_response, context="news.top_headlines")

    async def search_news(self, query: str) -> NewsResponse:
        query = (query or "").strip()
        request = self._request("/api/news/search", q=query)

        async def live() -> NewsResponse:
            return await self._fetch_model(request, NewsResponse, context="news.search")

        return await self._with_demo_fallback(live, lambda: _demo_response(query), context="news.search")

    async def get_news_by_category(self, category: str) -> NewsResponse:
        return await self.get_top_headlines(category, "us")
