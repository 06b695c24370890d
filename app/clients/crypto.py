"""CoinGecko market data."""
from __future__ import annotations

from typing import Any, Dict, List

from app.clients.base import DomainClient, require_positive_int, require_text
from app.http_client import encode_segment
from app.models import CoinSearchResult, CryptoAsset, PriceHistory, validate_mapping

COINGECKO_URL = "https://api.coingecko.com/api/v3"


class CryptoClient(DomainClient):
    base_url = COINGECKO_URL

    async def get_top_cryptos(self, currency: str = "usd", per_page: int = 20) -> List[CryptoAsset]:
        """Top coins by market cap (page 1) with 7-day sparklines."""
        currency = require_text(currency, "currency").lower()
        require_positive_int(per_page, "per_page")
        request = self._request(
            "/coins/markets",
            vs_currency=currency,
            order="market_cap_desc",
            per_page=per_page,
            page=1,
            sparkline=True,
        )
        return await self._fetch_list(request, CryptoAsset, context="crypto.markets")

    async def get_crypto_by_id(self, coin_id: str) -> Dict[str, Any]:
        coin_id = require_text(coin_id, "coin id")
        data = await self._fetch(self._request(f"/coins/{encode_segment(coin_id)}"))
        return validate_mapping(data, context="crypto.detail")

    async def get_price_history(self, coin_id: str, days: int = 7) -> PriceHistory:
        coin_id = require_text(coin_id, "coin id")
        require_positive_int(days, "days")
        request = self._request(
            f"/coins/{encode_segment(coin_id)}/market_chart",
            vs_currency="usd",
            days=days,
        )
        return await self._fetch_model(request, PriceHistory, context="crypto.market_chart")

    async def search_cryptos(self, query: str) -> CoinSearchResult:
        query = require_text(query, "query")
        request = self._request("/search", query=query)
        return await self._fetch_model(request, CoinSearchResult, context="crypto.search")
