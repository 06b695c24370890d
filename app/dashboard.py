"""Fan out one summary call per domain and join the outcomes into a snapshot."""
from __future__ import annotations

from app.clients.factory import ApiGateway
from app.models import DashboardSnapshot
from app.settled import gather_settled
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/dashboard")

DEFAULT_CITY = "New York"
CRYPTO_SUMMARY_COUNT = 5
POKEMON_SUMMARY_COUNT = 5

# Snapshot field order; also the order the calls are issued in.
SNAPSHOT_FIELDS = (
    "weather",
    "characters",
    "countries",
    "cryptos",
    "pokemon",
    "exchange_rates",
    "news",
    "movies",
)


class DashboardAggregator:
    """Builds a `DashboardSnapshot` where a failed domain is None instead of an error."""

    def __init__(self, gateway: ApiGateway, *, city: str = DEFAULT_CITY):
        self.gateway = gateway
        self.city = city or DEFAULT_CITY

    def _summary_calls(self):
        g = self.gateway
        return (
            g.weather.search_by_city(self.city),
            g.characters.get_characters(1),
            g.countries.get_all_countries(),
            g.crypto.get_top_cryptos("usd", CRYPTO_SUMMARY_COUNT),
            g.pokemon.get_pokemon_list(POKEMON_SUMMARY_COUNT, 0),
            g.exchange.get_latest_rates("USD"),
            g.news.get_top_headlines(),
            g.movies.get_popular_movies(),
        )

    async def get_dashboard_snapshot(self) -> DashboardSnapshot:
        """Run all summary calls concurrently; never raises for a domain failure."""
        outcomes = await gather_settled(*self._summary_calls())

        fields = {}
        for name, outcome in zip(SNAPSHOT_FIELDS, outcomes):
            if outcome.ok:
                fields[name] = outcome.value
            else:
                logger.warning(f"Dashboard domain {name} failed: {outcome.error!r}")
                fields[name] = None

        failed = [name for name, value in fields.items() if value is None]
        logger.info(f"Dashboard snapshot assembled; {len(failed)} of {len(SNAPSHOT_FIELDS)} domains absent")
        return DashboardSnapshot(**fields)
