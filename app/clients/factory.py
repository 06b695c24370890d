"""Factory for the bundle of domain clients sharing one HTTP client."""

from __future__ import annotations

from dataclasses import dataclass

from app import config
from app.clients.characters import CharactersClient
from app.clients.countries import CountriesClient
from app.clients.crypto import CryptoClient
from app.clients.exchange import ExchangeClient
from app.clients.movies import MoviesClient
from app.clients.news import NewsClient
from app.clients.pokemon import PokemonClient
from app.clients.weather import WeatherClient
from app.http_client import HttpClient
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="clients/factory")


@dataclass
class ApiGateway:
    """All eight domain clients. Use as an async context manager to close the HTTP pool."""

    http: HttpClient
    weather: WeatherClient
    characters: CharactersClient
    countries: CountriesClient
    crypto: CryptoClient
    pokemon: PokemonClient
    exchange: ExchangeClient
    news: NewsClient
    movies: MoviesClient

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.http.aclose()


def build_api_gateway(
    settings: config.Settings | None = None,
    http: HttpClient | None = None,
) -> ApiGateway:
    """Instantiate every domain client from settings around a shared HttpClient."""
    settings = settings or config.settings
    proxy_base_url = (settings.proxy_base_url or "").rstrip("/")
    if not proxy_base_url:
        raise ValueError("proxy_base_url must be set for the news and movies clients")

    http = http or HttpClient(settings=settings)
    logger.debug(f"Building API gateway with proxy {mask_url(proxy_base_url)}")
    return ApiGateway(
        http=http,
        weather=WeatherClient(http),
        characters=CharactersClient(http),
        countries=CountriesClient(http),
        crypto=CryptoClient(http),
        pokemon=PokemonClient(http),
        exchange=ExchangeClient(http),
        news=NewsClient(http, proxy_base_url),
        movies=MoviesClient(http, proxy_base_url),
    )
