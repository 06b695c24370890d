"""Domain clients for the eight public APIs behind the dashboard."""

from .base import DomainClient, ProxiedDomainClient
from .characters import CharactersClient
from .countries import CountriesClient
from .crypto import CryptoClient
from .exchange import ExchangeClient
from .factory import ApiGateway, build_api_gateway
from .movies import MoviesClient, get_poster_url
from .news import NewsClient
from .pokemon import PokemonClient
from .weather import WeatherClient, describe_weather_code

__all__ = [
    "ApiGateway",
    "build_api_gateway",
    "DomainClient",
    "ProxiedDomainClient",
    "CharactersClient",
    "CountriesClient",
    "CryptoClient",
    "ExchangeClient",
    "MoviesClient",
    "NewsClient",
    "PokemonClient",
    "WeatherClient",
    "describe_weather_code",
    "get_poster_url",
]
