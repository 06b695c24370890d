"""Pydantic schemas for the records each provider returns.

Field names mirror the provider payloads. Unknown provider fields are ignored so
an upstream schema addition never breaks a page; a missing or mistyped required
field raises `SchemaError` through `validate_payload`.
"""
from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.errors import SchemaError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="models")

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class _ProviderModel(BaseModel):
    """Base for provider records: tolerant of extra fields, accepts alias or field name."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------

class WeatherSample(_ProviderModel):
    """Point-in-time weather for one location."""
    temperature: float  # °C
    humidity: float  # %
    wind_speed: float  # km/h
    weather_code: int
    location: str = Field(min_length=1)
    time: str


class GeoLocation(_ProviderModel):
    """First geocoder match for a free-text place name."""
    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None


class _CurrentWeatherBlock(_ProviderModel):
    time: str
    temperature_2m: float
    relative_humidity_2m: float
    wind_speed_10m: float
    weather_code: int


class ForecastPayload(_ProviderModel):
    current: _CurrentWeatherBlock


class GeocodingPayload(_ProviderModel):
    results: List[GeoLocation] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------

class NamedPlace(_ProviderModel):
    name: str
    url: Optional[str] = None


class Character(_ProviderModel):
    id: int
    name: str
    status: str
    species: str
    gender: str
    origin: NamedPlace
    location: NamedPlace
    image: str
    episode: List[str] = Field(default_factory=list)


class _PageInfo(_ProviderModel):
    count: int
    pages: int


class CharacterPagePayload(_ProviderModel):
    info: _PageInfo
    results: List[Character]


class PagedResult(BaseModel, Generic[T]):
    """One page of a paginated listing."""
    items: List[T]
    total_count: int
    total_pages: int


# ---------------------------------------------------------------------------
# Countries
# ---------------------------------------------------------------------------

class CountryName(_ProviderModel):
    common: str
    official: str


class Flags(_ProviderModel):
    svg: Optional[str] = None
    png: Optional[str] = None
    alt: Optional[str] = None


class CurrencyInfo(_ProviderModel):
    name: str
    symbol: Optional[str] = None


class Country(_ProviderModel):
    name: CountryName
    capital: List[str] = Field(default_factory=list)
    region: str
    subregion: str = ""
    population: int
    flags: Flags
    currencies: Dict[str, CurrencyInfo] = Field(default_factory=dict)
    languages: Dict[str, str] = Field(default_factory=dict)
    area: float
    cca3: str


# ---------------------------------------------------------------------------
# Crypto
# ---------------------------------------------------------------------------

class Sparkline(_ProviderModel):
    price: List[float] = Field(default_factory=list)


class CryptoAsset(_ProviderModel):
    id: str
    symbol: str
    name: str
    image: str
    current_price: Optional[float] = None
    price_change_percentage_24h: Optional[float] = None
    market_cap: Optional[float] = None
    total_volume: Optional[float] = None
    sparkline_in_7d: Optional[Sparkline] = None


class PriceHistory(_ProviderModel):
    prices: List[List[float]]


class CoinSummary(_ProviderModel):
    id: str
    name: str
    symbol: str


class CoinSearchResult(_ProviderModel):
    coins: List[CoinSummary] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Pokemon
# ---------------------------------------------------------------------------

class NamedResource(_ProviderModel):
    name: str
    url: str


class _Artwork(_ProviderModel):
    front_default: Optional[str] = None


class _OtherSprites(_ProviderModel):
    official_artwork: Optional[_Artwork] = Field(default=None, alias="official-artwork")


class PokemonSprites(_ProviderModel):
    front_default: Optional[str] = None
    other: Optional[_OtherSprites] = None


class PokemonTypeSlot(_ProviderModel):
    slot: int
    type: NamedResource


class _StatName(_ProviderModel):
    name: str


class PokemonStat(_ProviderModel):
    base_stat: int
    stat: _StatName


class _AbilityName(_ProviderModel):
    name: str


class PokemonAbility(_ProviderModel):
    ability: _AbilityName
    is_hidden: bool


class PokemonRecord(_ProviderModel):
    id: int
    name: str
    height: int
    weight: int
    sprites: PokemonSprites
    types: List[PokemonTypeSlot] = Field(default_factory=list)
    stats: List[PokemonStat] = Field(default_factory=list)
    abilities: List[PokemonAbility] = Field(default_factory=list)


class ResourceListPayload(_ProviderModel):
    count: Optional[int] = None
    results: List[NamedResource]


class _TypeMember(_ProviderModel):
    pokemon: NamedResource


class TypeMembersPayload(_ProviderModel):
    pokemon: List[_TypeMember] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Exchange rates
# ---------------------------------------------------------------------------

class ExchangeRateSet(_ProviderModel):
    amount: float = 1.0
    base: str
    date: str
    rates: Dict[str, float]


class RateTimeSeries(_ProviderModel):
    amount: float = 1.0
    base: str
    start_date: str
    end_date: str
    rates: Dict[str, Dict[str, float]]


# ---------------------------------------------------------------------------
# News
# ---------------------------------------------------------------------------

class NewsSource(_ProviderModel):
    id: Optional[str] = None
    name: str


class NewsArticle(_ProviderModel):
    source: NewsSource
    author: Optional[str] = None
    title: str
    description: Optional[str] = None
    url: str
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: str = Field(alias="publishedAt")
    content: Optional[str] = None


class NewsResponse(_ProviderModel):
    status: str
    total_results: int = Field(alias="totalResults")
    articles: List[NewsArticle]


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------

class Genre(_ProviderModel):
    id: int
    name: str


class GenreList(_ProviderModel):
    genres: List[Genre]


class Movie(_ProviderModel):
    id: int
    title: str
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    genre_ids: List[int] = Field(default_factory=list)
    popularity: float = 0.0
    adult: bool = False
    original_language: str = ""


class MovieResponse(_ProviderModel):
    page: int
    results: List[Movie]
    total_pages: int
    total_results: int


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

class DashboardSnapshot(_ProviderModel):
    """Aggregator output: each field is None when its call failed."""
    weather: Optional[WeatherSample] = None
    characters: Optional[PagedResult[Character]] = None
    countries: Optional[List[Country]] = None
    cryptos: Optional[List[CryptoAsset]] = None
    pokemon: Optional[PagedResult[NamedResource]] = None
    exchange_rates: Optional[ExchangeRateSet] = Field(default=None, alias="exchangeRates")
    news: Optional[NewsResponse] = None
    movies: Optional[MovieResponse] = None


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_payload(model: Type[M], data: Any, *, context: str) -> M:
    """Validate a provider payload into `model`, raising SchemaError on mismatch."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        logger.warning(f"{context} payload failed validation with {exc.error_count()} error(s)")
        raise SchemaError(f"Unexpected {context} response shape: {exc.errors()[0]['msg']}") from exc


def validate_list(item_model: Type[M], data: Any, *, context: str) -> List[M]:
    """Validate a JSON array of provider records."""
    try:
        return TypeAdapter(List[item_model]).validate_python(data)
    except PydanticValidationError as exc:
        logger.warning(f"{context} payload failed validation with {exc.error_count()} error(s)")
        raise SchemaError(f"Unexpected {context} response shape: {exc.errors()[0]['msg']}") from exc


def validate_mapping(data: Any, *, context: str) -> Dict[str, Any]:
    """Accept any JSON object; used for loosely-typed detail endpoints."""
    if not isinstance(data, dict):
        raise SchemaError(f"Unexpected {context} response shape: expected an object")
    return data
