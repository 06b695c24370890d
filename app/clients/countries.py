"""REST Countries lookups, always with an explicit field projection."""
from __future__ import annotations

from typing import List

from app.clients.base import DomainClient, require_text
from app.http_client import encode_segment
from app.models import Country, validate_list

REST_COUNTRIES_URL = "https://restcountries.com/v3.1"

COUNTRY_FIELDS = [
    "name",
    "capital",
    "region",
    "subregion",
    "population",
    "flags",
    "currencies",
    "languages",
    "area",
    "cca3",
]


class CountriesClient(DomainClient):
    base_url = REST_COUNTRIES_URL

    def _projected(self, path: str):
        return self._request(path, fields=",".join(COUNTRY_FIELDS))

    async def get_all_countries(self) -> List[Country]:
        return await self._fetch_list(self._projected("/all"), Country, context="countries.all")

    async def get_country_by_code(self, code: str) -> List[Country]:
        """Look up by cca2/cca3 code. The provider answers with a one-element list."""
        code = require_text(code, "country code")
        request = self._projected(f"/alpha/{encode_segment(code)}")
        data = await self._fetch(request)
        # /alpha/{code} with a field projection may return a bare object
        if isinstance(data, dict):
            data = [data]
        return validate_list(Country, data, context="countries.alpha")

    async def search_countries(self, name: str) -> List[Country]:
        name = require_text(name, "country name")
        request = self._projected(f"/name/{encode_segment(name)}")
        return await self._fetch_list(request, Country, context="countries.search")

    async def get_countries_by_region(self, region: str) -> List[Country]:
        region = require_text(region, "region")
        request = self._projected(f"/region/{encode_segment(region)}")
        return await self._fetch_list(request, Country, context="countries.region")
