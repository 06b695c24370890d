"""Rick and Morty character listings."""
from __future__ import annotations

from typing import Optional

from app.clients.base import DomainClient, require_positive_int
from app.http_client import encode_segment
from app.models import Character, CharacterPagePayload, PagedResult

RICK_AND_MORTY_URL = "https://rickandmortyapi.com/api"


def _to_page(payload: CharacterPagePayload) -> PagedResult[Character]:
    return PagedResult[Character](
        items=payload.results,
        total_count=payload.info.count,
        total_pages=payload.info.pages,
    )


class CharactersClient(DomainClient):
    base_url = RICK_AND_MORTY_URL

    async def get_characters(self, page: int = 1) -> PagedResult[Character]:
        require_positive_int(page, "page")
        request = self._request("/character", page=page)
        payload = await self._fetch_model(request, CharacterPagePayload, context="characters.list")
        return _to_page(payload)

    async def get_character_by_id(self, character_id: int) -> Character:
        require_positive_int(character_id, "character id")
        request = self._request(f"/character/{encode_segment(character_id)}")
        return await self._fetch_model(request, Character, context="characters.detail")

    async def filter_characters(
        self,
        *,
        name: Optional[str] = None,
        status: Optional[str] = None,
        species: Optional[str] = None,
    ) -> PagedResult[Character]:
        """Filter by any subset of name/status/species; blank filters are left out of the query."""
        filters = {"name": name, "status": status, "species": species}
        params = {key: value for key, value in filters.items() if value}
        request = self._request("/character", **params)
        payload = await self._fetch_model(request, CharacterPagePayload, context="characters.filter")
        return _to_page(payload)
