"""PokeAPI lookups, including the concurrent batch detail fetch."""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List

from app.clients.base import DomainClient, require_positive_int, require_text
from app.errors import ValidationError
from app.http_client import encode_segment
from app.models import (
    NamedResource,
    PagedResult,
    PokemonRecord,
    ResourceListPayload,
    TypeMembersPayload,
    validate_mapping,
)
from app.settled import gather_settled
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="clients/pokemon")

POKEAPI_URL = "https://pokeapi.co/api/v2"


def _id_or_name(value: int | str) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        require_positive_int(value, "pokemon id")
        return str(value)
    # PokeAPI names are lowercase slugs
    return require_text(value, "pokemon name").lower()


class PokemonClient(DomainClient):
    base_url = POKEAPI_URL

    async def get_pokemon_list(self, limit: int = 20, offset: int = 0) -> PagedResult[NamedResource]:
        require_positive_int(limit, "limit")
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
            raise ValidationError("offset must be a non-negative integer")
        request = self._request("/pokemon", limit=limit, offset=offset)
        payload = await self._fetch_model(request, ResourceListPayload, context="pokemon.list")
        total = payload.count if payload.count is not None else len(payload.results)
        return PagedResult[NamedResource](
            items=payload.results[:limit],
            total_count=total,
            total_pages=math.ceil(total / limit),
        )

    async def get_pokemon_by_id(self, id_or_name: int | str) -> PokemonRecord:
        request = self._request(f"/pokemon/{encode_segment(_id_or_name(id_or_name))}")
        return await self._fetch_model(request, PokemonRecord, context="pokemon.detail")

    async def get_pokemon_species(self, id_or_name: int | str) -> Dict[str, Any]:
        request = self._request(f"/pokemon-species/{encode_segment(_id_or_name(id_or_name))}")
        return validate_mapping(await self._fetch(request), context="pokemon.species")

    async def get_types(self) -> List[NamedResource]:
        payload = await self._fetch_model(self._request("/type"), ResourceListPayload, context="pokemon.types")
        return payload.results

    async def get_pokemon_by_type(self, type_name: str) -> List[NamedResource]:
        type_name = require_text(type_name, "type").lower()
        request = self._request(f"/type/{encode_segment(type_name)}")
        payload = await self._fetch_model(request, TypeMembersPayload, context="pokemon.type")
        return [member.pokemon for member in payload.pokemon]

    async def get_pokemon_details(self, names: Iterable[int | str]) -> List[PokemonRecord]:
        """
        Look up every name concurrently and keep only the lookups that succeeded.

        Results follow the order of `names`. Failed lookups (unknown name,
        network error, bad payload) are logged and dropped.
        """
        names = list(names)
        settled = await gather_settled(*(self.get_pokemon_by_id(name) for name in names))

        out: List[PokemonRecord] = []
        for name, outcome in zip(names, settled):
            if outcome.ok:
                out.append(outcome.value)
            else:
                logger.debug(f"Dropping pokemon {name!r}: {outcome.error}")
        return out
