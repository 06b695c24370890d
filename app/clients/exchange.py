"""Frankfurter exchange rates and conversions."""
from __future__ import annotations

import datetime as dt
import math
from typing import Dict

from app.clients.base import DomainClient, require_text
from app.errors import ValidationError
from app.models import ExchangeRateSet, RateTimeSeries, validate_mapping

FRANKFURTER_URL = "https://api.frankfurter.app"


def _currency(code: str, name: str) -> str:
    return require_text(code, name).upper()


def _iso_date(value: str | dt.date, name: str) -> str:
    """Accept a date or a YYYY-MM-DD string; reject anything else."""
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    text = require_text(value, name)
    try:
        return dt.date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(f"{name} must be an ISO date (YYYY-MM-DD)")


class ExchangeClient(DomainClient):
    base_url = FRANKFURTER_URL

    async def get_latest_rates(self, base: str = "USD") -> ExchangeRateSet:
        request = self._request("/latest", **{"from": _currency(base, "base")})
        return await self._fetch_model(request, ExchangeRateSet, context="exchange.latest")

    async def get_currencies(self) -> Dict[str, str]:
        data = validate_mapping(await self._fetch(self._request("/currencies")), context="exchange.currencies")
        return {str(code): str(label) for code, label in data.items()}

    async def convert(self, amount: float, from_currency: str, to_currency: str) -> ExchangeRateSet:
        """Convert `amount`; the converted value is `rates[to_currency]`."""
        if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not math.isfinite(amount):
            raise ValidationError("amount must be a finite number")
        if amount < 0:
            raise ValidationError("amount must be non-negative")
        request = self._request(
            "/latest",
            amount=amount,
            **{"from": _currency(from_currency, "from"), "to": _currency(to_currency, "to")},
        )
        return await self._fetch_model(request, ExchangeRateSet, context="exchange.convert")

    async def get_historical_rates(self, date: str | dt.date, base: str = "USD") -> ExchangeRateSet:
        request = self._request(f"/{_iso_date(date, 'date')}", **{"from": _currency(base, "base")})
        return await self._fetch_model(request, ExchangeRateSet, context="exchange.historical")

    async def get_time_series(
        self,
        start_date: str | dt.date,
        end_date: str | dt.date,
        base: str = "USD",
    ) -> RateTimeSeries:
        start = _iso_date(start_date, "start_date")
        end = _iso_date(end_date, "end_date")
        if start > end:
            raise ValidationError("start_date must not be after end_date")
        request = self._request(f"/{start}..{end}", **{"from": _currency(base, "base")})
        return await self._fetch_model(request, RateTimeSeries, context="exchange.timeseries")
