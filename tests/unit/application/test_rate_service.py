# nosec B101


from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, Mock

import httpx
import pytest
from tenacity import wait_none

from application.services.rate_service import RateService
from domain.exceptions.currency import CacheError, ProviderError, ProviderUnavailableError
from domain.models.exchange_rate import ExchangeRate
from infrastructure.providers.treasury import TreasuryProvider

PURCHASE_DATE = date(2024, 6, 15)


def make_provider(name, result=None, side_effect=None):
    provider = MagicMock()
    provider.name = name
    provider.fetch_rate = AsyncMock(return_value=result, side_effect=side_effect)
    return provider


def make_rate(provider='treasury'):
    return ExchangeRate.create(Decimal('0.85'), 'USD', 'EUR', date(2024, 6, 10), provider=provider)


@pytest.mark.asyncio
async def test_primary_rate_is_returned_and_cached():
    rate = make_rate()
    primary = make_provider('treasury', result=rate)
    fallback = make_provider('fallback')
    cache = AsyncMock()
    cache.get_rate.return_value = None
    service = RateService(primary, fallback, cache=cache)

    result = await service.get_rate('eur', PURCHASE_DATE)

    assert result == rate
    primary.fetch_rate.assert_awaited_once_with('EUR', PURCHASE_DATE)
    fallback.fetch_rate.assert_not_awaited()
    cache.get_rate.assert_awaited_once_with('USD', 'EUR', PURCHASE_DATE)
    cache.set_rate.assert_awaited_once_with(PURCHASE_DATE, rate)


@pytest.mark.asyncio
async def test_cache_hit_skips_providers():
    rate = make_rate()
    primary = make_provider('treasury')
    cache = AsyncMock()
    cache.get_rate.return_value = rate
    service = RateService(primary, cache=cache)

    assert await service.get_rate('EUR', PURCHASE_DATE) == rate
    primary.fetch_rate.assert_not_awaited()


@pytest.mark.asyncio
async def test_unreadable_cache_entry_is_treated_as_miss():
    rate = make_rate()
    primary = make_provider('treasury', result=rate)
    cache = AsyncMock()
    cache.get_rate.side_effect = CacheError('Invalid json data')
    cache.set_rate.side_effect = CacheError('Redis write failed')
    service = RateService(primary, cache=cache)

    assert await service.get_rate('EUR', PURCHASE_DATE) == rate


@pytest.mark.asyncio
async def test_fallback_used_when_primary_has_no_data():
    synthetic = make_rate(provider='fallback')
    primary = make_provider('treasury', result=None)
    fallback = make_provider('fallback', result=synthetic)
    cache = AsyncMock()
    cache.get_rate.return_value = None
    service = RateService(primary, fallback, cache=cache)

    result = await service.get_rate('EUR', PURCHASE_DATE)

    assert result is synthetic
    fallback.fetch_rate.assert_awaited_once_with('EUR', PURCHASE_DATE)
    cache.set_rate.assert_not_awaited()


@pytest.mark.asyncio
async def test_fallback_used_when_primary_fails():
    synthetic = make_rate(provider='fallback')
    primary = make_provider('treasury', side_effect=ProviderError('HTTP error 400'))
    fallback = make_provider('fallback', result=synthetic)
    service = RateService(primary, fallback)

    assert await service.get_rate('EUR', PURCHASE_DATE) is synthetic
    primary.fetch_rate.assert_awaited_once()


@pytest.mark.asyncio
async def test_unavailable_primary_is_retried():
    rate = make_rate()
    primary = make_provider(
        'treasury', side_effect=[ProviderUnavailableError('timeout'), rate]
    )
    service = RateService(primary, retry_wait=wait_none())

    assert await service.get_rate('EUR', PURCHASE_DATE) == rate
    assert primary.fetch_rate.await_count == 2


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    primary = make_provider('treasury', side_effect=ProviderUnavailableError('timeout'))
    service = RateService(primary, max_attempts=3, retry_wait=wait_none())

    assert await service.get_rate('EUR', PURCHASE_DATE) is None
    assert primary.fetch_rate.await_count == 3


@pytest.mark.asyncio
async def test_no_rate_anywhere_returns_none():
    primary = make_provider('treasury', result=None)
    fallback = make_provider('fallback', result=None)
    service = RateService(primary, fallback)

    assert await service.get_rate('XYZ', PURCHASE_DATE) is None


@pytest.mark.asyncio
async def test_unexpected_treasury_payload_means_no_rate():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {'data': {'error': 'unexpected'}}
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    service = RateService(TreasuryProvider(client=mock_client))

    assert await service.get_rate('EUR', PURCHASE_DATE) is None
