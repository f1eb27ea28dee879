import logging
from datetime import date

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from domain.exceptions.currency import CacheError, ProviderError, ProviderUnavailableError
from domain.models.exchange_rate import ExchangeRate
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    """Finds a rate for a purchase: cache, then the primary source, then the fallback table.

    Returns None whenever no rate could be obtained, whether the sources had
    no data or failed outright.
    """

    def __init__(
        self,
        primary_provider: ExchangeRateProvider,
        fallback_provider: ExchangeRateProvider | None = None,
        cache: RedisCacheService | None = None,
        source_currency: str = "USD",
        max_attempts: int = 3,
        retry_wait: wait_base | None = None,
    ):
        self.primary_provider = primary_provider
        self.fallback_provider = fallback_provider
        self.cache = cache
        self.source_currency = source_currency
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=10)

    async def get_rate(self, target_currency: str, transaction_date: date) -> ExchangeRate | None:
        target_currency = target_currency.upper()

        cached = await self._get_cached(target_currency, transaction_date)
        if cached is not None:
            return cached

        rate = await self._fetch_from_provider(self.primary_provider, target_currency, transaction_date)
        if rate is not None:
            await self._set_cached(transaction_date, rate)
            return rate

        if self.fallback_provider is None:
            return None

        logger.warning(
            f"{self.primary_provider.name} returned no {target_currency} rate for {transaction_date}, "
            f"trying {self.fallback_provider.name}"
        )
        return await self._fetch_from_provider(self.fallback_provider, target_currency, transaction_date)

    async def _fetch_from_provider(
        self, provider: ExchangeRateProvider, target_currency: str, transaction_date: date
    ) -> ExchangeRate | None:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception_type(ProviderUnavailableError),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await provider.fetch_rate(target_currency, transaction_date)
        except ProviderError as e:
            logger.error(f"Provider {provider.name} failed: {e}")
        return None

    async def _get_cached(self, target_currency: str, transaction_date: date) -> ExchangeRate | None:
        if self.cache is None:
            return None
        try:
            return await self.cache.get_rate(self.source_currency, target_currency, transaction_date)
        except CacheError as e:
            logger.warning(f"Ignoring unreadable cached rate: {e}")
            return None

    async def _set_cached(self, transaction_date: date, rate: ExchangeRate) -> None:
        if self.cache is None:
            return
        try:
            await self.cache.set_rate(transaction_date, rate)
        except CacheError as e:
            logger.warning(f"Could not cache rate: {e}")
