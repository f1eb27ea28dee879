import json
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.exchange_rate import ExchangeRate


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, rate_ttl: timedelta = timedelta(hours=24)):
        self.redis = redis_client
        self.rate_ttl = rate_ttl

    def _make_rate_key(self, source_currency: str, target_currency: str, transaction_date: date) -> str:
        return f"rate:{source_currency}:{target_currency}:{transaction_date.isoformat()}"

    async def get_rate(
        self, source_currency: str, target_currency: str, transaction_date: date
    ) -> ExchangeRate | None:
        key = self._make_rate_key(source_currency, target_currency, transaction_date)
        try:
            data = await self.redis.get(key)
        except RedisError as e:
            raise CacheError(f"Redis read failed for {key}: {e}") from e

        if not data:
            return None

        try:
            rate_dict = json.loads(data)
            return ExchangeRate(
                rate=Decimal(rate_dict["rate"]),
                source_currency=rate_dict["source_currency"],
                target_currency=rate_dict["target_currency"],
                effective_date=date.fromisoformat(rate_dict["effective_date"]),
                provider=rate_dict.get("provider", "unknown"),
            )
        except (ValueError, KeyError, TypeError, InvalidOperation) as e:
            raise CacheError(f"Invalid json data for {key}: {e}") from e

    async def set_rate(self, transaction_date: date, rate: ExchangeRate) -> None:
        key = self._make_rate_key(rate.source_currency, rate.target_currency, transaction_date)

        rate_dict = {
            "rate": str(rate.rate),
            "source_currency": rate.source_currency,
            "target_currency": rate.target_currency,
            "effective_date": rate.effective_date.isoformat(),
            "provider": rate.provider,
        }

        try:
            await self.redis.setex(key, self.rate_ttl, json.dumps(rate_dict))
        except RedisError as e:
            raise CacheError(f"Redis write failed for {key}: {e}") from e
