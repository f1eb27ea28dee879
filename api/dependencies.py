import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import ConversionService, RateService, TransactionService
from config.settings import get_settings
from domain.services.conversion import CurrencyConversionService
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.transaction import (
	InMemoryTransactionRepository,
	SqlTransactionRepository,
	TransactionRepository,
)
from infrastructure.providers import ExchangeRateProvider, FallbackRateProvider, TreasuryProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None
	repository: TransactionRepository | None = None
	primary_provider: ExchangeRateProvider | None = None
	fallback_provider: ExchangeRateProvider | None = None
	conversion_engine: CurrencyConversionService = CurrencyConversionService()


deps = AppDependencies()


async def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	if settings.TRANSACTION_STORE == 'sql':
		deps.db = Database(settings.DATABASE_URL)
		await deps.db.create_tables()
		deps.repository = SqlTransactionRepository(deps.db)
		logger.info('Using SQL transaction store')
	else:
		deps.repository = InMemoryTransactionRepository()
		logger.info('Using in-memory transaction store')

	if settings.REDIS_URL:
		deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
		deps.redis_cache = RedisCacheService(
			deps.redis_client, rate_ttl=timedelta(hours=settings.RATE_CACHE_TTL_HOURS)
		)

	deps.primary_provider = TreasuryProvider(
		base_url=settings.TREASURY_BASE_URL,
		source_currency=settings.SOURCE_CURRENCY,
		timeout=settings.TREASURY_TIMEOUT,
	)
	if settings.FALLBACK_RATES_ENABLED:
		deps.fallback_provider = FallbackRateProvider(source_currency=settings.SOURCE_CURRENCY)

	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db:
		await deps.db.close()
	if deps.primary_provider:
		await deps.primary_provider.close()

	logger.info('Cleanup complete')


def get_repository() -> TransactionRepository:
	if deps.repository is None:
		raise RuntimeError('Transaction repository not initialized')
	return deps.repository


def get_rate_service() -> RateService:
	if deps.primary_provider is None:
		raise RuntimeError('Rate providers not initialized')
	return RateService(
		primary_provider=deps.primary_provider,
		fallback_provider=deps.fallback_provider,
		cache=deps.redis_cache,
		source_currency=get_settings().SOURCE_CURRENCY,
	)


def get_transaction_service(
	repository: Annotated[TransactionRepository, Depends(get_repository)],
) -> TransactionService:
	return TransactionService(repository=repository, source_currency=get_settings().SOURCE_CURRENCY)


def get_conversion_service(
	transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> ConversionService:
	return ConversionService(
		transaction_service=transaction_service,
		rate_service=rate_service,
		conversion_engine=deps.conversion_engine,
	)
