from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Purchase Transactions API'
	DEBUG: bool = False
	SOURCE_CURRENCY: str = 'USD'

	# Transaction store
	TRANSACTION_STORE: Literal['memory', 'sql'] = 'memory'
	DATABASE_URL: str = 'sqlite+aiosqlite:///./transactions.db'

	# Rate cache, empty disables it
	REDIS_URL: str = ''
	RATE_CACHE_TTL_HOURS: int = 24

	# Rate sources
	TREASURY_BASE_URL: str = 'https://api.fiscaldata.treasury.gov/services/api/fiscal_service'
	TREASURY_TIMEOUT: int = 10
	FALLBACK_RATES_ENABLED: bool = True

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
