from .base import ExchangeRateProvider
from .fallback import FallbackRateProvider
from .treasury import TreasuryProvider

__all__ = ['ExchangeRateProvider', 'FallbackRateProvider', 'TreasuryProvider']
