from .conversion_service import ConversionService
from .rate_service import RateService
from .transaction_service import TransactionService

__all__ = ['ConversionService', 'RateService', 'TransactionService']
