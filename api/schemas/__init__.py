from .requests import CreateTransactionRequest
from .responses import (
	ConvertedTransactionResponse,
	CreateTransactionResponse,
	HealthResponse,
	TransactionResponse,
)

__all__ = [
	'CreateTransactionRequest',
	'ConvertedTransactionResponse',
	'CreateTransactionResponse',
	'HealthResponse',
	'TransactionResponse',
]
