import logging
import uuid
from datetime import date
from decimal import Decimal

from domain.exceptions.transaction import TransactionNotFoundError
from domain.models.transaction import PurchaseTransaction
from infrastructure.persistence.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)


class TransactionService:
	def __init__(self, repository: TransactionRepository, source_currency: str = 'USD'):
		self.repository = repository
		self.source_currency = source_currency

	async def create_transaction(
		self, description: str, transaction_date: date, purchase_amount: Decimal
	) -> PurchaseTransaction:
		transaction = PurchaseTransaction.create(
			description, transaction_date, purchase_amount, currency=self.source_currency
		)
		await self.repository.save(transaction)
		logger.info(f'Created transaction {transaction.id} for {transaction.amount}')
		return transaction

	async def get_transaction(self, transaction_id: uuid.UUID) -> PurchaseTransaction:
		transaction = await self.repository.get_by_id(transaction_id)
		if transaction is None:
			raise TransactionNotFoundError(transaction_id)
		return transaction
