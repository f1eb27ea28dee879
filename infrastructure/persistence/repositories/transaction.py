import threading
import uuid
from abc import ABC, abstractmethod

from domain.models.transaction import PurchaseTransaction
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.transaction import PurchaseTransactionDB


class TransactionRepository(ABC):
	@abstractmethod
	async def save(self, transaction: PurchaseTransaction) -> PurchaseTransaction: ...

	@abstractmethod
	async def get_by_id(self, transaction_id: uuid.UUID) -> PurchaseTransaction | None: ...

	@abstractmethod
	async def exists(self, transaction_id: uuid.UUID) -> bool: ...


class InMemoryTransactionRepository(TransactionRepository):
	"""Process-lifetime store. Transactions are immutable, so the stored objects are shared as-is."""

	def __init__(self):
		self._transactions: dict[uuid.UUID, PurchaseTransaction] = {}
		self._lock = threading.Lock()

	async def save(self, transaction: PurchaseTransaction) -> PurchaseTransaction:
		with self._lock:
			self._transactions[transaction.id] = transaction
		return transaction

	async def get_by_id(self, transaction_id: uuid.UUID) -> PurchaseTransaction | None:
		with self._lock:
			return self._transactions.get(transaction_id)

	async def exists(self, transaction_id: uuid.UUID) -> bool:
		with self._lock:
			return transaction_id in self._transactions

	def __len__(self) -> int:
		return len(self._transactions)


class SqlTransactionRepository(TransactionRepository):
	def __init__(self, database: Database):
		self.database = database

	async def save(self, transaction: PurchaseTransaction) -> PurchaseTransaction:
		async with self.database.session() as session:
			session.add(
				PurchaseTransactionDB(
					id=transaction.id,
					description=transaction.description,
					transaction_date=transaction.transaction_date,
					amount=transaction.amount.amount,
					currency=transaction.amount.currency,
				)
			)
		return transaction

	async def get_by_id(self, transaction_id: uuid.UUID) -> PurchaseTransaction | None:
		async with self.database.session() as session:
			row = await session.get(PurchaseTransactionDB, transaction_id)

		if row is None:
			return None

		return PurchaseTransaction.reconstitute(
			transaction_id=row.id,
			description=row.description,
			transaction_date=row.transaction_date,
			amount=row.amount,
			currency=row.currency,
		)

	async def exists(self, transaction_id: uuid.UUID) -> bool:
		return await self.get_by_id(transaction_id) is not None
