import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import DECIMAL, Date, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class PurchaseTransactionDB(Base):
	__tablename__ = 'purchase_transactions'

	id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
	description: Mapped[str] = mapped_column(String(50), nullable=False)
	transaction_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
	amount: Mapped[Decimal] = mapped_column(DECIMAL(precision=18, scale=2), nullable=False)
	currency: Mapped[str] = mapped_column(String(3), nullable=False)
