import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from domain.models.money import Money


@dataclass(frozen=True)
class ConvertedTransaction:
	transaction_id: uuid.UUID
	description: str
	transaction_date: date
	original_amount: Money
	converted_amount: Money
	rate_used: Decimal
