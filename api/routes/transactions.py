import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_conversion_service, get_transaction_service
from api.schemas import (
	ConvertedTransactionResponse,
	CreateTransactionRequest,
	CreateTransactionResponse,
	TransactionResponse,
)
from application.services import ConversionService, TransactionService

router = APIRouter(prefix='/api', tags=['transactions'])


@router.post(
	'/transactions',
	response_model=CreateTransactionResponse,
	status_code=status.HTTP_201_CREATED,
	summary='Store a purchase transaction',
)
async def create_transaction(
	request: CreateTransactionRequest,
	response: Response,
	service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> CreateTransactionResponse:
	transaction = await service.create_transaction(
		description=request.description,
		transaction_date=request.transaction_date,
		purchase_amount=request.purchase_amount,
	)
	response.headers['Location'] = f'/api/transactions/{transaction.id}'
	return CreateTransactionResponse(transaction_id=transaction.id)


@router.get(
	'/transactions/{transaction_id}',
	response_model=TransactionResponse,
	status_code=status.HTTP_200_OK,
	summary='Get a stored purchase transaction',
)
async def get_transaction(
	transaction_id: uuid.UUID,
	service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponse:
	transaction = await service.get_transaction(transaction_id)
	return TransactionResponse.from_domain(transaction)


@router.get(
	'/transactions/{transaction_id}/converted',
	response_model=ConvertedTransactionResponse,
	status_code=status.HTTP_200_OK,
	summary='Get a purchase transaction converted to another currency',
)
async def get_converted_transaction(
	transaction_id: uuid.UUID,
	currency: Annotated[str, Query(min_length=1, description='Target currency code, e.g. EUR')],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConvertedTransactionResponse:
	converted = await service.convert(transaction_id, currency)
	return ConvertedTransactionResponse.from_domain(converted)
