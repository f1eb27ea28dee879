import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.transaction import (
	CurrencyMismatchError,
	InvalidArgumentError,
	RateNotApplicableError,
	RateUnavailableError,
	TransactionNotFoundError,
	ValidationFailure,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationFailure)
	async def validation_failure_handler(request: Request, exc: ValidationFailure):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(InvalidArgumentError)
	async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(TransactionNotFoundError)
	async def not_found_handler(request: Request, exc: TransactionNotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(RateUnavailableError)
	async def rate_unavailable_handler(request: Request, exc: RateUnavailableError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(RateNotApplicableError)
	async def rate_not_applicable_handler(request: Request, exc: RateNotApplicableError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(CurrencyMismatchError)
	async def currency_mismatch_handler(request: Request, exc: CurrencyMismatchError):
		logger.error(f'Currency mismatch during conversion: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
