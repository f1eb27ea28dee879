# nosec B101


import uuid
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import patch

from domain.calendar import utc_today
from domain.models.exchange_rate import ExchangeRate


def create(client, description='Office supplies', transaction_date='2024-06-15', amount='100.00'):
    return client.post(
        '/api/transactions',
        json={
            'description': description,
            'transaction_date': transaction_date,
            'purchase_amount': amount,
        },
    )


def test_create_transaction_success(client, repository):
    response = create(client)

    assert response.status_code == 201
    transaction_id = response.json()['transaction_id']
    assert response.headers['location'] == f'/api/transactions/{transaction_id}'
    assert len(repository) == 1


def test_create_transaction_rounds_amount(client):
    transaction_id = create(client, amount='100.555').json()['transaction_id']

    response = client.get(f'/api/transactions/{transaction_id}')

    assert response.status_code == 200
    data = response.json()
    assert data['description'] == 'Office supplies'
    assert data['transaction_date'] == '2024-06-15'
    assert Decimal(data['amount']) == Decimal('100.56')
    assert data['currency'] == 'USD'


def test_create_transaction_description_too_long(client):
    response = create(client, description='x' * 51)

    assert response.status_code == 400
    assert '50 characters' in response.json()['detail']


def test_create_transaction_blank_description(client):
    assert create(client, description='   ').status_code == 400


def test_create_transaction_negative_amount(client):
    response = create(client, amount='-1')

    assert response.status_code == 400
    assert 'negative' in response.json()['detail']


def test_create_transaction_future_date(client):
    tomorrow = (utc_today() + timedelta(days=1)).isoformat()

    response = create(client, transaction_date=tomorrow)

    assert response.status_code == 400
    assert 'future' in response.json()['detail']


def test_create_transaction_malformed_body(client):
    response = client.post('/api/transactions', json={'description': 'x'})

    assert response.status_code == 422


def test_get_unknown_transaction(client):
    response = client.get(f'/api/transactions/{uuid.uuid4()}')

    assert response.status_code == 404


def test_convert_transaction_success(client, mock_rate_service):
    transaction_id = create(client).json()['transaction_id']
    mock_rate_service.get_rate.return_value = ExchangeRate.create(
        Decimal('0.85'), 'USD', 'EUR', date(2024, 6, 10)
    )

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'eur'})

    assert response.status_code == 200
    data = response.json()
    assert data['transaction_id'] == transaction_id
    assert data['description'] == 'Office supplies'
    assert data['transaction_date'] == '2024-06-15'
    assert Decimal(data['original_amount']) == Decimal('100.00')
    assert data['original_currency'] == 'USD'
    assert data['target_currency'] == 'EUR'
    assert Decimal(data['exchange_rate']) == Decimal('0.85')
    assert Decimal(data['converted_amount']) == Decimal('85.00')
    mock_rate_service.get_rate.assert_awaited_once_with('EUR', date(2024, 6, 15))


def test_convert_transaction_stale_rate(client, mock_rate_service):
    transaction_id = create(client).json()['transaction_id']
    mock_rate_service.get_rate.return_value = ExchangeRate.create(
        Decimal('0.85'), 'USD', 'EUR', date(2023, 12, 1)
    )

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'EUR'})

    assert response.status_code == 400
    assert '2023-12-01' in response.json()['detail']


def test_convert_transaction_no_rate(client, mock_rate_service):
    transaction_id = create(client).json()['transaction_id']

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'XYZ'})

    assert response.status_code == 400
    assert 'No exchange rate available for XYZ' in response.json()['detail']


def test_convert_unknown_transaction(client, mock_rate_service):
    response = client.get(f'/api/transactions/{uuid.uuid4()}/converted', params={'currency': 'EUR'})

    assert response.status_code == 404
    mock_rate_service.get_rate.assert_not_awaited()


def test_convert_invalid_currency_code(client):
    transaction_id = create(client).json()['transaction_id']

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'EURO'})

    assert response.status_code == 400


def test_convert_requires_currency(client):
    transaction_id = create(client).json()['transaction_id']

    assert client.get(f'/api/transactions/{transaction_id}/converted').status_code == 422


def test_convert_invalid_transaction_id(client):
    response = client.get('/api/transactions/not-a-uuid/converted', params={'currency': 'EUR'})

    assert response.status_code == 422


def test_currency_mismatch_is_server_error(client, mock_rate_service):
    transaction_id = create(client).json()['transaction_id']
    mock_rate_service.get_rate.return_value = ExchangeRate.create(
        Decimal('1.1'), 'GBP', 'EUR', date(2024, 6, 10)
    )

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'EUR'})

    assert response.status_code == 500
    assert response.json() == {'detail': 'Internal server error'}


def test_unexpected_error_is_server_error(client):
    with patch(
        'application.services.transaction_service.PurchaseTransaction.create',
        side_effect=RuntimeError('boom'),
    ):
        response = create(client)

    assert response.status_code == 500
    assert response.json() == {'detail': 'Internal server error'}


def test_create_transaction_huge_amount_is_client_error(client, repository):
    response = create(client, amount='1e30')

    assert response.status_code == 400
    assert len(repository) == 0


def test_convert_result_too_large_is_client_error(client, mock_rate_service):
    transaction_id = create(client, amount='9000000000000000').json()['transaction_id']
    mock_rate_service.get_rate.return_value = ExchangeRate.create(
        Decimal('149.50'), 'USD', 'JPY', date(2024, 6, 10)
    )

    response = client.get(f'/api/transactions/{transaction_id}/converted', params={'currency': 'JPY'})

    assert response.status_code == 400
    assert 'cannot exceed' in response.json()['detail']
