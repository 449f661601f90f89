from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    TypeMismatchError,
)


class _Payload(BaseModel):
    quantity: int = Field(..., ge=1)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/not-found')
    async def not_found():
        raise NotFoundError('Event not found')

    @app.get('/domain')
    async def domain():
        raise DomainError('Adjustment cannot be zero')

    @app.get('/conflict')
    async def conflict():
        raise ConflictError('Block already released')

    @app.get('/type-mismatch')
    async def type_mismatch():
        raise TypeMismatchError('Not a GA block')

    @app.get('/value')
    async def value():
        raise ValueError('bad value')

    @app.get('/crash')
    async def crash():
        raise RuntimeError('connection reset')

    @app.post('/validate')
    async def validate(payload: _Payload):
        return payload

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'path,status_code,detail',
        [
            ('/not-found', 404, 'Event not found'),
            ('/domain', 400, 'Adjustment cannot be zero'),
            ('/conflict', 409, 'Block already released'),
            ('/type-mismatch', 409, 'Not a GA block'),
            ('/value', 400, 'bad value'),
        ],
    )
    def test_custom_errors_keep_their_message(self, client, path, status_code, detail):
        response = client.get(path)

        assert response.status_code == status_code
        assert response.json() == {'detail': detail}

    def test_unexpected_error_hides_details(self, client):
        response = client.get('/crash')

        assert response.status_code == 500
        assert response.json() == {'detail': 'Internal server error'}

    def test_request_validation_is_400(self, client):
        response = client.post('/validate', json={'quantity': 0})

        assert response.status_code == 400
        assert response.json()['detail'][0]['loc'] == ['body', 'quantity']
