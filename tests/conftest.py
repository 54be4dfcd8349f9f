"""
Fixtures compartilhadas: aplicação Flask de teste e upstream simulado.
"""

from unittest.mock import MagicMock, patch

import pytest

from app import create_app
from config import Config, StrictCorsConfig

UPSTREAM_URL = "https://upstream.test/api/consulta-cpf"


class ConfigTeste(Config):
    TESTING = True
    CPF_UPSTREAM_URL = UPSTREAM_URL
    CPF_UPSTREAM_TIMEOUT = None
    CORS_ALLOWED_ORIGINS = '*'
    CORS_ALLOW_CREDENTIALS = False


class ConfigTesteCorsRestrito(StrictCorsConfig):
    TESTING = True
    CPF_UPSTREAM_URL = UPSTREAM_URL
    CORS_ALLOW_CREDENTIALS = False


@pytest.fixture
def app():
    return create_app(ConfigTeste)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def strict_client():
    return create_app(ConfigTesteCorsRestrito).test_client()


def fake_response(text, status_code=200):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    return response


@pytest.fixture
def upstream():
    """Substitui requests.post do serviço de CPF; configure return_value/side_effect no teste."""
    with patch("app.services.cpf_service.requests.post") as mock_post:
        mock_post.return_value = fake_response('{"data": {}}')
        yield mock_post
