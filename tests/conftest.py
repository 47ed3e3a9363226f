import pytest
from fastapi.testclient import TestClient

from talleres_api.app.core.store import Store
from talleres_api.app.main import create_app


@pytest.fixture
def store():
    """A fresh store holding the demo workshops and participants."""
    return Store.seeded()


@pytest.fixture
def client(store):
    """Test client for an app that owns ``store``."""
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture
def taller_id(store):
    """Id of the first seeded workshop (both seeded participants use it)."""
    return store.talleres[0].id


@pytest.fixture
def taller_payload():
    """A valid workshop body."""
    return {
        "titulo": "Taller X",
        "fecha": "2025-01-01T00:00:00.000Z",
        "duracionMin": 60,
        "cupos": 10,
        "modalidad": "virtual",
        "docente": "X",
    }


@pytest.fixture
def participante_payload(taller_id):
    """A valid participant body for the first seeded workshop."""
    return {
        "nombre": "Marta Gómez",
        "email": "marta@demo.com",
        "telefono": "700-22222",
        "tallerId": taller_id,
    }
