"""
Shared fixtures for the employee admin API tests.

Gate and roster are process-wide, so every test starts from a logged-out
gate and the two seeded employees.
"""

import os

# Pin configuration before any app module is imported
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "password123"
os.environ["SEED_EMPLOYEES"] = "true"

import pytest
from fastapi.testclient import TestClient

import store
from main import app


@pytest.fixture(autouse=True)
def reset_state():
    store.gate.logout()
    store.employees.reset(seed=True)
    yield
    store.gate.logout()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "password123"})
    assert response.status_code == 200
    return client
