"""
Pytest configuration for API tests

Fixtures and configuration for FastAPI endpoint testing.
Every test gets a fresh contract instance.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from api.config import settings
from api.dependencies.contract import get_contract
from api.main import app
from simple_nft import SimpleNftContract


# Load test environment variables
@pytest.fixture(scope="session", autouse=True)
def load_env():
    """Load environment variables for testing"""
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    yield


@pytest.fixture
def contract():
    """Fresh contract using the configured mint fee"""
    return SimpleNftContract(mint_fee=settings.mint_fee_base_units)


@pytest.fixture
def client(contract):
    """Create FastAPI test client bound to the fresh contract"""
    app.dependency_overrides[get_contract] = lambda: contract
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Payment fixtures
@pytest.fixture
def mint_fee():
    """Mint fee in native currency units, as sent by clients"""
    return str(settings.mint_fee)


@pytest.fixture
def payer():
    """Default payer identity"""
    return "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
