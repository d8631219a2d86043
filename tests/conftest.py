"""
Pytest configuration for engine tests

Fixtures shared by the registry, metadata and contract tests.
"""

import pytest

from simple_nft import SimpleNftContract, to_base_units


@pytest.fixture
def mint_fee():
    """Mint fee of 0.0069 in smallest units"""
    return to_base_units(".0069")


@pytest.fixture
def contract(mint_fee):
    """Fresh contract with the default fee"""
    return SimpleNftContract(mint_fee=mint_fee)


@pytest.fixture
def hello_world():
    """Arguments of the hello world definition"""
    return {
        "name": "hello world!",
        "description": "A hello world token.",
        "image": "<svg>hello, world!</svg>",
        "attributes": {"artist": "buzzy"},
    }
