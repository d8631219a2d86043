"""
Tests for the mint and metadata engine
"""

import threading

import pytest

from simple_nft import (
    InsufficientPayment,
    NoDefinitionAvailable,
    SimpleNftContract,
    UnknownToken,
    parse_token_uri,
    to_base_units,
)


HELLO_WORLD_URI = (
    'data:application/json;utf8,{"name":"hello world!","description":"A hello world token.",'
    '"image":"data:image/svg+xml;utf8,<svg>hello, world!</svg>",'
    '"attributes":[{"trait_type":"artist","value":"buzzy"}]}'
)


@pytest.mark.unit
class TestCreation:
    """Test definition creation through the contract"""

    def test_create_token(self, contract, hello_world):
        """Test that a token definition is created without issue"""
        assert contract.create_token(**hello_world) == 1
        assert contract.definition_count == 1
        assert contract.token_count == 0

    def test_definition_count_matches_calls(self, contract):
        ids = [contract.create_token(f"token {i}", "", "", {}) for i in range(10)]

        assert ids == list(range(1, 11))
        assert contract.definition_count == 10

    def test_definitions_snapshot(self, contract, hello_world):
        contract.create_token(**hello_world)
        snapshot = contract.definitions()
        contract.create_token("second", "", "", {})

        assert [definition.id for definition in snapshot] == [1]
        assert [definition.id for definition in contract.definitions()] == [1, 2]


@pytest.mark.unit
class TestMint:
    """Test minting and payment bookkeeping"""

    def test_mint_exact_fee(self, contract, hello_world):
        """Test that paying exactly .0069 mints token 1"""
        contract.create_token(**hello_world)

        token_id = contract.mint(to_base_units(".0069"), caller="alice")

        assert token_id == 1
        assert contract.token_count == 1
        assert contract.balance == 6_900_000_000_000_000
        assert contract.owner_of(1) == "alice"

    def test_mint_without_definition(self, contract, mint_fee):
        """Test that minting on an empty registry fails and changes nothing"""
        with pytest.raises(NoDefinitionAvailable):
            contract.mint(mint_fee)

        assert contract.token_count == 0
        assert contract.balance == 0

    def test_mint_without_definition_checked_before_payment(self, contract):
        with pytest.raises(NoDefinitionAvailable):
            contract.mint(0)

    def test_mint_insufficient_payment(self, contract, hello_world, mint_fee):
        """Test that underpaying fails and changes nothing"""
        contract.create_token(**hello_world)

        with pytest.raises(InsufficientPayment) as exc_info:
            contract.mint(mint_fee - 1, caller="alice")

        assert exc_info.value.payment == mint_fee - 1
        assert exc_info.value.required == mint_fee
        assert contract.token_count == 0
        assert contract.balance == 0
        assert contract.balance_of("alice") == 0

    def test_mint_overpayment_kept(self, contract, hello_world, mint_fee):
        contract.create_token(**hello_world)
        contract.mint(mint_fee * 2)

        assert contract.balance == mint_fee * 2

    def test_mint_binds_latest_definition(self, contract, mint_fee):
        """Test that each token binds to the definition current at mint time"""
        contract.create_token("first", "", "", {})
        contract.mint(mint_fee)
        contract.mint(mint_fee)
        contract.create_token("second", "", "", {})
        contract.mint(mint_fee)

        bindings = [contract.get_token(token_id).definition_id for token_id in (1, 2, 3)]
        assert bindings == [1, 1, 2]
        assert contract.token_count == 3

    def test_binding_is_permanent(self, contract, mint_fee):
        """Test that later definitions do not change existing tokens"""
        contract.create_token("first", "", "", {})
        contract.mint(mint_fee)
        uri = contract.token_uri(1)

        contract.create_token("second", "", "", {})

        assert contract.token_uri(1) == uri
        assert parse_token_uri(uri)["name"] == "first"

    def test_balance_of(self, contract, hello_world, mint_fee):
        contract.create_token(**hello_world)
        contract.mint(mint_fee, caller="alice")
        contract.mint(mint_fee, caller="bob")
        contract.mint(mint_fee, caller="alice")

        assert contract.balance_of("alice") == 2
        assert contract.balance_of("bob") == 1
        assert contract.balance_of("carol") == 0

    def test_free_mint(self, hello_world):
        """Test that a zero fee accepts zero payment"""
        contract = SimpleNftContract(mint_fee=0)
        contract.create_token(**hello_world)

        assert contract.mint(0) == 1

    def test_negative_fee_rejected(self):
        with pytest.raises(ValueError):
            SimpleNftContract(mint_fee=-1)

    def test_concurrent_mints(self, contract, hello_world, mint_fee):
        """Test that concurrent mints allocate distinct sequential ids"""
        contract.create_token(**hello_world)
        minted: list[int] = []
        minted_lock = threading.Lock()

        def worker():
            for _ in range(50):
                token_id = contract.mint(mint_fee)
                with minted_lock:
                    minted.append(token_id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(minted) == list(range(1, 401))
        assert contract.token_count == 400
        assert contract.balance == mint_fee * 400


@pytest.mark.unit
class TestTokenUri:
    """Test metadata rendering for minted tokens"""

    def test_hello_world_uri(self, contract, hello_world, mint_fee):
        """Test the locator returned for the hello world token"""
        contract.create_token(**hello_world)
        contract.mint(mint_fee)

        assert contract.token_uri(1) == HELLO_WORLD_URI

    def test_round_trip(self, contract, hello_world, mint_fee):
        contract.create_token(**hello_world)
        contract.mint(mint_fee)

        assert parse_token_uri(contract.token_uri(1)) == {
            "name": "hello world!",
            "description": "A hello world token.",
            "image": "data:image/svg+xml;utf8,<svg>hello, world!</svg>",
            "attributes": [{"trait_type": "artist", "value": "buzzy"}],
        }

    def test_reads_are_pure(self, contract, hello_world, mint_fee):
        """Test that rendering is repeatable and never changes state"""
        contract.create_token(**hello_world)
        contract.mint(mint_fee)
        state = (contract.definition_count, contract.token_count, contract.balance, contract.get_token(1))

        first = contract.token_uri(1)
        second = contract.token_uri(1)

        assert first == second
        assert state == (contract.definition_count, contract.token_count, contract.balance, contract.get_token(1))

    def test_unknown_token(self, contract, hello_world, mint_fee):
        """Test that an unminted token id fails"""
        contract.create_token(**hello_world)
        contract.mint(mint_fee)

        with pytest.raises(UnknownToken) as exc_info:
            contract.token_uri(999)
        assert exc_info.value.token_id == 999

    def test_definition_rendered_before_mint(self, contract, hello_world):
        """Test that token 1 renders its definition before anything is minted"""
        contract.create_token(**hello_world)

        assert contract.token_uri(1) == HELLO_WORLD_URI
        assert contract.token_count == 0

        with pytest.raises(UnknownToken):
            contract.owner_of(1)

    def test_minted_binding_wins_over_matching_definition(self, contract, mint_fee):
        """Test that a minted token renders its bound definition, not the same-numbered one"""
        contract.create_token("first", "", "", {})
        contract.create_token("second", "", "", {})
        contract.mint(mint_fee)

        assert parse_token_uri(contract.token_uri(1))["name"] == "second"
        assert parse_token_uri(contract.token_uri(2))["name"] == "second"

        with pytest.raises(UnknownToken):
            contract.token_uri(3)

    def test_unknown_id_on_empty_contract(self, contract):
        with pytest.raises(UnknownToken):
            contract.token_uri(1)
