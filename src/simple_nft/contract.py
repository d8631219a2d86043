"""
Simple NFT Contract

Mint and metadata engine built on the definition registry.

A producer creates definitions; a payer mints a token bound to the most
recently created definition by paying at least the configured fee; a reader
renders any minted token's metadata locator.
"""

import logging
import threading
from collections.abc import Iterator

from .errors import InsufficientPayment, NoDefinitionAvailable, UnknownToken
from .metadata import render_token_uri
from .registry import AttributesInput, DefinitionRegistry
from .types import Definition, Token


logger = logging.getLogger(__name__)


ANONYMOUS_CALLER = "anonymous"


class SimpleNftContract:
    """
    Thread-safe in-memory NFT contract.

    State changes (create_token, mint) are serialized by a reentrant lock and
    apply all-or-nothing: preconditions are checked before anything is
    written. Counters start at zero and are only exposed read-only.
    """

    def __init__(self, mint_fee: int):
        """
        Initialize the contract.

        Args:
            mint_fee: Fee required to mint, in smallest currency units
        """
        if mint_fee < 0:
            raise ValueError(f"Mint fee cannot be negative: {mint_fee}")

        self._mint_fee = mint_fee
        self._registry = DefinitionRegistry()
        self._tokens: dict[int, Token] = {}
        self._token_count = 0
        self._owned_counts: dict[str, int] = {}
        self._balance = 0
        self._lock = threading.RLock()

    # ========================================================================
    # Read-only state
    # ========================================================================

    @property
    def mint_fee(self) -> int:
        return self._mint_fee

    @property
    def definition_count(self) -> int:
        with self._lock:
            return self._registry.count

    @property
    def token_count(self) -> int:
        with self._lock:
            return self._token_count

    @property
    def balance(self) -> int:
        """Total payments collected, in smallest currency units"""
        with self._lock:
            return self._balance

    # ========================================================================
    # Definitions
    # ========================================================================

    def create_token(
        self,
        name: str,
        description: str,
        image: str,
        attributes: AttributesInput | None = None,
    ) -> int:
        """
        Create a new token definition.

        The new definition becomes current: every following mint binds to it
        until another definition is created. No payment is required and the
        content is not validated.

        Args:
            name: Token name
            description: Token description
            image: Raw image markup (e.g. SVG), stored verbatim
            attributes: Trait attributes as a mapping or ordered (key, value) pairs

        Returns:
            The new definition id
        """
        with self._lock:
            return self._registry.create(name, description, image, attributes)

    def get_definition(self, definition_id: int) -> Definition:
        """
        Get a definition by id.

        Raises:
            UnknownDefinition: If the definition was never created
        """
        with self._lock:
            return self._registry.get(definition_id)

    def definitions(self) -> Iterator[Definition]:
        """Iterate a snapshot of all definitions in id order"""
        with self._lock:
            snapshot = list(self._registry)
        return iter(snapshot)

    # ========================================================================
    # Minting
    # ========================================================================

    def mint(self, payment: int, caller: str = ANONYMOUS_CALLER) -> int:
        """
        Mint a token against the current definition.

        Args:
            payment: Amount paid, in smallest currency units
            caller: Opaque identity of the payer, recorded as token owner

        Returns:
            The new token id

        Raises:
            NoDefinitionAvailable: If no definition has been created yet
            InsufficientPayment: If payment is below the mint fee

        Example:
            >>> contract = SimpleNftContract(mint_fee=6_900_000_000_000_000)
            >>> contract.create_token("hello world!", "A hello world token.", "<svg/>", {})
            1
            >>> contract.mint(6_900_000_000_000_000)
            1
        """
        with self._lock:
            definition = self._registry.latest
            if definition is None:
                logger.warning(f"Mint rejected for {caller}: no definition available")
                raise NoDefinitionAvailable()

            if payment < self._mint_fee:
                logger.warning(
                    f"Mint rejected for {caller}: payment {payment} below fee {self._mint_fee}"
                )
                raise InsufficientPayment(payment, self._mint_fee)

            token = Token(id=self._token_count + 1, definition_id=definition.id, owner=caller)

            self._tokens[token.id] = token
            self._token_count = token.id
            self._owned_counts[caller] = self._owned_counts.get(caller, 0) + 1
            self._balance += payment

        logger.info(f"Minted token {token.id} (definition {token.definition_id}) for {caller}")
        return token.id

    # ========================================================================
    # Token queries
    # ========================================================================

    def get_token(self, token_id: int) -> Token:
        """
        Get a minted token.

        Raises:
            UnknownToken: If the token was never minted
        """
        with self._lock:
            token = self._tokens.get(token_id)
        if token is None:
            raise UnknownToken(token_id)
        return token

    def owner_of(self, token_id: int) -> str:
        """Identity that paid for the token"""
        return self.get_token(token_id).owner

    def balance_of(self, owner: str) -> int:
        """Number of tokens minted by an identity"""
        with self._lock:
            return self._owned_counts.get(owner, 0)

    def token_uri(self, token_id: int) -> str:
        """
        Render the metadata locator of a token.

        A minted token renders its bound definition. An id that was not
        minted but matches an existing definition renders that definition,
        so a definition can be previewed before its first mint. Any other id
        is unknown.

        Pure read: repeated calls return identical strings and never touch
        counters or records.

        Args:
            token_id: Minted token id or existing definition id

        Returns:
            data:application/json;utf8,<JSON> locator

        Raises:
            UnknownToken: If the id is neither a minted token nor a definition
        """
        with self._lock:
            token = self._tokens.get(token_id)
            definition_id = token.definition_id if token is not None else token_id
            if definition_id not in self._registry:
                raise UnknownToken(token_id)
            definition = self._registry.get(definition_id)

        return render_token_uri(definition)
