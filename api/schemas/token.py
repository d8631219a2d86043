"""
Token Schemas

Pydantic models for token-related API requests and responses.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ============================================================================
# Definition Schemas
# ============================================================================


class CreateTokenRequest(BaseModel):
    """Request to create a token definition"""

    name: str = Field(description="Token name")
    description: str = Field(description="Token description")
    image: str = Field(description="Raw image markup (e.g. SVG), stored verbatim")
    attributes: dict[str, str] = Field(
        default_factory=dict, description="Trait attributes, kept in the order given"
    )


class CreateTokenResponse(BaseModel):
    """Response for token definition creation"""

    definition_id: int = Field(description="Id of the new definition")
    definition_count: int = Field(description="Total definitions created")


class AttributeResponse(BaseModel):
    """Single trait attribute"""

    trait_type: str
    value: str


class DefinitionResponse(BaseModel):
    """Stored token definition"""

    id: int
    name: str
    description: str
    image: str
    attributes: list[AttributeResponse]


# ============================================================================
# Mint Schemas
# ============================================================================


class MintRequest(BaseModel):
    """Request to mint a token against the current definition"""

    payer: str = Field(min_length=1, description="Opaque identity of the payer")
    amount: Decimal = Field(ge=0, description="Payment in native currency units (e.g. 0.0069)")


class MintResponse(BaseModel):
    """Response for a successful mint"""

    token_id: int = Field(description="Id of the minted token")
    definition_id: int = Field(description="Definition the token is bound to")
    owner: str = Field(description="Identity that paid for the token")
    paid: int = Field(description="Payment accepted, in smallest currency units")


# ============================================================================
# Query Schemas
# ============================================================================


class TokenResponse(BaseModel):
    """Minted token record"""

    token_id: int
    definition_id: int
    owner: str


class TokenUriResponse(BaseModel):
    """Metadata locator of a minted token"""

    token_id: int
    uri: str = Field(description="data:application/json;utf8,<JSON> locator")


class SupplyResponse(BaseModel):
    """Contract counters and balance"""

    definition_count: int
    token_count: int
    balance: int = Field(description="Collected payments, in smallest currency units")
    mint_fee: int = Field(description="Mint fee, in smallest currency units")
    mint_fee_display: Decimal = Field(description="Mint fee in native currency units")
    currency_symbol: str


class OwnerBalanceResponse(BaseModel):
    """Number of tokens minted by an identity"""

    owner: str
    balance: int


class TokenErrorResponse(BaseModel):
    """Error response for token operations"""

    detail: str = Field(description="Error message")
