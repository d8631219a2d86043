"""
Token Endpoints

FastAPI endpoints for creating token definitions, minting tokens and
reading their inline metadata.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from api.config import settings
from api.dependencies.contract import get_contract
from api.schemas.token import (
    CreateTokenRequest,
    CreateTokenResponse,
    MintRequest,
    MintResponse,
    OwnerBalanceResponse,
    SupplyResponse,
    TokenErrorResponse,
    TokenResponse,
    TokenUriResponse,
)
from simple_nft import (
    InsufficientPayment,
    NoDefinitionAvailable,
    SimpleNftContract,
    UnknownToken,
    from_base_units,
    to_base_units,
)


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CreateTokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create token definition",
    description="Register a new token definition. Following mints bind to it until another one is created.",
)
async def create_token(
    request: CreateTokenRequest,
    contract: SimpleNftContract = Depends(get_contract),
) -> CreateTokenResponse:
    """
    Create a token definition.

    No payment is required and content is not validated. Attributes keep
    the order in which they appear in the request body.
    """
    try:
        definition_id = contract.create_token(
            name=request.name,
            description=request.description,
            image=request.image,
            attributes=list(request.attributes.items()),
        )
        # Ids are sequential, so the new id is the count at creation time
        return CreateTokenResponse(
            definition_id=definition_id,
            definition_count=definition_id,
        )

    except Exception as e:
        logger.error(f"Failed to create token definition: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create token: {str(e)}")


@router.post(
    "/mint",
    response_model=MintResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Mint token",
    description="Mint a token bound to the most recently created definition, paying at least the mint fee.",
    responses={
        402: {"model": TokenErrorResponse, "description": "Payment below the mint fee"},
        409: {"model": TokenErrorResponse, "description": "No token definition available"},
        422: {"model": TokenErrorResponse, "description": "Invalid payment amount"},
    },
)
async def mint_token(
    request: MintRequest,
    contract: SimpleNftContract = Depends(get_contract),
) -> MintResponse:
    """
    Mint a token.

    **Payment:** `amount` is given in native currency units and converted to
    smallest units before it is checked against the fee.
    """
    try:
        try:
            payment = to_base_units(request.amount, settings.currency_decimals)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

        token_id = contract.mint(payment, caller=request.payer)
        token = contract.get_token(token_id)

        return MintResponse(
            token_id=token.id,
            definition_id=token.definition_id,
            owner=token.owner,
            paid=payment,
        )

    except NoDefinitionAvailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InsufficientPayment as e:
        raise HTTPException(status_code=402, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to mint token for {request.payer}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to mint token: {str(e)}")


@router.get(
    "/supply",
    response_model=SupplyResponse,
    summary="Get supply",
    description="Definition and token counters, collected balance and mint fee.",
)
async def get_supply(contract: SimpleNftContract = Depends(get_contract)) -> SupplyResponse:
    return SupplyResponse(
        definition_count=contract.definition_count,
        token_count=contract.token_count,
        balance=contract.balance,
        mint_fee=contract.mint_fee,
        mint_fee_display=from_base_units(contract.mint_fee, settings.currency_decimals),
        currency_symbol=settings.currency_symbol,
    )


@router.get(
    "/owners/{owner}/balance",
    response_model=OwnerBalanceResponse,
    summary="Get owner balance",
)
async def get_owner_balance(
    owner: str = Path(..., min_length=1, description="Payer identity"),
    contract: SimpleNftContract = Depends(get_contract),
) -> OwnerBalanceResponse:
    """Number of tokens minted by an identity"""
    return OwnerBalanceResponse(owner=owner, balance=contract.balance_of(owner))


@router.get(
    "/{token_id}",
    response_model=TokenResponse,
    summary="Get token",
    responses={404: {"model": TokenErrorResponse, "description": "Token not found"}},
)
async def get_token(
    token_id: int = Path(..., ge=1, description="Minted token id"),
    contract: SimpleNftContract = Depends(get_contract),
) -> TokenResponse:
    try:
        token = contract.get_token(token_id)
    except UnknownToken as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TokenResponse(token_id=token.id, definition_id=token.definition_id, owner=token.owner)


@router.get(
    "/{token_id}/uri",
    response_model=TokenUriResponse,
    summary="Get token URI",
    description="Inline metadata locator (data:application/json;utf8,<JSON>) of a minted token, or of the definition with the same id before it is minted.",
    responses={404: {"model": TokenErrorResponse, "description": "Token not found"}},
)
async def get_token_uri(
    token_id: int = Path(..., ge=1, description="Minted token id or definition id"),
    contract: SimpleNftContract = Depends(get_contract),
) -> TokenUriResponse:
    """
    Render the metadata locator of a token.

    Stripping the `data:application/json;utf8,` prefix leaves valid JSON with
    `name`, `description`, `image` and `attributes`.
    """
    try:
        uri = contract.token_uri(token_id)
    except UnknownToken as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TokenUriResponse(token_id=token_id, uri=uri)
