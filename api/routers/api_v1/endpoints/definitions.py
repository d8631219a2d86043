"""
Definition Endpoints

Read access to stored token definitions.
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from api.dependencies.contract import get_contract
from api.schemas.token import AttributeResponse, DefinitionResponse, TokenErrorResponse
from simple_nft import SimpleNftContract, UnknownDefinition


router = APIRouter()


@router.get(
    "/{definition_id}",
    response_model=DefinitionResponse,
    summary="Get definition",
    responses={404: {"model": TokenErrorResponse, "description": "Definition not found"}},
)
async def get_definition(
    definition_id: int = Path(..., ge=1, description="Definition id"),
    contract: SimpleNftContract = Depends(get_contract),
) -> DefinitionResponse:
    try:
        definition = contract.get_definition(definition_id)
    except UnknownDefinition as e:
        raise HTTPException(status_code=404, detail=str(e))

    return DefinitionResponse(
        id=definition.id,
        name=definition.name,
        description=definition.description,
        image=definition.image,
        attributes=[
            AttributeResponse(trait_type=trait_type, value=value)
            for trait_type, value in definition.attribute_pairs()
        ],
    )
