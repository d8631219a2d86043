from fastapi import APIRouter

from api.routers.api_v1.endpoints import definitions, tokens


api_router = APIRouter()

api_router.include_router(tokens.router, prefix="/tokens", tags=["Tokens"])
api_router.include_router(definitions.router, prefix="/definitions", tags=["Definitions"])
