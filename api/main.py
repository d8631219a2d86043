import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse


# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

from api.config import settings
from api.dependencies.contract import get_contract
from api.routers.api_v1.api import api_router
from simple_nft import SimpleNftContract


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Creates the contract instance on startup so the configured mint fee is
    validated before the first request.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version} ({settings.environment})")

    contract = get_contract()
    logger.info(f"Mint fee: {settings.mint_fee} {settings.currency_symbol} ({contract.mint_fee} base units)")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.api_title}")


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Basic HTML response."""
    body = (
        "<html>"
        "<body style='padding: 10px;'>"
        "<h1>Welcome to the Simple NFT API</h1>"
        "<div>"
        "Check the docs: <a href='/docs'>here</a>"
        "</div>"
        "</body>"
        "</html>"
    )

    return HTMLResponse(content=body)


@app.get("/health")
async def health_check(contract: SimpleNftContract = Depends(get_contract)):
    """
    Health check endpoint.

    Returns:
        - status: "healthy"
        - api_version: API version
        - environment: Current environment
        - contract: Current counters of the contract instance
    """
    return {
        "status": "healthy",
        "api_version": settings.api_version,
        "environment": settings.environment,
        "contract": {
            "definition_count": contract.definition_count,
            "token_count": contract.token_count,
        },
    }


app.include_router(api_router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.is_development,
    )
