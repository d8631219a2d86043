"""
Contract Dependency

FastAPI dependency for accessing the process-wide SimpleNftContract.
"""

import logging

from api.config import settings
from simple_nft import SimpleNftContract


logger = logging.getLogger(__name__)

# Global state for the contract instance
_contract: SimpleNftContract | None = None


def get_contract() -> SimpleNftContract:
    """
    Get or initialize the contract.

    The mint fee is taken from settings at first use and stays fixed for the
    lifetime of the instance.

    Returns:
        SimpleNftContract: The contract owned by this process
    """
    global _contract
    if _contract is None:
        _contract = SimpleNftContract(mint_fee=settings.mint_fee_base_units)
        logger.info(
            f"Contract initialized with mint fee {settings.mint_fee} {settings.currency_symbol} "
            f"({settings.mint_fee_base_units} base units)"
        )
    return _contract
