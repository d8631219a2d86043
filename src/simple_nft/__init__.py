"""
Simple NFT Engine

Token-definition registry, mint bookkeeping and inline metadata encoding.
Pure in-process state, no network or storage dependencies.
"""

from .contract import SimpleNftContract
from .errors import (
    InsufficientPayment,
    NoDefinitionAvailable,
    SimpleNftError,
    UnknownDefinition,
    UnknownToken,
)
from .metadata import parse_token_uri, render_token_uri
from .registry import DefinitionRegistry
from .types import Attribute, Definition, Token
from .units import from_base_units, to_base_units


__all__ = [
    "SimpleNftContract",
    "DefinitionRegistry",
    "Attribute",
    "Definition",
    "Token",
    "SimpleNftError",
    "NoDefinitionAvailable",
    "InsufficientPayment",
    "UnknownToken",
    "UnknownDefinition",
    "render_token_uri",
    "parse_token_uri",
    "to_base_units",
    "from_base_units",
]
