"""
Token Metadata Encoding

Serializes a token definition into a self-describing data locator:

    data:application/json;utf8,{"name":...,"description":...,"image":...,"attributes":[...]}

The JSON body is compact and its field order is fixed (name, description,
image, attributes; trait_type then value inside each attribute). It is built
by a small ordered-field writer so the output never depends on how a generic
serializer orders keys.

The image is embedded as its own data locator (data:image/svg+xml;utf8,)
followed by the stored markup with no transformation other than JSON string
escaping.
"""

import json
from collections.abc import Iterable
from typing import Any

from .types import Definition


JSON_URI_PREFIX = "data:application/json;utf8,"
SVG_URI_PREFIX = "data:image/svg+xml;utf8,"


def encode_string(value: str) -> str:
    """
    Encode text as a JSON string literal.

    Quote, backslash and control characters are escaped; other characters,
    including non-ASCII text and '/', are emitted as-is.
    """
    return json.dumps(value, ensure_ascii=False)


def encode_object(fields: Iterable[tuple[str, str]]) -> str:
    """
    Encode an object from (key, encoded value) pairs, preserving their order.

    Values must already be JSON fragments (see encode_string, encode_array).
    """
    return "{" + ",".join(f"{encode_string(key)}:{value}" for key, value in fields) + "}"


def encode_array(items: Iterable[str]) -> str:
    """Encode an array from already-encoded JSON fragments"""
    return "[" + ",".join(items) + "]"


def render_metadata_json(definition: Definition) -> str:
    """
    Render the compact JSON body for a definition.

    Args:
        definition: Token definition to serialize

    Returns:
        JSON text with fields name, description, image, attributes
    """
    attributes = encode_array(
        encode_object(
            [
                ("trait_type", encode_string(attribute.trait_type)),
                ("value", encode_string(attribute.value)),
            ]
        )
        for attribute in definition.attributes
    )

    return encode_object(
        [
            ("name", encode_string(definition.name)),
            ("description", encode_string(definition.description)),
            ("image", encode_string(SVG_URI_PREFIX + definition.image)),
            ("attributes", attributes),
        ]
    )


def render_token_uri(definition: Definition) -> str:
    """
    Render the metadata locator for a definition.

    Example:
        >>> render_token_uri(Definition(1, "hello", "desc", "<svg/>"))
        'data:application/json;utf8,{"name":"hello","description":"desc","image":"data:image/svg+xml;utf8,<svg/>","attributes":[]}'
    """
    return JSON_URI_PREFIX + render_metadata_json(definition)


def parse_token_uri(uri: str) -> dict[str, Any]:
    """
    Parse a metadata locator back into its JSON object.

    Args:
        uri: Locator produced by render_token_uri

    Returns:
        Decoded metadata dictionary

    Raises:
        ValueError: If the locator lacks the JSON data prefix or the body is not valid JSON
    """
    if not uri.startswith(JSON_URI_PREFIX):
        raise ValueError(f"Not a JSON data locator: {uri[:40]!r}")

    return json.loads(uri[len(JSON_URI_PREFIX):])
