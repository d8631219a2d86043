"""
Engine Types

Immutable records held by the contract.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attribute:
    """Single trait of a token definition"""

    trait_type: str
    value: str


@dataclass(frozen=True)
class Definition:
    """
    Immutable token definition.

    Holds the descriptive content every token minted against it shares.
    The image is stored verbatim (raw SVG or similar markup).
    """

    id: int
    name: str
    description: str
    image: str
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    def attribute_pairs(self) -> list[tuple[str, str]]:
        """Attributes as (trait_type, value) pairs in creation order"""
        return [(attribute.trait_type, attribute.value) for attribute in self.attributes]


@dataclass(frozen=True)
class Token:
    """Minted unit permanently bound to the definition current at mint time"""

    id: int
    definition_id: int
    owner: str
