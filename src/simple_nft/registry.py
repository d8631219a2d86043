"""
Definition Registry

Append-only store of token definitions keyed by sequential id.
Records are never mutated or removed once created.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping

from .errors import UnknownDefinition
from .types import Attribute, Definition


logger = logging.getLogger(__name__)


AttributesInput = Mapping[str, str] | Iterable[tuple[str, str]]


def normalize_attributes(attributes: AttributesInput | None) -> tuple[Attribute, ...]:
    """
    Convert caller-supplied attributes into an ordered tuple.

    A mapping contributes its items in iteration order; a sequence of
    (key, value) pairs is kept verbatim, duplicates included.

    Args:
        attributes: Mapping of trait type to value, or ordered pairs

    Returns:
        Tuple of Attribute records in caller order
    """
    if attributes is None:
        return ()

    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    return tuple(Attribute(trait_type=key, value=value) for key, value in pairs)


class DefinitionRegistry:
    """
    Registry of token definitions.

    Ids start at 1 and grow by one per creation. The most recently created
    definition is the one new mints bind to.
    """

    def __init__(self):
        self._definitions: dict[int, Definition] = {}
        self._count = 0

    @property
    def count(self) -> int:
        """Number of definitions created so far"""
        return self._count

    @property
    def latest(self) -> Definition | None:
        """Most recently created definition, or None when empty"""
        if self._count == 0:
            return None
        return self._definitions[self._count]

    def create(
        self,
        name: str,
        description: str,
        image: str,
        attributes: AttributesInput | None = None,
    ) -> int:
        """
        Store a new definition and return its id.

        No content validation is performed: empty strings and empty
        attribute collections are accepted.

        Args:
            name: Token name
            description: Token description
            image: Image markup, stored verbatim
            attributes: Trait attributes (mapping or ordered pairs)

        Returns:
            Newly allocated definition id

        Example:
            >>> registry = DefinitionRegistry()
            >>> registry.create("hello world!", "A hello world token.", "<svg/>", {"artist": "buzzy"})
            1
        """
        definition = Definition(
            id=self._count + 1,
            name=name,
            description=description,
            image=image,
            attributes=normalize_attributes(attributes),
        )

        self._definitions[definition.id] = definition
        self._count = definition.id

        logger.info(f"Created definition {definition.id} ({definition.name!r})")
        return definition.id

    def get(self, definition_id: int) -> Definition:
        """
        Get a definition by id.

        Raises:
            UnknownDefinition: If the id was never created
        """
        definition = self._definitions.get(definition_id)
        if definition is None:
            raise UnknownDefinition(definition_id)
        return definition

    def __contains__(self, definition_id: object) -> bool:
        return definition_id in self._definitions

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Definition]:
        for definition_id in range(1, self._count + 1):
            yield self._definitions[definition_id]
