"""
This module provides the :class:`ObjectIndex`, a lookup table from the identifiers of one catalog to positions in a
collection of objects.

Cross matching between catalogs works by building an index over the secondary collection for the catalog the two
sources share (for instance GJ numbers between the CNS3 and its accurate coordinates companion) and then resolving the
identifier of each primary record in that index.

Positions are 1-based so that 0 can stand for "not found".  Objects without an identifier in the indexed catalog are not
indexed.  If two objects share an identifier the later one wins; this mirrors a plain dictionary assignment and means
duplicate identifiers in a source file silently shadow earlier records.

The index keeps a reference to the collection it was built over.  It is a snapshot: objects appended to the collection
afterwards are not indexed, and the collection must not be reordered while the index is in use.
"""

from typing import Dict, Optional, Sequence, Iterator

from starcross.catalogs.identifiers import Catalog, Identifier
from starcross._typing import CatalogObject


__all__ = ['ObjectIndex', 'make_object_index', 'identifier_to_object']


class ObjectIndex:
    """
    A mapping from identifiers in one catalog to 1-based positions in a collection of objects.
    """

    def __init__(self, objects: Sequence[CatalogObject], catalog: Catalog):
        """
        :param objects: the collection to index
        :param catalog: the catalog whose identifiers are used as keys
        """

        self.objects: Sequence[CatalogObject] = objects
        """
        The indexed collection.
        """

        self.catalog: Catalog = catalog
        """
        The catalog whose identifiers are keys of this index.
        """

        self._positions: Dict[Identifier, int] = {}

        for position, obj in enumerate(objects, start=1):
            identifier = obj.get_identifier(catalog)
            if identifier is not None:
                self._positions[identifier] = position

    def position(self, identifier: Optional[Identifier]) -> int:
        """
        Returns the 1-based position of the object with the identifier, or 0 if there is none.
        """

        if identifier is None:
            return 0

        return self._positions.get(identifier, 0)

    def lookup(self, identifier: Optional[Identifier]) -> Optional[CatalogObject]:
        """
        Returns the object with the identifier, or ``None`` if it is not in the index.
        """

        position = self.position(identifier)

        if position == 0:
            return None

        return self.objects[position - 1]

    def __contains__(self, identifier: Optional[Identifier]) -> bool:
        return self.position(identifier) > 0

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._positions)

    def __repr__(self) -> str:
        return 'ObjectIndex(catalog={}, entries={})'.format(self.catalog.name, len(self))


def make_object_index(objects: Sequence[CatalogObject], catalog: Catalog) -> ObjectIndex:
    """
    Builds an :class:`ObjectIndex` over the objects for the catalog.
    """

    return ObjectIndex(objects, catalog)


def identifier_to_object(identifier: Optional[Identifier], index: ObjectIndex) -> Optional[CatalogObject]:
    """
    Resolves an identifier through an index.  ``None`` identifiers and unknown identifiers give ``None``.
    """

    return index.lookup(identifier)
