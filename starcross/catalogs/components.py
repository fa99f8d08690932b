"""
This module expands catalog records that describe several stellar components into independent stars.

A single line of a multiple star catalog often covers a whole system, with the component letters ("A", "AB", "ABC",
...) given in their own column.  :func:`expand_components` turns such a record into one star per component letter, each
a deep copy of the record tagged with the catalog identifier of that component (for instance ``GJ 570A``, ``GJ 570B``
and ``GJ 570C`` from root ``570`` and components ``ABC``).  A record with zero or one component letters gives a single
star.  All fields other than the identifier are inherited from the record.
"""

from typing import List, MutableSequence, Optional

from starcross.catalogs.identifiers import Identifier
from starcross.catalogs.objects import StarRecord


__all__ = ['expand_components', 'add_component_stars']


def _component_identifier(prefix: str, root: str, components: str) -> Optional[Identifier]:
    return Identifier.from_string('{} {}{}'.format(prefix, root, components))


def expand_components(star: StarRecord, root: str, components: str, prefix: str = 'GJ') -> List[StarRecord]:
    """
    Expands a record into one star per component.

    The input star is not modified.  Each output star is an independent deep copy of it with the component identifier
    ``prefix + " " + root + component`` added to its (sorted) identifier list.  If the root is blank or malformed no
    identifier can be formed and the copies are added without one.

    :param star: the star built from the catalog record
    :param root: the catalog number of the system, for instance ``"570"`` or ``"412.1"``
    :param components: the component letters, possibly empty
    :param prefix: the catalog prefix of the component identifiers
    :return: the component stars
    """

    components = ''.join(components.split())

    if len(components) < 2:
        clone = star.copy()
        clone.add_identifier(_component_identifier(prefix, root, components))
        return [clone]

    stars = []
    for component in components:
        clone = star.copy()
        clone.add_identifier(_component_identifier(prefix, root, component))
        stars.append(clone)

    return stars


def add_component_stars(star: StarRecord, root: str, components: str, stars: MutableSequence[StarRecord],
                        prefix: str = 'GJ') -> int:
    """
    Expands a record into one star per component and appends them to a collection.

    :param star: the star built from the catalog record
    :param root: the catalog number of the system
    :param components: the component letters, possibly empty
    :param stars: the collection to append the component stars to
    :param prefix: the catalog prefix of the component identifiers
    :return: the number of stars appended
    """

    expanded = expand_components(star, root, components, prefix=prefix)

    stars.extend(expanded)

    return len(expanded)
