"""
This module provides the identifier to common name dictionary used to attach names to imported stars.

The dictionary maps an :class:`.Identifier` to one or more names ("Sirius", "Dog Star", ...).  Several identifiers of
the same star may map to the same name and most identifiers have no name at all.  Names are looked up for every
identifier of a star in identifier order, so names attached through higher ranked catalogs (Bayer before HD before HIP)
come first.

Name files are two column CSV files of ``name,identifier`` pairs, one pair per line, with ``#`` starting a comment::

    # common names of nearby stars
    Sirius,alf CMa
    Proxima Centauri,GJ 551
    Barnard's Star,GJ 699

A name listed for several identifiers, or several names listed for one identifier, are both allowed.
"""

from typing import Dict, List, Mapping, Sequence, Union, Iterable

import pandas as pd

from starcross.catalogs.identifiers import Identifier
from starcross._typing import PATH


__all__ = ['IdentifierNameMap', 'identifiers_to_names', 'load_name_map']


IdentifierNameMap = Mapping[Identifier, Union[str, Sequence[str]]]
"""
A mapping from identifiers to a name or a sequence of names.
"""


def identifiers_to_names(identifiers: Iterable[Identifier], name_map: IdentifierNameMap) -> List[str]:
    """
    Returns the names of a set of identifiers.

    The names are returned in identifier order (and in file order for several names of one identifier), with
    duplicates dropped.

    :param identifiers: the identifiers to look up
    :param name_map: the identifier to name dictionary
    :return: the list of names, empty if none of the identifiers are named
    """

    names = []

    for identifier in identifiers:
        found = name_map.get(identifier)

        if found is None:
            continue

        if isinstance(found, str):
            found = [found]

        for name in found:
            if name not in names:
                names.append(name)

    return names


def load_name_map(path: PATH) -> Dict[Identifier, List[str]]:
    """
    Loads an identifier to name dictionary from a two column ``name,identifier`` CSV file.

    Lines whose identifier text cannot be parsed are skipped.

    :param path: the name file
    :return: the identifier to names dictionary
    """

    table = pd.read_csv(path, header=None, names=['name', 'identifier'], comment='#', dtype=str,
                        skipinitialspace=True, skip_blank_lines=True).dropna()

    name_map: Dict[Identifier, List[str]] = {}

    for name, text in zip(table['name'], table['identifier']):
        identifier = Identifier.from_string(text)

        if identifier is None:
            continue

        names = name_map.setdefault(identifier, [])
        name = name.strip()
        if name not in names:
            names.append(name)

    return name_map
