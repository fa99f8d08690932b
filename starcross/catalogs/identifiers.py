r"""
This module defines the typed, catalog tagged identifiers used to cross match stars between catalogs.

Description
-----------

Every star in starcross carries a sorted list of :class:`Identifier` values.  An identifier is a :class:`Catalog` tag
(HD, HIP, GJ, Bayer, ...) together with a catalog specific body.  Two identifiers are equal if and only if their tag and
body are equal, and identifiers are totally ordered first by the rank of their catalog (the integer value of the
:class:`Catalog` member) and then by their body.  This ordering is what keeps the identifier list of a star sorted and
free of duplicates (see :func:`add_identifier` and :func:`sort_identifiers`).

Identifiers are normally created from their display text with :meth:`Identifier.from_string` and rendered back with
:meth:`Identifier.to_string` (or ``str``).  The recognized forms are

========================= ============================================== ===========================================
catalog                   examples                                       body
========================= ============================================== ===========================================
:attr:`Catalog.BAYER`     ``alf CMa``, ``alf2 Cen``, ``Alpha CMa``       (constellation rank, letter rank, superscript)
:attr:`Catalog.FLAMSTEED` ``61 Cyg``                                     (constellation rank, number)
:attr:`Catalog.GCVS`      ``R And``, ``RR Lyr``, ``V1500 Cyg``           (constellation rank, designation)
:attr:`Catalog.HR`        ``HR 2491``                                    (number,)
:attr:`Catalog.GJ`        ``GJ 551``, ``GJ 412.1``, ``Gl 570BC``         (number, components)
:attr:`Catalog.HD`        ``HD 48915``                                   (number,)
:attr:`Catalog.SAO`       ``SAO 151881``                                 (number,)
:attr:`Catalog.DM`        ``BD+16 1234``, ``CD-23 4567a``, ``CP-60 12``  (prefix, sign, zone, number, suffix)
:attr:`Catalog.HIP`       ``HIP 32349``                                  (number,)
========================= ============================================== ===========================================

Text that does not match any of these forms has no identifier and :meth:`~Identifier.from_string` returns ``None``.
``None`` is never stored in an identifier list or an :class:`.ObjectIndex`.

Greek letters are recognized either as the lower case three letter abbreviations (``alf``, ``bet``, ...) or as full
names in lower or capitalized case.  Upper case text such as ``MU Cas`` is therefore read as a (syntactically valid)
variable star name; importers that know their name column holds capitalized Bayer letters must filter those before
parsing.
"""

import re

from bisect import insort

from dataclasses import dataclass

from enum import IntEnum

from types import MappingProxyType

from typing import Optional, Iterable, List, Mapping


__all__ = ['Catalog', 'Identifier', 'CONSTELLATIONS', 'GREEK_LETTERS', 'GREEK_NAMES',
           'constellation_rank', 'greek_letter_rank', 'add_identifier', 'sort_identifiers']


class Catalog(IntEnum):
    """
    The enumerated source catalogs.

    The integer value of each member is its rank in the identifier total order.
    """

    BAYER = 1
    FLAMSTEED = 2
    GCVS = 3
    HR = 4
    GJ = 5
    HD = 6
    SAO = 7
    DM = 8
    HIP = 9


CONSTELLATIONS: tuple[str, ...] = (
    'And', 'Ant', 'Aps', 'Aqr', 'Aql', 'Ara', 'Ari', 'Aur', 'Boo', 'Cae', 'Cam', 'Cnc', 'CVn', 'CMa', 'CMi', 'Cap',
    'Car', 'Cas', 'Cen', 'Cep', 'Cet', 'Cha', 'Cir', 'Col', 'Com', 'CrA', 'CrB', 'Crv', 'Crt', 'Cru', 'Cyg', 'Del',
    'Dor', 'Dra', 'Equ', 'Eri', 'For', 'Gem', 'Gru', 'Her', 'Hor', 'Hya', 'Hyi', 'Ind', 'Lac', 'Leo', 'LMi', 'Lep',
    'Lib', 'Lup', 'Lyn', 'Lyr', 'Men', 'Mic', 'Mon', 'Mus', 'Nor', 'Oct', 'Oph', 'Ori', 'Pav', 'Peg', 'Per', 'Phe',
    'Pic', 'PsA', 'Psc', 'Pup', 'Pyx', 'Ret', 'Sge', 'Sgr', 'Sco', 'Scl', 'Sct', 'Ser', 'Sex', 'Tau', 'Tel', 'TrA',
    'Tri', 'Tuc', 'UMa', 'UMi', 'Vel', 'Vir', 'Vol', 'Vul'
)
"""
The IAU three letter constellation abbreviations in alphabetical order of the Latin names.

The rank of a constellation in identifier bodies is its 1-based position in this tuple.
"""

GREEK_LETTERS: tuple[str, ...] = (
    'alf', 'bet', 'gam', 'del', 'eps', 'zet', 'eta', 'tet', 'iot', 'kap', 'lam', 'mu', 'nu', 'ksi', 'omi', 'pi',
    'rho', 'sig', 'tau', 'ups', 'phi', 'chi', 'psi', 'ome'
)
"""
The standard abbreviations of the Greek letters used for Bayer designations, in alphabet order.
"""

GREEK_NAMES: tuple[str, ...] = (
    'alpha', 'beta', 'gamma', 'delta', 'epsilon', 'zeta', 'eta', 'theta', 'iota', 'kappa', 'lambda', 'mu', 'nu', 'xi',
    'omicron', 'pi', 'rho', 'sigma', 'tau', 'upsilon', 'phi', 'chi', 'psi', 'omega'
)
"""
The full names of the Greek letters, parallel to :data:`GREEK_LETTERS`.
"""

_CONSTELLATION_RANKS: Mapping[str, int] = MappingProxyType(
    {abbr.lower(): rank for rank, abbr in enumerate(CONSTELLATIONS, start=1)})

_GREEK_RANKS: Mapping[str, int] = MappingProxyType(
    {**{name: rank for rank, name in enumerate(GREEK_NAMES, start=1)},
     **{abbr: rank for rank, abbr in enumerate(GREEK_LETTERS, start=1)}})

_NUMBERED_PREFIXES: Mapping[str, Catalog] = MappingProxyType({'HR': Catalog.HR, 'HD': Catalog.HD,
                                                              'SAO': Catalog.SAO, 'HIP': Catalog.HIP})

_NUMBERED_RE = re.compile(r'^(HIP|HD|HR|SAO)\s*(\d+)$')
_GJ_RE = re.compile(r'^(?:GJ|Gl|GL|NN|Wo|WO)\s*(\d+(?:\.\d+)?)\s*([A-Z]*)$')
_DM_RE = re.compile(r'^(BD|CD|CP|SD)\s*([+-])\s*(\d{1,2})\s+(\d+)\s*([a-z]?)$')
_BAYER_RE = re.compile(r'^([A-Za-z]+)\.?(\d?)\s+([A-Za-z]{3})$')
_FLAMSTEED_RE = re.compile(r'^(\d+)\s+([A-Za-z]{3})$')
_GCVS_RE = re.compile(r'^([A-Z]{1,2}|V\d+)\s+([A-Za-z]{3})$')


def constellation_rank(abbreviation: str) -> int:
    """
    Returns the 1-based rank of a constellation abbreviation (any case), or 0 if it is not an IAU constellation.
    """

    return _CONSTELLATION_RANKS.get(abbreviation.lower(), 0)


def greek_letter_rank(letter: str) -> int:
    """
    Returns the 1-based rank of a Greek letter abbreviation or full name, or 0 if it is not a Greek letter.

    Abbreviations must be lower case and full names lower case or capitalized.  All upper case text is rejected since
    it is indistinguishable from a variable star designation.
    """

    if not (letter.islower() or letter.istitle()):
        return 0

    return _GREEK_RANKS.get(letter.lower(), 0)


def _is_gcvs_designation(designation: str) -> bool:
    """
    Checks the Argelander form of a variable star designation.

    Valid designations are a single letter R-Z, a pair of letters without J whose second letter does not precede the
    first (RR-ZZ, AA-QZ), or V followed by a number of at least 335.
    """

    if designation[0] == 'V' and designation[1:].isdigit():
        return int(designation[1:]) >= 335

    if len(designation) == 1:
        return 'R' <= designation <= 'Z'

    first, second = designation
    return 'J' not in designation and second >= first


@dataclass(frozen=True, order=True)
class Identifier:
    """
    An immutable catalog identifier.

    Instances are hashable, so they can be used as keys of an :class:`.ObjectIndex` or of an identifier to name
    dictionary, and ordered, so that lists of them can be kept sorted.  The ordering compares :attr:`catalog` first, so
    bodies of different catalogs are never compared with each other.
    """

    catalog: Catalog
    """
    The catalog this identifier belongs to.
    """

    body: tuple
    """
    The catalog specific body of the identifier.  See the module documentation for the layout of each catalog.
    """

    @classmethod
    def numbered(cls, catalog: Catalog, number: Optional[int]) -> Optional['Identifier']:
        """
        Creates an identifier in one of the simply numbered catalogs (HR, HD, SAO, HIP).

        :param catalog: the catalog of the identifier
        :param number: the catalog number.  ``None`` or a non-positive number gives no identifier.
        :return: the identifier or ``None``
        """

        if catalog not in _NUMBERED_PREFIXES.values():
            raise ValueError('{} is not a numbered catalog'.format(catalog.name))

        if number is None or number <= 0:
            return None

        return cls(catalog, (int(number),))

    @classmethod
    def from_string(cls, text: str) -> Optional['Identifier']:
        """
        Parses an identifier from its display text.

        Leading and trailing whitespace is ignored.  Text that does not match any recognized catalog grammar yields
        ``None``.

        :param text: the identifier text, for instance ``"HD 48915"`` or ``"alf CMa"``
        :return: the parsed identifier or ``None``
        """

        text = text.strip()

        if not text:
            return None

        match = _NUMBERED_RE.match(text)
        if match:
            return cls.numbered(_NUMBERED_PREFIXES[match.group(1)], int(match.group(2)))

        match = _GJ_RE.match(text)
        if match:
            return cls(Catalog.GJ, (float(match.group(1)), match.group(2)))

        match = _DM_RE.match(text)
        if match:
            prefix, sign, zone, number, suffix = match.groups()
            return cls(Catalog.DM, (prefix, sign, int(zone), int(number), suffix))

        match = _BAYER_RE.match(text)
        if match:
            letter = greek_letter_rank(match.group(1))
            constellation = constellation_rank(match.group(3))
            if letter and constellation:
                return cls(Catalog.BAYER, (constellation, letter, int(match.group(2) or 0)))

        match = _FLAMSTEED_RE.match(text)
        if match:
            constellation = constellation_rank(match.group(2))
            if constellation and int(match.group(1)) > 0:
                return cls(Catalog.FLAMSTEED, (constellation, int(match.group(1))))
            return None

        match = _GCVS_RE.match(text)
        if match:
            constellation = constellation_rank(match.group(2))
            if constellation and _is_gcvs_designation(match.group(1)):
                return cls(Catalog.GCVS, (constellation, match.group(1)))

        return None

    def to_string(self) -> str:
        """
        Renders the identifier in its canonical display form.

        The result parses back to an equal identifier with :meth:`from_string`.  Catalog prefixes are normalized (for
        instance ``Gl 15A`` renders as ``GJ 15A``).
        """

        if self.catalog in (Catalog.HR, Catalog.HD, Catalog.SAO, Catalog.HIP):
            return '{} {}'.format(self.catalog.name, self.body[0])

        if self.catalog == Catalog.GJ:
            number, components = self.body
            return 'GJ {:g}{}'.format(number, components)

        if self.catalog == Catalog.DM:
            prefix, sign, zone, number, suffix = self.body
            return '{}{}{:02d} {}{}'.format(prefix, sign, zone, number, suffix)

        constellation = CONSTELLATIONS[self.body[0] - 1]

        if self.catalog == Catalog.BAYER:
            _, letter, superscript = self.body
            return '{}{} {}'.format(GREEK_LETTERS[letter - 1], superscript if superscript else '', constellation)

        # flamsteed numbers and variable star designations share the same layout
        return '{} {}'.format(self.body[1], constellation)

    def __str__(self) -> str:
        return self.to_string()


def add_identifier(identifier: Optional[Identifier], identifiers: List[Identifier]) -> bool:
    """
    Inserts an identifier into a sorted identifier list, keeping it sorted.

    ``None`` and identifiers already in the list are not inserted.

    :param identifier: the identifier to add
    :param identifiers: the sorted list to add it to (modified in place)
    :return: ``True`` if the identifier was inserted
    """

    if identifier is None or identifier in identifiers:
        return False

    insort(identifiers, identifier)

    return True


def sort_identifiers(identifiers: Iterable[Optional[Identifier]]) -> List[Identifier]:
    """
    Returns the identifiers as a sorted list with duplicates and ``None`` values removed.
    """

    return sorted({ident for ident in identifiers if ident is not None})
