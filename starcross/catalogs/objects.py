"""
This module defines the object model produced by the catalog importers.

The full celestial object hierarchy (planets, deep sky objects, ...) lives outside of starcross.  Here we only define

* the :class:`ObjectType` enumeration with its two letter type codes, exposed through the read only tables
  :data:`TYPE_CODES`/:data:`CODE_TYPES` and the pure accessors :func:`type_to_code` and :func:`code_to_type`,
* the :class:`Spherical` triple used for both fundamental coordinates and fundamental motion,
* the :class:`StarRecord` which is what the importers build, expand into components, and merge.

Unknown values are always ``None``, never zero and never a non-finite float.  Units for a :class:`StarRecord` are

============================ ========================================================================================
attribute                    units
============================ ========================================================================================
``coordinates.lon``          radians (right ascension, J2000)
``coordinates.lat``          radians (declination, J2000)
``coordinates.rad``          light years
``motion.lon``               radians/year of right ascension (not multiplied by cos(dec))
``motion.lat``               radians/year of declination
``motion.rad``               radial velocity as a fraction of the speed of light
``v_magnitude``              Johnson V magnitude
``b_magnitude``              Johnson B magnitude
============================ ========================================================================================
"""

from copy import deepcopy

from dataclasses import dataclass, field

from enum import IntEnum

from types import MappingProxyType

from typing import Optional, List, Iterable, Mapping

from starcross.catalogs.identifiers import Catalog, Identifier, add_identifier, sort_identifiers
from starcross.catalogs.utilities import LY_PER_PARSEC, LIGHT_KM_PER_SEC


__all__ = ['ObjectType', 'TYPE_CODES', 'CODE_TYPES', 'type_to_code', 'code_to_type', 'Spherical', 'StarRecord']


class ObjectType(IntEnum):
    """
    The closed set of celestial object types.
    """

    NONEXISTENT = 0
    PLANET = 1
    MOON = 2
    ASTEROID = 3
    COMET = 4
    SATELLITE = 5
    SPACECRAFT = 6
    STAR = 10
    DOUBLE_STAR = 12
    VARIABLE_STAR = 13
    DOUBLE_VARIABLE_STAR = 14
    OPEN_CLUSTER = 20
    GLOBULAR_CLUSTER = 21
    BRIGHT_NEBULA = 22
    DARK_NEBULA = 23
    PLANETARY_NEBULA = 24
    GALAXY = 25
    CONSTELLATION = 30
    ASTERISM = 31


TYPE_CODES: Mapping[ObjectType, str] = MappingProxyType({
    ObjectType.NONEXISTENT: 'NO',
    ObjectType.PLANET: 'PL',
    ObjectType.MOON: 'MN',
    ObjectType.ASTEROID: 'AS',
    ObjectType.COMET: 'CM',
    ObjectType.SATELLITE: 'ST',
    ObjectType.SPACECRAFT: 'SC',
    ObjectType.STAR: 'SS',
    ObjectType.DOUBLE_STAR: 'DS',
    ObjectType.VARIABLE_STAR: 'VS',
    ObjectType.DOUBLE_VARIABLE_STAR: 'DV',
    ObjectType.OPEN_CLUSTER: 'OC',
    ObjectType.GLOBULAR_CLUSTER: 'GC',
    ObjectType.BRIGHT_NEBULA: 'BN',
    ObjectType.DARK_NEBULA: 'DN',
    ObjectType.PLANETARY_NEBULA: 'PN',
    ObjectType.GALAXY: 'GX',
    ObjectType.CONSTELLATION: 'CN',
    ObjectType.ASTERISM: 'AM',
})
"""
The read only table of two letter codes for each object type.
"""

CODE_TYPES: Mapping[str, ObjectType] = MappingProxyType({code: otype for otype, code in TYPE_CODES.items()})
"""
The read only inverse of :data:`TYPE_CODES`.
"""


def type_to_code(object_type: ObjectType) -> str:
    """
    Returns the two letter code of an object type.
    """

    return TYPE_CODES[object_type]


def code_to_type(code: str) -> ObjectType:
    """
    Returns the object type of a two letter code.  Unrecognized codes give :attr:`ObjectType.NONEXISTENT`.
    """

    return CODE_TYPES.get(code, ObjectType.NONEXISTENT)


@dataclass
class Spherical:
    """
    A spherical triple of longitude, latitude and radial terms, each of which may be unknown (``None``).

    This is used both for fundamental coordinates (ra, dec, distance) and for fundamental motion (rate of ra, rate of
    dec, radial velocity).
    """

    lon: Optional[float] = None
    lat: Optional[float] = None
    rad: Optional[float] = None

    @property
    def angles_known(self) -> bool:
        """
        ``True`` if both the longitude and latitude terms are known.
        """

        return self.lon is not None and self.lat is not None

    def count_known(self) -> int:
        """
        Returns the number of known terms in this triple.
        """

        return sum(value is not None for value in (self.lon, self.lat, self.rad))


@dataclass
class StarRecord:
    """
    A star produced by a catalog importer.

    The :attr:`identifiers` list is always sorted and free of duplicates as long as it is modified through
    :meth:`add_identifier` and :meth:`set_identifiers`.  Coordinates and motion are always replaced together through
    :meth:`set_fundamental_motion` by the importers so both stay in the same frame.
    """

    identifiers: List[Identifier] = field(default_factory=list)
    names: List[str] = field(default_factory=list)
    coordinates: Spherical = field(default_factory=Spherical)
    motion: Spherical = field(default_factory=Spherical)
    v_magnitude: Optional[float] = None
    b_magnitude: Optional[float] = None
    spectral_type: str = ''
    object_type: ObjectType = ObjectType.STAR

    def get_identifier(self, catalog: Catalog) -> Optional[Identifier]:
        """
        Returns the first identifier of this star in the requested catalog, or ``None`` if it has none.
        """

        for ident in self.identifiers:
            if ident.catalog == catalog:
                return ident

        return None

    def add_identifier(self, identifier: Optional[Identifier]) -> bool:
        """
        Adds an identifier, keeping the identifier list sorted.  Returns ``True`` if it was added.
        """

        return add_identifier(identifier, self.identifiers)

    def set_identifiers(self, identifiers: Iterable[Optional[Identifier]]):
        """
        Replaces the identifier list with the sorted, deduplicated input.
        """

        self.identifiers = sort_identifiers(identifiers)

    def get_name(self, index: int) -> str:
        """
        Returns the name at the index, or an empty string if there is no such name.
        """

        if 0 <= index < len(self.names):
            return self.names[index]

        return ''

    def set_fundamental_motion(self, coordinates: Spherical, motion: Spherical):
        """
        Sets the fundamental coordinates and motion together.
        """

        self.coordinates = coordinates
        self.motion = motion

    @property
    def distance(self) -> Optional[float]:
        """
        The distance in light years or ``None``.
        """

        return self.coordinates.rad

    @property
    def parallax(self) -> Optional[float]:
        """
        The parallax in arc-seconds derived from the distance, or ``None`` if the distance is unknown.
        """

        if not self.coordinates.rad:
            return None

        return LY_PER_PARSEC / self.coordinates.rad

    @property
    def radial_velocity(self) -> Optional[float]:
        """
        The radial velocity in km/s, or ``None`` if it is unknown.
        """

        if self.motion.rad is None:
            return None

        return self.motion.rad * LIGHT_KM_PER_SEC

    def count_known(self) -> int:
        """
        Returns the number of known astrometric and photometric values of this star.

        This counts the six terms of the coordinates and motion and the two magnitudes.
        """

        return (self.coordinates.count_known() + self.motion.count_known() +
                (self.v_magnitude is not None) + (self.b_magnitude is not None))

    def copy(self) -> 'StarRecord':
        """
        Returns an independent deep copy of this star.
        """

        return deepcopy(self)

    def __str__(self) -> str:
        label = '; '.join(map(str, self.identifiers)) or '<no identifiers>'
        if self.names:
            label = '{} ({})'.format(self.names[0], label)
        return label

