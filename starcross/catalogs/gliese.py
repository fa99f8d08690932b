# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the importers for the Gliese-Jahreiss Catalog of Nearby Stars, 3rd preliminary edition (CNS3,
CDS catalog V/70A) and its companion Accurate Coordinates for Gliese Catalog Stars (GJAC, CDS catalog J/PASP/122/885).

Description
-----------

The CNS3 gives B1950 positions, total proper motion and position angle, radial velocity, photometry, parallax and HD/DM
cross identifications for about 3800 systems.  Its positions are of low accuracy.  The GJAC gives accurate J2000
positions and proper motions, and HIP cross identifications, for most of the same systems.  The full import is
therefore done in two passes:

#. :func:`import_gj_ac` reads the GJAC, enriching each star with the distance, radial velocity, magnitudes and Bayer,
   Flamsteed and variable star designations of its Hipparcos counterpart.
#. :func:`import_gj_cns3` reads the CNS3, precesses every position and proper motion from B1950 to J2000, then merges
   the accurate GJAC values into each star with the same GJ identifier (:func:`merge_accurate_stars`), and finally
   attaches common names (:func:`attach_names`).

Lines of either catalog that describe several components ("AB", "ABC", ...) are split into one star per component by
:func:`.add_component_stars`.  A complete import gives 3849 CNS3 stars (the Sun is excluded) and 4266 GJAC stars.

Both catalogs are fixed column text files.  Their layouts are given by :data:`CNS3_LAYOUT` and :data:`GJAC_LAYOUT`.
Short lines are not data lines and are skipped, as are lines with a blank right ascension or declination.  Blank or
unreadable numeric fields give unknown (``None``) values.

Use
---

The importers are configured with :class:`GlieseImportOptions`.  Normally you would just call the module functions::

    >>> from starcross.catalogs.gliese import import_gj_ac, import_gj_cns3
    >>> gjac_stars, stars = [], []
    >>> import_gj_ac('gjac.txt', hip_stars, gjac_stars)
    4266
    >>> import_gj_cns3('cns3.dat', name_map, gjac_stars, stars)
    3849

If you need to build single records, use :class:`CNS3Importer` or :class:`GJACImporter` directly.
"""

import warnings

import logging

from dataclasses import dataclass

from functools import partial

from typing import Optional, Sequence, MutableSequence, Callable, Dict, Tuple, List

import numpy as np

from starcross.catalogs.components import add_component_stars
from starcross.catalogs.epochs import update_coordinates_and_motion, apply_rotation
from starcross.catalogs.fixed_width import ColumnExtent, ColumnLayout, parse_float, parse_int
from starcross.catalogs.identifiers import Catalog, Identifier
from starcross.catalogs.names import IdentifierNameMap, identifiers_to_names
from starcross.catalogs.object_index import ObjectIndex
from starcross.catalogs.objects import Spherical, StarRecord
from starcross.catalogs.proper_motion import pm_pa_to_components
from starcross.catalogs.utilities import LY_PER_PARSEC, LIGHT_KM_PER_SEC
from starcross.rotations.precession import besselian_epoch_to_jd, precession_to_j2000
from starcross.utilities.angles import sexagesimal_to_degrees, deg_to_rad, arcsec_to_rad
from starcross.utilities.mixin_classes import UserOptionConfigured, AttributePrinting
from starcross.utilities.options import UserOptions

from starcross._typing import PATH, DOUBLE_ARRAY, CatalogObject


_LOGGER: logging.Logger = logging.getLogger(__name__)


__all__ = ['CNS3_LAYOUT', 'GJAC_LAYOUT', 'GlieseImportOptions', 'CNS3Importer', 'GJACImporter',
           'split_gj_designation', 'merge_accurate_stars', 'attach_names', 'import_gj_cns3', 'import_gj_ac']


CNS3_LAYOUT: ColumnLayout = ColumnLayout('CNS3', {
    'gj': ColumnExtent(2, 6),
    'components': ColumnExtent(8, 2),
    'ra': ColumnExtent(12, 8),
    'dec': ColumnExtent(21, 8),
    'pm': ColumnExtent(30, 6),
    'pa': ColumnExtent(37, 5),
    'rv': ColumnExtent(43, 6),
    'spectral_type': ColumnExtent(54, 12),
    'v_mag': ColumnExtent(67, 6),
    'b_v': ColumnExtent(76, 5),
    'parallax': ColumnExtent(108, 6),
    'parallax_error': ColumnExtent(114, 5),
    'hd': ColumnExtent(146, 6),
    'dm': ColumnExtent(153, 12),
    'name': ColumnExtent(188),
}, minimum_length=119)
"""
The column layout of the CNS3 catalog file.

=================== ================================================================================================
field               contents
=================== ================================================================================================
``gj``              the catalog number without its prefix (GJ, Gl, NN and Wo numbers are all treated as GJ numbers)
``components``      the component letters of the system
``ra``              B1950 right ascension, hours minutes seconds
``dec``             B1950 declination, degrees minutes seconds
``pm``              total proper motion, arcsec/year
``pa``              position angle of the proper motion, degrees
``rv``              radial velocity, km/s
``spectral_type``   spectral type
``v_mag``           Johnson V magnitude
``b_v``             B-V color index
``parallax``        resulting parallax, milli-arcsec
``parallax_error``  standard error of the parallax, milli-arcsec
``hd``              HD number
``dm``              Durchmusterung number
``name``            other designation (variable star names, capitalized Bayer letters, ...)
=================== ================================================================================================
"""

GJAC_LAYOUT: ColumnLayout = ColumnLayout('GJAC', {
    'gj': ColumnExtent(2, 20),
    'hip': ColumnExtent(22, 13),
    'ra': ColumnExtent(36, 11),
    'dec': ColumnExtent(48, 11),
    'pm_ra': ColumnExtent(61, 6),
    'pm_dec': ColumnExtent(69, 6),
    'j_mag': ColumnExtent(94, 6),
    'h_mag': ColumnExtent(101, 6),
}, minimum_length=124)
"""
The column layout of the GJAC catalog file.

=================== ================================================================================================
field               contents
=================== ================================================================================================
``gj``              the full designation including prefix and components, for instance ``GJ 3406 A/3407 B``
``hip``             the HIP number (or another identifier)
``ra``              J2000 right ascension, hours minutes seconds
``dec``             J2000 declination, degrees minutes seconds
``pm_ra``           proper motion in right ascension multiplied by cos(dec), arcsec/year
``pm_dec``          proper motion in declination, arcsec/year
``j_mag``           2MASS J magnitude (not imported)
``h_mag``           2MASS H magnitude (not imported)
=================== ================================================================================================
"""

_GJ_PREFIXES: Tuple[str, ...] = ('GJ', 'Gl', 'GL', 'NN', 'Wo', 'WO')

_GJAC_COMPONENTS: str = 'ABCD'


@dataclass
class GlieseImportOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`CNS3Importer` and :class:`GJACImporter`.

    You can set any of the options on an instance of this dataclass and pass it to the importers (or the
    :func:`import_gj_cns3`/:func:`import_gj_ac` functions) at initialization.
    """

    minimum_parallax: float = 1.0
    """
    The parallax in milli-arcsec at or below which the distance of a star is left unknown.
    """

    source_epoch: float = 1950.0
    """
    The Besselian epoch of the CNS3 positions and of the mean equator and equinox they are referred to.
    """

    propagate_proper_motion: bool = True
    """
    Move CNS3 positions along their proper motion from :attr:`source_epoch` to 2000.0 before precessing them.
    """

    suppressed_name_prefixes: Tuple[str, ...] = ('MU', 'NU')
    """
    Name column prefixes of the CNS3 which are capitalized Bayer letters rather than variable star designations.
    """

    merged_catalogs: Tuple[Catalog, ...] = (Catalog.HIP, Catalog.BAYER, Catalog.FLAMSTEED, Catalog.GCVS)
    """
    The identifier catalogs copied from an accurate secondary star into the matching primary star.
    """


def _read_coordinates(fields: Dict[str, str]) -> Optional[Tuple[float, float]]:
    """
    Reads the hms right ascension and dms declination fields into radians, or ``None`` if either can't be read.
    """

    ra = sexagesimal_to_degrees(fields['ra'])
    dec = sexagesimal_to_degrees(fields['dec'])

    if ra is None or dec is None:
        return None

    return float(deg_to_rad(ra * 15)), float(deg_to_rad(dec))


def _import_records(filename: PATH, layout: ColumnLayout, build_star: Callable[[Dict[str, str]], Optional[StarRecord]],
                    designation: Callable[[Dict[str, str]], Tuple[str, str]],
                    stars: MutableSequence[StarRecord]) -> int:
    """
    Reads every data line of a catalog file, builds a star from it, and appends one star per component to ``stars``.

    :return: the number of stars appended, 0 if the file could not be opened
    """

    try:
        catalog_file = open(filename, 'r', encoding='latin-1')
    except OSError as err:
        warnings.warn('Unable to open the {} catalog file {}: {}'.format(layout.name, filename, err))
        return 0

    number_stars = 0

    with catalog_file:
        for line in catalog_file:
            fields = layout.parse(line)

            if fields is None:
                continue

            star = build_star(fields)

            if star is None:
                continue

            root, components = designation(fields)

            number_stars += add_component_stars(star, root, components, stars)

    _LOGGER.info(f'Read {number_stars} stars from the {layout.name} catalog file {filename}')

    return number_stars


def split_gj_designation(text: str) -> Tuple[str, str]:
    """
    Splits a GJAC designation into its catalog number and component letters.

    The catalog prefix (GJ, Gl, NN or Wo) is dropped and everything from the first of the letters A-D on is taken as
    the components.  A few lines list two designations for the same star separated by a slash
    (``GJ 3406 A/3407 B``); only the first is used.

    >>> split_gj_designation('GJ 3406 A/3407 B')
    ('3406', 'A')
    >>> split_gj_designation('Gl 570 BC')
    ('570', 'BC')

    :param text: the designation text
    :return: the catalog number and the (possibly empty) component letters
    """

    text = text.split('/')[0].strip()

    for prefix in _GJ_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix):].strip()
            break

    for position, character in enumerate(text):
        if character in _GJAC_COMPONENTS:
            return text[:position].strip(), ''.join(text[position:].split())

    return text, ''


class CNS3Importer(UserOptionConfigured[GlieseImportOptions], GlieseImportOptions, AttributePrinting):
    """
    This class builds stars from the lines of the CNS3 catalog.

    Each record is converted to radians, light years and fractions of the speed of light, and its B1950 position and
    proper motion are brought to J2000 together (see :func:`.update_coordinates_and_motion`).  The GJ identifier is
    not added here; it is added for each component by :func:`.add_component_stars`.
    """

    def __init__(self, options: Optional[GlieseImportOptions] = None):
        """
        :param options: the options to configure the importer with.  If ``None`` the defaults are used.
        """

        super().__init__(GlieseImportOptions, options=options)

    @property
    def precession(self) -> DOUBLE_ARRAY:
        """
        The rotation from the mean equator and equinox of :attr:`source_epoch` to J2000.
        """

        return precession_to_j2000(besselian_epoch_to_jd(self.source_epoch))

    def _suppressed(self, name: str) -> bool:
        return any(name.startswith(prefix) for prefix in self.suppressed_name_prefixes)

    def build_star(self, fields: Dict[str, str], precession: Optional[DOUBLE_ARRAY] = None) -> Optional[StarRecord]:
        """
        Builds a star from the parsed fields of one CNS3 record.

        :param fields: the field text of the record as returned by ``CNS3_LAYOUT.parse``
        :param precession: the precomputed :attr:`precession` matrix.  If ``None`` it is computed.
        :return: the star, or ``None`` if the right ascension or declination can't be read
        """

        radec = _read_coordinates(fields)

        if radec is None:
            return None

        ra, dec = radec

        if precession is None:
            precession = self.precession

        # proper motion is only known if both the total motion and its direction are
        pm = parse_float(fields['pm'])
        pa = parse_float(fields['pa'])

        pm_ra, pm_dec = None, None
        if pm is not None and pa is not None:
            pm_ra, pm_dec = pm_pa_to_components(arcsec_to_rad(pm), deg_to_rad(pa), dec)
            pm_ra, pm_dec = float(pm_ra), float(pm_dec)

        coordinates = Spherical(ra, dec, None)
        motion = Spherical(pm_ra, pm_dec, None)

        if self.propagate_proper_motion:
            coordinates, motion = update_coordinates_and_motion(self.source_epoch, precession, coordinates, motion)
        else:
            coordinates, motion = apply_rotation(precession, coordinates, motion)

        parallax = parse_float(fields['parallax'])
        if parallax is not None and parallax > self.minimum_parallax:
            coordinates.rad = 1000 * LY_PER_PARSEC / parallax

        radial_velocity = parse_float(fields['rv'])
        if radial_velocity is not None:
            motion.rad = radial_velocity / LIGHT_KM_PER_SEC

        v_magnitude = parse_float(fields['v_mag'])
        color_index = parse_float(fields['b_v'])

        b_magnitude = None
        if v_magnitude is not None and color_index is not None:
            b_magnitude = v_magnitude + color_index

        star = StarRecord(v_magnitude=v_magnitude, b_magnitude=b_magnitude, spectral_type=fields['spectral_type'])
        star.set_fundamental_motion(coordinates, motion)

        star.add_identifier(Identifier.numbered(Catalog.HD, parse_int(fields['hd'])))

        if fields['dm']:
            star.add_identifier(Identifier.from_string(fields['dm']))

        name = fields['name']
        if name and not self._suppressed(name):
            identifier = Identifier.from_string(name)
            if identifier is not None and identifier.catalog == Catalog.GCVS:
                star.add_identifier(identifier)

        return star

    def read(self, filename: PATH, stars: MutableSequence[StarRecord]) -> int:
        """
        Reads a CNS3 file and appends one star per component to ``stars``.

        If the file can't be opened a warning is issued and 0 is returned.

        :param filename: the CNS3 catalog file
        :param stars: the collection to append the stars to
        :return: the number of stars appended
        """

        return _import_records(filename, CNS3_LAYOUT, partial(self.build_star, precession=self.precession),
                               lambda fields: (fields['gj'], fields['components']), stars)


class GJACImporter(UserOptionConfigured[GlieseImportOptions], GlieseImportOptions, AttributePrinting):
    """
    This class builds stars from the lines of the GJAC catalog.

    Stars are enriched from a Hipparcos star collection through its HIP index: the distance, radial velocity, V and B
    magnitudes, and the identifiers of :attr:`merged_catalogs` other than HIP are copied from the Hipparcos star with
    the same HIP number.
    """

    def __init__(self, hip_stars: Sequence[CatalogObject] = (), options: Optional[GlieseImportOptions] = None):
        """
        :param hip_stars: the Hipparcos stars to enrich GJAC stars from
        :param options: the options to configure the importer with.  If ``None`` the defaults are used.
        """

        super().__init__(GlieseImportOptions, options=options)

        self.hip_index: ObjectIndex = ObjectIndex(hip_stars, Catalog.HIP)
        """
        The HIP index of the Hipparcos stars.
        """

    def build_star(self, fields: Dict[str, str], hip_index: Optional[ObjectIndex] = None) -> Optional[StarRecord]:
        """
        Builds a star from the parsed fields of one GJAC record.

        :param fields: the field text of the record as returned by ``GJAC_LAYOUT.parse``
        :param hip_index: the HIP index to enrich the star from.  If ``None`` :attr:`hip_index` is used.
        :return: the star, or ``None`` if the right ascension or declination can't be read
        """

        radec = _read_coordinates(fields)

        if radec is None:
            return None

        ra, dec = radec

        if hip_index is None:
            hip_index = self.hip_index

        # the catalog gives the rate of right ascension multiplied by cos(dec)
        pm_ra = parse_float(fields['pm_ra'])
        if pm_ra is not None:
            pm_ra = float(arcsec_to_rad(pm_ra) / np.cos(dec))

        pm_dec = parse_float(fields['pm_dec'])
        if pm_dec is not None:
            pm_dec = float(arcsec_to_rad(pm_dec))

        star = StarRecord()
        star.set_fundamental_motion(Spherical(ra, dec, None), Spherical(pm_ra, pm_dec, None))

        hip_identifier = Identifier.from_string(fields['hip'])
        star.add_identifier(hip_identifier)

        hip_star = hip_index.lookup(hip_identifier)

        if hip_star is not None:
            star.coordinates.rad = hip_star.coordinates.rad
            star.motion.rad = hip_star.motion.rad
            star.v_magnitude = hip_star.v_magnitude
            star.b_magnitude = hip_star.b_magnitude

            for catalog in self.merged_catalogs:
                if catalog != Catalog.HIP:
                    star.add_identifier(hip_star.get_identifier(catalog))

        return star

    def read(self, filename: PATH, stars: MutableSequence[StarRecord]) -> int:
        """
        Reads a GJAC file and appends one star per component to ``stars``.

        If the file can't be opened a warning is issued and 0 is returned.

        :param filename: the GJAC catalog file
        :param stars: the collection to append the stars to
        :return: the number of stars appended
        """

        return _import_records(filename, GJAC_LAYOUT, self.build_star,
                               lambda fields: split_gj_designation(fields['gj']), stars)


def merge_accurate_stars(stars: Sequence[StarRecord], accurate_stars: Sequence[CatalogObject],
                         catalog: Catalog = Catalog.GJ,
                         merged_catalogs: Sequence[Catalog] = GlieseImportOptions.merged_catalogs) -> int:
    """
    Merges the values of an accurate secondary collection into the matching stars of a primary collection.

    Stars are matched through their identifier in ``catalog``.  For each matched star

    * the right ascension and declination are replaced by the accurate ones,
    * the proper motion is replaced by the accurate one when the accurate one is known,
    * the distance and radial velocity are replaced only when the accurate star has them,
    * the identifiers of ``merged_catalogs`` of the accurate star are added.

    A known value is never replaced by an unknown one.  Coordinates and motion are replaced together.  The accurate
    stars are not modified.

    :param stars: the primary stars (modified in place)
    :param accurate_stars: the accurate secondary stars
    :param catalog: the catalog of the identifiers used to match stars
    :param merged_catalogs: the identifier catalogs to copy from accurate stars
    :return: the number of primary stars that had an accurate counterpart
    """

    index = ObjectIndex(accurate_stars, catalog)

    number_merged = 0

    for star in stars:
        accurate = index.lookup(star.get_identifier(catalog))

        if accurate is None:
            continue

        coordinates = Spherical(star.coordinates.lon, star.coordinates.lat, star.coordinates.rad)
        motion = Spherical(star.motion.lon, star.motion.lat, star.motion.rad)

        if accurate.coordinates.lon is not None and accurate.coordinates.lat is not None:
            coordinates.lon, coordinates.lat = accurate.coordinates.lon, accurate.coordinates.lat

        if accurate.coordinates.rad is not None:
            coordinates.rad = accurate.coordinates.rad

        if accurate.motion.lon is not None and accurate.motion.lat is not None:
            motion.lon, motion.lat = accurate.motion.lon, accurate.motion.lat

        if accurate.motion.rad is not None:
            motion.rad = accurate.motion.rad

        star.set_identifiers(list(star.identifiers) +
                             [accurate.get_identifier(merged) for merged in merged_catalogs])
        star.set_fundamental_motion(coordinates, motion)

        number_merged += 1

    return number_merged


def attach_names(stars: Sequence[StarRecord], name_map: IdentifierNameMap) -> int:
    """
    Sets the names of every star that has at least one named identifier.

    :param stars: the stars to name (modified in place)
    :param name_map: the identifier to name dictionary
    :return: the number of stars that were named
    """

    number_named = 0

    for star in stars:
        names = identifiers_to_names(star.identifiers, name_map)

        if names:
            star.names = names
            number_named += 1

    return number_named


def import_gj_cns3(filename: PATH, name_map: IdentifierNameMap, gjac_stars: Sequence[CatalogObject],
                   stars: MutableSequence[StarRecord], options: Optional[GlieseImportOptions] = None) -> int:
    """
    Imports the CNS3 catalog, merging accurate coordinates from GJAC stars and attaching common names.

    The stars are appended to ``stars``.  Only the newly appended stars are merged and named.

    :param filename: the CNS3 catalog file
    :param name_map: the identifier to name dictionary
    :param gjac_stars: the stars imported from the GJAC with :func:`import_gj_ac`
    :param stars: the collection to append the stars to
    :param options: the options for the import.  If ``None`` the defaults are used.
    :return: the number of stars imported, 0 if the file could not be opened
    """

    importer = CNS3Importer(options=options)

    start = len(stars)

    number_stars = importer.read(filename, stars)

    imported: List[StarRecord] = list(stars[start:])

    merged = merge_accurate_stars(imported, gjac_stars, Catalog.GJ, importer.merged_catalogs)
    _LOGGER.info(f'Merged accurate coordinates into {merged} of {number_stars} CNS3 stars')

    named = attach_names(imported, name_map)
    _LOGGER.info(f'Attached names to {named} CNS3 stars')

    return number_stars


def import_gj_ac(filename: PATH, hip_stars: Sequence[CatalogObject], stars: MutableSequence[StarRecord],
                 options: Optional[GlieseImportOptions] = None) -> int:
    """
    Imports the GJAC catalog, enriching the stars from matching Hipparcos stars.

    The stars are appended to ``stars``.

    :param filename: the GJAC catalog file
    :param hip_stars: the Hipparcos stars (may be empty)
    :param stars: the collection to append the stars to
    :param options: the options for the import.  If ``None`` the defaults are used.
    :return: the number of stars imported, 0 if the file could not be opened
    """

    importer = GJACImporter(hip_stars, options=options)

    return importer.read(filename, stars)
