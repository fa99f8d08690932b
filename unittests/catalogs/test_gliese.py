import os
import tempfile
from types import SimpleNamespace
from unittest import TestCase

import numpy as np

from starcross.catalogs.gliese import (CNS3_LAYOUT, GJAC_LAYOUT, GlieseImportOptions, CNS3Importer, GJACImporter,
                                       split_gj_designation, merge_accurate_stars, attach_names, import_gj_cns3,
                                       import_gj_ac)
from starcross.catalogs.epochs import update_coordinates_and_motion, apply_rotation
from starcross.catalogs.identifiers import Catalog, Identifier
from starcross.catalogs.objects import Spherical, StarRecord
from starcross.catalogs.proper_motion import pm_pa_to_components
from starcross.catalogs.utilities import LY_PER_PARSEC, LIGHT_KM_PER_SEC
from starcross.utilities.angles import arcsec_to_rad, sexagesimal_to_degrees


def make_line(layout, length, **fields):
    """
    Builds a fixed column line with each field's text placed at the field's offset.
    """

    characters = [' '] * length

    for name, text in fields.items():
        extent = layout.extents[name]

        if extent.width is not None and len(text) > extent.width:
            raise ValueError('{} is too wide for field {}'.format(text, name))

        end = extent.offset + len(text)
        if end > len(characters):
            characters.extend([' '] * (end - len(characters)))

        characters[extent.offset:end] = text

    return ''.join(characters)


CNS3_FIELDS = {'gj': '570', 'components': 'AB', 'ra': '01 23 45', 'dec': '+12 34.9', 'pm': '1.000', 'pa': '90.0',
               'rv': '-25.0', 'spectral_type': 'K4 V', 'v_mag': '5.72', 'b_v': '1.10', 'parallax': '150.0',
               'parallax_error': '3.0', 'hd': '131977', 'dm': 'BD-20 4123'}

GJAC_FIELDS = {'gj': 'GJ 570 AB', 'hip': 'HIP 73184', 'ra': '14 57 28.00', 'dec': '-21 24 55.7', 'pm_ra': '1.0340',
               'pm_dec': '-1.720', 'j_mag': '3.663', 'h_mag': '3.048'}


def cns3_line(length=170, **changes):
    return make_line(CNS3_LAYOUT, length, **{**CNS3_FIELDS, **changes})


def gjac_line(length=124, **changes):
    return make_line(GJAC_LAYOUT, length, **{**GJAC_FIELDS, **changes})


def hip_star():
    star = StarRecord(coordinates=Spherical(3.9, -0.37, 19.1), motion=Spherical(1e-8, -1e-8, 2e-5),
                      v_magnitude=5.72, b_magnitude=6.82)
    star.set_identifiers([Identifier.from_string('HIP 73184'), Identifier.from_string('HD 131977'),
                          Identifier.from_string('33 Lib'), Identifier.from_string('KX Lib')])
    return star


class PlainObject:
    """
    A catalog object from some other object model, with plain attribute containers for coordinates and motion.
    """

    def __init__(self, identifiers, coordinates, motion, v_magnitude=None, b_magnitude=None):
        self.identifiers = [Identifier.from_string(text) for text in identifiers]
        self.names = []
        self.coordinates = SimpleNamespace(lon=coordinates[0], lat=coordinates[1], rad=coordinates[2])
        self.motion = SimpleNamespace(lon=motion[0], lat=motion[1], rad=motion[2])
        self.v_magnitude = v_magnitude
        self.b_magnitude = b_magnitude

    def get_identifier(self, catalog):
        for identifier in self.identifiers:
            if identifier.catalog == catalog:
                return identifier

        return None


class TempFileTestCase(TestCase):

    def setUp(self):
        self._directory = tempfile.TemporaryDirectory()
        self.directory = self._directory.name

    def tearDown(self):
        self._directory.cleanup()

    def write(self, name, lines):
        path = os.path.join(self.directory, name)

        with open(path, 'w') as out_file:
            for line in lines:
                out_file.write(line + '\n')

        return path


class TestLayouts(TestCase):

    def test_minimum_lengths(self):
        self.assertEqual(CNS3_LAYOUT.minimum_length, 119)
        self.assertEqual(GJAC_LAYOUT.minimum_length, 124)

    def test_parse_cns3(self):
        fields = CNS3_LAYOUT.parse(cns3_line())

        for name, text in CNS3_FIELDS.items():
            self.assertEqual(fields[name], text)

        self.assertEqual(fields['name'], '')

    def test_parse_gjac(self):
        fields = GJAC_LAYOUT.parse(gjac_line())

        for name, text in GJAC_FIELDS.items():
            self.assertEqual(fields[name], text)


class TestSplitGJDesignation(TestCase):

    def test_split(self):
        self.assertEqual(split_gj_designation('GJ 570 AB'), ('570', 'AB'))
        self.assertEqual(split_gj_designation('Gl 15A'), ('15', 'A'))
        self.assertEqual(split_gj_designation('GJ 412.1'), ('412.1', ''))
        self.assertEqual(split_gj_designation('NN 3010'), ('3010', ''))
        self.assertEqual(split_gj_designation('Wo 9520 C'), ('9520', 'C'))

    def test_slash_pair(self):
        self.assertEqual(split_gj_designation('GJ 3406 A/3407 B'), ('3406', 'A'))


class TestCNS3Importer(TestCase):

    def setUp(self):
        self.importer = CNS3Importer()

    def build(self, **changes):
        return self.importer.build_star(CNS3_LAYOUT.parse(cns3_line(**changes)))

    def test_coordinates_and_motion(self):
        star = self.build()

        ra = np.deg2rad(sexagesimal_to_degrees(CNS3_FIELDS['ra']) * 15)
        dec = np.deg2rad(sexagesimal_to_degrees(CNS3_FIELDS['dec']))
        pm_ra, pm_dec = pm_pa_to_components(arcsec_to_rad(1.0), np.pi / 2, dec)

        coordinates, motion = update_coordinates_and_motion(1950.0, self.importer.precession, Spherical(ra, dec),
                                                            Spherical(float(pm_ra), float(pm_dec)))

        self.assertAlmostEqual(star.coordinates.lon, coordinates.lon)
        self.assertAlmostEqual(star.coordinates.lat, coordinates.lat)
        self.assertAlmostEqual(star.motion.lon, motion.lon, places=14)
        self.assertAlmostEqual(star.motion.lat, motion.lat, places=14)

        # precession over half a century moves a star by well under a degree
        self.assertLess(abs(star.coordinates.lon - ra), np.deg2rad(1))
        self.assertLess(abs(star.coordinates.lat - dec), np.deg2rad(1))

    def test_without_proper_motion_propagation(self):
        importer = CNS3Importer(GlieseImportOptions(propagate_proper_motion=False))
        star = importer.build_star(CNS3_LAYOUT.parse(cns3_line()))

        ra = np.deg2rad(sexagesimal_to_degrees(CNS3_FIELDS['ra']) * 15)
        dec = np.deg2rad(sexagesimal_to_degrees(CNS3_FIELDS['dec']))
        pm_ra, pm_dec = pm_pa_to_components(arcsec_to_rad(1.0), np.pi / 2, dec)

        coordinates, _ = apply_rotation(importer.precession, Spherical(ra, dec), Spherical(float(pm_ra),
                                                                                            float(pm_dec)))

        self.assertAlmostEqual(star.coordinates.lon, coordinates.lon)
        self.assertAlmostEqual(star.coordinates.lat, coordinates.lat)

    def test_physical_values(self):
        star = self.build()

        self.assertAlmostEqual(star.distance, 1000 * LY_PER_PARSEC / 150)
        self.assertAlmostEqual(star.motion.rad, -25.0 / LIGHT_KM_PER_SEC)
        self.assertAlmostEqual(star.radial_velocity, -25.0)
        self.assertAlmostEqual(star.v_magnitude, 5.72)
        self.assertAlmostEqual(star.b_magnitude, 6.82)
        self.assertEqual(star.spectral_type, 'K4 V')

    def test_identifiers(self):
        star = self.build()

        self.assertEqual([str(ident) for ident in star.identifiers], ['HD 131977', 'BD-20 4123'])
        self.assertIsNone(star.get_identifier(Catalog.GJ))

    def test_missing_proper_motion(self):
        for changes in [{'pm': ''}, {'pa': ''}, {'pm': '', 'pa': ''}]:
            with self.subTest(**changes):
                star = self.build(**changes)

                self.assertIsNone(star.motion.lon)
                self.assertIsNone(star.motion.lat)
                self.assertIsNotNone(star.coordinates.lon)

    def test_missing_radial_velocity(self):
        star = self.build(rv='')

        self.assertIsNone(star.motion.rad)
        self.assertIsNone(star.radial_velocity)

    def test_small_parallax(self):
        self.assertIsNone(self.build(parallax='0.8').distance)
        self.assertIsNone(self.build(parallax='1.0').distance)
        self.assertIsNone(self.build(parallax='').distance)

    def test_minimum_parallax_option(self):
        importer = CNS3Importer(GlieseImportOptions(minimum_parallax=200.0))

        self.assertIsNone(importer.build_star(CNS3_LAYOUT.parse(cns3_line())).distance)

    def test_b_magnitude_needs_both(self):
        self.assertIsNone(self.build(b_v='').b_magnitude)

        star = self.build(v_mag='')
        self.assertIsNone(star.v_magnitude)
        self.assertIsNone(star.b_magnitude)

    def test_variable_star_name(self):
        star = self.importer.build_star(CNS3_LAYOUT.parse(cns3_line(length=200) + 'V645 Cen'))

        self.assertEqual(star.get_identifier(Catalog.GCVS), Identifier.from_string('V645 Cen'))

    def test_capitalized_bayer_suppressed(self):
        for name in ['MU Cas', 'NU Oct']:
            with self.subTest(name=name):
                star = self.importer.build_star(CNS3_LAYOUT.parse(cns3_line(length=190) + name))

                self.assertIsNone(star.get_identifier(Catalog.GCVS))

    def test_only_variable_star_names_added(self):
        star = self.importer.build_star(CNS3_LAYOUT.parse(cns3_line(length=190) + 'alf Cen'))

        self.assertIsNone(star.get_identifier(Catalog.BAYER))

    def test_blank_coordinates(self):
        self.assertIsNone(self.build(ra=''))
        self.assertIsNone(self.build(dec=''))

    def test_short_record_fields(self):
        # long enough to be a data line but without the cross identification columns
        star = self.importer.build_star(CNS3_LAYOUT.parse(cns3_line(length=119)[:119]))

        self.assertEqual(star.identifiers, [])

    def test_reset(self):
        self.importer.source_epoch = 1900.0
        changed = self.importer.precession

        self.importer.reset_settings()

        self.assertEqual(self.importer.source_epoch, 1950.0)
        self.assertFalse(np.allclose(changed, self.importer.precession))


class TestGJACImporter(TestCase):

    def test_without_hipparcos(self):
        importer = GJACImporter()
        star = importer.build_star(GJAC_LAYOUT.parse(gjac_line()))

        dec = np.deg2rad(sexagesimal_to_degrees(GJAC_FIELDS['dec']))

        self.assertAlmostEqual(star.coordinates.lon, np.deg2rad(sexagesimal_to_degrees(GJAC_FIELDS['ra']) * 15))
        self.assertAlmostEqual(star.coordinates.lat, dec)
        self.assertAlmostEqual(star.motion.lon, arcsec_to_rad(1.034) / np.cos(dec), places=14)
        self.assertAlmostEqual(star.motion.lat, arcsec_to_rad(-1.72), places=14)
        self.assertIsNone(star.distance)
        self.assertIsNone(star.motion.rad)
        self.assertIsNone(star.v_magnitude)
        self.assertEqual(star.identifiers, [Identifier.from_string('HIP 73184')])

    def test_hipparcos_enrichment(self):
        importer = GJACImporter([hip_star()])
        star = importer.build_star(GJAC_LAYOUT.parse(gjac_line()))

        self.assertAlmostEqual(star.distance, 19.1)
        self.assertAlmostEqual(star.motion.rad, 2e-5)
        self.assertAlmostEqual(star.v_magnitude, 5.72)
        self.assertAlmostEqual(star.b_magnitude, 6.82)
        self.assertEqual([str(ident) for ident in star.identifiers], ['33 Lib', 'KX Lib', 'HIP 73184'])

    def test_plain_hipparcos_object(self):
        hip = PlainObject(['HIP 73184', '33 Lib'], (3.9, -0.37, 19.1), (1e-8, -1e-8, 2e-5), 5.72, 6.82)

        star = GJACImporter([hip]).build_star(GJAC_LAYOUT.parse(gjac_line()))

        self.assertAlmostEqual(star.distance, 19.1)
        self.assertAlmostEqual(star.b_magnitude, 6.82)
        self.assertEqual([str(ident) for ident in star.identifiers], ['33 Lib', 'HIP 73184'])

    def test_explicit_index(self):
        importer = GJACImporter([hip_star()])

        star = importer.build_star(GJAC_LAYOUT.parse(gjac_line()), GJACImporter().hip_index)

        self.assertIsNone(star.distance)

    def test_missing_proper_motion_component(self):
        star = GJACImporter().build_star(GJAC_LAYOUT.parse(gjac_line(pm_ra='')))

        self.assertIsNone(star.motion.lon)
        self.assertIsNotNone(star.motion.lat)


class TestMerge(TestCase):

    def setUp(self):
        self.star = StarRecord(coordinates=Spherical(1.0, 0.2, 10.0), motion=Spherical(1e-7, 1e-7, 5e-5),
                               v_magnitude=9.0)
        self.star.set_identifiers([Identifier.from_string('GJ 570A'), Identifier.from_string('HD 1')])

        self.accurate = StarRecord(coordinates=Spherical(1.01, 0.21, None), motion=Spherical(2e-7, 3e-7, None))
        self.accurate.set_identifiers([Identifier.from_string('GJ 570A'), Identifier.from_string('HIP 73184'),
                                       Identifier.from_string('33 Lib'), Identifier.from_string('HD 999')])

    def test_merge(self):
        before = self.star.count_known()

        self.assertEqual(merge_accurate_stars([self.star], [self.accurate]), 1)

        self.assertEqual(self.star.coordinates, Spherical(1.01, 0.21, 10.0))
        self.assertEqual(self.star.motion, Spherical(2e-7, 3e-7, 5e-5))
        self.assertEqual([str(ident) for ident in self.star.identifiers], ['33 Lib', 'GJ 570A', 'HD 1', 'HIP 73184'])
        self.assertGreaterEqual(self.star.count_known(), before)

    def test_accurate_values_preferred(self):
        self.accurate.coordinates.rad = 11.0
        self.accurate.motion.rad = 6e-5

        merge_accurate_stars([self.star], [self.accurate])

        self.assertEqual(self.star.coordinates.rad, 11.0)
        self.assertEqual(self.star.motion.rad, 6e-5)

    def test_unknown_accurate_motion_kept(self):
        self.accurate.motion = Spherical()

        merge_accurate_stars([self.star], [self.accurate])

        self.assertEqual(self.star.motion, Spherical(1e-7, 1e-7, 5e-5))

    def test_accurate_not_modified(self):
        expected = self.accurate.copy()

        merge_accurate_stars([self.star], [self.accurate])

        self.assertEqual(self.accurate, expected)

    def test_unmatched(self):
        other = StarRecord(coordinates=Spherical(2.0, 0.1))
        other.add_identifier(Identifier.from_string('GJ 1'))
        expected = other.copy()

        self.assertEqual(merge_accurate_stars([other, StarRecord()], [self.accurate]), 0)
        self.assertEqual(other, expected)

    def test_plain_accurate_object(self):
        accurate = PlainObject(['GJ 570A', 'HIP 73184'], (1.01, 0.21, None), (None, 3e-7, None))

        self.assertEqual(merge_accurate_stars([self.star], [accurate]), 1)

        self.assertEqual(self.star.coordinates, Spherical(1.01, 0.21, 10.0))
        self.assertEqual(self.star.motion, Spherical(1e-7, 1e-7, 5e-5))
        self.assertIsNotNone(self.star.get_identifier(Catalog.HIP))

    def test_merged_catalogs(self):
        merge_accurate_stars([self.star], [self.accurate], merged_catalogs=(Catalog.HIP,))

        self.assertIsNone(self.star.get_identifier(Catalog.FLAMSTEED))
        self.assertIsNotNone(self.star.get_identifier(Catalog.HIP))


class TestAttachNames(TestCase):

    def test_attach(self):
        named = StarRecord()
        named.set_identifiers([Identifier.from_string('HIP 73184'), Identifier.from_string('GJ 570A')])
        unnamed = StarRecord()

        count = attach_names([named, unnamed], {Identifier.from_string('HIP 73184'): ['Example']})

        self.assertEqual(count, 1)
        self.assertEqual(named.names, ['Example'])
        self.assertEqual(unnamed.names, [])


class TestImportGJAC(TempFileTestCase):

    def test_import(self):
        path = self.write('gjac.txt', ['header line',
                                       gjac_line(),
                                       gjac_line(gj='GJ 3406 A/3407 B', hip=''),
                                       gjac_line(gj='Wo 9520', ra=''),
                                       ''])

        stars = []

        self.assertEqual(import_gj_ac(path, [hip_star()], stars), 3)
        self.assertEqual([str(star.get_identifier(Catalog.GJ)) for star in stars],
                         ['GJ 570A', 'GJ 570B', 'GJ 3406A'])
        self.assertAlmostEqual(stars[0].distance, 19.1)
        self.assertIsNone(stars[2].distance)

    def test_missing_file(self):
        stars = []

        with self.assertWarns(UserWarning):
            self.assertEqual(import_gj_ac(os.path.join(self.directory, 'missing.txt'), [], stars), 0)

        self.assertEqual(stars, [])


class TestImportCNS3(TempFileTestCase):

    def setUp(self):
        super().setUp()

        self.gjac_stars = []
        import_gj_ac(self.write('gjac.txt', [gjac_line()]), [hip_star()], self.gjac_stars)

    def test_import(self):
        path = self.write('cns3.dat', ['short line',
                                       cns3_line(),
                                       cns3_line(gj='412.1', components='', pm='', pa='', rv=''),
                                       cns3_line(ra=''),
                                       cns3_line()[:100]])

        stars = []
        name_map = {Identifier.from_string('HIP 73184'): ['Example'], Identifier.from_string('GJ 412.1'): 'Other'}

        self.assertEqual(import_gj_cns3(path, name_map, self.gjac_stars, stars), 3)

        first, second, third = stars

        self.assertEqual([str(ident) for ident in first.identifiers],
                         ['33 Lib', 'KX Lib', 'GJ 570A', 'HD 131977', 'BD-20 4123', 'HIP 73184'])
        self.assertEqual(first.coordinates.lon, self.gjac_stars[0].coordinates.lon)
        self.assertEqual(first.coordinates.lat, self.gjac_stars[0].coordinates.lat)
        self.assertEqual(first.motion.lon, self.gjac_stars[0].motion.lon)
        self.assertAlmostEqual(first.distance, 19.1)
        self.assertAlmostEqual(first.motion.rad, 2e-5)
        self.assertEqual(first.names, ['Example'])
        self.assertEqual(second.get_identifier(Catalog.GJ), Identifier.from_string('GJ 570B'))
        self.assertEqual(second.names, ['Example'])

        self.assertEqual(str(third.get_identifier(Catalog.GJ)), 'GJ 412.1')
        self.assertIsNone(third.get_identifier(Catalog.HIP))
        self.assertIsNone(third.motion.lon)
        self.assertIsNone(third.motion.rad)
        self.assertEqual(third.names, ['Other'])

        for star in stars:
            self.assertEqual(star.identifiers, sorted(set(star.identifiers)))

    def test_components_without_accurate_counterpart(self):
        stars = []

        self.assertEqual(import_gj_cns3(self.write('cns3.dat', [cns3_line()]), {}, [], stars), 2)

        first, second = stars

        self.assertAlmostEqual(first.distance, 1000 * LY_PER_PARSEC / 150)
        self.assertEqual(first.distance, second.distance)
        self.assertEqual(str(first.get_identifier(Catalog.GJ)), 'GJ 570A')
        self.assertEqual(str(second.get_identifier(Catalog.GJ)), 'GJ 570B')
        self.assertEqual(first.coordinates, second.coordinates)
        self.assertIsNone(first.get_identifier(Catalog.HIP))

    def test_logs_counts(self):
        path = self.write('cns3.dat', [cns3_line()])

        with self.assertLogs('starcross.catalogs.gliese', level='INFO') as logs:
            import_gj_cns3(path, {}, self.gjac_stars, [])

        output = '\n'.join(logs.output)

        self.assertIn('Read 2 stars from the CNS3 catalog file', output)
        self.assertIn('Merged accurate coordinates into 2 of 2 CNS3 stars', output)
        self.assertIn('Attached names to 0 CNS3 stars', output)

    def test_merge_never_loses_values(self):
        path = self.write('cns3.dat', [cns3_line()])

        unmerged = []
        CNS3Importer().read(path, unmerged)

        stars = []
        import_gj_cns3(path, {}, self.gjac_stars, stars)

        for before, after in zip(unmerged, stars):
            self.assertGreaterEqual(after.count_known(), before.count_known())
            self.assertGreaterEqual(len(after.identifiers), len(before.identifiers))

    def test_existing_stars_untouched(self):
        existing = StarRecord()
        existing.add_identifier(Identifier.from_string('GJ 570A'))

        stars = [existing]
        import_gj_cns3(self.write('cns3.dat', [cns3_line()]), {}, self.gjac_stars, stars)

        self.assertEqual(len(stars), 3)
        self.assertEqual(existing.identifiers, [Identifier.from_string('GJ 570A')])

    def test_missing_file(self):
        stars = []

        with self.assertWarns(UserWarning):
            self.assertEqual(import_gj_cns3(os.path.join(self.directory, 'missing.dat'), {}, self.gjac_stars,
                                            stars), 0)

        self.assertEqual(stars, [])
