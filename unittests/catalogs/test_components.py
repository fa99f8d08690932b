from unittest import TestCase

from starcross.catalogs.components import expand_components, add_component_stars
from starcross.catalogs.identifiers import Catalog, Identifier
from starcross.catalogs.objects import Spherical, StarRecord


class TestExpandComponents(TestCase):

    def setUp(self):
        self.star = StarRecord(coordinates=Spherical(1.0, 0.2, 15.0), v_magnitude=9.0)
        self.star.add_identifier(Identifier.from_string('HD 100'))
        self.star.add_identifier(Identifier.from_string('HIP 200'))

    def test_single(self):
        stars = expand_components(self.star, '570', '')

        self.assertEqual(len(stars), 1)
        self.assertEqual(stars[0].get_identifier(Catalog.GJ), Identifier.from_string('GJ 570'))

    def test_single_component(self):
        stars = expand_components(self.star, '570', 'A')

        self.assertEqual(len(stars), 1)
        self.assertEqual(str(stars[0].get_identifier(Catalog.GJ)), 'GJ 570A')

    def test_multiple(self):
        stars = expand_components(self.star, '570', 'ABC')

        self.assertEqual([str(star.get_identifier(Catalog.GJ)) for star in stars],
                         ['GJ 570A', 'GJ 570B', 'GJ 570C'])

        for star in stars:
            self.assertEqual(star.identifiers, sorted(star.identifiers))
            self.assertEqual(star.v_magnitude, 9.0)
            self.assertEqual(star.get_identifier(Catalog.HD), Identifier.from_string('HD 100'))

    def test_independent_copies(self):
        first, second = expand_components(self.star, '412.1', 'AB')

        first.coordinates.lon = 3.0

        self.assertEqual(second.coordinates.lon, 1.0)
        self.assertEqual(self.star.coordinates.lon, 1.0)
        self.assertIsNone(self.star.get_identifier(Catalog.GJ))

    def test_blank_root(self):
        stars = expand_components(self.star, '', 'AB')

        self.assertEqual(len(stars), 2)
        self.assertIsNone(stars[0].get_identifier(Catalog.GJ))

    def test_add_component_stars(self):
        stars = [StarRecord()]

        self.assertEqual(add_component_stars(self.star, '1245', 'ABC', stars), 3)
        self.assertEqual(len(stars), 4)
        self.assertEqual(str(stars[-1].get_identifier(Catalog.GJ)), 'GJ 1245C')
