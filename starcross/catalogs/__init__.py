# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the star catalog importers and the cross matching machinery used to merge them.

Description
-----------

An importer in starcross reads a fixed column catalog file, converts each record to a :class:`.StarRecord` in
consistent units (radians, light years, fractions of the speed of light) and a consistent frame (the J2000 mean equator
and equinox), splits records describing several components into one star per component, and cross matches the stars
against other catalogs through their typed :class:`.Identifier` values.

The building blocks are

=================================== ====================================================================================
Module                              Description
=================================== ====================================================================================
:mod:`.fixed_width`                 the generic fixed column record parser and numeric field decoding
:mod:`.identifiers`                 the catalog tagged identifiers and their text grammar
:mod:`.objects`                     the object type table, the :class:`.Spherical` triple and :class:`.StarRecord`
:mod:`.object_index`                identifier to position indices used for cross matching
:mod:`.proper_motion`               total motion/position angle to ra/dec rate conversions
:mod:`.epochs`                      propagation of positions along proper motion and frame rotations
:mod:`.components`                  expansion of multiple star records into components
:mod:`.names`                       the identifier to common name dictionary
:mod:`.meta_catalog`                export of star records to a pandas dataframe
:mod:`.gliese`                      the CNS3 and GJAC importers and the merge driver
=================================== ====================================================================================

Use
---

For the Gliese catalogs use :func:`.import_gj_ac` followed by :func:`.import_gj_cns3`, or the
:mod:`~.scripts.import_gliese` script.  The resulting stars can be exported with :func:`.records_to_frame`.
"""

from starcross.catalogs.identifiers import Catalog, Identifier
from starcross.catalogs.objects import ObjectType, Spherical, StarRecord
from starcross.catalogs.object_index import ObjectIndex
from starcross.catalogs.gliese import GlieseImportOptions, import_gj_cns3, import_gj_ac
from starcross.catalogs.meta_catalog import records_to_frame

__all__ = ['Catalog', 'Identifier', 'ObjectType', 'Spherical', 'StarRecord', 'ObjectIndex', 'GlieseImportOptions',
           'import_gj_cns3', 'import_gj_ac', 'records_to_frame']
