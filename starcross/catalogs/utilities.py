# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This submodule provides the physical and unit constants shared by the catalog importers.

The unit constants for angles live in :mod:`.utilities.angles`; the constants here convert the distance and velocity
units used in star records.
"""

from starcross.utilities.angles import DEG2RAD, RAD2DEG, ARCSEC2RAD, MAS2RAD, RAD2MAS


__all__ = ['DEG2RAD', 'RAD2DEG', 'ARCSEC2RAD', 'MAS2RAD', 'RAD2MAS', 'AU_PER_PARSEC', 'AU_PER_LIGHT_YEAR',
           'LY_PER_PARSEC', 'LIGHT_KM_PER_SEC']
"""
Things to import if someone wants to do from starcross.catalogs.utilities import *
"""

# CONSTANTS.

AU_PER_PARSEC: float = 206264.806247  # au
"""
The number of astronomical units in a parsec (the number of arc-seconds in a radian).
"""

AU_PER_LIGHT_YEAR: float = 63241.0770843  # au
"""
The number of astronomical units in a Julian light year.
"""

LY_PER_PARSEC: float = AU_PER_PARSEC / AU_PER_LIGHT_YEAR  # light years
r"""
This constant converts from units of parsecs to units of light years through multiplication.

A star with a parallax of :math:`\varpi` milli-arc-seconds is therefore :math:`1000 L/\varpi` light years away where
:math:`L` is this constant.
"""

LIGHT_KM_PER_SEC: float = 299792.458  # km/s
"""
The speed of light in km/s.

Radial velocities are stored as a fraction of the speed of light, so a velocity in km/s is divided by this constant.
"""
