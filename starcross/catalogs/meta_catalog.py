# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module defines the column definitions of the dataframe used to export imported stars, and the function that builds
that dataframe from a collection of :class:`.StarRecord`.

The column definitions are stored as 2 module attributes :attr:`STAR_COLUMNS` and :attr:`STAR_TYPES` which specify the
column names and the column types respectively.  The dataframe is meant for inspection and for writing the merged
catalog to disk (for instance with :meth:`pandas.DataFrame.to_csv`); the importers themselves work on star records.
"""

from typing import List, Type, Iterable, Optional

import numpy as np
import pandas as pd

from starcross.catalogs.objects import StarRecord, type_to_code
from starcross.catalogs.utilities import RAD2DEG


STAR_COLUMNS: List[str] = ['identifiers', 'names', 'ra', 'dec', 'distance', 'ra_proper_motion',
                           'dec_proper_motion', 'radial_velocity', 'v_mag', 'b_mag', 'spectral_type', 'type']
"""
This specifies the name of the DataFrame columns used to export star records.

===================== ======== =================================================================================
column                units    description
===================== ======== =================================================================================
`'identifiers'`       N/A      The identifiers of the star in canonical form, joined with ``"; "``
`'names'`             N/A      The common names of the star, joined with ``"; "``
`'ra'`                deg      The J2000 right ascension of the star
`'dec'`               deg      The J2000 declination of the star
`'distance'`          ly       The distance to the star
`'ra_proper_motion'`  deg/year The proper motion in right ascension (not multiplied by cos(dec))
`'dec_proper_motion'` deg/year The proper motion in declination
`'radial_velocity'`   km/s     The radial velocity of the star
`'v_mag'`             N/A      The Johnson V magnitude
`'b_mag'`             N/A      The Johnson B magnitude
`'spectral_type'`     N/A      The spectral type text from the catalog
`'type'`              N/A      The two letter object type code
===================== ======== =================================================================================

Unknown numeric values are ``NaN``.
"""

STAR_TYPES: List[Type] = [str, str] + [np.float64] * 8 + [str, str]
"""
This specifies the data type for each column of the star dataframe.
"""


def _scaled(value: Optional[float], scale: float = 1.0) -> float:
    return np.nan if value is None else value * scale


def records_to_frame(stars: Iterable[StarRecord]) -> pd.DataFrame:
    """
    Builds a dataframe with columns :attr:`STAR_COLUMNS` from star records, one row per star.

    :param stars: the stars to export
    :return: the dataframe of the stars
    """

    rows = []

    for star in stars:
        rows.append(['; '.join(map(str, star.identifiers)),
                     '; '.join(star.names),
                     _scaled(star.coordinates.lon, RAD2DEG),
                     _scaled(star.coordinates.lat, RAD2DEG),
                     _scaled(star.coordinates.rad),
                     _scaled(star.motion.lon, RAD2DEG),
                     _scaled(star.motion.lat, RAD2DEG),
                     _scaled(star.radial_velocity),
                     _scaled(star.v_magnitude),
                     _scaled(star.b_magnitude),
                     star.spectral_type,
                     type_to_code(star.object_type)])

    frame = pd.DataFrame(rows, columns=STAR_COLUMNS)

    return frame.astype(dict(zip(STAR_COLUMNS, STAR_TYPES)))
