r"""
This module provides the precession rotation used to bring old catalog positions onto the J2000 mean equator and
equinox.

The precession angles follow the IAU 1976 model (Lieske et al. 1977), evaluated with the fundamental epoch at J2000 so
that

.. math::
    \mathbf{P}(t) = \mathbf{R}_z(z)\mathbf{R}_y(-\theta)\mathbf{R}_z(\zeta)

rotates a J2000 direction vector onto the mean equator and equinox of date :math:`t` (using the right handed active
rotations of :mod:`.elementals`).  The transpose of :math:`\mathbf{P}(t)` takes a direction at date :math:`t` back to
J2000.  Because these matrices are constant for a given catalog epoch they are normally computed once and reused for
every record in a file.
"""

import numpy as np

from starcross.rotations.elementals import rot_y, rot_z
from starcross.utilities.angles import ARCSEC2RAD

from starcross._typing import DOUBLE_ARRAY


__all__ = ['J2000_JD', 'B1950_JD', 'DAYS_PER_JULIAN_CENTURY', 'DAYS_PER_TROPICAL_YEAR',
           'julian_epoch_to_jd', 'besselian_epoch_to_jd', 'precession_angles', 'precession_matrix',
           'precession_to_j2000']


J2000_JD: float = 2451545.0
"""
The Julian date of the J2000 standard epoch (2000 January 1.5 TT).
"""

B1950_JD: float = 2433282.4235
"""
The Julian date of the B1950 standard epoch.
"""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

DAYS_PER_TROPICAL_YEAR: float = 365.242198781


def julian_epoch_to_jd(epoch: float) -> float:
    """
    Converts a Julian epoch (e.g. 2000.0) to a Julian date.
    """

    return J2000_JD + (epoch - 2000.0) * DAYS_PER_JULIAN_CENTURY / 100


def besselian_epoch_to_jd(epoch: float) -> float:
    """
    Converts a Besselian epoch (e.g. 1950.0) to a Julian date.
    """

    return B1950_JD + (epoch - 1950.0) * DAYS_PER_TROPICAL_YEAR


def precession_angles(jd: float) -> tuple[float, float, float]:
    """
    This function computes the IAU 1976 precession angles zeta, z and theta from J2000 to the input Julian date.

    :param jd: the Julian date of the mean equator and equinox to precess to
    :return: the angles zeta, z, and theta in radians
    """

    t = (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY

    zeta = (2306.2181 + (0.30188 + 0.017998 * t) * t) * t * ARCSEC2RAD
    z = (2306.2181 + (1.09468 + 0.018203 * t) * t) * t * ARCSEC2RAD
    theta = (2004.3109 - (0.42665 + 0.041833 * t) * t) * t * ARCSEC2RAD

    return zeta, z, theta


def precession_matrix(jd: float) -> DOUBLE_ARRAY:
    """
    This function returns the rotation matrix which precesses a J2000 direction vector to the mean equator and equinox
    of the input Julian date.

    :param jd: the Julian date to precess to
    :return: the 3x3 rotation matrix
    """

    zeta, z, theta = precession_angles(jd)

    return rot_z(z) @ rot_y(-theta) @ rot_z(zeta)


def precession_to_j2000(jd: float) -> DOUBLE_ARRAY:
    """
    This function returns the rotation matrix which precesses a direction vector referred to the mean equator and
    equinox of the input Julian date to J2000.

    This is the transpose of :func:`precession_matrix`.  For the Gliese catalog this is called with :data:`B1950_JD`.

    :param jd: the Julian date the input directions are referred to
    :return: the 3x3 rotation matrix
    """

    return precession_matrix(jd).T
