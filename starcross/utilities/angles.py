r"""
This module provides stateless angle and unit conversions used throughout starcross.

The functions here are thin, vectorized wrappers around numpy so that they can be used on scalars while parsing a
single catalog record or on whole arrays of values at once.  The one exception is :func:`sexagesimal_to_degrees`, which
works on text.

Range reductions follow the usual conventions:

=================== ===================================================================================================
Function            Output range
=================== ===================================================================================================
:func:`mod_2pi`     :math:`[0, 2\pi)`
:func:`mod_pi`      :math:`(-\pi, \pi]`
:func:`mod_360`     :math:`[0, 360)`
:func:`mod_180`     :math:`(-180, 180]`
:func:`mod_24h`     :math:`[0, 24)`
:func:`atan2pi`     :math:`[0, 2\pi)`
=================== ===================================================================================================
"""

from typing import Optional

import numpy as np

from starcross._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['DEG2RAD', 'RAD2DEG', 'ARCSEC2RAD', 'RAD2ARCSEC', 'MAS2RAD', 'RAD2MAS', 'TWO_PI',
           'sexagesimal_to_degrees', 'deg_to_rad', 'rad_to_deg', 'arcsec_to_rad', 'rad_to_arcsec', 'mas_to_rad',
           'rad_to_mas', 'mod_2pi', 'mod_pi', 'mod_360', 'mod_180', 'mod_24h', 'atan2pi', 'atan2pi_deg',
           'sin_deg', 'cos_deg', 'tan_deg', 'asin_deg', 'acos_deg', 'atan_deg']


DEG2RAD: float = np.pi / 180  # rad/deg
"""
This constant converts from units of degrees to units of radians through multiplication.
"""

RAD2DEG: float = 180 / np.pi  # deg/rad
"""
This constant converts from units of radians to units of degrees through multiplication.
"""

ARCSEC2RAD: float = DEG2RAD / 3600  # rad/arcsec
"""
This constant converts from units of arc-seconds to units of radians through multiplication.
"""

RAD2ARCSEC: float = 1 / ARCSEC2RAD  # arcsec/rad
"""
This constant converts from units of radians to units of arc-seconds through multiplication.
"""

MAS2RAD: float = ARCSEC2RAD / 1000  # rad/mas
"""
This constant converts from units of milli-arc-seconds to units of radians through multiplication.
"""

RAD2MAS: float = 1 / MAS2RAD  # mas/rad
"""
This constant converts from units of radians to units of milli-arc-seconds through multiplication.
"""

TWO_PI: float = 2 * np.pi


def sexagesimal_to_degrees(text: str) -> Optional[float]:
    """
    This function converts a string representing an angle in degrees, minutes and seconds to decimal degrees.

    Any of the common layouts are accepted (``"DD MM SS.S"``, ``"DD MM.M"``, ``"DD.D"``).  Missing trailing parts are
    treated as zero.  The sign is taken from a leading ``-`` so that angles like ``"-00 30 00"`` keep their sign even
    though the degrees part is zero.  The same function is used for hours, minutes and seconds of right ascension; the
    caller multiplies by 15 to get degrees.

    If the text is blank, or its leading part is not a number, ``None`` is returned.  Parsing stops at the first part
    that is not a number, the same way ``sscanf`` would.

    :param text: the sexagesimal angle text
    :return: the angle in decimal units, or ``None`` if it could not be read
    """

    text = text.strip()

    parts = []
    for token in text.split()[:3]:
        try:
            parts.append(float(token))
        except ValueError:
            break

    if not parts:
        return None

    parts.extend([0.0] * (3 - len(parts)))

    degrees = abs(parts[0]) + parts[1] / 60 + parts[2] / 3600

    return -degrees if text.startswith('-') else degrees


def deg_to_rad(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in degrees to radians.
    """
    return np.multiply(deg, DEG2RAD)


def rad_to_deg(rad: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in radians to degrees.
    """
    return np.multiply(rad, RAD2DEG)


def arcsec_to_rad(arcsec: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in arc-seconds to radians.
    """
    return np.multiply(arcsec, ARCSEC2RAD)


def rad_to_arcsec(rad: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in radians to arc-seconds.
    """
    return np.multiply(rad, RAD2ARCSEC)


def mas_to_rad(mas: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in milli-arc-seconds to radians.
    """
    return np.multiply(mas, MAS2RAD)


def rad_to_mas(rad: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts an angle in radians to milli-arc-seconds.
    """
    return np.multiply(rad, RAD2MAS)


def mod_2pi(rad: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in radians to the range 0 to 2 pi.
    """
    rad = np.asanyarray(rad, dtype=np.float64)
    return rad - TWO_PI * np.floor(rad / TWO_PI)


def mod_pi(rad: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in radians to the range -pi to +pi.
    """
    rad = mod_2pi(rad)
    return np.where(rad > np.pi, rad - TWO_PI, rad)[()]


def mod_360(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in degrees to the range 0 to 360.
    """
    deg = np.asanyarray(deg, dtype=np.float64)
    return deg - 360 * np.floor(deg / 360)


def mod_180(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in degrees to the range -180 to +180.
    """
    deg = mod_360(deg)
    return np.where(deg > 180, deg - 360, deg)[()]


def mod_24h(hours: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in hours to the range 0 to 24.
    """
    hours = np.asanyarray(hours, dtype=np.float64)
    return hours - 24 * np.floor(hours / 24)


def atan2pi(y: SCALAR_OR_ARRAY, x: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    This function returns the arctangent of y / x in radians in the range 0 to 2 pi.

    This is the same as :func:`numpy.arctan2` except that negative results are shifted up by a full turn.  It is the
    convention used for position angles, which are measured from north through east.

    :param y: the numerator (the east component for a position angle)
    :param x: the denominator (the north component for a position angle)
    :return: the angle in radians between 0 and 2 pi
    """

    angle = np.arctan2(y, x)
    return np.where(angle < 0, angle + TWO_PI, angle)[()]


def atan2pi_deg(y: SCALAR_OR_ARRAY, x: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Returns the arctangent of y / x in degrees in the range 0 to 360.
    """
    return rad_to_deg(atan2pi(y, x))


def sin_deg(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.sin(deg_to_rad(deg))


def cos_deg(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.cos(deg_to_rad(deg))


def tan_deg(deg: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.tan(deg_to_rad(deg))


def asin_deg(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return rad_to_deg(np.arcsin(value))


def acos_deg(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return rad_to_deg(np.arccos(value))


def atan_deg(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return rad_to_deg(np.arctan(value))
