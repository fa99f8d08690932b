r"""
This module converts between right ascension/declination bearings and direction vectors, and provides the local tangent
basis used to express proper motion as a velocity vector.

All functions are vectorized.  Several bearings are given as arrays and the corresponding vectors are the columns of a
3xn array; a single bearing gives a length 3 vector.
"""

from typing import Sequence

import numpy as np

from starcross._typing import DOUBLE_ARRAY, SCALAR_OR_ARRAY


def _flat_bearings(ra: SCALAR_OR_ARRAY, dec: SCALAR_OR_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    ra, dec = np.broadcast_arrays(np.asarray(ra, dtype=np.float64), np.asarray(dec, dtype=np.float64))

    return ra.ravel(), dec.ravel()


def radec_to_unit(ra: SCALAR_OR_ARRAY, dec: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts right ascension and declination in radians into unit direction vector(s).

    .. math::
        \hat{\mathbf{r}}=\left[\begin{array}{c}\text{cos}(\delta)\text{cos}(\alpha)\\
        \text{cos}(\delta)\text{sin}(\alpha)\\
        \text{sin}(\delta)\end{array}\right]

    :param ra: The right ascension(s) in radians
    :param dec: The declination(s) in radians
    :return: The unit vector, or a 3xn array of unit vectors
    """

    ra, dec = _flat_bearings(ra, dec)

    return np.vstack([np.cos(dec) * np.cos(ra), np.cos(dec) * np.sin(ra), np.sin(dec)]).squeeze()


def unit_to_radec(unit: Sequence[float] | DOUBLE_ARRAY) -> tuple[float, float] | \
                                                           tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    This function converts unit direction vector(s) into right ascension and declination.

    The right ascension is returned in the range 0 to 2 pi and the declination in the range -pi/2 to pi/2.  The vectors
    must be along the first axis (columns of a 3xn array) and of unit length.

    :param unit: The unit vector(s)
    :return: The right ascension(s) and declination(s) in radians
    :raises ValueError: if the first axis is not of length 3
    """

    unit = np.asarray(unit, dtype=np.float64)

    if unit.shape[0] != 3:
        raise ValueError('The length of the first axis must be 3, not {}'.format(unit.shape[0]))

    # round off can push |z| just past 1
    dec = np.arcsin(np.clip(unit[2], -1, 1))
    ra = np.arctan2(unit[1], unit[0])

    ra = np.where(ra < 0, ra + 2 * np.pi, ra)[()]

    return ra, dec


def radec_basis(ra: SCALAR_OR_ARRAY, dec: SCALAR_OR_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    r"""
    This function returns the local tangent plane basis at right ascension/declination bearing(s).

    The first vector, :math:`\hat{\mathbf{p}}`, points in the direction of increasing right ascension and the second,
    :math:`\hat{\mathbf{q}}`, in the direction of increasing declination (see section 1.2.8 of "The Hipparcos and Tycho
    Catalogs"):

    .. math::
        \hat{\mathbf{p}}=\left[\begin{array}{c}-\text{sin}(\alpha)\\ \text{cos}(\alpha)\\ 0\end{array}\right]\qquad
        \hat{\mathbf{q}}=\left[\begin{array}{c}-\text{sin}(\delta)\text{cos}(\alpha)\\
        -\text{sin}(\delta)\text{sin}(\alpha)\\ \text{cos}(\delta)\end{array}\right]

    A proper motion with components :math:`\mu_{\alpha*}=\mu_\alpha\text{cos}(\delta)` and :math:`\mu_\delta` is the
    tangential velocity :math:`\mu_{\alpha*}\hat{\mathbf{p}}+\mu_\delta\hat{\mathbf{q}}`.

    :param ra: The right ascension(s) in radians
    :param dec: The declination(s) in radians
    :return: The p and q unit vectors, each as 3xn arrays (or length 3 arrays for scalar input)
    """

    ra, dec = _flat_bearings(ra, dec)

    p_unit = np.vstack([-np.sin(ra), np.cos(ra), np.zeros(ra.shape)]).squeeze()
    q_unit = np.vstack([-np.sin(dec) * np.cos(ra), -np.sin(dec) * np.sin(ra), np.cos(dec)]).squeeze()

    return p_unit, q_unit
