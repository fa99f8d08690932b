r"""
This module converts between the two common parameterizations of stellar proper motion.

Older catalogs such as the Gliese CNS3 give the total proper motion :math:`\mu` and its position angle :math:`\theta`
(measured from north through east), while modern catalogs give the rates of right ascension and declination.  These are
related by

.. math::
    \mu_\alpha = \frac{\mu\,\text{sin}(\theta)}{\text{cos}(\delta)} \qquad \mu_\delta = \mu\,\text{cos}(\theta)

where :math:`\delta` is the declination of the star.  Note that :math:`\mu_\alpha` here is the rate of change of right
ascension itself, not :math:`\mu_\alpha\text{cos}(\delta)`.

Near the poles :math:`\text{cos}(\delta)\rightarrow 0` and :math:`\mu_\alpha` becomes very large (or non-finite exactly
at the pole).  No clamping is done; this is inherited from the source catalogs and callers must tolerate it.

All angles are in radians, and both functions are vectorized.
"""

import numpy as np

from starcross.utilities.angles import atan2pi

from starcross._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['pm_pa_to_components', 'components_to_pm_pa']


def pm_pa_to_components(pm: SCALAR_OR_ARRAY, pa: SCALAR_OR_ARRAY,
                        dec: SCALAR_OR_ARRAY) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Converts total proper motion and position angle to proper motion in right ascension and declination.

    :param pm: the total proper motion (any angular rate unit)
    :param pa: the position angle of the motion in radians
    :param dec: the declination of the star in radians
    :return: the rates of right ascension and declination in the unit of ``pm``
    """

    pm_ra = np.multiply(pm, np.sin(pa)) / np.cos(dec)
    pm_dec = np.multiply(pm, np.cos(pa))

    return pm_ra, pm_dec


def components_to_pm_pa(pm_ra: SCALAR_OR_ARRAY, pm_dec: SCALAR_OR_ARRAY,
                        dec: SCALAR_OR_ARRAY) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Converts proper motion in right ascension and declination to total proper motion and position angle.

    The rate of right ascension is first scaled by the cosine of the declination to get the true tangential rate, then
    the total motion is the length of the tangential rate vector and the position angle is its direction in the range
    0 to 2 pi.

    :param pm_ra: the rate of right ascension (not multiplied by cos(dec))
    :param pm_dec: the rate of declination, in the same unit as ``pm_ra``
    :param dec: the declination of the star in radians
    :return: the total proper motion and the position angle in radians
    """

    pm_ra = np.multiply(pm_ra, np.cos(dec))

    return np.hypot(pm_ra, pm_dec), atan2pi(pm_ra, pm_dec)
