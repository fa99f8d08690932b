r"""
This module moves star coordinates and motion between epochs and reference frames.

Coordinates and motion are always transformed as a unit: :func:`apply_rotation` rotates both the direction of a star
and its tangential motion vector by the same matrix, and :func:`update_coordinates_and_motion` first propagates the
position along the proper motion from the catalog epoch to the target epoch and then applies the frame rotation.  The
radial terms (distance and radial velocity) are frame invariant and pass through untouched.

Motion is handled in the local tangent plane.  With :math:`\hat{\mathbf{p}}` and :math:`\hat{\mathbf{q}}` the unit
vectors of increasing right ascension and declination (:func:`.radec_basis`) the tangential velocity of a star is

.. math::
    \mathbf{v} = \mu_\alpha\text{cos}(\delta)\hat{\mathbf{p}} + \mu_\delta\hat{\mathbf{q}}

Rotating :math:`\mathbf{v}` with the direction vector and projecting it back onto the rotated tangent basis gives the
proper motion components in the new frame.  An unknown motion (either component ``None``) stays unknown; it never
becomes zero.
"""

from typing import Optional, Tuple

import numpy as np

from starcross.catalogs.objects import Spherical
from starcross.utilities.spherical_coordinates import radec_to_unit, unit_to_radec, radec_basis

from starcross._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ['apply_rotation', 'propagate_motion', 'update_coordinates_and_motion']


def _check_matrix(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    matrix = np.asarray(matrix, dtype=np.float64)

    if matrix.shape != (3, 3):
        raise ValueError('The rotation matrix must be 3x3, not {}'.format(matrix.shape))

    return matrix


def _tangential_velocity(coordinates: Spherical, motion: Spherical) -> Optional[DOUBLE_ARRAY]:
    """
    Returns the tangential velocity vector in radians/year, or ``None`` if the motion is unknown.
    """

    if not motion.angles_known:
        return None

    p_unit, q_unit = radec_basis(coordinates.lon, coordinates.lat)

    return p_unit * motion.lon * np.cos(coordinates.lat) + q_unit * motion.lat


def _motion_from_velocity(coordinates: Spherical, velocity: DOUBLE_ARRAY, radial: Optional[float]) -> Spherical:
    """
    Projects a velocity vector onto the tangent basis at the coordinates to get right ascension/declination rates.
    """

    p_unit, q_unit = radec_basis(coordinates.lon, coordinates.lat)

    pm_ra = float(p_unit @ velocity / np.cos(coordinates.lat))
    pm_dec = float(q_unit @ velocity)

    return Spherical(pm_ra, pm_dec, radial)


def apply_rotation(matrix: ARRAY_LIKE, coordinates: Spherical, motion: Spherical) -> Tuple[Spherical, Spherical]:
    """
    This function rotates the coordinates and motion of a star into a new frame.

    The direction of the star is rotated by ``matrix`` and the tangential motion vector is separately rotated by the
    same matrix.  The rotated motion is then projected onto the tangent basis at the rotated direction to recover the
    new right ascension and declination rates.  The distance and radial velocity are copied unchanged.

    The inputs are not modified.

    :param matrix: the 3x3 rotation matrix from the current frame to the new frame
    :param coordinates: the current coordinates (longitude and latitude must be known)
    :param motion: the current motion (longitude/latitude rates may be unknown)
    :return: the new coordinates and motion as a tuple
    :raises ValueError: if the matrix is not 3x3 or the coordinates are unknown
    """

    matrix = _check_matrix(matrix)

    if not coordinates.angles_known:
        raise ValueError('cannot rotate coordinates with an unknown direction')

    velocity = _tangential_velocity(coordinates, motion)

    # rotate the direction
    ra, dec = unit_to_radec(matrix @ radec_to_unit(coordinates.lon, coordinates.lat))
    new_coordinates = Spherical(float(ra), float(dec), coordinates.rad)

    if velocity is None:
        return new_coordinates, Spherical(None, None, motion.rad)

    # rotate the motion and project it onto the new tangent plane
    return new_coordinates, _motion_from_velocity(new_coordinates, matrix @ velocity, motion.rad)


def propagate_motion(coordinates: Spherical, motion: Spherical, years: float) -> Spherical:
    """
    This function moves a star along its proper motion for a number of years.

    The formulation assumes constant linear velocity as described in section 1.2.8 of "The Hipparcos and Tycho2
    Catalogs".  The bearing is converted to a unit vector, the tangential velocity times the elapsed time is added, and
    the result is normalized and converted back to a bearing.  The change in distance is not modeled (zeta0 = 0 in the
    Hipparcos notation) so the distance is copied unchanged.

    If the motion is unknown the coordinates are returned unchanged (as a copy).

    :param coordinates: the coordinates at the starting epoch
    :param motion: the proper motion in radians/year
    :param years: the elapsed time in years (negative to move backwards)
    :return: the coordinates at the new epoch
    """

    velocity = _tangential_velocity(coordinates, motion)

    if velocity is None or years == 0:
        return Spherical(coordinates.lon, coordinates.lat, coordinates.rad)

    r_unit = radec_to_unit(coordinates.lon, coordinates.lat) + velocity * years
    r_unit /= np.linalg.norm(r_unit)

    ra, dec = unit_to_radec(r_unit)

    return Spherical(float(ra), float(dec), coordinates.rad)


def update_coordinates_and_motion(epoch: float, matrix: Optional[ARRAY_LIKE], coordinates: Spherical,
                                  motion: Spherical, target_epoch: float = 2000.0) -> Tuple[Spherical, Spherical]:
    """
    This function brings catalog coordinates and motion to the target epoch and frame.

    The position is first moved along the proper motion from ``epoch`` to ``target_epoch`` (see
    :func:`propagate_motion`), then the coordinates and motion are rotated together by ``matrix`` (see
    :func:`apply_rotation`).  If ``matrix`` is ``None`` only the propagation is done.

    The matrix is normally precomputed once per catalog, for example with :func:`.precession_to_j2000`.

    :param epoch: the epoch of the input coordinates in years
    :param matrix: the rotation from the catalog frame to the target frame, or ``None``
    :param coordinates: the catalog coordinates
    :param motion: the catalog motion
    :param target_epoch: the epoch to move the coordinates to in years
    :return: the new coordinates and motion as a tuple
    """

    velocity = _tangential_velocity(coordinates, motion)

    coordinates = propagate_motion(coordinates, motion, target_epoch - epoch)

    # re-express the (constant) velocity at the propagated position
    if velocity is not None:
        motion = _motion_from_velocity(coordinates, velocity, motion.rad)

    if matrix is None:
        return coordinates, Spherical(motion.lon, motion.lat, motion.rad)

    return apply_rotation(matrix, coordinates, motion)
