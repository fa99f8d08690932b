r"""
This module provides the elemental (single axis) rotation matrices the precession matrices are built from.

Both functions follow the right handed convention: a positive angle rotates a vector counter clockwise when looking
down the rotation axis towards the origin.  A scalar angle gives a single 3x3 matrix, while an array of n angles gives
an nx3x3 stack of matrices.
"""

import numpy as np

from starcross._typing import SCALAR_OR_ARRAY, DOUBLE_ARRAY


__all__ = ["rot_y", "rot_z"]


def _elemental(theta: SCALAR_OR_ARRAY, axis: int) -> DOUBLE_ARRAY:
    """
    Builds the stack of right handed rotation matrices about ``axis`` (0, 1, 2 for x, y, z).
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    cosine = np.cos(theta)
    sine = np.sin(theta)

    # the two axes spanning the plane of rotation, in right handed order
    first, second = (axis + 1) % 3, (axis + 2) % 3

    matrices = np.zeros((theta.size, 3, 3), dtype=np.float64)
    matrices[:, axis, axis] = 1
    matrices[:, first, first] = cosine
    matrices[:, second, second] = cosine
    matrices[:, first, second] = -sine
    matrices[:, second, first] = sine

    return matrices.squeeze()


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the right handed rotation about the y axis by angle theta.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle(s) in radians
    :return: The rotation matrix (or stack of matrices for array input)
    """

    return _elemental(theta, 1)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the right handed rotation about the z axis by angle theta.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle(s) in radians
    :return: The rotation matrix (or stack of matrices for array input)
    """

    return _elemental(theta, 2)
