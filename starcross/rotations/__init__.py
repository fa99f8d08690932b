r"""
This package defines the rotations used to move catalog positions and proper motions between reference frames.

Rotation matrices in starcross follow the convention that :math:`\mathbf{T}_B^A\mathbf{y}_A` rotates the 3 element
direction vector :math:`\mathbf{y}_A` from frame :math:`A` to :math:`B`.  The :mod:`.elementals` module provides the
right handed elemental rotations and :mod:`.precession` builds the precession matrices from them.  Applying a matrix to
a star (coordinates and motion together) is done by :func:`.catalogs.epochs.apply_rotation`.
"""

import starcross.rotations.elementals
import starcross.rotations.precession

from starcross.rotations.elementals import rot_y, rot_z
from starcross.rotations.precession import (J2000_JD, B1950_JD, julian_epoch_to_jd, besselian_epoch_to_jd,
                                            precession_angles, precession_matrix, precession_to_j2000)

__all__ = ['rot_y', 'rot_z', 'J2000_JD', 'B1950_JD', 'julian_epoch_to_jd', 'besselian_epoch_to_jd',
           'precession_angles', 'precession_matrix', 'precession_to_j2000']
