"""
This package provides utility routines shared by the catalog importers.

=================================== ====================================================================================
Module                              Description
=================================== ====================================================================================
:mod:`.angles`                      angle/unit conversions, range reductions and degree based trigonometry
:mod:`.spherical_coordinates`       ra/dec to unit vector conversions and the local tangent basis
:mod:`.options`                     the :class:`.UserOptions` configuration dataclass base
:mod:`.mixin_classes`               mixins for option configured classes
=================================== ====================================================================================
"""
