from typing import Union, Protocol, runtime_checkable, Optional, Any
from pathlib import Path

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, DOUBLE_ARRAY]

PATH = Union[Path, str]


class SphericalTerms(Protocol):
    """
    A (longitude, latitude, radial) triple where each term may be unknown (``None``).
    """

    lon: Optional[float]
    lat: Optional[float]
    rad: Optional[float]


@runtime_checkable
class CatalogObject(Protocol):
    """
    The narrow view of a celestial object that the import and cross-match pipeline depends on.

    Anything exposing these attributes (stars, or objects from a richer object model) can be indexed by
    :class:`.ObjectIndex`, used as a Hipparcos source for the GJAC import, and used as an accurate secondary source
    during a merge.
    """

    identifiers: list
    names: list[str]
    coordinates: SphericalTerms
    motion: SphericalTerms
    v_magnitude: Optional[float]
    b_magnitude: Optional[float]

    def get_identifier(self, catalog: Any) -> Any: ...
