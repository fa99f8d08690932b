"""
This module provides a mixin implementing ``__str__`` and ``__repr__`` for the configured importers.
"""

from typing import Any, Iterator, Tuple

import numpy as np


class AttributePrinting:
    """
    A mixin class that renders an instance as ``ClassName(attribute=value, ...)``.

    Public instance attributes are reported directly.  An attribute starting with an underscore is only reported when
    the class has a property of the same name without the underscore, in which case the property name and value are
    shown.  Numpy arrays (such as rotation matrices) are printed on a single line.
    """

    def _printed_attributes(self) -> Iterator[Tuple[str, Any]]:
        cls = type(self)

        for name, value in vars(self).items():
            if name.startswith('_'):
                public = name.lstrip('_')

                if not isinstance(getattr(cls, public, None), property):
                    continue

                name, value = public, getattr(self, public)

            yield name, value

    @staticmethod
    def _format_value(value: Any, use_repr: bool) -> str:
        if isinstance(value, np.ndarray):
            text = np.array2string(value, separator=', ')
        else:
            text = repr(value) if use_repr else str(value)

        return ' '.join(text.split('\n'))

    def _build_representation(self, use_repr: bool) -> str:
        """
        Builds the text of the instance.

        :param use_repr: use ``repr`` rather than ``str`` for the attribute values
        """

        attributes = ', '.join('{}={}'.format(name, self._format_value(value, use_repr))
                               for name, value in self._printed_attributes())

        return '{}({})'.format(type(self).__name__, attributes)

    def __str__(self) -> str:
        return self._build_representation(False)

    def __repr__(self) -> str:
        return self._build_representation(True)
