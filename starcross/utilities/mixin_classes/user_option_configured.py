"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be
configured using :class:`.UserOptions`-derived classes while maintaining the ability to reset
to the original configuration state.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from starcross.utilities.options import UserOptions
        from starcross.utilities.mixin_classes.user_option_configured import UserOptionConfigured
        from dataclasses import dataclass

        @dataclass
        class ReaderOptions(UserOptions):
            minimum_parallax: float = 1.0

        class Reader(UserOptionConfigured[ReaderOptions], ReaderOptions):
            def __init__(self, options: ReaderOptions = None):
                super().__init__(ReaderOptions, options=options)

        reader = Reader()
        reader.minimum_parallax = 5.0  # Make a change
        reader.reset_settings()  # Reset to original
        print(reader.minimum_parallax)  # Output: 1.0

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order
    due to Method Resolution Order (MRO) requirements.
"""

from copy import deepcopy

from typing import Generic, TypeVar

from starcross.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class applying a :class:`.UserOptions` dataclass as instance attributes, with reset capability.

    The options are copied onto the instance when it is created, and a private deep copy of them is kept.
    :meth:`reset_settings` re-applies a fresh copy of that snapshot, so neither changes to the instance attributes nor
    changes to the options object the caller passed in can leak into it.

    If no options are given the defaults of ``options_type`` are used.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The :class:`.UserOptions` subclass configuring this class
        :param options: A configured instance of ``options_type``, or ``None`` for the defaults
        """

        super().__init__(*args, **kwargs)

        self._original_options: OptionsT = deepcopy(options_type() if options is None else options)
        """
        The snapshot of the configuration this instance was created with
        """

        self.reset_settings()

    def reset_settings(self) -> None:
        """
        Returns every option attribute to the value it had when the instance was created.
        """

        deepcopy(self._original_options).apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The configuration this instance was created with.  Treat this as read only.
        """

        return self._original_options
