from dataclasses import dataclass, fields

from typing import Dict

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for parameters set inside the associated
    class for the options.

    Example:
        GlieseImportOptions contains the default options for the Gliese importers.

    Custom objects built from this abstract class must follow the naming scheme <callable_name>Options and be loaded
    into the options keyword argument for callable_name.__init__().

    To apply options to your class, the UserOptions.apply_options() method should be invoked.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     minimum_parallax : float = 1.0

        >>> class Example:
        >>>     def __init__(self, options = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self) #apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.minimum_parallax)
        ...     1.0
    """

    def override_options(self):
        '''
        This method is used for special cases when certain options should be overwritten
        '''
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the object class

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> Dict:
        """
        Determine the options input to the dataclass.

        This property method will ignore all internal properties and functions.  Fields inherited from a parent options
        class are included.
        """

        self.override_options()

        return {f.name: getattr(self, f.name) for f in fields(self) if not f.name.startswith("_")}
