"""
This package contains helpful mixin classes used by the configurable importers in starcross.
"""

from starcross.utilities.mixin_classes.attribute_printing import AttributePrinting
from starcross.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["AttributePrinting", "UserOptionConfigured"]
