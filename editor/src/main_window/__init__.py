"""Main window mixins for GearboxEditor"""

from .config_mixin import ConfigMixin

__all__ = ['ConfigMixin']
