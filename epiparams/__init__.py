"""Parameter preparation for age-structured SEIR epidemic models"""

from . import core

__all__ = ['core']
