"""Core types: Optional and its Present / Absent variants."""

from pyoptional.types.optional import Absent, AbsentType, Optional, Present

__all__ = ['Absent', 'AbsentType', 'Optional', 'Present']
