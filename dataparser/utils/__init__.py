"""
dataparser Utilities.

This module provides configuration for parsing.
"""

from .config import ParseConfig, ParseLimits, StructureLimits

__all__ = ['ParseConfig', 'ParseLimits', 'StructureLimits']
