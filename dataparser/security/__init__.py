"""
dataparser Security and Validation System.

This module provides structural limits and exception types.
"""

from .exceptions import DataParserError, ParsingError, SecurityError
from .limits import LimitValidator

__all__ = ['DataParserError', 'ParsingError', 'SecurityError', 'LimitValidator']
