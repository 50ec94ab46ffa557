#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the exception classes for the package.
"""
from typing import Optional


class XsdZodException(Exception):
    """Package's base exception class"""


class XsdZodAttributeError(XsdZodException, AttributeError):
    pass


class XsdZodTypeError(XsdZodException, TypeError):
    pass


class XsdZodValueError(XsdZodException, ValueError):
    pass


class XsdZodResourceError(XsdZodException, OSError):
    """Raised when an error is found accessing XSD source files."""


class XsdZodParseError(XsdZodException, ValueError):
    """
    Raised when the XML text of a schema cannot be tokenized.

    :param message: the error message.
    :param lineno: the line number of the error, if known.
    :param offset: the column offset of the error, if known.
    """
    def __init__(self, message: str,
                 lineno: Optional[int] = None,
                 offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.offset = offset

    def __str__(self) -> str:
        return self.message

    @property
    def position(self) -> Optional[tuple[int, int]]:
        if self.lineno is None or self.offset is None:
            return None
        return self.lineno, self.offset
