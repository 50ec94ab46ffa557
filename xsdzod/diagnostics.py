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
This module contains the collector of the non-fatal anomalies found
building and sorting schema models.
"""
import logging
from collections.abc import Iterator
from typing import NamedTuple, Optional

from .utils.logger import logger as _logger

MISSING_SCHEMA_ROOT = 'missing-schema-root'
AMBIGUOUS_SCHEMA_ROOT = 'ambiguous-schema-root'
MISSING_XSD_NAMESPACE = 'missing-xsd-namespace'
CIRCULAR_DEPENDENCY = 'circular-dependency'
INVALID_FACET_VALUE = 'invalid-facet-value'
INVALID_OCCURS = 'invalid-occurs'


class Diagnostic(NamedTuple):
    code: str
    message: str
    name: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class Diagnostics:
    """
    A collector of diagnostic records. Each record is also logged as a
    warning, on the package logger or on the logger provided.
    """
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else _logger
        self._records: list[Diagnostic] = []

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._records!r})'

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Diagnostic]:
        yield from self._records

    def __getitem__(self, index: int) -> Diagnostic:
        return self._records[index]

    def warning(self, code: str, message: str, name: Optional[str] = None) -> Diagnostic:
        diagnostic = Diagnostic(code, message, name)
        self._records.append(diagnostic)
        self.logger.warning(message)
        return diagnostic

    def filter(self, code: str) -> list[Diagnostic]:
        return [x for x in self._records if x.code == code]

    def clear(self) -> None:
        self._records.clear()
