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
This module contains the naming conventions for the generated declarations.
"""
import re

from .exceptions import XsdZodValueError
from .translation import gettext as _

NAMING_CONVENTIONS = ('camel', 'pascal', 'original', 'kebab')

_LOWER_UPPER = re.compile(r'([a-z0-9])([A-Z])')
_UPPER_WORD = re.compile(r'([A-Z])([A-Z][a-z])')
_SEPARATORS = re.compile(r'[\W_]+')


def split_words(name: str) -> list[str]:
    """Splits a name at case boundaries and at non-alphanumeric characters."""
    name = _LOWER_UPPER.sub(r'\1 \2', name)
    name = _UPPER_WORD.sub(r'\1 \2', name)
    return [x for x in _SEPARATORS.split(name) if x]


def _join_capitalized(words: list[str]) -> str:
    # Words starting with a digit are separated with an underscore
    return ''.join(
        f'_{word}' if k and word[0].isdigit() else word
        for k, word in enumerate(words)
    )


def check_naming(naming: str) -> None:
    if naming not in NAMING_CONVENTIONS:
        raise XsdZodValueError(_("Invalid naming convention: {}").format(naming))


def apply_naming(name: str, naming: str = 'camel') -> str:
    """
    Applies a naming convention to a name.

    :param name: the name to transform.
    :param naming: the naming convention, can be 'camel', 'pascal', \
    'kebab' or 'original'.
    """
    check_naming(naming)
    if naming == 'original':
        return name

    words = split_words(name)
    if naming == 'kebab':
        return '-'.join(x.lower() for x in words)
    elif naming == 'pascal':
        return _join_capitalized([x.capitalize() for x in words])
    else:
        return _join_capitalized(
            [x.lower() if not k else x.capitalize() for k, x in enumerate(words)]
        )


def get_type_name(name: str, naming: str = 'camel') -> str:
    """Returns the name of a type declaration, PascalCase unless names are kept."""
    check_naming(naming)
    if naming == 'original':
        return name
    return apply_naming(name, 'pascal')


def get_schema_name(name: str, naming: str = 'camel') -> str:
    """Returns the name of a validator declaration."""
    return f'{get_type_name(name, naming)}Schema'
