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
This module contains the parsing of simple types and of their restriction facets.
"""
import math
from collections.abc import Callable, Mapping
from typing import Any, Optional

from .names import XSD_ANNOTATION, XSD_DOCUMENTATION, XSD_SIMPLE_TYPE, XSD_RESTRICTION, \
    XSD_ENUMERATION, XSD_LENGTH, XSD_MIN_LENGTH, XSD_MAX_LENGTH, XSD_PATTERN, \
    XSD_WHITE_SPACE, XSD_MIN_INCLUSIVE, XSD_MAX_INCLUSIVE, XSD_MIN_EXCLUSIVE, \
    XSD_MAX_EXCLUSIVE, XSD_TOTAL_DIGITS, XSD_FRACTION_DIGITS
from .components import XsdRestriction, XsdSimpleType
from .diagnostics import Diagnostics, INVALID_FACET_VALUE
from .namespaces import XsdNodeAccessor, get_accessor, strip_namespace
from .translation import gettext as _


def integer_value(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    return int(value.strip() if isinstance(value, str) else value)


def float_value(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(value)
    result = float(value.strip() if isinstance(value, str) else value)
    if math.isnan(result):
        raise ValueError(value)
    return result


###
# Facets parsed from restrictions, mapped to the restriction's field
# and to the function for converting the value.
FACETS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    XSD_MIN_LENGTH: ('min_length', integer_value),
    XSD_MAX_LENGTH: ('max_length', integer_value),
    XSD_LENGTH: ('length', integer_value),
    XSD_TOTAL_DIGITS: ('total_digits', integer_value),
    XSD_FRACTION_DIGITS: ('fraction_digits', integer_value),
    XSD_MIN_INCLUSIVE: ('min_inclusive', float_value),
    XSD_MAX_INCLUSIVE: ('max_inclusive', float_value),
    XSD_MIN_EXCLUSIVE: ('min_exclusive', float_value),
    XSD_MAX_EXCLUSIVE: ('max_exclusive', float_value),
    XSD_WHITE_SPACE: ('white_space', str),
}


def get_facet_value(facet: Any) -> Any:
    """Returns the value attribute of a facet node, or `None`."""
    if isinstance(facet, list):
        facet = facet[0] if facet else None
    if isinstance(facet, Mapping):
        return facet.get('value')
    return None


def parse_restriction(node: Any,
                      xsd_prefix: Any = None,
                      diagnostics: Optional[Diagnostics] = None,
                      name: Optional[str] = None) -> XsdRestriction:
    """
    Parses a restriction node. Facet values that cannot be converted
    are ignored and reported with a diagnostic.

    :param node: the restriction node of a parsed XSD tree.
    :param xsd_prefix: the XSD prefix or an instance of XsdNodeAccessor.
    :param diagnostics: an optional collector for diagnostics.
    :param name: the name of the simple type, for diagnostic messages.
    """
    accessor: XsdNodeAccessor = get_accessor(xsd_prefix)
    if not isinstance(node, Mapping):
        return XsdRestriction()

    restriction = XsdRestriction(base=strip_namespace(node.get('base')))

    for facet_name, (field_name, to_python) in FACETS.items():
        value = get_facet_value(accessor.lookup(node, facet_name))
        if value is None:
            continue

        try:
            setattr(restriction, field_name, to_python(value))
        except (TypeError, ValueError):
            if diagnostics is not None:
                msg = _("invalid value {!r} for facet {!r} of simple type {!r}")
                diagnostics.warning(INVALID_FACET_VALUE,
                                    msg.format(value, facet_name, name), name)

    patterns = [x['value'] for x in accessor.lookup_all(node, XSD_PATTERN)
                if isinstance(x.get('value'), str)]
    if len(patterns) == 1:
        restriction.pattern = patterns[0]
    elif patterns:
        # Multiple patterns in the same derivation step are ORed
        restriction.pattern = '|'.join(f'(?:{x})' for x in patterns)

    enumerations = [str(x['value']) for x in accessor.lookup_all(node, XSD_ENUMERATION)
                    if x.get('value') is not None]
    if enumerations:
        restriction.enumerations = enumerations

    return restriction


def parse_simple_type(node: Any,
                      xsd_prefix: Any = None,
                      name: Optional[str] = None,
                      diagnostics: Optional[Diagnostics] = None) -> Optional[XsdSimpleType]:
    """
    Parses a simpleType node of a parsed XSD tree.

    :param node: the simpleType node. An empty declaration is parsed \
    as a simple type with an empty restriction.
    :param xsd_prefix: the XSD prefix or an instance of XsdNodeAccessor.
    :param name: the name to assign to the simple type. For default \
    the name attribute of the node is used.
    :param diagnostics: an optional collector for diagnostics.
    :return: the simple type or `None` if the node is missing.
    """
    if node is None:
        return None
    elif isinstance(node, list):
        node = node[0] if node else {}
    if not isinstance(node, Mapping):
        node = {}

    accessor = get_accessor(xsd_prefix)
    if name is None:
        name = node.get('name')

    restriction = parse_restriction(
        accessor.lookup(node, XSD_RESTRICTION), accessor, diagnostics, name
    )
    return XsdSimpleType(name=name, restriction=restriction)


def get_annotation_simple_types(node: Any, xsd_prefix: Any = None) -> list[Any]:
    """
    Returns the simpleType nodes nested in the documentation
    of the annotations of a node.
    """
    accessor = get_accessor(xsd_prefix)
    return [
        simple_type
        for annotation in accessor.lookup_all(node, XSD_ANNOTATION)
        for documentation in accessor.lookup_all(annotation, XSD_DOCUMENTATION)
        for simple_type in accessor.lookup_all(documentation, XSD_SIMPLE_TYPE)
    ]
