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
This module contains the builder of schema models from XSD text.
"""
import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from .names import XSD_ELEMENT, XSD_COMPLEX_TYPE, XSD_SIMPLE_TYPE
from .components import XsdSchema
from .diagnostics import Diagnostics, MISSING_SCHEMA_ROOT, \
    AMBIGUOUS_SCHEMA_ROOT, MISSING_XSD_NAMESPACE
from .etree import parse_xml_tree
from .facets import get_annotation_simple_types
from .namespaces import extract_namespaces, XsdNodeAccessor
from .references import collect_referenced_elements
from .structures import ComponentParser
from .translation import gettext as _
from .utils.logger import logger, logged

SCHEMA_KEY_PATTERN = re.compile(r'^(?:[^:]+:)?schema$')


def locate_schema_root(tree: Mapping[str, Any],
                       diagnostics: Optional[Diagnostics] = None) -> Mapping[str, Any]:
    """
    Returns the schema node of a parsed XSD tree, matching its key
    with or without a prefix. If no schema key is found the whole
    tree is returned. With more schema keys the first one is used.
    """
    keys = [k for k in tree if isinstance(k, str) and SCHEMA_KEY_PATTERN.match(k)]
    if not keys:
        if diagnostics is not None:
            diagnostics.warning(MISSING_SCHEMA_ROOT,
                                _("no schema root found, using the whole document"))
        return tree
    elif len(keys) > 1 and diagnostics is not None:
        msg = _("multiple schema roots found {!r}, using {!r}")
        diagnostics.warning(AMBIGUOUS_SCHEMA_ROOT, msg.format(keys, keys[0]))

    root = tree[keys[0]]
    if isinstance(root, list):
        root = root[0] if root else {}
    return root if isinstance(root, Mapping) else {}


@logged
def parse_xsd(source: Union[str, bytes],
              diagnostics: Optional[Diagnostics] = None,
              loglevel: Optional[Union[str, int]] = None) -> XsdSchema:
    """
    Builds a schema model from XSD text. The returned schema is not
    sorted, use the functions of :mod:`xsdzod.ordering` for getting
    the types in dependency order.

    :param source: the XSD text, as a string or as bytes.
    :param diagnostics: an optional collector for diagnostics, for \
    default a new collector is created and linked to the schema.
    :param loglevel: for setting a different logging level for the \
    build of the schema.
    :raises XsdZodParseError: if the XSD text is not well-formed XML.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    root = locate_schema_root(parse_xml_tree(source), diagnostics)

    context = extract_namespaces(root)
    if context.xsd_prefix is None:
        diagnostics.warning(
            MISSING_XSD_NAMESPACE,
            _("no prefix bound to the XSD namespace, only unprefixed names are matched")
        )
    else:
        logger.debug("XSD namespace bound to prefixes %r", context.xsd_prefixes)

    accessor = XsdNodeAccessor(context.xsd_prefix, context.xsd_prefixes)
    parser = ComponentParser(accessor, diagnostics)

    elements = []
    for node in accessor.lookup_all(root, XSD_ELEMENT):
        element = parser.parse_element(node)
        if element is not None:
            elements.append(element)

    complex_types = []
    for node in accessor.lookup_all(root, XSD_COMPLEX_TYPE):
        complex_type = parser.parse_complex_type(node, node.get('name'))
        if complex_type is not None:
            complex_types.append(complex_type)

    simple_types = []
    simple_type_nodes = accessor.lookup_all(root, XSD_SIMPLE_TYPE)
    simple_type_nodes.extend(get_annotation_simple_types(root, accessor))
    for node in simple_type_nodes:
        simple_type = parser.parse_simple_type(node, node.get('name'))
        if simple_type is not None:
            simple_types.append(simple_type)

    inline_types = [x.complex_type for x in elements if x.complex_type is not None]
    elements.extend(collect_referenced_elements(complex_types + inline_types))

    logger.debug("schema model built with %d elements, %d complex types and %d simple types",
                 len(elements), len(complex_types), len(simple_types))

    return XsdSchema(
        target_namespace=root.get('targetNamespace'),
        element_form_default=root.get('elementFormDefault'),
        elements=elements,
        complex_types=complex_types,
        simple_types=simple_types,
        diagnostics=diagnostics,
    )
