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
This module contains the parser of element, attribute and complex type declarations.
"""
from collections.abc import Mapping
from typing import Any, Optional

from .names import UNBOUNDED, XSD_ELEMENT, XSD_ATTRIBUTE, XSD_COMPLEX_TYPE, \
    XSD_SIMPLE_TYPE, XSD_SEQUENCE, XSD_CHOICE, XSD_ALL, XSD_COMPLEX_CONTENT, \
    XSD_SIMPLE_CONTENT, XSD_EXTENSION
from .components import OccursType, XsdAttribute, XsdElement, \
    XsdComplexType, XsdExtension, XsdSimpleType
from .diagnostics import Diagnostics, INVALID_OCCURS
from .facets import parse_simple_type
from .namespaces import get_accessor, strip_namespace
from .translation import gettext as _


class ComponentParser:
    """
    Parser for the declarations of a parsed XSD tree. The parser never
    rejects its input: missing declarations are returned as `None` and
    unexpected values are reported to the diagnostics.

    :param xsd_prefix: the prefix bound to the XSD namespace, or an \
    instance of XsdNodeAccessor.
    :param diagnostics: an optional collector for diagnostics.
    """
    def __init__(self, xsd_prefix: Any = None,
                 diagnostics: Optional[Diagnostics] = None) -> None:
        self.accessor = get_accessor(xsd_prefix)
        self.diagnostics = diagnostics

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(xsd_prefix={self.accessor.xsd_prefix!r})'

    def _compositors(self, node: Any, local_name: str) -> Optional[list[Mapping[str, Any]]]:
        """
        Returns the compositor nodes of a declaration, with empty compositors
        replaced by empty mappings. Returns `None` if there are no compositors.
        """
        value = self.accessor.lookup(node, local_name)
        if value is None:
            return None
        elif not isinstance(value, list):
            value = [value]
        return [x if isinstance(x, Mapping) else {} for x in value]

    def parse_occurs(self, value: Any, name: Optional[str] = None) -> OccursType:
        if value is None:
            return None
        elif isinstance(value, str) and value.strip() == UNBOUNDED:
            return UNBOUNDED

        try:
            if isinstance(value, bool):
                raise ValueError(value)
            return int(value)
        except (TypeError, ValueError):
            if self.diagnostics is not None:
                msg = _("invalid occurrence value {!r} for element {!r}")
                self.diagnostics.warning(INVALID_OCCURS, msg.format(value, name), name)
            return None

    def parse_simple_type(self, node: Any, name: Optional[str] = None) -> Optional[XsdSimpleType]:
        return parse_simple_type(node, self.accessor, name, self.diagnostics)

    def parse_attributes(self, node: Any) -> list[XsdAttribute]:
        """Parses the attribute declarations that are direct children of a node."""
        attributes = []
        for attribute in self.accessor.lookup_all(node, XSD_ATTRIBUTE):
            name = attribute.get('name')
            if name is None and attribute.get('ref'):
                name = strip_namespace(attribute['ref'])

            attributes.append(XsdAttribute(
                name=name,
                type=strip_namespace(attribute['type']) if attribute.get('type') else None,
                use=attribute.get('use') or 'optional',
                default=attribute.get('default'),
                fixed=attribute.get('fixed'),
                simple_type=self.parse_simple_type(
                    self.accessor.lookup(attribute, XSD_SIMPLE_TYPE)
                ),
            ))
        return attributes

    def parse_element(self, node: Any) -> Optional[XsdElement]:
        """
        Parses an element declaration or an element reference. Inline type
        definitions are parsed using the element's name as type name.

        :param node: an element node of a parsed XSD tree.
        :return: the element or `None` if the node is empty or not a mapping.
        """
        if not node or not isinstance(node, Mapping):
            return None

        name = node.get('name')
        ref = node.get('ref')

        complex_type = self.parse_complex_type(
            self.accessor.lookup(node, XSD_COMPLEX_TYPE), name
        )
        attributes = self.parse_attributes(node)
        if complex_type is not None:
            attributes.extend(complex_type.attributes)

        return XsdElement(
            name=name,
            type=strip_namespace(node['type']) if node.get('type') else None,
            complex_type=complex_type,
            simple_type=self.parse_simple_type(
                self.accessor.lookup(node, XSD_SIMPLE_TYPE), name
            ),
            attributes=attributes,
            min_occurs=self.parse_occurs(node.get('minOccurs'), name or ref),
            max_occurs=self.parse_occurs(node.get('maxOccurs'), name or ref),
            is_ref=bool(ref),
            ref=strip_namespace(ref) if ref else None,
            nillable=node.get('nillable') in ('true', '1', True),
        )

    def parse_nested_elements(self, container: Any,
                              choices: list[XsdElement]) -> list[XsdElement]:
        """
        Parses the particles of a compositor. Elements declared directly in the
        compositor come first, followed by the flattened elements of nested
        sequences. The alternatives of a nested choice are appended to *choices*
        and only the last alternative is kept in the returned list.

        :param container: a sequence, choice or all node.
        :param choices: the list that collects the alternatives of nested choices.
        """
        elements = []
        for node in self.accessor.lookup_all(container, XSD_ELEMENT):
            element = self.parse_element(node)
            if element is not None:
                elements.append(element)

        for node in self._compositors(container, XSD_SEQUENCE) or ():
            elements.extend(self.parse_nested_elements(node, choices))

        for node in self._compositors(container, XSD_CHOICE) or ():
            alternatives = self.parse_nested_elements(node, choices)
            if alternatives:
                choices.extend(alternatives)
                elements.append(alternatives[-1])

        return elements

    def _parse_compositor(self, node: Any, local_name: str,
                          choices: list[XsdElement]) -> Optional[list[XsdElement]]:
        compositors = self._compositors(node, local_name)
        if compositors is None:
            return None

        elements = []
        for compositor in compositors:
            elements.extend(self.parse_nested_elements(compositor, choices))
        return elements

    def parse_extension(self, node: Any, choices: list[XsdElement]) -> Optional[XsdExtension]:
        """Parses the extension of a complexContent or a simpleContent declaration."""
        for content_name in (XSD_COMPLEX_CONTENT, XSD_SIMPLE_CONTENT):
            content = self.accessor.lookup(node, content_name)
            if isinstance(content, list):
                content = content[0] if content else None

            extension = self.accessor.lookup(content, XSD_EXTENSION)
            if extension is None:
                continue
            elif not isinstance(extension, Mapping):
                extension = {}

            return XsdExtension(
                base=strip_namespace(extension.get('base')),
                sequence=self._parse_compositor(extension, XSD_SEQUENCE, choices),
                attributes=self.parse_attributes(extension),
            )
        return None

    def parse_complex_type(self, node: Any, name: Optional[str] = None) -> Optional[XsdComplexType]:
        """
        Parses a complexType node of a parsed XSD tree.

        :param node: the complexType node. An empty declaration is parsed \
        as a complex type without content.
        :param name: the name to assign to the complex type. For default \
        the name attribute of the node is used.
        :return: the complex type or `None` if the node is missing.
        """
        if node is None:
            return None
        elif isinstance(node, list):
            node = node[0] if node else {}
        if not isinstance(node, Mapping):
            node = {}

        if name is None:
            name = node.get('name')

        choices: list[XsdElement] = []
        complex_type = XsdComplexType(name=name, attributes=self.parse_attributes(node))

        complex_type.sequence = self._parse_compositor(node, XSD_SEQUENCE, choices)
        if complex_type.sequence is not None:
            complex_type.content.extend(complex_type.sequence)

        direct_choices: list[XsdElement] = []
        complex_type.choice = self._parse_compositor(node, XSD_CHOICE, direct_choices)
        if complex_type.choice is not None:
            complex_type.content.extend(complex_type.choice)
            complex_type.choice.extend(direct_choices)

        complex_type.all = self._parse_compositor(node, XSD_ALL, choices)
        if complex_type.all is not None:
            complex_type.content.extend(complex_type.all)

        extension = self.parse_extension(node, choices)
        if extension is not None:
            complex_type.extension = extension
            if extension.sequence:
                complex_type.content.extend(extension.sequence)
            complex_type.attributes.extend(extension.attributes)

        if choices:
            if complex_type.choice is None:
                complex_type.choice = choices
            else:
                complex_type.choice.extend(choices)

        return complex_type


###
# Functional interface

def parse_element(node: Any, xsd_prefix: Any = None,
                  diagnostics: Optional[Diagnostics] = None) -> Optional[XsdElement]:
    return ComponentParser(xsd_prefix, diagnostics).parse_element(node)


def parse_complex_type(node: Any, xsd_prefix: Any = None, name: Optional[str] = None,
                       diagnostics: Optional[Diagnostics] = None) -> Optional[XsdComplexType]:
    return ComponentParser(xsd_prefix, diagnostics).parse_complex_type(node, name)


def parse_attributes(node: Any, xsd_prefix: Any = None) -> list[XsdAttribute]:
    return ComponentParser(xsd_prefix).parse_attributes(node)
