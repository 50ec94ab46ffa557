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
This module contains the classes of the schema model. All the names
referring to other declarations are stored without namespace prefix.
An absent optional value is `None`, an empty list is a present but
empty declaration.
"""
import dataclasses as dc
from typing import Optional, Union

from .diagnostics import Diagnostics
from .names import UNBOUNDED

OccursType = Optional[Union[int, str]]


@dc.dataclass
class XsdRestriction:
    """The restriction of a simple type, with its base type and facets."""

    base: str = ''
    """The base type name, an empty string if it's missing."""

    enumerations: Optional[list[str]] = None
    """The enumeration values, in document order. `None` if there are no enumerations."""

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    length: Optional[int] = None
    pattern: Optional[str] = None
    min_inclusive: Optional[float] = None
    max_inclusive: Optional[float] = None
    min_exclusive: Optional[float] = None
    max_exclusive: Optional[float] = None
    total_digits: Optional[int] = None
    fraction_digits: Optional[int] = None
    white_space: Optional[str] = None


@dc.dataclass
class XsdSimpleType:
    name: Optional[str] = None
    restriction: XsdRestriction = dc.field(default_factory=XsdRestriction)


@dc.dataclass
class XsdAttribute:
    name: Optional[str] = None
    type: Optional[str] = None
    use: str = 'optional'
    default: Optional[str] = None
    fixed: Optional[str] = None
    simple_type: Optional[XsdSimpleType] = None

    @property
    def is_required(self) -> bool:
        return self.use == 'required' and self.default is None and self.fixed is None

    @property
    def is_prohibited(self) -> bool:
        return self.use == 'prohibited'


@dc.dataclass
class XsdElement:
    """
    An element declaration or an element reference. A missing `min_occurs`
    or `max_occurs` is equivalent to 1.
    """
    name: Optional[str] = None
    type: Optional[str] = None
    complex_type: Optional['XsdComplexType'] = None
    simple_type: Optional[XsdSimpleType] = None
    attributes: list[XsdAttribute] = dc.field(default_factory=list)
    min_occurs: Optional[int] = None
    max_occurs: OccursType = None
    is_ref: bool = False
    ref: Optional[str] = None
    nillable: bool = False

    @property
    def is_optional(self) -> bool:
        return self.min_occurs == 0

    @property
    def is_multiple(self) -> bool:
        if self.max_occurs == UNBOUNDED:
            return True
        return isinstance(self.max_occurs, int) and self.max_occurs > 1


@dc.dataclass
class XsdExtension:
    base: str = ''
    sequence: Optional[list[XsdElement]] = None
    attributes: list[XsdAttribute] = dc.field(default_factory=list)


@dc.dataclass
class XsdComplexType:
    """
    A complex type definition. The `content` list is the flattened view of the
    element particles, in the order: sequence, choice, all, extension sequence.
    """
    name: Optional[str] = None
    sequence: Optional[list[XsdElement]] = None
    choice: Optional[list[XsdElement]] = None
    all: Optional[list[XsdElement]] = None
    content: list[XsdElement] = dc.field(default_factory=list)
    attributes: list[XsdAttribute] = dc.field(default_factory=list)
    extension: Optional[XsdExtension] = None


@dc.dataclass
class XsdSchema:
    """The schema model built from an XSD document."""

    target_namespace: Optional[str] = None
    element_form_default: Optional[str] = None
    elements: list[XsdElement] = dc.field(default_factory=list)
    complex_types: list[XsdComplexType] = dc.field(default_factory=list)
    simple_types: list[XsdSimpleType] = dc.field(default_factory=list)
    diagnostics: Diagnostics = dc.field(default_factory=Diagnostics, compare=False, repr=False)

    def get_complex_type(self, name: Optional[str]) -> Optional[XsdComplexType]:
        if name:
            for complex_type in self.complex_types:
                if complex_type.name == name:
                    return complex_type
        return None

    def get_simple_type(self, name: Optional[str]) -> Optional[XsdSimpleType]:
        if name:
            for simple_type in self.simple_types:
                if simple_type.name == name:
                    return simple_type
        return None

    def get_element(self, name: Optional[str]) -> Optional[XsdElement]:
        """Returns a global element declaration, skipping collected references."""
        if name:
            for element in self.elements:
                if element.name == name and not element.is_ref:
                    return element
        return None
