#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterable, Iterator

from .components import XsdComplexType, XsdElement


def iter_particles(complex_type: XsdComplexType) -> Iterator[XsdElement]:
    """
    Iterates the element particles of a complex type, in the order:
    sequence, choice, all, extension sequence.
    """
    yield from complex_type.sequence or ()
    yield from complex_type.choice or ()
    yield from complex_type.all or ()
    if complex_type.extension is not None:
        yield from complex_type.extension.sequence or ()


def collect_referenced_elements(complex_types: Iterable[XsdComplexType]) -> list[XsdElement]:
    """
    Collects an element entry for each element reference found in
    complex types, recursing into inline complex types. An entry is
    added for each reference found, without removing duplicates.
    """
    referenced: list[XsdElement] = []

    def collect(complex_type: XsdComplexType) -> None:
        for element in iter_particles(complex_type):
            if element.is_ref and element.ref:
                referenced.append(XsdElement(
                    name=element.ref,
                    is_ref=True,
                    ref=element.ref,
                    min_occurs=element.min_occurs,
                    max_occurs=element.max_occurs,
                ))
            if element.complex_type is not None:
                collect(element.complex_type)

    for xsd_type in complex_types:
        collect(xsd_type)
    return referenced
