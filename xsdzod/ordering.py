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
This module contains the sorting of type definitions in dependency order,
so that a type is declared after the types it refers to.
"""
import dataclasses as dc
from collections.abc import Callable, Iterable, Iterator
from typing import Optional, TypeVar, Union

from .components import XsdComplexType, XsdElement, XsdSchema, XsdSimpleType
from .diagnostics import Diagnostics, CIRCULAR_DEPENDENCY
from .translation import gettext as _

T = TypeVar('T', XsdSimpleType, XsdComplexType)


def iter_element_dependencies(element: XsdElement, schema: XsdSchema,
                              refs: frozenset[str] = frozenset()) -> Iterator[str]:
    """
    Iterates the names of the complex types used by an element. References
    are resolved to global elements and inline types are explored.
    """
    if element.is_ref:
        if element.ref and element.ref not in refs:
            target = schema.get_element(element.ref)
            if target is not None:
                yield from iter_element_dependencies(target, schema, refs | {element.ref})
    elif element.complex_type is not None:
        yield from iter_complex_type_dependencies(element.complex_type, schema, refs)
    elif element.simple_type is None and schema.get_complex_type(element.type) is not None:
        yield element.type  # type: ignore[misc]


def iter_complex_type_dependencies(complex_type: XsdComplexType, schema: XsdSchema,
                                   refs: frozenset[str] = frozenset()) -> Iterator[str]:
    """Iterates the names of the complex types a complex type depends on."""
    if complex_type.extension is not None:
        base = complex_type.extension.base
        if schema.get_complex_type(base) is not None:
            yield base

    for element in complex_type.content:
        yield from iter_element_dependencies(element, schema, refs)


def iter_simple_type_dependencies(simple_type: XsdSimpleType,
                                  schema: XsdSchema) -> Iterator[str]:
    base = simple_type.restriction.base
    if schema.get_simple_type(base) is not None:
        yield base


def sort_types(xsd_types: Iterable[T],
               get_dependencies: Callable[[T], Iterable[str]],
               diagnostics: Optional[Diagnostics] = None) -> list[T]:
    """
    Sorts types with a depth-first topological sort. Anonymous types are kept
    in their position. A circularity is reported to the diagnostics and the
    sort goes on, breaking the cycle at the type that closes it.

    :param xsd_types: a sequence with named and anonymous types.
    :param get_dependencies: a function that returns the names of the \
    types a type depends on.
    :param diagnostics: an optional collector for diagnostics.
    :return: a new list with ordered types.
    """
    xsd_types = list(xsd_types)
    types_map: dict[str, T] = {}
    for xsd_type in xsd_types:
        if xsd_type.name and xsd_type.name not in types_map:
            types_map[xsd_type.name] = xsd_type

    ordered_types: list[T] = []
    visited: set[int] = set()
    visiting: set[int] = set()

    def visit(item: T) -> None:
        if id(item) in visited:
            return
        elif id(item) in visiting:
            if diagnostics is not None:
                msg = _("circular dependency detected involving {!r}")
                diagnostics.warning(CIRCULAR_DEPENDENCY, msg.format(item.name), item.name)
            return

        visiting.add(id(item))
        for name in get_dependencies(item):
            if name != item.name and name in types_map:
                visit(types_map[name])
        visiting.discard(id(item))

        visited.add(id(item))
        ordered_types.append(item)

    for xsd_type in xsd_types:
        if xsd_type.name:
            visit(xsd_type)
        else:
            ordered_types.append(xsd_type)

    return ordered_types


def get_diagnostics(schema: XsdSchema,
                    diagnostics: Union[None, bool, Diagnostics]) -> Optional[Diagnostics]:
    if diagnostics is None or diagnostics is True:
        return schema.diagnostics
    elif diagnostics is False:
        return None
    return diagnostics


def order_simple_types(schema: XsdSchema,
                       diagnostics: Union[None, bool, Diagnostics] = None) -> list[XsdSimpleType]:
    """
    Returns the simple types of the schema ordered by their restriction bases.

    :param schema: the schema model.
    :param diagnostics: the collector for diagnostics, for default is \
    the collector of the schema. Provide `False` for no diagnostics.
    """
    return sort_types(
        schema.simple_types,
        lambda x: iter_simple_type_dependencies(x, schema),
        get_diagnostics(schema, diagnostics),
    )


def order_complex_types(schema: XsdSchema,
                        diagnostics: Union[None, bool, Diagnostics] = None) -> list[XsdComplexType]:
    """
    Returns the complex types of the schema ordered by the complex types
    used by their fields and by their extension bases.

    :param schema: the schema model.
    :param diagnostics: the collector for diagnostics, for default is \
    the collector of the schema. Provide `False` for no diagnostics.
    """
    return sort_types(
        schema.complex_types,
        lambda x: iter_complex_type_dependencies(x, schema),
        get_diagnostics(schema, diagnostics),
    )


def sort_schema(schema: XsdSchema,
                diagnostics: Union[None, bool, Diagnostics] = None) -> XsdSchema:
    """Returns a copy of the schema with types listed in dependency order."""
    return dc.replace(
        schema,
        simple_types=order_simple_types(schema, diagnostics),
        complex_types=order_complex_types(schema, diagnostics),
    )
