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
This module contains the resolution of namespace prefixes in parsed XSD trees.
"""
import re
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Optional

from .names import XSD_NAMESPACE

XMLNS_KEY_PATTERN = re.compile(r'^(?:.*/)?(?:@_)?xmlns(?::(?P<prefix>.*))?$')


class NamespaceContext(NamedTuple):
    """The namespace declarations of a schema root and the prefixes bound to XSD."""
    namespaces: dict[str, str]
    xsd_prefix: Optional[str] = None
    xsd_prefixes: tuple[str, ...] = ()


def extract_namespaces(root_node: Any) -> NamespaceContext:
    """
    Extracts the namespace declarations from the keys of a root node.
    Recognizes plain declarations (`xmlns`, `xmlns:p`) and the variants
    with an attribute prefix or a path (`@_xmlns:p`, `schema/xmlns:p`).
    The default namespace is mapped with an empty prefix.

    When the XSD namespace is bound more than once the first non-empty
    prefix is the main one, all the bindings are kept in `xsd_prefixes`.

    :param root_node: the root node of a parsed XSD tree.
    :return: a NamespaceContext with the prefix bound to the XSD namespace, \
    that is `None` if the XSD namespace is not declared.
    """
    namespaces: dict[str, str] = {}
    xsd_prefixes: list[str] = []

    if isinstance(root_node, Mapping):
        for key, value in root_node.items():
            if not isinstance(key, str) or not isinstance(value, str):
                continue

            match = XMLNS_KEY_PATTERN.match(key)
            if match is not None:
                prefix = match.group('prefix') or ''
                namespaces[prefix] = value
                if value == XSD_NAMESPACE and prefix not in xsd_prefixes:
                    xsd_prefixes.append(prefix)

    if not xsd_prefixes:
        return NamespaceContext(namespaces)

    xsd_prefix = next((x for x in xsd_prefixes if x), '')
    return NamespaceContext(namespaces, xsd_prefix, tuple(xsd_prefixes))


def strip_namespace(name: Optional[str]) -> str:
    """Returns the name without its namespace prefix, or '' for missing names."""
    if not name:
        return ''
    return name.rpartition(':')[2]


def get_type_value(container: Any, local_name: str, xsd_prefix: Optional[str] = None) -> Any:
    """
    Looks up a child of a node first by its local name and then by
    its XSD prefixed name.

    :param container: a node of a parsed XSD tree.
    :param local_name: the local name of the XSD declaration.
    :param xsd_prefix: the prefix bound to the XSD namespace, if any.
    :return: the child value or `None` if it's not found.
    """
    if not isinstance(container, Mapping):
        return None

    try:
        return container[local_name]
    except KeyError:
        if xsd_prefix:
            return container.get(f'{xsd_prefix}:{local_name}')
        return None


def get_as_array(container: Any, local_name: str, xsd_prefix: Optional[str] = None) -> list[Any]:
    """Like `get_type_value` but always returns a list of child values."""
    value = get_type_value(container, local_name, xsd_prefix)
    if value is None:
        return []
    elif isinstance(value, list):
        return value
    return [value]


class XsdNodeAccessor:
    """
    Prefix-aware access to the XSD declarations of a parsed tree.

    :param xsd_prefix: the prefix bound to the XSD namespace. With `None` \
    only the unprefixed names are matched.
    :param alt_prefixes: other prefixes bound to the XSD namespace, tried \
    after the main one. An empty prefix is for an XSD default namespace.
    """
    __slots__ = ('xsd_prefix', 'alt_prefixes')

    def __init__(self, xsd_prefix: Optional[str] = None,
                 alt_prefixes: Iterable[str] = ()) -> None:
        self.xsd_prefix = xsd_prefix
        self.alt_prefixes = tuple(x for x in alt_prefixes if x != xsd_prefix)

    def __repr__(self) -> str:
        if self.alt_prefixes:
            return '{}(xsd_prefix={!r}, alt_prefixes={!r})'.format(
                self.__class__.__name__, self.xsd_prefix, self.alt_prefixes
            )
        return f'{self.__class__.__name__}(xsd_prefix={self.xsd_prefix!r})'

    def _prefixed_keys(self, local_name: str) -> list[str]:
        keys = [local_name]
        for prefix in (self.xsd_prefix, *self.alt_prefixes):
            if prefix:
                keys.append(f'{prefix}:{local_name}')
        return keys

    def lookup(self, node: Any, local_name: str) -> Any:
        """Returns the child of a node matching an XSD local name, or `None`."""
        if not self.alt_prefixes:
            return get_type_value(node, local_name, self.xsd_prefix)
        elif not isinstance(node, Mapping):
            return None

        for key in self._prefixed_keys(local_name):
            value = node.get(key)
            if value is not None:
                return value
        return None

    def lookup_all(self, node: Any, local_name: str) -> list[dict[str, Any]]:
        """
        Returns all the children of a node matching an XSD local name.
        Only mapping nodes are returned, text values and empty tags are skipped.
        Children written with different XSD prefixes are concatenated.
        """
        if not self.alt_prefixes:
            values = get_as_array(node, local_name, self.xsd_prefix)
        elif not isinstance(node, Mapping):
            return []
        else:
            values = []
            for key in self._prefixed_keys(local_name):
                value = node.get(key)
                if isinstance(value, list):
                    values.extend(value)
                elif value is not None:
                    values.append(value)

        return [x for x in values if isinstance(x, Mapping)]

    def is_present(self, node: Any, local_name: str) -> bool:
        return self.lookup(node, local_name) is not None


def get_accessor(xsd_prefix: Any = None) -> XsdNodeAccessor:
    """Returns an accessor from an XSD prefix, or the argument if it's already an accessor."""
    if isinstance(xsd_prefix, XsdNodeAccessor):
        return xsd_prefix
    return XsdNodeAccessor(xsd_prefix)
