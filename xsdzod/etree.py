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
This module contains the tokenizer that converts XML text to the
attribute-preserving tree consumed by the schema model builder.

The tree is a nesting of dictionaries where the keys are the tags
and the attribute names, with the namespace prefixes used in the
source text. Namespace declarations are kept as `xmlns` and
`xmlns:<prefix>` keys, repeated children are collected in lists
and the text content is saved with a reserved key.
"""
from io import BytesIO
from typing import Any, Union

from lxml import etree

from .exceptions import XsdZodParseError, XsdZodTypeError
from .names import TEXT_KEY, XML_NAMESPACE
from .translation import gettext as _

TreeNode = Union[dict[str, Any], str]

_BASE_NSMAP = {'xml': XML_NAMESPACE}


def prefixed_name(qname: str, nsmap: dict[str, str]) -> str:
    """
    Returns the prefixed form of an expanded attribute name, using the
    last declared prefix bound to its namespace. Unmapped namespaces and
    names bound to the default namespace are returned unprefixed.

    :param qname: an expanded QName in the format "{uri}local_name".
    :param nsmap: a map from prefixes to namespace URIs.
    """
    if not qname or qname[0] != '{':
        return qname

    namespace, local_name = qname[1:].split('}')
    for prefix, uri in reversed(nsmap.items()):
        if uri == namespace:
            return f'{prefix}:{local_name}' if prefix else local_name
    return local_name


def add_child(parent: dict[str, Any], key: str, value: TreeNode) -> None:
    """Adds a child node, collecting repeated keys into a list."""
    try:
        siblings = parent[key]
    except KeyError:
        parent[key] = value
    else:
        if isinstance(siblings, list):
            siblings.append(value)
        else:
            parent[key] = [siblings, value]


def parse_xml_tree(source: Union[str, bytes], text_key: str = TEXT_KEY) -> dict[str, Any]:
    """
    Parses XML text into an attribute-preserving tree. The parser is
    protected against entity expansion and external references.

    :param source: the XML text, as a string or as bytes.
    :param text_key: the key used for the text content of the nodes \
    that have attributes or children.
    :return: a dictionary with a single item, the root's prefixed tag \
    mapped to the root node.
    :raises XsdZodParseError: if the text is not well-formed XML.
    """
    if isinstance(source, str):
        resource = BytesIO(source.encode('utf-8'))
    elif isinstance(source, bytes):
        resource = BytesIO(source)
    else:
        msg = _("invalid type {!r} for XML source, must be a string or bytes")
        raise XsdZodTypeError(msg.format(type(source)))

    tree: dict[str, Any] = {}
    stack: list[tuple[str, dict[str, Any]]] = []
    start_ns: list[tuple[str, str]] = []
    end_ns = False
    nsmap_stack: list[dict[str, str]] = [_BASE_NSMAP]

    events = 'start-ns', 'end-ns', 'start', 'end'
    tree_iterator = etree.iterparse(
        resource, events, resolve_entities=False, load_dtd=False, no_network=True
    )

    try:
        for event, elem in tree_iterator:
            if event == 'start':
                if end_ns:
                    nsmap_stack.pop()
                    end_ns = False

                node: dict[str, Any] = {}
                if start_ns:
                    nsmap_stack.append(nsmap_stack[-1].copy())
                    nsmap_stack[-1].update(start_ns)
                    for prefix, uri in start_ns:
                        node[f'xmlns:{prefix}' if prefix else 'xmlns'] = uri
                    start_ns = []

                nsmap = nsmap_stack[-1]
                for name, value in elem.attrib.items():
                    node[prefixed_name(name, nsmap)] = value

                local_name = etree.QName(elem).localname
                if elem.prefix:
                    stack.append((f'{elem.prefix}:{local_name}', node))
                else:
                    stack.append((local_name, node))

            elif event == 'end':
                if end_ns:
                    nsmap_stack.pop()
                    end_ns = False

                key, node = stack.pop()
                text = elem.text.strip() if elem.text else ''
                value: TreeNode
                if node:
                    if text:
                        node[text_key] = text
                    value = node
                else:
                    value = text

                add_child(stack[-1][1] if stack else tree, key, value)
                elem.clear()

            elif event == 'start-ns':
                start_ns.append(elem)
            else:
                end_ns = True

    except etree.XMLSyntaxError as err:
        lineno, offset = err.position
        raise XsdZodParseError(err.msg or str(err), lineno, offset) from err

    if not tree:
        raise XsdZodParseError(_("no element found in XML source"))
    return tree
