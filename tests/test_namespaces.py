#!/usr/bin/env python
#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import unittest

from xsdzod.names import XSD_NAMESPACE
from xsdzod.namespaces import NamespaceContext, extract_namespaces, strip_namespace, \
    get_type_value, get_as_array, XsdNodeAccessor, get_accessor


class TestExtractNamespaces(unittest.TestCase):

    def test_prefixed_declarations(self):
        context = extract_namespaces({
            'xmlns:xs': XSD_NAMESPACE,
            'xmlns:tns': 'http://example.test/ns',
            'targetNamespace': 'http://example.test/ns',
        })
        self.assertIsInstance(context, NamespaceContext)
        self.assertEqual(context.xsd_prefix, 'xs')
        self.assertEqual(context.namespaces, {'xs': XSD_NAMESPACE,
                                              'tns': 'http://example.test/ns'})

    def test_default_namespace(self):
        context = extract_namespaces({'xmlns': XSD_NAMESPACE})
        self.assertEqual(context.xsd_prefix, '')
        self.assertEqual(context.namespaces, {'': XSD_NAMESPACE})

        context = extract_namespaces({'xmlns': 'http://example.test/ns',
                                      'xmlns:xsd': XSD_NAMESPACE})
        self.assertEqual(context.xsd_prefix, 'xsd')
        self.assertEqual(context.namespaces[''], 'http://example.test/ns')

    def test_multiple_xsd_bindings(self):
        context = extract_namespaces({'xmlns:xs': XSD_NAMESPACE, 'xmlns:xsd': XSD_NAMESPACE})
        self.assertEqual(context.xsd_prefix, 'xs')
        self.assertEqual(context.xsd_prefixes, ('xs', 'xsd'))

        context = extract_namespaces({'xmlns': XSD_NAMESPACE, 'xmlns:xs': XSD_NAMESPACE})
        self.assertEqual(context.xsd_prefix, 'xs')
        self.assertEqual(context.xsd_prefixes, ('', 'xs'))

        context = extract_namespaces({'xmlns': XSD_NAMESPACE})
        self.assertEqual(context.xsd_prefixes, ('',))
        self.assertEqual(extract_namespaces({}).xsd_prefixes, ())

    def test_key_variants(self):
        self.assertEqual(extract_namespaces({'@_xmlns:xs': XSD_NAMESPACE}).xsd_prefix, 'xs')
        self.assertEqual(extract_namespaces({'schema/xmlns:xsd': XSD_NAMESPACE}).xsd_prefix,
                         'xsd')
        self.assertEqual(extract_namespaces({'@_xmlns': XSD_NAMESPACE}).xsd_prefix, '')

    def test_missing_xsd_namespace(self):
        context = extract_namespaces({'xmlns:tns': 'http://example.test/ns'})
        self.assertIsNone(context.xsd_prefix)
        self.assertEqual(extract_namespaces({}), NamespaceContext({}, None))
        self.assertEqual(extract_namespaces(None), NamespaceContext({}, None))
        self.assertEqual(extract_namespaces('text'), NamespaceContext({}, None))

    def test_non_string_values_are_skipped(self):
        context = extract_namespaces({'xmlns:xs': {'a': 'b'}, 'xmlns:tns': 'urn:x'})
        self.assertEqual(context, NamespaceContext({'tns': 'urn:x'}, None))


class TestNamespaceHelpers(unittest.TestCase):

    def test_strip_namespace(self):
        self.assertEqual(strip_namespace('xs:string'), 'string')
        self.assertEqual(strip_namespace('string'), 'string')
        self.assertEqual(strip_namespace('a:b:c'), 'c')
        self.assertEqual(strip_namespace(''), '')
        self.assertEqual(strip_namespace(None), '')

    def test_get_type_value(self):
        node = {'element': 'a', 'xs:element': 'b', 'xs:complexType': 'c'}
        self.assertEqual(get_type_value(node, 'element', 'xs'), 'a')
        self.assertEqual(get_type_value(node, 'complexType', 'xs'), 'c')
        self.assertIsNone(get_type_value(node, 'complexType'))
        self.assertIsNone(get_type_value(node, 'complexType', ''))
        self.assertIsNone(get_type_value(node, 'simpleType', 'xs'))
        self.assertIsNone(get_type_value(None, 'element', 'xs'))
        self.assertIsNone(get_type_value(['element'], 'element', 'xs'))

    def test_get_as_array(self):
        node = {'xs:element': [{'name': 'a'}, {'name': 'b'}], 'xs:attribute': {'name': 'c'}}
        self.assertEqual(get_as_array(node, 'element', 'xs'), [{'name': 'a'}, {'name': 'b'}])
        self.assertEqual(get_as_array(node, 'attribute', 'xs'), [{'name': 'c'}])
        self.assertEqual(get_as_array(node, 'sequence', 'xs'), [])
        self.assertEqual(get_as_array(node, 'element'), [])

    def test_node_accessor(self):
        accessor = XsdNodeAccessor('xsd')
        self.assertEqual(repr(accessor), "XsdNodeAccessor(xsd_prefix='xsd')")

        node = {'xsd:element': [{'name': 'a'}, '', 'text'], 'xsd:sequence': ''}
        self.assertEqual(accessor.lookup(node, 'sequence'), '')
        self.assertEqual(accessor.lookup_all(node, 'element'), [{'name': 'a'}])
        self.assertTrue(accessor.is_present(node, 'sequence'))
        self.assertFalse(accessor.is_present(node, 'choice'))
        self.assertFalse(XsdNodeAccessor().is_present(node, 'sequence'))

    def test_node_accessor_with_alternative_prefixes(self):
        accessor = XsdNodeAccessor('xs', ('xs', 'xsd'))
        self.assertEqual(accessor.alt_prefixes, ('xsd',))
        self.assertEqual(repr(accessor),
                         "XsdNodeAccessor(xsd_prefix='xs', alt_prefixes=('xsd',))")

        node = {'xs:element': {'name': 'a'},
                'xsd:element': [{'name': 'b'}, {'name': 'c'}],
                'xsd:sequence': ''}
        self.assertEqual(accessor.lookup(node, 'element'), {'name': 'a'})
        self.assertEqual(accessor.lookup(node, 'sequence'), '')
        self.assertIsNone(accessor.lookup(node, 'choice'))
        self.assertIsNone(accessor.lookup('text', 'element'))
        self.assertEqual(accessor.lookup_all(node, 'element'),
                         [{'name': 'a'}, {'name': 'b'}, {'name': 'c'}])
        self.assertEqual(accessor.lookup_all(None, 'element'), [])
        self.assertTrue(accessor.is_present(node, 'sequence'))

        accessor = XsdNodeAccessor('xs', ('', 'xs'))
        node = {'element': {'name': 'a'}, 'xs:element': {'name': 'b'}}
        self.assertEqual(accessor.lookup(node, 'element'), {'name': 'a'})
        self.assertEqual(accessor.lookup_all(node, 'element'), [{'name': 'a'}, {'name': 'b'}])

    def test_get_accessor(self):
        accessor = XsdNodeAccessor('xs')
        self.assertIs(get_accessor(accessor), accessor)
        self.assertEqual(get_accessor('xs').xsd_prefix, 'xs')
        self.assertIsNone(get_accessor().xsd_prefix)


if __name__ == '__main__':
    unittest.main()
