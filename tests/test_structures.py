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
import logging
import unittest

from xsdzod.components import XsdAttribute, XsdElement, XsdComplexType
from xsdzod.diagnostics import Diagnostics, INVALID_OCCURS
from xsdzod.names import UNBOUNDED
from xsdzod.namespaces import XsdNodeAccessor
from xsdzod.structures import ComponentParser, parse_element, \
    parse_complex_type, parse_attributes


class TestComponentParser(unittest.TestCase):

    def setUp(self):
        self.diagnostics = Diagnostics(logger=logging.getLogger('xsdzod.test'))
        self.parser = ComponentParser('xs', self.diagnostics)

    def test_init(self):
        self.assertEqual(repr(self.parser), "ComponentParser(xsd_prefix='xs')")
        accessor = XsdNodeAccessor('xsd')
        self.assertIs(ComponentParser(accessor).accessor, accessor)

    def test_parse_occurs(self):
        self.assertIsNone(self.parser.parse_occurs(None))
        self.assertEqual(self.parser.parse_occurs('0'), 0)
        self.assertEqual(self.parser.parse_occurs('5'), 5)
        self.assertEqual(self.parser.parse_occurs('unbounded'), UNBOUNDED)
        self.assertEqual(len(self.diagnostics), 0)

        with self.assertLogs('xsdzod.test', level='WARNING'):
            self.assertIsNone(self.parser.parse_occurs('many', 'item'))
        self.assertEqual(self.diagnostics[0].code, INVALID_OCCURS)
        self.assertEqual(self.diagnostics[0].name, 'item')

    def test_parse_attributes(self):
        attributes = self.parser.parse_attributes({
            'xs:attribute': [
                {'name': 'id', 'type': 'xs:ID', 'use': 'required'},
                {'name': 'lang', 'default': 'en'},
                {'ref': 'xml:lang'},
                {'name': 'size', 'xs:simpleType': {
                    'xs:restriction': {'base': 'xs:int', 'xs:maxInclusive': {'value': '9'}}
                }},
            ]
        })

        self.assertEqual(len(attributes), 4)
        self.assertEqual(attributes[0], XsdAttribute(name='id', type='ID', use='required'))
        self.assertTrue(attributes[0].is_required)
        self.assertEqual(attributes[1], XsdAttribute(name='lang', default='en'))
        self.assertFalse(attributes[1].is_required)
        self.assertEqual(attributes[2].name, 'lang')
        self.assertIsNone(attributes[2].type)

        simple_type = attributes[3].simple_type
        self.assertIsNone(simple_type.name)
        self.assertEqual(simple_type.restriction.base, 'int')
        self.assertEqual(simple_type.restriction.max_inclusive, 9.0)

        self.assertEqual(self.parser.parse_attributes({}), [])
        self.assertEqual(self.parser.parse_attributes({'xs:attribute': ''}), [])

    def test_parse_element(self):
        element = self.parser.parse_element({
            'name': 'item', 'type': 'tns:itemType', 'minOccurs': '0', 'maxOccurs': 'unbounded'
        })
        self.assertEqual(element, XsdElement(
            name='item', type='itemType', min_occurs=0, max_occurs=UNBOUNDED
        ))
        self.assertTrue(element.is_optional)
        self.assertTrue(element.is_multiple)

        self.assertIsNone(self.parser.parse_element(None))
        self.assertIsNone(self.parser.parse_element(''))
        self.assertIsNone(self.parser.parse_element({}))

    def test_parse_element_reference(self):
        element = self.parser.parse_element({'ref': 'tns:note', 'minOccurs': '0'})
        self.assertTrue(element.is_ref)
        self.assertEqual(element.ref, 'note')
        self.assertIsNone(element.name)
        self.assertEqual(element.min_occurs, 0)

    def test_parse_element_with_inline_types(self):
        element = self.parser.parse_element({
            'name': 'person',
            'nillable': 'true',
            'xs:complexType': {
                'xs:sequence': {'xs:element': {'name': 'age', 'type': 'xs:int'}},
                'xs:attribute': {'name': 'id', 'type': 'xs:ID'},
            }
        })
        self.assertTrue(element.nillable)
        self.assertEqual(element.complex_type.name, 'person')
        self.assertEqual([x.name for x in element.complex_type.content], ['age'])
        self.assertEqual([x.name for x in element.attributes], ['id'])

        element = self.parser.parse_element({
            'name': 'code',
            'xs:simpleType': {'xs:restriction': {'base': 'xs:string',
                                                 'xs:length': {'value': '3'}}}
        })
        self.assertIsNone(element.complex_type)
        self.assertEqual(element.simple_type.name, 'code')
        self.assertEqual(element.simple_type.restriction.length, 3)
        self.assertFalse(element.nillable)

    def test_parse_complex_type_sequence(self):
        complex_type = self.parser.parse_complex_type({
            'name': 'pointType',
            'xs:sequence': {
                'xs:element': [{'name': 'x', 'type': 'xs:int'}, {'name': 'y', 'type': 'xs:int'}]
            },
            'xs:attribute': {'name': 'label', 'type': 'xs:string'},
        })

        self.assertEqual(complex_type.name, 'pointType')
        self.assertEqual([x.name for x in complex_type.sequence], ['x', 'y'])
        self.assertEqual(complex_type.content, complex_type.sequence)
        self.assertIsNone(complex_type.choice)
        self.assertIsNone(complex_type.all)
        self.assertIsNone(complex_type.extension)
        self.assertEqual([x.name for x in complex_type.attributes], ['label'])

    def test_parse_complex_type_choice_and_all(self):
        complex_type = self.parser.parse_complex_type({
            'name': 'a',
            'xs:choice': {'xs:element': [{'name': 'b'}, {'name': 'c'}]},
        })
        self.assertIsNone(complex_type.sequence)
        self.assertEqual([x.name for x in complex_type.choice], ['b', 'c'])
        self.assertEqual([x.name for x in complex_type.content], ['b', 'c'])

        complex_type = self.parser.parse_complex_type({
            'name': 'd',
            'xs:all': {'xs:element': [{'name': 'e'}, {'name': 'f'}]},
        })
        self.assertEqual([x.name for x in complex_type.all], ['e', 'f'])
        self.assertEqual([x.name for x in complex_type.content], ['e', 'f'])

    def test_empty_compositors(self):
        complex_type = self.parser.parse_complex_type({'name': 'emptyType', 'xs:sequence': ''})
        self.assertEqual(complex_type.sequence, [])
        self.assertEqual(complex_type.content, [])

        complex_type = self.parser.parse_complex_type('')
        self.assertEqual(complex_type, XsdComplexType())
        self.assertIsNone(self.parser.parse_complex_type(None))

    def test_nested_compositors(self):
        complex_type = self.parser.parse_complex_type({
            'name': 'orderType',
            'xs:sequence': {
                'xs:element': {'name': 'id', 'type': 'xs:string'},
                'xs:sequence': {'xs:element': [{'name': 'street'}, {'name': 'city'}]},
                'xs:choice': {'xs:element': [{'name': 'email'}, {'name': 'phone'}]},
            }
        })

        self.assertEqual([x.name for x in complex_type.sequence],
                         ['id', 'street', 'city', 'phone'])
        self.assertEqual([x.name for x in complex_type.content],
                         ['id', 'street', 'city', 'phone'])
        self.assertEqual([x.name for x in complex_type.choice], ['email', 'phone'])

    def test_nested_choice_in_direct_choice(self):
        complex_type = self.parser.parse_complex_type({
            'xs:choice': {
                'xs:element': {'name': 'a'},
                'xs:choice': {'xs:element': [{'name': 'b'}, {'name': 'c'}]},
            }
        })
        self.assertEqual([x.name for x in complex_type.content], ['a', 'c'])
        self.assertEqual([x.name for x in complex_type.choice], ['a', 'c', 'b', 'c'])

    def test_complex_content_extension(self):
        complex_type = self.parser.parse_complex_type({
            'name': 'employeeType',
            'xs:complexContent': {
                'xs:extension': {
                    'base': 'tns:personType',
                    'xs:sequence': {'xs:element': {'name': 'salary', 'type': 'xs:decimal'}},
                    'xs:attribute': {'name': 'badge', 'type': 'xs:string'},
                }
            }
        })

        extension = complex_type.extension
        self.assertEqual(extension.base, 'personType')
        self.assertEqual([x.name for x in extension.sequence], ['salary'])
        self.assertEqual([x.name for x in complex_type.content], ['salary'])
        self.assertEqual([x.name for x in complex_type.attributes], ['badge'])
        self.assertIsNone(complex_type.sequence)

    def test_simple_content_extension(self):
        complex_type = self.parser.parse_complex_type({
            'name': 'priceType',
            'xs:simpleContent': {
                'xs:extension': {
                    'base': 'xs:decimal',
                    'xs:attribute': {'name': 'currency', 'type': 'xs:string'},
                }
            }
        })

        self.assertEqual(complex_type.extension.base, 'decimal')
        self.assertIsNone(complex_type.extension.sequence)
        self.assertEqual(complex_type.content, [])
        self.assertEqual([x.name for x in complex_type.attributes], ['currency'])

    def test_functional_interface(self):
        element = parse_element({'name': 'a', 'type': 'xsd:string'}, 'xsd')
        self.assertEqual(element, XsdElement(name='a', type='string'))

        complex_type = parse_complex_type(
            {'xsd:sequence': {'xsd:element': {'name': 'b'}}}, 'xsd', name='c'
        )
        self.assertEqual(complex_type.name, 'c')
        self.assertEqual([x.name for x in complex_type.content], ['b'])

        attributes = parse_attributes({'attribute': {'name': 'd'}})
        self.assertEqual(attributes, [XsdAttribute(name='d')])


if __name__ == '__main__':
    unittest.main()
