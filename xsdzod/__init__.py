#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from .exceptions import XsdZodException, XsdZodTypeError, XsdZodValueError, \
    XsdZodAttributeError, XsdZodParseError, XsdZodResourceError
from .components import XsdSchema, XsdElement, XsdComplexType, XsdSimpleType, \
    XsdRestriction, XsdAttribute, XsdExtension
from .diagnostics import Diagnostic, Diagnostics
from .namespaces import extract_namespaces, strip_namespace, get_type_value, \
    get_as_array, XsdNodeAccessor
from .facets import parse_simple_type
from .structures import ComponentParser, parse_element, parse_complex_type, parse_attributes
from .references import collect_referenced_elements
from .schema import parse_xsd
from .ordering import order_simple_types, order_complex_types, sort_schema
from .naming import NAMING_CONVENTIONS, apply_naming, get_type_name, get_schema_name
from .mappers import TypeMapping, SchemaMapper, map_primitive_type, \
    apply_facets, map_enumeration
from .codegen import TypeScriptGenerator, ZodGenerator, generate_types, generate_validators
from .settings import CompileSettings
from .compiler import compile_xsd

__version__ = '0.1.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2025, SISSA"
__license__ = "MIT"
__status__ = "Alpha"

__all__ = [
    'translation', 'XsdZodException', 'XsdZodTypeError', 'XsdZodValueError',
    'XsdZodAttributeError', 'XsdZodParseError', 'XsdZodResourceError',
    'XsdSchema', 'XsdElement', 'XsdComplexType', 'XsdSimpleType', 'XsdRestriction',
    'XsdAttribute', 'XsdExtension', 'Diagnostic', 'Diagnostics',
    'extract_namespaces', 'strip_namespace', 'get_type_value', 'get_as_array',
    'XsdNodeAccessor', 'parse_simple_type', 'ComponentParser', 'parse_element',
    'parse_complex_type', 'parse_attributes', 'collect_referenced_elements',
    'parse_xsd', 'order_simple_types', 'order_complex_types', 'sort_schema',
    'NAMING_CONVENTIONS', 'apply_naming', 'get_type_name', 'get_schema_name',
    'TypeMapping', 'SchemaMapper', 'map_primitive_type', 'apply_facets',
    'map_enumeration', 'TypeScriptGenerator', 'ZodGenerator', 'generate_types',
    'generate_validators', 'CompileSettings', 'compile_xsd',
]
