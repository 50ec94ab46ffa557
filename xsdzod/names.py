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
This module contains namespace definitions and the local names of
the XSD declarations handled by the schema model builder.
"""

###
# Namespace URIs
XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
"URI of the XML Schema Definition namespace (xs|xsd)"

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'
"URI of the XML namespace (xml)"

TEXT_KEY = '_text'
"Key of the text content in the nodes of a parsed tree"

UNBOUNDED = 'unbounded'
"Sentinel value of maxOccurs for an unlimited number of occurrences"


###
# Local names of XSD declarations
XSD_SCHEMA = 'schema'
XSD_ELEMENT = 'element'
XSD_ATTRIBUTE = 'attribute'
XSD_COMPLEX_TYPE = 'complexType'
XSD_SIMPLE_TYPE = 'simpleType'
XSD_ANNOTATION = 'annotation'
XSD_DOCUMENTATION = 'documentation'

XSD_SEQUENCE = 'sequence'
XSD_CHOICE = 'choice'
XSD_ALL = 'all'

XSD_COMPLEX_CONTENT = 'complexContent'
XSD_SIMPLE_CONTENT = 'simpleContent'
XSD_EXTENSION = 'extension'
XSD_RESTRICTION = 'restriction'


###
# Facets
XSD_ENUMERATION = 'enumeration'
XSD_LENGTH = 'length'
XSD_MIN_LENGTH = 'minLength'
XSD_MAX_LENGTH = 'maxLength'
XSD_PATTERN = 'pattern'
XSD_WHITE_SPACE = 'whiteSpace'
XSD_MIN_INCLUSIVE = 'minInclusive'
XSD_MAX_INCLUSIVE = 'maxInclusive'
XSD_MIN_EXCLUSIVE = 'minExclusive'
XSD_MAX_EXCLUSIVE = 'maxExclusive'
XSD_TOTAL_DIGITS = 'totalDigits'
XSD_FRACTION_DIGITS = 'fractionDigits'
