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
This module contains the mapping of schema model components to
TypeScript types and to Zod validators.
"""
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Optional, Union

from .names import TEXT_KEY
from .components import XsdAttribute, XsdComplexType, XsdElement, \
    XsdRestriction, XsdSchema, XsdSimpleType
from .namespaces import strip_namespace
from .naming import apply_naming, check_naming, get_schema_name, get_type_name

IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_$][\w$]*$')


class TypeMapping(NamedTuple):
    ts_type: str
    zod_validator: str


class MappedField(NamedTuple):
    name: str
    ts_type: str
    zod_validator: str
    optional: bool = False
    is_array: bool = False


class MappedComplexType(NamedTuple):
    type_name: str
    schema_name: str
    ts_interface: str
    zod_object: str
    fields: tuple[MappedField, ...] = ()
    base: Optional[TypeMapping] = None


ANY_TYPE_MAPPING = TypeMapping('any', 'z.any()')

_STRING = TypeMapping('string', 'z.string()')
_NUMBER = TypeMapping('number', 'z.number()')
_INTEGER = TypeMapping('number', 'z.number().int()')
_NON_NEGATIVE_INTEGER = TypeMapping('number', 'z.number().int().nonnegative()')

PRIMITIVE_TYPES: dict[str, TypeMapping] = {
    'string': _STRING,
    'normalizedString': _STRING,
    'token': _STRING,
    'language': _STRING,
    'Name': _STRING,
    'NCName': _STRING,
    'ID': _STRING,
    'IDREF': _STRING,
    'IDREFS': _STRING,
    'ENTITY': _STRING,
    'ENTITIES': _STRING,
    'NMTOKEN': _STRING,
    'NMTOKENS': _STRING,
    'QName': _STRING,
    'NOTATION': _STRING,
    'base64Binary': _STRING,
    'hexBinary': _STRING,

    'boolean': TypeMapping('boolean', 'z.boolean()'),
    'decimal': _NUMBER,
    'float': _NUMBER,
    'double': _NUMBER,

    'integer': _INTEGER,
    'long': _INTEGER,
    'int': _INTEGER,
    'short': _INTEGER,
    'byte': _INTEGER,
    'positiveInteger': TypeMapping('number', 'z.number().int().positive()'),
    'nonNegativeInteger': _NON_NEGATIVE_INTEGER,
    'negativeInteger': TypeMapping('number', 'z.number().int().negative()'),
    'nonPositiveInteger': TypeMapping('number', 'z.number().int().nonpositive()'),
    'unsignedLong': _NON_NEGATIVE_INTEGER,
    'unsignedInt': _NON_NEGATIVE_INTEGER,
    'unsignedShort': _NON_NEGATIVE_INTEGER,
    'unsignedByte': _NON_NEGATIVE_INTEGER,

    'date': TypeMapping('string', 'z.string().date()'),
    'dateTime': TypeMapping('string', 'z.string().datetime()'),
    'time': TypeMapping('string', 'z.string().time()'),
    'duration': _STRING,
    'gDay': _STRING,
    'gMonth': _STRING,
    'gMonthDay': _STRING,
    'gYear': _STRING,
    'gYearMonth': _STRING,
    'anyURI': TypeMapping('string', 'z.string().url()'),

    'anyType': ANY_TYPE_MAPPING,
    'anySimpleType': ANY_TYPE_MAPPING,

    # XSD 1.1 built-in types
    'dateTimeStamp': TypeMapping('string', 'z.string().datetime({ offset: true })'),
    'dayTimeDuration': _STRING,
    'yearMonthDuration': _STRING,
}


###
# Helpers for writing TypeScript literals

def format_number(value: Union[int, float]) -> str:
    """Formats a number as a TypeScript numeric literal."""
    if isinstance(value, float):
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        elif value.is_integer():
            return str(int(value))
    return str(value)


def quote_string(value: str) -> str:
    """Returns a single-quoted TypeScript string literal."""
    escaped = value.replace('\\', '\\\\').replace("'", "\\'")
    escaped = escaped.replace('\n', '\\n').replace('\r', '\\r')
    return f"'{escaped}'"


def regex_literal(pattern: str) -> str:
    """Returns an anchored TypeScript regular expression literal for an XSD pattern."""
    return '/^(?:{})$/'.format(pattern.replace('/', r'\/'))


def property_key(name: str) -> str:
    return name if IDENTIFIER_PATTERN.match(name) else quote_string(name)


def indent_lines(text: str, indent: str = '  ') -> str:
    return text.replace('\n', f'\n{indent}')


def object_body(fields: Iterable[MappedField]) -> tuple[str, str]:
    """Returns the TypeScript object type and the Zod shape for a list of fields."""
    ts_lines = []
    zod_lines = []
    for field in fields:
        key = property_key(field.name)
        ts_lines.append('  {}{}: {}'.format(
            key, '?' if field.optional else '', indent_lines(field.ts_type)
        ))
        zod_lines.append('  {}: {}{}'.format(
            key, indent_lines(field.zod_validator), '.optional()' if field.optional else ''
        ))

    if not ts_lines:
        return '{}', '{}'
    return '{\n%s\n}' % ',\n'.join(ts_lines), '{\n%s\n}' % ',\n'.join(zod_lines)


###
# Mapping functions

def map_primitive_type(xsd_type: Optional[str],
                       types_map: Optional[Mapping[str, TypeMapping]] = None) -> TypeMapping:
    """
    Maps an XSD built-in type to a TypeScript type and a Zod validator.
    The type name can be prefixed. Unknown types are mapped to `any`.
    """
    if types_map is None:
        types_map = PRIMITIVE_TYPES
    return types_map.get(strip_namespace(xsd_type), ANY_TYPE_MAPPING)


def apply_facets(base: TypeMapping, restriction: XsdRestriction) -> TypeMapping:
    """Adds the Zod methods that check the facets of a restriction to a base mapping."""
    ts_type, validator = base

    if restriction.min_length is not None:
        validator += f'.min({restriction.min_length})'
    if restriction.max_length is not None:
        validator += f'.max({restriction.max_length})'
    if restriction.length is not None:
        validator += f'.length({restriction.length})'
    if restriction.pattern is not None:
        validator += f'.regex({regex_literal(restriction.pattern)})'

    if restriction.min_inclusive is not None:
        validator += f'.min({format_number(restriction.min_inclusive)})'
    if restriction.max_inclusive is not None:
        validator += f'.max({format_number(restriction.max_inclusive)})'
    if restriction.min_exclusive is not None:
        validator += f'.gt({format_number(restriction.min_exclusive)})'
    if restriction.max_exclusive is not None:
        validator += f'.lt({format_number(restriction.max_exclusive)})'

    if restriction.total_digits is not None or restriction.fraction_digits is not None:
        ts_type = 'number'

    return TypeMapping(ts_type, validator)


def map_enumeration(simple_type: XsdSimpleType) -> TypeMapping:
    """Maps the enumerations of a simple type to a union of literals and a Zod enum."""
    values = [quote_string(x) for x in simple_type.restriction.enumerations or ()]
    return TypeMapping(' | '.join(values), 'z.enum([{}])'.format(', '.join(values)))


class SchemaMapper:
    """
    Maps the components of a schema model to TypeScript declarations
    and to Zod validators.

    :param schema: the schema model.
    :param naming: the naming convention for generated names.
    :param types_map: an optional map from XSD built-in type names \
    to custom mappings, provided as `TypeMapping` instances or as \
    couples of strings.
    """
    def __init__(self, schema: XsdSchema, naming: str = 'camel',
                 types_map: Optional[Mapping[str, Any]] = None) -> None:
        check_naming(naming)
        self.schema = schema
        self.naming = naming

        self.types_map = PRIMITIVE_TYPES.copy()
        if types_map:
            self.types_map.update((k, TypeMapping(*v)) for k, v in types_map.items())

        self._declaring: list[str] = []
        self._resolving: list[str] = []

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(naming={self.naming!r})'

    def type_name(self, name: str) -> str:
        return get_type_name(name, self.naming)

    def schema_name(self, name: str) -> str:
        return get_schema_name(name, self.naming)

    def field_name(self, name: str) -> str:
        return apply_naming(name, self.naming)

    def reference(self, name: str) -> TypeMapping:
        """Returns the mapping that refers to a declared type by name."""
        schema_name = self.schema_name(name)
        if name in self._declaring:
            return TypeMapping(self.type_name(name), f'z.lazy(() => {schema_name})')
        return TypeMapping(self.type_name(name), schema_name)

    def map_primitive_type(self, xsd_type: Optional[str]) -> TypeMapping:
        return map_primitive_type(xsd_type, self.types_map)

    def map_type_reference(self, type_name: Optional[str]) -> TypeMapping:
        """Maps a type name to a declared complex or simple type, or to a built-in type."""
        if self.schema.get_complex_type(type_name) is not None or \
                self.schema.get_simple_type(type_name) is not None:
            return self.reference(type_name)  # type: ignore[arg-type]
        return self.map_primitive_type(type_name)

    def map_simple_type(self, simple_type: XsdSimpleType) -> Optional[TypeMapping]:
        """
        Maps a simple type definition. Returns `None` for a simple
        type without enumerations and without a base type.
        """
        restriction = simple_type.restriction
        if restriction.enumerations is not None:
            return map_enumeration(simple_type)
        elif not restriction.base:
            return None
        elif self.schema.get_simple_type(restriction.base) is not None:
            return apply_facets(self.reference(restriction.base), restriction)
        return apply_facets(self.map_primitive_type(restriction.base), restriction)

    def map_element_type(self, element: XsdElement) -> TypeMapping:
        if element.is_ref:
            ref = element.ref
            target = self.schema.get_element(ref)
            if target is None:
                return ANY_TYPE_MAPPING
            elif ref in self._resolving:
                return self.reference(ref)  # type: ignore[arg-type]

            self._resolving.append(ref)  # type: ignore[arg-type]
            self._declaring.append(ref)  # type: ignore[arg-type]
            try:
                return self.map_element_type(target)
            finally:
                self._resolving.pop()
                self._declaring.pop()

        elif element.complex_type is not None:
            mapped = self.map_complex_type(element.complex_type)
            if mapped.base is not None and mapped.base.ts_type:
                return TypeMapping(f'{mapped.base.ts_type} & {mapped.ts_interface}',
                                   mapped.zod_object)
            return TypeMapping(mapped.ts_interface, mapped.zod_object)

        elif element.simple_type is not None:
            return self.map_simple_type(element.simple_type) or ANY_TYPE_MAPPING
        elif element.type:
            return self.map_type_reference(element.type)
        return ANY_TYPE_MAPPING

    def map_element(self, element: XsdElement) -> MappedField:
        """
        Maps an element particle to a field. An element with minOccurs=0
        is optional and an element with maxOccurs > 1 is an array.
        """
        ts_type, validator = self.map_element_type(element)

        if element.nillable:
            ts_type = f'{ts_type} | null'
            validator = f'{validator}.nullable()'

        if element.is_multiple:
            if ' ' in ts_type and not ts_type.startswith('{'):
                ts_type = f'({ts_type})[]'
            else:
                ts_type = f'{ts_type}[]'
            validator = f'z.array({validator})'

        return MappedField(
            name=self.field_name(element.name or element.ref or ''),
            ts_type=ts_type,
            zod_validator=validator,
            optional=element.is_optional,
            is_array=element.is_multiple,
        )

    def map_attribute(self, attribute: XsdAttribute) -> MappedField:
        """
        Maps an attribute to a field. Attributes are optional unless they are
        required and have no default or fixed value. Untyped attributes are strings.
        """
        mapping: Optional[TypeMapping]
        if attribute.simple_type is not None:
            mapping = self.map_simple_type(attribute.simple_type)
        elif attribute.type:
            mapping = self.map_type_reference(attribute.type)
        else:
            mapping = None

        ts_type, validator = mapping or _STRING
        return MappedField(
            name=self.field_name(attribute.name or ''),
            ts_type=ts_type,
            zod_validator=validator,
            optional=not attribute.is_required,
        )

    def map_complex_type(self, complex_type: XsdComplexType) -> MappedComplexType:
        """
        Maps a complex type to a TypeScript object type and to a Zod object.
        A complex type extending another complex type is mapped to the fields
        it adds, an extension of a simple content adds the text field.
        """
        name = complex_type.name
        if name:
            type_name, schema_name = self.type_name(name), self.schema_name(name)
            self._declaring.append(name)
        else:
            type_name, schema_name = 'AnonymousType', 'anonymousSchema'

        try:
            fields = [self.map_element(e) for e in complex_type.content]
            fields.extend(self.map_attribute(a) for a in complex_type.attributes
                          if not a.is_prohibited)

            base = None
            extension = complex_type.extension
            if extension is not None and extension.base:
                if self.schema.get_complex_type(extension.base) is not None:
                    base = self.reference(extension.base)
                else:
                    text_type, text_validator = self.map_type_reference(extension.base)
                    fields.insert(0, MappedField(TEXT_KEY, text_type, text_validator))
        finally:
            if name:
                self._declaring.pop()

        ts_interface, zod_shape = object_body(fields)
        if base is not None:
            zod_object = f'{base.zod_validator}.extend({zod_shape})'
        else:
            zod_object = f'z.object({zod_shape})'

        return MappedComplexType(
            type_name=type_name,
            schema_name=schema_name,
            ts_interface=ts_interface,
            zod_object=zod_object,
            fields=tuple(fields),
            base=base,
        )
