#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""
This module contains the abstract base class and the generators of
TypeScript declarations and Zod validators from schema models.
"""
import os
import sys
import inspect
import logging
from abc import ABC, ABCMeta
from fnmatch import fnmatch
from pathlib import Path
from typing import Optional

from jinja2 import Environment, ChoiceLoader, FileSystemLoader, \
    TemplateNotFound, TemplateAssertionError

from .components import XsdAttribute, XsdComplexType, XsdElement, \
    XsdSchema, XsdSimpleType
from .exceptions import XsdZodTypeError, XsdZodValueError
from .mappers import ANY_TYPE_MAPPING, SchemaMapper
from .ordering import order_complex_types, order_simple_types
from .schema import parse_xsd
from .translation import gettext as _


def is_shell_wildcard(pathname):
    return '*' in pathname or '?' in pathname or '[' in pathname


def filter_method(func):
    """Marks a method for registration as template filter."""
    func.is_filter = True
    return func


def test_method(func):
    """Marks a method for registration as template test."""
    func.is_test = True
    return func


logger = logging.getLogger('xsdzod.codegen')


class GeneratorMeta(ABCMeta):
    """Metaclass for creating code generators. Checks formal_language """

    def __new__(mcs, name, bases, attrs):
        module = sys.modules.get(attrs['__module__'])
        module_path = getattr(module, '__file__', os.getcwd())

        formal_language = None
        searchpaths = []

        for base in bases:
            if getattr(base, 'formal_language', None):
                if formal_language is None:
                    formal_language = base.formal_language
                elif formal_language != base.formal_language:
                    raise XsdZodValueError(
                        _("ambiguous formal_language from base classes")
                    )

            if getattr(base, 'searchpaths', None):
                searchpaths.extend(base.searchpaths)

        if 'formal_language' not in attrs:
            attrs['formal_language'] = formal_language
        elif formal_language and formal_language != attrs['formal_language']:
            raise XsdZodValueError(_("formal_language cannot be changed"))

        try:
            for path in attrs['searchpaths']:
                if Path(path).is_absolute():
                    dirpath = Path(path)
                else:
                    dirpath = Path(module_path).parent.joinpath(path)

                if not dirpath.is_dir():
                    raise XsdZodValueError(
                        _("path {!r} is not a directory!").format(str(path))
                    )
                searchpaths.append(dirpath)

        except (KeyError, TypeError):
            pass
        else:
            attrs['searchpaths'] = searchpaths

        return type.__new__(mcs, name, bases, attrs)


class AbstractGenerator(ABC, metaclass=GeneratorMeta):
    """
    Abstract base class for code generators based on Jinja2 template engine.

    :param schema: the schema model or the XSD text of the schema.
    :param naming: the naming convention for the generated names.
    :param searchpath: additional search path for custom templates. \
    If provided the search path has priority over searchpaths defined \
    in generator class.
    :param types_map: a dictionary with custom mappings for XSD built-in types.
    """
    formal_language: Optional[str] = None
    """The formal language associated to the code generator (eg. TypeScript)."""

    searchpaths: Optional[list[str]] = None
    """
    Directory paths for searching templates, specified with a list or a tuple.
    Each path must be provided as relative from the directory of the module
    where the class is defined. Extends the searchpath defined in base classes.
    """

    mapping_field: str = 'ts_type'
    """The field of the type mappings used by the type mapping filter."""

    def __init__(self, schema, naming='camel', searchpath=None, types_map=None):
        if isinstance(schema, XsdSchema):
            self.schema = schema
        elif isinstance(schema, (str, bytes)):
            self.schema = parse_xsd(schema)
        else:
            msg = _("invalid type {!r} for schema, must be an XsdSchema or XSD text")
            raise XsdZodTypeError(msg.format(type(schema)))

        file_loaders = []
        if searchpath:
            file_loaders.append(FileSystemLoader(searchpath))
        if self.searchpaths is not None:
            file_loaders.extend(
                FileSystemLoader(str(path)) for path in reversed(self.searchpaths)
            )
        if not file_loaders:
            raise XsdZodValueError(_("no search paths defined!"))
        loader = ChoiceLoader(file_loaders) if len(file_loaders) > 1 else file_loaders[0]

        self.naming = naming
        self.mapper = SchemaMapper(self.schema, naming, types_map)
        self.types_map = self.mapper.types_map

        self.filters = {}
        self.tests = {}
        for name in filter(lambda x: callable(getattr(self, x)), dir(self)):
            method = getattr(self, name)
            if inspect.isfunction(method):
                # static methods
                if getattr(method, 'is_filter', False):
                    self.filters[name] = method
                elif getattr(method, 'is_test', False):
                    self.tests[name] = method
            elif inspect.isroutine(method) and hasattr(method, '__func__'):
                # class and instance methods
                if getattr(method.__func__, 'is_filter', False):
                    self.filters[name] = method
                elif getattr(method.__func__, 'is_test', False):
                    self.tests[name] = method

        type_mapping_filter = f'{self.formal_language}_type'.lower().replace(' ', '_')
        if type_mapping_filter not in self.filters:
            self.filters[type_mapping_filter] = self.map_type

        self._env = Environment(loader=loader, trim_blocks=True,
                                lstrip_blocks=True, keep_trailing_newline=True)
        self._env.filters.update(self.filters)
        self._env.tests.update(self.tests)

    def __repr__(self):
        return '{}(namespace={!r}, naming={!r})'.format(
            self.__class__.__name__, self.schema.target_namespace, self.naming
        )

    def list_templates(self, extensions=None, filter_func=None):
        return self._env.list_templates(extensions, filter_func)

    def matching_templates(self, name):
        return self._env.list_templates(filter_func=lambda x: fnmatch(x, name))

    def get_template(self, name, parent=None, global_vars=None):
        return self._env.get_template(name, parent, global_vars)

    def select_template(self, names, parent=None, global_vars=None):
        return self._env.select_template(names, parent, global_vars)

    def render(self, names, parent=None, global_vars=None):
        if isinstance(names, str):
            names = [names]
        elif not all(isinstance(x, str) for x in names):
            raise XsdZodTypeError(_("'names' argument must contain only strings!"))

        results = []
        for name in names:
            try:
                template = self._env.get_template(name, parent, global_vars)
            except TemplateNotFound as err:
                logger.debug("name %r: %s", name, str(err))
            except TemplateAssertionError as err:
                logger.warning("template %r: %s", name, str(err))
            else:
                results.append(template.render(schema=self.schema))
        return results

    def render_to_files(self, names, parent=None, global_vars=None,
                        output_dir='.', force=False, basename=None):
        """
        Renders templates to files. The name of an output file is the name of
        the template without the last suffix, prefixed by the basename if any.

        :return: the list of the written files.
        """
        if isinstance(names, str):
            names = [names]
        elif not all(isinstance(x, str) for x in names):
            raise XsdZodTypeError(_("'names' argument must contain only strings!"))

        template_names = []
        for name in names:
            if is_shell_wildcard(name):
                template_names.extend(self.matching_templates(name))
            else:
                template_names.append(name)

        output_dir = Path(output_dir)
        rendered = []

        for name in template_names:
            try:
                template = self._env.get_template(name, parent, global_vars)
            except TemplateNotFound as err:
                logger.debug("name %r: %s", name, str(err))
            except TemplateAssertionError as err:
                logger.warning("template %r: %s", name, str(err))
            else:
                filename = Path(name).with_suffix('').name
                if basename:
                    filename = f'{basename}.{filename}'
                output_file = output_dir.joinpath(filename)
                if not force and output_file.exists():
                    continue

                result = template.render(schema=self.schema)
                logger.info("write file %r", str(output_file))
                with open(output_file, 'w', encoding='utf-8') as fp:
                    fp.write(result)
                rendered.append(str(output_file))

        return rendered

    def map_type(self, obj):
        """
        Maps a schema component to a type declaration of the target language.
        This method is registered as filter with a name dependant from the
        language name (eg. typescript_type).

        :param obj: a simple or complex type, an element or an attribute. \
        A string is mapped as the name of a type.
        :return: an empty string for other objects.
        """
        if isinstance(obj, XsdSimpleType):
            mapping = self.mapper.map_simple_type(obj) or ANY_TYPE_MAPPING
        elif isinstance(obj, XsdComplexType):
            mapped = self.mapper.map_complex_type(obj)
            mapping = mapped.ts_interface, mapped.zod_object
        elif isinstance(obj, XsdElement):
            mapping = self.mapper.map_element(obj)[1:3]
        elif isinstance(obj, XsdAttribute):
            mapping = self.mapper.map_attribute(obj)[1:3]
        elif isinstance(obj, str):
            mapping = self.mapper.map_type_reference(obj)
        else:
            return ''

        return mapping[0] if self.mapping_field == 'ts_type' else mapping[1]

    @filter_method
    def type_name(self, obj):
        """Get the name of the type declaration for a component or a name."""
        name = getattr(obj, 'name', obj)
        return self.mapper.type_name(name) if isinstance(name, str) else ''

    @filter_method
    def schema_name(self, obj):
        """Get the name of the validator declaration for a component or a name."""
        name = getattr(obj, 'name', obj)
        return self.mapper.schema_name(name) if isinstance(name, str) else ''

    @filter_method
    def field_name(self, obj):
        name = getattr(obj, 'name', obj)
        return self.mapper.field_name(name) if isinstance(name, str) else ''

    @filter_method
    def sorted_simple_types(self, schema):
        """Returns the named simple types of a schema in dependency order."""
        return [x for x in order_simple_types(schema) if x.name]

    @filter_method
    def sorted_complex_types(self, schema):
        """Returns the named complex types of a schema in dependency order."""
        return [x for x in order_complex_types(schema) if x.name]

    @filter_method
    def declared_elements(self, schema):
        """
        Returns the elements that have a standalone declaration: the global
        elements and the elements of complex types, with the children before
        their parents. Elements are declared once for each name, skipping the
        ones that would redeclare a type or define an alias with the same name.
        """
        declared = {self.mapper.schema_name(x.name)
                    for x in schema.simple_types if x.name}
        declared.update(self.mapper.schema_name(x.name)
                        for x in schema.complex_types if x.name)
        elements = []

        def add_element(element):
            if element.complex_type is not None:
                for child in element.complex_type.content:
                    add_element(child)

            if not element.name or element.is_ref:
                return
            elif element.complex_type is None and element.simple_type is None:
                if not element.type or self.mapper.type_name(element.name) == \
                        self.mapper.type_name(element.type):
                    return

            schema_name = self.mapper.schema_name(element.name)
            if schema_name not in declared:
                declared.add(schema_name)
                elements.append(element)

        for xsd_element in schema.elements:
            add_element(xsd_element)
        for complex_type in schema.complex_types:
            for xsd_element in complex_type.content:
                add_element(xsd_element)

        return elements

    @test_method
    def mappable(self, obj):
        """Returns `False` for simple types without enumerations and without a base type."""
        if isinstance(obj, XsdSimpleType):
            return self.mapper.map_simple_type(obj) is not None
        return True


class TypeScriptGenerator(AbstractGenerator):
    """A generator of TypeScript type declarations for schema models."""

    formal_language = 'TypeScript'

    searchpaths = ['templates/typescript/']

    @filter_method
    def element_type(self, element):
        """Maps an element to its type, without cardinality."""
        return self.mapper.map_element_type(element).ts_type

    @filter_method
    def interface(self, complex_type):
        """Returns the body and the heritage clause of the interface of a complex type."""
        mapped = self.mapper.map_complex_type(complex_type)
        if mapped.base is not None:
            return f'extends {mapped.base.ts_type} {mapped.ts_interface}'
        return mapped.ts_interface


class ZodGenerator(AbstractGenerator):
    """A generator of Zod validators for schema models."""

    formal_language = 'Zod'

    searchpaths = ['templates/zod/']

    mapping_field = 'zod_validator'

    @filter_method
    def element_validator(self, element):
        """Maps an element to its validator, without cardinality."""
        return self.mapper.map_element_type(element).zod_validator


def generate_types(schema, naming='camel'):
    """
    Generates the TypeScript declarations of a schema model.

    :param schema: the schema model or the XSD text of the schema.
    :param naming: the naming convention for the generated names.
    """
    return TypeScriptGenerator(schema, naming).render('types.ts.jinja')[0]


def generate_validators(schema, naming='camel'):
    """
    Generates the Zod validators of a schema model.

    :param schema: the schema model or the XSD text of the schema.
    :param naming: the naming convention for the generated names.
    """
    return ZodGenerator(schema, naming).render('validators.ts.jinja')[0]
