#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import os
from collections.abc import Callable, Iterable
from functools import partial
from typing import Any, cast, Generic, Optional, TypeVar, Union

from xsdzod.exceptions import XsdZodTypeError, XsdZodValueError, XsdZodAttributeError
from xsdzod.naming import NAMING_CONVENTIONS
from xsdzod.translation import gettext as _

T = TypeVar('T')


class Argument(Generic[T]):
    """
    A descriptor for positional and optional arguments. An argument can't be changed nor deleted.
    Arguments are validated with a sequence of validation functions tha are called by the base
    *validated_value* method.
    """
    __slots__ = ('_name', '_default')

    _default: T
    _validators: tuple[Callable[['Argument[T]', T], None], ...] = ()

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'

    def __str__(self) -> str:
        if hasattr(self, '_default'):
            return _('optional argument {!r}').format(self._name[1:])
        return _('argument {!r}').format(self._name[1:])

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            try:
                return self._default
            except AttributeError:
                if instance is None:
                    msg = _("{} can't be accessed from {!r}").format(self, owner)
                else:
                    msg = _("{} of {!r} object has not been set").format(self, instance)
                raise XsdZodAttributeError(msg) from None

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name):
            raise XsdZodAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise XsdZodAttributeError(_("can't delete {}").format(self))

    def validated_value(self, value: Any) -> T:
        for validator in self._validators:
            validator(self, value)
        return cast(T, value)


class Option(Argument[T]):
    """
    A descriptor for handling optional arguments.

    :param default: The default value for the optional argument.
    """
    def __init__(self, *, default: T) -> None:
        self._default = default


###
# Validation helpers for arguments and options

def validate_type(attr: Argument[T], value: T,
                  types: Union[type[T], tuple[type[T], ...]]) -> None:
    if not isinstance(value, types):
        msg = _("invalid type {!r} for {}, must be a {!r}")
        raise XsdZodTypeError(msg.format(type(value), attr, types))


def validate_choice(attr: Argument[T], value: T, choices: Iterable[T],
                    message: Optional[str] = None) -> None:
    if value not in choices:
        if message is None:
            msg = _("invalid value {!r} for {}: must be one of {}")
            raise XsdZodValueError(msg.format(value, attr, tuple(choices)))
        raise XsdZodValueError(message.format(value))


def validate_path(attr: Argument[T], value: T, message: str) -> None:
    if not value or not isinstance(value, (str, os.PathLike)) or not os.fspath(value):
        raise XsdZodValueError(message)


bool_validator = partial(validate_type, types=bool)


class BooleanOption(Option[bool]):
    _validators = (bool_validator,)


class PathArgument(Argument[Union[str, 'os.PathLike[str]']]):
    """A descriptor for a required path, that must be a non-empty string or path-like object."""
    __slots__ = ('_message',)

    def __init__(self, message: Optional[str] = None) -> None:
        self._message = message

    def validated_value(self, value: Any) -> Union[str, 'os.PathLike[str]']:
        if self._message is None:
            validate_path(self, value, _("{} is required").format(self))
        else:
            validate_path(self, value, _(self._message))
        return cast(Union[str, 'os.PathLike[str]'], value)


class NamingOption(Option[str]):
    def validated_value(self, value: Any) -> str:
        validate_choice(self, value, NAMING_CONVENTIONS, _("Invalid naming convention: {}"))
        return cast(str, value)
