#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import dataclasses as dc
from collections.abc import Mapping
from typing import Any

from xsdzod.arguments import BooleanOption, NamingOption, PathArgument
from xsdzod.exceptions import XsdZodTypeError
from xsdzod.translation import gettext as _


@dc.dataclass
class CompileSettings:
    """Settings for compiling XSD files to TypeScript types and Zod validators."""

    input: PathArgument = PathArgument("Input path is required")
    """The path of an XSD file or of a directory that contains XSD files."""

    output: PathArgument = PathArgument("Output path is required")
    """The directory where the generated files are written."""

    naming: NamingOption = NamingOption(default='camel')
    """
    The naming convention for the generated field names, can be 'camel',
    'pascal', 'kebab' or 'original'. Type names are PascalCase unless
    the original names are kept.
    """

    separate: BooleanOption = BooleanOption(default=True)
    """
    If `True` the types and the validators are written to separate
    files, otherwise a single combined file is written for each XSD file.
    """

    @classmethod
    def from_options(cls, options: Any) -> 'CompileSettings':
        """Creates settings from a mapping, or from settings, filling missing required options."""
        if isinstance(options, cls):
            return options
        elif not isinstance(options, Mapping):
            msg = _("invalid type {!r} for options, must be a mapping")
            raise XsdZodTypeError(msg.format(type(options)))

        kwargs = {f.name: options[f.name] for f in dc.fields(cls) if f.name in options}
        kwargs.setdefault('input', '')
        kwargs.setdefault('output', '')
        return cls(**kwargs)
