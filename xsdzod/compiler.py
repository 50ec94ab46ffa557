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
This module contains the functions for compiling XSD files to TypeScript files.
"""
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import XsdZodResourceError
from .codegen import TypeScriptGenerator, ZodGenerator
from .schema import parse_xsd
from .settings import CompileSettings
from .translation import gettext as _
from .utils.logger import logger, logged

TYPES_TEMPLATE = 'types.ts.jinja'
VALIDATORS_TEMPLATE = 'validators.ts.jinja'


def iter_xsd_files(path: Union[str, 'os.PathLike[str]']) -> Iterator[Path]:
    """
    Iterates the XSD files of a path. A file is yielded if it has an .xsd
    extension, a directory is walked recursively in sorted order.
    """
    path = Path(path)
    if path.is_file():
        if path.suffix.lower() == '.xsd':
            yield path
    elif path.is_dir():
        for child in sorted(path.iterdir()):
            yield from iter_xsd_files(child)


@logged
def compile_xsd(settings: Any = None,
                loglevel: Optional[Union[str, int]] = None,
                **kwargs: Any) -> dict[Path, list[Path]]:
    """
    Compiles XSD files to TypeScript types and Zod validators.

    :param settings: a `CompileSettings` instance or a mapping with the \
    options. Options can be provided also with keyword arguments.
    :param loglevel: for setting a different logging level for the compilation.
    :return: a dictionary that maps each XSD file to the files written.
    :raises XsdZodResourceError: if no XSD file is found.
    """
    if settings is None:
        settings = CompileSettings.from_options(kwargs)
    else:
        settings = CompileSettings.from_options(settings)

    xsd_files = list(iter_xsd_files(settings.input))
    if not xsd_files:
        msg = _("No XSD files found in {}")
        raise XsdZodResourceError(msg.format(os.fspath(settings.input)))

    output_dir = Path(settings.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    results = {}
    for xsd_file in xsd_files:
        logger.info("compile file %r", str(xsd_file))
        schema = parse_xsd(xsd_file.read_text(encoding='utf-8'))
        types_generator = TypeScriptGenerator(schema, settings.naming)
        validators_generator = ZodGenerator(schema, settings.naming)
        basename = xsd_file.stem

        if settings.separate:
            written = types_generator.render_to_files(
                TYPES_TEMPLATE, output_dir=output_dir, force=True, basename=basename
            )
            written.extend(validators_generator.render_to_files(
                VALIDATORS_TEMPLATE, output_dir=output_dir, force=True, basename=basename
            ))
            results[xsd_file] = [Path(x) for x in written]
        else:
            types = types_generator.render(TYPES_TEMPLATE)[0]
            validators = validators_generator.render(VALIDATORS_TEMPLATE)[0]

            output_file = output_dir.joinpath(f'{basename}.ts')
            logger.info("write file %r", str(output_file))
            output_file.write_text(f'{types}\n\n{validators}', encoding='utf-8')
            results[xsd_file] = [output_file]

    return results
