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
Translation of the error and diagnostic messages of xsd-zod. The catalogs
shipped with the package are in the *locale* subdirectory, one for each
language, compiled from the PO files of the `xsdzod` domain.
"""
from typing import cast, Any, Iterable, Optional, Union
import gettext as _gettext
from pathlib import Path

__all__ = ['TRANSLATION_DOMAIN', 'LOCALE_DIR', 'available_languages',
           'activate', 'deactivate', 'gettext']

TRANSLATION_DOMAIN = 'xsdzod'
LOCALE_DIR = Path(__file__).parent.joinpath('locale')

_translation: Any = None
_installed: bool = False


def available_languages(localedir: Union[None, str, Path] = None) -> list[str]:
    """Returns the sorted language codes of the compiled catalogs of a locale directory."""
    path = LOCALE_DIR if localedir is None else Path(localedir)
    pattern = f'*/LC_MESSAGES/{TRANSLATION_DOMAIN}.mo'
    return sorted(x.parent.parent.name for x in path.glob(pattern))


def activate(localedir: Union[None, str, Path] = None,
             languages: Optional[Iterable[str]] = None,
             fallback: bool = True,
             install: bool = False) -> None:
    """
    Activate translation of xsd-zod error and diagnostic messages.

    :param localedir: a string or Path-like object to locale directory, \
    for default the catalogs shipped with the package are used.
    :param languages: list of language codes, for default the language \
    is taken from the environment variables LANGUAGE, LC_ALL, LC_MESSAGES \
    and LANG.
    :param fallback: for default fallback mode is activated, so the \
    messages are untranslated if no catalog is found for the languages.
    :param install: if `True` installs function _() in Python’s builtins namespace
    """
    global _translation
    global _installed

    translation = _gettext.translation(
        domain=TRANSLATION_DOMAIN,
        localedir=LOCALE_DIR if localedir is None else localedir,
        languages=list(languages) if languages is not None else None,
        fallback=fallback,
    )

    deactivate()

    _translation = translation
    if install:
        _translation.install()
        _installed = True


def deactivate() -> None:
    """Deactivate translation of xsd-zod error and diagnostic messages."""
    global _translation
    global _installed

    if _installed and _translation is not None:
        import builtins
        if builtins.__dict__.get('_') == _translation.gettext:
            builtins.__dict__.pop('_')

    _translation = None
    _installed = False


def gettext(message: str) -> str:
    """Returns the translation of a message, or the message itself if not translated."""
    if _translation is None:
        return message
    return cast(str, _translation.gettext(message))
