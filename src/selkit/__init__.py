"""
selkit - Immutable CSS selector builder
=======================================

Build CSS selectors from typed fragments with ordering and uniqueness checks.

Main Components:
    - SelectorBuilder: immutable fragment sequence with per-kind constructors
    - facade functions: element, id, class_, attr, pseudo_class, pseudo_element, combine
    - assemble: build a selector from ``kind=value`` tokens
    - Rectangle, get_json, from_json: small data helpers

Example:
    >>> from selkit import combine, element
    >>> combine(element('div').id('main'), '+', element('table').id('data')).stringify()
    'div#main + table#data'
"""

__version__ = '0.1.0'

from selkit.assembly import assemble, parse_token
from selkit.builder import SelectorBuilder
from selkit.exceptions import (
    AssemblyError,
    DecodeError,
    DuplicateSingletonError,
    OutOfOrderError,
    SelkitError,
    ValidationError,
)
from selkit.facade import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selkit.models import KIND_TABLE, Fragment, FragmentKind, KindSpec
from selkit.objects import Rectangle, from_json, get_json

__all__ = [
    # Builder
    'SelectorBuilder',
    'css_selector_builder',
    'element',
    'id',
    'class_',
    'attr',
    'pseudo_class',
    'pseudo_element',
    'combine',
    'assemble',
    'parse_token',
    # Models
    'Fragment',
    'FragmentKind',
    'KindSpec',
    'KIND_TABLE',
    # Helpers
    'Rectangle',
    'get_json',
    'from_json',
    # Exceptions
    'SelkitError',
    'ValidationError',
    'DuplicateSingletonError',
    'OutOfOrderError',
    'AssemblyError',
    'DecodeError',
]
