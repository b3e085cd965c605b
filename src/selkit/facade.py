"""Stateless entry point for building selectors.

Every function starts from the empty seed builder, so callers never need to
instantiate :class:`SelectorBuilder` themselves::

    >>> from selkit import facade
    >>> facade.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

from selkit.builder import SelectorBuilder

css_selector_builder = SelectorBuilder()


def element(value: str) -> SelectorBuilder:
    """Start a selector with a type selector."""
    return css_selector_builder.element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    """Start a selector with an id selector."""
    return css_selector_builder.id(value)


def class_(value: str) -> SelectorBuilder:
    """Start a selector with a class selector."""
    return css_selector_builder.class_(value)


def attr(value: str) -> SelectorBuilder:
    """Start a selector with an attribute selector."""
    return css_selector_builder.attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-class selector."""
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-element selector."""
    return css_selector_builder.pseudo_element(value)


def combine(left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
    """Join two selectors with a combinator."""
    return css_selector_builder.combine(left, combinator, right)
