"""Assemble selectors from flat ``kind=value`` token lists."""

import logfire

from selkit.builder import SelectorBuilder
from selkit.exceptions import AssemblyError
from selkit.facade import css_selector_builder
from selkit.models import Fragment, FragmentKind

# Accepted spellings for each kind on the command line
KIND_ALIASES: dict[str, FragmentKind] = {
    'element': FragmentKind.ELEMENT,
    'id': FragmentKind.ID,
    'class': FragmentKind.CLASS,
    'attr': FragmentKind.ATTR,
    'pseudo_class': FragmentKind.PSEUDO_CLASS,
    'pseudo-class': FragmentKind.PSEUDO_CLASS,
    'pseudoClass': FragmentKind.PSEUDO_CLASS,
    'pseudo_element': FragmentKind.PSEUDO_ELEMENT,
    'pseudo-element': FragmentKind.PSEUDO_ELEMENT,
    'pseudoElement': FragmentKind.PSEUDO_ELEMENT,
}

_APPENDERS = {
    FragmentKind.ELEMENT: SelectorBuilder.element,
    FragmentKind.ID: SelectorBuilder.id,
    FragmentKind.CLASS: SelectorBuilder.class_,
    FragmentKind.ATTR: SelectorBuilder.attr,
    FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


def parse_token(token: str) -> Fragment:
    """Turn one command-line token into a fragment.

    ``kind=value`` tokens with a known kind become fragments of that kind,
    split on the first ``=`` so attribute values may contain more of them.
    Anything else is taken verbatim as a combinator symbol.

    Args:
        token: Raw token, e.g. ``'id=main'``, ``'attr=href$=".png"'`` or ``'>'``

    Returns:
        The parsed fragment.

    """
    name, sep, value = token.partition('=')
    if sep and name in KIND_ALIASES:
        return Fragment(kind=KIND_ALIASES[name], value=value)
    return Fragment(kind=FragmentKind.COMBINATOR, value=token)


def _build_segment(fragments: list[Fragment]) -> SelectorBuilder:
    builder = css_selector_builder
    for fragment in fragments:
        builder = _APPENDERS[fragment.kind](builder, fragment.value)
    return builder


def _split_segments(tokens: list[str]) -> tuple[list[list[Fragment]], list[str]]:
    """Split tokens into compound segments and the combinators between them."""
    segments: list[list[Fragment]] = [[]]
    combinators: list[str] = []

    for token in tokens:
        fragment = parse_token(token)
        if fragment.is_combinator:
            if not segments[-1]:
                raise AssemblyError(tokens, f'combinator {token!r} has no selector on its left')
            combinators.append(fragment.value)
            segments.append([])
        else:
            segments[-1].append(fragment)

    if not segments[-1]:
        raise AssemblyError(tokens, 'selector ends with a combinator')

    return segments, combinators


def assemble(tokens: list[str]) -> SelectorBuilder:
    """Build a selector from a token list.

    Each compound segment is built by chaining the per-kind constructors, so
    ordering and uniqueness rules apply exactly as for direct calls. Segments
    are then joined left to right with :meth:`SelectorBuilder.combine`.

    Args:
        tokens: Tokens such as ``['element=div', 'id=main', '+', 'element=table']``

    Returns:
        The assembled builder.

    Raises:
        AssemblyError: If the token list is empty or a combinator lacks a neighbour.
        ValidationError: If a segment breaks ordering or uniqueness rules.

    """
    if not tokens:
        raise AssemblyError(tokens, 'no tokens given')

    with logfire.span('assemble_selector', token_count=len(tokens)):
        segments, combinators = _split_segments(tokens)

        result = _build_segment(segments[0])
        for combinator, segment in zip(combinators, segments[1:], strict=True):
            result = css_selector_builder.combine(result, combinator, _build_segment(segment))

        logfire.info('Selector assembled', selector=result.stringify(), segments=len(segments))
        return result
