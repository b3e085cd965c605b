"""
builder.py
==========
Immutable CSS selector builder.

Each complex selector is made of compound selectors in the form::

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class parts may repeat. Compound selectors
are joined with combinators (' ', '+', '~', '>').
"""

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from selkit.exceptions import DuplicateSingletonError, OutOfOrderError
from selkit.models import KIND_TABLE, SINGLETON_KINDS, Fragment, FragmentKind

logger = logging.getLogger(__name__)


class SelectorBuilder(BaseModel):
    """Immutable sequence of selector fragments.

    Every mutator validates against the current sequence and returns a new
    builder; the receiver is never changed.

    Example:
        >>> builder = SelectorBuilder()
        >>> builder.id('main').class_('container').class_('editable').stringify()
        '#main.container.editable'

    """

    model_config = ConfigDict(frozen=True)

    fragments: tuple[Fragment, ...] = Field(default=(), description='Fragments in render order')

    def element(self, value: str) -> 'SelectorBuilder':
        """Append a type selector (``div``)."""
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> 'SelectorBuilder':
        """Append an id selector (``#main``)."""
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> 'SelectorBuilder':
        """Append a class selector (``.container``)."""
        return self._add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> 'SelectorBuilder':
        """Append an attribute selector (``[href$=".png"]``)."""
        return self._add(FragmentKind.ATTR, value)

    def pseudo_class(self, value: str) -> 'SelectorBuilder':
        """Append a pseudo-class selector (``:focus``)."""
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> 'SelectorBuilder':
        """Append a pseudo-element selector (``::before``)."""
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(self, left: 'SelectorBuilder', combinator: str, right: 'SelectorBuilder') -> 'SelectorBuilder':
        """Join two selectors with a combinator.

        The receiver's own fragments are not used; it only acts as the entry
        point. The combinator symbol is inserted verbatim and rendered with a
        space on each side.

        Args:
            left: Selector placed before the combinator
            combinator: Combinator symbol, usually one of ' ', '+', '~', '>'
            right: Selector placed after the combinator

        Returns:
            New builder holding left, combinator and right fragments.

        """
        joint = Fragment(kind=FragmentKind.COMBINATOR, value=combinator)
        return SelectorBuilder(fragments=(*left.fragments, joint, *right.fragments))

    def stringify(self) -> str:
        """Render the selector as CSS text."""
        return ''.join(fragment.render() for fragment in self.fragments)

    def _check(self, kind: FragmentKind) -> None:
        """Validate that a fragment of ``kind`` may be appended.

        Raises:
            DuplicateSingletonError: If ``kind`` is a singleton kind already present.
            OutOfOrderError: If the last fragment outranks ``kind``.

        """
        if kind in SINGLETON_KINDS and any(fragment.kind is kind for fragment in self.fragments):
            logger.debug("Rejected duplicate %s in '%s'", kind.value, self)
            raise DuplicateSingletonError(kind.value)

        if not self.fragments:
            return

        last = self.fragments[-1]
        new_order = KIND_TABLE[kind].order
        # Combinators carry no rank and reset ordering for the next compound
        if last.order is not None and new_order is not None and last.order > new_order:
            logger.debug("Rejected %s after %s in '%s'", kind.value, last.kind.value, self)
            raise OutOfOrderError(kind.value, last.kind.value)

    def _add(self, kind: FragmentKind, value: str) -> 'SelectorBuilder':
        self._check(kind)
        return SelectorBuilder(fragments=(*self.fragments, Fragment(kind=kind, value=value)))

    def __str__(self) -> str:
        return self.stringify()

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:  # type: ignore[override]
        return iter(self.fragments)

    def __bool__(self) -> bool:
        # An empty builder is still a usable seed
        return True
