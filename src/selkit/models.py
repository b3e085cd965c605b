"""Pydantic models for selector fragments and the kind lookup table."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FragmentKind(str, Enum):
    """Kinds of atoms a selector can be built from."""

    ELEMENT = 'element'
    ID = 'id'
    CLASS = 'class'
    ATTR = 'attr'
    PSEUDO_CLASS = 'pseudo_class'
    PSEUDO_ELEMENT = 'pseudo_element'
    COMBINATOR = 'combinator'


@dataclass(frozen=True)
class KindSpec:
    """Rendering and ordering metadata for one fragment kind.

    Attributes:
        prefix: Text emitted before the fragment value
        suffix: Text emitted after the fragment value
        order: Rank inside a compound selector, or None for combinators

    """

    prefix: str
    suffix: str
    order: int | None


KIND_TABLE: dict[FragmentKind, KindSpec] = {
    FragmentKind.ELEMENT: KindSpec('', '', 1),
    FragmentKind.ID: KindSpec('#', '', 2),
    FragmentKind.CLASS: KindSpec('.', '', 3),
    FragmentKind.ATTR: KindSpec('[', ']', 4),
    FragmentKind.PSEUDO_CLASS: KindSpec(':', '', 5),
    FragmentKind.PSEUDO_ELEMENT: KindSpec('::', '', 6),
    FragmentKind.COMBINATOR: KindSpec(' ', ' ', None),
}

# At most one of each per selector
SINGLETON_KINDS = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})


class Fragment(BaseModel):
    """A single selector atom.

    Attributes:
        kind: What the atom is (element, id, class, ...)
        value: Literal text supplied by the caller, or the combinator symbol

    """

    model_config = ConfigDict(frozen=True)

    kind: FragmentKind = Field(description='Fragment kind')
    value: str = Field(description='Literal fragment text')

    @property
    def spec(self) -> KindSpec:
        """Rendering and ordering metadata for this kind."""
        return KIND_TABLE[self.kind]

    @property
    def order(self) -> int | None:
        """Rank inside a compound selector, None for combinators."""
        return self.spec.order

    @property
    def is_combinator(self) -> bool:
        """Whether this fragment joins two compound selectors."""
        return self.kind is FragmentKind.COMBINATOR

    def render(self) -> str:
        """Return the fragment text wrapped in its kind delimiters."""
        return f'{self.spec.prefix}{self.value}{self.spec.suffix}'
