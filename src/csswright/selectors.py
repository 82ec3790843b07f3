"""Building of CSS selector text out of typed fragments, aligned with the compound and complex selector syntax of [CSS Selectors Level 4](http://drafts.csswg.org/selectors-4/) (within the scope of this module simply called "Selectors").

A compound selector consists of type (element), ID, class, attribute, pseudo-class and pseudo-element selectors, in that order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\-----------/
              Can be several occurrences

The element, ID and pseudo-element parts may each occur at most once. The builder enforces both the order and the uniqueness constraints as fragments are added, raising `SelectorError` sub-type(s) when either is violated; it does _not_ parse or otherwise validate the text of each fragment -- what is given for e.g. an attribute expression is used verbatim.

Compound selectors can be combined into complex selectors with one of the four combinators (see `Combinator`), e.g. `combine(element('div'), '>', element('p'))` renders as `div > p`.

NOTE: Rendering a builder _resets_ it -- once `render` has returned the text, the builder holds no fragments and can be used as if newly created. Operands passed to `combine` are rendered (and thus reset) on the spot.
"""

from .utils import BuildError, join, qualified_type_name

from dataclasses import dataclass
from enum import auto, StrEnum

from collections.abc import Callable, Iterable
from typing import ClassVar

class Category(StrEnum):
    """The set of selector fragment kinds, declared in the order they must appear in a compound selector.

    The declaration order _is_ the canonical order -- iterating over `Category` yields the categories in the order they are rendered and in which they must be added to a builder.
    """
    ELEMENT = auto()
    ID = auto()
    CLASS = auto()
    ATTRIBUTE = auto()
    PSEUDO_CLASS = auto()
    PSEUDO_ELEMENT = auto()
    @property
    def repeatable(self) -> bool:
        """Whether a compound selector may feature more than one fragment of this category."""
        return self in (Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS)
    @property
    def affixes(self) -> tuple[str, str]:
        """The pair of strings the text of a fragment of this category is surrounded with when rendered."""
        match self:
            case Category.ELEMENT: return ('', '')
            case Category.ID: return ('#', '')
            case Category.CLASS: return ('.', '')
            case Category.ATTRIBUTE: return ('[', ']')
            case Category.PSEUDO_CLASS: return (':', '')
            case Category.PSEUDO_ELEMENT: return ('::', '')
            case _:
                raise ValueError(self)
    @property
    def position(self) -> int:
        """Zero-based position of the category in the canonical order."""
        return tuple(Category).index(self)
    def wrap(self, text: str) -> str:
        """Surround fragment text with the affixes of this category, e.g. `Category.ATTRIBUTE.wrap('href')` returns `'[href]'`."""
        prefix, suffix = self.affixes
        return prefix + text + suffix
    def successors(self) -> Iterable['Category']:
        """The categories that must _not_ be present in a builder for a fragment of this category to be added to it."""
        return tuple(Category)[self.position + 1:]

class Combinator(StrEnum):
    """The combinators permitted between two selectors of a complex selector (see http://drafts.csswg.org/selectors-4/#combinators).

    Members are strings, so these are interchangeable with the equivalent literal tokens for use with `combine`.
    """
    DESCENDANT = ' '
    CHILD = '>'
    NEXT_SIBLING = '+'
    SUBSEQUENT_SIBLING = '~'

class SelectorError(BuildError):
    """Class of errors raised when building a selector would violate the selector syntax.

    Errors of this class are fatal to the selector being built -- the state of the builder that raised it is not defined and the builder should be discarded.
    """
    message: ClassVar[str]
    category: Category # The category of the fragment that was rejected
    def __init__(self, category: Category):
        super().__init__(self.message)
        self.category = category

class DuplicateSelectorPart(SelectorError):
    """Raised when an element, ID or pseudo-element fragment is added to a builder that already has one."""
    message = 'Element, id and pseudo-element should not occur more then one time inside the selector'

class SelectorOrderViolation(SelectorError):
    """Raised when a fragment is added after a fragment of a category that must follow it."""
    message = 'Selector parts should be arranged in the following order: element, id, class, attribute, pseudo-class, pseudo-element'

@dataclass(slots=True)
class Fragments:
    """The fragments of a compound selector, one slot per category.

    A slot that is `None` means absence of the category; singular categories hold a string and repeatable categories a list of strings, in the order they were added. The stored text is already wrapped with the category affixes (see `Category.wrap`).
    """
    element: str | None = None
    id: str | None = None
    classes: list[str] | None = None
    attributes: list[str] | None = None
    pseudo_classes: list[str] | None = None
    pseudo_element: str | None = None
    def get(self, category: Category) -> str | list[str] | None:
        match category:
            case Category.ELEMENT: return self.element
            case Category.ID: return self.id
            case Category.CLASS: return self.classes
            case Category.ATTRIBUTE: return self.attributes
            case Category.PSEUDO_CLASS: return self.pseudo_classes
            case Category.PSEUDO_ELEMENT: return self.pseudo_element
            case _:
                raise ValueError(category)
    def has(self, category: Category) -> bool:
        return self.get(category) is not None
    def put(self, category: Category, text: str) -> None:
        """Store a fragment in the slot for its category, replacing the value of a singular slot or appending to a repeatable one."""
        match category:
            case Category.ELEMENT: self.element = text
            case Category.ID: self.id = text
            case Category.CLASS: self.classes = [ *(self.classes or ()), text ]
            case Category.ATTRIBUTE: self.attributes = [ *(self.attributes or ()), text ]
            case Category.PSEUDO_CLASS: self.pseudo_classes = [ *(self.pseudo_classes or ()), text ]
            case Category.PSEUDO_ELEMENT: self.pseudo_element = text
            case _:
                raise ValueError(category)
    def text(self, category: Category) -> str:
        """The rendered text of a category; repeatable fragments are concatenated with no separator, and an absent category renders as the empty string."""
        match value := self.get(category):
            case None: return ''
            case str(): return value
            case _: return join(value)

class SelectorBuilder:
    """Class of objects that accumulate selector fragments and render them into selector text.

    Fragments are added with the `set_*` (singular categories) and `add_*` (repeatable categories) methods, each of which returns the builder itself so that calls can be chained, e.g. `SelectorBuilder().set_element('a').add_pseudo_class('focus').render()` returns `'a:focus'`. Each method also goes by a shorter alias (e.g. `element` for `set_element`, `class_` for `add_class`), matching the names of the module-level entry points.

    A builder may instead hold a _combined_ selector (see `combine`), which takes precedence over any fragments when rendering next.
    """
    _fragments: Fragments
    _combined: str | None # Text of a combined selector pending rendering, if any
    def __init__(self):
        self._reset()
    def _reset(self) -> None:
        self._fragments = Fragments()
        self._combined = None
    def _add(self, category: Category, text: str) -> 'SelectorBuilder':
        """Validate and store a fragment.

        :raises DuplicateSelectorPart: if `category` is singular and already present
        :raises SelectorOrderViolation: if a category that must follow `category` is already present
        """
        if not category.repeatable and self._fragments.has(category):
            raise DuplicateSelectorPart(category)
        if any(self._fragments.has(successor) for successor in category.successors()):
            raise SelectorOrderViolation(category)
        self._fragments.put(category, category.wrap(text))
        return self
    def set_element(self, name: str) -> 'SelectorBuilder':
        """Set the type selector, e.g. `div`."""
        return self._add(Category.ELEMENT, name)
    def set_id(self, name: str) -> 'SelectorBuilder':
        """Set the ID selector; `name` is given without the leading `#`."""
        return self._add(Category.ID, name)
    def add_class(self, name: str) -> 'SelectorBuilder':
        """Add a class selector; `name` is given without the leading `.`."""
        return self._add(Category.CLASS, name)
    def add_attribute(self, expression: str) -> 'SelectorBuilder':
        """Add an attribute selector; `expression` is what goes in between the brackets, e.g. `href$=".png"`, and is used verbatim."""
        return self._add(Category.ATTRIBUTE, expression)
    def add_pseudo_class(self, name: str) -> 'SelectorBuilder':
        """Add a pseudo-class selector; `name` is given without the leading `:` and may be functional, e.g. `nth-of-type(even)`."""
        return self._add(Category.PSEUDO_CLASS, name)
    def set_pseudo_element(self, name: str) -> 'SelectorBuilder':
        """Set the pseudo-element selector; `name` is given without the leading `::`."""
        return self._add(Category.PSEUDO_ELEMENT, name)
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element
    def combine(self, first: 'SelectorBuilder', combinator: str, second: 'SelectorBuilder') -> 'SelectorBuilder':
        """Make this builder hold the combination of two selectors.

        Both operands are rendered immediately (which resets them) and joined with the combinator, which is surrounded by a single space on either side regardless of its own content -- the descendant combinator (a space) thus yields three spaces in between the operands. The result is rendered by the next call to `render` on this builder.

        :param first: The builder of the selector on the left side of the combinator
        :param combinator: The combinator token, see `Combinator`
        :param second: The builder of the selector on the right side of the combinator
        :returns: This builder
        """
        self._combined = f"{first.render()} {combinator} {second.render()}"
        return self
    def render(self) -> str:
        """Return the selector text and reset the builder.

        If the builder holds a combined selector (see `combine`), its text is returned; otherwise the text is the concatenation of all fragments in canonical order (see `Category`). Either way, the builder is left empty, so rendering it again right away returns an empty string.
        """
        if self._combined is not None:
            result = self._combined
        else:
            result = join(self._fragments.text(category) for category in Category)
        self._reset()
        return result
    stringify = render
    def __getattr__(self, name: str) -> Callable[[str], 'SelectorBuilder']:
        """Resolve the name `class`, which can't be used as an attribute name in source text, to `add_class`; e.g. `getattr(id('main'), 'class')('container')`."""
        if name == 'class':
            return self.add_class
        raise AttributeError(name)
    def __repr__(self) -> str:
        return f"{qualified_type_name(type(self))}(fragments={self._fragments!r}, combined={self._combined!r})"

# The module-level entry points; each creates a new builder, see `SelectorBuilder` for the operation each corresponds to

def element(name: str) -> SelectorBuilder:
    return SelectorBuilder().set_element(name)

def id(name: str) -> SelectorBuilder:
    return SelectorBuilder().set_id(name)

def class_(name: str) -> SelectorBuilder: # `class` is a keyword, hence the trailing underscore; see also `SelectorBuilderFacade`
    return SelectorBuilder().add_class(name)

def attr(expression: str) -> SelectorBuilder:
    return SelectorBuilder().add_attribute(expression)

def pseudo_class(name: str) -> SelectorBuilder:
    return SelectorBuilder().add_pseudo_class(name)

def pseudo_element(name: str) -> SelectorBuilder:
    return SelectorBuilder().set_pseudo_element(name)

def combine(first: SelectorBuilder, combinator: str, second: SelectorBuilder) -> SelectorBuilder:
    """Create a builder holding the combination of two selectors, see `SelectorBuilder.combine`."""
    return SelectorBuilder().combine(first, combinator, second)

class SelectorBuilderFacade:
    """Class of objects grouping the module-level entry points as attributes.

    Unlike the module, the facade (like `SelectorBuilder` itself) also answers to the name `class` (through `getattr`, as the name is a keyword), which allows code to pick an entry point by category name, e.g. `getattr(builder, category)` for every `category` in `('element', 'id', 'class')`.
    """
    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)
    def __getattr__(self, name: str) -> Callable[..., SelectorBuilder]:
        if name == 'class':
            return self.class_
        raise AttributeError(name)

builder = SelectorBuilderFacade()
