"""Building of CSS selector text from typed fragments, alongside a couple of small value-object utilities (a rectangle factory and JSON (de)serialization helpers).

The selector builder is the principal feature of the package, see `csswright.selectors`.
"""

from .selectors import builder, Combinator, DuplicateSelectorPart, SelectorBuilder, SelectorError, SelectorOrderViolation
from .serialization import from_json, to_json
from .shapes import Rectangle, rectangle
from .utils import BuildError
