"""Set of constructs to aid the rest of the package, of both the package-specific and the general kind that would otherwise be repeated in the modules that need them."""

from collections.abc import Iterable

def public_attrs(obj: object) -> Iterable[str]:
    """Return the names of the object's own public attributes.

    In this context, a public attribute is any whose name doesn't start with an underscore (`_`). Only attributes stored on the object itself (its `__dict__`) are considered, so methods and other attributes inherited from the object's class are not featured.
    """
    return (name for name in vars(obj) if not name.startswith('_'))

def join(iterable: Iterable[str]) -> str:
    """Join a sequence into a string."""
    return ''.join(iterable)

def qualified_type_name(cls: type) -> str:
    """A stable (no reliance on "dunder" property) means to obtain the qualified name for a type."""
    return cls.__qualname__

def setattrs(obj: object, **kwargs) -> None:
    """Set multiple attributes on an object."""
    for attr in kwargs.items():
        setattr(obj, *attr)

class BuildError(RuntimeError):
    """A [catch-all] class of errors that occur during or otherwise related to building of values with this package."""
    pass
