"""Rectangle-like value objects."""

from dataclasses import dataclass

@dataclass
class Rectangle:
    """Class of objects that express a rectangle by its dimensions.

    The object is plain data -- the dimensions are ordinary instance attributes, which is what makes it serialize to e.g. `{"width":10,"height":20}` with `csswright.serialization.to_json` and deserialize back with `csswright.serialization.from_json`. No validation of the dimensions is done; negative or non-numeric values are stored as given.
    """
    width: float
    height: float
    def area(self) -> float:
        return self.width * self.height

def rectangle(width: float, height: float) -> Rectangle:
    """Create a rectangle with the specified dimensions, e.g. `rectangle(10, 20).area()` returns `200`."""
    return Rectangle(width, height)
