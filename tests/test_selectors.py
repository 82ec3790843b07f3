import pytest

from csswright.selectors import (
    Category,
    Combinator,
    DuplicateSelectorPart,
    SelectorBuilder,
    SelectorError,
    SelectorOrderViolation,
    attr,
    builder,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from csswright.utils import BuildError


def test_id_with_classes():
    assert id("main").add_class("container").add_class("editable").render() == "#main.container.editable"


def test_element_with_attribute_and_pseudo_class():
    assert element("a").add_attribute('href$=".png"').add_pseudo_class("focus").render() == 'a[href$=".png"]:focus'


def test_every_category_in_order():
    selector = (
        element("input")
        .set_id("name")
        .add_class("wide")
        .add_class("required")
        .add_attribute("type=text")
        .add_attribute("data-x")
        .add_pseudo_class("focus")
        .add_pseudo_class("hover")
        .set_pseudo_element("placeholder")
    )
    assert selector.render() == "input#name.wide.required[type=text][data-x]:focus:hover::placeholder"


def test_aliases_match_the_entry_point_names():
    selector = element("li").id("first").class_("item").attr("lang").pseudo_class("first-child").pseudo_element("marker")
    assert selector.stringify() == "li#first.item[lang]:first-child::marker"


@pytest.mark.parametrize(
    "factory, argument, expected",
    [
        (element, "p", "p"),
        (id, "top", "#top"),
        (class_, "note", ".note"),
        (attr, 'href$=".png"', '[href$=".png"]'),
        (pseudo_class, "nth-of-type(even)", ":nth-of-type(even)"),
        (pseudo_element, "after", "::after"),
    ],
)
def test_entry_points(factory, argument: str, expected: str):
    assert factory(argument).render() == expected


def test_empty_builder_renders_empty_string():
    assert SelectorBuilder().render() == ""


def test_render_resets_the_builder():
    selector = element("div").add_class("box")
    assert selector.render() == "div.box"
    assert selector.render() == ""


def test_builder_is_reusable_after_render():
    selector = element("div").set_id("main")
    selector.render()
    assert selector.set_element("span").set_id("main").render() == "span#main"


@pytest.mark.parametrize(
    "operation",
    ["set_element", "set_id", "set_pseudo_element"],
)
def test_singular_category_twice_is_rejected(operation: str):
    selector = SelectorBuilder()
    getattr(selector, operation)("x")
    with pytest.raises(DuplicateSelectorPart) as excinfo:
        getattr(selector, operation)("y")
    assert str(excinfo.value) == DuplicateSelectorPart.message


def test_duplicate_error_records_category():
    with pytest.raises(DuplicateSelectorPart) as excinfo:
        element("div").set_element("span")
    assert excinfo.value.category is Category.ELEMENT


def test_class_after_attribute_is_rejected():
    with pytest.raises(SelectorOrderViolation) as excinfo:
        element("a").add_attribute("href").add_class("link")
    assert excinfo.value.category is Category.CLASS
    assert str(excinfo.value) == SelectorOrderViolation.message


def test_class_before_attribute_is_accepted():
    assert element("a").add_class("link").add_attribute("href").render() == "a.link[href]"


@pytest.mark.parametrize(
    "chain",
    [
        lambda: id("main").set_element("div"),
        lambda: class_("a").set_id("b"),
        lambda: pseudo_class("focus").add_attribute("href"),
        lambda: pseudo_element("after").add_pseudo_class("hover"),
        lambda: pseudo_element("after").set_element("p"),
        lambda: attr("href").add_class("x").add_attribute("y"),
    ],
)
def test_out_of_order_fragments_are_rejected(chain):
    with pytest.raises(SelectorOrderViolation):
        chain()


def test_uniqueness_is_checked_before_order():
    with pytest.raises(DuplicateSelectorPart):
        element("div").add_class("x").set_element("span")


def test_errors_share_a_base_class():
    assert issubclass(DuplicateSelectorPart, SelectorError)
    assert issubclass(SelectorOrderViolation, SelectorError)
    assert issubclass(SelectorError, BuildError)


def test_attribute_expression_is_used_verbatim():
    assert attr('href$=".png"').render() == '[href$=".png"]'
    assert attr("data-a='x]y'").render() == "[data-a='x]y']"


def test_combine_two_selectors():
    selector = combine(element("div").set_id("main"), "+", element("table").set_id("data"))
    assert selector.render() == "div#main + table#data"


def test_combine_matches_rendered_operands():
    assert combine(element("ul"), "~", class_("x").add_class("y")).render() == "ul ~ .x.y"


def test_combine_pads_combinator_regardless_of_content():
    assert combine(element("div"), " ", element("p")).render() == "div   p"
    assert combine(element("div"), Combinator.CHILD, element("p")).render() == "div > p"


def test_nested_combination():
    selector = combine(
        element("div").set_id("main").add_class("container").add_class("draggable"),
        "+",
        combine(
            element("table").set_id("data"),
            "~",
            combine(
                element("tr").add_pseudo_class("nth-of-type(even)"),
                " ",
                element("td").add_pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    assert selector.render() == "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"


def test_combine_resets_operands_and_result():
    first, second = element("h1"), element("p")
    selector = combine(first, Combinator.NEXT_SIBLING, second)
    assert first.render() == ""
    assert second.render() == ""
    assert selector.render() == "h1 + p"
    assert selector.render() == ""


def test_combined_selector_takes_precedence_over_fragments():
    selector = element("div").combine(element("a"), ">", element("b"))
    assert selector.render() == "a > b"
    assert selector.render() == ""


def test_combinator_members_are_tokens():
    assert [str(combinator) for combinator in Combinator] == [" ", ">", "+", "~"]


def test_category_order():
    assert [category.position for category in Category] == list(range(6))
    assert list(Category.CLASS.successors()) == [Category.ATTRIBUTE, Category.PSEUDO_CLASS, Category.PSEUDO_ELEMENT]
    assert list(Category.PSEUDO_ELEMENT.successors()) == []


def test_facade_entry_points():
    assert builder.element("a").render() == "a"
    assert builder.id("main").render() == "#main"
    assert getattr(builder, "class")("x").render() == ".x"
    assert builder.attr("href").render() == "[href]"
    assert builder.pseudo_class("hover").render() == ":hover"
    assert builder.pseudo_element("before").render() == "::before"
    assert builder.combine(builder.element("a"), ">", builder.element("b")).stringify() == "a > b"


def test_facade_unknown_attribute():
    with pytest.raises(AttributeError):
        getattr(builder, "selector")


def test_facade_creates_a_new_builder_per_call():
    first = builder.element("a")
    second = builder.element("b")
    assert first is not second
    assert first.render() == "a"
    assert second.render() == "b"


def test_builder_resolves_class_by_name():
    selector = getattr(id("main"), "class")("container")
    assert getattr(selector, "class")("editable").render() == "#main.container.editable"


def test_builder_unknown_attribute():
    with pytest.raises(AttributeError):
        getattr(element("a"), "selector")


def test_empty_element_counts_as_present():
    selector = element("")
    with pytest.raises(DuplicateSelectorPart):
        selector.set_element("div")


def test_empty_element_renders_nothing():
    assert element("").add_class("x").render() == ".x"


def test_repr_shows_fragments_and_combined_text():
    selector = element("a").add_class("x")
    assert repr(selector) == (
        "SelectorBuilder(fragments=Fragments(element='a', id=None, classes=['.x'], attributes=None, "
        "pseudo_classes=None, pseudo_element=None), combined=None)"
    )
    assert "combined='a > b'" in repr(combine(element("a"), ">", element("b")))
