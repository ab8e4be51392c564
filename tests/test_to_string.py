from collections import deque

import pytest

from ambit.to_string import Brackets, ToStringHelper, ToStringStyle, canonical_text, to_string


class Outer:
    class Inner:
        pass


@pytest.fixture
def helper() -> ToStringHelper:
    return ToStringHelper.create("Name")


def test_empty_helper_renders_name_and_brackets():
    assert ToStringHelper.create("X").render() == "X()"
    assert ToStringHelper().render() == "()"


def test_default_style():
    assert ToStringHelper("X").style == ToStringStyle(Brackets.ROUND, False, "=", ", ")


def test_null_values_are_included_by_default(helper):
    assert helper.add("a", 1).add("b", None).render() == "Name(a=1, b=null)"


def test_null_values_can_be_omitted(helper):
    helper.add("a", 1).add("b", None).omit_null_values()

    assert helper.render() == "Name(a=1)"


def test_omitted_entries_leave_no_stray_separator(helper):
    helper.add("a", None).add_value(1).add("b", None).add("c", 2).add("d", None)

    assert helper.omit_null_values().render() == "Name(1, c=2)"


def test_all_entries_omitted_renders_like_empty(helper):
    helper.add("a", None).add_value(None).omit_null_values()

    assert helper.render() == "Name()"


def test_later_setting_overrides_earlier(helper):
    helper.add("a", None).omit_null_values().omit_null_values(False)

    assert helper.render() == "Name(a=null)"


def test_values_with_commas_or_spaces_are_quoted(helper):
    helper.add("k", "x,y").add("s", "a b").add("plain", "ab")

    assert helper.render() == "Name(k='x,y', s='a b', plain=ab)"


def test_values_without_key(helper):
    assert helper.add_value("v").add("k", 1).render() == "Name(v, k=1)"


def test_add_first_prepends_in_reverse_call_order():
    helper = ToStringHelper.create("Name").add("a", 1).add_first("b", 2).add_first("c", 3)

    assert helper.render() == "Name(c=3, b=2, a=1)"


def test_interleaved_add_and_add_first_keep_both_ends():
    helper = ToStringHelper("Name").add_first_value("x").add("a", 1).add_first("b", 2).add("c", 3)

    assert helper.render() == "Name(b=2, x, a=1, c=3)"
    assert len(helper) == 4


def test_render_is_repeatable(helper):
    helper.add("a", [1, 2]).add("b", None)

    assert helper.render() == helper.render() == str(helper)


def test_brackets_change_only_the_enclosing_brackets(helper):
    helper.add("a", 1).add_value("v")
    round_form = helper.render()

    assert helper.brackets(Brackets.SQUARE).render() == "Name[a=1, v]"
    assert helper.brackets(Brackets.CURLY).render() == "Name{a=1, v}"
    assert round_form == "Name(a=1, v)"


def test_custom_separators(helper):
    helper.add("a", 1).add("b", 2).entry_separator(";").name_value_separator(":")

    assert helper.render() == "Name(a:1;b:2)"


def test_setitem_adds_an_entry(helper):
    helper["a"] = 1
    helper["b"] = "two"

    assert helper.render() == "Name(a=1, b=two)"


def test_call_applies_a_function(helper):
    assert helper(lambda h: h.add("a", 1)) is helper
    assert helper.render() == "Name(a=1)"


def test_collections_use_their_own_canonical_form(helper):
    helper.add("list", [1, 2]).add("set", {3}).add("empty", ()).add("nested", [[1], deque(["a"])])

    assert helper.render() == "Name(list='[1, 2]', set=[3], empty=[], nested='[[1], [a]]')"


def test_nested_collections_ignore_the_helper_style(helper):
    helper.entry_separator(";").brackets(Brackets.CURLY).add("xs", ["a", "b"])

    assert helper.render() == "Name{xs='[a, b]'}"


def test_canonical_text():
    assert canonical_text(None) == "null"
    assert canonical_text(True) == "true"
    assert canonical_text(1.5) == "1.5"
    assert canonical_text("text") == "text"
    assert canonical_text((1, None, False)) == "[1, null, false]"
    assert canonical_text({"k": [1, 2], "n": None}) == "{k=[1, 2], n=null}"
    assert canonical_text(range(3)) == "[0, 1, 2]"


def test_canonical_text_of_self_referencing_collection():
    items = [1]
    items.append(items)

    assert canonical_text(items) == "[1, (this collection)]"


def test_create_from_class_and_instance():
    assert ToStringHelper.create(Outer.Inner).render() == "Outer.Inner()"
    assert ToStringHelper.create(Outer()).render() == "Outer()"


def test_create_from_local_class_drops_the_function_scope():
    class Local:
        pass

    assert ToStringHelper.create(Local).name == "Local"


def test_to_string_in_repr():
    class Point:
        def __init__(self, x, y):
            self.x = x
            self.y = y

        def __repr__(self):
            return to_string(self, lambda h: h.add("x", self.x).add("y", self.y))

    assert repr(Point(1, None)) == "Point(x=1, y=null)"
