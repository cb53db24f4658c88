"""Tests for Page."""

import pytest

from fauna_values import ErrorKind, InvalidValue, Page, Ref


def test_from_raw(spell_ref):
    page = Page.from_raw({"data": [1, 2, 3], "after": spell_ref})

    assert page.data == (1, 2, 3)
    assert page.before is None
    assert page.after is spell_ref


def test_from_raw_without_cursors():
    page = Page.from_raw({"data": []})

    assert page.data == ()
    assert page.before is None
    assert page.after is None


def test_data_is_tuple():
    assert Page(data=["a", "b"]).data == ("a", "b")


def test_map_data():
    before = Ref.from_parts("classes", "spells", "1")
    after = Ref.from_parts("classes", "spells", "9")
    page = Page(data=[1, 2, 3], before=before, after=after)

    mapped = page.map_data(lambda x: x * 10)

    assert mapped.data == (10, 20, 30)
    assert mapped.before is before
    assert mapped.after is after
    assert page.data == (1, 2, 3)


def test_map_data_calls_once_in_order():
    seen = []

    def record(item):
        seen.append(item)
        return str(item)

    mapped = Page(data=[3, 1, 2]).map_data(record)

    assert seen == [3, 1, 2]
    assert mapped.data == ("3", "1", "2")


def test_map_data_decodes_raw_elements():
    page = Page.from_raw({"data": ["classes/spells/1", "classes/spells/2"]})

    refs = page.map_data(lambda value: Ref(value=value))

    assert [ref.id for ref in refs.data] == ["1", "2"]


def test_to_wire_omits_missing_cursors(spell_ref):
    page = Page(data=[spell_ref], after="opaque-cursor")

    assert page.to_wire() == {"data": (spell_ref,), "after": "opaque-cursor"}


def test_data_cannot_be_mutated():
    page = Page(data=[1])

    with pytest.raises(AttributeError):
        page.data.append(2)  # type: ignore[attr-defined]

    assert page.data == (1,)


def test_hashable_with_hashable_data(spell_ref):
    assert hash(Page(data=[spell_ref])) == hash(Page(data=(spell_ref,)))


@pytest.mark.parametrize("data", [5, None, "abc", {"a": 1}])
def test_non_sequence_data(data):
    with pytest.raises(InvalidValue) as exc_info:
        Page(data=data)

    assert exc_info.value.kind == ErrorKind.INVALID_VALUE


def test_from_raw_non_sequence_data():
    with pytest.raises(InvalidValue):
        Page.from_raw({"data": None})
