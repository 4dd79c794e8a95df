import pytest

from imaptypes.name import Name, Names


@pytest.fixture
def names():
    return Names(
        [
            Name("INBOX", "/", ["\\HasNoChildren"]),
            Name("Archive", "/", ["\\Noselect", "\\HasChildren"]),
            Name("flat"),
        ]
    )


def test_len(names):
    assert len(names) == 3


def test_iteration_preserves_order(names):
    assert [n.name for n in names] == ["INBOX", "Archive", "flat"]


def test_getitem(names):
    assert names[1].name == "Archive"
    assert names[-1].name == "flat"
    with pytest.raises(IndexError):
        names[3]


def test_get_in_range(names):
    assert names.get(0) == Name("INBOX", "/", ("\\HasNoChildren",))


def test_get_out_of_range_is_none(names):
    assert names.get(3) is None
    assert names.get(-1) is None


def test_flat_name_has_no_delimiter(names):
    flat = names.get(2)
    assert flat.delimiter is None
    assert flat.attributes == ()


def test_attributes_are_tuple():
    name = Name("INBOX", "/", ["\\Marked"])
    assert name.attributes == ("\\Marked",)


def test_empty_names():
    empty = Names()
    assert len(empty) == 0
    assert empty.get(0) is None