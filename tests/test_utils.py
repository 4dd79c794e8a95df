from imaptypes.utils import iter_join


def test_join_numbers():
    assert iter_join([1, 2, 3], ",") == "1,2,3"


def test_join_empty_is_empty_string():
    assert iter_join([], ", ") == ""


def test_join_single_item_has_no_delimiter():
    assert iter_join(["INBOX"], " ") == "INBOX"


def test_join_accepts_generators():
    words = ["a", "b", "c"]
    assert iter_join((w for w in words), "-") == "a-b-c"


def test_join_split_round_trip():
    words = ["\\Seen", "\\Flagged", "$Custom"]
    assert iter_join(words, " ").split(" ") == words