import pytest

from imaptypes.acls import (
    Acl,
    AclEntry,
    AclModifyMode,
    AclRight,
    AclRightError,
    AclRights,
    ListRights,
    MyRights,
)


def test_acl_rights_to_string():
    rights = AclRights(
        [AclRight.LOOKUP, AclRight.READ, AclRight.SEEN, AclRight.from_char("0")]
    )
    assert str(rights) == "0lrs"


def test_str_to_acl_rights():
    rights = AclRights.from_str("lrskx0")
    assert rights == AclRights(
        [
            AclRight.LOOKUP,
            AclRight.READ,
            AclRight.SEEN,
            AclRight.CREATE_MAILBOX,
            AclRight.DELETE_MAILBOX,
            AclRight.from_char("0"),
        ]
    )


def test_str_to_acl_rights_invalid_right_character():
    with pytest.raises(AclRightError) as info:
        AclRights.from_str("l_")
    assert str(info.value) == "Rights may only be lowercase alpha numeric characters"


@pytest.mark.parametrize("value", ["L", "l r", "é"])
def test_str_to_acl_rights_rejects_other_characters(value):
    with pytest.raises(AclRightError):
        AclRights.from_str(value)


def test_acl_rights_contains():
    rights = AclRights.from_str("lrskx")
    assert "l" in rights
    assert AclRight.LOOKUP in rights
    assert "0" not in rights
    assert AclRight.from_char("0") not in rights


def test_empty_rights_string():
    rights = AclRights.from_str("")
    assert len(rights) == 0
    assert str(rights) == ""


def test_duplicates_collapse():
    rights = AclRights.from_str("llrr")
    assert len(rights) == 2
    assert str(rights) == "lr"


def test_custom_right_detection():
    assert AclRight.from_char("0").is_custom
    assert not AclRight.from_char("a").is_custom
    assert AclRight.from_char("a") == AclRight.ADMINISTER


def test_acl_right_str():
    right = AclRight.from_char("t")
    assert right == AclRight.DELETE_MESSAGE
    assert str(right) == "t"


def test_acl_right_requires_single_char():
    with pytest.raises(ValueError):
        AclRight.from_char("lr")


def test_rights_order_ignored_in_equality():
    assert AclRights.from_str("lrp") == AclRights.from_str("plr")


def test_response_types_hold_values():
    rights = AclRights.from_str("lr")
    acl = Acl("INBOX", [AclEntry("user@example.com", rights)])
    assert acl.acls[0].identifier == "user@example.com"
    assert "r" in acl.acls[0].rights

    listed = ListRights("INBOX", "user@example.com", AclRights(), AclRights.from_str("0"))
    assert "0" in listed.optional
    assert "0" not in listed.required

    mine = MyRights("INBOX", AclRights.from_str("a"))
    assert "a" in mine.rights


@pytest.mark.parametrize("name", ["REPLACE", "ADD", "REMOVE"])
def test_modify_modes_round_trip_by_value(name):
    mode = AclModifyMode[name]
    assert AclModifyMode(mode.value) is mode
    assert mode.name == name