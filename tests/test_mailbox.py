from imaptypes.flag import Flag
from imaptypes.mailbox import Mailbox


def test_defaults():
    mb = Mailbox()
    assert mb.flags == []
    assert mb.exists == 0
    assert mb.recent == 0
    assert mb.unseen is None
    assert mb.permanent_flags == []
    assert mb.uid_next is None
    assert mb.uid_validity is None
    assert mb.highest_mod_seq is None
    assert mb.is_read_only is False


def test_default_equals_default_with_zero_exists():
    expected = Mailbox()
    expected.exists = 0
    assert Mailbox() == expected


def test_defaults_do_not_share_lists():
    a = Mailbox()
    b = Mailbox()
    a.flags.append(Flag.SEEN)
    assert b.flags == []
    assert a != b


def test_str_lists_every_field():
    mb = Mailbox(
        flags=[Flag.SEEN, Flag("$Junk")],
        exists=12,
        recent=2,
        unseen=5,
        permanent_flags=[Flag.MAY_CREATE],
        uid_next=100,
        uid_validity=7,
        highest_mod_seq=None,
        is_read_only=True,
    )
    text = str(mb)
    assert text.startswith("flags: [\\Seen, $Junk], exists: 12, recent: 2")
    assert "permanent_flags: [\\*]" in text
    assert "uid_next: 100" in text
    assert "uid_validity: 7" in text
    assert "highest_mod_seq: None" in text
    assert text.endswith("is_read_only: True")