import pytest

from imaptypes.quota import (
    InvalidResponseError,
    Quota,
    QuotaResource,
    QuotaResourceLimit,
    QuotaResourceName,
    QuotaRoot,
    QuotaRootResponse,
)


def test_quota_resource_name_atom_keeps_value():
    name = QuotaResourceName.parse("TEST")
    assert name.is_atom
    assert str(name) == "TEST"


def test_quota_resource_name_from_str():
    assert QuotaResourceName.parse("STORAGE") == QuotaResourceName.STORAGE
    assert not QuotaResourceName.parse("STORAGE").is_atom


def test_quota_resource_name_message():
    assert QuotaResourceName.parse("MESSAGE") == QuotaResourceName.MESSAGE


def test_quota_resource_name_is_case_sensitive():
    assert QuotaResourceName.parse("storage").is_atom


def test_quota_resource_limit_new():
    limit = QuotaResourceLimit("STORAGE", 1000)
    assert limit.name == QuotaResourceName.STORAGE
    assert limit.amount == 1000


def test_quota_resource_limit_new_custom():
    limit = QuotaResourceLimit("X-NUM-FOLDERS", 50)
    assert limit.name.is_atom
    assert limit.name.value == "X-NUM-FOLDERS"
    assert limit.amount == 50


def test_quota_resource_limit_from_name():
    limit = QuotaResourceLimit(QuotaResourceName.STORAGE, 500)
    assert limit.name == QuotaResourceName.STORAGE
    assert limit.amount == 500


def test_quota_resource_limit_str():
    assert str(QuotaResourceLimit("STORAGE", 1000)) == "STORAGE 1000"
    assert str(QuotaResourceLimit("X-NUM-FOLDERS", 50)) == "X-NUM-FOLDERS 50"


def test_quota_resource_limit_negative():
    with pytest.raises(ValueError):
        QuotaResourceLimit("STORAGE", -1)


def test_quota_root_response_from_parts():
    quota = Quota("INBOX", [QuotaResource(QuotaResourceName.STORAGE, 0, 1000)])
    response = QuotaRootResponse.from_parts([QuotaRoot("INBOX", ["INBOX"])], [quota])
    assert response.mailbox_name == "INBOX"
    assert list(response.quota_root_names()) == ["INBOX"]
    assert len(response.quotas) == 1
    resource = response.quotas[0].resources[0]
    assert resource.name == QuotaResourceName.STORAGE
    assert resource.usage == 0
    assert resource.limit == 1000


def test_quota_root_response_without_root_names():
    response = QuotaRootResponse.from_parts([QuotaRoot("INBOX")], [])
    assert list(response.quota_root_names()) == []
    assert response.quotas == []


@pytest.mark.parametrize("count", [0, 2])
def test_quota_root_response_requires_one_root(count):
    roots = [QuotaRoot("INBOX", [])] * count
    with pytest.raises(InvalidResponseError):
        QuotaRootResponse.from_parts(roots, [])