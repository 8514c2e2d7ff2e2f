import pytest

from florist.util.misc import doc_summary, get_setting_from_environ


def test_get_setting_from_environ(monkeypatch):
    env_name = "DUMMY_FLORIST_ENV"
    monkeypatch.setenv(env_name, "log_dir=/tmp/logs,verbose=1,unknown=3")
    got = get_setting_from_environ(env_name, {"log_dir": str, "verbose": int})
    assert got == {"log_dir": "/tmp/logs", "verbose": 1}


def test_get_setting_from_environ_missing(monkeypatch):
    monkeypatch.delenv("DUMMY_FLORIST_ENV", raising=False)
    assert get_setting_from_environ("DUMMY_FLORIST_ENV", {"verbose": int}) == {}


def test_get_setting_from_environ_bad_cast(monkeypatch):
    monkeypatch.setenv("DUMMY_FLORIST_ENV", "verbose=yes")
    with pytest.warns(UserWarning):
        got = get_setting_from_environ("DUMMY_FLORIST_ENV", {"verbose": int})
    assert got == {}


class _Documented:
    """Counts of A, C, G and T. Other details
    follow."""


def _first_para():
    """returns the first
    paragraph

    and not this one
    """


@pytest.mark.parametrize(
    "obj,expect",
    [
        (_Documented, "Counts of A, C, G and T"),
        (_first_para, "returns the first paragraph"),
    ],
)
def test_doc_summary(obj, expect):
    assert doc_summary(obj) == expect


def test_doc_summary_missing():
    def no_doc():
        pass

    assert doc_summary(no_doc) == ""
