import platform

from jaegerkit.version import Version, default_jaeger, get


def test_configured_jaeger_version_wins(monkeypatch):
    monkeypatch.setenv("JAEGER_VERSION", "1.11.0")
    assert get({"jaeger-version": "1.12.0"}).jaeger == "1.12.0"


def test_default_jaeger_used_without_configuration(monkeypatch):
    monkeypatch.setenv("JAEGER_VERSION", "1.11.0")
    assert default_jaeger() == "1.11.0"
    assert get({}).jaeger == default_jaeger()
    assert get().jaeger == default_jaeger()


def test_default_jaeger_empty_when_unset(monkeypatch):
    monkeypatch.delenv("JAEGER_VERSION", raising=False)
    assert default_jaeger() == ""


def test_operator_and_build_date_from_environment(monkeypatch):
    monkeypatch.setenv("OPERATOR_VERSION", "v1.2.3")
    monkeypatch.setenv("VERSION_DATE", "2019-05-01T00:00:00Z")
    version = get({})
    assert version.operator == "v1.2.3"
    assert version.build_date == "2019-05-01T00:00:00Z"


def test_python_version_reported():
    assert get({}).python == platform.python_version()


def test_str_format():
    version = Version(operator="v1", build_date="today", jaeger="1.12", python="3.10.0")
    assert str(version) == (
        "Version(Operator='v1', BuildDate='today', Jaeger='1.12', Python='3.10.0')"
    )