from __future__ import annotations

import pytest

from devkit import firebase as devkit_firebase
from devkit.config import ServiceSettings


def _settings(**overrides) -> ServiceSettings:
    values = {
        "SERVICE_NAME": "notifier-test",
        "FIREBASE_CREDENTIALS_JSON": None,
        "FIREBASE_CREDENTIALS_PATH": None,
        "FIREBASE_PROJECT_ID": None,
    }
    values.update(overrides)
    return ServiceSettings(**values)


def test_resolve_credential_prefers_inline_json(monkeypatch) -> None:
    seen: list[object] = []
    monkeypatch.setattr(devkit_firebase.credentials, "Certificate", lambda info: seen.append(info) or "cert")

    credential = devkit_firebase.resolve_credential(
        _settings(FIREBASE_CREDENTIALS_JSON='{"type": "service_account"}', FIREBASE_CREDENTIALS_PATH="/x.json")
    )

    assert credential == "cert"
    assert seen == [{"type": "service_account"}]


def test_resolve_credential_rejects_invalid_json() -> None:
    with pytest.raises(RuntimeError):
        devkit_firebase.resolve_credential(_settings(FIREBASE_CREDENTIALS_JSON="{not json"))


def test_resolve_credential_reads_file_path(monkeypatch, tmp_path) -> None:
    key_file = tmp_path / "sa.json"
    key_file.write_text("{}", encoding="utf-8")
    monkeypatch.setattr(devkit_firebase.credentials, "Certificate", lambda path: ("cert", path))

    credential = devkit_firebase.resolve_credential(_settings(FIREBASE_CREDENTIALS_PATH=str(key_file)))

    assert credential == ("cert", str(key_file))


def test_resolve_credential_raises_for_missing_file(tmp_path) -> None:
    with pytest.raises(RuntimeError):
        devkit_firebase.resolve_credential(_settings(FIREBASE_CREDENTIALS_PATH=str(tmp_path / "missing.json")))


def test_resolve_credential_falls_back_to_application_default() -> None:
    assert devkit_firebase.resolve_credential(_settings()) is None


def test_initialize_firebase_app_reuses_named_app(monkeypatch) -> None:
    created: list[tuple] = []
    apps: dict[str, object] = {}

    def fake_get_app(name: str):
        if name not in apps:
            raise ValueError(name)
        return apps[name]

    def fake_initialize_app(credential, options, name):
        created.append((credential, options, name))
        apps[name] = object()
        return apps[name]

    monkeypatch.setattr(devkit_firebase.firebase_admin, "get_app", fake_get_app)
    monkeypatch.setattr(devkit_firebase.firebase_admin, "initialize_app", fake_initialize_app)

    settings = _settings(FIREBASE_PROJECT_ID="tour-guide")
    first = devkit_firebase.initialize_firebase_app(settings)
    second = devkit_firebase.initialize_firebase_app(settings)

    assert first is second
    assert created == [(None, {"projectId": "tour-guide"}, "notifier-test")]
