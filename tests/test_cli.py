from __future__ import annotations

import pytest

import auto_world.cli.submit as submit_cli


@pytest.fixture
def cli_client(fake_client, monkeypatch):
    def _install(*args, **kwargs):
        client = fake_client(*args, **kwargs)
        monkeypatch.setattr(submit_cli, "HttpClient", lambda config: client)
        monkeypatch.setattr(submit_cli, "configure_logging", lambda level: None)
        return client

    return _install


def test_cli_submits_listing(cli_client, tmp_path, capsys):
    client = cli_client(201, {"status": True, "message": "ok"})
    img = tmp_path / "front.jpg"
    img.write_bytes(b"jpeg")
    code = submit_cli.main(
        ["--model", "Civic", "--price", "100", "--phone", "+15551234567", str(img)]
    )
    assert code == 0
    assert "ok" in capsys.readouterr().out
    _, kwargs = client.calls[0]
    assert ("images", ("front.jpg", b"jpeg", "image/jpeg")) in kwargs["files"]


def test_cli_reports_field_errors(cli_client, capsys):
    client = cli_client(201, {"status": True})
    code = submit_cli.main(["--model", "Civic", "--price", "-5", "--phone", "abc"])
    assert code == 1
    out = capsys.readouterr().out
    assert "price: Price cannot be negative" in out
    assert "phoneNumber: Invalid phone number" in out
    assert client.calls == []


def test_cli_missing_image_is_usage_error(cli_client, tmp_path):
    cli_client()
    with pytest.raises(SystemExit) as info:
        submit_cli.main(["--model", "Civic", "--price", "1", "--phone", "+15551234567", str(tmp_path / "nope.jpg")])
    assert info.value.code == 2
