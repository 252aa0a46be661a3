import json

import httpx
import pytest

from lyrical import cli, lyrics_client


@pytest.fixture
def provider(monkeypatch, make_result, fake_provider):
    results = [
        make_result(id=10, duration=200, synced_lyrics=None, plain_lyrics="plain words"),
        make_result(id=11, duration=180, synced_lyrics="[00:01.00]First\n[00:02.50]Second"),
    ]
    instance = fake_provider(results)
    monkeypatch.setattr(lyrics_client, "LrclibSearchProvider", lambda: instance)
    return instance


def test_search_json(provider, capsys):
    cli.main(["search", "Song", "Artist", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in data] == [10, 11]
    assert provider.closed


def test_search_table_synced_only(provider, capsys):
    cli.main(["search", "Song", "Artist", "--synced-only"])
    out = capsys.readouterr().out
    assert "synced" in out
    assert "Total: 1 results" in out


def test_get_prints_plain_lyrics(provider, capsys):
    cli.main(["get", "Song", "Artist", "--duration", "199"])
    out = capsys.readouterr().out
    assert "plain words" in out


def test_lines_output(provider, capsys):
    cli.main(["lines", "Song", "Artist"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[00:01.00 - 00:02.50] First",
        "[00:02.50 - 03:00.00] Second",
    ]


def test_not_found_exits_with_error(monkeypatch, fake_provider, capsys):
    monkeypatch.setattr(lyrics_client, "LrclibSearchProvider", lambda: fake_provider([]))
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["get", "Song", "Artist"])
    assert excinfo.value.code == 1
    assert "No lyrics found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_search_malformed_response_is_reported_as_lookup_error(monkeypatch, capsys):
    body = [{"id": 1, "trackName": "T", "duration": "n/a"}]
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=body)))
    real_provider = lyrics_client.LrclibSearchProvider
    monkeypatch.setattr(
        lyrics_client, "LrclibSearchProvider", lambda: real_provider(client=client)
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["search", "T", "A"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "Configuration error" not in err


def test_search_limit(provider, capsys):
    cli.main(["search", "Song", "Artist", "-n", "1", "--json"])
    assert [item["id"] for item in json.loads(capsys.readouterr().out)] == [10]


@pytest.mark.parametrize("limit", ["0", "-1", "many"])
def test_search_rejects_bad_limit(provider, capsys, limit):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["search", "Song", "Artist", "-n", limit])
    assert excinfo.value.code == 2
    assert "--limit" in capsys.readouterr().err
    assert provider.calls == []
