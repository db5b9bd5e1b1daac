import pytest

from scanner import (
    EmptyLibraryError,
    GameEntry,
    ScanError,
    display_name,
    is_game_file,
    require_games,
    scan_games,
    supported_formats,
)


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"stub")


@pytest.mark.parametrize(
    "name",
    ["a.z3", "b.z4", "c.z5", "d.z8", "e.zblorb", "f.zlb", "g.dat", "LOUD.Z5", "Mixed.ZBlorb"],
)
def test_is_game_file_accepts_known_extensions(name):
    assert is_game_file(name)


@pytest.mark.parametrize(
    "name",
    ["readme.txt", "noext", "z5", "game.z5.bak", "game.z", "game.", "archive.zip"],
)
def test_is_game_file_rejects_everything_else(name):
    assert not is_game_file(name)


def test_display_name_strips_only_final_suffix():
    assert display_name("Zork.z5") == "Zork"
    assert display_name("my.game.dat") == "my.game"
    assert display_name("noext") == "noext"
    assert display_name(display_name("noext")) == "noext"


def test_scan_filters_hidden_and_unknown(tmp_path):
    games = tmp_path / "games"
    games.mkdir()
    _touch(games, "a.z5", "b.zblorb", "readme.txt", ".hidden.z5")

    entries = scan_games(str(games))

    assert sorted(entries, key=lambda e: e.name) == [
        GameEntry(path=f"{games}/a.z5", name="a"),
        GameEntry(path=f"{games}/b.zblorb", name="b"),
    ]


def test_scan_relative_directory_builds_slash_joined_paths(tmp_path, monkeypatch):
    (tmp_path / "games").mkdir()
    _touch(tmp_path / "games", "b.zblorb")
    monkeypatch.chdir(tmp_path)

    assert scan_games("games") == [GameEntry(path="games/b.zblorb", name="b")]


def test_scan_keeps_listing_order(tmp_path, monkeypatch):
    monkeypatch.setattr("scanner.os.listdir", lambda _d: ["zz.z5", "aa.z5", "mm.z5"])

    assert [e.name for e in scan_games("games")] == ["zz", "aa", "mm"]


def test_scan_caps_result(tmp_path):
    games = tmp_path / "games"
    games.mkdir()
    _touch(games, *[f"g{i:02}.z5" for i in range(12)])

    assert len(scan_games(str(games), max_games=5)) == 5
    assert len(scan_games(str(games))) == 12


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(ScanError):
        scan_games(str(tmp_path / "nope"))


def test_require_games_on_empty_directory(tmp_path):
    _touch(tmp_path, "notes.txt")

    with pytest.raises(EmptyLibraryError):
        require_games(str(tmp_path))


def test_supported_formats_lists_all_extensions():
    assert supported_formats() == ".z3, .z4, .z5, .z8, .zblorb, .zlb, .dat"


def test_default_cap_drops_matches_past_256(tmp_path):
    _touch(tmp_path, *[f"story{i:03}.z5" for i in range(257)])

    assert len(scan_games(str(tmp_path))) == 256
