"""Tests for playlist command handlers."""

import io

import pytest

from mpv_mp.commands.playlist import (
    AddMode,
    handle_add_command,
    handle_playlist_command,
    has_extension,
)
from mpv_mp.core.exceptions import PlaylistRangeError, UsageError


class TestHasExtension:
    """Tests for the track-vs-container heuristic."""

    @pytest.mark.parametrize(
        "path", ["track.flac", "/music/a b/song.mp3", "x.", ".hidden", "dir.d/a.ogg"]
    )
    def test_tracks(self, path):
        assert has_extension(path) is True

    @pytest.mark.parametrize("path", ["mydir", "/music/albums", "dir.d/sub", "dir.d/"])
    def test_containers(self, path):
        assert has_extension(path) is False


class TestAddCommand:
    """Tests for handle_add_command."""

    def test_directory_loaded_as_list(self, fake_channel):
        channel = fake_channel()
        handle_add_command(channel, ["mydir"])
        assert channel.sent == ['loadlist "mydir" append']

    def test_track_loaded_as_file(self, fake_channel):
        channel = fake_channel()
        handle_add_command(channel, ["track.flac"])
        assert channel.sent == ['loadfile "track.flac" append']

    def test_preserves_order(self, fake_channel):
        channel = fake_channel()
        handle_add_command(channel, ["b.mp3", "dir", "a.mp3"], AddMode.REPLACE)
        assert channel.sent == [
            'loadfile "b.mp3" replace',
            'loadlist "dir" replace',
            'loadfile "a.mp3" replace',
        ]

    def test_requires_files(self, fake_channel):
        channel = fake_channel()
        with pytest.raises(UsageError):
            handle_add_command(channel, [])
        assert channel.sent == []


class TestPlaylistCommand:
    """Tests for handle_playlist_command."""

    @pytest.fixture
    def channel(self, fake_channel, make_playlist):
        return fake_channel(
            {"playlist": make_playlist(["/m/a.mp3", "/m/b.mp3", "/m/c.mp3"], current=1)}
        )

    def test_listing(self, channel):
        out = io.StringIO()
        handle_playlist_command(channel, [], out)

        lines = out.getvalue().splitlines()
        assert len(lines) == 3
        assert lines[1].startswith(">")
        assert lines == ["  0\ta.mp3", "> 1\tb.mp3", "  2\tc.mp3"]
        assert channel.sent == []

    def test_listing_twice_is_identical(self, channel):
        first, second = io.StringIO(), io.StringIO()
        handle_playlist_command(channel, [], first)
        handle_playlist_command(channel, [], second)
        assert first.getvalue() == second.getvalue()

    def test_raw(self, channel):
        out = io.StringIO()
        handle_playlist_command(channel, ["raw"], out)
        assert out.getvalue() == "/m/a.mp3\n/m/b.mp3\n/m/c.mp3\n"

    def test_jump(self, channel):
        handle_playlist_command(channel, ["2"])
        assert channel.sent == ["playlist-play-index 2"]

    @pytest.mark.parametrize("index", ["3", "-1"])
    def test_out_of_range_sends_nothing(self, channel, index):
        """INDEX == len or < 0 fails without writing to the channel."""
        with pytest.raises(PlaylistRangeError, match=index):
            handle_playlist_command(channel, [index])
        assert channel.sent == []

    def test_invalid_index(self, channel):
        with pytest.raises(UsageError):
            handle_playlist_command(channel, ["next"])
        assert channel.sent == []
