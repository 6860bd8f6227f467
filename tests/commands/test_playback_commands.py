"""Tests for playback command handlers."""

import io
from unittest.mock import patch

import pytest

from mpv_mp.commands import playback
from mpv_mp.core.exceptions import PlaylistRangeError, PropertyTypeError, UsageError


class TestPlayCommand:
    """Tests for handle_play_command."""

    def test_play_file_resumes_when_paused(self, fake_channel):
        """play FILE replaces the playlist, then unpauses a paused instance."""
        channel = fake_channel({"pause": True})
        playback.handle_play_command(channel, ["song.mp3"])

        assert channel.sent == ['loadfile "song.mp3" replace', "cycle pause"]
        assert channel.queried == ["pause"]

    def test_play_file_when_playing(self, fake_channel):
        channel = fake_channel({"pause": False})
        playback.handle_play_command(channel, ["song.mp3", "albums"])

        assert channel.sent == [
            'loadfile "song.mp3" replace',
            'loadlist "albums" replace',
        ]

    def test_play_without_args_restarts_playlist(self, fake_channel, make_playlist):
        channel = fake_channel(
            {"playlist": make_playlist(["a.mp3", "b.mp3"], current=1), "pause": True}
        )
        out = io.StringIO()
        playback.handle_play_command(channel, [], out)

        assert channel.queried == ["playlist", "pause"]
        assert channel.sent == ["playlist-play-index 0", "cycle pause"]
        assert out.getvalue() == ""

    def test_play_on_empty_playlist(self, fake_channel):
        channel = fake_channel({"playlist": [], "pause": False})
        with pytest.raises(PlaylistRangeError):
            playback.handle_play_command(channel, [])
        assert channel.sent == []

    def test_pause_must_be_boolean(self, fake_channel):
        channel = fake_channel({"pause": "yes"})
        with pytest.raises(PropertyTypeError):
            playback.handle_play_command(channel, ["song.mp3"])
        assert channel.sent == ['loadfile "song.mp3" replace']


class TestSimpleCommands:
    """Tests for commands that send one fixed line."""

    @pytest.mark.parametrize(
        "handler, line",
        [
            (playback.handle_pause_command, "cycle pause"),
            (playback.handle_next_command, "playlist-next"),
            (playback.handle_prev_command, "playlist-prev"),
            (playback.handle_loop_command, 'cycle-values loop-file "inf" "no"'),
        ],
    )
    def test_sends_fixed_command(self, fake_channel, handler, line):
        channel = fake_channel()
        handler(channel)
        assert channel.sent == [line]
        assert channel.queried == []


class TestCustomCommand:
    """Tests for handle_custom_command."""

    def test_prints_raw_response(self, fake_channel):
        raw = b'{"data":50.0,"error":"success","request_id":0}\n'
        channel = fake_channel(raw=raw)
        out = io.StringIO()
        playback.handle_custom_command(channel, ['{"command":["get_property","volume"]}'], out)

        assert channel.sent == ['{"command":["get_property","volume"]}']
        assert out.getvalue() == raw.decode() + "\n"

    def test_no_response(self, fake_channel):
        channel = fake_channel()
        out = io.StringIO()
        playback.handle_custom_command(channel, ["set volume 40"], out)
        assert channel.sent == ["set volume 40"]
        assert out.getvalue() == "\n"

    def test_unquoted_words_are_joined(self, fake_channel):
        channel = fake_channel()
        playback.handle_custom_command(channel, ["cycle", "pause"], io.StringIO())
        assert channel.sent == ["cycle pause"]

    def test_requires_command(self, fake_channel):
        with pytest.raises(UsageError):
            playback.handle_custom_command(fake_channel(), [])


class TestKillCommand:
    def test_kills_recorded_pid(self, state_dir):
        state_dir.pid_path.write_text("4321")
        with patch("mpv_mp.domain.playback.locator.is_running", return_value=True), patch(
            "mpv_mp.domain.playback.locator.os.kill"
        ) as os_kill:
            playback.handle_kill_command(state_dir)
        assert os_kill.call_args[0][0] == 4321
        assert not state_dir.root.exists()
