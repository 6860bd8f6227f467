from mpv_mp.cli import entry

entry()
