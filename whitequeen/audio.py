"""Background music that loops until stopped."""

from __future__ import annotations

import shutil
import subprocess
import sys
import threading

# Command-line players tried in order, with their options before the file name.
_PLAYERS = (("afplay",), ("aplay", "-q"), ("paplay",))

_stop: threading.Event | None = None
_process: subprocess.Popen | None = None


def _loop(command: list[str], stop: threading.Event) -> None:
    global _process
    while not stop.is_set():
        try:
            process = subprocess.Popen(
                command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
        except OSError:
            return
        _process = process
        if stop.is_set():
            process.terminate()
        if process.wait() != 0:
            return


def play_music(path: str) -> bool:
    """Start looping the sound file at path; return whether playback started."""
    global _stop
    stop_music()
    if sys.platform == "win32":
        import winsound

        try:
            winsound.PlaySound(
                path, winsound.SND_FILENAME | winsound.SND_ASYNC | winsound.SND_LOOP
            )
        except RuntimeError:
            return False
        return True
    for name, *options in _PLAYERS:
        executable = shutil.which(name)
        if executable:
            _stop = threading.Event()
            threading.Thread(
                target=_loop, args=([executable, *options, path], _stop), daemon=True
            ).start()
            return True
    return False


def stop_music() -> None:
    """Stop whatever music is playing."""
    global _stop, _process
    if sys.platform == "win32":
        import winsound

        winsound.PlaySound(None, 0)
        return
    if _stop is not None:
        _stop.set()
        _stop = None
    if _process is not None:
        if _process.poll() is None:
            _process.terminate()
        _process = None