import logging, os, sys, threading
from typing import Optional
from ping_worker import ShutdownLatch

if os.name == "nt":
    import msvcrt
else:
    import select, termios, tty

TerminalError = OSError if os.name == "nt" else termios.error


def stdin_is_terminal() -> bool:
    try: return sys.stdin is not None and sys.stdin.isatty()
    except ValueError: return False  # closed stdin


class KeyWatcher(threading.Thread):
    """
    Polls the terminal for the quit key and trips the latch when it is pressed.
    start() puts the terminal in cbreak mode on the calling thread, so setup
    errors surface there; stop() restores it.
    """
    def __init__(self, latch: ShutdownLatch, quit_key: str = "q", poll_s: float = 0.1, fd: Optional[int] = None, cbreak: bool = True):
        super().__init__(daemon=True, name="key-watcher")
        self.latch=latch; self.quit_key=quit_key; self.poll_s=poll_s; self.cbreak=cbreak
        self.fd = fd if fd is not None or os.name == "nt" else sys.stdin.fileno()
        self._saved_attrs = None

    def start(self):
        if os.name != "nt" and self.cbreak:
            self._saved_attrs = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        logging.debug("watching for %r every %.0f ms", self.quit_key, self.poll_s * 1000)
        super().start()

    def stop(self):
        self.join(timeout=1.5)
        if self._saved_attrs is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def run(self):
        while not self.latch.is_set():
            key = self._read_key()
            if key is None: continue
            if key == "":
                logging.info("input closed, no longer watching for %r", self.quit_key)
                return
            if key == self.quit_key:
                logging.debug("quit key pressed")
                self.latch.trip()
                return

    def _read_key(self) -> Optional[str]:
        """One character, '' at end of input, or None when nothing arrived within poll_s."""
        if os.name == "nt":
            if msvcrt.kbhit(): return msvcrt.getwch()
            self.latch.wait(self.poll_s)
            return None
        ready, _, _ = select.select([self.fd], [], [], self.poll_s)
        if not ready: return None
        return os.read(self.fd, 1).decode("utf-8", errors="replace")
