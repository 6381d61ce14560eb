import argparse, logging, signal, subprocess, sys
from typing import Optional
from settings import Settings
from ping_worker import PingLoop, ShutdownLatch, log_sample
from keywatch import KeyWatcher, TerminalError, stdin_is_terminal
from parsers import parser_for_platform
from utils import ping_command
from analytics import format_summary

APP_NAME = "aping"
APP_VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Audible ping application")
    p.add_argument("destination", help="The target host or IP address to ping")
    p.add_argument("-i", "--inverse", action="store_true", help="Beep on failed pings instead of successful ones")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return p


def install_sigint(latch: ShutdownLatch):
    signal.signal(signal.SIGINT, lambda signum, frame: latch.trip())


def start_key_watcher(latch: ShutdownLatch, settings: Settings) -> Optional[KeyWatcher]:
    if not stdin_is_terminal():
        logging.info("stdin is not a terminal; stop with Ctrl+C")
        return None
    watcher = KeyWatcher(latch, quit_key=settings.quit_key, poll_s=settings.key_poll_s)
    watcher.start()
    return watcher


def main(argv=None, runner=subprocess.run) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(message)s", force=True)

    latch = ShutdownLatch()
    try:
        install_sigint(latch)
        watcher = start_key_watcher(latch, settings)
    except (OSError, ValueError, TerminalError) as e:
        logging.debug("startup failed", exc_info=True)
        raise SystemExit(f"{APP_NAME}: cannot set up shutdown handling: {e}")

    if watcher is not None:
        print(f"Pinging {args.destination}... Press '{settings.quit_key}' to quit.")
    else:
        print(f"Pinging {args.destination}... Press Ctrl+C to quit.")

    loop = PingLoop(
        destination=args.destination,
        inverse=args.inverse,
        latch=latch,
        parser=parser_for_platform(),
        command=ping_command(args.destination, executable=settings.ping_command),
        runner=runner,
        on_sample=log_sample,
    )
    try:
        stats = loop.run()
    finally:
        latch.trip()
        if watcher is not None:
            watcher.stop()

    print(f"Exiting {APP_NAME}.")
    for line in format_summary(args.destination, stats):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
