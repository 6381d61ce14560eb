import json, logging, os

DEFAULTS = {
    "ping_command": "ping",
    "quit_key": "q",
    "key_poll_ms": 100,
    "log_level": "WARNING",
}

class Settings:
    PATH = os.path.join(os.path.dirname(__file__), "config.json")

    def __init__(
        self,
        ping_command="ping",
        quit_key="q",
        key_poll_ms=100,
        log_level="WARNING",
    ):
        self.ping_command = str(ping_command)
        # only the first character is watched
        if not isinstance(quit_key, str) or not quit_key:
            quit_key = DEFAULTS["quit_key"]
        self.quit_key = quit_key[:1]
        self.key_poll_ms = int(key_poll_ms)
        if self.key_poll_ms <= 0:
            raise ValueError(f"key_poll_ms must be positive, got {self.key_poll_ms}")
        self.log_level = str(log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log_level {log_level!r}")

    @property
    def key_poll_s(self) -> float:
        return self.key_poll_ms / 1000.0

    @classmethod
    def load(cls, path=None):
        path = path or os.environ.get("APING_CONFIG") or cls.PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Settings(
                ping_command=data.get("ping_command", DEFAULTS["ping_command"]),
                quit_key=data.get("quit_key", DEFAULTS["quit_key"]),
                key_poll_ms=data.get("key_poll_ms", DEFAULTS["key_poll_ms"]),
                log_level=data.get("log_level", DEFAULTS["log_level"]),
            )
        except FileNotFoundError:
            return Settings()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logging.warning("Ignoring config %s: %s", path, e)
            return Settings()
