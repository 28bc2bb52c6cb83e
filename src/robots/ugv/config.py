import os
from dataclasses import dataclass

DEFAULT_URL = "http://192.168.4.1"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return float(default)
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Invalid {name}={raw!r}; expected a float") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid {name}={raw!r}; expected a boolean")


@dataclass(frozen=True)
class UgvConfig:
    """Connection and safety settings for one UGV rover.

    Attributes:
        base_url: Root URL of the rover's HTTP server (commands go to /js).
        timeout: Seconds to wait for each HTTP round trip.
        max_speed: Largest accepted wheel speed magnitude.
        explicit_stop: Send a zero-speed drive command before the stop
            tool's telemetry query.
    """

    base_url: str = DEFAULT_URL
    timeout: float = 5.0
    max_speed: float = 0.5
    explicit_stop: bool = False

    def __post_init__(self):
        if not self.timeout > 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.max_speed > 0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")

    @classmethod
    def from_env(cls) -> "UgvConfig":
        """Build a config from UGV_* environment variables."""
        return cls(
            base_url=os.getenv("UGV_URL", DEFAULT_URL).rstrip("/"),
            timeout=_env_float("UGV_TIMEOUT", 5.0),
            max_speed=_env_float("UGV_MAX_SPEED", 0.5),
            explicit_stop=_env_bool("UGV_EXPLICIT_STOP", False),
        )
