import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VIEWS = ("app", "web")


@dataclass(frozen=True)
class AppConfig:
    rules_path: Path = Path("rules.yaml")
    log_level: str = "INFO"
    view: str = "app"
    port: int = 8550

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "AppConfig":
        """
        Read configuration from MCC_* environment variables.
        Raises ValueError on an unknown log level, view or non-numeric port.
        """
        env = os.environ if environ is None else environ

        log_level = env.get("MCC_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")

        view = env.get("MCC_VIEW", "app").lower()
        if view not in VIEWS:
            raise ValueError(f"MCC_VIEW must be one of {', '.join(VIEWS)}, got {view!r}")

        port_raw = env.get("MCC_PORT", "8550")
        try:
            port = int(port_raw)
        except ValueError as e:
            raise ValueError(f"MCC_PORT must be an integer, got {port_raw!r}") from e

        return cls(
            rules_path=Path(env.get("MCC_RULES_PATH", "rules.yaml")),
            log_level=log_level,
            view=view,
            port=port,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
