from dataclasses import dataclass
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Output wrapper: malformed flow ids decode to 0 instead of failing the record
    flow_id_lenient: bool = _env_flag("EVE_FLOWID_LENIENT", "true")

settings = Settings()
