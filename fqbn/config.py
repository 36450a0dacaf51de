from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _get(name: str, default: str) -> str:
    v = os.getenv(name, default)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _flag(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    boards_file: str = _get("FQBN_BOARDS_FILE", "boards.txt")
    hardware_dir: str = _get("FQBN_HARDWARE_DIR", "./hardware")
    verbose: bool = _flag("FQBN_VERBOSE")


SETTINGS = Settings()
