import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_MAX_WORKERS = 1


@dataclass(frozen=True)
class Settings:
	catalog_path: Optional[str]  # JSON catalog; the built-in catalog is used when unset
	entries_path: Optional[str]  # JSON list of submitted entries
	max_workers: int
	log_level: str


def _int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		value = int(raw)
	except ValueError:
		logger.warning(f"{name}={raw!r} is not an integer, using {default}")
		return default
	return value if value > 0 else default


def get_settings() -> Settings:
	return Settings(
		catalog_path=os.getenv("PROGRESS_CATALOG_PATH") or None,
		entries_path=os.getenv("PROGRESS_ENTRIES_PATH") or None,
		max_workers=_int_env("PROGRESS_MAX_WORKERS", DEFAULT_MAX_WORKERS),
		log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
	)


def configure_logging(level: str = "INFO") -> None:
	logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
