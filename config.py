"""
Runtime configuration for the bot.

Values come from environment variables, with a .env file loaded first.
Copy the variables below into .env and fill in your values:

	DISCORD_TOKEN=YOUR_DISCORD_BOT_TOKEN
	BOT_OWNER_ID=000000000000000000
	DATA_DIR=data
	LOCALE=en_US
	LOG_LEVEL=INFO
	BOT_LOG_FILE=bot.log
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

from utils.helpers import normalize_locale_code

DEFAULT_LOCALE = "en_US"
DEFAULT_DATA_DIR = "data"


@dataclass(slots=True)
class Settings:
	discord_token: Optional[str]
	owner_id: Optional[int]
	data_dir: str = DEFAULT_DATA_DIR
	locale: str = DEFAULT_LOCALE
	log_level: str = "INFO"
	log_file: Optional[str] = None


def load_settings(require_token: bool = True) -> Settings:
	"""Read settings from the environment (after loading .env).

	Raises:
		ValueError: DISCORD_TOKEN missing while required, or BOT_OWNER_ID not a number.
	"""
	load_dotenv()

	token = os.getenv('DISCORD_TOKEN') or None
	if require_token and not token:
		raise ValueError("DISCORD_TOKEN environment variable is required")

	owner_raw = os.getenv('BOT_OWNER_ID')
	owner_id = None
	if owner_raw:
		try:
			owner_id = int(owner_raw)
		except ValueError as exc:
			raise ValueError(f"BOT_OWNER_ID must be an integer, got {owner_raw!r}") from exc

	locale = normalize_locale_code(os.getenv('LOCALE'))

	return Settings(
		discord_token=token,
		owner_id=owner_id,
		data_dir=os.getenv('DATA_DIR') or DEFAULT_DATA_DIR,
		locale=locale or DEFAULT_LOCALE,
		log_level=(os.getenv('LOG_LEVEL') or "INFO").upper(),
		log_file=os.getenv('BOT_LOG_FILE') or None,
	)
