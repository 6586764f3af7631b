"""YAML-based locale store.

Translations for one locale live in ``lang_<code>.yml`` inside the plugin's
data directory. On first use the file is copied there from the packaged
defaults, so users can edit their copy; reset_locale_file() restores it.

Usage:
	store = LocaleStore(host).set_locale("en_US")
	store.translate("help.title")

Missing keys come back as "[NO TRANSLATION: key]" so they are obvious in UI.
Every locale file must carry an integer ``language-file-version``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import logging
import yaml

from plugin_host import PluginHost
from utils.exceptions import ConfigError, InvalidArgument, InvalidState
from utils.helpers import flatten, is_int, locale_file_name

VERSION_KEY = "language-file-version"
LANGUAGE_KEY = "language"
CONTRIBUTOR_KEY = "language-file-contributor"
UNKNOWN = "(unknown)"

logger = logging.getLogger(__name__)


class LocaleStore:
	"""Loads one locale file at a time and serves key lookups from it.

	Not thread-safe: set_locale() swaps the whole mapping, so a multi-threaded
	caller must guard set_locale()/translate() with its own lock.
	"""

	def __init__(self, host: PluginHost):
		if host is None:
			raise InvalidArgument("Plugin host must not be None")
		if not host.is_active():
			raise InvalidState(f"Plugin is not enabled: {host!r}")

		self.host = host
		self._code: Optional[str] = None
		self._translations: Dict[str, str] = {}
		self._version: Optional[int] = None
		self._initialized = False

	def _require_initialized(self) -> None:
		if not self._initialized:
			raise InvalidState(f"Locale store not initialized for {self.host!r} - call set_locale() first")

	@property
	def initialized(self) -> bool:
		return self._initialized

	@property
	def locale_code(self) -> Optional[str]:
		return self._code

	def locale_file(self, code: str) -> Path:
		"""Writable path of the locale file for `code`."""
		return self.host.data_dir() / locale_file_name(code)

	def set_locale(self, code: str) -> "LocaleStore":
		"""Switch to `code`, copying the packaged default file if needed.

		If "xx_XX" is given, lang_xx_XX.yml is looked up in the host's data
		directory and copied there from the packaged resources when absent.
		A failed load keeps whatever locale was loaded before.

		Raises:
			InvalidArgument: code is empty, or no packaged file exists for it.
			ConfigError: the file is unreadable, not valid YAML, or its version is missing / not an integer.
		"""
		if not code:
			raise InvalidArgument("Locale code cannot be None or empty")

		path = self.locale_file(code)
		if not path.exists():
			self.host.copy_resource(path.name, overwrite=False)

		data = _read_yaml(path)
		version = data.get(VERSION_KEY)
		if not is_int(version):
			raise ConfigError("Language file version is illegal or not found", path)

		self._translations = flatten(data)
		self._version = version
		self._code = code
		self._initialized = True
		logger.debug("Loaded locale %s (version %s, %d keys) from %s", code, version, len(self._translations), path)
		return self

	def translate(self, key: str) -> str:
		"""Translated string for `key`, or "[NO TRANSLATION: key]"."""
		self._require_initialized()
		value = self._translations.get(key)
		if value is None:
			return f"[NO TRANSLATION: {key}]"
		return value

	def __contains__(self, key: str) -> bool:
		return key in self._translations

	def get_locale_code(self) -> Optional[str]:
		"""Current locale code, None if never set."""
		return self._code

	def get_language_name(self) -> str:
		self._require_initialized()
		return self._translations.get(LANGUAGE_KEY, UNKNOWN)

	def get_language_file_version(self) -> int:
		self._require_initialized()
		return self._version

	def get_contributor(self) -> str:
		self._require_initialized()
		return self._translations.get(CONTRIBUTOR_KEY, UNKNOWN)

	def reset_locale_file(self) -> "LocaleStore":
		"""Overwrite the current locale file with the packaged default and reload it."""
		self._require_initialized()
		self.host.copy_resource(locale_file_name(self._code), overwrite=True)
		logger.info("Reset locale file for %s to packaged default", self._code)
		return self.set_locale(self._code)


def _read_yaml(path: Path) -> dict:
	"""Parse a locale file. Anything but a YAML mapping is a ConfigError."""
	try:
		with path.open("r", encoding="utf-8") as f:
			data = yaml.safe_load(f)
	except (yaml.YAMLError, UnicodeDecodeError) as err:
		raise ConfigError(f"Cannot parse language file ({err})", path) from err
	except OSError as err:
		raise ConfigError(f"Cannot read language file ({err})", path) from err
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise ConfigError("Language file is not a key-value mapping", path)
	return data
