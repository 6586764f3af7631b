"""Host capabilities the locale store needs from the plugin runtime.

The store only asks three things of its host:
 - is the plugin currently active?
 - where is its writable data directory?
 - copy a packaged resource into that directory (optionally overwriting)

DirectoryPluginHost is the plain filesystem version: packaged resources live
in one directory, the writable copies in another.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List
import logging
import shutil

from utils.exceptions import InvalidArgument
from utils.helpers import LOCALE_FILE_PREFIX, LOCALE_FILE_SUFFIX, locale_code_from_file_name

logger = logging.getLogger(__name__)


class PluginHost(ABC):
	"""Interface implemented by whatever runtime owns the plugin."""

	@abstractmethod
	def is_active(self) -> bool:
		"""Whether the plugin is currently enabled."""

	@abstractmethod
	def data_dir(self) -> Path:
		"""Writable directory for this plugin instance."""

	@abstractmethod
	def copy_resource(self, name: str, overwrite: bool = False) -> Path:
		"""Copy packaged resource `name` into data_dir() and return the target path.

		An existing target is left alone unless overwrite is set.
		"""


class DirectoryPluginHost(PluginHost):
	"""PluginHost backed by a packaged resources directory on disk."""

	def __init__(self, resources_dir: Path | str, data_dir: Path | str, active: bool = True):
		self.resources_dir = Path(resources_dir)
		self._data_dir = Path(data_dir)
		self._active = active

	def is_active(self) -> bool:
		return self._active

	def enable(self) -> None:
		self._active = True

	def disable(self) -> None:
		self._active = False

	def data_dir(self) -> Path:
		return self._data_dir

	def __repr__(self) -> str:
		return f"{type(self).__name__}(data_dir={str(self._data_dir)!r})"

	def copy_resource(self, name: str, overwrite: bool = False) -> Path:
		if not name:
			raise InvalidArgument("Resource name cannot be None or empty")
		source = self.resources_dir / name
		if not source.is_file():
			raise InvalidArgument(f"The packaged resource '{name}' cannot be found in {self.resources_dir}")

		target = self._data_dir / name
		if target.exists() and not overwrite:
			logger.debug("Not copying %s: %s already exists", name, target)
			return target

		self._data_dir.mkdir(parents=True, exist_ok=True)
		shutil.copyfile(source, target)
		logger.debug("Copied packaged resource %s to %s", name, target)
		return target

	def available_locales(self) -> List[str]:
		"""Locale codes of every packaged lang_<code>.yml, sorted."""
		if not self.resources_dir.is_dir():
			return []
		codes = []
		for file in self.resources_dir.glob(f"{LOCALE_FILE_PREFIX}*{LOCALE_FILE_SUFFIX}"):
			code = locale_code_from_file_name(file.name)
			if code:
				codes.append(code)
		return sorted(codes)
