"""
Exceptions raised by the locale store and its plugin host.
"""
class LocaleError(Exception):
	"""Base exception for locale-related errors"""

class InvalidArgument(LocaleError, ValueError):
	"""A required argument (host, locale code, resource name) is missing or empty."""

class InvalidState(LocaleError, RuntimeError):
	"""Operation called before a locale was set, or the host plugin is not active."""

class ConfigError(LocaleError):
	"""Locale file was read but fails validation."""
	def __init__(self, message: str, path=None):
		self.path = path
		super().__init__(f"{message}: {path}" if path else message)
