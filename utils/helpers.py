"""Helper functions and constants for locale files."""
from typing import Any, Dict, Mapping, Optional

LOCALE_FILE_PREFIX: str = "lang_"
LOCALE_FILE_SUFFIX: str = ".yml"

def locale_file_name(code: str) -> str:
	"""Return the resource file name for a locale code ("en_US" -> "lang_en_US.yml")."""
	return f"{LOCALE_FILE_PREFIX}{code}{LOCALE_FILE_SUFFIX}"


def locale_code_from_file_name(name: str) -> Optional[str]:
	"""Inverse of locale_file_name. Returns None for names that don't match."""
	if not (name.startswith(LOCALE_FILE_PREFIX) and name.endswith(LOCALE_FILE_SUFFIX)):
		return None
	code = name[len(LOCALE_FILE_PREFIX):-len(LOCALE_FILE_SUFFIX)]
	return code or None


def normalize_locale_code(raw: str | None) -> Optional[str]:
	"""Normalize environment LANG variants to a locale code.

	Examples:
	  "en_US.UTF-8" -> "en_US"
	  "fr-FR" -> "fr_FR"
	  "zh_CN" -> "zh_CN"
	  None / empty -> None
	"""
	if not raw:
		return None
	raw = raw.strip()
	# Drop encoding part
	if "." in raw:
		raw = raw.split(".", 1)[0]
	raw = raw.replace("-", "_")
	return raw or None


def is_int(value: Any) -> bool:
	"""True for YAML integers. Booleans are ints in Python but not here."""
	return isinstance(value, int) and not isinstance(value, bool)


def flatten(d: Mapping[str, Any], parent: str = "", out: Optional[Dict[str, str]] = None) -> Dict[str, str]:
	"""Flatten nested mapping into dot-separated keys.

	Only scalar string/integer values are kept; lists, nulls, floats and
	booleans are dropped.
	"""
	if out is None:
		out = {}
	for k, v in d.items():
		full = f"{parent}.{k}" if parent else str(k)
		if isinstance(v, Mapping):
			flatten(v, full, out)
		elif isinstance(v, str):
			out[full] = v
		elif is_int(v):
			out[full] = str(v)
	return out
