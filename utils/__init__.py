"""
Public helper functions and exceptions.
"""
from utils.helpers import (
	locale_file_name,
	locale_code_from_file_name,
	normalize_locale_code,
	is_int,
	flatten,
)
from utils.exceptions import (
	LocaleError,
	InvalidArgument,
	InvalidState,
	ConfigError,
)

__all__ = [
	"locale_file_name",
	"locale_code_from_file_name",
	"normalize_locale_code",
	"is_int",
	"flatten",
	"LocaleError",
	"InvalidArgument",
	"InvalidState",
	"ConfigError",
]
