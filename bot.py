"""
Locale Bot

Discord bot hosting the locale store: its messages come from the
lang_<code>.yml files packaged in locales/, copied to DATA_DIR on first use.
"""
import logging
import sys
import asyncio
import traceback
from pathlib import Path

import discord
from discord.ext import commands

from config import DEFAULT_LOCALE, Settings, load_settings
from i18n import LocaleStore
from plugin_host import DirectoryPluginHost
from utils.exceptions import InvalidArgument

LOCALES_DIR = Path(__file__).parent / "locales"

logger = logging.getLogger(__name__)

def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
	"""
	Configure root logging once at startup.
	level: text level (DEBUG/INFO/WARNING/ERROR)
	log_file: optional path, lines are also appended there
	"""
	log_level = getattr(logging, level.upper(), logging.INFO)
	formatter = logging.Formatter(
		"%(asctime)s %(levelname).1s %(name)s: %(message)s",
		datefmt="%H:%M:%S"
	)
	handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
	if log_file:
		handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
	root = logging.getLogger()
	root.setLevel(log_level)
	root.handlers.clear()
	for handler in handlers:
		handler.setFormatter(formatter)
		root.addHandler(handler)


class BotPluginHost(DirectoryPluginHost):
	"""Plugin host backed by a running bot: active until the client is closed."""

	def __init__(self, bot: commands.Bot, data_dir: Path | str, resources_dir: Path | str = LOCALES_DIR):
		super().__init__(resources_dir, data_dir)
		self.bot = bot

	def is_active(self) -> bool:
		return not self.bot.is_closed()


class LocaleBot(commands.Bot):
	"""Bot whose text is served by a LocaleStore"""

	def __init__(self, settings: Settings):
		intents = discord.Intents.default()
		intents.guilds = True

		super().__init__(command_prefix='!', intents=intents)

		self.settings = settings
		self.plugin_host = BotPluginHost(self, settings.data_dir)
		self.locales = LocaleStore(self.plugin_host)
		self._load_locale(settings.locale)

	def _load_locale(self, code: str) -> None:
		"""Set the configured locale, falling back to the default when it isn't packaged."""
		try:
			self.locales.set_locale(code)
		except InvalidArgument as exc:
			if code == DEFAULT_LOCALE:
				raise
			self.locales.set_locale(DEFAULT_LOCALE)
			logger.warning(self.locales.translate("bot.locale.fallback"), code, exc, DEFAULT_LOCALE)
		logger.info(
			self.locales.translate("bot.locale.loaded"),
			self.locales.get_locale_code(),
			self.locales.get_language_name(),
			self.locales.get_language_file_version()
		)

	async def setup_hook(self):
		"""Called when the bot is starting up"""
		t = self.locales.translate
		cogs_to_load = [
			'commands.locale',
		]

		loaded, failed = [], {}
		for ext in cogs_to_load:
			try:
				await self.load_extension(ext)
				loaded.append(ext)
			except (commands.ExtensionError, ImportError, AttributeError) as exc:
				failed[ext] = str(exc)

		# Log summary
		if loaded:
			logger.info(t("bot.cogs.loaded.header"))
			for ext in loaded:
				logger.info(t("bot.cogs.loaded.item"), ext)
		if failed:
			logger.error(t("bot.cogs.failed.header"))
			for ext, err in failed.items():
				logger.error(t("bot.cogs.failed.item"), ext, err)
		if not loaded:
			logger.error(t("bot.cogs.none"))
			return

		# Sync slash commands
		try:
			synced = await self.tree.sync()
			logger.info(t("bot.commands.synced"), len(synced))
		except (discord.HTTPException, discord.Forbidden) as exc:
			logger.error(t("bot.commands.sync_failed"), exc)
			traceback.print_exc()

	async def on_ready(self):
		"""Called when the bot is ready"""
		logger.info(self.locales.translate("bot.ready.user"), self.user)
		logger.info(self.locales.translate("bot.ready.guild_count"), len(self.guilds))


async def main():
	"""Main entry point"""
	settings = load_settings()
	configure_logging(settings.log_level, settings.log_file)
	bot = LocaleBot(settings)

	try:
		await bot.start(settings.discord_token)
	except KeyboardInterrupt:
		logger.info(bot.locales.translate("bot.shutdown.keyboard"))
	except (discord.LoginFailure, discord.HTTPException) as exc:
		logger.critical(bot.locales.translate("bot.shutdown.fatal"), exc)
	finally:
		await bot.close()


if __name__ == "__main__":
	asyncio.run(main())
