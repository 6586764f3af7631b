"""Tests for the bot host wiring"""
import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock
from bot import BotPluginHost, LocaleBot, configure_logging
from config import Settings
from i18n import LocaleStore
from utils.exceptions import InvalidState


class TestBotPluginHost(unittest.TestCase):
	"""Host activity follows the client state"""

	def test_active_until_closed(self):
		client = MagicMock()
		client.is_closed.return_value = False
		with TemporaryDirectory() as tmpdir:
			host = BotPluginHost(client, tmpdir)
			store = LocaleStore(host).set_locale("en_US")
			self.assertEqual(store.get_language_name(), "English")
			self.assertTrue((Path(tmpdir) / "lang_en_US.yml").is_file())

			client.is_closed.return_value = True
			with self.assertRaises(InvalidState):
				LocaleStore(host)


class TestLocaleBot(unittest.IsolatedAsyncioTestCase):
	"""Construct the bot without connecting"""

	async def asyncSetUp(self):
		self._tmp = TemporaryDirectory()
		self.addCleanup(self._tmp.cleanup)

	def _settings(self, locale: str) -> Settings:
		return Settings(discord_token=None, owner_id=None, data_dir=self._tmp.name, locale=locale)

	async def test_configured_locale(self):
		bot = LocaleBot(self._settings("fr_FR"))
		self.addAsyncCleanup(bot.close)
		self.assertEqual(bot.locales.get_locale_code(), "fr_FR")
		self.assertEqual(bot.locales.translate("errors.owner_only"), "Commande réservée au propriétaire.")

	async def test_unknown_locale_falls_back(self):
		with self.assertLogs("bot", level="WARNING"):
			bot = LocaleBot(self._settings("xx_XX"))
		self.addAsyncCleanup(bot.close)
		self.assertEqual(bot.locales.get_locale_code(), "en_US")


class TestConfigureLogging(unittest.TestCase):

	def setUp(self):
		root = logging.getLogger()
		saved = (root.level, list(root.handlers))

		def restore():
			for handler in root.handlers:
				if handler not in saved[1]:
					handler.close()
			root.setLevel(saved[0])
			root.handlers[:] = saved[1]
		self.addCleanup(restore)

	def test_file_handler(self):
		with TemporaryDirectory() as tmpdir:
			log_file = Path(tmpdir) / "bot.log"
			configure_logging("debug", str(log_file))
			root = logging.getLogger()
			self.assertEqual(root.level, logging.DEBUG)
			self.assertEqual(len(root.handlers), 2)
			logging.getLogger("test").info("hello")
			for handler in root.handlers:
				handler.flush()
			self.assertIn("hello", log_file.read_text(encoding="utf-8"))
			for handler in root.handlers:
				handler.close()
