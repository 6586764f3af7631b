"""Slash commands to inspect and manage the bot's language file."""
from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from utils.exceptions import LocaleError
from .base_command import is_owner

BLUE = 0x0099FF
GREEN = 0x00FF00

# Discord embed field limits
FIELD_NAME_LIMIT: int = 256
FIELD_VALUE_LIMIT: int = 1024
EMPTY_VALUE: str = "(empty)"

logger = logging.getLogger(__name__)


def _clip(text: str, limit: int) -> str:
	"""Make `text` acceptable as an embed field: never blank, at most `limit` chars."""
	if not text.strip():
		return EMPTY_VALUE
	if len(text) > limit:
		return text[:limit - 1] + "…"
	return text


class LocaleCommands(commands.Cog, name="Locale"):
	"""Language file information and maintenance"""

	def __init__(self, bot: commands.Bot):
		self.bot = bot

	@property
	def locales(self):
		return self.bot.locales

	def _format(self, key: str, *args) -> str:
		"""Translate `key` and apply %-formatting.

		Edited locale files may drop the key or break its placeholders; the raw
		text is then returned with the arguments appended.
		"""
		text = self.locales.translate(key)
		if key in self.locales:
			try:
				return text % args
			except (TypeError, ValueError) as err:
				logger.debug("Cannot format %s (%r): %s", key, text, err)
		return " ".join([text, *map(str, args)])

	async def _send_error(self, interaction: discord.Interaction, err: LocaleError) -> None:
		logger.warning("Locale command failed: %s", err)
		await interaction.response.send_message(
			self._format("errors.locale", err),
			ephemeral=True
		)

	@app_commands.command(name="language", description="Show the current language file")
	async def language(self, interaction: discord.Interaction) -> None:
		"""Embed with code, name, file version and contributors of the active locale."""
		t = self.locales.translate
		try:
			embed = discord.Embed(title=t("locale.info.title"), color=BLUE)
			embed.add_field(name=t("locale.info.code"), value=self.locales.get_locale_code(), inline=True)
			embed.add_field(name=t("locale.info.name"), value=self.locales.get_language_name(), inline=True)
			embed.add_field(name=t("locale.info.version"), value=str(self.locales.get_language_file_version()), inline=True)
			embed.add_field(name=t("locale.info.contributor"), value=self.locales.get_contributor(), inline=False)
		except LocaleError as err:
			await self._send_error(interaction, err)
			return
		await interaction.response.send_message(embed=embed)

	@app_commands.command(name="languages", description="List packaged languages")
	async def languages(self, interaction: discord.Interaction) -> None:
		"""List every locale code shipped with the bot."""
		codes = self.bot.plugin_host.available_locales()
		if not codes:
			await interaction.response.send_message(self.locales.translate("locale.list.empty"), ephemeral=True)
			return
		current = self.locales.get_locale_code()
		lines = [f"**{code}**" if code == current else code for code in codes]
		embed = discord.Embed(
			title=self.locales.translate("locale.list.title"),
			description="\n".join(lines),
			color=BLUE
		)
		await interaction.response.send_message(embed=embed)

	@app_commands.command(name="set_language", description="Switch the bot language")
	@app_commands.describe(code="Locale code, e.g. en_US or fr_FR")
	@is_owner()
	async def set_language(self, interaction: discord.Interaction, code: str) -> None:
		"""Switch to another locale (owner only)."""
		try:
			self.locales.set_locale(code.strip())
		except LocaleError as err:
			await self._send_error(interaction, err)
			return
		await interaction.response.send_message(
			self._format("locale.set.done", self.locales.get_locale_code(), self.locales.get_language_name()),
			ephemeral=True
		)

	@app_commands.command(name="reset_language", description="Restore the language file to its default")
	@is_owner()
	async def reset_language(self, interaction: discord.Interaction) -> None:
		"""Overwrite the edited language file with the packaged one (owner only)."""
		try:
			self.locales.reset_locale_file()
		except LocaleError as err:
			await self._send_error(interaction, err)
			return
		await interaction.response.send_message(
			self._format("locale.reset.done", self.locales.get_locale_code()),
			ephemeral=True
		)

	@app_commands.command(name="translate", description="Look up a translation key")
	@app_commands.describe(key="Translation key, e.g. locale.info.title")
	async def translate(self, interaction: discord.Interaction, key: str) -> None:
		try:
			value = self.locales.translate(key)
		except LocaleError as err:
			await self._send_error(interaction, err)
			return
		embed = discord.Embed(title=self.locales.translate("locale.translate.title"), color=GREEN)
		embed.add_field(name=_clip(key, FIELD_NAME_LIMIT), value=_clip(value, FIELD_VALUE_LIMIT), inline=False)
		await interaction.response.send_message(embed=embed, ephemeral=True)


async def setup(bot):
	"""Setup function for loading the cog"""
	await bot.add_cog(LocaleCommands(bot))
