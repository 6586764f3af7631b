"""
Base command utilities and decorators
"""
from discord import app_commands, Interaction

def is_owner():
	"""Check if the command is run by the bot owner (BOT_OWNER_ID)"""
	async def predicate(interaction: Interaction) -> bool:
		bot = interaction.client
		owner_id = bot.settings.owner_id
		if owner_id is None or interaction.user.id != owner_id:
			await interaction.response.send_message(
				bot.locales.translate("errors.owner_only"),
				ephemeral=True
			)
			return False
		return True
	return app_commands.check(predicate)
