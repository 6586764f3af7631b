"""Slash command cogs loaded by the bot."""
