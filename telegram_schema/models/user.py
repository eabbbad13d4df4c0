from typing import Optional

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject


class User(TelegramObject) :
	id: StrictInt
	"""Unique identifier for this user or bot. This number may have more than 32 significant bits."""
	is_bot: StrictBool
	"""True, if this user is a bot"""
	first_name: StrictStr
	"""User's or bot's first name"""
	last_name: Optional[StrictStr] = None
	"""User's or bot's last name"""
	username: Optional[StrictStr] = None
	"""User's or bot's username"""
	language_code: Optional[StrictStr] = None
	"""IETF language tag of the user's language"""
	is_premium: Optional[StrictBool] = None
	"""True, if this user is a Telegram Premium user"""
	added_to_attachment_menu: Optional[StrictBool] = None
	"""True, if this user added the bot to the attachment menu"""
	can_join_groups: Optional[StrictBool] = None
	"""True, if the bot can be invited to groups. Returned only in getMe."""
	can_read_all_group_messages: Optional[StrictBool] = None
	"""True, if privacy mode is disabled for the bot. Returned only in getMe."""
	supports_inline_queries: Optional[StrictBool] = None
	"""True, if the bot supports inline queries. Returned only in getMe."""
