from typing import ClassVar, List, Optional

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.codec.union import TaggedUnion
from telegram_schema.models.base import TaggedObject, TelegramObject
from telegram_schema.models.chat import ChatId


class BotCommand(TelegramObject) :
	command: StrictStr
	"""Text of the command; 1-32 characters. Can contain only lowercase English letters, digits and underscores."""
	description: StrictStr
	"""Description of the command; 1-256 characters."""


class BotCommandScopeBase(TaggedObject) :
	pass


class BotCommandScopeDefault(BotCommandScopeBase) :
	"""used if no commands with a narrower scope are specified for the user"""
	__tag__: ClassVar[str] = 'default'


class BotCommandScopeAllPrivateChats(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'all_private_chats'


class BotCommandScopeAllGroupChats(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'all_group_chats'


class BotCommandScopeAllChatAdministrators(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'all_chat_administrators'


class BotCommandScopeChat(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'chat'

	chat_id: ChatId
	"""Unique identifier for the target chat or username of the target supergroup (in the format @supergroupusername)"""


class BotCommandScopeChatAdministrators(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'chat_administrators'

	chat_id: ChatId


class BotCommandScopeChatMember(BotCommandScopeBase) :
	__tag__: ClassVar[str] = 'chat_member'

	chat_id: ChatId
	user_id: StrictInt
	"""Unique identifier of the target user"""


BotCommandScopes: TaggedUnion = TaggedUnion(
	'type',
	BotCommandScopeDefault,
	BotCommandScopeAllPrivateChats,
	BotCommandScopeAllGroupChats,
	BotCommandScopeAllChatAdministrators,
	BotCommandScopeChat,
	BotCommandScopeChatAdministrators,
	BotCommandScopeChatMember,
	name='scope',
)

BotCommandScope = BotCommandScopes.annotated


class WebhookInfo(TelegramObject) :
	"""the current status of a webhook"""

	url: StrictStr
	"""Webhook URL, may be empty if webhook is not set up"""
	has_custom_certificate: StrictBool
	pending_update_count: StrictInt
	"""Number of updates awaiting delivery"""
	ip_address: Optional[StrictStr] = None
	last_error_date: Optional[StrictInt] = None
	"""Unix time for the most recent error that happened when trying to deliver an update via webhook"""
	last_error_message: Optional[StrictStr] = None
	last_synchronization_error_date: Optional[StrictInt] = None
	"""Unix time of the most recent error that happened when trying to synchronize available updates with Telegram datacenters"""
	max_connections: Optional[StrictInt] = None
	allowed_updates: Optional[List[StrictStr]] = None
	"""A list of update types the bot is subscribed to. Defaults to all update types except chat_member"""
