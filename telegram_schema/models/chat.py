from enum import Enum
from typing import Optional, Union

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject
from telegram_schema.models.media import Location


ChatId = Union[StrictInt, StrictStr]
"""a chat's numeric identifier, or the @username of a supergroup or channel"""


class ChatKind(Enum) :
	# sender is used for a private chat with the inline query sender
	sender: str = 'sender'
	private: str = 'private'
	group: str = 'group'
	supergroup: str = 'supergroup'
	channel: str = 'channel'


class ChatUser(TelegramObject) :
	"""
	the other party of a private chat. these keys are written directly on the chat object,
	so this is only present when the chat carries at least one of them.
	"""

	first_name: StrictStr
	last_name: Optional[StrictStr] = None
	bio: Optional[StrictStr] = None
	"""Returned only in getChat."""


class ChatPhoto(TelegramObject) :
	small_file_id: StrictStr
	"""File identifier of the small (160x160) chat photo"""
	small_file_unique_id: StrictStr
	big_file_id: StrictStr
	"""File identifier of the big (640x640) chat photo"""
	big_file_unique_id: StrictStr


class ChatPermissions(TelegramObject) :
	can_send_messages: Optional[StrictBool] = None
	can_send_audios: Optional[StrictBool] = None
	can_send_documents: Optional[StrictBool] = None
	can_send_photos: Optional[StrictBool] = None
	can_send_videos: Optional[StrictBool] = None
	can_send_video_notes: Optional[StrictBool] = None
	can_send_voice_notes: Optional[StrictBool] = None
	can_send_media_messages: Optional[StrictBool] = None
	can_send_polls: Optional[StrictBool] = None
	can_send_other_messages: Optional[StrictBool] = None
	"""animations, games, stickers and inline bots"""
	can_add_web_page_previews: Optional[StrictBool] = None
	can_change_info: Optional[StrictBool] = None
	"""Ignored in public supergroups"""
	can_invite_users: Optional[StrictBool] = None
	can_pin_messages: Optional[StrictBool] = None
	"""Ignored in public supergroups"""
	can_manage_topics: Optional[StrictBool] = None
	"""If omitted defaults to the value of can_pin_messages"""


class ChatLocation(TelegramObject) :
	location: Location
	"""The location to which the supergroup is connected. Can't be a live location."""
	address: StrictStr
	"""1-64 characters, as defined by the chat owner"""
