from typing import Optional

from pydantic import Field, StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject
from telegram_schema.models.chat import ChatKind
from telegram_schema.models.media import Location
from telegram_schema.models.message import Message
from telegram_schema.models.service import OrderInfo, ShippingAddress
from telegram_schema.models.user import User


class InlineQuery(TelegramObject) :
	"""an incoming inline query. when the user sends an empty query, the bot could return some default or trending results."""

	id: StrictStr
	from_user: User = Field(alias='from')
	query: StrictStr
	"""Text of the query (up to 256 characters)"""
	offset: StrictStr
	"""Offset of the results to be returned, can be controlled by the bot"""
	chat_type: Optional[ChatKind] = None
	"""Type of the chat from which the inline query was sent. Unset for queries sent from secret chats."""
	location: Optional[Location] = None


class ChosenInlineResult(TelegramObject) :
	result_id: StrictStr
	from_user: User = Field(alias='from')
	location: Optional[Location] = None
	inline_message_id: Optional[StrictStr] = None
	"""Available only if there is an inline keyboard attached to the message"""
	query: StrictStr


class CallbackQuery(TelegramObject) :
	id: StrictStr
	from_user: User = Field(alias='from')
	message: Optional[Message] = None
	"""Message with the callback button that originated the query. Not present if the message is too old."""
	inline_message_id: Optional[StrictStr] = None
	chat_instance: StrictStr
	"""Global identifier, uniquely corresponding to the chat to which the message with the callback button was sent"""
	data: Optional[StrictStr] = None
	game_short_name: Optional[StrictStr] = None


class ShippingQuery(TelegramObject) :
	id: StrictStr
	from_user: User = Field(alias='from')
	invoice_payload: StrictStr
	shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject) :
	id: StrictStr
	from_user: User = Field(alias='from')
	currency: StrictStr
	total_amount: StrictInt
	invoice_payload: StrictStr
	shipping_option_id: Optional[StrictStr] = None
	order_info: Optional[OrderInfo] = None
