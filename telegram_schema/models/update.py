from enum import Enum
from typing import ClassVar, Optional

from pydantic import StrictInt

from telegram_schema.codec.union import StructuralUnion
from telegram_schema.models.base import TelegramObject
from telegram_schema.models.chat_member import ChatJoinRequest, ChatMemberUpdated
from telegram_schema.models.message import Message
from telegram_schema.models.poll import Poll, PollAnswer
from telegram_schema.models.query import CallbackQuery, ChosenInlineResult, InlineQuery, PreCheckoutQuery, ShippingQuery


class UpdateKind(Enum) :
	"""the names used by getUpdates' and setWebhook's allowed_updates"""
	message: str = 'message'
	edited_message: str = 'edited_message'
	channel_post: str = 'channel_post'
	edited_channel_post: str = 'edited_channel_post'
	inline_query: str = 'inline_query'
	chosen_inline_result: str = 'chosen_inline_result'
	callback_query: str = 'callback_query'
	shipping_query: str = 'shipping_query'
	pre_checkout_query: str = 'pre_checkout_query'
	poll: str = 'poll'
	poll_answer: str = 'poll_answer'
	my_chat_member: str = 'my_chat_member'
	chat_member: str = 'chat_member'
	chat_join_request: str = 'chat_join_request'


class UpdateEventBase(TelegramObject) :
	__kind__: ClassVar[UpdateKind]


class MessageEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.message

	message: Message
	"""New incoming message of any kind - text, photo, sticker, etc."""


class EditedMessageEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.edited_message

	edited_message: Message


class ChannelPostEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.channel_post

	channel_post: Message


class EditedChannelPostEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.edited_channel_post

	edited_channel_post: Message


class InlineQueryEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.inline_query

	inline_query: InlineQuery


class ChosenInlineResultEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.chosen_inline_result

	chosen_inline_result: ChosenInlineResult


class CallbackQueryEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.callback_query

	callback_query: CallbackQuery


class ShippingQueryEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.shipping_query

	shipping_query: ShippingQuery
	"""Only for invoices with flexible price"""


class PreCheckoutQueryEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.pre_checkout_query

	pre_checkout_query: PreCheckoutQuery


class PollEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.poll

	poll: Poll
	"""Bots receive only updates about stopped polls and polls, which are sent by the bot"""


class PollAnswerEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.poll_answer

	poll_answer: PollAnswer


class MyChatMemberEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.my_chat_member

	my_chat_member: ChatMemberUpdated
	"""The bot's chat member status was updated in a chat"""


class ChatMemberEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.chat_member

	chat_member: ChatMemberUpdated


class ChatJoinRequestEvent(UpdateEventBase) :
	__kind__: ClassVar[UpdateKind] = UpdateKind.chat_join_request

	chat_join_request: ChatJoinRequest


UpdateEvents: StructuralUnion = StructuralUnion(
	MessageEvent,
	EditedMessageEvent,
	ChannelPostEvent,
	EditedChannelPostEvent,
	InlineQueryEvent,
	ChosenInlineResultEvent,
	CallbackQueryEvent,
	ShippingQueryEvent,
	PreCheckoutQueryEvent,
	PollEvent,
	PollAnswerEvent,
	MyChatMemberEvent,
	ChatMemberEvent,
	ChatJoinRequestEvent,
	name='event',
)

UpdateEvent = UpdateEvents.annotated


class Update(TelegramObject) :
	"""
	an incoming update. at most one event is present in any given update; updates of a kind this library
	doesn't know decode with no event.
	"""

	__flatten__: ClassVar = { 'event': UpdateEvents }

	update_id: StrictInt
	"""The update's unique identifier. Update identifiers start from a certain positive number and increase sequentially."""
	event: Optional[UpdateEvent] = None


	@property
	def kind(self) -> Optional[UpdateKind] :
		return self.event.__kind__ if self.event is not None else None
