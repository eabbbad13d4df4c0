from enum import Enum
from typing import Any, ClassVar, List, Optional, Union

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.codec import decode, encode
from telegram_schema.exceptions import ResponseNotOk
from telegram_schema.models.base import TelegramObject
from telegram_schema.models.bot import BotCommand, BotCommandScope, WebhookInfo
from telegram_schema.models.chat import ChatId
from telegram_schema.models.entity import MessageEntity
from telegram_schema.models.keyboard import ReplyMarkup
from telegram_schema.models.message import Message
from telegram_schema.models.response import Response
from telegram_schema.models.update import Update, UpdateKind
from telegram_schema.models.user import User


class Call(TelegramObject) :
	"""
	the request body of a bot api method. each call names the method it is sent to and the type its response's result decodes into.
	sending the request is left to the transport: post payload() to https://api.telegram.org/bot<token>/<method>
	and hand the response body to decodeResponse.
	"""

	__method__: ClassVar[str]
	__response__: ClassVar[Any]


	@property
	def method(self) -> str :
		return self.__method__


	def payload(self) -> str :
		return encode(self)


	@classmethod
	def decodeResponse(cls, text: Union[str, bytes]) -> Any :
		response: Response = decode(Response[cls.__response__], text)

		if not response.ok :
			raise ResponseNotOk(
				response.description,
				response.error_code,
				parameters=response.parameters,
			)

		return response.result


class ParseMode(Enum) :
	markdown_v2: str = 'MarkdownV2'
	html: str = 'HTML'
	markdown: str = 'Markdown'


class GetUpdates(Call) :
	"""receive incoming updates using long polling"""

	__method__: ClassVar[str] = 'getUpdates'
	__response__: ClassVar[Any] = List[Update]

	offset: Optional[StrictInt] = None
	"""Identifier of the first update to be returned. Must be greater by one than the highest among the identifiers of previously received updates."""
	limit: Optional[StrictInt] = None
	"""Values between 1-100 are accepted. Defaults to 100."""
	timeout: Optional[StrictInt] = None
	"""Timeout in seconds for long polling. Defaults to 0, i.e. usual short polling."""
	allowed_updates: Optional[List[UpdateKind]] = None


class GetWebhookInfo(Call) :
	__method__: ClassVar[str] = 'getWebhookInfo'
	__response__: ClassVar[Any] = WebhookInfo


class GetMe(Call) :
	__method__: ClassVar[str] = 'getMe'
	__response__: ClassVar[Any] = User


class Close(Call) :
	"""close the bot instance before moving it from one local server to another"""

	__method__: ClassVar[str] = 'close'
	__response__: ClassVar[Any] = bool


class SendMessage(Call) :
	__method__: ClassVar[str] = 'sendMessage'
	__response__: ClassVar[Any] = Message

	chat_id: ChatId
	message_thread_id: Optional[StrictInt] = None
	text: StrictStr
	"""1-4096 characters after entities parsing"""
	parse_mode: Optional[ParseMode] = None
	entities: Optional[List[MessageEntity]] = None
	"""Can be specified instead of parse_mode"""
	disable_web_page_preview: Optional[StrictBool] = None
	disable_notification: Optional[StrictBool] = None
	protect_content: Optional[StrictBool] = None
	reply_to_message_id: Optional[StrictInt] = None
	allow_sending_without_reply: Optional[StrictBool] = None
	reply_markup: Optional[ReplyMarkup] = None


class SetMyCommands(Call) :
	__method__: ClassVar[str] = 'setMyCommands'
	__response__: ClassVar[Any] = bool

	commands: List[BotCommand]
	"""At most 100 commands can be specified."""
	scope: Optional[BotCommandScope] = None
	language_code: Optional[StrictStr] = None
	"""A two-letter ISO 639-1 language code. If empty, commands will be applied to all users from the given scope."""


class GetMyCommands(Call) :
	__method__: ClassVar[str] = 'getMyCommands'
	__response__: ClassVar[Any] = List[BotCommand]

	scope: Optional[BotCommandScope] = None
	language_code: Optional[StrictStr] = None


class DeleteMyCommands(Call) :
	__method__: ClassVar[str] = 'deleteMyCommands'
	__response__: ClassVar[Any] = bool

	scope: Optional[BotCommandScope] = None
	language_code: Optional[StrictStr] = None
