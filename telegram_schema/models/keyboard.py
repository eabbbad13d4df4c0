from typing import ClassVar, List, Literal, Optional

from pydantic import StrictBool, StrictStr

from telegram_schema.codec.union import StructuralUnion
from telegram_schema.models.base import TelegramObject
from telegram_schema.models.poll import PollType


class WebAppInfo(TelegramObject) :
	url: StrictStr
	"""An HTTPS URL of a Web App to be opened with additional data as specified in Initializing Web Apps"""


class LoginUrl(TelegramObject) :
	url: StrictStr
	"""An HTTPS URL to be opened with user authorization data added to the query string when the button is pressed"""
	forward_text: Optional[StrictStr] = None
	bot_username: Optional[StrictStr] = None
	request_write_access: Optional[StrictBool] = None


class CallbackGame(TelegramObject) :
	"""a placeholder, currently holds no information"""
	pass


################################################## INLINE KEYBOARDS ##################################################


class OpenUrl(TelegramObject) :
	url: StrictStr
	"""HTTP or tg:// URL to be opened when the button is pressed"""


class Callback(TelegramObject) :
	callback_data: StrictStr
	"""Data to be sent in a callback query to the bot when button is pressed, 1-64 bytes"""


class OpenWebApp(TelegramObject) :
	web_app: WebAppInfo


class Login(TelegramObject) :
	login_url: LoginUrl


class SwitchInlineQuery(TelegramObject) :
	switch_inline_query: StrictStr
	"""May be empty, in which case just the bot's username will be inserted"""


class SwitchInlineQueryCurrentChat(TelegramObject) :
	switch_inline_query_current_chat: StrictStr


class PlayGame(TelegramObject) :
	callback_game: CallbackGame
	"""Must always be the first button in the first row"""


class Pay(TelegramObject) :
	pay: Literal[True]
	"""Must always be the first button in the first row"""


InlineKeyboardButtonActions: StructuralUnion = StructuralUnion(
	OpenUrl,
	Callback,
	OpenWebApp,
	Login,
	SwitchInlineQuery,
	SwitchInlineQueryCurrentChat,
	PlayGame,
	Pay,
	required=True,
	name='action',
)

InlineKeyboardButtonAction = InlineKeyboardButtonActions.annotated


class InlineKeyboardButton(TelegramObject) :
	"""exactly one action key must be present next to the label"""

	__flatten__: ClassVar = { 'action': InlineKeyboardButtonActions }

	text: StrictStr
	"""Label text on the button"""
	action: InlineKeyboardButtonAction


class InlineKeyboardMarkup(TelegramObject) :
	inline_keyboard: List[List[InlineKeyboardButton]]


################################################## REPLY KEYBOARDS ##################################################


class KeyboardButtonPollType(TelegramObject) :
	type: Optional[PollType] = None
	"""If omitted, the user will be allowed to create a poll of any type"""


class RequestContact(TelegramObject) :
	request_contact: StrictBool


class RequestLocation(TelegramObject) :
	request_location: StrictBool


class RequestPoll(TelegramObject) :
	request_poll: KeyboardButtonPollType


class LaunchWebApp(TelegramObject) :
	web_app: WebAppInfo


KeyboardButtonActions: StructuralUnion = StructuralUnion(
	RequestContact,
	RequestLocation,
	RequestPoll,
	LaunchWebApp,
	name='action',
)

KeyboardButtonAction = KeyboardButtonActions.annotated


class KeyboardButton(TelegramObject) :
	"""without an action, the button's text is sent as a message when it is pressed"""

	__flatten__: ClassVar = { 'action': KeyboardButtonActions }

	text: StrictStr
	action: Optional[KeyboardButtonAction] = None


class ReplyKeyboardMarkup(TelegramObject) :
	keyboard: List[List[KeyboardButton]]
	is_persistent: Optional[StrictBool] = None
	resize_keyboard: Optional[StrictBool] = None
	one_time_keyboard: Optional[StrictBool] = None
	input_field_placeholder: Optional[StrictStr] = None
	"""1-64 characters"""
	selective: Optional[StrictBool] = None


class ReplyKeyboardRemove(TelegramObject) :
	remove_keyboard: Literal[True]
	selective: Optional[StrictBool] = None


class ForceReply(TelegramObject) :
	force_reply: Literal[True]
	"""Shows reply interface to the user, as if they manually selected the bot's message and tapped 'Reply'"""
	input_field_placeholder: Optional[StrictStr] = None
	selective: Optional[StrictBool] = None


ReplyMarkups: StructuralUnion = StructuralUnion(
	InlineKeyboardMarkup,
	ReplyKeyboardMarkup,
	ReplyKeyboardRemove,
	ForceReply,
	required=True,
	name='reply_markup',
)

ReplyMarkup = ReplyMarkups.annotated
