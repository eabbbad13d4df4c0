from enum import Enum
from typing import List, Optional

from pydantic import StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject
from telegram_schema.models.entity import MessageEntity
from telegram_schema.models.media import Animation, PhotoSize
from telegram_schema.models.user import User


################################################## SERVICE MESSAGES ##################################################


class MessageAutoDeleteTimerChanged(TelegramObject) :
	message_auto_delete_time: StrictInt
	"""New auto-delete time for messages in the chat; in seconds"""


class ProximityAlertTriggered(TelegramObject) :
	traveler: User
	"""User that triggered the alert"""
	watcher: User
	"""User that set the alert"""
	distance: StrictInt
	"""The distance between the users"""


class WriteAccessAllowed(TelegramObject) :
	web_app_name: Optional[StrictStr] = None
	"""Name of the Web App which was launched from a link"""


class ForumTopicCreated(TelegramObject) :
	name: StrictStr
	icon_color: StrictInt
	"""Color of the topic icon in RGB format"""
	icon_custom_emoji_id: Optional[StrictStr] = None


class ForumTopicEdited(TelegramObject) :
	name: Optional[StrictStr] = None
	icon_custom_emoji_id: Optional[StrictStr] = None


class ForumTopicClosed(TelegramObject) :
	pass


class ForumTopicReopened(TelegramObject) :
	pass


class GeneralForumTopicHidden(TelegramObject) :
	pass


class GeneralForumTopicUnhidden(TelegramObject) :
	pass


class VideoChatScheduled(TelegramObject) :
	start_date: StrictInt
	"""Point in time (unix timestamp) when the video chat is supposed to be started by a chat administrator"""


class VideoChatStarted(TelegramObject) :
	pass


class VideoChatEnded(TelegramObject) :
	duration: StrictInt
	"""Video chat duration in seconds"""


class VideoChatParticipantsInvited(TelegramObject) :
	users: List[User]


class WebAppData(TelegramObject) :
	data: StrictStr
	"""The data. Be aware that a bad client can send arbitrary data in this field."""
	button_text: StrictStr
	"""Text of the web_app keyboard button from which the Web App was opened"""


################################################## PAYMENTS ##################################################


class Invoice(TelegramObject) :
	title: StrictStr
	description: StrictStr
	start_parameter: StrictStr
	"""Unique bot deep-linking parameter that can be used to generate this invoice"""
	currency: StrictStr
	"""Three-letter ISO 4217 currency code"""
	total_amount: StrictInt
	"""Total price in the smallest units of the currency (integer, not float/double)"""


class ShippingAddress(TelegramObject) :
	country_code: StrictStr
	"""Two-letter ISO 3166-1 alpha-2 country code"""
	state: StrictStr
	city: StrictStr
	street_line1: StrictStr
	street_line2: StrictStr
	post_code: StrictStr


class OrderInfo(TelegramObject) :
	name: Optional[StrictStr] = None
	phone_number: Optional[StrictStr] = None
	email: Optional[StrictStr] = None
	shipping_address: Optional[ShippingAddress] = None


class SuccessfulPayment(TelegramObject) :
	currency: StrictStr
	total_amount: StrictInt
	invoice_payload: StrictStr
	"""Bot specified invoice payload"""
	shipping_option_id: Optional[StrictStr] = None
	order_info: Optional[OrderInfo] = None
	telegram_payment_charge_id: StrictStr
	provider_payment_charge_id: StrictStr


################################################## PASSPORT ##################################################


class EncryptedPassportElementType(Enum) :
	personal_details: str = 'personal_details'
	passport: str = 'passport'
	driver_license: str = 'driver_license'
	identity_card: str = 'identity_card'
	internal_passport: str = 'internal_passport'
	address: str = 'address'
	utility_bill: str = 'utility_bill'
	bank_statement: str = 'bank_statement'
	rental_agreement: str = 'rental_agreement'
	passport_registration: str = 'passport_registration'
	temporary_registration: str = 'temporary_registration'
	phone_number: str = 'phone_number'
	email: str = 'email'


class PassportFile(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	file_size: StrictInt
	file_date: StrictInt
	"""Unix time when the file was uploaded"""


class EncryptedPassportElement(TelegramObject) :
	type: EncryptedPassportElementType
	data: Optional[StrictStr] = None
	"""Base64-encoded encrypted Telegram Passport element data"""
	phone_number: Optional[StrictStr] = None
	email: Optional[StrictStr] = None
	files: Optional[List[PassportFile]] = None
	front_side: Optional[PassportFile] = None
	reverse_side: Optional[PassportFile] = None
	selfie: Optional[PassportFile] = None
	translation: Optional[List[PassportFile]] = None
	hash: StrictStr
	"""Base64-encoded element hash for using in PassportElementErrorUnspecified"""


class EncryptedCredentials(TelegramObject) :
	data: StrictStr
	hash: StrictStr
	secret: StrictStr


class PassportData(TelegramObject) :
	data: List[EncryptedPassportElement]
	credentials: EncryptedCredentials


################################################## GAMES ##################################################


class Game(TelegramObject) :
	title: StrictStr
	description: StrictStr
	photo: List[PhotoSize]
	text: Optional[StrictStr] = None
	"""Brief description of the game or high scores included in the game message, 0-4096 characters"""
	text_entities: Optional[List[MessageEntity]] = None
	animation: Optional[Animation] = None
