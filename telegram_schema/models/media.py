from enum import Enum
from typing import Optional

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject


class PhotoSize(TelegramObject) :
	"""one size of a photo or a file/sticker thumbnail"""

	file_id: StrictStr
	"""Identifier for this file, which can be used to download or reuse the file"""
	file_unique_id: StrictStr
	"""Unique identifier for this file, stable over time and across bots. Can't be used to download or reuse the file."""
	width: StrictInt
	height: StrictInt
	file_size: Optional[StrictInt] = None
	"""File size in bytes"""


class Animation(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	width: StrictInt
	"""Video width as defined by sender"""
	height: StrictInt
	"""Video height as defined by sender"""
	duration: StrictInt
	"""Duration of the video in seconds as defined by sender"""
	thumbnail: Optional[PhotoSize] = None
	file_name: Optional[StrictStr] = None
	mime_type: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None


class Audio(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	duration: StrictInt
	"""Duration of the audio in seconds as defined by sender"""
	performer: Optional[StrictStr] = None
	"""Performer of the audio as defined by sender or by audio tags"""
	title: Optional[StrictStr] = None
	"""Title of the audio as defined by sender or by audio tags"""
	file_name: Optional[StrictStr] = None
	mime_type: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None
	thumbnail: Optional[PhotoSize] = None
	"""Thumbnail of the album cover to which the music file belongs"""


class Document(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	thumbnail: Optional[PhotoSize] = None
	file_name: Optional[StrictStr] = None
	mime_type: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None


class MaskPoint(Enum) :
	forehead: str = 'forehead'
	eyes: str = 'eyes'
	mouth: str = 'mouth'
	chin: str = 'chin'


class MaskPosition(TelegramObject) :
	point: MaskPoint
	"""The part of the face relative to which the mask should be placed"""
	x_shift: StrictFloat
	"""Shift by X-axis measured in widths of the mask scaled to the face size, from left to right"""
	y_shift: StrictFloat
	"""Shift by Y-axis measured in heights of the mask scaled to the face size, from top to bottom"""
	scale: StrictFloat
	"""Mask scaling coefficient. For example, 2.0 means double size."""


class File(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	file_size: Optional[StrictInt] = None
	file_path: Optional[StrictStr] = None
	"""Use https://api.telegram.org/file/bot<token>/<file_path> to get the file."""


class StickerType(Enum) :
	regular: str = 'regular'
	mask: str = 'mask'
	custom_emoji: str = 'custom_emoji'


class Sticker(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	type: StickerType
	"""The type of the sticker is independent from its format, which is determined by is_animated and is_video."""
	width: StrictInt
	height: StrictInt
	is_animated: StrictBool
	is_video: StrictBool
	thumbnail: Optional[PhotoSize] = None
	"""Sticker thumbnail in the .WEBP or .JPG format"""
	emoji: Optional[StrictStr] = None
	"""Emoji associated with the sticker"""
	set_name: Optional[StrictStr] = None
	"""Name of the sticker set to which the sticker belongs"""
	premium_animation: Optional[File] = None
	mask_position: Optional[MaskPosition] = None
	custom_emoji_id: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None


class Video(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	width: StrictInt
	height: StrictInt
	duration: StrictInt
	thumbnail: Optional[PhotoSize] = None
	file_name: Optional[StrictStr] = None
	mime_type: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None


class VideoNote(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	length: StrictInt
	"""Video width and height (diameter of the video message) as defined by sender"""
	duration: StrictInt
	thumbnail: Optional[PhotoSize] = None
	file_size: Optional[StrictInt] = None


class Voice(TelegramObject) :
	file_id: StrictStr
	file_unique_id: StrictStr
	duration: StrictInt
	mime_type: Optional[StrictStr] = None
	file_size: Optional[StrictInt] = None


class Contact(TelegramObject) :
	phone_number: StrictStr
	first_name: StrictStr
	last_name: Optional[StrictStr] = None
	user_id: Optional[StrictInt] = None
	"""Contact's user identifier in Telegram"""
	vcard: Optional[StrictStr] = None
	"""Additional data about the contact in the form of a vCard"""


class Dice(TelegramObject) :
	"""an animated emoji that displays a random value"""

	emoji: StrictStr
	"""Emoji on which the dice throw animation is based"""
	value: StrictInt
	"""1-6 for “🎲”, “🎯” and “🎳”, 1-5 for “🏀” and “⚽”, 1-64 for “🎰”"""


class Location(TelegramObject) :
	longitude: StrictFloat
	latitude: StrictFloat
	horizontal_accuracy: Optional[StrictFloat] = None
	"""The radius of uncertainty for the location, measured in meters; 0-1500"""
	live_period: Optional[StrictInt] = None
	"""For active live locations only. Time relative to the message sending date during which the location can be updated; in seconds."""
	heading: Optional[StrictInt] = None
	"""For active live locations only. The direction in which the user is moving, in degrees; 1-360."""
	proximity_alert_radius: Optional[StrictInt] = None
	"""For sent live locations only. The maximum distance for proximity alerts about approaching another chat member, in meters."""


class Venue(TelegramObject) :
	location: Location
	"""Venue location. Can't be a live location"""
	title: StrictStr
	address: StrictStr
	foursquare_id: Optional[StrictStr] = None
	foursquare_type: Optional[StrictStr] = None
	google_place_id: Optional[StrictStr] = None
	google_place_type: Optional[StrictStr] = None
