from typing import ClassVar, Optional

from pydantic import StrictInt, StrictStr

from telegram_schema.codec.union import TaggedUnion
from telegram_schema.models.base import TaggedObject, TelegramObject
from telegram_schema.models.user import User


class MessageEntityKind(TaggedObject) :
	pass


class MentionKind(MessageEntityKind) :
	"""@username"""
	__tag__: ClassVar[str] = 'mention'


class HashtagKind(MessageEntityKind) :
	"""#hashtag"""
	__tag__: ClassVar[str] = 'hashtag'


class CashtagKind(MessageEntityKind) :
	"""$USD"""
	__tag__: ClassVar[str] = 'cashtag'


class BotCommandKind(MessageEntityKind) :
	"""/start@jobs_bot"""
	__tag__: ClassVar[str] = 'bot_command'


class UrlKind(MessageEntityKind) :
	"""https://telegram.org"""
	__tag__: ClassVar[str] = 'url'


class EmailKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'email'


class PhoneNumberKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'phone_number'


class BoldKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'bold'


class ItalicKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'italic'


class UnderlineKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'underline'


class StrikethroughKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'strikethrough'


class SpoilerKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'spoiler'


class CodeKind(MessageEntityKind) :
	"""monowidth string"""
	__tag__: ClassVar[str] = 'code'


class PreKind(MessageEntityKind) :
	"""monowidth block"""
	__tag__: ClassVar[str] = 'pre'

	language: Optional[StrictStr] = None
	"""The programming language of the entity text"""


class TextLinkKind(MessageEntityKind) :
	"""clickable text urls"""
	__tag__: ClassVar[str] = 'text_link'

	url: StrictStr
	"""URL that will be opened after user taps on the text"""


class TextMentionKind(MessageEntityKind) :
	"""mentions of users without usernames"""
	__tag__: ClassVar[str] = 'text_mention'

	user: User


class CustomEmojiKind(MessageEntityKind) :
	__tag__: ClassVar[str] = 'custom_emoji'

	custom_emoji_id: StrictStr
	"""Use getCustomEmojiStickers to get full information about the sticker"""


EntityKinds: TaggedUnion = TaggedUnion(
	'type',
	MentionKind,
	HashtagKind,
	CashtagKind,
	BotCommandKind,
	UrlKind,
	EmailKind,
	PhoneNumberKind,
	BoldKind,
	ItalicKind,
	UnderlineKind,
	StrikethroughKind,
	SpoilerKind,
	CodeKind,
	PreKind,
	TextLinkKind,
	TextMentionKind,
	CustomEmojiKind,
)

EntityKind = EntityKinds.annotated


class MessageEntity(TelegramObject) :
	"""
	a special entity in a text message, such as a hashtag, username, or url.
	the entity's kind is written flat next to offset and length, discriminated by its "type" key.
	"""

	__flatten__: ClassVar = { 'kind': EntityKinds }

	kind: EntityKind
	offset: StrictInt
	"""Offset in UTF-16 code units to the start of the entity"""
	length: StrictInt
	"""Length of the entity in UTF-16 code units"""
