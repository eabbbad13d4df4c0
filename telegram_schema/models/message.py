from typing import ClassVar, List, Literal, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from telegram_schema.codec.flatten import Bundle
from telegram_schema.codec.union import StructuralUnion
from telegram_schema.models.base import TelegramObject
from telegram_schema.models.chat import ChatKind, ChatLocation, ChatPermissions, ChatPhoto, ChatUser
from telegram_schema.models.entity import MessageEntity
from telegram_schema.models.keyboard import InlineKeyboardMarkup
from telegram_schema.models.media import Animation, Audio, Contact, Dice, Document, Location, PhotoSize, Sticker, Venue, Video, VideoNote, Voice
from telegram_schema.models.poll import Poll
from telegram_schema.models.service import ForumTopicClosed, ForumTopicCreated, ForumTopicEdited, ForumTopicReopened, Game, GeneralForumTopicHidden, GeneralForumTopicUnhidden, Invoice, MessageAutoDeleteTimerChanged, PassportData, ProximityAlertTriggered, SuccessfulPayment, VideoChatEnded, VideoChatParticipantsInvited, VideoChatScheduled, VideoChatStarted, WebAppData, WriteAccessAllowed
from telegram_schema.models.user import User


class Chat(TelegramObject) :
	__flatten__: ClassVar = { 'user': Bundle(ChatUser) }

	id: StrictInt
	"""Unique identifier for this chat. This number may have more than 32 significant bits."""
	kind: ChatKind = Field(alias='type')
	title: Optional[StrictStr] = None
	"""Title, for supergroups, channels and group chats"""
	username: Optional[StrictStr] = None
	"""Username, for private chats, supergroups and channels if available"""
	user: Optional[ChatUser] = None
	"""The other party in a private chat, written as first_name, last_name, and bio on the chat itself"""
	is_forum: Optional[StrictBool] = None
	photo: Optional[ChatPhoto] = None
	"""Returned only in getChat."""
	active_usernames: Optional[List[StrictStr]] = None
	emoji_status_custom_emoji_id: Optional[StrictStr] = None
	has_private_forwards: Optional[StrictBool] = None
	has_restricted_voice_and_video_messages: Optional[StrictBool] = None
	join_to_send_messages: Optional[StrictBool] = None
	join_by_request: Optional[StrictBool] = None
	description: Optional[StrictStr] = None
	invite_link: Optional[StrictStr] = None
	pinned_message: Optional['Message'] = None
	"""The most recent pinned message (by sending date). Returned only in getChat."""
	permissions: Optional[ChatPermissions] = None
	slow_mode_delay: Optional[StrictInt] = None
	message_auto_delete_time: Optional[StrictInt] = None
	has_aggressive_anti_spam_enabled: Optional[StrictBool] = None
	has_hidden_members: Optional[StrictBool] = None
	has_protected_content: Optional[StrictBool] = None
	sticker_set_name: Optional[StrictStr] = None
	can_set_sticker_set: Optional[StrictBool] = None
	linked_chat_id: Optional[StrictInt] = None
	location: Optional[ChatLocation] = None


class Caption(TelegramObject) :
	"""
	the caption of a media message. its keys, caption and caption_entities, are written directly on the message.
	"""

	text: StrictStr = Field(alias='caption')
	"""0-1024 characters after entities parsing"""
	caption_entities: Optional[List[MessageEntity]] = None


################################################## MESSAGE CONTENT ##################################################
# the order of MessageContents below is the order in which they're matched against a message's keys


class TextContent(TelegramObject) :
	text: StrictStr
	"""The actual UTF-8 text of the message, 0-4096 characters"""
	entities: Optional[List[MessageEntity]] = None
	"""Special entities like usernames, URLs, bot commands, etc. that appear in the text"""


class AnimationContent(TelegramObject) :
	"""animations are always sent alongside a document describing the same file"""

	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	animation: Animation
	document: Document
	caption: Optional[Caption] = None


class AudioContent(TelegramObject) :
	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	audio: Audio
	caption: Optional[Caption] = None


class DocumentContent(TelegramObject) :
	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	document: Document
	caption: Optional[Caption] = None


class PhotoContent(TelegramObject) :
	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	photo: List[PhotoSize]
	"""Available sizes of the photo"""
	caption: Optional[Caption] = None


class StickerContent(TelegramObject) :
	sticker: Sticker


class VideoContent(TelegramObject) :
	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	video: Video
	caption: Optional[Caption] = None


class VideoNoteContent(TelegramObject) :
	video_note: VideoNote


class VoiceContent(TelegramObject) :
	__flatten__: ClassVar = { 'caption': Bundle(Caption) }

	voice: Voice
	caption: Optional[Caption] = None


class ContactContent(TelegramObject) :
	contact: Contact


class DiceContent(TelegramObject) :
	dice: Dice


class GameContent(TelegramObject) :
	game: Game


class PollContent(TelegramObject) :
	poll: Poll


class VenueContent(TelegramObject) :
	"""venues are always sent alongside the venue's location"""

	venue: Venue
	location: Location


class LocationContent(TelegramObject) :
	location: Location


class NewChatMembersContent(TelegramObject) :
	new_chat_members: List[User]
	"""New members that were added to the group or supergroup (the bot itself may be one of these members)"""


class LeftChatMemberContent(TelegramObject) :
	left_chat_member: User


class NewChatTitleContent(TelegramObject) :
	new_chat_title: StrictStr


class NewChatPhotoContent(TelegramObject) :
	new_chat_photo: List[PhotoSize]


class DeleteChatPhotoContent(TelegramObject) :
	delete_chat_photo: Literal[True]


class GroupChatCreatedContent(TelegramObject) :
	group_chat_created: Literal[True]


class SupergroupChatCreatedContent(TelegramObject) :
	supergroup_chat_created: Literal[True]


class ChannelChatCreatedContent(TelegramObject) :
	channel_chat_created: Literal[True]


class MessageAutoDeleteTimerChangedContent(TelegramObject) :
	message_auto_delete_timer_changed: MessageAutoDeleteTimerChanged


class MigrateToChatIdContent(TelegramObject) :
	migrate_to_chat_id: StrictInt
	"""The group has been migrated to a supergroup with the specified identifier"""


class MigrateFromChatIdContent(TelegramObject) :
	migrate_from_chat_id: StrictInt
	"""The supergroup has been migrated from a group with the specified identifier"""


class PinnedMessageContent(TelegramObject) :
	pinned_message: 'Message'
	"""Note that the Message object in this field will not contain further reply_to_message fields even if it is itself a reply."""


class InvoiceContent(TelegramObject) :
	invoice: Invoice


class SuccessfulPaymentContent(TelegramObject) :
	successful_payment: SuccessfulPayment


class ConnectedWebsiteContent(TelegramObject) :
	connected_website: StrictStr
	"""The domain name of the website on which the user has logged in"""


class PassportDataContent(TelegramObject) :
	passport_data: PassportData


class ProximityAlertTriggeredContent(TelegramObject) :
	proximity_alert_triggered: ProximityAlertTriggered


class WriteAccessAllowedContent(TelegramObject) :
	write_access_allowed: WriteAccessAllowed


class ForumTopicCreatedContent(TelegramObject) :
	forum_topic_created: ForumTopicCreated


class ForumTopicEditedContent(TelegramObject) :
	forum_topic_edited: ForumTopicEdited


class ForumTopicClosedContent(TelegramObject) :
	forum_topic_closed: ForumTopicClosed


class ForumTopicReopenedContent(TelegramObject) :
	forum_topic_reopened: ForumTopicReopened


class GeneralForumTopicHiddenContent(TelegramObject) :
	general_forum_topic_hidden: GeneralForumTopicHidden


class GeneralForumTopicUnhiddenContent(TelegramObject) :
	general_forum_topic_unhidden: GeneralForumTopicUnhidden


class VideoChatScheduledContent(TelegramObject) :
	video_chat_scheduled: VideoChatScheduled


class VideoChatStartedContent(TelegramObject) :
	video_chat_started: VideoChatStarted


class VideoChatEndedContent(TelegramObject) :
	video_chat_ended: VideoChatEnded


class VideoChatParticipantsInvitedContent(TelegramObject) :
	video_chat_participants_invited: VideoChatParticipantsInvited


MessageContents: StructuralUnion = StructuralUnion(
	TextContent,
	AnimationContent,
	AudioContent,
	DocumentContent,
	PhotoContent,
	StickerContent,
	VideoContent,
	VideoNoteContent,
	VoiceContent,
	ContactContent,
	DiceContent,
	GameContent,
	PollContent,
	VenueContent,
	LocationContent,
	NewChatMembersContent,
	LeftChatMemberContent,
	NewChatTitleContent,
	NewChatPhotoContent,
	DeleteChatPhotoContent,
	GroupChatCreatedContent,
	SupergroupChatCreatedContent,
	ChannelChatCreatedContent,
	MessageAutoDeleteTimerChangedContent,
	MigrateToChatIdContent,
	MigrateFromChatIdContent,
	PinnedMessageContent,
	InvoiceContent,
	SuccessfulPaymentContent,
	ConnectedWebsiteContent,
	PassportDataContent,
	ProximityAlertTriggeredContent,
	WriteAccessAllowedContent,
	ForumTopicCreatedContent,
	ForumTopicEditedContent,
	ForumTopicClosedContent,
	ForumTopicReopenedContent,
	GeneralForumTopicHiddenContent,
	GeneralForumTopicUnhiddenContent,
	VideoChatScheduledContent,
	VideoChatStartedContent,
	VideoChatEndedContent,
	VideoChatParticipantsInvitedContent,
)

MessageContent = MessageContents.annotated


################################################## MESSAGE ##################################################


class Message(TelegramObject) :
	"""
	a message, whose payload is one of the MessageContents above written directly on the message,
	or absent when the message carries none of their keys.
	"""

	__flatten__: ClassVar = { 'content': MessageContents }

	message_id: StrictInt
	"""Unique message identifier inside this chat"""
	message_thread_id: Optional[StrictInt] = None
	from_user: Optional[User] = Field(None, alias='from')
	"""Sender of the message; empty for messages sent to channels"""
	sender_chat: Optional[Chat] = None
	date: StrictInt
	"""Date the message was sent in Unix time"""
	chat: Chat
	"""Conversation the message belongs to"""
	forward_from: Optional[User] = None
	forward_from_chat: Optional[Chat] = None
	forward_from_message_id: Optional[StrictInt] = None
	forward_signature: Optional[StrictStr] = None
	forward_sender_name: Optional[StrictStr] = None
	forward_date: Optional[StrictInt] = None
	is_topic_message: Optional[StrictBool] = None
	is_automatic_forward: Optional[StrictBool] = None
	reply_to_message: Optional['Message'] = None
	via_bot: Optional[User] = None
	edit_date: Optional[StrictInt] = None
	has_protected_content: Optional[StrictBool] = None
	media_group_id: Optional[StrictStr] = None
	author_signature: Optional[StrictStr] = None
	has_media_spoiler: Optional[StrictBool] = None
	content: Optional[MessageContent] = None
	web_app_data: Optional[WebAppData] = None
	reply_markup: Optional[InlineKeyboardMarkup] = None
	"""Inline keyboard attached to the message. login_url buttons are represented as ordinary url buttons."""


class MessageId(TelegramObject) :
	message_id: StrictInt


PinnedMessageContent.model_rebuild()
Chat.model_rebuild()
Message.model_rebuild()
