from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from telegram_schema.codec.union import TaggedUnion
from telegram_schema.models.base import TaggedObject, TelegramObject
from telegram_schema.models.message import Chat
from telegram_schema.models.user import User


class ChatMemberStatus(Enum) :
	creator: str = 'creator'
	administrator: str = 'administrator'
	member: str = 'member'
	restricted: str = 'restricted'
	left: str = 'left'
	kicked: str = 'kicked'


class ChatMemberBase(TaggedObject) :
	__tagkey__: ClassVar[str] = 'status'

	user: User
	"""Information about the user"""


	@property
	def status(self) -> ChatMemberStatus :
		return ChatMemberStatus(self.__tag__)


class ChatMemberOwner(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.creator.value

	is_anonymous: StrictBool
	"""True, if the user's presence in the chat is hidden"""
	custom_title: Optional[StrictStr] = None


class ChatMemberAdministrator(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.administrator.value

	can_be_edited: StrictBool
	"""True, if the bot is allowed to edit administrator privileges of that user"""
	is_anonymous: StrictBool
	can_manage_chat: StrictBool
	can_delete_messages: StrictBool
	can_manage_video_chats: StrictBool
	can_restrict_members: StrictBool
	can_promote_members: StrictBool
	can_change_info: StrictBool
	can_invite_users: StrictBool
	can_post_messages: Optional[StrictBool] = None
	"""channels only"""
	can_edit_messages: Optional[StrictBool] = None
	"""channels only"""
	can_pin_messages: Optional[StrictBool] = None
	"""groups and supergroups only"""
	can_manage_topics: Optional[StrictBool] = None
	"""supergroups only"""
	custom_title: Optional[StrictStr] = None


class ChatMemberMember(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.member.value


class ChatMemberRestricted(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.restricted.value

	is_member: StrictBool
	can_send_messages: StrictBool
	can_send_audios: Optional[StrictBool] = None
	can_send_documents: Optional[StrictBool] = None
	can_send_photos: Optional[StrictBool] = None
	can_send_videos: Optional[StrictBool] = None
	can_send_video_notes: Optional[StrictBool] = None
	can_send_voice_notes: Optional[StrictBool] = None
	can_send_media_messages: Optional[StrictBool] = None
	can_send_polls: StrictBool
	can_send_other_messages: StrictBool
	can_add_web_page_previews: StrictBool
	can_change_info: StrictBool
	can_invite_users: StrictBool
	can_pin_messages: StrictBool
	can_manage_topics: Optional[StrictBool] = None
	until_date: StrictInt
	"""Date when restrictions will be lifted for this user; unix time. If 0, then the user is restricted forever"""


class ChatMemberLeft(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.left.value


class ChatMemberBanned(ChatMemberBase) :
	__tag__: ClassVar[str] = ChatMemberStatus.kicked.value

	until_date: StrictInt
	"""Date when restrictions will be lifted for this user; unix time. If 0, then the user is banned forever"""


ChatMembers: TaggedUnion = TaggedUnion(
	'status',
	ChatMemberOwner,
	ChatMemberAdministrator,
	ChatMemberMember,
	ChatMemberRestricted,
	ChatMemberLeft,
	ChatMemberBanned,
	name='chat_member',
)

ChatMember = ChatMembers.annotated


class ChatInviteLink(TelegramObject) :
	invite_link: StrictStr
	"""If the link was created by another chat administrator, then the second part of the link will be replaced with “…”."""
	creator: User
	creates_join_request: StrictBool
	is_primary: StrictBool
	is_revoked: StrictBool
	name: Optional[StrictStr] = None
	expire_date: Optional[StrictInt] = None
	member_limit: Optional[StrictInt] = None
	pending_join_request_count: Optional[StrictInt] = None


class ChatMemberUpdated(TelegramObject) :
	chat: Chat
	from_user: User = Field(alias='from')
	"""Performer of the action, which resulted in the change"""
	date: StrictInt
	old_chat_member: ChatMember
	new_chat_member: ChatMember
	invite_link: Optional[ChatInviteLink] = None
	via_chat_folder_invite_link: Optional[StrictBool] = None


class ChatJoinRequest(TelegramObject) :
	chat: Chat
	from_user: User = Field(alias='from')
	user_chat_id: Optional[StrictInt] = None
	"""Identifier of a private chat with the user who sent the join request"""
	date: StrictInt
	bio: Optional[StrictStr] = None
	invite_link: Optional[ChatInviteLink] = None
