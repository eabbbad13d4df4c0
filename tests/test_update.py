from typing import List

from ujson import loads

from telegram_schema.codec import decode, encode
from telegram_schema.models.chat_member import ChatMemberLeft, ChatMemberMember
from telegram_schema.models.message import TextContent
from telegram_schema.models.update import CallbackQueryEvent, ChatMemberEvent, EditedMessageEvent, MessageEvent, MyChatMemberEvent, PollAnswerEvent, Update, UpdateKind
from tests.utilities.messages import chat_member_updated, message, private_chat, to_json, user


class TestUpdate :

	def test_MessageUpdate_DecodesMessageEvent(self) :
		# arrange
		data = { 'update_id': 10, 'message': message(text='hello') }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert 10 == result.update_id
		assert isinstance(result.event, MessageEvent)
		assert UpdateKind.message == result.kind
		assert TextContent(text='hello') == result.event.message.content
		assert data == loads(result.to_json())


	def test_EditedMessageUpdate_DecodesEditedMessageEvent(self) :
		# arrange
		data = { 'update_id': 11, 'edited_message': message(text='edited', edit_date=5) }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert isinstance(result.event, EditedMessageEvent)
		assert UpdateKind.edited_message == result.kind
		assert 5 == result.event.edited_message.edit_date


	def test_CallbackQueryUpdate_DecodesCallbackQueryEvent(self) :
		# arrange
		data = {
			'update_id': 12,
			'callback_query': {
				'id': 'query',
				'from': user(),
				'message': message(text='press me'),
				'chat_instance': 'instance',
				'data': 'button-1',
			},
		}

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert isinstance(result.event, CallbackQueryEvent)
		assert 'button-1' == result.event.callback_query.data
		assert data == loads(result.to_json())


	def test_PollAnswerUpdate_DecodesPollAnswerEvent(self) :
		# arrange
		data = { 'update_id': 13, 'poll_answer': { 'poll_id': 'poll', 'user': user(), 'option_ids': [0, 2] } }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert isinstance(result.event, PollAnswerEvent)
		assert [0, 2] == result.event.poll_answer.option_ids


	def test_MyChatMemberUpdate_DecodesStatusVariants(self) :
		# arrange
		data = { 'update_id': 14, 'my_chat_member': chat_member_updated() }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert isinstance(result.event, MyChatMemberEvent)
		assert isinstance(result.event.my_chat_member.old_chat_member, ChatMemberLeft)
		assert isinstance(result.event.my_chat_member.new_chat_member, ChatMemberMember)
		assert data == loads(result.to_json())


	def test_ChatMemberUpdate_DecodesChatMemberEvent(self) :
		# arrange
		data = { 'update_id': 15, 'chat_member': chat_member_updated() }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert isinstance(result.event, ChatMemberEvent)
		assert UpdateKind.chat_member == result.kind


	def test_UnknownUpdateKind_EventAbsent(self) :
		# arrange
		data = { 'update_id': 16, 'message_reaction': { 'chat': private_chat() } }

		# act
		result = Update.from_json(to_json(data))

		# assert
		assert 16 == result.update_id
		assert result.event is None
		assert result.kind is None
		assert { 'update_id': 16 } == loads(result.to_json())


	def test_UpdateList_DecodesEachUpdate(self) :
		# arrange
		data = [
			{ 'update_id': 1, 'message': message(text='one') },
			{ 'update_id': 2, 'edited_message': message(text='two') },
		]

		# act
		result = decode(List[Update], to_json(data))

		# assert
		assert [UpdateKind.message, UpdateKind.edited_message] == [u.kind for u in result]
		assert data == loads(encode(result))


	def test_ExplicitEvent_RoundTrips(self) :
		# arrange
		update = Update.from_json(to_json({ 'update_id': 1, 'message': message(text='one') }))
		value = Update(update_id=2, event=MessageEvent(message=update.event.message))

		# act
		result = decode(Update, encode(value))

		# assert
		assert value == result
