from ujson import loads

from telegram_schema.codec import decode, encode
from telegram_schema.models.chat import ChatKind, ChatUser
from telegram_schema.models.entity import BotCommandKind, MessageEntity
from telegram_schema.models.media import Document, Location, PhotoSize, Venue
from telegram_schema.models.message import AnimationContent, Caption, Chat, DeleteChatPhotoContent, DocumentContent, ForumTopicClosedContent, LocationContent, Message, PhotoContent, PinnedMessageContent, TextContent, VenueContent
from tests.utilities.messages import document, location, message, photo_size, private_chat, to_json, user


START_COMMAND = '{"message_id":1,"chat":{"id":5,"type":"private"},"date":1,"text":"/start","entities":[{"type":"bot_command","offset":0,"length":6}]}'


class TestTextMessage :

	def test_StartCommand_DecodesToTextWithBotCommandEntity(self) :
		# act
		result = Message.from_json(START_COMMAND)

		# assert
		assert 1 == result.message_id
		assert 1 == result.date
		assert Chat(id=5, kind=ChatKind.private) == result.chat
		assert isinstance(result.content, TextContent)
		assert '/start' == result.content.text
		assert [MessageEntity(kind=BotCommandKind(), offset=0, length=6)] == result.content.entities


	def test_StartCommand_EncodesToEquivalentJson(self) :
		# arrange
		message = Message.from_json(START_COMMAND)

		# act
		result = message.to_json()

		# assert
		assert loads(START_COMMAND) == loads(result)


	def test_StartCommand_RoundTripsToEqualValue(self) :
		# arrange
		message = Message.from_json(START_COMMAND)

		# act
		result = decode(Message, encode(message))

		# assert
		assert message == result


	def test_TextAndPhoto_TextTakesPrecedence(self) :
		# arrange
		data = message(text='hello', photo=[photo_size()])

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert TextContent(text='hello') == result.content


	def test_EmptyEntities_KeptOnEncode(self) :
		# arrange
		data = message(text='hello', entities=[])

		# act
		result = Message.from_json(to_json(data)).to_json()

		# assert
		assert data == loads(result)


	def test_ExplicitConstruction_EncodesFlat(self) :
		# arrange
		value = Message(
			message_id=3,
			chat=Chat(id=5, kind=ChatKind.private),
			date=10,
			content=TextContent(text='hi'),
		)

		# act
		result = loads(value.to_json())

		# assert
		assert { 'message_id': 3, 'chat': { 'id': 5, 'type': 'private' }, 'date': 10, 'text': 'hi' } == result


	def test_FromUser_UsesFromKey(self) :
		# arrange
		data = message(text='hello', **{ 'from': user(id=7) })

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert 7 == result.from_user.id
		assert data == loads(result.to_json())


class TestMessageContent :

	def test_NoContentKeys_ContentAbsent(self) :
		# arrange
		data = message()

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert result.content is None
		assert data == loads(result.to_json())


	def test_AnimationWithDocument_DecodesAsAnimation(self) :
		# arrange
		animation = {
			'file_id': 'animation',
			'file_unique_id': 'animation-unique',
			'width': 320,
			'height': 240,
			'duration': 3,
		}
		data = message(animation=animation, document=document())

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, AnimationContent)
		assert 320 == result.content.animation.width
		assert Document(file_id='document', file_unique_id='document-unique', file_name='file.gif', mime_type='image/gif') == result.content.document
		assert data == loads(result.to_json())


	def test_DocumentAlone_DecodesAsDocument(self) :
		# arrange
		data = message(document=document())

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, DocumentContent)


	def test_VenueWithLocation_DecodesAsVenue(self) :
		# arrange
		venue = { 'location': location(), 'title': 'cafe', 'address': '1 main st' }
		data = message(venue=venue, location=location())

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, VenueContent)
		assert Venue(location=Location(longitude=2.5, latitude=48.5), title='cafe', address='1 main st') == result.content.venue
		assert data == loads(result.to_json())


	def test_LocationAlone_DecodesAsLocation(self) :
		# arrange
		data = message(location=location())

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert LocationContent(location=Location(longitude=2.5, latitude=48.5)) == result.content


	def test_DeleteChatPhoto_DecodesServiceContent(self) :
		# arrange
		data = message(delete_chat_photo=True)

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert DeleteChatPhotoContent(delete_chat_photo=True) == result.content


	def test_EmptyServiceObject_RoundTrips(self) :
		# arrange
		data = message(forum_topic_closed={ })

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, ForumTopicClosedContent)
		assert data == loads(result.to_json())


	def test_PinnedMessage_DecodesNestedMessage(self) :
		# arrange
		data = message(message_id=2, pinned_message=message(text='pinned'))

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, PinnedMessageContent)
		assert TextContent(text='pinned') == result.content.pinned_message.content
		assert data == loads(result.to_json())


class TestCaption :

	def test_PhotoWithCaption_CaptionRebuiltFromFlatKeys(self) :
		# arrange
		entities = [{ 'type': 'bold', 'offset': 0, 'length': 2 }]
		data = message(photo=[photo_size()], caption='hi there', caption_entities=entities)

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert isinstance(result.content, PhotoContent)
		assert [PhotoSize(file_id='photo', file_unique_id='photo-unique', width=90, height=90)] == result.content.photo
		assert 'hi there' == result.content.caption.text
		assert 1 == len(result.content.caption.caption_entities)


	def test_PhotoWithCaption_EncodesCaptionFlat(self) :
		# arrange
		data = message(photo=[photo_size()], caption='hi there')

		# act
		result = loads(Message.from_json(to_json(data)).to_json())

		# assert
		assert data == result
		assert 'text' not in result


	def test_PhotoWithoutCaption_CaptionAbsent(self) :
		# arrange
		data = message(photo=[photo_size()])

		# act
		result = Message.from_json(to_json(data))

		# assert
		assert result.content.caption is None
		assert data == loads(result.to_json())


	def test_ExplicitCaption_EncodesFlat(self) :
		# arrange
		value = PhotoContent(photo=[PhotoSize(file_id='a', file_unique_id='b', width=1, height=1)], caption=Caption(text='hello'))

		# act
		result = loads(encode(value))

		# assert
		assert { 'photo': [{ 'file_id': 'a', 'file_unique_id': 'b', 'width': 1, 'height': 1 }], 'caption': 'hello' } == result


class TestChat :

	def test_PrivateChatWithNames_ChatUserRebuilt(self) :
		# arrange
		data = { **private_chat(), 'first_name': 'ada', 'last_name': 'lovelace' }

		# act
		result = Chat.from_json(to_json(data))

		# assert
		assert ChatUser(first_name='ada', last_name='lovelace') == result.user
		assert data == loads(result.to_json())


	def test_GroupChat_ChatUserAbsent(self) :
		# arrange
		data = { 'id': -100, 'type': 'supergroup', 'title': 'a group' }

		# act
		result = Chat.from_json(to_json(data))

		# assert
		assert result.user is None
		assert ChatKind.supergroup == result.kind
		assert data == loads(result.to_json())
