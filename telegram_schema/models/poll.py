from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.codec.union import TaggedUnion
from telegram_schema.models.base import TaggedObject, TelegramObject
from telegram_schema.models.entity import MessageEntity
from telegram_schema.models.user import User


class PollType(Enum) :
	regular: str = 'regular'
	quiz: str = 'quiz'


class PollOption(TelegramObject) :
	text: StrictStr
	"""Option text, 1-100 characters"""
	voter_count: StrictInt
	"""Number of users that voted for this option"""


class PollKindBase(TaggedObject) :
	pass


class RegularPoll(PollKindBase) :
	__tag__: ClassVar[str] = PollType.regular.value


class QuizPoll(PollKindBase) :
	__tag__: ClassVar[str] = PollType.quiz.value

	correct_option_id: Optional[StrictInt] = None
	"""0-based identifier of the correct answer option. Available only for polls in the quiz mode, which are closed, or was sent (not forwarded) by the bot or to the private chat with the bot."""
	explanation: Optional[StrictStr] = None
	"""Text that is shown when a user chooses an incorrect answer or taps on the lamp icon, 0-200 characters"""
	explanation_entities: Optional[List[MessageEntity]] = None


PollKinds: TaggedUnion = TaggedUnion('type', RegularPoll, QuizPoll)

PollKind = PollKinds.annotated


class Poll(TelegramObject) :
	__flatten__: ClassVar = { 'kind': PollKinds }

	id: StrictStr
	question: StrictStr
	"""Poll question, 1-300 characters"""
	options: List[PollOption]
	total_voter_count: StrictInt
	is_closed: StrictBool
	is_anonymous: StrictBool
	kind: PollKind
	allows_multiple_answers: StrictBool
	open_period: Optional[StrictInt] = None
	"""Amount of time in seconds the poll will be active after creation"""
	close_date: Optional[StrictInt] = None
	"""Point in time (unix timestamp) when the poll will be automatically closed"""


class PollAnswer(TelegramObject) :
	poll_id: StrictStr
	user: User
	"""The user, who changed the answer to the poll"""
	option_ids: List[StrictInt]
	"""0-based identifiers of chosen answer options. May be empty if the user retracted their vote."""
