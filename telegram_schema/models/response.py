from typing import Generic, Optional, TypeVar

from pydantic import StrictBool, StrictInt, StrictStr

from telegram_schema.models.base import TelegramObject


T = TypeVar('T')


class ResponseParameters(TelegramObject) :
	"""describes why a request was unsuccessful"""

	migrate_to_chat_id: Optional[StrictInt] = None
	"""The group has been migrated to a supergroup with the specified identifier"""
	retry_after: Optional[StrictInt] = None
	"""In case of exceeding flood control, the number of seconds left to wait before the request can be repeated"""


class Response(TelegramObject, Generic[T]) :
	"""
	the envelope every bot api method responds with. result is only present when ok is true,
	description and error_code are only present when it's false.
	"""

	ok: StrictBool
	result: Optional[T] = None
	description: Optional[StrictStr] = None
	error_code: Optional[StrictInt] = None
	parameters: Optional[ResponseParameters] = None
