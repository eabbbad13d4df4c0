from typing import Any, ClassVar, Dict, Union

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer, model_validator

from telegram_schema.codec import decode, encode
from telegram_schema.codec.flatten import collect_flattened, merge_flattened
from telegram_schema.exceptions.decode_error import RaisesNestedDecodeError


class TelegramObject(BaseModel) :
	"""
	base for every telegram object. objects are immutable, accept either the wire key or the python name of
	aliased fields, ignore keys they do not know, and always encode using the wire keys.

	__flatten__ maps a field name to the Bundle, StructuralUnion, or TaggedUnion whose keys live at this object's level.
	"""

	model_config = ConfigDict(
		frozen=True,
		populate_by_name=True,
		serialize_by_alias=True,
		extra='ignore',
	)

	__flatten__: ClassVar[Dict[str, Any]] = { }


	@model_validator(mode='before')
	@classmethod
	@RaisesNestedDecodeError
	def collectFlattened(cls, data: Any) -> Any :
		if cls.__flatten__ and isinstance(data, dict) :
			return collect_flattened(dict(data), cls.__flatten__)

		return data


	@model_serializer(mode='wrap')
	def wireSerializer(self, handler: SerializerFunctionWrapHandler) -> Any :
		return self.toWire(handler(self))


	def toWire(self, data: Any) -> Any :
		if self.__flatten__ and isinstance(data, dict) :
			return merge_flattened(data, self.__flatten__)

		return data


	@classmethod
	def from_json(cls, text: Union[str, bytes]) -> 'TelegramObject' :
		return decode(cls, text)


	def to_json(self) -> str :
		return encode(self)


class TaggedObject(TelegramObject) :
	"""
	a variant of a TaggedUnion. it is always written with its tag first, under __tagkey__.
	"""

	__tagkey__: ClassVar[str] = 'type'
	__tag__: ClassVar[str]


	def toWire(self, data: Any) -> Any :
		data = TelegramObject.toWire(self, data)

		if isinstance(data, dict) :
			return { self.__tagkey__: self.__tag__, **data }

		return data
