from functools import lru_cache
from typing import Any, Type, Union

from pydantic import BaseModel, TypeAdapter

from telegram_schema.codec.flatten import Bundle
from telegram_schema.codec.union import StructuralUnion, TaggedUnion
from telegram_schema.exceptions.decode_error import DecodeErrorHandler, InvalidJson
from telegram_schema.utilities.json import json_load, json_stream


@lru_cache(maxsize=None)
def adapter(model: Any) -> TypeAdapter :
	return TypeAdapter(model)


def load(text: Union[str, bytes]) -> Any :
	try :
		return json_load(text)

	except (ValueError, TypeError) as e :
		raise InvalidJson(f'unable to parse json: {e}') from e


@DecodeErrorHandler('decoding a telegram object')
def decode(model: Union[Type[BaseModel], Any], text: Union[str, bytes]) -> Any :
	"""
	decodes json text into an instance of model. model can be any telegram object or a type built from them,
	such as List[Update] or Response[User].

	raises a DecodeError subclass when the text does not fit the model.
	"""
	data: Any = load(text)

	if isinstance(model, type) and issubclass(model, BaseModel) :
		return model.model_validate(data)

	return adapter(model).validate_python(data)


def encode(value: Any) -> str :
	"""
	encodes a telegram object, or any list/dict of them, as json text. absent optional fields are omitted.
	"""
	return json_stream(value)


__all__ = [
	'Bundle',
	'StructuralUnion',
	'TaggedUnion',
	'decode',
	'encode',
	'load',
]
