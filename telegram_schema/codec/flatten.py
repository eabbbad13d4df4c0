from functools import cached_property
from typing import Any, Dict, FrozenSet, Optional, Type

from pydantic import BaseModel, ValidationError

from telegram_schema.exceptions.decode_error import translateValidationError


def validate(model: Type[BaseModel], data: Dict[str, Any]) -> BaseModel :
	"""
	validates data into model, translating pydantic's ValidationError into a DecodeError whose field is relative to data.
	the validator hook that called this wraps the DecodeError again, so the enclosing objects prefix their own location.
	"""
	try :
		return model.model_validate(data)

	except ValidationError as e :
		raise translateValidationError(e) from e


def wire_keys(model: Type[BaseModel]) -> FrozenSet[str] :
	"""
	every top level json key an object of this model may carry, with flattened slots expanded into their own keys
	"""
	flattened: Dict[str, Any] = getattr(model, '__flatten__', { })
	keys = set()

	for name, field in model.model_fields.items() :
		if name in flattened :
			keys.update(flattened[name].keys)

		else :
			keys.add(field.alias or name)

	return frozenset(keys)


def required_keys(model: Type[BaseModel]) -> FrozenSet[str] :
	flattened: Dict[str, Any] = getattr(model, '__flatten__', { })
	keys = set()

	for name, field in model.model_fields.items() :
		if name in flattened :
			keys.update(flattened[name].required_keys)

		elif field.is_required() :
			keys.add(field.alias or name)

	return frozenset(keys)


class Bundle :
	"""
	an optional sub-object whose keys live at its parent's level.
	it is only rebuilt on decode when at least one of its keys is present.
	"""

	def __init__(self, model: Type[BaseModel]) -> None :
		self.model: Type[BaseModel] = model


	def __repr__(self) -> str :
		return f'{self.__class__.__name__}({self.model.__name__})'


	@cached_property
	def keys(self) -> FrozenSet[str] :
		return wire_keys(self.model)


	@property
	def required_keys(self) -> FrozenSet[str] :
		return frozenset()


	def extract(self, data: Dict[str, Any]) -> Optional[BaseModel] :
		sub: Dict[str, Any] = { }

		for key in self.keys :
			value = data.pop(key, None)
			if value is not None :
				sub[key] = value

		if not sub :
			return None

		return validate(self.model, sub)


def collect_flattened(data: Dict[str, Any], flatten: Dict[str, Any]) -> Dict[str, Any] :
	"""
	moves the keys belonging to each flattened slot out of data and into that slot.
	slots already holding a model, or given explicitly under a name that is not one of their own keys, are left alone.
	"""
	for name, codec in flatten.items() :
		value = data.get(name)

		if isinstance(value, BaseModel) :
			continue

		if name in data and name not in codec.keys :
			continue

		data[name] = codec.extract(data)

	return data


def merge_flattened(data: Dict[str, Any], flatten: Dict[str, Any]) -> Dict[str, Any] :
	"""
	writes each flattened slot's keys back onto data. a tagged slot leads, so its tag is the first key written.
	"""
	for name, codec in flatten.items() :
		sub = data.pop(name, None)

		if not sub :
			continue

		if getattr(codec, 'tag', None) :
			data = { **sub, **data }

		else :
			data.update(sub)

	return data
