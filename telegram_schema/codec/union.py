from functools import cached_property
from typing import Annotated, Any, Dict, FrozenSet, Optional, Tuple, Type, Union

from pydantic import BaseModel, BeforeValidator

from telegram_schema.codec.flatten import required_keys, validate, wire_keys
from telegram_schema.exceptions.decode_error import MissingEnvelopeContent, MissingRequiredField, RaisesNestedDecodeError, SchemaMismatch, UnknownVariant


class StructuralUnion :
	"""
	a closed union without a discriminator key. on decode, the variants are tried in declaration order and the first
	variant whose required keys are all present wins. on encode, only the chosen variant's own keys are written.

	:param variants: the union's variants, in precedence order
	:param required: when True, an object matching no variant raises MissingEnvelopeContent instead of decoding as absent
	:param name: the field name reported in errors
	"""

	def __init__(self, *variants: Type[BaseModel], required:bool=False, name:str='content') -> None :
		assert variants, 'a union requires at least one variant'
		self.variants: Tuple[Type[BaseModel], ...] = variants
		self.required: bool = required
		self.name: str = name


	def __repr__(self) -> str :
		return f'{self.__class__.__name__}({", ".join(v.__name__ for v in self.variants)})'


	@cached_property
	def keys(self) -> FrozenSet[str] :
		return frozenset().union(*map(wire_keys, self.variants))


	@cached_property
	def signatures(self) -> Tuple[Tuple[Type[BaseModel], FrozenSet[str]], ...] :
		signatures = tuple((v, required_keys(v)) for v in self.variants)

		for variant, keys in signatures :
			assert keys, f'{variant.__name__} has no required keys and would match any object'

		return signatures


	@property
	def required_keys(self) -> FrozenSet[str] :
		# no single key is shared by every variant
		return frozenset()


	def match(self, data: Dict[str, Any]) -> Optional[Type[BaseModel]] :
		for variant, keys in self.signatures :
			if all(data.get(k) is not None for k in keys) :
				return variant

		return None


	def extract(self, data: Dict[str, Any]) -> Optional[BaseModel] :
		variant: Optional[Type[BaseModel]] = self.match(data)

		if variant is None :
			if self.required :
				raise MissingEnvelopeContent(self.name, tuple(sorted(self.keys)))

			return None

		sub: Dict[str, Any] = { k: data.pop(k) for k in wire_keys(variant) if k in data }
		return validate(variant, sub)


	@RaisesNestedDecodeError
	def decode(self, value: Any) -> Any :
		if isinstance(value, self.variants) :
			return value

		if not isinstance(value, dict) :
			raise SchemaMismatch(self.name, 'object')

		variant: Optional[Type[BaseModel]] = self.match(value)

		if variant is None :
			raise MissingEnvelopeContent(self.name, tuple(sorted(self.keys)))

		return validate(variant, value)


	@cached_property
	def annotated(self) -> Any :
		return Annotated[Union[self.variants], BeforeValidator(self.decode)]


class TaggedUnion :
	"""
	a closed union discriminated by a string tag stored under a reserved key. each variant declares its tag as
	a __tag__ class variable and subclasses TaggedObject, which writes the tag first on encode.

	unknown tags raise UnknownVariant, which keeps the raw object as its payload.

	:param tag: the reserved key holding the variant's name
	:param required: when True, an object without the tag raises MissingRequiredField
	:param name: the field name reported in errors
	"""

	def __init__(self, tag: str, *variants: Type[BaseModel], required:bool=True, name:str='kind') -> None :
		assert variants, 'a union requires at least one variant'
		self.tag: str = tag
		self.variants: Tuple[Type[BaseModel], ...] = variants
		self.required: bool = required
		self.name: str = name
		self.tags: Dict[str, Type[BaseModel]] = { v.__tag__: v for v in variants }
		assert len(self.tags) == len(variants), 'variant tags must be unique'
		assert all(v.__tagkey__ == tag for v in variants), f'variants must be tagged by {tag!r}'


	def __repr__(self) -> str :
		return f'{self.__class__.__name__}({self.tag!r}, {", ".join(self.tags.keys())})'


	@cached_property
	def keys(self) -> FrozenSet[str] :
		return frozenset({ self.tag }).union(*map(wire_keys, self.variants))


	@property
	def required_keys(self) -> FrozenSet[str] :
		return frozenset({ self.tag }) if self.required else frozenset()


	def variant(self, data: Dict[str, Any]) -> Type[BaseModel] :
		tag = data[self.tag]

		if not isinstance(tag, str) :
			raise SchemaMismatch(self.tag, 'string')

		if tag not in self.tags :
			raise UnknownVariant(tag, payload=dict(data), field=self.tag)

		return self.tags[tag]


	def extract(self, data: Dict[str, Any]) -> Optional[BaseModel] :
		if data.get(self.tag) is None :
			if self.required :
				raise MissingRequiredField(self.tag)

			data.pop(self.tag, None)
			return None

		variant: Type[BaseModel] = self.variant(data)
		del data[self.tag]
		sub: Dict[str, Any] = { k: data.pop(k) for k in wire_keys(variant) if k in data }
		return validate(variant, sub)


	@RaisesNestedDecodeError
	def decode(self, value: Any) -> Any :
		if isinstance(value, self.variants) :
			return value

		if not isinstance(value, dict) :
			raise SchemaMismatch(self.name, 'object')

		if self.tag not in value :
			raise MissingRequiredField(self.tag)

		variant: Type[BaseModel] = self.variant(value)
		return validate(variant, { k: v for k, v in value.items() if k != self.tag })


	@cached_property
	def annotated(self) -> Any :
		return Annotated[Union[self.variants], BeforeValidator(self.decode)]
