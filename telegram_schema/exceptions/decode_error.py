from functools import wraps
from typing import Any, Callable, Dict, Optional, Set, Tuple
from uuid import uuid4

from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from telegram_schema.exceptions.base_error import BaseError
from telegram_schema.logging import Logger, getLogger


logger: Logger = getLogger()


class DecodeError(BaseError) :

	field: Optional[str] = None


	def describe(self) -> str :
		return self.args[0] if self.args else ''


	def relocate(self, path: str) -> 'DecodeError' :
		"""
		prefixes the error's field with the dotted path of the object it was raised in
		"""
		if path and self.field :
			self.field = f'{path}.{self.field}'
			self.logdata['field'] = self.field
			self.args = (self.describe(),)

		return self


class InvalidJson(DecodeError) :
	pass


class SchemaMismatch(DecodeError) :
	"""
	a key was present but its json value had the wrong kind
	"""

	def __init__(self, field: str, expected_kind: str, *args: Tuple[Any], **kwargs: Dict[str, Any]) -> None :
		self.field: str = field
		self.expected_kind: str = expected_kind
		DecodeError.__init__(self, self.describe(), *args, field=field, expected_kind=expected_kind, **kwargs)


	def describe(self) -> str :
		return f'{self.field}: expected {self.expected_kind}'


class UnknownVariant(DecodeError) :
	"""
	a tagged union received a tag it does not define.
	the raw object is kept on the error so callers can hold on to it.
	"""

	def __init__(self, tag: str, *args: Tuple[Any], payload:Optional[Dict[str, Any]]=None, field:Optional[str]=None, **kwargs: Dict[str, Any]) -> None :
		self.tag: str = tag
		self.field: Optional[str] = field
		self.payload: Optional[Dict[str, Any]] = payload
		DecodeError.__init__(self, self.describe(), *args, tag=tag, field=field, **kwargs)


	def describe(self) -> str :
		return f'unknown variant: {self.tag!r}'


class MissingRequiredField(DecodeError) :

	def __init__(self, field: str, *args: Tuple[Any], **kwargs: Dict[str, Any]) -> None :
		self.field: str = field
		DecodeError.__init__(self, self.describe(), *args, field=field, **kwargs)


	def describe(self) -> str :
		return f'missing required field: {self.field}'


class MissingEnvelopeContent(DecodeError) :

	def __init__(self, field: str, keys: Tuple[str, ...]=(), *args: Tuple[Any], **kwargs: Dict[str, Any]) -> None :
		self.field: str = field
		self.keys: Tuple[str, ...] = tuple(keys)
		DecodeError.__init__(self, self.describe(), *args, field=field, keys=list(keys), **kwargs)


	def describe(self) -> str :
		return f'{self.field}: none of the expected content keys were present'


class ResponseNotOk(BaseError) :

	def __init__(self, description: Optional[str], error_code: Optional[int]=None, *args: Tuple[Any], parameters: Any=None, **kwargs: Dict[str, Any]) -> None :
		BaseError.__init__(self, f'{error_code}: {description}', *args, error_code=error_code, description=description, **kwargs)
		self.description: Optional[str] = description
		self.error_code: Optional[int] = error_code
		self.parameters: Any = parameters


_union_members: Set[str] = { 'int', 'str', 'bool', 'float', 'none' }


_expected_kinds: Dict[str, str] = {
	'int': 'integer',
	'float': 'number',
	'string': 'string',
	'str': 'string',
	'bool': 'boolean',
	'list': 'array',
	'tuple': 'array',
	'dict': 'object',
	'model': 'object',
	'enum': 'enum',
	'literal': 'literal',
	'url': 'url',
}


def _expected_kind(error_type: str) -> str :
	prefix: str = error_type.split('_', 1)[0]
	if error_type.startswith('model') :
		return 'object'
	return _expected_kinds.get(prefix, error_type)


def _field(loc: Tuple[Any, ...]) -> str :
	# pydantic inserts union member and validator names into the location. telegram keys are always lowercase
	# snake_case, so anything else is one of those and dropped
	return '.'.join(str(l) for l in loc if isinstance(l, int) or (l.islower() and l.replace('_', '').isalnum() and l not in _union_members))


_nested_error_type: str = 'telegram_decode_error'


def nestedDecodeError(e: DecodeError) -> PydanticCustomError :
	"""
	wraps a DecodeError raised inside a validator so that pydantic records where it happened.
	translateValidationError unwraps it, prefixing its field with that location.
	"""
	return PydanticCustomError(_nested_error_type, '{message}', { 'message': str(e), 'error': e })


def RaisesNestedDecodeError(func: Callable) -> Callable :
	"""
	for validator hooks: DecodeErrors raised by func are re-raised as pydantic errors, so enclosing models and lists add their location.
	"""

	@wraps(func)
	def wrapper(*args: Tuple[Any], **kwargs: Dict[str, Any]) -> Any :
		try :
			return func(*args, **kwargs)

		except DecodeError as e :
			raise nestedDecodeError(e) from e

	return wrapper


def translateValidationError(e: ValidationError) -> DecodeError :
	errors = e.errors(include_url=False)

	if not errors :
		return DecodeError(str(e))

	error: Dict[str, Any] = errors[0]
	field: str = _field(error['loc'])

	if error['type'] == _nested_error_type :
		return error['ctx']['error'].relocate(field)

	if error['type'] == 'missing' :
		return MissingRequiredField(field)

	return SchemaMismatch(field, _expected_kind(error['type']))


def _logUnknownVariant(e: UnknownVariant) -> None :
	logger.warning({ 'message': str(e), 'tag': e.tag, 'field': e.field, 'refid': e.refid.hex })


def DecodeErrorHandler(message: str) -> Callable :
	"""
	raises DecodeError subclasses unchanged, translates pydantic validation errors into DecodeError subclasses,
	and logs then wraps anything else in a generic DecodeError. unknown variants are logged as warnings.

	:param message: describes what the decorated function does, used in the error message: 'an unexpected error occurred while {message}.'
	"""

	def decorator(func: Callable) -> Callable :

		@wraps(func)
		def wrapper(*args: Tuple[Any], **kwargs: Dict[str, Any]) -> Any :
			try :
				return func(*args, **kwargs)

			except UnknownVariant as e :
				_logUnknownVariant(e)
				raise

			except (DecodeError, ResponseNotOk) :
				raise

			except ValidationError as e :
				error: DecodeError = translateValidationError(e)

				if isinstance(error, UnknownVariant) :
					_logUnknownVariant(error)

				raise error from e

			except Exception as e :
				refid: str = uuid4().hex
				logger.exception({ 'message': message, 'refid': refid })

				raise DecodeError(
					f'an unexpected error occurred while {message}.',
					refid = refid,
				) from e

		return wrapper

	return decorator
