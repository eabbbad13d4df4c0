from telegram_schema.exceptions.base_error import BaseError
from telegram_schema.exceptions.decode_error import DecodeError, DecodeErrorHandler, InvalidJson, MissingEnvelopeContent, MissingRequiredField, RaisesNestedDecodeError, ResponseNotOk, SchemaMismatch, UnknownVariant, nestedDecodeError, translateValidationError
