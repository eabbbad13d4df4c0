import logging
import sys

import pytest

from telegram_schema.exceptions import DecodeError, UnknownVariant
from telegram_schema.logging import LogHandler, TerminalAgent, getLogger
from telegram_schema.models.entity import MessageEntity
from tests.utilities.logging import Handler


class TestDecodeLogging :

	def test_UnknownTag_LogsWarning(self) :
		# arrange
		Handler.messages.clear()

		# act
		with pytest.raises(UnknownVariant) as e :
			MessageEntity.from_json('{"type":"sparkles","offset":0,"length":1}')

		# assert
		warnings = [r for r in Handler.messages if r.levelno == logging.WARNING]
		assert 1 == len(warnings)
		assert 'sparkles' == warnings[0].msg['tag']
		assert 'type' == warnings[0].msg['field']
		assert e.value.refid.hex == warnings[0].msg['refid']


	def test_SuccessfulDecode_LogsNothing(self) :
		# arrange
		Handler.messages.clear()

		# act
		MessageEntity.from_json('{"type":"bold","offset":0,"length":1}')

		# assert
		assert [] == Handler.messages


class TestLogHandler :

	def test_GetLogger_AttachesHandlerOnce(self) :
		# act
		first = getLogger('telegram_schema.tests')
		second = getLogger('telegram_schema.tests')

		# assert
		assert first is second
		assert 1 == sum(isinstance(h, LogHandler) for h in first.handlers)


	def test_CloudLoggingUnavailable_FallsBackToTerminal(self) :
		# act
		handler = LogHandler('telegram_schema.tests')

		# assert
		assert isinstance(handler.agent, TerminalAgent)


	def test_Emit_StructPrintedAsJson(self, capsys) :
		# arrange
		handler = LogHandler('telegram_schema.tests')
		record = logging.LogRecord('telegram_schema.tests', logging.INFO, __file__, 1, { 'message': 'hello', 'tag': 'x' }, None, None)

		# act
		handler.emit(record)

		# assert
		out = capsys.readouterr().out
		assert 'INFO > {"message":"hello","tag":"x"}' in out


	def test_Emit_TextFormatsArgs(self, capsys) :
		# arrange
		handler = LogHandler('telegram_schema.tests')
		record = logging.LogRecord('telegram_schema.tests', logging.WARNING, __file__, 1, 'decoded %d objects', (3,), None)

		# act
		handler.emit(record)

		# assert
		assert 'WARNING > decoded 3 objects' in capsys.readouterr().out


	def test_Emit_ExceptionIncludesRefidAndLogdata(self, capsys) :
		# arrange
		handler = LogHandler('telegram_schema.tests')
		error = DecodeError('bad object', field='chat')

		try :
			raise error
		except DecodeError :
			record = logging.LogRecord('telegram_schema.tests', logging.ERROR, __file__, 1, 'failed', None, sys.exc_info())

		# act
		handler.emit(record)

		# assert
		out = capsys.readouterr().out
		assert 'telegram_schema.exceptions.decode_error.DecodeError: bad object' in out
		assert error.refid.hex in out
		assert '"field":"chat"' in out
		assert '"message":"failed"' in out
