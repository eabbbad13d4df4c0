import logging
from traceback import format_tb
from types import ModuleType
from typing import Any, Callable, Dict, List, Tuple, Union

from google.auth import compute_engine
from google.cloud import logging as google_logging

from telegram_schema.config.constants import cloud_logging, log_level, logger_name
from telegram_schema.utilities import flatten, getFullyQualifiedClassName
from telegram_schema.utilities.json import convert, json_stream


class TerminalAgent :

	loggable: Tuple[type] = (str, int, float, bool, type(None))

	def __init__(self) -> None :
		import time
		self.time: ModuleType = time


	def log_text(self, log: str, severity:str='INFO') -> None :
		print('[' + self.time.asctime(self.time.localtime(self.time.time())) + ']', severity, '>', log)


	def log_struct(self, log: Dict[str, Any], severity:str='INFO') -> None :
		for i in flatten(log) :
			if not isinstance(i, TerminalAgent.loggable) :
				print('WARNING:', i, 'may not be able to be logged.')
		print('[' + self.time.asctime(self.time.localtime(self.time.time())) + ']', severity, '>', json_stream(log))


class LogHandler(logging.Handler) :

	logging_available = cloud_logging

	def __init__(self, name: str, *args: Tuple[Any], structs:Tuple[type]=(dict, list, tuple), **kwargs:Dict[str, Any]) -> None :
		logging.Handler.__init__(self, *args, **kwargs)
		self._structs: Tuple[type] = structs
		try :
			if not LogHandler.logging_available :
				raise ValueError('logging unavailable.')
			credentials: compute_engine.credentials.Credentials = compute_engine.Credentials()
			logging_client: google_logging.Client = google_logging.Client(credentials=credentials)
			self.agent: google_logging.Logger = logging_client.logger(name)
		except Exception :
			LogHandler.logging_available = False
			self.agent: TerminalAgent = TerminalAgent()


	def emit(self, record: logging.LogRecord) -> None :
		if record.args and isinstance(record.msg, str) :
			record.msg = record.msg % record.args
		if record.exc_info :
			e: BaseException = record.exc_info[1]
			refid = getattr(e, 'refid', None)
			errorinfo: Dict[str, Any] = {
				'error': f'{getFullyQualifiedClassName(e)}: {e}',
				'stacktrace': list(map(str.strip, format_tb(record.exc_info[2]))),
				'refid': refid.hex if refid else None,
				**convert(getattr(e, 'logdata', { })),
			}
			if isinstance(record.msg, dict) :
				errorinfo.update(convert(record.msg))
			else :
				errorinfo['message'] = record.msg
			self.agent.log_struct(errorinfo, severity=record.levelname)
		else :
			if isinstance(record.msg, self._structs) :
				self.agent.log_struct(convert(record.msg), severity=record.levelname)
			else :
				self.agent.log_text(str(record.msg), severity=record.levelname)


Logger: type = logging.Logger


def getLogger(name: Union[str, None]=None, level:Union[int, str]=log_level, filter:Callable=lambda x : x, disable:List[str]=[]) -> Logger :
	"""
	returns a logger that writes structured records through the LogHandler.
	the handler is attached to the named logger only, the root logger is left as the application configured it.
	"""
	name = name or logger_name
	for loggerName in disable :
		logging.getLogger(loggerName).propagate = False

	logger: Logger = logging.getLogger(name)

	if not any(isinstance(h, LogHandler) for h in logger.handlers) :
		handler: LogHandler = LogHandler(name, level=level)
		handler.addFilter(filter)
		logger.addHandler(handler)
		logger.setLevel(level)

	return logger
