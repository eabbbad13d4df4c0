import logging
from typing import List


# decoding should not print anything of its own, all output is done through logging, so capture it with a handler on the root logger
class TestLogHandler(logging.Handler) :

	def __init__(self, *args, **kwargs) :
		super().__init__(*args, **kwargs)
		self.messages: List[logging.LogRecord] = []

	def emit(self, record: logging.LogRecord) -> None :
		self.messages.append(record)


logging.root.setLevel(logging.NOTSET)
Handler: TestLogHandler = TestLogHandler()
logging.root.handlers.clear()
logging.root.addHandler(Handler)
