import pytest

from telegram_schema.config.constants import Environment, cloud_logging, environment, log_level, logger_name


class TestEnvironment :

	@pytest.mark.parametrize('env, method', [
		(Environment.local, 'is_local'),
		(Environment.dev, 'is_dev'),
		(Environment.prod, 'is_prod'),
		(Environment.test, 'is_test'),
	])
	def test_Environment_OnlyOwnMethodTrue(self, env, method) :
		# act
		results = { m: getattr(env, m)() for m in ('is_local', 'is_dev', 'is_prod', 'is_test') }

		# assert
		assert results.pop(method)
		assert not any(results.values())


	def test_Constants_Loaded(self) :
		# assert
		assert isinstance(environment, Environment)
		assert isinstance(cloud_logging, bool)
		assert log_level in { 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL' }
		assert logger_name
