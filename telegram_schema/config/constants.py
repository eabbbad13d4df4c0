from enum import Enum, unique
from os import environ
from typing import Any, Dict


@unique
class Environment(Enum) :
	local: str = 'local'
	dev: str = 'dev'
	prod: str = 'prod'
	test: str = 'test'

	def is_local(self) :
		return self == Environment.local

	def is_dev(self) :
		return self == Environment.dev

	def is_prod(self) :
		return self == Environment.prod

	def is_test(self) :
		return self == Environment.test


def _env_bool(value: str) -> bool :
	return value.strip().lower() in { '1', 'true', 'yes', 'on' }


environment: Environment = Environment[environ.get('ENVIRONMENT', 'LOCAL').lower()]

test: Dict[str, Any] = {
	'cloud_logging': False,
	'log_level': 'DEBUG',
}

local: Dict[str, Any] = {
	'cloud_logging': False,
	'log_level': 'DEBUG',
}

dev: Dict[str, Any] = {
	'cloud_logging': True,
	'log_level': 'INFO',
}

prod: Dict[str, Any] = {
	'cloud_logging': True,
	'log_level': 'WARNING',
}

assert test.keys() == local.keys() == dev.keys() == prod.keys()

env_vars: Dict[str, Any] = locals().get(environment.name, local)

# explicit environment variables win over the env-specific defaults
if 'CLOUD_LOGGING' in environ :
	env_vars = { **env_vars, 'cloud_logging': _env_bool(environ['CLOUD_LOGGING']) }

if 'LOG_LEVEL' in environ :
	env_vars = { **env_vars, 'log_level': environ['LOG_LEVEL'].upper() }

# add the variables from the environment to the module
locals().update(env_vars)

# delete extraneous data
del test, local, dev, prod, env_vars


# put other variables/constants here (these will overwrite the env-specific configs above!)
logger_name: str = environ.get('TELEGRAM_SCHEMA_LOGGER', 'telegram_schema')
