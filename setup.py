from os import listdir
from re import Pattern
from re import compile as re_compile

from setuptools import find_packages, setup

from telegram_schema import __version__ as telegram_schema_version


req_regex: Pattern = re_compile(r'^requirements-(\w+).txt$')


setup(
	name='telegram_schema',
	version=telegram_schema_version,
	description='immutable telegram bot api types with telegram-compatible json encoding',
	long_description=open('readme.md').read(),
	long_description_content_type='text/markdown',
	author='kheina',
	packages=find_packages(exclude=['tests', 'tests.*']),
	install_requires=list(filter(None, map(str.strip, open('requirements.txt').read().split()))),
	python_requires='>=3.9',
	license='Mozilla Public License 2.0',
	extras_require=dict(map(lambda x : (x[1], open(x[0]).read().split()), filter(None, map(req_regex.match, listdir())))),
)
