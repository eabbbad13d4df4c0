from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Union
from uuid import UUID

from pydantic import BaseModel
from ujson import dumps, loads


_conversions: Dict[type, Callable] = {
	datetime: str,
	Decimal: float,
	tuple: lambda x : list(map(convert, x)),
	filter: lambda x : list(map(convert, x)),
	set: lambda x : list(map(convert, x)),
	list: lambda x : list(map(convert, x)),
	dict: lambda x : dict(zip(map(str, x.keys()), map(convert, x.values()))),
	Enum: lambda x : x.value,
	UUID: lambda x : x.hex,
	# telegram objects never write null keys, an absent optional is omitted
	BaseModel: lambda x : x.model_dump(mode='json', exclude_none=True),
}


def convert(item: Any) -> Any :
	"""
	converts an item into a structure consisting only of json-native types
	"""
	if isinstance(item, str) :
		return item
	for cls in type(item).__mro__ :
		if cls in _conversions :
			return _conversions[cls](item)
	return item


def json_stream(item: Any) -> str :
	return dumps(convert(item), ensure_ascii=False, escape_forward_slashes=False)


def json_load(text: Union[str, bytes]) -> Any :
	return loads(text)
