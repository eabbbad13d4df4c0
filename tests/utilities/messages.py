from typing import Any, Dict

from ujson import dumps


def user(id: int = 1, first_name: str = 'test') -> Dict[str, Any] :
	return {
		'id': id,
		'is_bot': False,
		'first_name': first_name,
	}


def private_chat(id: int = 5) -> Dict[str, Any] :
	return {
		'id': id,
		'type': 'private',
	}


def message(message_id: int = 1, **content: Any) -> Dict[str, Any] :
	return {
		'message_id': message_id,
		'chat': private_chat(),
		'date': 1,
		**content,
	}


def photo_size(file_id: str = 'photo', width: int = 90) -> Dict[str, Any] :
	return {
		'file_id': file_id,
		'file_unique_id': file_id + '-unique',
		'width': width,
		'height': width,
	}


def document(file_id: str = 'document') -> Dict[str, Any] :
	return {
		'file_id': file_id,
		'file_unique_id': file_id + '-unique',
		'file_name': 'file.gif',
		'mime_type': 'image/gif',
	}


def location() -> Dict[str, Any] :
	return {
		'longitude': 2.5,
		'latitude': 48.5,
	}


def to_json(obj: Any) -> str :
	return dumps(obj, ensure_ascii=False, escape_forward_slashes=False)


def poll(**kind: Any) -> Dict[str, Any] :
	return {
		'id': 'poll',
		'question': 'which?',
		'options': [{ 'text': 'a', 'voter_count': 1 }, { 'text': 'b', 'voter_count': 0 }],
		'total_voter_count': 1,
		'is_closed': False,
		'is_anonymous': True,
		'allows_multiple_answers': False,
		**kind,
	}


def chat_member_updated() -> Dict[str, Any] :
	return {
		'chat': private_chat(),
		'from': user(),
		'date': 2,
		'old_chat_member': { 'status': 'left', 'user': user(id=2) },
		'new_chat_member': { 'status': 'member', 'user': user(id=2) },
	}


def shipping_address() -> Dict[str, Any] :
	return {
		'country_code': 'US',
		'state': 'CA',
		'city': 'San Francisco',
		'street_line1': '1 Market St',
		'street_line2': '',
		'post_code': '94105',
	}
