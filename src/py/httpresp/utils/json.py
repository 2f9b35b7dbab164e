from typing import Any, TypeAlias, cast
import json as basejson

TJSON: TypeAlias = None | int | float | bool | str | list[Any] | dict[str, Any]


def asPrimitive(value: Any) -> Any:
	"""Converts the given value to a primitive value, that can be converted
	to JSON"""
	if value is None or type(value) in (bool, float, int, str):
		return value
	elif hasattr(value, "asPrimitive"):
		return asPrimitive(value.asPrimitive())
	elif isinstance(value, tuple) and hasattr(value, "_fields"):
		return {k: asPrimitive(getattr(value, k)) for k in value._fields}
	elif isinstance(value, (list, tuple)):
		return [asPrimitive(v) for v in value]
	elif isinstance(value, dict):
		return {str(k): asPrimitive(v) for k, v in value.items()}
	else:
		return str(value)


def json(value: Any, *, indent: int | None = None) -> bytes:
	"""Converts the value to UTF-8 encoded JSON."""
	return basejson.dumps(asPrimitive(value), indent=indent).encode("utf8")


def unjson(value: bytes | str) -> TJSON:
	"""Decodes a JSON-encoded value."""
	return cast(TJSON, basejson.loads(value))


# EOF
