from ..config import ENCODING

DEFAULT_ENCODING: str = ENCODING
EOL: str = "\n"
# Undecodable bytes are kept as lone surrogates so that the text can be
# encoded back to the exact original buffer.
DECODE_ERRORS: str = "surrogateescape"


def asText(value: str | bytes | bytearray | memoryview, encoding: str | None = None) -> str:
	if isinstance(value, str):
		return value
	elif isinstance(value, (bytes, bytearray, memoryview)):
		return bytes(value).decode(encoding or DEFAULT_ENCODING, DECODE_ERRORS)
	else:
		raise TypeError(f"Expected bytes or str, got: {type(value).__name__}")


def asBytes(value: str | bytes, encoding: str | None = None) -> bytes:
	if isinstance(value, bytes):
		return value
	elif isinstance(value, str):
		return value.encode(encoding or DEFAULT_ENCODING, DECODE_ERRORS)
	else:
		raise TypeError(f"Expected bytes or str, got: {type(value).__name__}")


# EOF
