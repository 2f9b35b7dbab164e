from typing import Iterator, NamedTuple
from .utils.io import EOL, asBytes

# -----------------------------------------------------------------------------
#
# DATA MODEL
#
# -----------------------------------------------------------------------------


class HTTPStatusLine(NamedTuple):
	"""Represents a response status line"""

	protocol: str
	status: int
	message: str


class ResponseRecord:
	"""The structured form of a captured HTTP response. Header keys are
	kept twice: `orderedHeaderKeys` remembers every occurrence in input
	order, while `headers` holds the latest value for each key."""

	__slots__ = [
		"protocolVersion",
		"statusCode",
		"statusString",
		"orderedHeaderKeys",
		"headers",
		"unparsed",
	]

	def __init__(self) -> None:
		# An empty protocol means the status line was never parsed
		self.protocolVersion: str = ""
		self.statusCode: int = 0
		self.statusString: str = ""
		self.orderedHeaderKeys: list[str] = []
		self.headers: dict[str, str] = {}
		self.unparsed: list[str] = []

	@property
	def hasStatus(self) -> bool:
		return bool(self.protocolVersion)

	def headerLines(self) -> Iterator[tuple[str, str]]:
		"""Yields every header occurrence with the current value of its key,
		so that repeated keys all yield the last-written value."""
		for key in self.orderedHeaderKeys:
			yield key, self.headers[key]

	def toHTTP(self) -> str:
		return render(self)

	def asPrimitive(self) -> dict[str, str | int | list[str] | dict[str, str]]:
		return {
			"protocolVersion": self.protocolVersion,
			"statusCode": self.statusCode,
			"statusString": self.statusString,
			"orderedHeaderKeys": list(self.orderedHeaderKeys),
			"headers": dict(self.headers),
			"unparsed": list(self.unparsed),
		}

	def __str__(self) -> str:
		return f"ResponseRecord({self.protocolVersion} {self.statusCode} {self.statusString!r}, headers={len(self.orderedHeaderKeys)}, unparsed={len(self.unparsed)})"


# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class HTTPResponseError(ValueError):
	"""Base class for errors raised while parsing a response."""

	def __init__(self, message: str, record: ResponseRecord | None = None):
		super().__init__(message)
		self.message: str = message
		self.record: ResponseRecord | None = record


class MalformedStatusLine(HTTPResponseError):
	"""The first line is not shaped as `HTTP/<version> <code> <text>`."""

	def __init__(
		self, message: str, line: str, record: ResponseRecord | None = None
	):
		super().__init__(message, record)
		self.line: str = line


# -----------------------------------------------------------------------------
#
# RENDERING
#
# -----------------------------------------------------------------------------


def render(record: ResponseRecord) -> str:
	"""Renders the record back to text, lines joined by a single EOL and
	without a trailing one."""
	payload: list[str] = []
	if record.protocolVersion:
		# HTTP/1.1 200 OK
		payload.append(
			f"{record.protocolVersion} {record.statusCode} {record.statusString}"
		)
	for key, value in record.headerLines():
		payload.append(f"{key}: {value}")
	payload += record.unparsed
	return EOL.join(payload)


def renderBytes(record: ResponseRecord, encoding: str | None = None) -> bytes:
	return asBytes(render(record), encoding)


# EOF
