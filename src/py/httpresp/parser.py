from mypy_extensions import i64
from .config import LOG_PARSE
from .model import HTTPStatusLine, ResponseRecord, MalformedStatusLine
from .utils.io import EOL, asText
from .utils.logging import debug, warning

# The recognizers below all work on a `text` and a `start` offset and return
# the extracted value (or `None` when the line does not match) along with the
# number of characters read, terminator included.

PROTOCOL: str = "HTTP/"
SEPARATORS: str = " \t"


def isDigit(char: str) -> bool:
	return "0" <= char <= "9"


def parseStatusLine(text: str, start: i64 = 0) -> tuple[HTTPStatusLine | None, i64]:
	"""Recognizes `HTTP/<version> <code> <message>`, where the message is
	the rest of the line, kept verbatim."""
	n: i64 = len(text)
	end: i64 = text.find(EOL, start)
	read: i64 = n - start if end == -1 else end + 1 - start
	if end == -1:
		end = n
	if not text.startswith(PROTOCOL, start, end):
		return None, 0
	# The version is a run of non-whitespace characters
	i: i64 = start + len(PROTOCOL)
	j: i64 = i
	while j < end and not text[j].isspace():
		j += 1
	if j == i or j == end or text[j] not in SEPARATORS:
		return None, 0
	k: i64 = j + 1
	o: i64 = k
	while o < end and isDigit(text[o]):
		o += 1
	if o == k:
		return None, 0
	elif o == end:
		# NOTE: A missing reason phrase is accepted, like `HTTP/1.0 204`
		message = ""
	elif text[o] in SEPARATORS:
		message = text[o + 1 : end]
	else:
		return None, 0
	return HTTPStatusLine(text[start:j], int(text[k:o]), message), read


def parseHeaderLine(text: str, start: i64 = 0) -> tuple[tuple[str, str] | None, i64]:
	"""Recognizes a terminated `<name>:<value>` line. The name stops at the
	first colon, and a single space after the colon is a separator. Empty
	names and empty values are both accepted."""
	end: i64 = text.find(EOL, start)
	if end == -1:
		return None, 0
	i: i64 = text.find(":", start, end)
	if i == -1:
		return None, 0
	j: i64 = i + 1
	if j < end and text[j] == " ":
		j += 1
	return (text[start:i], text[j:end]), end + 1 - start


def parseRawLine(text: str, start: i64 = 0) -> tuple[str | None, i64]:
	"""Recognizes any terminated line, including an empty one."""
	end: i64 = text.find(EOL, start)
	if end == -1:
		return None, 0
	return text[start:end], end + 1 - start


# -----------------------------------------------------------------------------
#
# STAGES
#
# -----------------------------------------------------------------------------
# Each stage takes the record explicitly, updates it from `text` starting at
# `offset` and returns the offset where the next stage starts.


def readStatusLine(record: ResponseRecord, text: str, offset: i64 = 0) -> i64:
	line, read = parseStatusLine(text, offset)
	if line is None:
		end: i64 = text.find(EOL, offset)
		raise MalformedStatusLine(
			"Expected a status line like `HTTP/<version> <code> <text>`",
			text[offset:] if end == -1 else text[offset:end],
			record,
		)
	record.protocolVersion = line.protocol
	record.statusCode = line.status
	record.statusString = line.message
	return offset + read


def readHeaders(record: ResponseRecord, text: str, offset: i64) -> i64:
	while True:
		header, read = parseHeaderLine(text, offset)
		if header is None:
			# The line that stopped us is left to the next stage
			return offset
		name, value = header
		record.orderedHeaderKeys.append(name)
		record.headers[name] = value
		offset += read


def readRawLines(record: ResponseRecord, text: str, offset: i64) -> i64:
	n: i64 = len(text)
	while offset < n:
		line, read = parseRawLine(text, offset)
		if line is None:
			# The input does not end with a terminator, we keep what's left
			# so that rendering gives the input back.
			if LOG_PARSE:
				debug("Unterminated last line", Offset=offset, Length=n - offset)
			record.unparsed.append(text[offset:])
			return n
		record.unparsed.append(line)
		offset += read
	return offset


# -----------------------------------------------------------------------------
#
# API
#
# -----------------------------------------------------------------------------


def parse(
	data: str | bytes | bytearray | memoryview, encoding: str | None = None
) -> tuple[ResponseRecord, MalformedStatusLine | None]:
	"""Parses the given response payload, returning the record and `None`,
	or the partially populated record and the error that stopped the
	parsing."""
	text: str = asText(data, encoding)
	record = ResponseRecord()
	try:
		offset = readStatusLine(record, text, 0)
		offset = readHeaders(record, text, offset)
		readRawLines(record, text, offset)
	except MalformedStatusLine as e:
		if LOG_PARSE:
			warning("Malformed status line", Line=e.line)
		return record, e
	if LOG_PARSE:
		debug(
			"Parsed response",
			Status=record.statusCode,
			Headers=len(record.orderedHeaderKeys),
			Unparsed=len(record.unparsed),
		)
	return record, None


def load(
	data: str | bytes | bytearray | memoryview, encoding: str | None = None
) -> ResponseRecord:
	"""Like `parse`, but raises the error. The partial record is available
	as the error's `record` attribute."""
	record, error = parse(data, encoding)
	if error is not None:
		raise error
	return record


# EOF
