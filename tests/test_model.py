from httpresp import ResponseRecord, parse, parseStatusLine, render, renderBytes
from httpresp.utils.json import json, unjson


def test_new_record_is_empty():
	record = ResponseRecord()
	assert record.protocolVersion == ""
	assert record.statusCode == 0
	assert record.statusString == ""
	assert record.orderedHeaderKeys == []
	assert record.headers == {}
	assert record.unparsed == []
	assert not record.hasStatus
	assert record.toHTTP() == ""


def test_records_do_not_share_state():
	a = ResponseRecord()
	b = ResponseRecord()
	a.orderedHeaderKeys.append("X")
	a.headers["X"] = "1"
	a.unparsed.append("")
	assert b.orderedHeaderKeys == []
	assert b.headers == {}
	assert b.unparsed == []


def test_render():
	record = ResponseRecord()
	record.protocolVersion = "HTTP/1.1"
	record.statusCode = 201
	record.statusString = "Created"
	record.orderedHeaderKeys = ["Location", "Content-Length"]
	record.headers = {"Location": "/items/1", "Content-Length": "0"}
	record.unparsed = ["", ""]
	assert (
		render(record)
		== "HTTP/1.1 201 Created\nLocation: /items/1\nContent-Length: 0\n\n"
	)
	assert record.hasStatus


def test_render_without_status_line():
	record = ResponseRecord()
	record.orderedHeaderKeys = ["A"]
	record.headers = {"A": "1"}
	record.unparsed = ["", "body"]
	assert record.toHTTP() == "A: 1\n\nbody"


def test_render_duplicates_use_last_value(golden):
	record, error = parse(golden("redirect-http.text"))
	assert error is None
	assert record.orderedHeaderKeys.count("Set-Cookie") == 2
	assert record.headers["Set-Cookie"] == "b=2"
	assert list(record.headerLines())[1:3] == [
		("Set-Cookie", "b=2"),
		("Set-Cookie", "b=2"),
	]
	lines = record.toHTTP().split("\n")
	assert lines[2] == "Set-Cookie: b=2"
	assert lines[3] == "Set-Cookie: b=2"


def test_render_reflects_later_edits():
	record, _ = parse(b"HTTP/1.1 200 OK\nServer: a\n\n")
	record.headers["Server"] = "b"
	record.statusCode = 203
	assert record.toHTTP() == "HTTP/1.1 203 OK\nServer: b\n"


def test_render_bytes():
	record, _ = parse(b"HTTP/1.1 200 OK\nX: \xc3\xa9\n")
	assert renderBytes(record) == b"HTTP/1.1 200 OK\nX: \xc3\xa9"
	assert renderBytes(record, "latin-1") == b"HTTP/1.1 200 OK\nX: \xe9"


def test_json(golden):
	record, _ = parse(golden("simple-http.text"))
	assert unjson(json(record)) == {
		"protocolVersion": "HTTP/1.1",
		"statusCode": 200,
		"statusString": "OK",
		"orderedHeaderKeys": ["Content-Type", "Connection"],
		"headers": {
			"Content-Type": "text/html; charset=UTF-8",
			"Connection": "close",
		},
		"unparsed": ["", "<html></html>"],
	}


def test_as_primitive_copies():
	record, _ = parse(b"HTTP/1.1 200 OK\nA: 1\n")
	data = record.asPrimitive()
	data["headers"]["A"] = "2"  # type: ignore[index]
	assert record.headers["A"] == "1"


def test_json_status_line():
	line, _ = parseStatusLine("HTTP/1.1 404 Not Found\n")
	assert unjson(json(line)) == {
		"protocol": "HTTP/1.1",
		"status": 404,
		"message": "Not Found",
	}


# EOF
