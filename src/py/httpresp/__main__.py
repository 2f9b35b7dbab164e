import argparse
import sys
from .config import ENCODING
from .model import renderBytes
from .parser import parse
from .utils.io import EOL, asBytes
from .utils.json import json
from .utils.logging import error, info


def roundtrip(data: bytes, rendered: bytes) -> bool:
	"""Tells if `rendered` gives `data` back, the final terminator of
	`data` being the only one the rendering drops."""
	eol: bytes = asBytes(EOL)
	return rendered + eol == data if data.endswith(eol) else rendered == data


def main(args: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(
		prog="httpresp",
		description="Parses a captured HTTP response and renders it back",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
	)
	parser.add_argument(
		"path",
		nargs="?",
		metavar="FILE",
		help="File holding the response, reads stdin when omitted",
	)
	parser.add_argument(
		"-e",
		"--encoding",
		action="store",
		dest="encoding",
		help="Encoding of the response text",
		default=ENCODING,
	)
	parser.add_argument(
		"-j",
		"--json",
		action="store_true",
		dest="json",
		help="Outputs the parsed record as JSON",
	)
	parser.add_argument(
		"-c",
		"--check",
		action="store_true",
		dest="check",
		help="Only tells (through the exit code) if the response round-trips",
	)
	options = parser.parse_args(args)

	if options.path:
		try:
			with open(options.path, "rb") as f:
				data: bytes = f.read()
		except OSError as e:
			error(
				f"Cannot read response file: {e.strerror}",
				e.__class__.__name__,
				Path=options.path,
			)
			return 1
	else:
		data = sys.stdin.buffer.read()

	record, failure = parse(data, options.encoding)
	if failure is not None:
		error(failure.message, "MalformedStatusLine", Line=failure.line)
		return 1

	rendered: bytes = renderBytes(record, options.encoding)
	if options.check:
		if roundtrip(data, rendered):
			return 0
		info("Rendering differs from input", Input=len(data), Rendered=len(rendered))
		return 2

	out = sys.stdout.buffer
	out.write(json(record, indent=2) if options.json else rendered)
	out.write(asBytes(EOL))
	out.flush()
	return 0


if __name__ == "__main__":
	sys.exit(main(sys.argv[1:]))

# EOF
