from .model import (
	HTTPStatusLine,
	ResponseRecord,
	HTTPResponseError,
	MalformedStatusLine,
	render,
	renderBytes,
)  # NOQA: F401
from .parser import (
	parse,
	load,
	parseStatusLine,
	parseHeaderLine,
	parseRawLine,
)  # NOQA: F401

__version__ = "1.0.0"

# EOF
