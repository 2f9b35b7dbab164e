from os import getenv

# Encoding used to turn captured byte buffers into text and back
ENCODING: str = getenv("HTTPRESP_ENCODING", "utf8")

# Name of the minimum `LogLevel` that gets written to stderr
LOG_LEVEL: str = getenv("HTTPRESP_LOG_LEVEL", "Info")

LOG_PARSE: bool = getenv("HTTPRESP_LOG_PARSE", "0") == "1"

# EOF
