import sys
import time
from enum import Enum
from typing import NamedTuple, Any
from contextvars import ContextVar
from .term import Term
from ..config import LOG_LEVEL

ERR = sys.stderr


LogOrigin: ContextVar[str] = ContextVar("LogOrigin", default="httpresp")


class LogLevel(Enum):
	Debug = 0
	Info = 10
	Warning = 30  # A Warning
	Error = 40  # A managed error
	Exception = 50  # An un-managed error


LOG_LEVEL_COLOR = {
	LogLevel.Debug: 31,
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
	LogLevel.Exception: 124,
}


class LogEntry(NamedTuple):
	origin: str
	time: float
	level: LogLevel = LogLevel.Info
	message: str | None = None
	value: Any = None
	context: dict[str, Any] | None = None


def levelNamed(name: str, default: LogLevel = LogLevel.Info) -> LogLevel:
	for level in LogLevel:
		if level.name.lower() == name.strip().lower():
			return level
	return default


Threshold: LogLevel = levelNamed(LOG_LEVEL)


def formatData(value: Any) -> str:
	if value is None or value == () or value == [] or value == {}:
		return "◌"
	elif isinstance(value, dict):
		return " ".join(
			f"{Term.BOLD}{k}{Term.RESET}={formatData(v)}" for k, v in value.items()
		)
	elif isinstance(value, list) or isinstance(value, tuple):
		return ",".join(formatData(v) for v in value)
	elif isinstance(value, str):
		return repr(value) if " " in value or not value.isprintable() else value
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	else:
		return str(value)


def logged(level: LogLevel) -> bool:
	"""Tells if entries of the given level are currently written, entries
	below the threshold being dropped by `send`."""
	return level.value >= Threshold.value


def send(entry: LogEntry) -> LogEntry:
	if not logged(entry.level):
		return entry
	clr: str = Term.Color(LOG_LEVEL_COLOR[entry.level])
	code: str = "" if entry.value is None else f" [{entry.value}]"
	ERR.write(
		f"{clr}{Term.BOLD}[{entry.origin}]{Term.RESET}{clr}{code} {entry.message} {formatData(entry.context)}{Term.RESET}\n"
	)
	ERR.flush()
	return entry


def entry(
	*,
	origin: str | None = None,
	level: LogLevel = LogLevel.Info,
	message: str | None = None,
	value: Any = None,
	context: dict[str, Any],
) -> LogEntry:
	return LogEntry(
		origin=origin or LogOrigin.get(),
		time=time.time(),
		level=level,
		message=message,
		value=value,
		context=context,
	)


def debug(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(
		entry(message=message, level=LogLevel.Debug, origin=origin, context=context)
	)


def info(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(entry(message=message, origin=origin, context=context))


def warning(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(
		entry(message=message, level=LogLevel.Warning, origin=origin, context=context)
	)


def error(
	message: str,
	code: int | str | None,
	*,
	origin: str | None = None,
	**context: Any,
) -> LogEntry:
	return send(
		entry(
			message=message,
			value=code,
			level=LogLevel.Error,
			origin=origin,
			context=context,
		)
	)


# EOF
