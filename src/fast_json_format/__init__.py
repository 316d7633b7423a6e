"""
Fast, forgiving JSON re-indenter that never builds an object graph.

Pretty-prints or collapses JSON-like text in a single lexical pass, keeping
numeric literals exactly as written and recovering silently from malformed or
truncated input.
"""

import json
import logging
import os
import re
import time
from dataclasses import dataclass
from typing import IO
from typing import Any
from typing import TypeAlias

from fast_json_format._tables import ASCII_LIMIT
from fast_json_format._tables import STRUCTURAL
from fast_json_format._tables import WHITESPACE
from fast_json_format._tables import combine_surrogates
from fast_json_format._tables import is_high_surrogate
from fast_json_format._tables import is_low_surrogate
from fast_json_format._tables import parse_hex4
from fast_json_format._tables import skip_whitespace

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

Position: TypeAlias = int

DEFAULT_INDENT = "  "

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "FAST_JSON_FORMAT_PROFILE" in os.environ

# Stops a raw string run: closing quote or the start of an escape
_STRING_STOP = re.compile(r'["\\]')

_BYTES_TYPES = (bytes, bytearray, memoryview)


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during formatting."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - arguments are ignored
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


@dataclass(frozen=True)
class FormatConfig:
    """
    Configures formatting behavior with immutable settings.

    ``indent`` is the unit repeated once per nesting level. Anything that is
    not a string falls back to two spaces; an empty string selects compact
    output. ``max_indent_depth`` caps how many units a line may be indented
    by, while nesting is still tracked exactly.
    """

    indent: Any = DEFAULT_INDENT
    max_indent_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_indent_depth is None:
            return
        if isinstance(self.max_indent_depth, bool) or not isinstance(
            self.max_indent_depth, int
        ):
            raise TypeError("max_indent_depth must be an integer or None")
        if self.max_indent_depth < 0:
            raise ValueError("max_indent_depth must be non-negative")

    @property
    def indent_unit(self) -> str:
        """The effective indent unit after substituting the default."""
        return self.indent if isinstance(self.indent, str) else DEFAULT_INDENT

    @property
    def pretty(self) -> bool:
        return len(self.indent_unit) > 0


class _Scanner:
    """
    Per-call scan state for one formatting pass.

    Owns the cursor-independent state (nesting level, indentation cache and
    output fragments) so the string scanner and the emitter loop share it
    explicitly. Nothing here outlives the call that created it.
    """

    __slots__ = (
        "indents",
        "length",
        "level",
        "max_indent_depth",
        "out",
        "pretty",
        "text",
        "unit",
    )

    def __init__(self, text: str, config: FormatConfig) -> None:
        self.text = text
        self.length = len(text)
        self.unit = config.indent_unit
        self.pretty = config.pretty
        self.max_indent_depth = config.max_indent_depth
        self.level = 0
        self.out: list[str] = []
        self.indents: list[str] = [""]

    def get_indent(self, level: int) -> str:
        """
        Returns the indentation prefix for a nesting level.

        Missing levels are built by extending the deepest cached prefix, and
        every intermediate level is cached on the way.
        """
        if not self.pretty:
            return ""
        if self.max_indent_depth is not None and level > self.max_indent_depth:
            level = self.max_indent_depth

        indents = self.indents
        if level < len(indents):
            return indents[level]

        current = indents[-1]
        for _ in range(len(indents), level + 1):
            current += self.unit
            indents.append(current)
        return current

    def _newline(self, level: int) -> None:
        self.out.append("\n")
        self.out.append(self.get_indent(level))

    def scan_string(self, pos: Position) -> Position:
        """
        Copies the string literal opening at pos and returns the index after it.

        Decodes ``\\uXXXX`` and ``\\/`` escapes, copies every other escape
        verbatim and flushes an unterminated string up to end of input.
        """
        text = self.text
        length = self.length
        out = self.out

        out.append('"')
        j = pos + 1
        last_copy = j

        while True:
            match = _STRING_STOP.search(text, j)
            if match is None:
                break
            j = match.start()

            if text[j] == '"':
                if j > last_copy:
                    out.append(text[last_copy:j])
                out.append('"')
                return j + 1

            escape_pos = j
            j += 1
            if j >= length:
                break

            escaped = text[j]
            if escaped == "u":
                code = parse_hex4(text, j + 1)
                if code >= 0:
                    if escape_pos > last_copy:
                        out.append(text[last_copy:escape_pos])
                    j += 5
                    if is_high_surrogate(code) and text.startswith("\\u", j):
                        low = parse_hex4(text, j + 2)
                        if is_low_surrogate(low):
                            code = combine_surrogates(code, low)
                            j += 6
                    out.append(chr(code))
                    last_copy = j
                    continue
            elif escaped == "/":
                if escape_pos > last_copy:
                    out.append(text[last_copy:escape_pos])
                out.append("/")
                j += 1
                last_copy = j
                continue

            # Any other escape (or a malformed \u) stays in the raw run
            j += 1

        if length > last_copy:
            out.append(text[last_copy:])
        return length

    def run(self) -> str:  # noqa: PLR0912
        """Drives the single formatting pass and returns the joined output."""
        text = self.text
        length = self.length
        out = self.out
        pretty = self.pretty
        structural = STRUCTURAL
        whitespace = WHITESPACE

        i = 0
        while i < length:
            # Inline whitespace skip
            while i < length:
                code = ord(text[i])
                if code >= ASCII_LIMIT or not whitespace[code]:
                    break
                i += 1
            if i >= length:
                break

            char = text[i]

            if char == '"':
                i = self.scan_string(i)
                continue

            if char in ("{", "["):
                close = "}" if char == "{" else "]"
                k = skip_whitespace(text, i + 1, length)
                if k < length and text[k] == close:
                    out.append(char + close)
                    i = k + 1
                    continue
                out.append(char)
                if pretty:
                    self._newline(self.level + 1)
                self.level += 1
                i += 1
                continue

            if char in ("}", "]"):
                if self.level > 0:
                    self.level -= 1
                if pretty:
                    self._newline(self.level)
                out.append(char)
                i += 1
                continue

            if char == ",":
                out.append(",")
                if pretty:
                    self._newline(self.level)
                i += 1
                continue

            if char == ":":
                out.append(": ")
                i += 1
                continue

            # Atom: numbers, literals and any unrecognized bare token
            j = i + 1
            while j < length:
                code = ord(text[j])
                if code < ASCII_LIMIT and (
                    structural[code] or whitespace[code]
                ):
                    break
                j += 1
            out.append(text[i:j])
            i = j

        return "".join(out)


def _stringify(value: Any, config: FormatConfig) -> str:
    """Formats a non-textual value with the standard library encoder."""
    unit = config.indent_unit
    with ProfileContext("stringify"):
        try:
            if unit:
                return json.dumps(value, indent=unit, ensure_ascii=False)
            return json.dumps(
                value, separators=(",", ":"), ensure_ascii=False
            )
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug(
                "Could not stringify %s value: %s", type(value).__name__, e
            )
            return ""


class JsonFormatter:
    """
    Reusable formatter bound to one configuration.

    Each call to ``format`` runs an independent pass, so a single instance
    may be shared between threads.
    """

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config if config is not None else FormatConfig()

    def format(self, value: Any) -> str:
        """
        Re-indents JSON-like text, or stringifies any other value.

        Never raises: malformed text yields best-effort output and values the
        standard encoder rejects yield an empty string.
        """
        if value is None:
            return ""
        if isinstance(value, _BYTES_TYPES):
            value = bytes(value).decode("utf-8", errors="replace")
        if not isinstance(value, str):
            return _stringify(value, self.config)

        with ProfileContext("format", len(value)):
            return _Scanner(value, self.config).run()


def format_json(value: Any, indent: Any = DEFAULT_INDENT, **kwargs: Any) -> str:
    """
    Pretty-prints JSON-like text with the given indent unit.

    Extra keyword arguments are passed to FormatConfig.
    """
    config = FormatConfig(indent=indent, **kwargs)
    return JsonFormatter(config).format(value)


def compact_json(value: Any, **kwargs: Any) -> str:
    """Collapses JSON-like text onto a single line."""
    return format_json(value, "", **kwargs)


def format_file(
    fp: IO[str], indent: Any = DEFAULT_INDENT, **kwargs: Any
) -> str:
    """
    Formats the whole content of a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return format_json(fp.read(), indent, **kwargs)


def write_formatted(
    value: Any, fp: IO[str], indent: Any = DEFAULT_INDENT, **kwargs: Any
) -> None:
    """
    Formats a value and writes the result to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(format_json(value, indent, **kwargs))


__all__ = [
    "DEFAULT_INDENT",
    "FormatConfig",
    "HotPathStats",
    "JsonFormatter",
    "ProfileContext",
    "clear_hot_path_stats",
    "compact_json",
    "format_file",
    "format_json",
    "get_hot_path_stats",
    "write_formatted",
]
