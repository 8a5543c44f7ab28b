"""Configuration loading for Git Log Analyzer.

Settings live in a Java-style ``.properties`` file (``app.properties`` by
default). Recognized keys:

- ``git.search.keywords``: comma-separated keywords searched in commit subjects
- ``output.format``: ``JSON`` (default) or ``PLAINTEXT``, case-insensitive
- ``output.file``: destination of the JSON report (``git-report.json``)
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel

DEFAULT_CONFIG_FILE = Path("app.properties")
DEFAULT_OUTPUT_FILE = Path("git-report.json")

KEYWORDS_KEY = "git.search.keywords"
OUTPUT_FORMAT_KEY = "output.format"
OUTPUT_FILE_KEY = "output.file"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class OutputFormat(str, Enum):
    """Report output format."""

    JSON = "JSON"
    PLAINTEXT = "PLAINTEXT"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """Anything other than PLAINTEXT (any case, no padding) selects JSON."""
        if value is not None and value.upper() == cls.PLAINTEXT.value:
            return cls.PLAINTEXT
        return cls.JSON


def parse_keywords(value: Optional[str]) -> List[str]:
    """Split a comma-separated keyword list, dropping empty entries."""
    if not value:
        return []
    return [kw.strip() for kw in value.split(",") if kw.strip()]


class AnalyzerConfig(BaseModel):
    """Settings consumed by the analyzer and the report renderer."""

    keywords: List[str] = []
    output_format: OutputFormat = OutputFormat.JSON
    output_file: Path = DEFAULT_OUTPUT_FILE

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "AnalyzerConfig":
        """Build a config from raw property values, filling in defaults."""
        output_file = properties.get(OUTPUT_FILE_KEY, "").strip()
        return cls(
            keywords=parse_keywords(properties.get(KEYWORDS_KEY)),
            output_format=OutputFormat.parse(properties.get(OUTPUT_FORMAT_KEY)),
            output_file=Path(output_file) if output_file else DEFAULT_OUTPUT_FILE,
        )


def load_properties(path: Path) -> Dict[str, str]:
    """Read a ``.properties`` file into a dict.

    A missing file yields an empty mapping so every setting falls back to its
    default. Content is read as UTF-8, falling back to ISO-8859-1 (the
    encoding ``java.util.Properties`` uses) when it is not valid UTF-8.
    """
    path = Path(path)
    if not path.exists():
        return {}

    data = path.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    return parse_properties(text)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse ``.properties`` content.

    Supports ``#``/``!`` comments, ``=``/``:``/whitespace separators,
    backslash line continuation and the usual escapes. Later keys win.
    """
    properties: Dict[str, str] = {}
    for logical_line in _logical_lines(text):
        key, value = _split_key_value(logical_line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def _logical_lines(text: str) -> List[str]:
    lines: List[str] = []
    pending: Optional[str] = None

    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None:
            if not line or line[0] in "#!":
                continue
        if _ends_with_continuation(line):
            pending = (pending or "") + line[:-1]
            continue
        lines.append((pending or "") + line)
        pending = None

    if pending is not None:
        lines.append(pending)
    return lines


def _ends_with_continuation(line: str) -> bool:
    # An odd number of trailing backslashes escapes the line break
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_key_value(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=: \t\f":
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value

    result = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\" or index + 1 >= len(value):
            result.append(char)
            index += 1
            continue

        escaped = value[index + 1]
        if escaped == "u" and index + 6 <= len(value):
            try:
                result.append(chr(int(value[index + 2 : index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        result.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return "".join(result)
