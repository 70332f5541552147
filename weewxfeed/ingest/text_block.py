"""Parse the free-text ``Name: value`` blocks embedded in weewx RSS items."""

import re

_LINE_SPLIT_RE = re.compile(r"[\r\n]+")
# Values end at the first HTML entity or tag, e.g. "12,3&#176;C<br/>"
_MARKUP_RE = re.compile(r"[&<]+")


def parse_item(block: str) -> dict[str, str]:
    """Turn a weewx text block into a flat field map.

    Names lose all spaces ("Outside Temperature" -> "OutsideTemperature"),
    values lose trailing markup and use "." as decimal separator. Lines
    without a colon are skipped; a repeated name keeps its last value.
    """
    fields: dict[str, str] = {}
    for line in _LINE_SPLIT_RE.split(block):
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name = name.strip().replace(" ", "")
        value = _MARKUP_RE.split(value.strip(), maxsplit=1)[0]
        fields[name] = value.replace(",", ".")
    return fields
