from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ReservedScript:
    """A script identified by a set of inclusive Unicode code point ranges."""

    name: str
    ranges: Tuple[Tuple[int, int], ...]

    def __contains__(self, char: str) -> bool:
        code = ord(char)
        return any(start <= code <= end for start, end in self.ranges)

    def found_in(self, text: Optional[str]) -> bool:
        if not text:
            return False
        return any(char in self for char in text)


HEBREW = ReservedScript("hebrew", ((0x0590, 0x05FF), (0xFB1D, 0xFB4F)))
ARABIC = ReservedScript(
    "arabic", ((0x0600, 0x06FF), (0x0750, 0x077F), (0xFB50, 0xFDFF), (0xFE70, 0xFEFF))
)
CYRILLIC = ReservedScript("cyrillic", ((0x0400, 0x04FF), (0x0500, 0x052F)))

SCRIPTS: Dict[str, ReservedScript] = {
    script.name: script for script in (HEBREW, ARABIC, CYRILLIC)
}


def get_reserved_script(name: str) -> ReservedScript:
    try:
        return SCRIPTS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown reserved script '{name}'. Available: {sorted(SCRIPTS)}"
        ) from None


def contains_reserved_script(
    text: Optional[str], script: ReservedScript = HEBREW
) -> bool:
    """True if any character of `text` belongs to `script`."""
    return script.found_in(text)
