"""Pattern registry mapping MPN shapes to component types.

Overlapping patterns are expected: a Nexperia "^PSMN[0-9]" entry and a
generic MOSFET entry can both match the same part. The registry reports every
match with its strength and leaves the choice to the detector.
"""

import logging
import re

from .types import ComponentType, PatternEntry

logger = logging.getLogger(__name__)

_REGEX_SPECIAL = set(".^$*+?{}[]()|")
_OPTIONAL_QUANTIFIERS = set("?*{")


def literal_prefix_length(pattern: str) -> int:
    """Length of the literal text a pattern must start with.

    Examples:
        "^R5F1[0-9]+.*" -> 4
        "^R5F[0-9]+" -> 3
        "^BZX84-C" -> 7
        "^74(HC|LVC)" -> 2
        "^A|^B" -> 0 (top-level alternation has no shared prefix)
    """
    if _has_top_level_alternation(pattern):
        return 0

    i = 1 if pattern.startswith("^") else 0
    length = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            # Escaped punctuation is literal; \d, \w and friends are not
            if i + 1 >= len(pattern) or pattern[i + 1].isalnum():
                break
            step = 2
        elif char in _REGEX_SPECIAL:
            break
        else:
            step = 1

        following = pattern[i + step] if i + step < len(pattern) else ""
        if following in _OPTIONAL_QUANTIFIERS:
            break
        length += 1
        if following == "+":
            break
        i += step
    return length


def _has_top_level_alternation(pattern: str) -> bool:
    depth = 0
    in_class = False
    escaped = False
    for char in pattern:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "|" and depth == 0:
            return True
    return False


class PatternRegistry:
    """Append-only collection of PatternEntry objects.

    Built single-threaded, then frozen. After freeze() the entry tuple is never
    touched again, so lookups need no locking.
    """

    def __init__(self):
        self._entries: list[PatternEntry] = []
        self._frozen_entries: tuple[PatternEntry, ...] | None = None
        self._by_manufacturer: dict[str, tuple[PatternEntry, ...]] = {}

    def register(
        self,
        component_type: ComponentType,
        pattern: str,
        manufacturer: str | None = None,
        priority: int = 0,
    ) -> PatternEntry:
        """Add a pattern. Identical or overlapping patterns are kept as-is."""
        if self._frozen_entries is not None:
            raise RuntimeError("PatternRegistry is frozen; register patterns before first use")
        entry = PatternEntry(
            component_type=component_type,
            pattern=re.compile(pattern, re.IGNORECASE),
            manufacturer=manufacturer,
            priority=priority,
            index=len(self._entries),
            strength=literal_prefix_length(pattern),
        )
        self._entries.append(entry)
        return entry

    def freeze(self) -> "PatternRegistry":
        if self._frozen_entries is None:
            self._frozen_entries = tuple(self._entries)
            grouped: dict[str, list[PatternEntry]] = {}
            for entry in self._frozen_entries:
                if entry.manufacturer:
                    grouped.setdefault(entry.manufacturer, []).append(entry)
            self._by_manufacturer = {k: tuple(v) for k, v in grouped.items()}
            logger.debug(f"Pattern registry frozen with {len(self._frozen_entries)} entries")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen_entries is not None

    @property
    def entries(self) -> tuple[PatternEntry, ...]:
        if self._frozen_entries is not None:
            return self._frozen_entries
        return tuple(self._entries)

    def entries_for(self, manufacturer: str) -> tuple[PatternEntry, ...]:
        if self._frozen_entries is not None:
            return self._by_manufacturer.get(manufacturer, ())
        return tuple(e for e in self._entries if e.manufacturer == manufacturer)

    def lookup(self, mpn: str | None) -> list[PatternEntry]:
        """All entries matching mpn, in registration order."""
        if not mpn:
            return []
        return [entry for entry in self.entries if entry.pattern.match(mpn)]

    def matches(self, mpn: str | None, component_type: ComponentType) -> bool:
        """True if any entry of component_type (or one of its sub-types) matches."""
        return any(
            entry.component_type is component_type or entry.component_type.base_type is component_type
            for entry in self.lookup(mpn)
        )

    def __len__(self) -> int:
        return len(self.entries)
