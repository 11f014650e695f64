"""
Named ANSI styles and colors.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

# name -> SGR parameter(s); multi-parameter codes are stored pre-joined
DEFAULT_COLORS = {
    'reset': '0',
    'bold': '1',
    'italic': '3',
    'underline': '4',
    'blink': '5',
    'inverse': '7',
    'linethrough': '9',
    'black': '30',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'blue': '34',
    'purple': '35',
    'cyan': '36',
    'white': '37',
    'grey': '90',
    'greybg': '49;5;8',
    'blackbg': '40',
    'redbg': '41',
    'greenbg': '42',
    'yellowbg': '43',
    'bluebg': '44',
    'purplebg': '45',
    'cyanbg': '46',
    'whitebg': '47',
}


class Palette:
    """Immutable name -> SGR code table. Lookups are case-sensitive."""

    def __init__(self, colors: Optional[Mapping[str, str]] = None):
        source = DEFAULT_COLORS if colors is None else colors
        self._colors = MappingProxyType({name: str(code) for name, code in source.items()})

    def lookup(self, name: str) -> Optional[str]:
        """Return the SGR code for name, or None if it is not in the palette."""
        return self._colors.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._colors)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._colors)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"Palette({len(self._colors)} entries)"


DEFAULT_PALETTE = Palette()
