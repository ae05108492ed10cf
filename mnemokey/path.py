"""
BIP32 child numbers and derivation paths
"""

from typing import Iterable, Iterator, Tuple, Union

from mnemokey.config import HARDENED_OFFSET
from mnemokey.errors import InvalidChildNumber, InvalidDerivationPath

HARDENED_MARKS = ("'", "h", "H")


class ChildNumber:
    """
    Child index tagged with its derivation mode

    `index` is the plain position (0..2^31-1); `hardened` selects the
    private-key derivation branch. The 32-bit wire value is `to_int()`.
    """

    __slots__ = ("_index", "_hardened")

    def __init__(self, index: int, hardened: bool = False):
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidChildNumber(f"Child index must be an integer, got {index!r}")
        if not 0 <= index < HARDENED_OFFSET:
            raise InvalidChildNumber(f"Child index out of range: {index}")
        self._index = index
        self._hardened = bool(hardened)

    @classmethod
    def normal(cls, index: int) -> "ChildNumber":
        return cls(index, False)

    @classmethod
    def hardened_child(cls, index: int) -> "ChildNumber":
        return cls(index, True)

    @classmethod
    def from_int(cls, value: int) -> "ChildNumber":
        """Decode a 32-bit wire value; the top bit marks hardened"""
        if not isinstance(value, int) or not 0 <= value <= 0xFFFFFFFF:
            raise InvalidChildNumber(f"Child number out of range: {value!r}")
        if value >= HARDENED_OFFSET:
            return cls(value - HARDENED_OFFSET, True)
        return cls(value, False)

    @classmethod
    def parse(cls, text: str) -> "ChildNumber":
        """Parse "44'", "44h" or "0" """
        text = text.strip()
        hardened = text.endswith(HARDENED_MARKS)
        digits = text[:-1] if hardened else text
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidChildNumber(f"Invalid child number: {text!r}")
        return cls(int(digits), hardened)

    @classmethod
    def coerce(cls, value: Union["ChildNumber", int, str]) -> "ChildNumber":
        if isinstance(value, ChildNumber):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.from_int(value)

    @property
    def index(self) -> int:
        return self._index

    @property
    def hardened(self) -> bool:
        return self._hardened

    def to_int(self) -> int:
        if self._hardened:
            return self._index + HARDENED_OFFSET
        return self._index

    def to_bytes(self) -> bytes:
        """ser32 of the wire value"""
        return self.to_int().to_bytes(4, "big")

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return f"{self._index}'" if self._hardened else str(self._index)

    def __repr__(self) -> str:
        return f"ChildNumber({self})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChildNumber):
            return NotImplemented
        return self.to_int() == other.to_int()

    def __hash__(self) -> int:
        return hash(self.to_int())


class DerivationPath:
    """Ordered sequence of child numbers applied from a root key"""

    __slots__ = ("_children",)

    def __init__(self, children: Iterable[Union[ChildNumber, int, str]] = ()):
        self._children: Tuple[ChildNumber, ...] = tuple(ChildNumber.coerce(c) for c in children)

    @classmethod
    def parse(cls, path: str) -> "DerivationPath":
        """
        Parse a path string

        Args:
            path: BIP32 path (e.g., "m/44'/0'/0'/0/0"); "m" is the empty path

        Returns:
            DerivationPath
        """
        text = path.strip()
        if text in ("m", "M", ""):
            return cls()
        if text.lower().startswith("m/"):
            text = text[2:]

        children = []
        for part in text.split("/"):
            try:
                children.append(ChildNumber.parse(part))
            except InvalidChildNumber as e:
                raise InvalidDerivationPath(path, str(e)) from None
        return cls(children)

    @classmethod
    def coerce(cls, value) -> "DerivationPath":
        if isinstance(value, DerivationPath):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls(value)

    def child(self, child: Union[ChildNumber, int, str]) -> "DerivationPath":
        """Return a new path extended by one step"""
        return DerivationPath(self._children + (ChildNumber.coerce(child),))

    def to_list(self) -> list:
        """Wire values of each step"""
        return [c.to_int() for c in self._children]

    def __iter__(self) -> Iterator[ChildNumber]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, item):
        return self._children[item]

    def __str__(self) -> str:
        return "/".join(["m"] + [str(c) for c in self._children])

    def __repr__(self) -> str:
        return f"DerivationPath({str(self)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivationPath):
            return NotImplemented
        return self._children == other._children

    def __hash__(self) -> int:
        return hash(self._children)
