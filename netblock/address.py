import re
from dataclasses import dataclass

from .errors import MalformedAddress

MAX_ADDR = 0xFFFFFFFF

_DOTTED_QUAD = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True, slots=True)
class Address:
    """IPv4 アドレス (32bit 符号なし整数として保持する)"""

    value: int

    def __post_init__(self):
        if type(self.value) is not int or not 0 <= self.value <= MAX_ADDR:
            raise MalformedAddress(f"not a 32-bit address value: {self.value!r}")

    @classmethod
    def parse(cls, text: str) -> "Address":
        match = _DOTTED_QUAD.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise MalformedAddress(f"not a dotted-quad address: {text!r}")
        try:
            octets = [int(group) for group in match.groups()]
        except ValueError:
            # int() の桁数上限を超えた場合
            raise MalformedAddress(f"octet out of range in {text!r}") from None
        addr = 0
        for i, octet in enumerate(octets):
            if octet > 0xFF:
                raise MalformedAddress(f"octet out of range in {text!r}")
            addr += octet * 0x100 ** (3 - i)
        return cls(addr)

    @property
    def octets(self) -> tuple[int, ...]:
        return tuple(reversed([(self.value & (0xFF * 0x100**i)) >> (i * 8) for i in range(4)]))

    def reverse_name(self, octets: int = 4) -> str:
        """上位 octets 個のオクテットから in-addr.arpa の逆引き名を作る"""
        return ".".join(str(octet) for octet in reversed(self.octets[:octets])) + ".in-addr.arpa"

    @property
    def reverse_pointer(self) -> str:
        return self.reverse_name()

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)

    def __repr__(self) -> str:
        return f"Address('{self}')"
