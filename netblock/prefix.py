from dataclasses import dataclass

from .address import MAX_ADDR, Address
from .errors import InvalidHostmask, InvalidMask, InvalidPrefix


def _is_hostmask(value: int) -> bool:
    # 下位ビットから 1 が連続している (2^n - 1)
    return value & (value + 1) == 0


@dataclass(frozen=True, order=True, slots=True)
class Prefix:
    """プレフィックス長 (/0 - /32)"""

    bits: int

    def __post_init__(self):
        if type(self.bits) is not int or not 0 <= self.bits <= 32:
            raise InvalidPrefix(f"prefix length must be an integer in [0, 32]: {self.bits!r}")

    @classmethod
    def from_bits(cls, bits: int | str) -> "Prefix":
        if isinstance(bits, str):
            if not (bits.isascii() and bits.isdigit()):
                raise InvalidPrefix(f"not a prefix length: {bits!r}")
            try:
                bits = int(bits)
            except ValueError:
                raise InvalidPrefix(f"not a prefix length: {bits!r}") from None
        return cls(bits)

    @classmethod
    def from_netmask(cls, text: str | Address) -> "Prefix":
        mask = int(text if isinstance(text, Address) else Address.parse(text))
        hostmask = ~mask & MAX_ADDR
        if not _is_hostmask(hostmask):
            raise InvalidMask(f"netmask is not contiguous: {text}")
        return cls(32 - hostmask.bit_length())

    @classmethod
    def from_hostmask(cls, text: str | Address) -> "Prefix":
        hostmask = int(text if isinstance(text, Address) else Address.parse(text))
        if not _is_hostmask(hostmask):
            raise InvalidHostmask(f"hostmask is not contiguous: {text}")
        return cls.from_netmask(Address(~hostmask & MAX_ADDR))

    @property
    def mask(self) -> int:
        return MAX_ADDR >> (32 - self.bits) << (32 - self.bits)

    @property
    def hostmask(self) -> int:
        return ~self.mask & MAX_ADDR

    @property
    def netmask_address(self) -> Address:
        return Address(self.mask)

    @property
    def hostmask_address(self) -> Address:
        return Address(self.hostmask)

    def __int__(self) -> int:
        return self.bits

    def __str__(self) -> str:
        return f"/{self.bits}"
