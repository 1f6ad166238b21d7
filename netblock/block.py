from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .address import MAX_ADDR, Address
from .errors import AddressSpaceExhausted, IndexOutOfRange, InvalidSubdivision
from .prefix import Prefix
from .types import IndexSpec, Member

ADDRESS_SPACE = MAX_ADDR + 1


@dataclass(frozen=True, order=True, slots=True)
class CidrBlock:
    """
    CIDR ブロック (ネットワークアドレスとプレフィックス長の組)

    base は常にネットワークアドレスで、渡されたアドレスのホスト部は生成時に捨てられる。
    メンバーの列挙やインデックスアクセスはすべて base からのオフセット計算で行い、
    アドレスのリストを作ることはない。
    """

    base: Address
    prefix: Prefix = field(default_factory=lambda: Prefix(32))

    def __post_init__(self):
        masked = int(self.base) & self.prefix.mask
        if masked != int(self.base):
            object.__setattr__(self, "base", Address(masked))

    @property
    def bits(self) -> int:
        return self.prefix.bits

    @property
    def size(self) -> int:
        return 1 << (32 - self.bits)

    @property
    def netmask(self) -> Address:
        return self.prefix.netmask_address

    @property
    def hostmask(self) -> Address:
        return self.prefix.hostmask_address

    @property
    def broadcast(self) -> Address:
        return Address(int(self.base) | self.prefix.hostmask)

    @property
    def first(self) -> Address:
        return self.base

    @property
    def last(self) -> Address:
        return self.broadcast

    def describe(self) -> str:
        return f"{self.base}/{self.bits}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"CidrBlock('{self.describe()}')"

    def contains(self, addr: Address | str) -> int | None:
        """
        アドレスがブロックに含まれていればブロック内のインデックスを返す
        含まれない場合は None (ネットワークアドレス自身はインデックス 0)
        """
        if not isinstance(addr, Address):
            addr = Address.parse(addr)
        if int(addr) & self.prefix.mask != int(self.base):
            return None
        return int(addr) - int(self.base)

    def __contains__(self, addr: Address | str) -> bool:
        return self.contains(addr) is not None

    def covers(self, other: CidrBlock) -> bool:
        return other.bits >= self.bits and int(other.base) & self.prefix.mask == int(self.base)

    def _check_subdivision(self, sub_bits: int) -> Prefix:
        sub_prefix = Prefix.from_bits(sub_bits)
        if sub_prefix.bits < self.bits:
            raise InvalidSubdivision(f"cannot split {self} into /{sub_prefix.bits} blocks")
        return sub_prefix

    def _member(self, index: int, sub_prefix: Prefix, as_blocks: bool) -> Member:
        addr = Address(int(self.base) + index * (1 << (32 - sub_prefix.bits)))
        return CidrBlock(addr, sub_prefix) if as_blocks else addr

    def enumerate(self, sub_bits: int = 32, as_blocks: bool = False) -> Iterator[Member]:
        """
        ブロックを /sub_bits のサブブロックに分割して昇順に返す
        as_blocks が False ならサブブロックの先頭アドレス、True ならサブブロック自体を返す
        """
        sub_prefix = self._check_subdivision(sub_bits)
        count = 1 << (sub_prefix.bits - self.bits)

        def members() -> Iterator[Member]:
            for index in range(count):
                yield self._member(index, sub_prefix, as_blocks)

        return members()

    def __iter__(self) -> Iterator[Member]:
        return self.enumerate()

    def nth(self, n: IndexSpec, sub_bits: int = 32, as_blocks: bool = False) -> Member | list[Member]:
        """
        n 番目のサブブロック (またはその先頭アドレス) を列挙せずに直接計算して返す
        n に range や int/range の混在したコレクションを渡した場合は、与えられた順序のままリストで返す
        """
        sub_prefix = self._check_subdivision(sub_bits)
        count = 1 << (sub_prefix.bits - self.bits)
        if isinstance(n, int):
            return self._member(self._resolve_index(n, count), sub_prefix, as_blocks)
        return [self._member(self._resolve_index(i, count), sub_prefix, as_blocks) for i in _flatten(n)]

    def __getitem__(self, key: int | slice) -> Member | list[Member]:
        if isinstance(key, slice):
            return self.nth(range(*key.indices(self.size)))
        return self.nth(key)

    @staticmethod
    def _resolve_index(index: int, count: int) -> int:
        resolved = index + count if index < 0 else index
        if not 0 <= resolved < count:
            raise IndexOutOfRange(f"index {index} out of range for {count} items")
        return resolved

    def next(self) -> CidrBlock:
        return self._step(1)

    def prev(self) -> CidrBlock:
        return self._step(-1)

    def _step(self, steps: int) -> CidrBlock:
        new_base = int(self.base) + steps * self.size
        if new_base < 0 or new_base + self.size > ADDRESS_SPACE:
            raise AddressSpaceExhausted(f"no /{self.bits} block {steps:+d} from {self}")
        return CidrBlock(Address(new_base), self.prefix)

    def __add__(self, steps: int) -> CidrBlock:
        if not isinstance(steps, int):
            return NotImplemented
        return self._step(steps)

    def __sub__(self, steps: int) -> CidrBlock:
        if not isinstance(steps, int):
            return NotImplemented
        return self._step(-steps)

    def reverse_zones(self) -> list[str]:
        """ブロックを覆う in-addr.arpa の逆引きゾーン名の一覧"""
        zone_bits = min(max(8, -(-self.bits // 8) * 8), 24)
        if zone_bits < self.bits:
            zones = [CidrBlock(self.base, Prefix(zone_bits))]
        else:
            zones = self.enumerate(zone_bits, as_blocks=True)
        return [zone.base.reverse_name(zone_bits // 8) for zone in zones]


def _flatten(indices: Iterable[int | range]) -> Iterator[int]:
    for item in indices:
        if isinstance(item, range):
            yield from item
        else:
            yield item
