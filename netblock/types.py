from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .address import Address
    from .block import CidrBlock

# 実行時には評価しない (Address / CidrBlock は型チェック時のみ import する)
type Member = Address | CidrBlock

type IndexSpec = int | range | Iterable[int | range]
