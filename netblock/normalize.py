import logging

from .address import Address
from .block import CidrBlock
from .errors import InvalidMask
from .prefix import Prefix

logger = logging.getLogger(__name__)


def parse_mask(mask: str | int | Address | Prefix) -> Prefix:
    """
    マスク相当の値をプレフィックス長に変換する
    ドット区切りの値はまずネットマスクとして解釈し、だめならホストマスク (ワイルドカードマスク) として解釈する
    """
    match mask:
        case Prefix():
            return mask
        case int():
            return Prefix.from_bits(mask)
        case str() if "." not in mask:
            return Prefix.from_bits(mask)
    try:
        return Prefix.from_netmask(mask)
    except InvalidMask:
        pass
    try:
        prefix = Prefix.from_hostmask(mask)
    except InvalidMask:
        raise InvalidMask(f"neither a netmask nor a hostmask: {mask}") from None
    logger.debug("treating %s as a hostmask (/%d)", mask, prefix.bits)
    return prefix


def _parse_address(address: str | Address) -> Address:
    return address if isinstance(address, Address) else Address.parse(address)


def _split(text: str) -> tuple[str, str | None]:
    if "/" in text:
        address, prefix = text.split("/", 1)
        return address, prefix
    parts = text.split()
    if len(parts) == 2:
        return parts[0], parts[1]
    return text, None


def netblock(
    block: str | Address | CidrBlock | None = None,
    mask: str | int | Address | Prefix | None = None,
    *,
    address: str | Address | None = None,
    netmask: str | int | Address | Prefix | None = None,
) -> CidrBlock:
    """
    各種の入力形式から CidrBlock を作る

    - netblock("192.168.0.0/24")
    - netblock("192.168.0.0 255.255.255.0")
    - netblock("192.168.0.0", "255.255.255.0") / netblock("192.168.0.0", "0.0.0.255") / netblock("192.168.0.0", 24)
    - netblock(address="192.168.0.0", netmask="255.255.255.0")
    - netblock("192.168.0.1") (/32)

    アドレスのホスト部は捨てられる (netblock("192.168.0.1/24") は 192.168.0.0/24)
    """
    if address is not None or netmask is not None:
        if block is not None or mask is not None:
            raise TypeError("pass either positional values or address=/netmask=, not both")
        if address is None:
            raise TypeError("address= is required")
        block, mask = address, netmask

    match block:
        case CidrBlock() if mask is None:
            return block
        case Address():
            addr = block
        case str() if mask is None:
            text, mask = _split(block)
            addr = _parse_address(text)
        case str():
            addr = _parse_address(block)
        case _:
            raise TypeError(f"unsupported block value: {block!r}")

    prefix = Prefix(32) if mask is None else parse_mask(mask)
    result = CidrBlock(addr, prefix)
    if result.base != addr:
        logger.debug("discarded host bits of %s for %s", addr, result)
    return result
