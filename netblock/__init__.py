from .address import Address
from .block import CidrBlock
from .errors import (
    AddressSpaceExhausted,
    IndexOutOfRange,
    InvalidHostmask,
    InvalidMask,
    InvalidPrefix,
    InvalidSubdivision,
    MalformedAddress,
    NetblockError,
)
from .normalize import netblock, parse_mask
from .prefix import Prefix

__all__ = [
    "Address",
    "AddressSpaceExhausted",
    "CidrBlock",
    "IndexOutOfRange",
    "InvalidHostmask",
    "InvalidMask",
    "InvalidPrefix",
    "InvalidSubdivision",
    "MalformedAddress",
    "NetblockError",
    "Prefix",
    "netblock",
    "parse_mask",
]
