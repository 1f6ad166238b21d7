class NetblockError(ValueError):
    """Base class of every error raised by netblock"""


class MalformedAddress(NetblockError):
    pass


class InvalidPrefix(NetblockError):
    pass


class InvalidMask(NetblockError):
    pass


class InvalidHostmask(InvalidMask):
    pass


class InvalidSubdivision(NetblockError):
    pass


class IndexOutOfRange(NetblockError, IndexError):
    pass


class AddressSpaceExhausted(NetblockError, OverflowError):
    pass
