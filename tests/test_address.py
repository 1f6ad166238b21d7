import pytest

from netblock import Address, MalformedAddress


def test_address_parse():
    addr = Address.parse("192.168.1.0")
    assert int(addr) == 0xC0A80100
    assert str(addr) == "192.168.1.0"
    assert addr.octets == (192, 168, 1, 0)


def test_address_from_int():
    assert str(Address(0)) == "0.0.0.0"
    assert str(Address(0xFFFFFFFF)) == "255.255.255.255"
    assert Address(167772160) == Address.parse("10.0.0.0")


def test_address_leading_zeros_are_decimal():
    assert Address.parse("010.000.000.008") == Address.parse("10.0.0.8")


@pytest.mark.parametrize(
    "text",
    ["", "1.2.3", "1.2.3.4.5", "1.2.3.256", "1.2.3.-1", "+1.2.3.4", " 1.2.3.4", "1.2.3.4 ", "a.b.c.d", "1..2.3"],
)
def test_address_malformed(text):
    with pytest.raises(MalformedAddress):
        Address.parse(text)


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_address_out_of_range(value):
    with pytest.raises(MalformedAddress):
        Address(value)


def test_address_ordering_and_hash():
    assert Address.parse("10.0.0.1") < Address.parse("10.0.0.2")
    assert len({Address.parse("10.0.0.1"), Address(0x0A000001)}) == 1


def test_address_reverse_pointer():
    assert Address.parse("192.0.2.5").reverse_pointer == "5.2.0.192.in-addr.arpa"


def test_address_octet_with_too_many_digits():
    with pytest.raises(MalformedAddress):
        Address.parse("1.2.3." + "0" * 5000 + "4")
    with pytest.raises(MalformedAddress):
        Address.parse("1.2.3." + "9" * 5000)


def test_address_reverse_name():
    addr = Address.parse("192.0.2.5")
    assert addr.reverse_name(3) == "2.0.192.in-addr.arpa"
    assert addr.reverse_name(1) == "192.in-addr.arpa"
    assert addr.reverse_name() == addr.reverse_pointer
