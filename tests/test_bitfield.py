import pytest

from iopi import bitfield
from iopi.definitions import PORT_A, PORT_B


def test_set_bit():
    """
    Setting a clear bit and clearing a set bit only touch that bit.
    """
    assert bitfield.set_bit(0b00000000, 3, 1) == 0b00001000
    assert bitfield.set_bit(0b11111111, 3, 0) == 0b11110111


def test_set_bit_nonzero_value_sets():
    """
    Any nonzero value sets the bit, so register constants such as 0xFF can
    be passed straight through.
    """
    assert bitfield.set_bit(0x00, 0, 0xff) == 0x01
    assert bitfield.set_bit(0x00, 7, -1) == 0x80
    assert bitfield.set_bit(0x80, 7, 2) == 0x80


def test_set_bit_is_idempotent():
    assert bitfield.set_bit(0b00001000, 3, 1) == 0b00001000
    assert bitfield.set_bit(0b11110111, 3, 0) == 0b11110111


def test_get_bit():
    assert bitfield.get_bit(0b01000000, 6) == 1
    assert bitfield.get_bit(0b01000000, 5) == 0
    assert bitfield.get_bit(0xff, 7) == 1
    assert bitfield.get_bit(0x00, 0) == 0


@pytest.mark.parametrize('pin, expected', [
    (1, (0, PORT_A)),
    (7, (6, PORT_A)),
    (8, (7, PORT_A)),
    (9, (0, PORT_B)),
    (15, (6, PORT_B)),
    (16, (7, PORT_B)),
])
def test_get_pin_port(pin, expected):
    """
    Pins 1-8 live on port A, 9-16 on port B, both zero-indexed.

    Parameters
    ----------
    pin : int
        Pin number, 1-16.
    expected : tuple
        The (bit, port) pair the pin maps to.
    """
    assert bitfield.get_pin_port(pin) == expected


def test_unpack_port():
    """
    A port byte splits into eight pin states, bit 0 first.
    """
    bits = bitfield.unpack_port(0b10000101)
    assert len(bits) == 8
    assert list(bits) == [1, 0, 1, 0, 0, 0, 0, 1]
    assert list(bitfield.unpack_port(0)) == [0] * 8
