import numpy as np

from .definitions import PORT_A, PORT_B, PINS_PER_PORT


def set_bit(byte, bit, value):
    """
    Set or clear a single bit in a byte.

    :param byte: the byte to modify
    :param bit: zero-based bit index, 0-7
    :param value: 0 clears the bit, anything else sets it
    :return: the modified byte
    """
    if value == 0:
        return (byte & ~(1 << bit)) & 0xff
    return (byte | (1 << bit)) & 0xff


def get_bit(byte, bit):
    """
    Get a single bit from a byte.

    :param byte: the byte to inspect
    :param bit: zero-based bit index, 0-7
    :return: 0 or 1
    """
    if byte & (1 << bit):
        return 1
    return 0


def get_pin_port(pin):
    """
    Translate a pin number 1-16 into a zero-based bit on a specific port.

    Pins outside 1-16 are not checked, the result is then meaningless.

    .. code-block:: python

       get_pin_port(7)     # (6, PORT_A)
       get_pin_port(9)     # (0, PORT_B)

    :param pin: pin number, 1-16
    :return: tuple (bit, port)
    """
    if pin > PINS_PER_PORT:
        return pin - 1 - PINS_PER_PORT, PORT_B
    return pin - 1, PORT_A


def unpack_port(byte):
    """
    Split a port byte into the states of its eight pins.

    :param byte: a port register value
    :return: numpy uint8 array, bit 0 first
    """
    return np.unpackbits(np.array([byte & 0xff], dtype=np.uint8),
                         bitorder='little')

# end
