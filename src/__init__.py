"""
control the MCP23017 16-bit IO expander over a two-wire bus.
"""

# import all the main classes that we'll use often
from .definitions import PORT_A, PORT_B, INPUT, OUTPUT, LOW, HIGH, \
    POLARITY_NORMAL, POLARITY_INVERTED, PULLUP_DISABLED, PULLUP_ENABLED
from .bitfield import set_bit, get_bit, get_pin_port, unpack_port
from .device import Device, InvalidPort
from .transport import Transport, TransportError, TransportOpenFailed, \
    AddressBindFailed, WriteFailed, ShortWrite, ReadFailed, ShortRead
from .transport_i2cdev import I2cDevTransport
from .transport_dummy import DummyTransport

__version__ = '0.1.0'

name = 'iopi'

# end
