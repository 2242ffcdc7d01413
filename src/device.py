import numpy as np

from . import definitions as defs
from .bitfield import set_bit, get_bit, get_pin_port, unpack_port
from .log_handlers import getLogger
from .transport import TransportError, WriteFailed, ShortWrite, \
    ReadFailed, ShortRead
from .transport_i2cdev import I2cDevTransport


class InvalidPort(ValueError):
    pass


class Device(object):
    """
    An MCP23017 16-bit IO expander on a two-wire bus.

    Several Devices at different chip addresses can share one transport.
    They then share the transport's lock, so register transactions from
    different threads never interleave on the wire.
    """
    def __init__(self, transport, address, **kwargs):
        """
        Use Device.from_path or Device.from_transport rather than calling
        this directly.

        :param transport: a Transport, open or not
        :param address: 7-bit chip address, e.g. 0x20
        :param lock: lock guarding the transport, defaults to transport.lock
        :param logger: logger to use, one is made from the path and address
            if not given
        """
        self.address = address
        self.transport = transport
        self.path = transport.name
        self.lock = kwargs.get('lock', transport.lock)
        try:
            self.logger = kwargs['logger']
        except KeyError:
            _, self.logger = getLogger(
                name='{}:0x{:02x}'.format(self.path, address))

    @classmethod
    def from_path(cls, path, address, **kwargs):
        """
        Make a Device that opens and owns its own bus during init().

        :param path: the i2c-dev node, e.g. /dev/i2c-1
        :param address: 7-bit chip address
        :return: a Device
        """
        transport = I2cDevTransport(path)
        return cls(transport, address, **kwargs)

    @classmethod
    def from_transport(cls, transport, address, **kwargs):
        """
        Make a Device on a transport that other devices may also use.

        .. code-block:: python

           bus = I2cDevTransport.from_path('/dev/i2c-1')
           dev1 = Device.from_transport(bus, 0x20)
           dev2 = Device.from_transport(bus, 0x21)

        :param transport: an already-made Transport
        :param address: 7-bit chip address
        :return: a Device
        """
        return cls(transport, address, **kwargs)

    def __repr__(self):
        return 'Device(%s, 0x%02x)' % (self.path, self.address)

    def init(self):
        """
        Open the bus if needed, bind the chip address and program the
        default chip state. Must be called once per device. Call close()
        to release the bus when done.
        """
        if not self.transport.is_open():
            self.transport.open()
        with self.lock:
            self.transport.set_address(self.address)
        self.logger.info('%s: bound to %s' % (self, self.path))
        self._driver_init()

    def _driver_init(self):
        """
        Board initialisation: all pins inputs, no pull-ups, normal polarity.

        Failures are logged and do not stop the sequence.
        """
        steps = [
            (self.write_byte_data, defs.IOCON, defs.IOCON_DEFAULT),
            (self.set_port_mode, defs.PORT_A, defs.INPUT),
            (self.set_port_mode, defs.PORT_B, defs.INPUT),
            (self.set_port_pullup, defs.PORT_A, defs.PULLUP_DISABLED),
            (self.set_port_pullup, defs.PORT_B, defs.PULLUP_DISABLED),
            (self.set_port_polarity, defs.PORT_A, defs.POLARITY_NORMAL),
            (self.set_port_polarity, defs.PORT_B, defs.POLARITY_NORMAL),
        ]
        for func, arg, value in steps:
            try:
                func(arg, value)
            except TransportError as e:
                self.logger.error('%s: %s(0x%02x, 0x%02x) failed during '
                                  'init: %s' % (self, func.__name__, arg,
                                                value, e))

    def close(self):
        """
        Clean up resources.
        """
        self.transport.close()

    # region -- register access --

    def _select(self):
        # caller holds self.lock
        if self.transport.address != self.address:
            self.transport.set_address(self.address)

    def _write(self, data):
        try:
            written = self.transport.write(data)
        except OSError as e:
            raise WriteFailed(
                '%s: failed to write to slave (wrote 0 of %i bytes): %s' % (
                    self, len(data), e), attempted=len(data))
        if written != len(data):
            raise ShortWrite(
                '%s: short write to slave (wrote %i of %i bytes)' % (
                    self, written, len(data)),
                attempted=len(data), transferred=written)

    def _read_register(self, reg):
        # caller holds self.lock
        self._select()
        self._write(bytes([reg]))
        try:
            data = self.transport.read(1)
        except OSError as e:
            raise ReadFailed('%s: failed to read from slave: %s' % (self, e),
                             attempted=1)
        if len(data) != 1:
            raise ShortRead(
                '%s: short read from slave (read %i of 1 bytes)' % (
                    self, len(data)), attempted=1, transferred=len(data))
        value = data[0]
        self.logger.debug('%s: read 0x%02x <- %s' % (
            self, value, defs.REGISTER_NAMES.get(reg, '0x%02x' % reg)))
        return value

    def _write_register(self, reg, value):
        # caller holds self.lock
        self._select()
        self._write(bytes([reg, value & 0xff]))
        self.logger.debug('%s: write 0x%02x -> %s' % (
            self, value & 0xff, defs.REGISTER_NAMES.get(reg, '0x%02x' % reg)))

    def read_byte_data(self, reg):
        """
        Read raw data from a register.

        This is a low-level interface. You probably want to use the higher
        level functions to manipulate the board.

        :param reg: register address
        :return: the register value
        """
        with self.lock:
            return self._read_register(reg)

    def write_byte_data(self, reg, value):
        """
        Write raw data to a register.

        This is a low-level interface. You probably want to use the higher
        level functions to manipulate the board.

        :param reg: register address
        :param value: the byte to write
        """
        with self.lock:
            self._write_register(reg, value)

    def _modify_bit(self, registers, pin, value):
        bit, port = get_pin_port(pin)
        reg = registers[port]
        with self.lock:
            state = self._read_register(reg)
            self._write_register(reg, set_bit(state, bit, value))

    @staticmethod
    def _port_register(registers, port):
        try:
            return registers[port]
        except (KeyError, TypeError):
            raise InvalidPort('invalid port: %r' % (port, ))

    # endregion

    # region -- pull-ups --

    def set_port_pullup(self, port, state):
        """
        Collectively enable 100K pull-up resistors on all pins on a port.

        :param port: PORT_A or PORT_B
        :param state: pull-up mask, PULLUP_ENABLED or PULLUP_DISABLED for
            all pins
        """
        reg = self._port_register(defs.PORT_PULLUP_REG, port)
        self.write_byte_data(reg, state)

    def set_pin_pullup(self, pin, state):
        """
        Enable or disable the 100K pull-up resistor on a single pin.

        :param pin: 1-16
        :param state: zero disables, anything else enables
        """
        self._modify_bit(defs.PORT_PULLUP_REG, pin, state)

    # endregion

    # region -- polarity --

    def set_port_polarity(self, port, polarity):
        """
        Collectively set the polarity of all pins on a port.
        Also known as normal and inverted logic.
        """
        reg = self._port_register(defs.PORT_POLARITY_REG, port)
        self.write_byte_data(reg, polarity)

    def set_pin_polarity(self, pin, polarity):
        self._modify_bit(defs.PORT_POLARITY_REG, pin, polarity)

    # endregion

    # region -- direction --

    def set_port_mode(self, port, mode):
        """
        Collectively set all pins on a port to a specific direction.

        :param port: PORT_A or PORT_B
        :param mode: INPUT, OUTPUT or a mask where set bits are inputs
        """
        reg = self._port_register(defs.PORT_MODE_REG, port)
        self.write_byte_data(reg, mode)

    def set_pin_mode(self, pin, mode):
        """
        Set the direction of a single pin.

        :param pin: 1-16
        :param mode: OUTPUT (zero) or INPUT (nonzero)
        """
        self._modify_bit(defs.PORT_MODE_REG, pin, mode)

    # endregion

    # region -- pin state --

    def write_port(self, port, state):
        """
        Collectively set all pins on the port to a specific state.
        """
        reg = self._port_register(defs.PORT_GPIO_REG, port)
        self.write_byte_data(reg, state)

    def read_port(self, port):
        """
        Return a byte describing the state of all pins on the selected port.

        :param port: PORT_A or PORT_B
        """
        reg = self._port_register(defs.PORT_GPIO_REG, port)
        return self.read_byte_data(reg)

    def write_pin(self, pin, state):
        """
        Set a single pin to a specific state.

        :param pin: 1-16
        :param state: LOW (zero) or HIGH (nonzero)
        """
        self._modify_bit(defs.PORT_GPIO_REG, pin, state)

    def read_pin(self, pin):
        """
        Return the state of a single pin.

        :param pin: 1-16
        :return: 0 or 1
        """
        bit, port = get_pin_port(pin)
        return get_bit(self.read_port(port), bit)

    def read_pins(self):
        """
        Read both ports at once.

        :return: numpy uint8 array of the 16 pin states, pin 1 first
        """
        with self.lock:
            port_a = self._read_register(defs.GPIOA)
            port_b = self._read_register(defs.GPIOB)
        return np.concatenate((unpack_port(port_a), unpack_port(port_b)))

    # endregion

# end
