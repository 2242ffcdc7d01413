import collections
import logging
import time

from .definitions import NUM_REGISTERS
from .transport import Transport, AddressBindFailed

LOGGER = logging.getLogger(__name__)

Call = collections.namedtuple('Call', ['fn', 'address', 'arg'])


class DummyTransport(Transport):
    """
    A dummy transport for testing.

    Emulates the register file of every chip address it gets bound to:
    a one-byte write sets the register pointer, a longer write stores the
    following bytes from the pointer onwards, and a read returns bytes from
    the pointer onwards. Every call is recorded in `calls`.
    """
    def __init__(self, name='dummy', lock=None, delay=0):
        """
        Make a Dummy Transport

        :param name: name of the bus
        :param lock: optional lock to share with other users of this bus
        :param delay: seconds to sleep inside each read and write, to
            widen race windows in tests
        """
        Transport.__init__(self, name=name, lock=lock)
        self.delay = delay
        self.calls = []
        self.open_count = 0
        self._open = True
        self._registers = {}
        self._pointers = {}
        # fault injection
        self.write_limit = None
        self.read_limit = None
        self.write_error = None
        self.read_error = None
        self.bind_error = None
        self.open_error = None
        LOGGER.debug('%s: created' % self.name)

    def _record(self, fn, arg):
        self.calls.append(Call(fn, self.address, bytes(arg)))

    def _regfile(self, address):
        if address not in self._registers:
            self._registers[address] = bytearray(NUM_REGISTERS)
            self._pointers[address] = 0
        return self._registers[address]

    def open(self):
        if self.open_error is not None:
            raise self.open_error
        self.open_count += 1
        self._open = True

    def is_open(self):
        return self._open

    def set_address(self, address):
        self.calls.append(Call('set_address', address, bytes([address])))
        if self.bind_error is not None:
            raise AddressBindFailed(str(self.bind_error))
        self._regfile(address)
        self.address = address

    def write(self, data):
        data = bytes(data)
        self._record('write', data)
        if self.delay:
            time.sleep(self.delay)
        if self.write_error is not None:
            raise self.write_error
        if self.write_limit is not None:
            data = data[:self.write_limit]
        if len(data) == 0:
            return 0
        regs = self._regfile(self.address)
        pointer = data[0]
        for ctr, value in enumerate(data[1:]):
            regs[(pointer + ctr) % NUM_REGISTERS] = value
        self._pointers[self.address] = pointer
        return len(data)

    def read(self, size):
        self._record('read', b'')
        if self.delay:
            time.sleep(self.delay)
        if self.read_error is not None:
            raise self.read_error
        if self.read_limit is not None:
            size = min(size, self.read_limit)
        regs = self._regfile(self.address)
        pointer = self._pointers[self.address]
        return bytes(regs[(pointer + ctr) % NUM_REGISTERS]
                     for ctr in range(size))

    def close(self):
        self._record('close', b'')
        self._open = False

    def get_register(self, address, register):
        """
        Peek at the emulated register of a chip.

        :param address: the chip address
        :param register: the register address
        """
        return self._regfile(address)[register]

    def set_register(self, address, register, value):
        """
        Preset an emulated register without recording a call.

        :param address: the chip address
        :param register: the register address
        :param value: the byte to store
        """
        self._regfile(address)[register] = value & 0xff

    def writes(self, address=None):
        """
        The data of every recorded write, optionally for one chip only.

        :param address: only return writes to this chip address
        :return: a list of bytes objects
        """
        return [call.arg for call in self.calls
                if call.fn == 'write' and
                (address is None or call.address == address)]

    def has_call(self, fn, arg):
        """
        Has a call with this signature been made to the transport?

        :param fn: 'write', 'read', 'set_address' or 'close'
        :param arg: the bytes passed
        """
        arg = bytes(arg)
        for call in self.calls:
            if call.fn == fn and call.arg == arg:
                return True
        return False

    def reset(self):
        """
        Forget the call history, keep the register contents.
        """
        self.calls = []

# end
