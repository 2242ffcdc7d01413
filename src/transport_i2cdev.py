import fcntl
import logging
import os

from .definitions import I2C_SLAVE
from .transport import Transport, TransportOpenFailed, AddressBindFailed

LOGGER = logging.getLogger(__name__)


class I2cDevTransport(Transport):
    """
    A Linux i2c-dev character device, e.g. /dev/i2c-1.

    Plain reads and writes go to whichever chip address was last bound with
    the I2C_SLAVE ioctl.
    """
    def __init__(self, path, lock=None):
        """

        :param path: the i2c-dev device node
        :param lock: optional lock to share with other users of this bus
        """
        Transport.__init__(self, name=path, lock=lock)
        self.path = path
        self.fd = None

    @classmethod
    def from_path(cls, path, lock=None):
        """
        Make a transport and open it straight away.

        :param path: the i2c-dev device node
        :param lock: optional lock to share with other users of this bus
        :return: an open I2cDevTransport
        """
        obj = cls(path, lock=lock)
        obj.open()
        return obj

    def open(self):
        """
        Open the device node for reading and writing.
        """
        if self.fd is not None:
            return
        try:
            self.fd = os.open(self.path, os.O_RDWR)
        except OSError as e:
            raise TransportOpenFailed(
                'failed to open i2c device at \'%s\': %s' % (self.path, e))
        self.address = None
        LOGGER.debug('%s: opened, fd(%i)' % (self.path, self.fd))

    def is_open(self):
        return self.fd is not None

    def set_address(self, address):
        """
        Bind a chip address to this file descriptor.

        :param address: 7-bit chip address
        """
        if self.fd is None:
            raise AddressBindFailed(
                'cannot bind address 0x%02x, %s is not open' % (
                    address, self.path))
        try:
            fcntl.ioctl(self.fd, I2C_SLAVE, address)
        except OSError as e:
            raise AddressBindFailed(
                'failed to bind i2c address 0x%02x on %s: %s' % (
                    address, self.path, e))
        self.address = address

    def write(self, data):
        return os.write(self.fd, bytes(data))

    def read(self, size):
        return os.read(self.fd, size)

    def close(self):
        if self.fd is None:
            return
        fd = self.fd
        self.fd = None
        self.address = None
        os.close(fd)
        LOGGER.debug('%s: closed' % self.path)

# end
