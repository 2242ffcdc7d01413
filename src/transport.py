import threading


class TransportError(RuntimeError):
    pass


class TransportOpenFailed(TransportError):
    pass


class AddressBindFailed(TransportError):
    pass


class WriteFailed(TransportError):
    """
    Fewer bytes than requested went out on the bus, or the transport
    reported an error.
    """
    def __init__(self, msg, attempted, transferred=0):
        super(WriteFailed, self).__init__(msg)
        self.attempted = attempted
        self.transferred = transferred


class ShortWrite(WriteFailed):
    pass


class ReadFailed(TransportError):
    def __init__(self, msg, attempted, transferred=0):
        super(ReadFailed, self).__init__(msg)
        self.attempted = attempted
        self.transferred = transferred


class ShortRead(ReadFailed):
    pass


class Transport(object):
    """
    The two-wire bus a Device talks over.

    One transport may carry several devices at different addresses. They
    all share the transport's lock, and the transport remembers which
    address is currently bound so a device can rebind before it talks.
    """
    def __init__(self, name, lock=None):
        """

        :param name: identifies the bus, e.g. /dev/i2c-1
        :param lock: lock shared by every device on this bus, a new
            threading.Lock if None
        """
        self.name = name
        self.lock = lock if lock is not None else threading.Lock()
        self.address = None

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.name)

    def open(self):
        """
        Open the underlying bus for reading and writing.
        """
        raise NotImplementedError

    def is_open(self):
        """
        Is the bus open?

        :return: True or False
        """
        raise NotImplementedError

    def set_address(self, address):
        """
        Bind a chip address to the bus. This is a control operation, not a
        register write.

        :param address: 7-bit chip address
        """
        raise NotImplementedError

    def write(self, data):
        """
        Write raw bytes to the bound chip.

        :param data: bytes to write
        :return: the number of bytes written
        """
        raise NotImplementedError

    def read(self, size):
        """
        Read raw bytes from the bound chip.

        :param size: number of bytes to read
        :return: the bytes read, possibly fewer than size
        """
        raise NotImplementedError

    def close(self):
        """
        Release the bus.
        """
        raise NotImplementedError

# end
