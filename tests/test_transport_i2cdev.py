import pytest

from iopi import transport_i2cdev
from iopi.definitions import I2C_SLAVE
from iopi.device import Device
from iopi.transport import TransportOpenFailed, AddressBindFailed, ShortRead
from iopi.transport_i2cdev import I2cDevTransport


@pytest.fixture
def node(tmp_path):
    """
    A regular file standing in for an i2c-dev node.
    """
    path = tmp_path / 'i2c-1'
    path.write_bytes(b'')
    return path


@pytest.fixture
def ioctls(monkeypatch):
    """
    Record I2C_SLAVE ioctls instead of sending them to the kernel.
    """
    calls = []

    def fake_ioctl(fd, request, arg):
        calls.append((fd, request, arg))
        return 0

    monkeypatch.setattr(transport_i2cdev.fcntl, 'ioctl', fake_ioctl)
    return calls


def test_open_missing_node(tmp_path):
    transport = I2cDevTransport(str(tmp_path / 'i2c-9'))
    with pytest.raises(TransportOpenFailed):
        transport.open()
    assert not transport.is_open()


def test_from_path_opens(node):
    transport = I2cDevTransport.from_path(str(node))
    assert transport.is_open()
    assert transport.name == str(node)
    transport.close()
    assert not transport.is_open()
    # closing twice is harmless
    transport.close()


def test_bind_on_non_i2c_node_fails(node):
    """
    A regular file does not understand the I2C_SLAVE ioctl.
    """
    transport = I2cDevTransport.from_path(str(node))
    with pytest.raises(AddressBindFailed):
        transport.set_address(0x20)
    assert transport.address is None
    transport.close()


def test_bind_before_open_fails(node):
    transport = I2cDevTransport(str(node))
    with pytest.raises(AddressBindFailed):
        transport.set_address(0x20)


def test_set_address(node, ioctls):
    transport = I2cDevTransport.from_path(str(node))
    transport.set_address(0x21)
    assert ioctls == [(transport.fd, I2C_SLAVE, 0x21)]
    assert transport.address == 0x21
    transport.close()


def test_device_init_from_path(node, ioctls):
    """
    Device.from_path opens the node itself during init() and writes the
    init sequence to it.
    """
    dev = Device.from_path(str(node), 0x20)
    assert not dev.transport.is_open()
    dev.init()
    assert ioctls[0][1:] == (I2C_SLAVE, 0x20)
    dev.close()
    assert node.read_bytes() == bytes([
        0x0a, 0x22,
        0x00, 0xff,
        0x01, 0xff,
        0x0c, 0x00,
        0x0d, 0x00,
        0x02, 0x00,
        0x03, 0x00,
    ])


def test_device_init_bind_failure(node):
    dev = Device.from_path(str(node), 0x20)
    with pytest.raises(AddressBindFailed):
        dev.init()
    dev.close()
    assert node.read_bytes() == b''


def test_device_short_read(node, ioctls):
    """
    Reading at the end of the file returns nothing, which is a short read.
    """
    dev = Device.from_path(str(node), 0x20)
    dev.init()
    with pytest.raises(ShortRead):
        dev.read_byte_data(0x12)
    dev.close()
