#!/usr/bin/env python
import argparse
import time

from iopi import Device, DummyTransport, PORT_A, PORT_B, INPUT
from iopi import log_handlers

parser = argparse.ArgumentParser(
    description='Poll both ports of an MCP23017 and print them in binary.',
    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument('--bus', dest='bus', type=str, action='store',
                    default='/dev/i2c-1', help='the i2c-dev bus node')
parser.add_argument('--address', dest='address', type=lambda x: int(x, 0),
                    action='store', default=0x20,
                    help='the chip address, e.g. 0x20 or 0x21')
parser.add_argument('--interval', dest='interval', type=float,
                    action='store', default=0.5,
                    help='seconds between reads')
parser.add_argument('--count', dest='count', type=int, action='store',
                    default=0, help='stop after this many reads, 0 is never')
parser.add_argument('--dummy', dest='dummy', action='store_true',
                    default=False, help='use an in-memory dummy bus')
parser.add_argument('--loglevel', dest='log_level', action='store',
                    default='', help='log level to use, default None, '
                                     'options INFO, DEBUG, ERROR')
args = parser.parse_args()

if args.dummy:
    dev = Device.from_transport(DummyTransport(), args.address)
else:
    dev = Device.from_path(args.bus, args.address)

if args.log_level != '':
    dev.logger.setLevel(log_handlers.log_level_from_name(args.log_level))

dev.init()
try:
    dev.set_port_mode(PORT_A, INPUT)
    dev.set_port_mode(PORT_B, INPUT)
    reads = 0
    while args.count == 0 or reads < args.count:
        port_a = dev.read_port(PORT_A)
        port_b = dev.read_port(PORT_B)
        print('{:08b} {:08b}'.format(port_a, port_b))
        reads += 1
        time.sleep(args.interval)
except KeyboardInterrupt:
    pass
finally:
    dev.close()

# end
