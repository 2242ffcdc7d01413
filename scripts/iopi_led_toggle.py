#!/usr/bin/env python
import argparse
import time

from iopi import Device, DummyTransport, PORT_A, PORT_B, OUTPUT, LOW, HIGH
from iopi import log_handlers

parser = argparse.ArgumentParser(
    description='Drive every pin of an MCP23017 high, one by one, then low '
                'again.',
    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument('--bus', dest='bus', type=str, action='store',
                    default='/dev/i2c-1', help='the i2c-dev bus node')
parser.add_argument('--address', dest='address', type=lambda x: int(x, 0),
                    action='store', default=0x20,
                    help='the chip address, e.g. 0x20 or 0x21')
parser.add_argument('--delay', dest='delay', type=float, action='store',
                    default=0.1, help='seconds between pins')
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
    dev.set_port_mode(PORT_A, OUTPUT)
    dev.set_port_mode(PORT_B, OUTPUT)
    pins = list(range(1, 17))

    print('Enabling pins: %s' % pins)
    for pin in pins:
        dev.write_pin(pin, HIGH)
        time.sleep(args.delay)

    print('Disabling pins: %s' % pins)
    for pin in pins:
        dev.write_pin(pin, LOW)
        time.sleep(args.delay)

    print('Exiting!')
finally:
    dev.close()

# end
