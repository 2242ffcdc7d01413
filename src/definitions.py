"""
Register map and constants for the MCP23017 16-bit IO expander.
"""

# MCP23017 registers, IOCON.BANK = 0 addressing
IODIRA = 0x00
IODIRB = 0x01
IPOLA = 0x02
IPOLB = 0x03
IOCON = 0x0A
GPPUA = 0x0C
GPPUB = 0x0D
GPIOA = 0x12
GPIOB = 0x13

# size of the register file seen by the dummy transport
NUM_REGISTERS = 0x16

# as defined in /usr/include/linux/i2c-dev.h
I2C_SLAVE = 0x0703

# sequential operation disabled, open-drain INT output
IOCON_DEFAULT = 0x22

# the 16 pins are split into two ports: pins 1-8 and 9-16
PORT_A = 0
PORT_B = 1
PORTS = (PORT_A, PORT_B)
PINS_PER_PORT = 8
NUM_PINS = 16

# direction
OUTPUT = 0x00
INPUT = 0xFF

# polarity
POLARITY_NORMAL = 0x00
POLARITY_INVERTED = 0xFF

# logic state
LOW = 0x00
HIGH = 0xFF

# pull-ups
PULLUP_DISABLED = 0x00
PULLUP_ENABLED = 0xFF

# port -> register, per function
PORT_MODE_REG = {PORT_A: IODIRA, PORT_B: IODIRB}
PORT_POLARITY_REG = {PORT_A: IPOLA, PORT_B: IPOLB}
PORT_PULLUP_REG = {PORT_A: GPPUA, PORT_B: GPPUB}
PORT_GPIO_REG = {PORT_A: GPIOA, PORT_B: GPIOB}

REGISTER_NAMES = {
    IODIRA: 'IODIRA',
    IODIRB: 'IODIRB',
    IPOLA: 'IPOLA',
    IPOLB: 'IPOLB',
    IOCON: 'IOCON',
    GPPUA: 'GPPUA',
    GPPUB: 'GPPUB',
    GPIOA: 'GPIOA',
    GPIOB: 'GPIOB',
}

# end
