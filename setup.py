import setuptools
import glob
import os

NAME = 'iopi'
DESCRIPTION = 'Control MCP23017 16-bit IO expanders, such as on the IO Pi board, over Linux i2c-dev.'
URL = 'https://github.com/stigok/go-io-pi'

AUTHOR  = 'stigok'
VERSION = '0.1.0'

here = os.path.abspath(os.path.dirname(__file__))

try:
    with open(os.path.join(here, 'README.md')) as readme:
        long_description = '\n{}'.format(readme.read())
except IOError:
    long_description = DESCRIPTION


setuptools.setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    author=AUTHOR,
    url=URL,
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'numpy>=1.17',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=['iopi'],
    package_dir={'iopi': 'src'},
    scripts=glob.glob('scripts/*'),
    python_requires='>=3.6',
    keywords='mcp23017 i2c gpio raspberry-pi iopi',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX :: Linux',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Hardware',
    ]
)

# end
