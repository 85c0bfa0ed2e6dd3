from .version import __version__ as __version__

__title__ = "bytekit"
__description__ = "Radix codecs and AES block-cipher modes for raw byte data."
__author__ = "Saudade Z"
__license__ = "Apache-2.0"
