from sanguinius.reader.char_stream import CharStream
from sanguinius.reader.parser import Reader, read, read_all

__all__ = ["CharStream", "Reader", "read", "read_all"]
