"""
The parsing engine: value conversion, token resolution, and results
"""
from .converters import ConverterRegistry
from .result import ParseResult
from .parser import OptionParser, parse, parse_argv
