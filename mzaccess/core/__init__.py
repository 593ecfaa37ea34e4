from .base_reader import BaseSpectrumSource
from .registry import detect_format, get_reader_class, register_reader, sniff_format

__all__ = ["BaseSpectrumSource", "detect_format", "get_reader_class", "register_reader", "sniff_format"]
