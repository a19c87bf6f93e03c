"""工具模块"""
from .formatting import format_number, format_number_precision, parse_number

__all__ = ['format_number', 'format_number_precision', 'parse_number']
