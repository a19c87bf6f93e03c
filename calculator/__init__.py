"""计算器模块 - 对外接口和示例扩展"""
from .calculator import Calculator
from .extensions import example_extensions, register_example_extensions

__all__ = ['Calculator', 'example_extensions', 'register_example_extensions']
