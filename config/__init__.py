"""配置模块"""
from .config import CALCULATOR_CONFIG, PRECEDENCE_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['CALCULATOR_CONFIG', 'PRECEDENCE_CONFIG', 'LOGGING_CONFIG', 'validate_config']
