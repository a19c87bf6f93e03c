"""utils/formatting.py"""
import numpy as np


def format_number(value):
    """数值 -> 文本；保证 float(format_number(x)) == x，整数去掉 '.0'"""
    try:
        value = float(value)
    except OverflowError:
        # 超出 float 范围的大整数
        value = np.inf if value > 0 else -np.inf
    if np.isnan(value):
        return "nan"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_number_precision(value, precision):
    """按有效数字位数输出，用于显示"""
    value = float(value)
    if np.isnan(value) or np.isinf(value):
        return format_number(value)
    return f"{value:.{precision}g}"


def parse_number(text):
    """文本 -> 数值，无法解析时返回 NaN；不接受 '1_000' 这类下划线写法"""
    if isinstance(text, str) and '_' in text:
        return np.nan
    try:
        return float(text)
    except (TypeError, ValueError):
        return np.nan
