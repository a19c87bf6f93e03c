"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "true_value": "true",
    "false_value": "false",
    "null_value": "null",
    "variadic_arity": -1,  # 负数表示可变参数
    "display_precision": None,  # None 表示输出完整精度，否则为有效数字位数
}

# 运算符优先级（值越大绑定越紧）
PRECEDENCE_CONFIG = {
    "bracket": 100,  # 括号/函数/关键字
    "separator": -10,  # 参数分隔符/三元运算符
    "boolean": 0,
    "comparison": 10,
    "additive": 20,
    "multiplicative": 40,
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    p = PRECEDENCE_CONFIG
    assert p["separator"] < p["boolean"], "分隔符必须低于布尔运算符"
    assert p["boolean"] < p["comparison"] < p["additive"] < p["multiplicative"], "运算符优先级顺序错误"
    assert p["multiplicative"] < p["bracket"], "括号优先级必须最高"
    assert CALCULATOR_CONFIG["variadic_arity"] < 0, "可变参数标记必须为负数"
    assert CALCULATOR_CONFIG["true_value"] != CALCULATOR_CONFIG["false_value"]
    precision = CALCULATOR_CONFIG["display_precision"]
    assert precision is None or precision > 0, "显示精度必须为正数"
    return True
