# -*- coding: utf-8 -*-
# core/exceptions.py
class LayoutOptimizerException(Exception):
    """Базовое исключение приложения"""
    pass

class LayoutCalculationError(LayoutOptimizerException):
    """Ошибка расчета раскладки"""
    pass

class ValidationError(LayoutOptimizerException):
    """Ошибка валидации"""
    pass
