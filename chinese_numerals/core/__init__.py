"""
Core: символы, таблицы шкал, алгоритм разбиения и записи, публичные типы.

Модуль не зависит от внешних систем: только чистые функции
и неизменяемые модели.
"""
