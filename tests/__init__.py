"""
Test suite for chinese_numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
