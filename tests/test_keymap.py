"""Tests for key name to token mapping."""

import pytest
from calculator import Calculator
from keymap import to_token


@pytest.mark.parametrize('key, token', [
    ('Escape', 'C'),
    ('Backspace', 'Backspace'),
    ('Delete', 'C'),
    ('Clear', 'C'),
    ('Enter', '='),
    ('=', '='),
    ('*', 'x'),
    ('/', '/'),
    ('-', '-'),
    ('+', '+'),
])
def test_mapped_keys(key, token):
    assert to_token(key) == token


@pytest.mark.parametrize('key', ['7', '.', '%', 'a', 'Shift'])
def test_unmapped_keys_pass_through(key):
    assert to_token(key) == key


def test_keyboard_sequence_drives_engine():
    calc = Calculator()
    for key in ['1', '2', '*', '3', 'Enter']:
        calc.submit(to_token(key))
    assert calc.display_value() == '36'
    calc.submit(to_token('Escape'))
    assert calc.display_value() == '0'
