# -*- coding: utf-8 -*-
import dataclasses

import pytest

from classic_ciphers import (
    EN_ALPHA,
    RU_ALPHA,
    UK_ALPHA,
    Alphabet,
    ConfigurationError,
    Direction,
    DuplicateSymbol,
    EmptyKey,
    InvalidAlphabet,
    RunningKeyCipher,
    ShiftCipher,
    get_alphabet,
    mod,
    resolve_alphabet,
)

EN_SPACE = EN_ALPHA + ' '


# ─── mod ──────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize('k, n, expected', [
    (-1, 26, 25),
    (26, 26, 0),
    (0, 1, 0),
    (-27, 26, 25),
    (-52, 26, 0),
    (1000, 32, 8),
])
def test_mod_is_non_negative(k, n, expected):
    assert mod(k, n) == expected


def test_mod_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        mod(5, 0)


# ─── Alphabet ─────────────────────────────────────────────────────────────────

def test_alphabet_positions():
    alpha = Alphabet('abc')
    assert alpha.position('a') == 0
    assert alpha.position('c') == 2
    assert alpha.position('z') is None
    assert alpha.symbol(-1) == 'c'
    assert alpha.symbol(4) == 'b'
    assert len(alpha) == 3
    assert 'b' in alpha and 'B' not in alpha
    assert str(alpha) == 'abc'


def test_alphabet_rejects_empty():
    with pytest.raises(InvalidAlphabet):
        Alphabet('')


def test_alphabet_rejects_duplicates():
    with pytest.raises(DuplicateSymbol, match="'a'"):
        Alphabet('abca')


def test_get_alphabet_is_cached():
    assert get_alphabet(EN_ALPHA) is get_alphabet(EN_ALPHA)


def test_presets():
    assert len(UK_ALPHA) == 32
    assert len(RU_ALPHA) == 33
    assert resolve_alphabet(None, 'xyz') == 'xyz'
    assert resolve_alphabet('en', 'xyz') == EN_ALPHA
    assert resolve_alphabet('qwe', 'xyz') == 'qwe'
    assert resolve_alphabet('', 'xyz') == ''


# ─── ShiftCipher ──────────────────────────────────────────────────────────────

def test_shift_hello():
    cipher = ShiftCipher(10, EN_ALPHA)
    assert cipher.encrypt('hello') == 'rovvy'
    assert cipher.decrypt('rovvy') == 'hello'


def test_shift_defaults():
    cipher = ShiftCipher()
    assert cipher.shift == 3
    assert cipher.symbols == UK_ALPHA
    assert cipher.encrypt('абв') == 'где'


def test_shift_ukrainian_sample():
    cipher = ShiftCipher(10)
    assert cipher.encrypt('захист') == 'піврюя'
    assert cipher.decrypt('піврюя') == 'захист'


def test_shift_override():
    cipher = ShiftCipher(10, EN_ALPHA)
    assert cipher.encrypt('abc', 1) == 'bcd'
    assert cipher.decrypt('bcd', 1) == 'abc'
    assert cipher.encrypt('abc', 0) == 'abc'


@pytest.mark.parametrize('shift', [-1000, -33, -32, -1, 0, 1, 5, 31, 32, 33, 1000])
def test_shift_round_trip(shift):
    cipher = ShiftCipher(shift)
    text = 'захист інформації, 2024! Привіт'
    encrypted = cipher.encrypt(text)
    assert len(encrypted) == len(text)
    assert cipher.decrypt(encrypted) == text


def test_shift_pass_through():
    cipher = ShiftCipher(7, EN_ALPHA)
    text = 'Hi, there! 42'
    encrypted = cipher.encrypt(text)
    for original, out in zip(text, encrypted):
        if original not in EN_ALPHA:
            assert out == original
    assert encrypted[0] == 'H'
    assert encrypted[1] == 'p'


def test_shift_is_case_sensitive():
    assert ShiftCipher(1, EN_ALPHA).encrypt('HELLO') == 'HELLO'


def test_shift_full_turn_is_identity():
    assert ShiftCipher(26, EN_ALPHA).encrypt('abc') == 'abc'
    assert ShiftCipher(-26, EN_ALPHA).encrypt('abc') == 'abc'


def test_shift_single_symbol_alphabet():
    cipher = ShiftCipher(5, 'x')
    assert cipher.encrypt('xyx') == 'xyx'


def test_shift_empty_alphabet_fails_at_use():
    cipher = ShiftCipher(1, '')
    with pytest.raises(InvalidAlphabet):
        cipher.encrypt('abc')
    with pytest.raises(ConfigurationError):
        cipher.decrypt('')


def test_shift_duplicate_alphabet_fails():
    with pytest.raises(DuplicateSymbol):
        ShiftCipher(1, 'abca').encrypt('a')


def test_shift_builders_return_new_values():
    base = ShiftCipher(3, EN_ALPHA)
    moved = base.with_shift(1)
    assert moved.shift == 1 and base.shift == 3
    assert moved.encrypt('a') == 'b'
    assert base.with_alphabet(None).symbols == UK_ALPHA
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.shift = 5


# ─── RunningKeyCipher ─────────────────────────────────────────────────────────

def test_key_stream():
    cipher = RunningKeyCipher('key', EN_SPACE)
    assert cipher.key_stream('abcdefg') == 'keykeyk'
    assert cipher.key_stream('') == ''
    assert cipher.key_stream('ab') == 'ke'


def test_running_key_attack_at_dawn():
    cipher = RunningKeyCipher('key', EN_SPACE)
    encrypted = cipher.encrypt('attack at dawn')
    assert encrypted == 'kxqkghjeqjhyfr'
    assert cipher.decrypt(encrypted) == 'attack at dawn'


def test_running_key_default_alphabet():
    cipher = RunningKeyCipher('ключ')
    assert cipher.symbols == UK_ALPHA + ' '
    text = 'захист інформації'
    encrypted = cipher.encrypt(text)
    assert encrypted != text
    assert len(encrypted) == len(text)
    assert cipher.decrypt(encrypted) == text


def test_running_key_pass_through():
    cipher = RunningKeyCipher('b', EN_ALPHA)
    assert cipher.encrypt('a, b!') == 'b, c!'
    assert cipher.decrypt('b, c!') == 'a, b!'


def test_running_key_foreign_key_symbol_does_not_shift():
    cipher = RunningKeyCipher('b!', EN_ALPHA)
    assert cipher.encrypt('aaaa') == 'baba'
    assert cipher.decrypt('baba') == 'aaaa'


def test_shift_symbol():
    cipher = RunningKeyCipher('x', EN_ALPHA)
    assert cipher.shift_symbol('z', 'b') == 'a'
    assert cipher.shift_symbol('a', 'b', Direction.DECRYPT) == 'z'
    assert cipher.shift_symbol('a', 'b', -1) == 'z'
    assert cipher.shift_symbol('?', 'b') == '?'
    assert cipher.shift_symbol('a', '?') == 'a'
    with pytest.raises(ValueError):
        cipher.shift_symbol('a', 'b', 2)


def test_running_key_empty_key():
    cipher = RunningKeyCipher('', EN_SPACE)
    with pytest.raises(EmptyKey):
        cipher.encrypt('attack')
    with pytest.raises(ConfigurationError):
        cipher.decrypt('attack')


def test_running_key_empty_alphabet():
    with pytest.raises(InvalidAlphabet):
        RunningKeyCipher('key', '').encrypt('attack')


def test_running_key_builders():
    base = RunningKeyCipher('key', EN_SPACE)
    other = base.with_key('b')
    assert other.encrypt('a') == 'b'
    assert base.key == 'key'
    assert base.with_alphabet(None).symbols == UK_ALPHA + ' '
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.key = 'x'


def test_running_key_requires_key():
    with pytest.raises(TypeError):
        RunningKeyCipher()
    assert RunningKeyCipher('key').key == 'key'
