#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Классические шифры над произвольным алфавитом
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  1. Шифр сдвига (Цезаря): позиция символа + фиксированный сдвиг
  2. Шифр с бегущим ключом (Виженера): позиция символа ± позиция символа ключа

Символы вне алфавита проходят без изменений. Регистр не нормализуется:
поиск в алфавите точный, приводить текст к нужному регистру должен вызывающий.
"""

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Iterator, Optional

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# АЛФАВИТЫ
# ═══════════════════════════════════════════════════════════════════════════════

UK_ALPHA = 'абвгдеєжзиіїйклмнопрстуфхцчшщьюя'   # 32
RU_ALPHA = 'абвгдеёжзийклмнопрстуфхцчшщъыьэюя'  # 33
EN_ALPHA = 'abcdefghijklmnopqrstuvwxyz'         # 26

PRESETS: Dict[str, str] = {
    'uk': UK_ALPHA,
    'ru': RU_ALPHA,
    'en': EN_ALPHA,
}

SHIFT_DEFAULT_ALPHA = UK_ALPHA
RUNNING_KEY_DEFAULT_ALPHA = UK_ALPHA + ' '


def resolve_alphabet(value: Optional[str], default: str) -> str:
    """None → default, имя пресета → пресет, иначе строка как есть (даже пустая)"""
    if value is None:
        return default
    return PRESETS.get(value, value)


# ═══════════════════════════════════════════════════════════════════════════════
# ОШИБКИ
# ═══════════════════════════════════════════════════════════════════════════════

class CipherError(Exception):
    """Базовая ошибка модуля"""


class ConfigurationError(CipherError, ValueError):
    """Некорректная конфигурация шифра (алфавит, ключ)"""


class InvalidAlphabet(ConfigurationError):
    pass


class DuplicateSymbol(InvalidAlphabet):
    pass


class EmptyKey(ConfigurationError):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# АРИФМЕТИКА
# ═══════════════════════════════════════════════════════════════════════════════

def mod(k: int, n: int) -> int:
    """
    Остаток в диапазоне [0, n) для любого k, в том числе отрицательного.
    n == 0 → ZeroDivisionError.
    """
    # % в Python берёт знак делителя, так что при n > 0 результат уже неотрицателен
    return k % n


class Alphabet:
    """Упорядоченный набор уникальных символов: символ ↔ позиция за O(1)"""

    __slots__ = ('_symbols', '_index')

    def __init__(self, symbols: str):
        if not symbols:
            raise InvalidAlphabet('Алфавит пуст: нужен хотя бы один символ')
        index: Dict[str, int] = {}
        for pos, char in enumerate(symbols):
            if char in index:
                raise DuplicateSymbol(
                    f'Символ {char!r} повторяется в алфавите '
                    f'(позиции {index[char]} и {pos})'
                )
            index[char] = pos
        self._symbols = symbols
        self._index = index

    def position(self, char: str) -> Optional[int]:
        """Позиция символа или None, если его нет в алфавите"""
        return self._index.get(char)

    def symbol(self, pos: int) -> str:
        return self._symbols[mod(pos, len(self._symbols))]

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, char: str) -> bool:
        return char in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f'Alphabet({self._symbols!r})'


@lru_cache(maxsize=64)
def get_alphabet(symbols: str) -> Alphabet:
    """Алфавит с кэшем: одна и та же строка → один и тот же объект"""
    alphabet = Alphabet(symbols)
    log.debug('Алфавит построен: %d символов', len(alphabet))
    return alphabet


# ═══════════════════════════════════════════════════════════════════════════════
# ШИФР СДВИГА
# ═══════════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=128)
def _shift_table(symbols: str, shift: int) -> dict:
    """Таблица для str.translate(); shift уже приведён по модулю длины алфавита"""
    size = len(symbols)
    shifted = ''.join(symbols[(i + shift) % size] for i in range(size))
    log.debug('Таблица сдвига построена: shift=%d, size=%d', shift, size)
    return str.maketrans(symbols, shifted)


@dataclass(frozen=True)
class ShiftCipher:
    """
    Шифр сдвига. Неизменяем: для другой конфигурации используйте
    with_shift() / with_alphabet().

    alphabet=None означает алфавит по умолчанию (украинский, 32 буквы);
    пустая строка не подменяется умолчанием и даёт InvalidAlphabet.
    """
    shift: int = 3
    alphabet: Optional[str] = None

    @property
    def symbols(self) -> str:
        return SHIFT_DEFAULT_ALPHA if self.alphabet is None else self.alphabet

    def with_shift(self, shift: int) -> 'ShiftCipher':
        return replace(self, shift=shift)

    def with_alphabet(self, alphabet: Optional[str]) -> 'ShiftCipher':
        return replace(self, alphabet=alphabet)

    def encrypt(self, text: str, shift: Optional[int] = None) -> str:
        if shift is None:
            shift = self.shift
        alphabet = get_alphabet(self.symbols)
        return text.translate(_shift_table(self.symbols, mod(shift, len(alphabet))))

    def decrypt(self, text: str, shift: Optional[int] = None) -> str:
        """Расшифровка = шифрование с противоположным сдвигом"""
        if shift is None:
            shift = self.shift
        return self.encrypt(text, -shift)


# ═══════════════════════════════════════════════════════════════════════════════
# ШИФР С БЕГУЩИМ КЛЮЧОМ
# ═══════════════════════════════════════════════════════════════════════════════

class Direction(IntEnum):
    ENCRYPT = 1
    DECRYPT = -1


@dataclass(frozen=True)
class RunningKeyCipher:
    """
    Шифр Виженера: ключевое слово повторяется по длине текста,
    позиция каждого символа ключа прибавляется (вычитается) к позиции символа текста.

    Если символ текста или ключа не входит в алфавит, символ текста
    выводится как есть; такой символ ключа просто не сдвигает свою позицию.
    """
    key: str
    alphabet: Optional[str] = None

    @property
    def symbols(self) -> str:
        return RUNNING_KEY_DEFAULT_ALPHA if self.alphabet is None else self.alphabet

    def with_key(self, key: str) -> 'RunningKeyCipher':
        return replace(self, key=key)

    def with_alphabet(self, alphabet: Optional[str]) -> 'RunningKeyCipher':
        return replace(self, alphabet=alphabet)

    def key_stream(self, text: str) -> str:
        """Ключ, циклически повторённый до длины text: 'key', 7 → 'keykeyk'"""
        if not self.key:
            raise EmptyKey('Ключ пуст: для шифра Виженера нужен хотя бы один символ')
        n = len(self.key)
        return ''.join(self.key[i % n] for i in range(len(text)))

    def shift_symbol(self, char: str, key_char: str,
                     direction: int = Direction.ENCRYPT) -> str:
        return self._shift(get_alphabet(self.symbols), char, key_char, Direction(direction))

    @staticmethod
    def _shift(alphabet: Alphabet, char: str, key_char: str, direction: Direction) -> str:
        ci = alphabet.position(char)
        ki = alphabet.position(key_char)
        if ci is None or ki is None:
            return char
        return alphabet.symbol(ci + direction * ki)

    def _apply(self, text: str, direction: Direction) -> str:
        alphabet = get_alphabet(self.symbols)
        stream = self.key_stream(text)
        return ''.join(
            self._shift(alphabet, char, key_char, direction)
            for char, key_char in zip(text, stream)
        )

    def encrypt(self, text: str) -> str:
        return self._apply(text, Direction.ENCRYPT)

    def decrypt(self, text: str) -> str:
        return self._apply(text, Direction.DECRYPT)
