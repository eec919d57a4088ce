#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CIPHER TOOL: шифрование и расшифровка из командной строки
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  cipher caesar   encrypt|decrypt [текст] [-s СДВИГ] [-a АЛФАВИТ]
  cipher vigenere encrypt|decrypt [текст] [-k КЛЮЧ]  [-a АЛФАВИТ]

Текст берётся из аргументов, из pipe (как есть, без обрезки) или вводится
интерактивно. Алфавит: имя пресета (uk, ru, en) или строка символов.
"""

import sys
import logging
import argparse
from dataclasses import dataclass
from typing import List, Optional, Union

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from classic_ciphers import (
    PRESETS,
    RUNNING_KEY_DEFAULT_ALPHA,
    SHIFT_DEFAULT_ALPHA,
    ConfigurationError,
    RunningKeyCipher,
    ShiftCipher,
    resolve_alphabet,
)

log = logging.getLogger('cipher')

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


# ═══════════════════════════════════════════════════════════════════════════════
# ЗАПРОС
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Job:
    """Что сделать и с каким шифром"""
    cipher: Union[ShiftCipher, RunningKeyCipher]
    mode: str              # 'encrypt' | 'decrypt'
    text: str
    from_stdin: bool

    @property
    def name(self) -> str:
        return 'Цезарь' if isinstance(self.cipher, ShiftCipher) else 'Виженер'

    def run(self) -> str:
        if self.mode == 'encrypt':
            return self.cipher.encrypt(self.text)
        return self.cipher.decrypt(self.text)


# ═══════════════════════════════════════════════════════════════════════════════
# UI (Rich)
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self):
        self.c = Console()
        self.err = Console(stderr=True)

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CIPHER TOOL[/bold cyan]\n"
            "[dim]Цезарь • Виженер • произвольный алфавит[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def result(self, job: Job, output: str):
        title = "🔐 ЗАШИФРОВАНО" if job.mode == 'encrypt' else "🔓 РАСШИФРОВАНО"
        self.c.print(Panel(
            Text(output),
            title=f"[bold green]{title}[/bold green]",
            border_style="green", box=box.ROUNDED
        ))
        self.c.print(Text(self._summary(job), style="dim"))

    @staticmethod
    def _summary(job: Job) -> str:
        cipher = job.cipher
        if isinstance(cipher, ShiftCipher):
            key = f"🔑 Сдвиг: {cipher.shift}"
        else:
            key = f"🔑 Ключ: {cipher.key!r}"
        return (f"{job.name}  {key}  🔤 Алфавит: {len(cipher.symbols)} симв.  "
                f"📏 {len(job.text)} симв.")

    def error(self, message: str):
        self.err.print(Text(f"❌ {message}", style="bold red"))

    def ask_multiline(self, prompt: str) -> str:
        """Многострочный ввод: пустая строка или Ctrl+D завершает"""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](пустая строка = конец ввода)[/dim]")

        lines = []
        try:
            while True:
                line = input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)

    def ask_key(self) -> str:
        return Prompt.ask("[bold]Ключ[/bold]", console=self.c)


# ═══════════════════════════════════════════════════════════════════════════════
# ПРИЛОЖЕНИЕ
# ═══════════════════════════════════════════════════════════════════════════════

class CipherArgumentParser(argparse.ArgumentParser):
    """Ошибки разбора аргументов завершаются с EXIT_USAGE, а не с 2"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f'{self.prog}: ошибка: {message}\n')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = CipherArgumentParser(
        prog='cipher',
        description='Шифр Цезаря и шифр Виженера над произвольным алфавитом',
    )
    sub = p.add_subparsers(dest='cipher', required=True, metavar='{caesar,vigenere}')

    presets = ', '.join(PRESETS)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('mode', choices=['encrypt', 'decrypt'], help='Действие')
    common.add_argument('text', nargs='*', help='Текст (иначе pipe или ввод)')
    common.add_argument('-r', '--raw', action='store_true',
                        help='Вывести только результат (удобно для pipe)')
    common.add_argument('-v', '--verbose', action='store_true',
                        help='Отладочный лог в stderr')

    caesar = sub.add_parser('caesar', parents=[common], help='Шифр сдвига')
    caesar.add_argument('-s', '--shift', type=int, default=3,
                        help='Сдвиг, любое целое (по умолчанию 3)')
    caesar.add_argument('-a', '--alphabet',
                        help=f'Пресет ({presets}) или строка символов '
                             f'(по умолчанию {SHIFT_DEFAULT_ALPHA!r})')

    vigenere = sub.add_parser('vigenere', parents=[common], help='Шифр с бегущим ключом')
    vigenere.add_argument('-k', '--key', help='Ключевое слово')
    vigenere.add_argument('-a', '--alphabet',
                          help=f'Пресет ({presets}) или строка символов '
                               f'(по умолчанию {RUNNING_KEY_DEFAULT_ALPHA!r})')
    # Позиционный text, идущий после опций, argparse оставляет в хвосте
    args, rest = p.parse_known_args(argv)
    unknown = [arg for arg in rest if arg.startswith('-')]
    if unknown:
        p.error(f"неизвестные аргументы: {' '.join(unknown)}")
    args.text = args.text + rest
    return args


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_cipher(args: argparse.Namespace, ui: Optional[UI] = None):
    """ui передаётся, только если ключ можно спросить у пользователя"""
    if args.cipher == 'caesar':
        return ShiftCipher(args.shift, resolve_alphabet(args.alphabet, SHIFT_DEFAULT_ALPHA))

    key = args.key
    if key is None:
        key = ui.ask_key() if ui is not None else ''
    return RunningKeyCipher(key, resolve_alphabet(args.alphabet, RUNNING_KEY_DEFAULT_ALPHA))


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    raw = args.raw

    ui = UI()
    interactive = False

    # Ввод текста
    if args.text:
        text = ' '.join(args.text)
        from_stdin = False
    elif not sys.stdin.isatty():
        text = sys.stdin.read()
        from_stdin = True
    else:
        if raw:
            ui.error("в режиме --raw нужно передать текст аргументом или через pipe")
            return EXIT_USAGE
        ui.header()
        text = ui.ask_multiline("Введите текст:")
        from_stdin = False
        interactive = True

    can_prompt = interactive or (not raw and not from_stdin and sys.stdin.isatty())
    cipher = build_cipher(args, ui if can_prompt else None)
    log.debug('%s: %s, %d символов', args.cipher, args.mode, len(text))

    job = Job(cipher=cipher, mode=args.mode, text=text, from_stdin=from_stdin)
    try:
        output = job.run()
    except ConfigurationError as e:
        ui.error(str(e))
        return EXIT_CONFIG

    if raw:
        sys.stdout.write(output if job.from_stdin else output + '\n')
        return EXIT_OK

    ui.result(job, output)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return run(argv)
    except KeyboardInterrupt:
        print("\n👋")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
