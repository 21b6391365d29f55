"""Command line front end for the bundled automata and clients.

Usage:
    dfalex lex [--automaton NAME]   # one result per line, per stdin line
    dfalex postfix                  # calculator source -> postfix items
    dfalex nfa2dot                  # regex -> Graphviz DOT

Options:
    -v, --verbose   Log at DEBUG level to stderr
    --trace         Also log every step directive (implies --verbose)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from dfalex.automata import BUILTIN_AUTOMATA, get_automaton
from dfalex.clients.nfa import regex_to_dot
from dfalex.clients.postfix import PostfixTranslator
from dfalex.config import LexConfig, get_lex_config, lex_config_context
from dfalex.errors import ParseError
from dfalex.lexer import lex
from dfalex.tokens import TokenResult


def format_result(result: TokenResult) -> str:
    """Render one result as ``Ok(NAME) 'lexeme'`` or ``Err(payload) 'lexeme'``."""
    if result.is_error:
        return f"Err({result.error!r}) {result.lexeme!r}"
    token = result.token
    name = getattr(token, "name", repr(token))
    return f"Ok({name}) {result.lexeme!r}"


def _run_lex(automaton_name: str, stdin: TextIO, stdout: TextIO) -> int:
    automaton = get_automaton(automaton_name)
    for line in stdin:
        for result in lex(line.rstrip("\r\n"), automaton):
            stdout.write(format_result(result) + "\n")
    return 0


def _run_postfix(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    translator = PostfixTranslator(stdin.read(), source_file="<stdin>")
    try:
        translator.translate()
    except ParseError as e:
        _write_lines(translator.output, stdout)
        stderr.write(f"error: {e}\n")
        return 1
    _write_lines(translator.output, stdout)
    return 0


def _run_nfa2dot(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    try:
        dot = regex_to_dot(stdin.read())
    except ParseError as e:
        stderr.write(f"error: {e}\n")
        return 1
    stdout.write(dot)
    return 0


def _write_lines(lines: Sequence[str], stdout: TextIO) -> None:
    for line in lines:
        stdout.write(line + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dfalex", description="DFA-driven lexing tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--trace", action="store_true", help="Log every step directive")
    sub = parser.add_subparsers(dest="command", required=True)

    lex_cmd = sub.add_parser("lex", help="Tokenize each stdin line")
    lex_cmd.add_argument(
        "-a",
        "--automaton",
        choices=sorted(BUILTIN_AUTOMATA),
        default="relop",
        help="Automaton to lex with (default: relop)",
    )
    sub.add_parser("postfix", help="Translate calculator expressions to postfix")
    sub.add_parser("nfa2dot", help="Render a regex as an NFA in Graphviz DOT")
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return an exit status."""
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if args.verbose or args.trace:
        logging.basicConfig(level=logging.DEBUG, stream=stderr, format="%(name)s: %(message)s")

    config = get_lex_config()
    if args.trace:
        config = LexConfig(encoding=config.encoding, trace_steps=True)

    with lex_config_context(config):
        match args.command:
            case "lex":
                return _run_lex(args.automaton, stdin, stdout)
            case "postfix":
                return _run_postfix(stdin, stdout, stderr)
            case _:
                return _run_nfa2dot(stdin, stdout, stderr)


if __name__ == "__main__":
    sys.exit(main())
