#!/usr/bin/env python3
"""
Guess the Number - a small terminal guessing game

The program picks a secret number between 1 and 100 and keeps asking for a
guess until you find it, telling you each time whether the guess was too
small or too big.

Requirements:
    pip install colorama

How to Use the Script

Play a game:
python guessing_game.py

Play without the secret being printed at the start:
python guessing_game.py --hide-secret

Write debug logs to a file while playing:
python guessing_game.py -v --log-file game.log
"""

import re
import sys
import enum
import random
import logging
import argparse
from colorama import just_fix_windows_console, Fore, Style

logger = logging.getLogger(__name__)

# Secret is drawn from [SECRET_MIN, SECRET_MAX)
SECRET_MIN = 1
SECRET_MAX = 101

# Largest value a guess may take (unsigned 32-bit)
GUESS_LIMIT = 4294967295

GUESS_PATTERN = re.compile(r"\+?[0-9]+")


class ParseError(ValueError):
    """Raised when a line of input is not a valid guess."""


class InputError(OSError):
    """Raised when the input stream cannot produce a line."""


class Outcome(enum.Enum):
    LESS = "Too small!"
    GREATER = "Too big!"
    EQUAL = "You win!"


OUTCOME_COLORS = {
    Outcome.LESS: Fore.BLUE,
    Outcome.GREATER: Fore.YELLOW,
    Outcome.EQUAL: Fore.GREEN,
}


def draw_secret():
    """Pick the secret number for a new game."""
    secret = random.randrange(SECRET_MIN, SECRET_MAX)
    logger.debug(f"Secret number drawn: {secret}")
    return secret


initialize = draw_secret


def prompt_and_read(stdin=None, stdout=None):
    """
    Ask for a guess and read one line of input.

    Args:
        stdin: Stream to read from. Defaults to sys.stdin
        stdout: Stream the prompt is written to. Defaults to sys.stdout

    Returns:
        str: The raw line, including its trailing newline if there was one

    Raises:
        InputError: If the stream is exhausted or fails to read
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print("Please input your guess.", file=stdout, flush=True)

    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read line: {e}") from e

    # readline() gives back an empty string only at end of stream
    if not line:
        raise InputError("Failed to read line: end of input")

    logger.debug(f"Read line: {line!r}")
    return line


def parse_guess(raw_text):
    """
    Turn a raw input line into a guess.

    Surrounding whitespace (the newline included) is ignored. The rest must be
    a plain non-negative integer, optionally prefixed with '+', no larger than
    GUESS_LIMIT.

    Args:
        raw_text (str): The line as it was read

    Returns:
        int: The guessed number

    Raises:
        ParseError: If the text is not a valid guess
    """
    text = raw_text.strip()

    if not GUESS_PATTERN.fullmatch(text):
        raise ParseError(f"Not a valid number: {text!r}")

    # Leading zeros never overflow; anything longer than the limit does
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(GUESS_LIMIT)):
        raise ParseError(f"Number out of range: {len(digits)} digits")

    guess = int(digits)
    if guess > GUESS_LIMIT:
        raise ParseError(f"Number out of range: {text}")

    return guess


def compare(guess, secret):
    if guess < secret:
        return Outcome.LESS
    if guess > secret:
        return Outcome.GREATER
    return Outcome.EQUAL


def report(outcome, stdout=None, color=False):
    """Print the status line for a compared guess."""
    stdout = stdout or sys.stdout
    if color:
        print(f"{OUTCOME_COLORS[outcome]}{outcome.value}{Style.RESET_ALL}", file=stdout, flush=True)
    else:
        print(outcome.value, file=stdout, flush=True)


def play(secret, stdin=None, stdout=None, show_secret=True, color=False):
    """
    Run one game until the secret number is guessed.

    Lines that are not valid guesses are skipped silently and the player is
    asked again. An InputError from reading is not handled here.

    Args:
        secret (int): The number to guess
        stdin: Stream guesses are read from. Defaults to sys.stdin
        stdout: Stream the game is printed to. Defaults to sys.stdout
        show_secret (bool): Print the secret number before the first prompt
        color (bool): Colour the status lines
    """
    stdout = stdout or sys.stdout

    print("Guess the number!", file=stdout)

    if show_secret:
        print(f"The secret number is: {secret}", file=stdout)

    while True:
        line = prompt_and_read(stdin, stdout)

        try:
            guess = parse_guess(line)
        except ParseError as e:
            logger.debug(f"Ignoring input: {e}")
            continue

        print(f"You guessed: {guess}", file=stdout)

        outcome = compare(guess, secret)
        logger.debug(f"Guess {guess} against {secret}: {outcome.name}")
        report(outcome, stdout, color)

        if outcome is Outcome.EQUAL:
            logger.info(f"Secret number {secret} guessed")
            break


def setup_logging(verbose=False, log_file=None):
    """Send log records to stderr, and to log_file if one is given."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True
    )


def main(argv=None):
    """Main function for command line usage"""
    parser = argparse.ArgumentParser(description='Guess the secret number between 1 and 100')
    parser.add_argument('--hide-secret', action='store_true', help='Do not print the secret number at the start')
    parser.add_argument('--color', action=argparse.BooleanOptionalAction, default=None,
                        help='Colour the status lines (default: only when printing to a terminal)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug information to stderr')
    parser.add_argument('--log-file', help='Also write log records to this file')

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    color = args.color
    if color is None:
        color = sys.stdout.isatty()
    if color:
        # Let colorama enable ANSI colours on Windows consoles
        just_fix_windows_console()

    try:
        play(draw_secret(), show_secret=not args.hide_secret, color=color)
    except InputError as e:
        logger.debug(f"Fatal input error: {e!r}")
        if color:
            print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        if color:
            print(f"\n{Fore.YELLOW}Game interrupted by user.{Style.RESET_ALL}", file=sys.stderr)
        else:
            print("\nGame interrupted by user.", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
