#!/usr/bin/env python3
"""
Terminal Wordle — guess the secret five-letter word in six tries.
Features:
- Word list loaded from a text file (one word per line, default words.txt)
- Two-pass feedback that handles repeated letters: green (correct),
  yellow (present elsewhere), default (absent)
- Board geometry that adapts to the terminal size
- Curses full-screen board when the terminal size is known, plain colored
  lines otherwise (pipes, dumb terminals)
- Keys: type a word, backspace=delete, enter=submit, esc=quit

Usage: wordle.py [WORDLIST]
"""

import collections
import curses
import os
import random
import sys

# Word length
WORD_LENGTH = 5

# Maximum guesses allowed
MAX_GUESSES = 6

# Letters are codes 0-25 for 'a'-'z'
ALPHABET_SIZE = 26

# Longest line the curses input buffer accepts
MAX_INPUT = 16

# Default word list, next to this script
WORDS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                          "words.txt")

# Letter states
CORRECT = 'correct'
PRESENT = 'present'
ABSENT = 'absent'

# Game outcomes
IN_PROGRESS = 'in_progress'
WON = 'won'
LOST = 'lost'

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------
# Smallest footprint of the board's structural characters
MIN_WIDTH = 6
MIN_HEIGHT = 7

# Each step of horizontal / vertical padding costs this many columns / rows
WIDTH_GAP_STEP = 10
HEIGHT_GAP_STEP = 12

MAX_WIDTH_GAP = 3
MAX_HEIGHT_GAP = 1

Layout = collections.namedtuple(
    "Layout", ["width_gap", "height_gap", "left_margin", "top_margin"])

# A piece of text to put on screen; state is None for structural text
Draw = collections.namedtuple("Draw", ["y", "x", "text", "state"])

Guess = collections.namedtuple("Guess", ["word", "feedback"])

# ---------------------------------------------------------------------------
# ANSI escapes for the plain (no curses) board
# ---------------------------------------------------------------------------
GREEN_FG = '\033[32m'
YELLOW_FG = '\033[33m'
BOLD = '\033[1m'
RESET = '\033[0m'

STATE_ANSI = {
    CORRECT: BOLD + GREEN_FG,
    PRESENT: BOLD + YELLOW_FG,
    ABSENT: '',
}

# ---------------------------------------------------------------------------
# Color pair indices
# ---------------------------------------------------------------------------
COLOR_TITLE = 1
COLOR_CORRECT = 2
COLOR_PRESENT = 3
COLOR_BORDER = 4
COLOR_STATUS = 5
COLOR_WIN = 6
COLOR_LOSE = 7
COLOR_INPUT = 8


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class WordleError(Exception):
    """Base class for everything the game rejects."""


class InvalidLength(WordleError, ValueError):
    """A word was not exactly WORD_LENGTH letters long."""


class InvalidSymbol(WordleError, ValueError):
    """A letter was outside a-z."""


class UnknownWord(WordleError):
    """The guess is not in the word list."""


class NoAttemptsRemaining(WordleError):
    """The game is already over."""


class InvalidWordList(WordleError):
    """The word list file is malformed or empty."""


# ---------------------------------------------------------------------------
# Pure game logic (no curses dependency)
# ---------------------------------------------------------------------------
def letter_code(ch):
    """Return the code 0-25 for a letter 'a'-'z'."""
    if len(ch) != 1 or not 'a' <= ch <= 'z':
        raise InvalidSymbol(f"invalid letter: {ch!r}")
    return ord(ch) - ord('a')


def letter_char(code):
    """Return the letter 'a'-'z' for a code 0-25."""
    if (isinstance(code, bool) or not isinstance(code, int)
            or not 0 <= code < ALPHABET_SIZE):
        raise InvalidSymbol(f"invalid letter code: {code!r}")
    return chr(ord('a') + code)


class Word:
    """An immutable sequence of exactly WORD_LENGTH letter codes."""

    __slots__ = ("_codes",)

    def __init__(self, codes):
        codes = tuple(codes)
        if len(codes) != WORD_LENGTH:
            raise InvalidLength(
                f"expected {WORD_LENGTH} letters, got {len(codes)}")
        for code in codes:
            letter_char(code)
        self._codes = codes

    @property
    def codes(self):
        return self._codes

    @classmethod
    def from_string(cls, text):
        """Build a Word from lowercase text. Length is checked first."""
        if len(text) != WORD_LENGTH:
            raise InvalidLength(
                f"expected {WORD_LENGTH} letters, got {len(text)}")
        return cls(letter_code(ch) for ch in text)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.codes == other.codes

    def __hash__(self):
        return hash(self.codes)

    def __len__(self):
        return WORD_LENGTH

    def __iter__(self):
        return iter(self.codes)

    def __getitem__(self, index):
        return self.codes[index]

    def __str__(self):
        return "".join(letter_char(code) for code in self.codes)

    def __repr__(self):
        return f"Word({str(self)!r})"


def compute_feedback(guess, answer):
    """Evaluate a guess against the answer.

    Returns a list of 5 states: 'correct', 'present', or 'absent'.
    Answer letters already matched exactly are not available for 'present',
    and each remaining answer letter can only be used once, leftmost first.
    """
    result = [ABSENT] * WORD_LENGTH
    pool = []

    # First pass: exact matches; everything else goes into the pool
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            result[i] = CORRECT
        else:
            pool.append(answer[i])

    # Second pass: consume pool entries for misplaced letters
    for i in range(WORD_LENGTH):
        if result[i] == CORRECT:
            continue
        if guess[i] in pool:
            result[i] = PRESENT
            pool.remove(guess[i])

    return result


def is_win(feedback):
    """Return True if all letters are correct."""
    return all(state == CORRECT for state in feedback)


def pick_word(word_list, rng=random):
    """Choose a random word from the word list."""
    return rng.choice(word_list)


class WordleGame:
    """One round: a hidden answer, up to MAX_GUESSES guesses, an outcome.

    The word list is both the dictionary of accepted guesses and the pool
    the answer is drawn from. It must not be empty.
    """

    def __init__(self, word_list, answer=None, rng=random):
        if not word_list:
            raise ValueError("word list must not be empty")
        self.word_list = tuple(word_list)
        self._known = frozenset(self.word_list)
        if answer is None:
            answer = pick_word(self.word_list, rng)
        elif answer not in self._known:
            raise ValueError(f"answer {answer} is not in the word list")
        self.answer = answer
        self.guesses = []
        self.outcome = IN_PROGRESS

    @property
    def attempts_left(self):
        return MAX_GUESSES - len(self.guesses)

    def can_guess(self):
        return len(self.guesses) < MAX_GUESSES and self.outcome == IN_PROGRESS

    def guess(self, word):
        """Record a guess and return its feedback.

        Raises NoAttemptsRemaining once the game is over and UnknownWord for
        words outside the list; neither consumes a turn.
        """
        if not self.can_guess():
            raise NoAttemptsRemaining("no attempts remaining")
        if word not in self._known:
            raise UnknownWord(f"not in word list: {word}")

        feedback = compute_feedback(word, self.answer)
        self.guesses.append(Guess(word, feedback))

        if is_win(feedback):
            self.outcome = WON
        elif len(self.guesses) >= MAX_GUESSES:
            self.outcome = LOST
        return feedback


def load_word_list(path):
    """Read one word per line. Any malformed line aborts the load."""
    words = []
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, 1):
            try:
                text = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError as e:
                raise InvalidWordList(
                    f"{path}:{lineno}: not valid UTF-8 ({e.reason})") from e
            try:
                words.append(Word.from_string(text))
            except (InvalidLength, InvalidSymbol) as e:
                raise InvalidWordList(
                    f"{path}:{lineno}: bad word {text!r} ({e})") from e
    if not words:
        raise InvalidWordList(f"{path}: word list is empty")
    return words


# ---------------------------------------------------------------------------
# Layout and board rendering (no curses dependency)
# ---------------------------------------------------------------------------
def compute_layout(display_width, display_height):
    """Map a display size to cell padding and margins that center the board.

    Padding is clamped to 0-3 columns and 0-1 rows per cell side; margins
    round down, so odd leftovers favor the top-left.
    """
    width = max(display_width, MIN_WIDTH)
    height = max(display_height, MIN_HEIGHT)

    width_gap = min((width - MIN_WIDTH) // WIDTH_GAP_STEP, MAX_WIDTH_GAP)
    height_gap = min((height - MIN_HEIGHT) // HEIGHT_GAP_STEP, MAX_HEIGHT_GAP)

    left_margin = (width - (width_gap * WIDTH_GAP_STEP + MIN_WIDTH)) // 2
    top_margin = (height - (height_gap * HEIGHT_GAP_STEP + MIN_HEIGHT)) // 2
    return Layout(width_gap, height_gap, left_margin, top_margin)


def render_grid(game, layout):
    """Return the Draw instructions for the 6x5 board."""
    gap = layout.width_gap
    cell_w = 2 * gap + 1
    rule = "-" * ((cell_w + 1) * WORD_LENGTH + 1)
    padding = ("|" + " " * cell_w) * WORD_LENGTH + "|"

    x = layout.left_margin + 1
    y = layout.top_margin + 1
    draws = [Draw(y, x, rule, None)]
    y += 1

    for row in range(MAX_GUESSES):
        for _ in range(layout.height_gap):
            draws.append(Draw(y, x, padding, None))
            y += 1

        guess = game.guesses[row] if row < len(game.guesses) else None
        cx = x
        for col in range(WORD_LENGTH):
            draws.append(Draw(y, cx, "|", None))
            if guess is None:
                draws.append(Draw(y, cx + 1, " " * cell_w, None))
            else:
                letter = letter_char(guess.word[col]).upper()
                draws.append(Draw(y, cx + 1 + gap, letter,
                                  guess.feedback[col]))
            cx += cell_w + 1
        draws.append(Draw(y, cx, "|", None))
        y += 1

        for _ in range(layout.height_gap):
            draws.append(Draw(y, x, padding, None))
            y += 1

        draws.append(Draw(y, x, rule, None))
        y += 1

    return draws


def render_plain(game):
    """One line per submitted guess, each a list of (letter, state)."""
    lines = []
    for guess in game.guesses:
        lines.append([(letter_char(code).upper(), state)
                      for code, state in zip(guess.word, guess.feedback)])
    return lines


def render_board(game, layout):
    """Grid instructions for a known layout, plain lines when it is None."""
    if layout is None:
        return render_plain(game)
    return render_grid(game, layout)


def format_plain_line(letters):
    """Paint one plain board line with ANSI colors."""
    parts = []
    for letter, state in letters:
        code = STATE_ANSI[state]
        parts.append(f"{code}{letter}{RESET}" if code else letter)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Player input
# ---------------------------------------------------------------------------
def parse_guess(line):
    """Turn one line of player input into a Word.

    Only A-Z is folded to lowercase; anything else outside a-z stays as typed
    and is rejected as a bad symbol.
    """
    text = line.rstrip("\r\n")
    return Word.from_string(
        "".join(ch.lower() if 'A' <= ch <= 'Z' else ch for ch in text))


def play_turn(game, line):
    """Submit one line of input. Returns (accepted, message).

    Rejected input leaves the game untouched.
    """
    try:
        game.guess(parse_guess(line))
    except InvalidLength:
        return False, f"Guesses must be {WORD_LENGTH} letters!"
    except InvalidSymbol:
        return False, "Letters a-z only!"
    except UnknownWord:
        return False, "Not in word list!"
    except NoAttemptsRemaining:
        return False, "You ran out of guesses!"

    if game.outcome == WON:
        return True, f"Brilliant! You got it in {len(game.guesses)}!"
    if game.outcome == LOST:
        return True, f"The word was \"{str(game.answer).upper()}\"."
    remaining = game.attempts_left
    return True, f"{remaining} guess{'es' if remaining != 1 else ''} remaining."


def summary(game):
    """Final line printed when the game ends."""
    answer = str(game.answer).upper()
    if game.outcome == WON:
        return f"You won! Solved in {len(game.guesses)}/{MAX_GUESSES}."
    if game.outcome == LOST:
        return f"You ran out of guesses! The word was {answer}."
    return f"Game ended. The word was {answer}."


def display_size():
    """Return (width, height) of the terminal, or None if there is none."""
    try:
        size = os.get_terminal_size()
    except OSError:
        return None
    return size.columns, size.lines


# ---------------------------------------------------------------------------
# Plain driver
# ---------------------------------------------------------------------------
def play_plain(game, stream=None, out=None):
    """Line-by-line game for when no terminal size is available."""
    if stream is None:
        stream = sys.stdin
        # Undecodable bytes become U+FFFD and get reported as bad letters
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="replace")
    if out is None:
        out = sys.stdout

    print(f"Guess the {WORD_LENGTH}-letter word in {MAX_GUESSES} tries.",
          file=out)
    while game.can_guess():
        line = stream.readline()
        if not line:
            break
        accepted, message = play_turn(game, line)
        if accepted:
            for letters in render_board(game, None):
                print(format_plain_line(letters), file=out)
        print(message, file=out)


# ---------------------------------------------------------------------------
# Curses driver
# ---------------------------------------------------------------------------
def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_CORRECT, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PRESENT, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_BORDER, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_LOSE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_INPUT, curses.COLOR_CYAN, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def get_state_attr(state):
    """Return the curses attribute for a letter state."""
    if state == CORRECT:
        return curses.color_pair(COLOR_CORRECT) | curses.A_BOLD
    elif state == PRESENT:
        return curses.color_pair(COLOR_PRESENT) | curses.A_BOLD
    elif state == ABSENT:
        return curses.A_NORMAL
    return curses.color_pair(COLOR_BORDER)


def draw_title(win, width):
    """Draw the title bar."""
    title = " ★ WORDLE ★ "
    tx = max(0, (width - len(title)) // 2)
    safe_addstr(win, 0, tx, title,
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)


def draw_board(win, draws):
    """Paint Draw instructions produced by render_grid."""
    for draw in draws:
        safe_addstr(win, draw.y, draw.x, draw.text, get_state_attr(draw.state))


def draw_status_bar(win, height, width, current_input, message, msg_attr=0):
    """Draw the message, the input prompt, and the key help."""
    if message:
        mx = max(0, (width - len(message)) // 2)
        safe_addstr(win, height - 3, mx, message, msg_attr)
    safe_addstr(win, height - 2, 1, "> " + current_input.upper(),
                curses.color_pair(COLOR_INPUT) | curses.A_BOLD)
    info = " Enter=Submit  Bksp=Delete  Esc=Quit "
    safe_addstr(win, height - 1, 0, info,
                curses.color_pair(COLOR_STATUS) | curses.A_BOLD)


def main(stdscr, game):
    """Main curses game loop."""
    stdscr.clear()
    init_colors()
    curses.curs_set(0)

    current_input = ""
    message = f"Guess a {WORD_LENGTH}-letter word!"
    msg_attr = curses.color_pair(COLOR_STATUS) | curses.A_BOLD

    def redraw():
        """Redraw the entire screen at the current terminal size."""
        stdscr.erase()
        height, width = stdscr.getmaxyx()
        draw_title(stdscr, width)
        draw_board(stdscr, render_grid(game, compute_layout(width, height)))
        draw_status_bar(stdscr, height, width, current_input,
                        message, msg_attr)
        stdscr.refresh()

    while True:
        redraw()
        ch = stdscr.getch()

        if not game.can_guess():
            break

        # Esc
        if ch == 27:
            break

        # Backspace
        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if current_input:
                current_input = current_input[:-1]
                message = ""
            continue

        # Enter — submit guess
        if ch in (curses.KEY_ENTER, 10, 13):
            accepted, message = play_turn(game, current_input)
            if not accepted:
                msg_attr = curses.color_pair(COLOR_LOSE) | curses.A_BOLD
                continue

            if game.outcome == WON:
                message += " Press any key to exit."
                msg_attr = curses.color_pair(COLOR_WIN) | curses.A_BOLD
            elif game.outcome == LOST:
                message += " Press any key to exit."
                msg_attr = curses.color_pair(COLOR_LOSE) | curses.A_BOLD
            else:
                msg_attr = curses.color_pair(COLOR_STATUS) | curses.A_BOLD
            current_input = ""
            continue

        # Printable characters; the alphabet is checked on submit
        if 32 <= ch <= 126:
            if len(current_input) < MAX_INPUT:
                current_input += chr(ch)
                message = ""


def run(argv=None):
    """Load the word list, play one game, print the summary."""
    if argv is None:
        argv = sys.argv[1:]
    path = argv[0] if argv else WORDS_FILE

    try:
        words = load_word_list(path)
    except (OSError, InvalidWordList) as e:
        print(f"wordle: {e}", file=sys.stderr)
        return 1

    game = WordleGame(words)
    try:
        if display_size() is not None and sys.stdin.isatty():
            curses.wrapper(main, game)
        else:
            play_plain(game)
    except KeyboardInterrupt:
        print()

    print(summary(game))
    return 0


if __name__ == "__main__":
    sys.exit(run())
