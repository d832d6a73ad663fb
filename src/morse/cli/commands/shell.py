"""
Interactive menu over a local translator session.
"""

from typing import Callable

from rich.console import Console
from rich.markup import escape

from morse.config import APP_NAME, APP_VERSION
from morse.core.errors import MorseError
from morse.core.translator import Translator
from morse.cli.commands.history import format_record


SAMPLE_LIMIT = 20

MENU = """
Menu:
1) Encode text → Morse
2) Decode Morse → text
3) Show mappings sample
4) Add / Update mapping
5) Remove mapping
6) Show history
7) Clear history
0) Exit"""


def add_subparser(subparsers):
    parser = subparsers.add_parser("shell", help="Interactive translator (no server needed)")
    parser.add_argument("--limit", type=int, default=SAMPLE_LIMIT, help="Mappings shown in the sample")
    parser.set_defaults(func=run_shell)


def run_shell(args):
    Shell(Translator(), sample_limit=args.limit).run()


class Shell:
    """Menu loop. Reads lines through `read` so tests can script it."""

    def __init__(
        self,
        translator: Translator,
        console: Console | None = None,
        read: Callable[[str], str] | None = None,
        sample_limit: int = SAMPLE_LIMIT,
    ):
        self.translator = translator
        self.console = console or Console()
        self.read = read or self.console.input
        self.sample_limit = sample_limit
        self.actions = {
            "1": self.encode,
            "2": self.decode,
            "3": self.show_mappings,
            "4": self.put_mapping,
            "5": self.remove_mapping,
            "6": self.show_history,
            "7": self.clear_history,
        }

    def say(self, text: str = ""):
        self.console.print(text, markup=False, emoji=False, highlight=False)

    def run(self):
        self.say("=" * 36)
        self.console.print(f"   [bold]{APP_NAME}[/bold]")
        self.say("=" * 36)
        self.say(f"Version: {APP_VERSION}")

        while True:
            self.say(MENU)
            try:
                choice = self.read("Choose an option: ").strip()
            except (EOFError, KeyboardInterrupt):
                choice = "0"

            if choice == "0":
                self.say("Goodbye!")
                return

            action = self.actions.get(choice)
            if action is None:
                self.say("Invalid option.")
                continue

            try:
                action()
            except EOFError:
                self.say("Goodbye!")
                return

    def _read_char(self, prompt: str) -> str | None:
        text = self.read(prompt)
        if len(text) != 1:
            self.say("Provide exactly one character.")
            return None
        return text

    # === Actions ===

    def encode(self):
        text = self.read("Enter text: ")
        self.say(f"Morse: {self.translator.encode(text)}")

    def decode(self):
        self.say("Enter Morse (tokens with spaces, '/' between words):")
        code = self.read("Morse: ")
        self.say(f"Text: {self.translator.decode(code)}")

    def show_mappings(self):
        entries = self.translator.list_mappings()
        self.say("Mappings (sample):")
        for char, sequence in entries[:self.sample_limit]:
            self.say(f"  '{char}' -> {sequence}")
        self.say(f"Total mappings: {len(entries)}")

    def put_mapping(self):
        char = self._read_char("Enter character: ")
        if char is None:
            return
        sequence = self.read("Enter Morse sequence: ").strip()
        try:
            self.translator.put_mapping(char, sequence)
        except MorseError as e:
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            return
        self.say("Mapping updated.")

    def remove_mapping(self):
        char = self._read_char("Remove mapping for char: ")
        if char is None:
            return
        if self.translator.remove_mapping(char):
            self.say("Removed.")
        else:
            self.say("Mapping not found or protected.")

    def show_history(self):
        records = self.translator.list_history()
        if not records:
            self.say("History empty.")
            return
        self.say("History:")
        for i, t in enumerate(records, 1):
            self.say(format_record(i, t.timestamp, t.mode.value, t.input, t.output))

    def clear_history(self):
        self.translator.clear_history()
        self.say("History cleared.")
