"""Demo handler: echoes submissions back with light token coloring."""

import re

from .handler import ReplHandler

_TOKEN_RE = re.compile(r"\s+|\d+(?:\.\d+)?|[A-Za-z_]\w*|\S")
_OPENERS = {'(': ')', '[': ']', '{': '}'}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


def brackets_balanced(text: str) -> bool:
    """True unless ``text`` has an opening bracket still waiting to close.

    A closing bracket with no matching opener counts as balanced so that
    the submission completes and the mistake is echoed back.
    """
    depth = 0
    for ch in text:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and depth > 0:
            depth -= 1
    return depth == 0


class EchoHandler(ReplHandler):
    """Evaluates nothing; prints each submission back."""

    def __init__(self):
        super().__init__()
        self.register_command("help", self.show_help, "Shows this help")
        self.register_command("cls", self.clear_screen, "Clears the screen.")
        self.register_command("clear", self.clear_history, "Clears all submissions.")
        self.register_command("history", self.show_history, "Lists previous submissions.")

    def is_complete_submission(self, text: str) -> bool:
        if text.startswith(self.command_prefix):
            return True
        return brackets_balanced(text)

    def paint_line(self, terminal, text: str) -> None:
        for token in _TOKEN_RE.findall(text):
            if token[0].isdigit():
                terminal.write(token, color='cyan')
            elif token[0].isalpha() or token[0] == '_':
                terminal.write(token, color='yellow')
            elif token.isspace():
                terminal.write(token)
            else:
                terminal.write(token, color='bright_black')

    def evaluate_submission(self, text: str) -> None:
        term = self.repl.terminal.term
        for line in text.splitlines():
            print(term.magenta(line))

    def show_help(self):
        for line in self.format_help():
            print(line)

    def clear_screen(self):
        self.repl.terminal.clear_screen()

    def clear_history(self):
        self.repl.history.clear()
        print("History cleared.")

    def show_history(self):
        history = self.repl.history
        if not len(history):
            print("No submissions yet.")
            return
        for number, entry in enumerate(history.entries, start=1):
            lines = entry.splitlines() or [""]
            print(f"{number:4}  {lines[0]}")
            for line in lines[1:]:
                print(f"      {line}")
