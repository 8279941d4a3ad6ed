"""Interactive mode for the MiniLisp interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd

from minilisp.config import get_prompt
from minilisp.errors import MiniLispError, LexError
from minilisp.interpreter import Interpreter
from minilisp.reader.lexer import tokenize


def paren_balance(text: str) -> int:
    """Open '(' minus ')' in `text`; positive means the form is incomplete."""
    depth = 0
    for kind, _ in tokenize(text):
        if kind == "lparen":
            depth += 1
        elif kind == "rparen":
            depth -= 1
    return depth


class Shell(cmd.Cmd):
    """MiniLisp interpreter shell."""
    intro = "Welcome to MiniLisp!"
    secondary_prompt = "... "  # used while parentheses are still open

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.prompt = self._main_prompt = get_prompt()
        self._pending: list[str] = []

    def default(self, line):
        """Evaluates a line of MiniLisp, or buffers it until its parens balance."""
        self._pending.append(line)
        source = "\n".join(self._pending)
        if self._incomplete(source):
            self.prompt = self.secondary_prompt
            return

        self._run(source)

    def _run(self, source: str) -> None:
        self._pending = []
        self.prompt = self._main_prompt
        try:
            self.interpreter.eval(source)
        except MiniLispError as ex:
            # Keep the session and its bindings; only this input is abandoned
            self.interpreter.runtime.reset()
            print(f"{type(ex).__name__}: {ex}", file=self.stdout)

    @staticmethod
    def _incomplete(source: str) -> bool:
        try:
            return paren_balance(source) > 0
        except LexError:
            # evaluated as-is so the pipeline reports the error
            return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter, first evaluating any unfinished input."""
        print(file=self.stdout)
        if self._pending:
            self._run("\n".join(self._pending))
        return True

    def cmdloop(self, intro=None):
        """Runs the shell; Ctrl-C abandons the current input instead of exiting."""
        while True:
            try:
                super().cmdloop(intro)
                return
            except KeyboardInterrupt:
                self._pending = []
                self.prompt = self._main_prompt
                print("\nKeyboardInterrupt", file=self.stdout)
                intro = ""

    # cmd.Cmd treats a leading word as a command name; every line is code here
    def onecmd(self, line):
        if line == "EOF":
            return self.do_EOF("")
        if not line.strip():
            return self.emptyline()
        return self.default(line)
