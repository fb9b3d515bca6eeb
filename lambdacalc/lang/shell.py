"""Handles interactive/command-line mode and script files for the lambdacalc interpreter. Uses cmd as backend."""

import cmd
import re

from lambdacalc.lang.error import ErrorHandler, ParseError
from lambdacalc.lang.numerical import number, numeral
from lambdacalc.typed.context import TypedExecutionContext
from lambdacalc.typed.lexical import read_type


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType 'help' for more information."
    prompt = "λ> "
    COMMENT = ";;"
    ALIAS = re.compile(r"\s*([a-zA-Z][_0-9a-zA-Z']*)\s*(?::(.*))?$")  # left side of ':='

    def __init__(self, context, error_handler=None, verbose=False, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.context = context
        self.error_handler = error_handler or ErrorHandler(fatal=False)
        self.verbose = verbose
        self.line_num = 0

    def precmd(self, line):
        """Drops comments and accepts '\\' for 'λ'."""
        self.line_num += 1
        return line.split(Shell.COMMENT, 1)[0].replace("\\", "λ").rstrip()

    def parseline(self, line):
        if ":=" in line:
            return None, None, line  # definitions never name a command, even 'ctx := ...'
        return super().parseline(line)

    def run_file(self, path):
        """Runs every line of file path as if typed into the shell."""
        self.error_handler.register_file(path)
        with open(path, encoding="utf-8") as file:
            for line in file:
                if self.onecmd(self.precmd(line.rstrip("\n"))):
                    break

    def default(self, line):
        """Defines an alias (name := term, or name : Type := term) or evaluates a term."""
        with self.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            if ":=" in line:
                head, source = line.split(":=", 1)
                self.define(head, source.strip())
            else:
                self.error_handler.register_line(line, self.line_num)
                self.show(line)
            self.error_handler.remove_line()

    def define(self, head, source):
        self.error_handler.register_line(head, self.line_num)
        match = Shell.ALIAS.match(head)
        if not match:
            raise ParseError("alias name expected")

        name, type_expression = match.groups()
        if type_expression is None:
            self.error_handler.register_line(source, self.line_num)
            self.context.add_alias(name, source)
            return

        if not isinstance(self.context, TypedExecutionContext):
            raise ParseError("type declarations need the typed calculus (--typed)", match.start(2) - 1)

        self.error_handler.register_line(type_expression, self.line_num)
        declared = read_type(type_expression)
        self.error_handler.register_line(source, self.line_num)
        self.context.add_alias_with_type(name, declared, source)

    def show(self, source):
        if self.verbose:
            for label, text in self.context.verbose_evaluate(source):
                print(f"{label}  {text}")
        else:
            print(self.render(self.context.evaluate(source)))

    def render(self, result):
        """Returns result, followed by the number it stands for if it is a numeral. The Church numeral zero is left
        alone: it is also false.
        """
        expanded = self.context.forward_alias(result)
        num = numeral(expanded)
        if num is None or number(expanded) == 0:
            return str(result)
        return f"{result} (= {num})"

    def do_del(self, arg):
        """Removes aliases: del name [name ...]"""
        with self.error_handler:
            self.error_handler.register_line(arg, self.line_num)
            if not arg.split():
                raise ParseError("alias name expected")

            for name in arg.split():
                if not self.context.remove_alias(name):
                    self.error_handler.warn(f"no alias named '{name}'")
            self.error_handler.remove_line()

    def do_ctx(self, arg):
        """Lists every alias."""
        for name, text in self.context.aliases_as_strings:
            print(f"{name} := {text}")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lambdacalc interpreter!\n\n"
              "Lambda calculus is a Turing-complete language created by Alonzo Church. This \n"
              "interpreter supports pure lambda calculus (and, with --typed, the simply-typed \n"
              "calculus with Bool and Nat) as well as aliases.\n\n"
              "Try it out by typing 'id := λx.x'. This will bind the lambda term 'λx.x' to a \n"
              "name 'id'. Next, try typing 'id y'. This will apply 'id' to 'y', giving 'y' as \n"
              "the result. '\\' can be typed instead of 'λ'.\n\n"
              "Commands: 'ctx' lists aliases, 'del name' removes one, 'exit' quits.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
