"""
Argtree command layer: build command trees, dispatch tokens, render help.

What this module provides
- Command: one node of a command tree, owning
  • options (Option) and positional arguments (Argument),
  • child commands (git-style subcommands),
  • an execution callback and an optional validation-error handler,
  • a designated help option and version option.
- invoke(command, prompt): run a command from sys.argv, a shell-like string
  or a list of tokens.

Dispatch in a nutshell (Command.execute)
- "@file" tokens are expanded first when response_files is enabled.
- Tokens are scanned once, left to right:
  • "--name", "--name=value", "--name:value" match long names,
  • "-x", "-x=value", "-x:value" match short names, then symbol names,
  • a token right after a value-taking option is its value,
  • a child's name (case-insensitive) descends into that child, as long as
    no positional value was bound yet,
  • anything else binds to the next positional argument.
- A help or version option stops everything: the text is printed and 0 is
  returned. Unexpected tokens raise, or are collected into
  remaining_arguments when the active command does not throw.
- Validators run last, then the final command's callback gives the result.

Quick start
    from argtree import Command, OptionType, invoke

    app = Command("git", descr="the stupid content tracker")
    app.help_option("-?|-h|--help", inherited=True)
    app.version_option("--version", "2.45.0")
    verbose = app.option("-v|--verbose", "Be chatty", OptionType.NO_VALUE, inherited=True)

    def configure(commit):
        message = commit.option("-m|--message <MSG>", "Commit message").is_required()
        paths = commit.argument("paths", "Files to commit", variadic=True)

        @commit.on_execute
        def run():
            print(message.value, paths.values, verbose.has_value())
            return 0

    app.command("commit", configure, descr="Record changes")

    if __name__ == "__main__":
        raise SystemExit(invoke(app))

See also
- argtree.arguments for templates and value arities.
- argtree.faults for the error hierarchy and rendering.
- argtree.responses for the response-file grammar.
"""
import asyncio
import functools
import inspect
import itertools
import logging
import operator
import os
import os.path
import re
import shlex
import sys
from collections import defaultdict
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from . import responses
from .arguments import Option, OptionType, Argument
from .faults import *
from .utils import *

logger = logging.getLogger(__name__)


class CommandType(type):
    """
    Metaclass for Command.

    Responsibilities
    - __typename__ derived from the class name ("Command" → "command").
    - Read-only properties for every name in __introspectable__ (mirror()).
    - Compact __repr__/__rich_repr__ over __displayable__ (children only, never
      the parent).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - command(name='build', descr='Build the project', ...)
            """
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__())),
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _producer(cls, object, name, /):
    """
    Normalize a version source: strings become constant producers.
    """
    if isinstance(object, str):
        return rename(lambda: object, name)
    if not callable(object):
        raise TypeError(f"{cls.__typename__} {name} version must be a string or a callable")
    return object


def _cursor(arguments, /):
    """
    Yield the argument every successive positional token binds to.

    A variadic argument is yielded forever, so it absorbs the rest of the
    positional tokens of its command.
    """
    for argument in arguments:
        yield argument
        while argument.variadic:
            yield argument


def _flag(option, /):
    """
    Spell an option the way a user would type it (prefers the long name).
    """
    if option.long_name:
        return "--" + option.long_name
    return "-" + (option.short_name or option.symbol_name)


async def _resolve(awaitable, /):
    return await awaitable


class Command(metaclass=CommandType):
    """
    A command (or subcommand) of a command-line tool.

    Responsibilities
    - Declaration: option(), argument(), command(), help_option(),
      version_option(), on_execute(), on_validation_error().
    - Dispatch: execute(*tokens) scans the tokens against this node and its
      descendants and returns the callback's result.
    - Rendering: get_help_text() is a pure function of the tree; show_help(),
      show_version() and show_hint() print to the command's rich consoles.

    Lifecycle
    - Declarations happen before any dispatch. Collected values persist
      after a dispatch; call reset() before reusing the same tree.
    - Exactly one dispatch may run on a tree at a time.

    Runtime flags (inherited from the parent when Unset)
    - shell: render faults on stderr and exit(1) instead of raising.
    - fancy: draw faults inside a rich panel.
    - colorful: style help and faults (palette overridable via __main__.__styles__).
    """

    __introspectable__ = (
        "name",
        "full_name",
        "descr",
        "epilog",
        "parent",
        "children",
        "options",
        "arguments",
        "remaining_arguments",
        "throw_on_unexpected",
        "allow_argument_separator",
        "response_files",
        "hidden",
        "working_directory",
        "showing_information",
        "out",
        "err",
        "shell",
        "fancy",
        "colorful",
    )

    __displayable__ = (
        "name",
        "full_name",
        "descr",
        "children",
        "options",
        "arguments",
        "remaining_arguments",
        "hidden",
    )

    @property
    def root(self):
        """
        Return the topmost command of the tree.
        """
        child, parent = self, self.parent
        while parent:
            child, parent = parent, parent.parent
        return child

    @property
    def path(self):
        """
        Return the ancestry from the root down to this command as a tuple.
        """
        path = [command := self]
        while command.parent:
            path.append(command := command.parent)
        return tuple(reversed(path))

    @property
    def helper(self):
        """
        The help option in effect for this command (own, else inherited), or None.
        """
        return self._designated("_help_option")

    @property
    def versioner(self):
        """
        The version option in effect for this command (own, else inherited), or None.
        """
        return self._designated("_version_option")

    def __init__(
            self,
            name=Unset,
            /,
            full_name=Unset,
            descr=Unset,
            epilog=Unset,
            *,
            parent=Unset,
            throw_on_unexpected=True,
            allow_argument_separator=False,
            response_files=False,
            hidden=False,
            working_directory=Unset,
            out=Unset,
            err=Unset,
            shell=Unset,
            fancy=Unset,
            colorful=Unset
    ):
        """
        Parameters
        - name: Unset | str
          Command name, matched case-insensitively when used as a subcommand.
          Defaults to the basename of sys.argv[0]; must not contain whitespace.
        - full_name: Unset | str
          Display name used by version output and the help banner; defaults to name.
        - descr: Unset | str | Text
          One-line description shown in the parent's command table.
        - epilog: Unset | str | Text
          Extended help text appended verbatim after the generated help.
        - parent: Unset | Command
          Prefer parent.command(...), which fills this in.
        - throw_on_unexpected: bool
          When False, an unexpected token and everything after it are collected
          into remaining_arguments instead of raising.
        - allow_argument_separator: bool
          Recognize "--" (in non-throwing mode it ends option parsing; it also
          stops response-file expansion).
        - response_files: bool
          Expand "@file" tokens before dispatch.
        - hidden: bool
          Leave this command out of its parent's help.
        - working_directory: Unset | str
          Base directory for relative response-file paths (parent's, else cwd).
        - out, err: Unset | rich.console.Console
          Output and error consoles (parent's, else stdout/stderr consoles).
        - shell, fancy, colorful: Unset | bool
          Runtime flags, inherited from the parent when Unset.

        Raises
        - TypeError/ValueError on invalid parameters.
        - DuplicatedCommandError when the parent already has a child with the
          same (case-insensitive) name.
        """
        cls = type(self)
        if not isinstance(parent, Command | Unset):
            raise TypeError(f"{cls.__typename__} 'parent' must be a command")

        if name is Unset:
            name = os.path.basename(sys.argv[0])
        elif not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        elif not name.strip():
            raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
        elif re.search(r"\s", name):
            raise ValueError(f"{cls.__typename__} 'name' cannot contain whitespace")

        if not isinstance(full_name, str | Unset):
            raise TypeError(f"{cls.__typename__} 'full_name' must be a string")
        for field, object in (("descr", descr), ("epilog", epilog)):
            if not isinstance(object, str | Text | Unset | None):
                raise TypeError(f"{cls.__typename__} '{field}' must be a string")
        if not isinstance(working_directory, str | os.PathLike | Unset):
            raise TypeError(f"{cls.__typename__} 'working_directory' must be a path")
        for field, object in (("out", out), ("err", err)):
            if not isinstance(object, Console | Unset):
                raise TypeError(f"{cls.__typename__} '{field}' must be a rich console")

        self._name = name
        self._full_name = coalesce(full_name, name)
        self._descr = coalesce(descr)
        self._epilog = coalesce(epilog)
        self._parent = coalesce(parent)
        self._children = []
        self._options = []
        self._arguments = []
        self._remaining_arguments = []
        self._throw_on_unexpected = bool(throw_on_unexpected)
        self._allow_argument_separator = bool(allow_argument_separator)
        self._response_files = bool(response_files)
        self._hidden = bool(hidden)
        self._showing_information = False
        # Environment (inherit from parent when Unset)
        if parent is Unset:
            self._working_directory = os.fspath(coalesce(working_directory, os.getcwd()))
            self._out = out if out is not Unset else Console()
            self._err = err if err is not Unset else Console(stderr=True)
        else:
            self._working_directory = os.fspath(coalesce(working_directory, parent.working_directory))
            self._out = coalesce(out, parent.out)
            self._err = coalesce(err, parent.err)
        # Runtime flags (inherit from parent when Unset)
        self._shell = bool(coalesce(shell, getattr(parent, "shell", False)))
        self._fancy = bool(coalesce(fancy, getattr(parent, "fancy", False)))
        self._colorful = bool(coalesce(colorful, getattr(parent, "colorful", False)))

        self._callback = None
        self._validation_handler = None
        self._help_option = None
        self._version_option = None
        self._short_version = None
        self._long_version = None

        if self._parent is not None:
            self._parent._attach(self)

    def _attach(self, child):
        # Names are matched case-insensitively, so they must be unique that way.
        folded = child.name.casefold()
        if any(sibling.name.casefold() == folded for sibling in self._children):
            self.trigger(DuplicatedCommandError(f"Command '{self.name}' already has a subcommand named '{child.name}'"))
        self._children.append(child)

    def _designated(self, attribute, /):
        if (option := getattr(self, attribute)) is not None:
            return option
        for ancestor in reversed(self.path[:-1]):
            if (option := getattr(ancestor, attribute)) is not None and option.inherited:
                return option
        return None

    # ── declarations ────────────────────────────────────────────────────────

    def option(self, template, descr=Unset, type=OptionType.SINGLE_VALUE, /, *, inherited=False, hidden=False):
        """
        Declare an option on this command and return it.

        Parameters
        - template: str, e.g. "-o|--output <FILE>"
        - descr: Unset | str | Text
        - type: OptionType (defaults to SINGLE_VALUE)
        - inherited: make it visible to every descendant command
        - hidden: leave it out of help

        Name clashes inside an effective option set are reported when a token
        is matched against them (AmbiguousOptionError).
        """
        option = Option(template, descr, type, inherited=inherited, hidden=hidden)
        self._options.append(option)
        return option

    def argument(self, name, descr=Unset, /, *, variadic=False, hidden=False):
        """
        Declare the next positional argument and return it.

        Raises
        - MisplacedArgumentError: when the last declared argument is variadic.
        """
        if self._arguments and (last := self._arguments[-1]).variadic:
            self.trigger(MisplacedArgumentError(
                f"The last argument '{last.name}' accepts multiple values. No more argument can be added."
            ))
        argument = Argument(name, descr, variadic=variadic, hidden=hidden)
        self._arguments.append(argument)
        return argument

    def command(self, name, configuration=Unset, /, **options):
        """
        Create a subcommand of this command.

        Parameters
        - name: str
        - configuration: Unset | Callable[[Command], Any]
          Called with the new child right after creation, which keeps the
          declarations of a subcommand together:

              def configure(build):
                  build.option("--release", type=OptionType.NO_VALUE)
              app.command("build", configure)

        - options: forwarded to Command(...) (descr, throw_on_unexpected, ...).

        Returns
        - Command: the child.
        """
        if configuration is not Unset and not callable(configuration):
            raise TypeError(f"{type(self).__typename__} configuration must be callable")
        child = Command(name, parent=self, **options)
        if configuration is not Unset:
            configuration(child)
        return child

    def help_option(self, template, /, *, inherited=False):
        """
        Declare the option that prints help and stops the dispatch.
        """
        self._help_option = self.option(template, "Show help information", OptionType.NO_VALUE, inherited=inherited)
        return self._help_option

    def version_option(self, template, short, long=Unset, /, *, inherited=False):
        """
        Declare the option that prints the version and stops the dispatch.

        Parameters
        - short: str | Callable[[], str]
          Short version, also shown next to the full name in the help banner.
        - long: Unset | str | Callable[[], str]
          Long version printed by show_version(); defaults to short.
        """
        cls = type(self)
        short = _producer(cls, short, "short")
        long = _producer(cls, coalesce(long, short), "long")
        self._version_option = self.option(template, "Show version information", OptionType.NO_VALUE, inherited=inherited)
        self._short_version = short
        self._long_version = long
        return self._version_option

    def on_execute(self, callback, /):
        """
        Register the zero-argument callback run after a successful dispatch.

        Its return value is the dispatch result; coroutine functions are run
        to completion with asyncio.run. Returns the callback, so it can be
        used as a decorator.
        """
        if not callable(callback):
            raise TypeError(f"{type(self).__typename__} callback must be callable")
        self._callback = callback
        return callback

    def on_validation_error(self, handler, /):
        """
        Register a handler for validation faults of this command and its
        descendants.

        The handler receives the CommandValidationError; its integer return
        value becomes the dispatch result (None means 1). Without a handler
        the fault is triggered like any other.
        """
        if not callable(handler):
            raise TypeError(f"{type(self).__typename__} validation handler must be callable")
        self._validation_handler = handler
        return handler

    def get_options(self):
        """
        Return the effective option set: own options first, then the
        inherited options of each ancestor, nearest ancestor first.

        Computed on every call; the tree may change between dispatches.
        """
        options = list(self._options)
        for ancestor in reversed(self.path[:-1]):
            options.extend(option for option in ancestor._options if option.inherited)
        return options

    def reset(self):
        """
        Clear collected values, remaining arguments and the showing-information
        flag of this command and all of its descendants.
        """
        for declaration in itertools.chain(self._options, self._arguments):
            declaration.reset()
        self._remaining_arguments.clear()
        self._showing_information = False
        for child in self._children:
            child.reset()

    def trigger(self, fault, /, **options):
        """
        Surface a fault in the context of this command.

        The command and its runtime flags are merged into the fault options;
        the fault is then raised, or rendered and followed by exit(1) in shell
        mode (see faults.trigger).
        """
        trigger(fault, **({
            "command": self,
            "shell": self.shell,
            "fancy": self.fancy,
            "colorful": self.colorful,
            "console": self.err,
        } | options))

    # ── dispatch ────────────────────────────────────────────────────────────

    def _find_option(self, attribute, name, /):
        """
        Return the single visible option whose attribute equals name, or None.

        Raises
        - AmbiguousOptionError: when several visible options share the name.
        """
        matches = [option for option in self.get_options() if getattr(option, "_" + attribute) == name]
        if len(matches) > 1:
            self.trigger(AmbiguousOptionError(
                f"Multiple options named '{name}' are visible to command '{self.name}'",
                name=name,
                matches=tuple(matches),
            ))
        return matches[0] if matches else None

    def _find_command(self, name, /):
        folded = name.casefold()
        for child in self._children:
            if child.name.casefold() == folded:
                return child
        return None

    def _consume(self, option, value, /):
        if not option.try_parse(value):
            self.show_hint()
            self.trigger(UnexpectedValueError(
                f"Unexpected value '{value}' for option '{option.label}'",
                option=option,
                value=value,
            ))

    def _unexpected(self, tokens, index, kind, /):
        """
        Raise for tokens[index], or collect tokens[index:] when not throwing.
        """
        if self._throw_on_unexpected:
            self.show_hint()
            fault = UnrecognizedOptionError if kind == "option" else UnrecognizedArgumentError
            self.trigger(fault(f"Unrecognized {kind} '{tokens[index]}'", token=tokens[index], index=index))
        logger.debug("collecting %d remaining token(s) on %r", len(tokens) - index, self.name)
        self._remaining_arguments.extend(tokens[index:])

    def _validate(self):
        """
        Run validators (effective options, then arguments).

        Returns None when everything passed, otherwise the status returned by
        the nearest validation handler.
        """
        for target in itertools.chain(self.get_options(), self._arguments):
            if (message := target.validate()) is None:
                continue
            fault = CommandValidationError(message, command=self, target=target)
            handler = next((command._validation_handler for command in reversed(self.path) if command._validation_handler), None)
            if handler is None:
                self.trigger(fault)
            logger.debug("validation of %r failed: %s", target.label, message)
            status = handler(fault)
            return 1 if status is None else status
        return None

    def _invoke(self):
        if self._callback is None:
            return 0
        result = self._callback()
        if inspect.isawaitable(result):
            result = asyncio.run(_resolve(result))
        return result

    def execute(self, *tokens):
        """
        Dispatch tokens against this command and its descendants.

        Parameters
        - tokens: str
          Raw command-line tokens (without the program name).

        Returns
        - The result of the final command's callback (0 without a callback),
          0 after help or version output, or the validation handler's status.

        Raises
        - CommandParsingError: unrecognized option/command/argument (when
          throwing), a rejected value, or a missing value.
        - CommandConfigurationError: ambiguous option names.
        - ResponseFileError: an @file could not be read.
        - CommandValidationError: a validator failed and no handler is set.
        In shell mode these are printed and the process exits with status 1.
        """
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"{type(self).__typename__} tokens must be strings")

        logger.debug("dispatching %d token(s) to %r", len(tokens), self.name)

        if self._response_files:
            try:
                tokens = responses.expand(tokens, self._working_directory, separator=self._allow_argument_separator)
            except ResponseFileError as error:
                self.trigger(error)
        tokens = list(tokens)

        command = self
        pending = None
        cursor = None

        for index, token in enumerate(tokens):
            if pending is None and token.startswith("-"):
                long = token.startswith("--")
                name, *value = re.split(r"[:=]", token[2 if long else 1:], maxsplit=1)

                if long:
                    option = command._find_option("long_name", name)
                else:
                    option = command._find_option("short_name", name) or command._find_option("symbol_name", name)

                if option is None:
                    if long and not name and not command.throw_on_unexpected and command.allow_argument_separator:
                        index += 1  # "--" itself is not collected
                    command._unexpected(tokens, index, "option")
                    break

                if option is command.helper:
                    logger.debug("help requested for %r", command.name)
                    command.show_help()
                    option.try_parse(None)
                    return 0
                if option is command.versioner:
                    logger.debug("version requested for %r", command.name)
                    command.show_version()
                    option.try_parse(None)
                    return 0

                if value:
                    command._consume(option, value[0])
                elif option.type is OptionType.NO_VALUE:
                    option.try_parse(None)
                else:
                    pending = option
                continue

            if pending is not None:
                command._consume(pending, token)
                pending = None
                continue

            if cursor is None and (child := command._find_command(token)) is not None:
                logger.debug("descending from %r into %r", command.name, child.name)
                command = child
                continue

            if cursor is None:
                cursor = _cursor(list(command._arguments))
            if (argument := next(cursor, None)) is not None:
                argument._values.append(token)
                continue

            command._unexpected(tokens, index, "command or argument")
            break

        if pending is not None:
            command.show_hint()
            command.trigger(MissingValueError(f"Missing value for option '{pending.label}'", option=pending))

        if (status := command._validate()) is not None:
            return status
        return command._invoke()

    def __invoke__(self, prompt=Unset):
        """
        Execute this command with a prompt.

        Parameters
        - prompt:
          • Unset: tokens from sys.argv[1:].
          • str: shell-like string, split with shlex.split.
          • Iterable[str]: pre-tokenized sequence, used as is.

        Raises
        - TypeError: when prompt is not Unset/str/Iterable[str].
        """
        if prompt is Unset:
            tokens = sys.argv[1:]
        elif isinstance(prompt, str):
            tokens = shlex.split(prompt)
        elif isinstance(prompt, Iterable):
            tokens = list(prompt)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("__invoke__() argument must be a string or an iterable of strings")
        else:
            raise TypeError("__invoke__() argument must be a string or an iterable of strings")
        return self.execute(*tokens)

    # ── rendering ───────────────────────────────────────────────────────────

    def _styler(self):
        styles = defaultdict(str, {
            "usage-label": "bold #00E6FF",  # cyan
            "program-name": "bold #FF4D94",  # magenta-pink
            "usage-section": "bold #36C5F0",  # sky-blue
            "section-label": "bold #FFFFFF",
            "argument-name": "bold #FFD600",  # amber
            "option-name": "bold #00E6FF",
            "command-name": "bold #36C5F0",
            "description": "#9CA3AF",  # muted gray
            "note": "italic #A3A3A3",
            "epilog": "#737373",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def text(fragment, style):
            if fragment is None:
                return Text("")
            if isinstance(fragment, Text):
                return fragment.copy() if self.colorful else Text(fragment.plain)
            return Text(str(fragment), styles[style] if self.colorful else "")
        return text

    def _render_help(self, name=Unset):
        """
        Build the help of this command (or of its child called name) as Text.

        Layout
            <full name> [<short version>]

            Usage: <root> ... <self> [<child>] [arguments] [options] [command] [[--] <arg>...]

            Arguments:
              <name>  <descr>

            Options:
              <template>  <descr>

            Commands:
              <name>  <descr>

            Use "<target> [command] --help" for more information about a command.
            <epilog>
        """
        text = self._styler()
        header = Text.assemble(text("Usage:", "usage-label"))
        for command in self.path:
            header.append_text(Text.assemble(" ", text(command.name, "program-name")))

        target = self
        if name is not Unset and name is not None and name.casefold() != self.name.casefold():
            if (child := self._find_command(name)) is not None:
                target = child
                header.append_text(Text.assemble(" ", text(name, "program-name")))

        def table(label, rows, style):
            section = Text.assemble("\n", text(label, "section-label"), "\n")
            width = max(len(name) for name, _ in rows) + 2
            for name, descr in rows:
                section.append_text(Text.assemble("  ", text(name.ljust(width), style), text(descr, "description"), "\n"))
            return section

        sections = []

        if arguments := [argument for argument in target.arguments if not argument.hidden]:
            header.append_text(text(" [arguments]", "usage-section"))
            sections.append(table("Arguments:", [(argument.name, argument.descr) for argument in arguments], "argument-name"))

        if options := [option for option in target.get_options() if not option.hidden]:
            header.append_text(text(" [options]", "usage-section"))
            sections.append(table("Options:", [(option.template, option.descr) for option in options], "option-name"))

        if commands := sorted((child for child in target.children if not child.hidden), key=lambda child: child.name.casefold()):
            header.append_text(text(" [command]", "usage-section"))
            section = table("Commands:", [(child.name, child.descr) for child in commands], "command-name")
            if (helper := target.helper) is not None:
                section.append_text(Text.assemble("\n", text(
                    f'Use "{target.name} [command] {_flag(helper)}" for more information about a command.', "note"
                ), "\n"))
            sections.append(section)

        if target.allow_argument_separator:
            header.append_text(text(" [[--] <arg>...]", "usage-section"))
        header.append("\n")

        return Text.assemble(
            text(self.get_full_name_and_version(), "program-name"),
            "\n\n",
            header,
            *sections,
            text(target.epilog, "epilog"),
        )

    def get_help_text(self, name=Unset, /):
        """
        Return the help of this command, or of its child called name.

        Pure: nothing in the tree is modified. An unknown name falls back to
        this command's own help.
        """
        return self._render_help(name).plain

    def _print(self, console, renderable, /):
        console.print(renderable, soft_wrap=True, highlight=False, markup=False, emoji=False)

    def show_help(self, name=Unset, /):
        """
        Print the help and flag this command and its ancestors as showing information.
        """
        for command in self.path:
            command._showing_information = True
        help = self._render_help(name)
        if help.plain.endswith("\n"):
            help.right_crop(1)  # console.print ends the line itself
        self._print(self.out, help)

    def show_hint(self):
        """
        Print a one-line pointer to the help option, when one is in effect.
        """
        if (helper := self.helper) is not None:
            self._print(self.out, f"Specify {_flag(helper)} for a list of available options and commands.")

    def show_version(self):
        """
        Print the full name and long version of the nearest command declaring
        a version, and flag this command and its ancestors as showing information.
        """
        for command in self.path:
            command._showing_information = True
        source = next((command for command in reversed(self.path) if command._long_version is not None), self)
        self._print(self.out, source.full_name)
        if source._long_version is not None:
            self._print(self.out, source._long_version())

    def get_full_name_and_version(self):
        if self._short_version is None:
            return self.full_name
        return f"{self.full_name} {self._short_version()}"

    def show_root_command_full_name_and_version(self):
        self._print(self.out, self.root.get_full_name_and_version())
        self._print(self.out, "")


def invoke(object, prompt=Unset, /):
    """
    Convenience runner for commands.

    Parameters
    - object: anything implementing __invoke__(prompt), typically a Command.
    - prompt:
      • Unset: read sys.argv[1:].
      • str: split with shlex.split.
      • Iterable[str]: use items as tokens.

    Returns
    - The dispatch result (see Command.execute), ready for sys.exit().

    Raises
    - TypeError: when object cannot be invoked or prompt has a wrong type.
    """
    if hasattr(object, "__invoke__") and callable(object.__invoke__):
        return object.__invoke__(prompt)
    target = "argument" if prompt is Unset else "first argument"
    raise TypeError(f"invoke() {target} must implement __invoke__ method")


__all__ = (
    # Public API surface for consumers of argtree.commands.
    # These names are re-exported from the package __init__.
    "Command",
    "invoke",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del CommandType
