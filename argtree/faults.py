"""
Argtree faults (errors) and rendering.

Scope
- FaultCode: stable numeric identifiers for every fault the dispatcher can
  surface, grouped by domain.
- CommandException: base type carrying a message plus context options
  (command, code, title, hint, runtime flags) and knowing how to render
  itself with rich.
- Families
  • CommandParsingError: the token stream does not fit the command tree.
  • CommandConfigurationError: the tree itself is inconsistent (caller bug).
  • ResponseFileError: an @file could not be read.
  • CommandValidationError: a validator rejected collected values.
- trigger(): central entry point, raises the fault or (in shell mode)
  prints it to stderr and exits with status 1.

Integration
- Commands build faults and hand them to Command.trigger(fault, **ctx),
  which adds the command context and calls trigger().
- Hosts may customize the rendering through __main__:
  • __styles__: palette overrides (see CommandException.__rich__).
  • __codes__: mapping of FaultCode → label shown instead of the number.
  • __prog__: program label shown in fault headers.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - parsing (2110x)
      • UNRECOGNIZED_OPTION, UNRECOGNIZED_ARGUMENT, UNEXPECTED_VALUE, MISSING_VALUE
    - configuration (2120x)
      • AMBIGUOUS_OPTION, MISPLACED_ARGUMENT, DUPLICATED_COMMAND
    - resources (2130x)
      • UNREADABLE_RESPONSE_FILE
    - validation (2140x)
      • VALIDATION_FAILED

    spacing leaves room for additions without renumbering.
    """
    # --- parsing errors (211xx) ---
    UNRECOGNIZED_OPTION         = 21101
    UNRECOGNIZED_ARGUMENT       = 21102
    UNEXPECTED_VALUE            = 21103
    MISSING_VALUE               = 21104

    # --- configuration errors (212xx) ---
    AMBIGUOUS_OPTION            = 21201
    MISPLACED_ARGUMENT          = 21202
    DUPLICATED_COMMAND          = 21203

    # --- resource errors (213xx) ---
    UNREADABLE_RESPONSE_FILE    = 21301

    # --- validation errors (214xx) ---
    VALIDATION_FAILED           = 21401

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    Base class of every argtree fault.

    Parameters
    - message: str
      Human readable, one sentence (e.g. "Unrecognized option '--foo'").
    - options: context used by rendering and triggering
      • command: the Command the fault belongs to.
      • code: FaultCode (defaults to the class' __code__).
      • title: short lowercase title (defaults to the class' __title__).
      • hint: optional one-line suggestion.
      • shell, fancy, colorful: runtime flags of the command.
      • console: rich console used in shell mode (defaults to stderr).

    str(fault) is the message alone, so callers can match on it.
    """
    __code__ = Unset
    __title__ = "command error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def command(self):
        return self.options.get("command")

    @property
    def code(self):
        return self.options.get("code", type(self).__code__)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        command = self.command
        prog = getattr(main, "__prog__", command.root.name if command is not None else "argtree")

        header = Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " | ",
            text(self.code.normalize() if self.code is not Unset else "", "code"),
            " | ",
            text(self.options.get("title", type(self).__title__).title(), "error-title"),
            " ]"
        )
        renders = [text(str(self), "error-message")]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")
        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self
        self.options.get("console", console).print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        replaced = type(self)(self.message, **{**self.options, **overrides})
        replaced.__cause__ = self.__cause__
        return replaced


class CommandParsingError(CommandException):
    __title__ = "parsing error"


class UnrecognizedOptionError(CommandParsingError):
    __code__ = FaultCode.UNRECOGNIZED_OPTION
    __title__ = "unrecognized option"


class UnrecognizedArgumentError(CommandParsingError):
    __code__ = FaultCode.UNRECOGNIZED_ARGUMENT
    __title__ = "unrecognized command or argument"


class UnexpectedValueError(CommandParsingError):
    __code__ = FaultCode.UNEXPECTED_VALUE
    __title__ = "unexpected value"


class MissingValueError(CommandParsingError):
    __code__ = FaultCode.MISSING_VALUE
    __title__ = "missing value"


class CommandConfigurationError(CommandException):
    __title__ = "configuration error"


class AmbiguousOptionError(CommandConfigurationError):
    __code__ = FaultCode.AMBIGUOUS_OPTION
    __title__ = "ambiguous option"


class MisplacedArgumentError(CommandConfigurationError):
    __code__ = FaultCode.MISPLACED_ARGUMENT
    __title__ = "misplaced argument"


class DuplicatedCommandError(CommandConfigurationError):
    __code__ = FaultCode.DUPLICATED_COMMAND
    __title__ = "duplicated command"


class ResponseFileError(CommandException):
    __code__ = FaultCode.UNREADABLE_RESPONSE_FILE
    __title__ = "unreadable response file"


class CommandValidationError(CommandException):
    __code__ = FaultCode.VALIDATION_FAILED
    __title__ = "validation failed"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see CommandException).
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode the fault is rendered on stderr and the process exits
      with status 1; otherwise it is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "CommandParsingError",
    "UnrecognizedOptionError",
    "UnrecognizedArgumentError",
    "UnexpectedValueError",
    "MissingValueError",
    "CommandConfigurationError",
    "AmbiguousOptionError",
    "MisplacedArgumentError",
    "DuplicatedCommandError",
    "ResponseFileError",
    "CommandValidationError",
    "trigger",
)
