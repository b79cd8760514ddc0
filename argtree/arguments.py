r"""
Argtree declarations: options and positional arguments.

Overview
- OptionType
  • NO_VALUE: a switch (--verbose); records "on" when present.
  • SINGLE_VALUE: takes exactly one value (--output FILE).
  • MULTIPLE_VALUE: may be repeated, every occurrence appends a value.

- Option
  • Built from a template such as "-o|--output <FILE>" or "-? --help".
  • Exposes long/short/symbol/value names parsed from the template.
  • Collects raw string values during a dispatch (try_parse).
  • inherited options are visible to every descendant command.

- Argument
  • A positional slot; a variadic argument absorbs every remaining
    positional token of its command.

- Introspection & representation
  • ArgumentType metaclass provides __typename__, stable __repr__ and
    __rich_repr__, and exposes every name in __introspectable__ as a
    read-only property (see utils.mirror).

Template grammar
- Parts are separated by spaces or '|'.
- "--name"  → long name (matched case-sensitively after "--").
- "-x"      → symbol name when x is a single non-letter ("-?", "-1"),
              otherwise short name ("-v", "-vv").
- "<value>" → value name (only shown in help).
- Anything else is rejected with ValueError.

Quick example:
    >>> from argtree.arguments import Option, OptionType
    >>> output = Option("-o|--output <FILE>", "Where to write", OptionType.SINGLE_VALUE)
    >>> output.short_name, output.long_name, output.value_name
    ('o', 'output', 'FILE')
    >>> output.try_parse("out.txt"), output.value
    (True, 'out.txt')

Public API
- Classes: OptionType, Option, Argument
"""
import builtins
import functools
import operator
import re
from enum import IntEnum

from rich.text import Text

from . import validation
from .utils import *


class OptionType(IntEnum):
    """
    value arity of an option.
    """
    NO_VALUE = 0
    SINGLE_VALUE = 1
    MULTIPLE_VALUE = 2


class ArgumentType(type):
    """
    Metaclass shared by Option and Argument.

    Responsibilities
    - Derive __typename__ from the class name ("Option" → "option") for
      messages.
    - Expose each name in __introspectable__ as a read-only property backed
      by the private "_{name}" field.
    - Provide compact __repr__/__rich_repr__ limited to __displayable__ (or
      __introspectable__ when unset).
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
            - option(template='-v|--verbose', type=<OptionType.NO_VALUE: 0>, ...)
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


def _sanitize_descr(cls, descr, /):
    """
    Internal: validate a description, None when Unset, trimmed otherwise.

    Empty descriptions are allowed (help simply shows nothing next to the
    name), but they must be strings or rich Text.
    """
    if not isinstance(descr, str | Text | Unset | None):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    if isinstance(descr, str):
        descr = descr.strip()
    return coalesce(descr)


def _parse_template(cls, template, /):
    """
    Internal: split an option template into its names.

    Returns
    - dict with 'long_name', 'short_name', 'symbol_name' and 'value_name'
      (each None when absent).

    Raises
    - TypeError: when template is not a string.
    - ValueError: on an unrecognized part, or when no option name results.
    """
    if not isinstance(template, str):
        raise TypeError(f"{cls.__typename__} 'template' must be a string")

    names = dict.fromkeys(("long_name", "short_name", "symbol_name", "value_name"))

    for part in filter(None, re.split(r"[ |]", template.strip())):
        if part.startswith("--") and len(part) > 2:
            names["long_name"] = part[2:]
        elif part.startswith("-") and not part.startswith("--") and len(part) > 1:
            name = part[1:]
            # A single non-letter character is a symbol ("-?", "-1", "-@").
            if len(name) == 1 and not ("a" <= name.lower() <= "z"):
                names["symbol_name"] = name
            else:
                names["short_name"] = name
        elif part.startswith("<") and part.endswith(">") and len(part) > 2:
            names["value_name"] = part[1:-1]
        else:
            raise ValueError(f"Invalid template pattern '{template}'")

    if not any(names[key] for key in ("long_name", "short_name", "symbol_name")):
        raise ValueError(f"Invalid template pattern '{template}'")
    return names


class _Validatable:
    """
    Mixin for declarations carrying values and validators.
    """

    @property
    def value(self):
        """
        first collected value, or None when nothing was collected.
        """
        return self._values[0] if self._values else None

    def reset(self):
        """
        forget every collected value (declarations stay untouched).
        """
        self._values.clear()

    def accepts(self, *validators):
        """
        Attach validators and return self (chainable).

        Each validator is a callable(target) -> str | None; see
        argtree.validation for the ready-made ones.
        """
        for validator in validators:
            if not callable(validator):
                raise TypeError(f"{type(self).__typename__} validators must be callable")
        self._validators.extend(validators)
        return self

    def is_required(self, allow_empty=False, message=Unset):
        """
        Shortcut for accepts(validation.required(allow_empty, message)).
        """
        return self.accepts(validation.required(allow_empty, message))

    def validate(self):
        """
        Run the validators in order; return the first error message or None.
        """
        for validator in self._validators:
            if (message := validator(self)) is not None:
                return message
        return None


class Option(_Validatable, metaclass=ArgumentType):
    """
    Named command-line switch.

    Options are usually created through Command.option(...), which also
    registers them on the command; constructing one directly is useful to
    inspect how a template is understood.

    Properties
    - template, long_name, short_name, symbol_name, value_name
    - descr, type, inherited, hidden
    - values (copy of the collected raw strings), validators (copy)
    - label: the best name for messages (long, then short, then symbol)
    """

    __introspectable__ = (
        "template",
        "long_name",
        "short_name",
        "symbol_name",
        "value_name",
        "descr",
        "type",
        "inherited",
        "hidden",
        "values",
        "validators",
    )

    __displayable__ = (
        "template",
        "descr",
        "type",
        "inherited",
        "hidden",
        "values",
    )

    def __init__(self, template, descr=Unset, type=OptionType.SINGLE_VALUE, /, *, inherited=False, hidden=False):
        """
        Parameters
        - template: str
          e.g. "-o|--output <FILE>", "--force", "-?|-h|--help".
        - descr: Unset | str | Text
          Help description; None when Unset.
        - type: OptionType
          Value arity.
        - inherited: bool
          Make the option visible to every descendant command.
        - hidden: bool
          Leave the option out of help output.

        Raises
        - TypeError/ValueError on invalid template, descr or type.
        """
        cls = builtins.type(self)
        names = _parse_template(cls, template)

        if not isinstance(type, OptionType):
            try:
                type = OptionType(type)
            except ValueError:
                raise TypeError(f"{cls.__typename__} 'type' must be an option type") from None

        self._template = template.strip()
        self._descr = _sanitize_descr(cls, descr)
        self._type = type
        self._inherited = bool(inherited)
        self._hidden = bool(hidden)
        self._values = []
        self._validators = []
        for name, object in names.items():
            setattr(self, "_" + name, object)

    @property
    def label(self):
        return self._long_name or self._short_name or self._symbol_name

    def try_parse(self, value):
        """
        Record one occurrence of the option.

        Parameters
        - value: str | None
          The attached or following value; None when the option was given
          without any.

        Returns
        - bool: False when the occurrence does not fit the arity (a second
          value for a single-value option, or a value for a switch).
        """
        match self._type:
            case OptionType.MULTIPLE_VALUE:
                self._values.append(value)
            case OptionType.SINGLE_VALUE:
                if self._values:
                    return False
                self._values.append(value)
            case OptionType.NO_VALUE:
                if value is not None:
                    return False
                self._values.append("on")
        return True

    def has_value(self):
        return len(self._values) > 0


class Argument(_Validatable, metaclass=ArgumentType):
    """
    Positional argument slot.

    Values are bound in declaration order; a variadic argument keeps
    receiving tokens until the stream ends, hence it must be declared last
    (Command.argument enforces this).
    """

    __introspectable__ = (
        "name",
        "descr",
        "variadic",
        "hidden",
        "values",
        "validators",
    )

    __displayable__ = (
        "name",
        "descr",
        "variadic",
        "hidden",
        "values",
    )

    def __init__(self, name, descr=Unset, /, *, variadic=False, hidden=False):
        cls = builtins.type(self)
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        elif not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} 'name' cannot be empty")

        self._name = name
        self._descr = _sanitize_descr(cls, descr)
        self._variadic = bool(variadic)
        self._hidden = bool(hidden)
        self._values = []
        self._validators = []

    @property
    def label(self):
        return self._name


__all__ = (
    # Public API surface for consumers of argtree.arguments.
    # These names are re-exported from the package __init__.
    "OptionType",
    "Option",
    "Argument",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ArgumentType
