"""
Argtree validators: value rules attached to options and arguments.

Overview
- A validator is any callable taking the declaration (Option or Argument)
  and returning an error message, or None when the collected values are fine.
- The factories below build the common rules; each accepts a custom message.
  Messages may use the {label} and {value} placeholders.

Wiring
    >>> from argtree import Command, OptionType
    >>> from argtree.validation import email_address
    >>> app = Command("mail")
    >>> to = app.option("--to <ADDRESS>", "Recipient").is_required().accepts(email_address())

Validation runs once per dispatch, after the whole token stream was accepted
and before the command callback (see Command.execute).
"""
import os.path

from .utils import *


def _validator(name, check, message, /):
    """
    Build a per-value validator: check(value) must hold for every value.

    The default or custom message is formatted with the target's label and
    the first failing value.
    """
    if not callable(check):
        raise TypeError(f"{name}() predicate must be callable")
    if not isinstance(message, str):
        raise TypeError(f"{name}() 'message' must be a string")

    @rename(name)
    def validator(target):
        for value in target.values:
            if not check(value):
                return message.format(label=target.label, value=value)
        return None
    return validator


def required(allow_empty=False, message=Unset):
    """
    Require at least one value; blank values fail unless allow_empty is set.
    """
    message = coalesce(message, "The {label} field is required.")
    if not isinstance(message, str):
        raise TypeError("required() 'message' must be a string")

    @rename("required")
    def validator(target):
        values = target.values
        if not values:
            return message.format(label=target.label, value=None)
        if not allow_empty:
            for value in values:
                if value is None or not value.strip():
                    return message.format(label=target.label, value=value)
        return None
    return validator


def email_address(message=Unset):
    # Same rule as the usual data-annotation check: one '@', not first, not last.
    def check(value):
        return value.count("@") == 1 and not value.startswith("@") and not value.endswith("@")
    return _validator("email_address", check, coalesce(message, "The {label} field is not a valid e-mail address."))


def existing_file_path(message=Unset):
    return _validator("existing_file_path", os.path.isfile, coalesce(message, "The file '{value}' does not exist."))


def allowed(*choices, ignore_case=False, message=Unset):
    """
    Restrict values to the given choices (optionally case-insensitively).
    """
    if not choices:
        raise TypeError("allowed() requires at least one choice")
    if not all(isinstance(choice, str) for choice in choices):
        raise TypeError("allowed() choices must be strings")
    if ignore_case:
        folded = {choice.casefold() for choice in choices}
        check = lambda value: value.casefold() in folded  # NOQA: E-731
    else:
        check = frozenset(choices).__contains__
    return _validator("allowed", check, coalesce(message, "The value '{value}' for {label} is not allowed."))


def satisfies(predicate, message, /):
    return _validator("satisfies", predicate, message)


__all__ = (
    "required",
    "email_address",
    "existing_file_path",
    "allowed",
    "satisfies",
)
