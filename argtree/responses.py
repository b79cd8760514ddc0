r"""
Argtree response files: expand "@path" tokens into the tokens they contain.

Grammar (per line of the file)
- Empty lines and lines starting with '#' are skipped.
- Unquoted whitespace separates tokens.
- "..." and '...' capture their content verbatim (the other quote character
  is an ordinary character inside); closing a quote always yields a token,
  even an empty one.
- A backslash escapes the next character: \" and \' become the bare quote,
  any other escape keeps the backslash (\n stays the two characters "\n").
  A backslash ending the line is kept as is.
- The end of a line closes the current token, including an unterminated
  quoted run.

Example file
    # build settings
    --configuration Release
    "--output=C:\out dir"
    ''

expands to ["--configuration", "Release", "--output=C:\out dir", ""].

Only the tokens given on the command line are expanded: lines read from a
file are never scanned again for "@" references.
"""
import logging
import os.path
import re

from .faults import ResponseFileError

logger = logging.getLogger(__name__)


def _tokenize(line, /):
    """
    Split one response-file line into tokens.
    """
    tokens = []
    buffer = []
    quote = None
    pending = False  # a quoted run just closed: emit a token even if empty

    index = 0
    while index < len(line):
        char = line[index]
        index += 1

        if char == "\\":
            if index >= len(line):
                buffer.append("\\")
                break
            char = line[index]
            index += 1
            if char not in "\"'":
                buffer.append("\\")
            buffer.append(char)
            continue

        if char == quote:
            pending = True
            quote = None
            continue

        if quote is not None:
            buffer.append(char)
            continue

        if char.isspace():
            if buffer or pending:
                pending = False
                tokens.append("".join(buffer))
                buffer.clear()
        elif char in "\"'":
            quote = char
        else:
            buffer.append(char)

    if buffer or quote is not None or pending:
        tokens.append("".join(buffer))
    return tokens


def read(path, /):
    """
    Read and tokenize a single response file.

    Raises
    - ResponseFileError: when the file cannot be opened or decoded; the
      original error is chained as __cause__.
    """
    try:
        with open(path, encoding="utf-8-sig", newline="") as file:
            content = file.read()
    except (OSError, UnicodeDecodeError) as error:
        raise ResponseFileError(f"Could not read response file '{path}'", path=path) from error

    tokens = []
    for line in re.split(r"\r\n|\r|\n", content):
        if not line or line.startswith("#"):
            continue
        tokens.extend(_tokenize(line))
    return tokens


def expand(tokens, directory, /, *, separator=False):
    """
    Replace every "@path" token with the tokens read from path.

    Parameters
    - tokens: Iterable[str | None]
      Raw command-line tokens; None entries are dropped.
    - directory: str
      Base directory for relative paths.
    - separator: bool
      When True, the first literal "--" stops expansion: it and every
      following token are copied through unchanged.

    Returns
    - list[str]: the expanded token list.

    Raises
    - ResponseFileError: when any referenced file cannot be read.
    """
    expanded = []
    tokens = iter(tokens)

    for token in tokens:
        if token is None:
            continue

        if separator and token == "--":
            expanded.append(token)
            expanded.extend(tokens)
            break

        if len(token) <= 1 or not token.startswith("@"):
            expanded.append(token)
            continue

        path = os.path.join(directory, token[1:])
        logger.debug("expanding response file %r", path)
        expanded.extend(read(path))

    return expanded


__all__ = (
    "expand",
    "read",
)
