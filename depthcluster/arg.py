"""The base class shared by all command-line arguments, and value extraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from depthcluster.arg_errors import ArgParseException, SpecificationException


class Visitor:
    """Special handling run as soon as an argument is matched.

    The base class does nothing; subclasses override :meth:`visit`.
    """

    def visit(self) -> None:
        """Called when the argument owning this visitor is matched."""


class Arg(ABC):
    """Common data and behaviour of every command-line argument.

    An argument is identified by a one-character ``flag`` (used as ``-f``),
    which may be empty, and a one-word ``name`` (used as ``--name``).
    Subclasses decide how a command-line token is consumed by implementing
    :meth:`process_arg`.
    """

    BLANK_CHAR: ClassVar[str] = "\x07"
    FLAG_START: ClassVar[str] = "-"
    NAME_START: ClassVar[str] = "--"
    IGNORE_NAME: ClassVar[str] = "ignore_rest"

    _ignore_rest: ClassVar[bool] = False
    _delimiter: ClassVar[str] = " "

    def __init__(
        self,
        flag: str,
        name: str,
        desc: str,
        required: bool,
        value_required: bool,
        visitor: Optional[Visitor] = None,
    ) -> None:
        self.flag = flag
        self.name = name
        self._description = desc
        self.required = required
        self.require_label = "required"
        self.value_required = value_required
        self.visitor = visitor
        self.ignoreable = True
        self._already_set = False
        self._xor_set = False
        self._accepts_multiple_values = False

        if len(flag) > 1:
            raise SpecificationException(
                "Argument flag can only be one character long", str(self)
            )
        if name != self.IGNORE_NAME and flag in (self.FLAG_START, self.NAME_START, " "):
            raise SpecificationException(
                f"Argument flag cannot be either '{self.FLAG_START}' or "
                f"'{self.NAME_START}' or a space.",
                str(self),
            )
        if name.startswith(self.FLAG_START) or name.startswith(self.NAME_START) or " " in name:
            raise SpecificationException(
                f"Argument name begin with either '{self.FLAG_START}' or "
                f"'{self.NAME_START}' or space.",
                str(self),
            )

    @classmethod
    def begin_ignoring(cls) -> None:
        """Ignore the remaining labelled arguments (after ``--``)."""
        Arg._ignore_rest = True

    @classmethod
    def ignore_rest(cls) -> bool:
        return Arg._ignore_rest

    @classmethod
    def delimiter(cls) -> str:
        """The character separating a flag or name from its value."""
        return Arg._delimiter

    @classmethod
    def set_delimiter(cls, char: str) -> None:
        if len(char) != 1:
            raise ValueError("delimiter must be a single character")
        Arg._delimiter = char

    @abstractmethod
    def process_arg(self, index: int, args: list[str]) -> bool:
        """Try to consume ``args[index]``; return whether it was matched."""

    def conflicts_with(self, other: Arg) -> bool:
        """Whether ``other`` shares this argument's flag or name."""
        return (self.flag != "" and self.flag == other.flag) or self.name == other.name

    @property
    def description(self) -> str:
        """The description, prefixed with the require label when required."""
        prefix = f"({self.require_label})  " if self.required else ""
        return prefix + self._description

    @property
    def is_set(self) -> bool:
        """True only if the argument was matched on the command line itself."""
        return self._already_set and not self._xor_set

    def force_required(self) -> None:
        self.required = True

    def xor_set(self) -> None:
        """Mark as set because another argument of its exclusive group was."""
        self._already_set = True
        self._xor_set = True

    def arg_matches(self, text: str) -> bool:
        return (self.flag != "" and text == self.FLAG_START + self.flag) or (
            text == self.NAME_START + self.name
        )

    def _value_suffix(self, value_id: str) -> str:
        return f"{self.delimiter()}<{value_id}>" if self.value_required else ""

    def short_id(self, value_id: str = "val") -> str:
        """A short identifier for usage lines, bracketed when optional."""
        if self.flag != "":
            ident = self.FLAG_START + self.flag
        else:
            ident = self.NAME_START + self.name
        ident += self._value_suffix(value_id)
        return ident if self.required else f"[{ident}]"

    def long_id(self, value_id: str = "val") -> str:
        """A long identifier naming both the flag and the name."""
        ident = ""
        if self.flag != "":
            ident += self.FLAG_START + self.flag + self._value_suffix(value_id) + ",  "
        return ident + self.NAME_START + self.name + self._value_suffix(value_id)

    def trim_flag(self, flag: str) -> tuple[str, Optional[str]]:
        """Split ``flag`` at the first delimiter past position 1.

        Returns the flag part and the value part, or the flag unchanged and
        ``None`` when there is nothing to split off.
        """
        stop = flag.find(self.delimiter())
        if stop > 1:
            return flag[:stop], flag[stop + 1:]
        return flag, None

    def has_blanks(self, text: str) -> bool:
        """Whether ``text`` holds blank placeholders of combined switches."""
        return self.BLANK_CHAR in text[1:]

    def set_require_label(self, label: str) -> None:
        self.require_label = label

    def allow_more(self) -> bool:
        return False

    def accepts_multiple_values(self) -> bool:
        return self._accepts_multiple_values

    def add_to_list(self, arg_list: list[Arg]) -> None:
        """Insert this argument into ``arg_list``; plain arguments go first."""
        arg_list.insert(0, self)

    def check_with_visitor(self) -> None:
        if self.visitor is not None:
            self.visitor.visit()

    def reset(self) -> None:
        """Forget any match so the argument can be parsed again."""
        self._xor_set = False
        self._already_set = False

    def __str__(self) -> str:
        text = f"{self.FLAG_START}{self.flag} " if self.flag != "" else ""
        return text + f"({self.NAME_START}{self.name})"


def extract_value(text: str, value_type: Callable[[str], Any]) -> Any:
    """Convert ``text`` to ``value_type``.

    ``str`` takes the text verbatim. Other types must find exactly one value;
    leading whitespace is skipped, trailing whitespace or garbage is an error.
    Empty text yields ``None``.
    """
    if value_type is str:
        return text
    if text == "":
        return None
    read_error = ArgParseException(f"Couldn't read argument value from string '{text}'")
    if text[-1].isspace():
        raise read_error
    values = []
    for token in text.split():
        try:
            values.append(value_type(token))
        except (ValueError, TypeError):
            raise read_error from None
    if len(values) > 1:
        raise ArgParseException(f"More than one valid value parsed from string '{text}'")
    return values[0]