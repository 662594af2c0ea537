"""Errors raised while defining and parsing command-line arguments."""

from __future__ import annotations


class ArgException(Exception):
    """An argument error carrying its text, the argument it concerns and its kind."""

    def __init__(
        self,
        text: str = "undefined exception",
        arg_id: str = "undefined",
        type_description: str = "Generic ArgException",
    ) -> None:
        super().__init__(text)
        self.error = text
        self.arg_id = arg_id
        self.type_description = type_description

    def argument_label(self) -> str:
        """``"Argument: <id>"``, or a single space when no argument is known."""
        if self.arg_id == "undefined":
            return " "
        return "Argument: " + self.arg_id

    def __str__(self) -> str:
        return f"{self.arg_id} -- {self.error}"


class ArgParseException(ArgException):
    """An argument could not parse the value it was given."""

    def __init__(self, text: str = "undefined exception", arg_id: str = "undefined") -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found while parsing the value the Arg has been passed.",
        )


class CmdLineParseException(ArgException):
    """The command line does not meet the requirements of the defined arguments."""

    def __init__(self, text: str = "undefined exception", arg_id: str = "undefined") -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found when the values on the command line do not meet "
            "the requirements of the defined Args.",
        )


class SpecificationException(ArgException):
    """An argument was defined improperly, e.g. a duplicate flag or name."""

    def __init__(self, text: str = "undefined exception", arg_id: str = "undefined") -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found when an Arg object is improperly defined by the developer.",
        )


class ExitException(Exception):
    """Requests that the program exit with the given status."""

    def __init__(self, exit_status: int) -> None:
        super().__init__(exit_status)
        self.exit_status = exit_status