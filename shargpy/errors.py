"""Exceptions raised while setting up or running a command line parser."""


class ParserError(Exception):
    """Base class of every error reported by the parser."""


class UserInputError(ParserError):
    """The command line given by the user cannot be accepted."""


class TooFewArguments(UserInputError):
    """An option value or a positional argument is missing."""


class TooManyArguments(UserInputError):
    """Arguments are left over after parsing."""


class UnknownOption(UserInputError):
    """An option or flag was given that the parser does not know."""


class OptionDeclaredMultipleTimes(UserInputError):
    """A single-valued option was given more than once."""


class RequiredOptionMissing(UserInputError):
    """A required option was not given."""


class ValidationError(UserInputError):
    """A parsed value was rejected by its validator."""


class DesignError(ParserError):
    """The parser was set up wrongly by the developer."""