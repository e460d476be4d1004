class CommandError(Exception):
    """Base class for operator input the console refuses to run."""


class CommandSyntaxError(CommandError):
    pass


class UnknownCommandError(CommandError):
    pass


class ArityError(CommandError):
    pass


class UnknownParameterError(CommandError):
    pass


class OverrideSyntaxError(CommandError):
    pass


class InvalidValueError(CommandError):
    pass
