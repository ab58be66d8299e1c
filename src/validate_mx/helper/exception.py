class ValidateMxException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class InvArgException(ValidateMxException):
    """
    Invalid arguments passed to the API (not an invalid identifier, which is
    never an exception)
    """


class ChecksumInvariantError(ValidateMxException):
    """
    The check digit computation produced something that is not a digit
    """
