"""Domain exception hierarchy."""


class CommaFieldsException(Exception):
    pass


class InvalidInputException(CommaFieldsException):
    pass
