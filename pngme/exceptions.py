class PNGMeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes as first argument the chain of the layers that caused the
    exception, from the innermost field to the outermost one; the layers
    append their own name while the exception propagates.
    '''

    def __init__(self, chain, message=None, offset=None):
        self.chain = chain
        self.message = message
        self.offset = offset
        super().__init__(message)

    @property
    def path(self):
        return '.'.join(reversed(self.chain))

    def __str__(self):
        msg = self.message or self.__class__.__name__
        if self.chain:
            msg += f' (at {self.path})'
        if self.offset is not None:
            msg += f' [offset 0x{self.offset:x}]'

        return msg


class FormatException(PNGMeException):
    pass


class MagicException(FormatException):
    pass


class CorruptDataException(PNGMeException):
    pass


class EncodingException(PNGMeException):
    pass


class NotFoundException(PNGMeException):
    pass
