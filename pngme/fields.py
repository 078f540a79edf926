"""
A Field is "fundamental" datatype from the format point of view: it knows how
to read its value from a stream and how to encode a value back to bytes.

The fields are codecs, the values live in the Struct instance they are
declared in (see core.Struct).
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency
from .exceptions import PNGMeException, FormatException, MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, default=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.default = default
        self.endianess = endianess
        self.is_magic = is_magic

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def value_from_default(self):
        return self.default

    def unpack(self, stream, instance=None):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def pack(self, value, instance=None) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def _check_magic(self, value):
        if self.is_magic and value != self.default:
            self.logger.warning(f'the magic for field \'{self.name}\' doesn\'t correspond')
            raise MagicException(chain=[], message=f'expected magic {self.default!r}, found {value!r}')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        prefix = {
            Endianess.LITTLE_ENDIAN: '<',
            Endianess.BIG_ENDIAN: '>',
            Endianess.NETWORK: '!',
        }[self.endianess]

        return '%s%s' % (prefix, self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def unpack(self, stream, instance=None):
        raw = stream.read_exactly(self.size)
        value = struct.unpack(self.get_format(), raw)[0]

        self._check_magic(value)

        return value

    def pack(self, value, instance=None) -> bytes:
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'value {value!r} cannot be packed in field \'{self.name}\': {e}') from e


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency on a sibling field, like the
    data of a PNG chunk that is as long as its length field says."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'' if isinstance(self.length, Dependency) else b'\x00' * self.length

    def get_length(self, instance=None):
        if isinstance(self.length, Dependency):
            if instance is None:
                raise ValueError(f'the length of field \'{self.name}\' depends on \'{self.length.expression}\'')
            return self.length.resolve(instance)

        return self.length

    def unpack(self, stream, instance=None):
        value = stream.read_exactly(self.get_length(instance))

        self._check_magic(value)

        return value

    def pack(self, value, instance=None) -> bytes:
        """The StringField has the size as a parameter and we must follow that indication."""
        if (instance is not None or not isinstance(self.length, Dependency)) \
                and len(value) != self.get_length(instance):
            raise ValueError(f'you are trying to pack a value with the wrong size (that is {self.get_length(instance)} bytes)')

        return bytes(value)


class ArrayField(Field):
    '''Un/Pack an array of Structs, one after the other until the stream is exhausted.

    This is the shape of a PNG file: after the signature there are only chunks
    up to the end of the data.
    '''

    def __init__(self, element_cls, **kw):
        self.element_cls = element_cls
        super().__init__(**kw)

    def value_from_default(self):
        return []

    def unpack(self, stream, instance=None):
        elements = []

        while not stream.at_end():
            element = self.element_cls()
            self.logger.debug('unpacking element #%d at offset %d' % (len(elements), stream.tell()))
            try:
                element.unpack(stream)
            except PNGMeException as e:
                e.chain.append(str(len(elements)))
                raise

            elements.append(element)

        return elements

    def pack(self, value, instance=None) -> bytes:
        return b''.join(element.pack() for element in value)
