"""
Core module for the abstraction of a binary record.

A record is described declaring its fields in order, like

    class Simple(Struct):
        length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)
        data   = fields.StringField(Dependency('.length'))

Two basic operations are defined for it:

 1. unpack(): reading the binary data from a stream and build a high-level
    representation of that; each field knows how many bytes it needs.

 2. pack(): encode the high-level representation into binary data.

If the class defines a validate() method it is called at the end of the
unpacking so that the record can refuse inconsistent data.
"""
from typing import Tuple, List, Dict, Any

from .fields import Field
from .meta import MetaStruct
from .streams import Stream
from .exceptions import PNGMeException, FormatException


class Struct(metaclass=MetaStruct):
    """
    Main class that defines a format: the values of its fields are stored in
    the instance, the fields themselves are shared codecs on the class.
    """

    def __init__(self, **kwargs):
        self.offset = None

        for name, field in self.get_fields():
            setattr(self, name, kwargs.pop(name) if name in kwargs else field.value_from_default())

        if kwargs:
            raise TypeError(f'{self.__class__.__name__} has no field named {", ".join(kwargs)}')

    @classmethod
    def from_bytes(cls, data):
        '''Unpack an instance that must take all of "data", not a byte less, not a byte more.'''
        stream = Stream(data)

        instance = cls()
        instance.unpack(stream)

        if not stream.at_end():
            raise FormatException(
                chain=[],
                message=f'{stream.remaining()} bytes left after the end of {cls.__name__}',
                offset=stream.tell(),
            )

        return instance

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(self.__class__, _)) for _ in self.get_ordered_fields_name()]

    def get_values(self) -> Dict[str, Any]:
        return {_: getattr(self, _) for _ in self.get_ordered_fields_name()}

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return self.get_values() == other.get_values()

    def __repr__(self):
        msg = []
        for field_name, value in self.get_values().items():
            msg.append('%s=%s' % (field_name, repr(value)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, value in self.get_values().items():
            msg += '%s: %s\n' % (field_name, repr(value))
        return msg

    @property
    def raw(self) -> bytes:
        return self.pack()

    def pack(self, stream=None) -> bytes:
        '''Encode the fields one after the other; if a stream is passed the
        data is appended to it.'''
        stream = Stream(b'') if stream is None else stream

        for field_name, field in self.get_fields():
            self.logger.debug('packing %s.%s' % (self.__class__.__name__, field_name))
            stream.write(field.pack(getattr(self, field_name), self))

        return stream.getvalue()

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        An error in a field is re-raised with the name of the field appended
        to its chain, so that the caller knows where the parsing failed.
        '''
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                value = field.unpack(stream, self)
            except PNGMeException as e:
                e.chain.append(field_name)
                raise

            setattr(self, field_name, value)

        if hasattr(self, 'validate'):
            self.validate()

        return self
