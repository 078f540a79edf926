'''
# Chunk type

The type of a PNG chunk is a 4-byte code; by convention each byte is an ASCII
letter and its case (bit 5) carries a property of the chunk:

 1. ancillary bit (first byte): 0 (uppercase) = critical, 1 (lowercase) = ancillary
 2. private bit (second byte): 0 (uppercase) = public, 1 (lowercase) = private
 3. reserved bit (third byte): must be 0 (uppercase) in files conforming to this version of PNG
 4. safe-to-copy bit (fourth byte): 0 (uppercase) = unsafe to copy, 1 (lowercase) = safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .fields import Field
from .exceptions import FormatException, EncodingException


# position of the property bit (value 0x20) inside a byte, MSB first
PROPERTY_BIT = 2


class ChunkType(object):
    '''The 4-byte type code of a chunk, it can't be changed once created.'''

    def __init__(self, raw):
        raw = bytes(raw)

        if len(raw) != 4:
            raise FormatException(chain=[], message=f'a chunk type is 4 bytes long, got {len(raw)}')

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw):
        '''No check on the content: any 4 bytes are accepted, see is_valid().'''
        return cls(raw)

    @classmethod
    def from_str(cls, text):
        if len(text) != 4:
            raise FormatException(chain=[], message=f'chunk type \'{text}\' must be 4 characters long')

        if not (text.isascii() and text.isalpha()):
            raise FormatException(chain=[], message=f'chunk type \'{text}\' must contain only the letters A-Z and a-z')

        return cls(text.encode('ascii'))

    @property
    def raw(self) -> bytes:
        return self._raw

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._raw!r})>'

    def __str__(self):
        try:
            return self._raw.decode('ascii')
        except UnicodeDecodeError as e:
            raise EncodingException(chain=[], message=f'chunk type {self._raw!r} is not ASCII') from e

    def matches(self, text) -> bool:
        '''True if the textual representation is "text"; a type that has no textual
        representation doesn't match anything.'''
        try:
            return str(self) == text
        except EncodingException:
            return False

    def _is_property_bit_set(self, position) -> bool:
        return self._bits[position * 8 + PROPERTY_BIT]

    def is_critical(self) -> bool:
        return not self._is_property_bit_set(0)

    def is_public(self) -> bool:
        return not self._is_property_bit_set(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._is_property_bit_set(2)

    def is_safe_to_copy(self) -> bool:
        return self._is_property_bit_set(3)

    def is_valid(self) -> bool:
        # the most significant bit is clear for all the ASCII characters
        return not any(self._bits[position * 8] for position in range(4))


class ChunkTypeField(Field):
    '''Un/Pack a ChunkType.'''

    size = 4

    def unpack(self, stream, instance=None):
        return ChunkType(stream.read_exactly(self.size))

    def pack(self, value, instance=None) -> bytes:
        if not isinstance(value, ChunkType):
            raise ValueError(f'field \'{self.name}\' needs a ChunkType, got {value!r}')

        return value.raw
