'''
# PNG chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer is intended big-endian.

    +--------+------+------------------+-------+
    | length | type | data             | crc   |
    +--------+------+------------------+-------+
      4 bytes  4       "length" bytes     4 bytes

The crc field is network-byte-order CRC-32 computed over the chunk type and
chunk data, but not the length.
'''
from . import fields
from .core import Struct
from .streams import Stream
from .meta import Endianess
from .properties import Dependency
from .common import crc
from .chunk_type import ChunkType, ChunkTypeField
from .exceptions import FormatException, CorruptDataException, EncodingException


# length + type + crc
CHUNK_OVERHEAD = 12
MAX_LENGTH = 2 ** 32 - 1


class Chunk(Struct):
    length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)
    type   = ChunkTypeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'])

    def __init__(self, chunk_type=None, data=b''):
        '''Build a chunk from its type and its data, the length and the crc are
        derived from them. Without arguments the instance is meant to be unpacked.'''
        super().__init__()

        if chunk_type is None:
            return

        if len(data) > MAX_LENGTH:
            raise ValueError(f'data too long for a chunk ({len(data)} bytes)')

        self.type = chunk_type
        self.data = bytes(data)
        self.length = len(self.data)
        self.crc = self.__class__.crc.calculate(self)

    @classmethod
    def from_bytes(cls, data):
        if len(data) < CHUNK_OVERHEAD:
            raise FormatException(
                chain=[],
                message=f'a chunk is at least {CHUNK_OVERHEAD} bytes long, got {len(data)}',
            )

        # the declared length must account for all the data, otherwise the crc
        # would be read from the middle of the chunk
        declared = cls.length.unpack(Stream(bytes(data[:4])))
        if declared + CHUNK_OVERHEAD != len(data):
            raise FormatException(
                chain=['length'],
                message=f'declared length {declared} doesn\'t match the {len(data) - CHUNK_OVERHEAD} bytes of data',
                offset=0,
            )

        return super().from_bytes(data)

    @property
    def chunk_type(self) -> ChunkType:
        return self.type

    def validate(self):
        expected = self.__class__.crc.calculate(self)

        if self.crc != expected:
            self.logger.warning(f'crc for chunk \'{self.type!r}\' failed')
            raise CorruptDataException(
                chain=['crc'],
                message=f'crc mismatch for chunk {self.type.raw!r}: stored 0x{self.crc:08x}, computed 0x{expected:08x}',
                offset=self.offset,
            )

    def data_as_string(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingException(chain=['data'], message=f'data of chunk {self.type.raw!r} is not valid UTF-8') from e

    def __str__(self):
        return (
            'Chunk {\n'
            f'  Length: {self.length}\n'
            f'  Type: {self.type.raw.decode("latin1")}\n'
            f'  Data: {len(self.data)} bytes\n'
            f'  Crc: {self.crc}\n'
            '}'
        )
