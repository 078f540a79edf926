'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32

from .. import fields
from ..meta import Endianess


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.

    The fields named in "fields" are the siblings the CRC is computed over, in order.
    """

    def __init__(self, fields, endianess=Endianess.NETWORK, **kwargs):
        super().__init__('I', endianess=endianess, **kwargs)
        self.fields = fields

    def calculate(self, instance):
        value = b''
        for field_name in self.fields:
            field = getattr(instance.__class__, field_name)
            value += field.pack(getattr(instance, field_name), instance)

        return crc32(value) & 0xffffffff
