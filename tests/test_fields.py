import pytest

from pngme.common.crc import CRCField
from pngme.core import Struct
from pngme.fields import StructField, StringField, ArrayField
from pngme.meta import Endianess
from pngme.properties import Dependency
from pngme.streams import Stream


def test_structfield_endianess():
    """Check the endianess of a field is respected packing and unpacking."""
    little = StructField('I')
    big = StructField('I', endianess=Endianess.BIG_ENDIAN)

    assert little.size == 4
    assert little.pack(0xcafe) == b'\xfe\xca\x00\x00'
    assert big.pack(0xcafe) == b'\x00\x00\xca\xfe'
    assert big.unpack(Stream(b'\x01\x02\x03\x04')) == 0x01020304


def test_structfield_out_of_range():
    with pytest.raises(ValueError):
        StructField('I').pack(2 ** 32)


def test_stringfield():
    field = StringField(0x10)

    assert field.value_from_default() == b'\x00' * 0x10

    with pytest.raises(ValueError):
        field.pack(b'kebab')

    data = bytes(range(0x10))

    assert field.pack(data) == data
    assert field.unpack(Stream(data)) == data


def test_stringfield_needs_length():
    with pytest.raises(ValueError):
        StringField()


def test_dependency_only_siblings():
    with pytest.raises(ValueError):
        Dependency('length')


class Entry(Struct):
    n = StructField('B')


def test_arrayfield():
    array = ArrayField(Entry)

    values = array.unpack(Stream(bytes(range(10))))

    assert [_.n for _ in values] == list(range(10))
    assert array.pack(values) == bytes(range(10))
    assert array.value_from_default() == []
    assert array.value_from_default() is not array.value_from_default()


def test_crcfield():
    """The CRC of the IEND chunk is well known"""
    class Record(Struct):
        type = StringField(4)
        crc = CRCField(['type'])

    record = Record(type=b'IEND')

    assert Record.crc.calculate(record) == 0xae426082
    assert Record.crc.pack(0xae426082) == b'\xae\x42\x60\x82'
