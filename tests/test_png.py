import pytest
from PIL import Image

from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.exceptions import FormatException, MagicException, CorruptDataException, NotFoundException
from pngme.png import PNGFile, PNG_SIGNATURE


def chunk_from_strings(chunk_type, data):
    return Chunk(ChunkType.from_str(chunk_type), data.encode())


def testing_chunks():
    return [
        chunk_from_strings('FrSt', 'I am the first chunk'),
        chunk_from_strings('miDl', 'I am another chunk'),
        chunk_from_strings('LASt', 'I am the last chunk'),
    ]


def testing_png():
    return PNGFile.from_chunks(testing_chunks())


def test_signature():
    """Check header is right"""
    assert PNG_SIGNATURE == b'\x89PNG\x0d\x0a\x1a\x0a'
    assert PNGFile().signature == PNG_SIGNATURE
    assert PNGFile.SIGNATURE == PNG_SIGNATURE


def test_png_file(png_bytes):
    """Check unpacking a real PNG file is fine"""
    png = PNGFile.from_bytes(png_bytes)

    assert str(png.chunks[0].type) == 'IHDR'
    assert str(png.chunks[-1].type) == 'IEND'
    assert png.chunk_by_type('IDAT') is not None

    for chunk in png.chunks:
        assert chunk.type.is_valid()
        assert chunk.crc == chunk.__class__.crc.calculate(chunk)


def test_png_raw_is_identical(png_bytes):
    png = PNGFile.from_bytes(png_bytes)

    assert png.raw == png_bytes
    assert PNGFile.from_bytes(png.raw) == png


def test_png_from_chunks():
    png = testing_png()

    assert len(png.chunks) == 3
    assert png.raw[:8] == PNG_SIGNATURE
    assert PNGFile.from_bytes(png.raw) == png


def test_png_empty():
    png = PNGFile.from_bytes(PNG_SIGNATURE)

    assert png.chunks == ()
    assert png.raw == PNG_SIGNATURE


@pytest.mark.parametrize('data', [
    b'',
    b'\x89PNG',
    b'\x88PNG\x0d\x0a\x1a\x0a',
    b'GIF89a\x00\x00' + b''.join(_.raw for _ in testing_chunks()),
])
def test_png_invalid_signature(data):
    with pytest.raises(FormatException) as excinfo:
        PNGFile.from_bytes(data)

    assert excinfo.value.chain == ['signature']


def test_png_wrong_magic_is_magic_exception():
    with pytest.raises(MagicException):
        PNGFile.from_bytes(b'\x00' * 8 + testing_png().raw[8:])


def test_png_corrupted_chunk_is_located():
    data = bytearray(testing_png().raw)
    # the last byte of the crc of the last chunk
    data[-1] ^= 0xff

    with pytest.raises(CorruptDataException) as excinfo:
        PNGFile.from_bytes(bytes(data))

    assert excinfo.value.path == 'entries.2.crc'


def test_png_truncated():
    data = testing_png().raw[:-3]

    with pytest.raises(FormatException) as excinfo:
        PNGFile.from_bytes(data)

    assert excinfo.value.path == 'entries.2.crc'
    assert excinfo.value.offset is not None


def test_png_append_chunk():
    png = testing_png()
    png.append_chunk(chunk_from_strings('ruSt', 'hello'))

    chunk = png.chunk_by_type('ruSt')

    assert chunk.data_as_string() == 'hello'
    assert len(png.chunks) == 4
    assert png.chunks[-1] is chunk


def test_png_append_same_type():
    png = testing_png()
    png.append_chunk(chunk_from_strings('miDl', 'I am the second middle chunk'))

    assert len(png.chunks) == 4
    # the first one in order wins
    assert png.chunk_by_type('miDl').data_as_string() == 'I am another chunk'


def test_png_chunk_by_type_missing():
    png = testing_png()

    assert png.chunk_by_type('ruSt') is None
    assert png.chunk_by_type('bad type') is None


def test_png_remove_chunk():
    png = testing_png()
    png.append_chunk(chunk_from_strings('ruSt', 'hello'))

    removed = png.remove_chunk('ruSt')

    assert removed.data_as_string() == 'hello'
    assert png.chunk_by_type('ruSt') is None
    assert png == testing_png()

    with pytest.raises(NotFoundException):
        png.remove_chunk('ruSt')


def test_png_remove_first_of_many():
    png = testing_png()
    png.append_chunk(chunk_from_strings('miDl', 'I am the second middle chunk'))

    png.remove_chunk('miDl')

    assert [str(_.type) for _ in png.chunks] == ['FrSt', 'LASt', 'miDl']
    assert png.chunk_by_type('miDl').data_as_string() == 'I am the second middle chunk'


def test_png_chunks_is_a_view():
    png = testing_png()

    with pytest.raises(AttributeError):
        png.chunks.append(chunk_from_strings('ruSt', 'hello'))


def test_png_round_trip_after_mutation(png_bytes):
    png = PNGFile.from_bytes(png_bytes)
    png.append_chunk(chunk_from_strings('ruSt', 'hello'))
    png.remove_chunk('IDAT')

    assert PNGFile.from_bytes(png.raw) == png


def test_png_with_message_is_still_an_image(tmp_path, png_bytes):
    png = PNGFile.from_bytes(png_bytes)
    png.append_chunk(chunk_from_strings('ruSt', 'hello'))

    path = tmp_path / 'message.png'
    path.write_bytes(png.raw)

    with Image.open(path) as image:
        assert image.size == (5, 5)
        image.verify()


def test_png_str():
    text = str(testing_png())

    assert '3 chunks' in text
    assert '[00] FrSt 20 bytes' in text
    assert '[02] LASt 19 bytes' in text
