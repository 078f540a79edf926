import io

import pytest
from PIL import Image


MESSAGE = 'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


@pytest.fixture
def png_bytes():
    """A real 5x5 red PNG image"""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / 'red.png'
    path.write_bytes(png_bytes)

    return path


@pytest.fixture
def chunk_bytes():
    """The serialized RuSt chunk carrying MESSAGE"""
    data = MESSAGE.encode()
    return (
        len(data).to_bytes(4, 'big') +
        b'RuSt' +
        data +
        MESSAGE_CRC.to_bytes(4, 'big')
    )
