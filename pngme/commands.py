'''
The operations available from the command line: each one reads the PNG file,
works on its chunks and, where needed, writes it back.
'''
import logging
from pathlib import Path

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import NotFoundException, EncodingException
from .png import PNGFile


logger = logging.getLogger(__name__)


def read_png(file_path) -> PNGFile:
    logger.debug('reading \'%s\'' % file_path)
    return PNGFile.from_bytes(Path(file_path).read_bytes())


def write_png(png, file_path):
    data = png.raw
    logger.debug('writing %d bytes to \'%s\'' % (len(data), file_path))
    Path(file_path).write_bytes(data)


def encode(file_path, chunk_type, message, output_file=None) -> PNGFile:
    '''Hide "message" in a new chunk of type "chunk_type" appended to the file.'''
    # validate the type before touching the file
    _type = ChunkType.from_str(chunk_type)
    try:
        data = message.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingException(chain=[], message='the message is not valid UTF-8') from e

    png = read_png(file_path)
    png.append_chunk(Chunk(_type, data))

    write_png(png, output_file if output_file is not None else file_path)

    return png


def decode(file_path, chunk_type) -> str:
    png = read_png(file_path)

    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise NotFoundException(chain=[], message=f'no chunk with type \'{chunk_type}\' in \'{file_path}\'')

    return chunk.data_as_string()


def remove(file_path, chunk_type) -> Chunk:
    png = read_png(file_path)

    chunk = png.remove_chunk(chunk_type)

    write_png(png, file_path)

    return chunk


def print_chunks(file_path) -> str:
    png = read_png(file_path)

    lines = [f'File: {file_path}']
    for idx, chunk in enumerate(png.chunks):
        lines.append(f'  [{idx:02d}] type: {chunk.type.raw.decode("latin1")} length: {chunk.length}')

    return '\n'.join(lines)
