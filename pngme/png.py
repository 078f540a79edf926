'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A PNG file is an 8-byte signature followed by a sequence of chunks, here we
don't care about the image itself: the chunks are kept in the order they
are found, also the ones after IEND, so that packing an unpacked file gives
back the same bytes.
'''
import logging
from typing import Optional, Tuple

from . import fields
from .core import Struct
from .chunk import Chunk
from .exceptions import NotFoundException


logger = logging.getLogger(__name__)


PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGFile(Struct):
    SIGNATURE = PNG_SIGNATURE

    signature = fields.StringField(8, default=PNG_SIGNATURE, is_magic=True)
    entries   = fields.ArrayField(Chunk)

    @classmethod
    def from_chunks(cls, chunks):
        return cls(entries=list(chunks))

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self.entries)

    def append_chunk(self, chunk: Chunk):
        logger.debug(f'appending chunk {chunk.type!r} with {chunk.length} bytes of data')
        self.entries.append(chunk)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        for chunk in self.entries:
            if chunk.type.matches(chunk_type):
                return chunk

        return None

    def remove_chunk(self, chunk_type: str) -> Chunk:
        for idx, chunk in enumerate(self.entries):
            if chunk.type.matches(chunk_type):
                logger.debug(f'removing chunk #{idx} of type \'{chunk_type}\'')
                return self.entries.pop(idx)

        raise NotFoundException(chain=[], message=f'no chunk with type \'{chunk_type}\'')

    def __str__(self):
        msg = [f'PNG file with {len(self.entries)} chunks']
        for idx, chunk in enumerate(self.entries):
            msg.append(f'[{idx:02d}] {chunk.type.raw.decode("latin1")} {len(chunk.data)} bytes')

        return '\n'.join(msg)
