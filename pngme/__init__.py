"""
# pngme

Hide messages in PNG files.

A PNG file is a signature followed by chunks, each one with its type, its
data and a checksum: adding a chunk with a type the decoders don't know
about leaves the image intact, so a message can travel with it.

The main components are

 1. ChunkType: the 4-byte type code, the case of its letters tells if the
    chunk is critical, public, conforming and safe to copy.

 2. Chunk: length, type, data and CRC, un/packed by the declarative
    machinery in core and fields.

 3. PNGFile: the signature and the ordered list of chunks, with the
    operations to append, find and remove chunks.
"""
from .chunk_type import ChunkType
from .chunk import Chunk
from .png import PNGFile, PNG_SIGNATURE
