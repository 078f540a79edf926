import io
import logging

from .exceptions import FormatException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need reads that fail loudly
    when the data is not long enough.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' cannot be used as a stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    @property
    def size(self):
        with self.obj.getbuffer() as view:
            return len(view)

    def remaining(self):
        return self.size - self.obj.tell()

    def at_end(self):
        return self.remaining() <= 0

    def read_exactly(self, size):
        '''Read exactly "size" bytes, a shorter read means the data is truncated.'''
        offset = self.obj.tell()
        data = self.obj.read(size)

        if len(data) != size:
            logger.debug('short read at offset %d: wanted %d bytes, got %d' % (offset, size, len(data)))
            raise FormatException(
                chain=[],
                message=f'expected {size} bytes, only {len(data)} available',
                offset=offset,
            )

        return data

    def write(self, data):
        return self.obj.write(data)
