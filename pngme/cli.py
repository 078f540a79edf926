import argparse
import logging
import os
import sys

from . import commands
from .exceptions import PNGMeException


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog='pngme', description='Hide messages in the chunks of PNG files')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='Encode the message in the PNG file with a given chunk type')
    encode.add_argument('file_path', help='PNG file path')
    encode.add_argument('chunk_type', help='Chunk type')
    encode.add_argument('message', help='Secret message')
    encode.add_argument('output_file', nargs='?', default=None, help='Optional output file path')

    decode = subparsers.add_parser('decode', help='Decode the message stored in the chunk with the given type')
    decode.add_argument('file_path', help='PNG file path')
    decode.add_argument('chunk_type', help='Chunk type')

    remove = subparsers.add_parser('remove', help='Remove the first chunk with the given type')
    remove.add_argument('file_path', help='PNG file path')
    remove.add_argument('chunk_type', help='Chunk type')

    _print = subparsers.add_parser('print', help='Print the list of the chunks in the PNG file')
    _print.add_argument('file_path', help='PNG file path')

    return parser


def run(args):
    if args.command == 'encode':
        png = commands.encode(args.file_path, args.chunk_type, args.message, args.output_file)
        print(png)
    elif args.command == 'decode':
        print(commands.decode(args.file_path, args.chunk_type))
    elif args.command == 'remove':
        chunk = commands.remove(args.file_path, args.chunk_type)
        print(chunk)
    elif args.command == 'print':
        print(commands.print_chunks(args.file_path))


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.WARNING)

    args = build_parser().parse_args(argv)

    try:
        run(args)
    except PNGMeException as e:
        logger.debug('%s failed' % args.command, exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1
    except OSError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0
