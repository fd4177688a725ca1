# dupfind/core/hasher.py
import hashlib
from typing import BinaryIO

from .errors import HashError

HASH_ALGORITHM = "md5"
DEFAULT_BLOCK_SIZE = 65536

def hash_stream(byte_stream: BinaryIO, block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """Digest everything left in byte_stream, as lowercase hex."""
    digest = hashlib.new(HASH_ALGORITHM)
    for block in iter(lambda: byte_stream.read(block_size), b''):
        digest.update(block)
    return digest.hexdigest()

def hash_file(file_path: str, block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """
    Returns the MD5 digest of a file's full contents as a lowercase hex string.

    The file is read sequentially in blocks of block_size bytes, with a new
    accumulator per call. Nothing is cached, so every call re-reads the file.

    Raises:
        HashError: the file could not be opened or fully read.
    """
    try:
        with open(file_path, 'rb') as f:
            return hash_stream(f, block_size)
    except OSError as e:
        raise HashError(file_path, e) from e
