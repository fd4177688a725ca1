# dupfind/core/__init__.py
from .models import DigestEntry, DuplicateIndex, ScanReport
from .errors import DupFindError, TraversalError, HashError, WriteError
from .hasher import hash_file, hash_stream
from .duplicate_index import iter_files, add_file, build_index, select_groups, scan
