# dupfind/core/duplicate_index.py
import os
import sys
from typing import Dict, Iterator, List, Optional
from tqdm import tqdm

from .errors import HashError, TraversalError
from .hasher import hash_file
from .models import DigestEntry, DuplicateIndex, ScanReport

def iter_files(root_dir: str) -> Iterator[str]:
    """
    Yields every non-directory entry below root_dir, recursively.

    Symlinks and special files are yielded like regular files. Order follows
    os.walk and must not be relied on.

    Raises:
        TraversalError: root_dir is missing, not a directory or unreadable.
    """
    root_norm = os.path.normpath(root_dir)

    def on_walk_error(error: OSError) -> None:
        if error.filename is None or os.path.normpath(error.filename) == root_norm:
            raise TraversalError(root_dir, error)
        print(f"Warning: skipping unreadable directory {error.filename}: {error.strerror}", file=sys.stderr)

    for dirpath, _, filenames in os.walk(root_dir, onerror=on_walk_error):
        for filename in filenames:
            yield os.path.join(dirpath, filename)

def add_file(index: DuplicateIndex, file_path: str) -> str:
    """Hashes file_path and records it in index. Returns the digest."""
    file_hash = hash_file(file_path)
    try:
        file_size = os.path.getsize(file_path)
    except OSError as e:
        raise HashError(file_path, e) from e

    entry = index.setdefault(file_hash, DigestEntry())
    entry.size = file_size
    entry.files.append(file_path)
    return file_hash

def build_index(
    root_dir: str,
    progress: bool = False,
    skip_errors: bool = False,
    errors: Optional[Dict[str, str]] = None
) -> DuplicateIndex:
    """
    Walks root_dir and groups every file found by content digest.

    By default the first file that cannot be hashed aborts the whole scan with
    HashError. With skip_errors, the file is left out, its error message is
    stored in errors (when a dict is given) and the scan goes on.
    """
    file_paths: List[str] = list(iter_files(root_dir))
    index: DuplicateIndex = {}

    with tqdm(total=len(file_paths),
              desc="Hashing files",
              unit="file",
              disable=not progress) as pbar:
        for file_path in file_paths:
            try:
                add_file(index, file_path)
            except HashError as e:
                if not skip_errors:
                    raise
                if errors is not None:
                    errors[file_path] = str(e.cause)
            pbar.update(1)

    return index

def select_groups(index: DuplicateIndex, include_all: bool = False) -> Dict[str, DigestEntry]:
    """Derived view of index: every group, or only groups with more than one file."""
    return {
        file_hash: entry
        for file_hash, entry in index.items()
        if include_all or entry.is_duplicate
    }

def scan(
    root_dir: str,
    include_all: bool = False,
    progress: bool = False,
    skip_errors: bool = False
) -> ScanReport:
    report = ScanReport(scanned_directory=root_dir, include_all=include_all)
    index = build_index(root_dir, progress=progress, skip_errors=skip_errors, errors=report.errors)
    report.total_files = len(index)
    report.groups = select_groups(index, include_all)
    return report
