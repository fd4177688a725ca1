# dupfind/ui/text_reporter.py
import os
from typing import Dict, List
from dupfind.core.models import DigestEntry, ScanReport

def pluralize(count: int) -> str:
    # Only exactly one drops the "s"; zero is plural.
    return "" if count == 1 else "s"

def display_path(file_path: str) -> str:
    # Undecodable bytes in file names come back from os.walk as surrogates; show U+FFFD instead.
    return os.fsencode(file_path).decode("utf-8", "replace")

def format_summary(report: ScanReport) -> List[str]:
    lines = [f"Total files: {report.total_files}"]
    if not report.include_all:
        lines.append(f"Duplicate entries: {report.duplicate_entries}")
    return lines

def format_group(file_hash: str, entry: DigestEntry) -> List[str]:
    """
    One header line for the group, then one "- path" line per file.

    Example:
        5d41402abc4b2a76b9719d911017c592: 5 bytes, 2 instances
        - ./a.txt
        - ./b.txt
    """
    count = entry.instances
    lines = [f"{file_hash}: {entry.size} bytes, {count} instance{pluralize(count)}"]
    lines.extend(f"- {display_path(file_path)}" for file_path in entry.files)
    return lines

def render_text_report(groups: Dict[str, DigestEntry]) -> str:
    lines: List[str] = []
    for file_hash, entry in groups.items():
        lines.extend(format_group(file_hash, entry))
    return "\n".join(lines)
