# dupfind/core/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Any

@dataclass
class DigestEntry:
    size: int = 0 # in bytes, taken from the last file added
    files: List[str] = field(default_factory=list) # discovery order

    @property
    def instances(self) -> int:
        return len(self.files)

    @property
    def is_duplicate(self) -> bool:
        return len(self.files) > 1

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self.size, "files": list(self.files)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DigestEntry":
        return cls(size=int(data["size"]), files=list(data["files"]))


# digest -> entry; keys are unique, order carries no meaning
DuplicateIndex = Dict[str, DigestEntry]


@dataclass
class ScanReport:
    scanned_directory: str
    include_all: bool = False
    total_files: int = 0 # distinct digests seen, before filtering
    groups: Dict[str, DigestEntry] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict) # path: error_message

    @property
    def duplicate_entries(self) -> int:
        return len(self.groups)