# dupfind/ui/json_reporter.py
import json
from typing import Dict
from dupfind.core.errors import WriteError
from dupfind.core.models import DigestEntry

def groups_to_json(groups: Dict[str, DigestEntry]) -> str:
    """Serializes groups as {digest: {"size": int, "files": [path, ...]}}."""
    return json.dumps({file_hash: entry.to_dict() for file_hash, entry in groups.items()})

def write_json_report(groups: Dict[str, DigestEntry], output_json_path: str) -> None:
    """
    Writes the JSON rendering of groups to output_json_path.

    Raises:
        WriteError: the destination could not be opened or written.
    """
    json_content = groups_to_json(groups)
    try:
        with open(output_json_path, 'w', encoding='utf-8') as f:
            f.write(json_content)
    except OSError as e:
        raise WriteError(output_json_path, e) from e

def load_json_report(json_path: str) -> Dict[str, DigestEntry]:
    with open(json_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return {file_hash: DigestEntry.from_dict(value) for file_hash, value in data.items()}
