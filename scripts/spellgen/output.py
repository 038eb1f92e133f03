import json
from pathlib import Path


def write_json(spells, json_path: Path) -> None:
    # "w" truncates: a shorter result never leaves bytes from an older file
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(spells, f, ensure_ascii=False, indent=2)
        f.write("\n")
