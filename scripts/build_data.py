import sys

from spellgen.data_loader import iter_rows
from spellgen.errors import FieldCountError, SpellDataError
from spellgen.output import write_json
from spellgen.records import convert_rows
from spellgen.shapes import json_path_for, shape_for_path
from spellgen.validate import validate_spells


def csv_to_json(csv_path: str) -> int:
    shape = shape_for_path(csv_path)

    try:
        spells = convert_rows(iter_rows(csv_path), shape)
    except FieldCountError as e:
        print(f"ERROR line {e.row_number}: {e}")
        return 1
    except (OSError, SpellDataError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for w in validate_spells(spells):
        print(f"WARNING: {w}")

    try:
        json_path = json_path_for(csv_path)
        write_json(spells, json_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: failed creating file: {e}", file=sys.stderr)
        return 1

    print(f"File created: {json_path}")
    return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or not args[0]:
        print("Requires file name")
        return 2
    return csv_to_json(args[0])


if __name__ == "__main__":
    sys.exit(main())
