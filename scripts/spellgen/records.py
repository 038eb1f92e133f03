from typing import Dict, Iterable, List, Tuple

from spellgen.errors import FieldCountError
from spellgen.shapes import ROW_WIDTH, VERBATIM_FIELDS, SpellShape
from spellgen.titlecase import proper_title


def convert_row(row: List[str], shape: SpellShape, normalize: bool = True) -> Dict[str, str]:
    if len(row) != ROW_WIDTH:
        raise FieldCountError(",".join(row))

    spell = {}
    for key, index in shape.fields:
        value = row[index]
        if normalize and key not in VERBATIM_FIELDS:
            value = proper_title(value)
        spell[key] = value
    return spell


def convert_rows(rows: Iterable[Tuple[int, List[str]]], shape: SpellShape) -> List[Dict[str, str]]:
    spells = []
    for row_number, row in rows:
        try:
            spells.append(convert_row(row, shape))
        except FieldCountError as e:
            e.row_number = row_number
            raise
    return spells
