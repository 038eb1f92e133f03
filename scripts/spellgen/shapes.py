from enum import Enum
from pathlib import Path

ROW_WIDTH = 11

# fields copied as-is, without title-casing
VERBATIM_FIELDS = {"components"}


class SpellShape(Enum):
    # key -> position in the CSV row, in the order keys are emitted
    WIZARD = (
        ("level", 0),
        ("name", 1),
        ("reversible", 2),
        ("school", 3),
        ("range", 4),
        ("components", 5),
        ("material", 6),
        ("casting_time", 7),
        ("duration", 8),
        ("area_of_effect", 9),
        ("saving_throw", 10),
    )
    CLERIC = (
        ("level", 0),
        ("name", 1),
        ("reversible", 2),
        ("material", 3),
        ("sphere", 4),
        ("range", 5),
        ("components", 6),
        ("casting_time", 7),
        ("duration", 8),
        ("area_of_effect", 9),
        ("saving_throw", 10),
    )

    @property
    def fields(self):
        return self.value

    @property
    def keys(self):
        return [key for key, _ in self.value]


def shape_for_path(path) -> SpellShape:
    # first character of the path as given: "Wizard.csv" -> wizard, "data/Wizard.csv" -> cleric
    return SpellShape.WIZARD if str(path)[:1] == "W" else SpellShape.CLERIC


def json_path_for(csv_path) -> Path:
    return Path(csv_path).with_suffix(".json")
