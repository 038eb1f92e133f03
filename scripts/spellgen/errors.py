class SpellDataError(Exception):
    """Raised when spell data can't be read or converted."""


class FieldCountError(SpellDataError):
    def __init__(self, row_text: str, row_number=None):
        super().__init__("incorrect number of fields")
        self.row_text = row_text
        self.row_number = row_number

    def __str__(self):
        return f"incorrect number of fields: {self.row_text}"
