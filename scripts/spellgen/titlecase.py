import re

SMALL_WORDS = {"a", "an", "on", "the", "to"}

# a letter that starts the word or follows punctuation: "o'clock" -> "O'Clock", "1st" stays
_WORD_START = re.compile(r"(?<!\w)[^\W\d_]")


def _title_word(word: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), word)


def proper_title(text: str) -> str:
    words = text.lower().split()
    for i, word in enumerate(words):
        if word == "&":
            word = "and"
        words[i] = word if word in SMALL_WORDS else _title_word(word)
    return " ".join(words)
