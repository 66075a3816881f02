"""Romaji to kana conversion and SKK dictionary lookup for search queries."""

from __future__ import annotations

from collections.abc import Iterable

_VOWELS = "aiueo"

# Full five-vowel rows of the kana table, keyed by their romaji consonant.
_FULL_ROWS = {
    "": "あいうえお",
    "k": "かきくけこ",
    "s": "さしすせそ",
    "t": "たちつてと",
    "n": "なにぬねの",
    "h": "はひふへほ",
    "m": "まみむめも",
    "r": "らりるれろ",
    "g": "がぎぐげご",
    "z": "ざじずぜぞ",
    "d": "だぢづでど",
    "b": "ばびぶべぼ",
    "p": "ぱぴぷぺぽ",
}

_PARTIAL_ROWS = {"y": ("auo", "やゆよ"), "w": ("ao", "わを")}

_ALTERNATE_SPELLINGS = {"shi": "し", "chi": "ち", "tsu": "つ", "fu": "ふ", "ji": "じ"}

# Consonants that combine with a small ya/yu/yo, with the i-column kana they start from.
_YOON_CONSONANTS = dict(zip("kstnhmrgzdbp", "きしちにひみりぎじぢびぴ"))
_YOON_ALTERNATES = {"sh": "し", "ch": "ち", "j": "じ"}
_SMALL_Y = dict(zip("auo", "ゃゅょ"))

_KATAKANA_OFFSET = ord("ア") - ord("あ")


def _build_romaji_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for consonant, kana_row in _FULL_ROWS.items():
        table.update({consonant + vowel: kana for vowel, kana in zip(_VOWELS, kana_row)})
    for consonant, (vowels, kana_row) in _PARTIAL_ROWS.items():
        table.update({consonant + vowel: kana for vowel, kana in zip(vowels, kana_row)})
    table.update(_ALTERNATE_SPELLINGS)

    for consonant, i_kana in _YOON_CONSONANTS.items():
        for vowel, small in _SMALL_Y.items():
            table[f"{consonant}y{vowel}"] = i_kana + small
    for prefix, i_kana in _YOON_ALTERNATES.items():
        for vowel, small in _SMALL_Y.items():
            table[prefix + vowel] = i_kana + small

    # A doubled leading consonant is written with a small tsu ("ch" doubles as "tch").
    doubled = {}
    for spelling, kana in table.items():
        if spelling[0] in _VOWELS or spelling == "fu":
            continue
        lead = "t" if spelling.startswith("ch") else spelling[0]
        doubled[lead + spelling] = "っ" + kana
    table.update(doubled)

    table.update({"n": "ん", "nn": "ん", "-": "ー"})
    return table


def _build_katakana_table() -> dict[int, str]:
    hiragana = "".join(_FULL_ROWS.values())
    hiragana += "".join(kana for _, kana in _PARTIAL_ROWS.values())
    hiragana += "ん" + "".join(_SMALL_Y.values()) + "っ"
    return str.maketrans({ch: chr(ord(ch) + _KATAKANA_OFFSET) for ch in hiragana})


_ROMAJI_TO_HIRAGANA = _build_romaji_table()
_HIRAGANA_TO_KATAKANA = _build_katakana_table()
_LONGEST_ROMAJI = max(map(len, _ROMAJI_TO_HIRAGANA))


def parse_skk_dictionary(lines: Iterable[str]) -> dict[str, list[str]]:
    """Parse SKK dictionary lines (``reading /cand1;note/cand2/``) into a mapping."""
    dictionary: dict[str, list[str]] = {}
    for raw in lines:
        line = raw.rstrip("\n").rstrip("\r")
        if not line or line.startswith(";"):
            continue
        parts = line.split(" ")
        if len(parts) != 2:
            continue
        reading, entries = parts
        dictionary[reading] = [
            candidate.split(";", 1)[0] for candidate in entries.strip("/").split("/")
        ]
    return dictionary


def contains_japanese(text: str) -> bool:
    """Return True if ``text`` holds any hiragana, katakana or kanji."""
    return any(
        0x3040 <= ord(ch) <= 0x309F
        or 0x30A0 <= ord(ch) <= 0x30FF
        or 0x4E00 <= ord(ch) <= 0x9FFF
        for ch in text
    )


class RomajiConverter:
    """Expands a query into its kana forms and dictionary kanji candidates."""

    def __init__(self, dictionary: dict[str, list[str]] | None = None) -> None:
        self.dict: dict[str, list[str]] = dict(dictionary or {})

    @classmethod
    def from_file(cls, path: str) -> "RomajiConverter":
        """Load a converter from an SKK dictionary file."""
        with open(path, encoding="utf-8") as stream:
            return cls(parse_skk_dictionary(stream))

    def convert(self, query: str) -> list[str]:
        """Return the query followed by its hiragana, katakana and kanji forms, without duplicates."""
        results = [query]
        if contains_japanese(query):
            hiragana = query
        else:
            hiragana = self.to_hiragana(query)
            if hiragana:
                results.append(hiragana)

        katakana = self.to_katakana(hiragana)
        if katakana:
            results.append(katakana)

        results.extend(self.dict.get(hiragana, []))
        return list(dict.fromkeys(results))

    def to_hiragana(self, romaji: str) -> str:
        """Convert romaji to hiragana by longest match; unknown characters are dropped."""
        text = romaji.lower()
        pieces = []
        position = 0
        while position < len(text):
            for end in range(min(len(text), position + _LONGEST_ROMAJI), position, -1):
                kana = _ROMAJI_TO_HIRAGANA.get(text[position:end])
                if kana is not None:
                    pieces.append(kana)
                    position = end
                    break
            else:
                position += 1
        return "".join(pieces)

    def to_katakana(self, hiragana: str) -> str:
        """Convert hiragana to katakana, leaving other characters unchanged."""
        return hiragana.translate(_HIRAGANA_TO_KATAKANA)