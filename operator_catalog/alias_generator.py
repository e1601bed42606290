"""
Searchable aliases for operator names.
Combines pinyin readings, first-letter readings and the traditional-script form.
"""

from itertools import chain, product
from typing import Dict, Iterable, Iterator

from opencc import OpenCC
from pypinyin import Style, lazy_pinyin, pinyin

from .constants import QUOTE_CHARACTERS

ALIAS_STYLES = (Style.NORMAL, Style.FIRST_LETTER)

_s2t = OpenCC('s2t')
_quote_table = str.maketrans('', '', QUOTE_CHARACTERS)


def strip_quotes(text: str) -> str:
    return text.translate(_quote_table)


def to_traditional(text: str) -> str:
    """Convert simplified Chinese to traditional, character by character."""
    return _s2t.convert(text)


def pinyinify(name: str) -> Iterator[str]:
    """
    Yield every reading of `name`, full syllables first, then first letters.
    Heteronyms are expanded into all combinations, each joined without separator.
    """
    for style in ALIAS_STYLES:
        readings = pinyin(name, style=style, heteronym=True)
        for combination in product(*readings):
            yield ''.join(combination)


def unique(items: Iterable[str]) -> list:
    """Drop repeats, keeping first occurrence order"""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def generate_aliases(name: str) -> Dict[str, str]:
    """
    Build the alias string for a display name.

    The returned name is the original one; only derived forms are cleaned of
    quote characters before transliteration.
    """
    cleaned_name = strip_quotes(name)

    traditional = to_traditional(name)
    cleaned_traditional = strip_quotes(traditional)

    candidates = chain(
        pinyinify(cleaned_name),
        (traditional, cleaned_traditional),
        pinyinify(cleaned_traditional),
    )

    return {
        'name': name,
        'alias': ' '.join(unique(candidates)),
    }


def phonetic_key(name: str) -> str:
    """Sort key ordering names by their toned pinyin reading"""
    return ','.join(lazy_pinyin(name, style=Style.TONE3)).casefold()
