from readme_index.core.collation import get_collator, russian_sort_key


def _sorted(words):
    return sorted(words, key=russian_sort_key)


def test_cyrillic_alphabet_order() -> None:
    assert _sorted(["Я", "Б", "А", "Ж"]) == ["А", "Б", "Ж", "Я"]


def test_yo_sorts_with_ye_before_zhe() -> None:
    assert _sorted(["ж", "ё", "е"]) == ["е", "ё", "ж"]


def test_lowercase_before_uppercase_on_ties() -> None:
    assert _sorted(["Б", "А", "а"]) == ["а", "А", "Б"]


def test_cyrillic_before_latin_and_digits_first() -> None:
    assert _sorted(["Zebra", "apple", "яблоко", "2 совета"]) == ["2 совета", "яблоко", "apple", "Zebra"]


def test_collator_is_shared() -> None:
    assert get_collator() is get_collator()
