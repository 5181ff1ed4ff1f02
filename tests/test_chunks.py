from ungoliant.chunks import group_by


def test_group_by_simple():
    langs = [
        "en", "en",
        "fr", "fr", "fr", "fr",
        "en", "en",
        "fr", "fr",
        "es", "es", "es", "es",
    ]
    expected = {
        "en": [(0, 1), (6, 7)],
        "fr": [(2, 5), (8, 9)],
        "es": [(10, 13)],
    }
    assert group_by(langs) == expected


def test_group_by_empty():
    assert group_by([]) == {}


def test_group_by_single():
    assert group_by(["fr"]) == {"fr": [(0, 0)]}


def test_group_by_uniq():
    assert group_by(["fr"] * 10) == {"fr": [(0, 9)]}


def test_group_by_uniq_but_first():
    langs = ["it"] + ["fr"] * 10
    assert group_by(langs) == {"it": [(0, 0)], "fr": [(1, 10)]}


def test_group_by_uniq_but_last():
    langs = ["fr"] * 10 + ["it"]
    assert group_by(langs) == {"fr": [(0, 9)], "it": [(10, 10)]}


def test_group_by_order_of_first_appearance():
    result = group_by(["b", "a", "b", "c"])
    assert list(result) == ["b", "a", "c"]


def test_group_by_accepts_generator():
    result = group_by(x for x in [1, 1, 2])
    assert result == {1: [(0, 1)], 2: [(2, 2)]}


def test_group_by_ranges_cover_every_index():
    values = [1, 2, 2, 3, 1, 1, 3, 2]
    result = group_by(values)
    covered = sorted(
        i for ranges in result.values() for start, end in ranges for i in range(start, end + 1)
    )
    assert covered == list(range(len(values)))
    for value, ranges in result.items():
        for start, end in ranges:
            assert all(values[i] == value for i in range(start, end + 1))