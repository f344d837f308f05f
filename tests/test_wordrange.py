import math

from corpuskit.wordrange import WordTree, main, run_commands

WORDS = ["pear", "apple", "fig", "banana", "cherry", "kiwi", "date", "grape"]


def build(words):
    tree = WordTree()
    for word in words:
        tree.insert(word)
    return tree


def test_iteration_is_sorted_and_distinct():
    tree = build(WORDS + ["fig", "apple"])
    assert list(tree) == sorted(set(WORDS))
    assert len(tree) == len(set(WORDS))


def test_insert_reports_duplicates():
    tree = WordTree()
    assert tree.insert("word") is True
    assert tree.insert("word") is False
    assert list(tree) == ["word"]


def test_membership():
    tree = build(WORDS)
    assert all(word in tree for word in WORDS)
    assert "zucchini" not in tree


def test_empty_tree():
    tree = WordTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert tree.count_range("a", "z") == 0


def test_height_stays_logarithmic_for_sorted_input():
    words = [f"w{i:05d}" for i in range(1000)]
    tree = build(words)
    assert len(tree) == len(words)
    assert tree.height() <= 1.45 * math.log2(len(words) + 2)
    assert list(tree) == words


def test_full_range_counts_everything():
    tree = build(WORDS)
    ordered = sorted(WORDS)
    assert tree.count_range(ordered[0], ordered[-1]) == len(WORDS)


def test_range_bounds_are_inclusive():
    tree = build(WORDS)
    for word in WORDS:
        assert tree.count_range(word, word) == 1
    assert tree.count_range("b", "c") == 1


def test_reversed_range_is_empty():
    tree = build(WORDS)
    assert tree.count_range("z", "a") == 0


def test_ranges_split_additively():
    words = [f"w{i:03d}" for i in range(200)]
    tree = build(reversed(words))
    left = tree.count_range("w000", "w099")
    right = tree.count_range("w100", "w199")
    assert left + right == len(tree)
    assert left == right


def test_run_commands():
    lines = ["i apple\n", "i banana\n", "i apple\n", "r a z\n", "r apple apple\n"]
    assert list(run_commands(lines)) == [2, 1]


def test_main_writes_counts(tmp_path):
    commands = tmp_path / "commands.txt"
    commands.write_text(
        "".join(f"i {word}\n" for word in WORDS) + "r a zz\nr zz a\n",
        encoding="utf-8",
    )
    output = tmp_path / "out.txt"

    assert main([str(commands), str(output)]) == 0
    assert output.read_text(encoding="utf-8") == f"{len(WORDS)}\n0\n"