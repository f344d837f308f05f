import pytest

from corpuskit.bard import WordRankTable, answer_queries, main

CORPUS = ["the", "and", "the", "cat", "a", "the", "and", "dog", "i", "a", "a"]


@pytest.fixture
def table():
    return WordRankTable.from_lines(word + "\n" for word in CORPUS)


def test_most_frequent_word_has_rank_zero(table):
    assert table.lookup(3, 0) == "the"
    assert table.lookup(3, 1) == "and"
    assert table.lookup(1, 0) == "a"


def test_ties_are_broken_by_string_order(table):
    assert table.lookup(3, 2) == "cat"
    assert table.lookup(3, 3) == "dog"
    assert table.rank("cat") < table.rank("dog")


def test_ranks_form_a_permutation_per_length(table):
    three_letter = {w for w in CORPUS if len(w) == 3}
    ranks = sorted(table.rank(w) for w in three_letter)
    assert ranks == list(range(len(three_letter)))


def test_lookup_out_of_range_is_none(table):
    assert table.lookup(3, len(CORPUS)) is None
    assert table.lookup(7, 0) is None
    assert table.lookup(3, -1) is None


def test_rank_of_unknown_word_raises(table):
    with pytest.raises(KeyError):
        table.rank("zebra")


def test_add_updates_ranking():
    table = WordRankTable()
    table.add("b")
    table.add("a")
    assert table.lookup(1, 0) == "a"
    table.add("b")
    assert table.lookup(1, 0) == "b"
    assert table.rank("a") == 1


def test_answer_queries(table):
    answers = list(answer_queries(table, ["3 0\n", "1 1\n", "9 0\n", "3 40\n"]))
    assert answers == ["the", "i", "-", "-"]


def test_answer_queries_rejects_single_field(table):
    with pytest.raises(ValueError):
        list(answer_queries(table, ["3\n"]))


def test_main_writes_answers(tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("\n".join(CORPUS) + "\n", encoding="utf-8")
    queries = tmp_path / "queries.txt"
    queries.write_text("3 0\n3 1\n5 0\n", encoding="utf-8")
    output = tmp_path / "out.txt"

    assert main([str(queries), str(output), "--corpus", str(corpus)]) == 0
    assert output.read_text(encoding="utf-8") == "the\nand\n-\n"