# corpuskit

Three small command-line tools for working with text corpora, each also usable
as a library. All files are read and written as UTF-8.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## bard: ranked words by length

Reads a corpus of one word per line (by default `shakespeare-cleaned5.txt` in
the current directory; another file can be given with `--corpus`), groups the
words by length and ranks each group by frequency. Rank 0 is the most frequent
word of that length. When two words occur equally often, the one that sorts
first gets the lower rank.

Each query line holds a length and a rank. The answer is the matching word, or
`-` when there is none. Blank query lines are skipped. A line with only one
field raises `ValueError`.

```
bard queries.txt answers.txt
bard --corpus words.txt queries.txt answers.txt
```

As a library:

```python
from corpuskit.bard import WordRankTable, answer_queries

table = WordRankTable.from_lines(["the", "and", "the"])
table.lookup(3, 0)                        # "the"
table.lookup(3, 5)                        # None
table.rank("and")                         # 1
list(answer_queries(table, ["3 1\n"]))    # ["and"]
```

`WordRankTable.add(word)` records one more occurrence. `rank(word)` raises
`KeyError` for a word that was never added. `from_file(path)` reads a corpus
file.

## sixdegrees: co-star paths between actors

Reads a movie list (by default `cleaned_movielist.txt` in the current
directory; another file can be given with `--movies`). Each line is a movie
name followed by the actors in it, separated by spaces. Every pair of actors in
a movie is connected.

Each query line names two actors. The answer is a shortest chain between them,
such as `A -(Movie1)- B -(Movie2)- C`, or `Not present` when either actor is
unknown or no chain exists. When both names are the same, the answer is that
name alone.

```
sixdegrees queries.txt answers.txt
sixdegrees --movies movies.txt queries.txt answers.txt
```

As a library:

```python
from corpuskit.sixdegrees import ActorGraph

graph = ActorGraph.from_lines(["Heat Pacino De_Niro\n"])
"Pacino" in graph                          # True
graph.describe_path("Pacino", "De_Niro")   # "Pacino -(Heat)- De_Niro"
graph.shortest_path("Pacino", "De_Niro")   # [Step(movie="Heat", actor="De_Niro")]
```

`add_movie(movie, actors)` and `add_edge(actor, movie, other_actor)` build a
graph by hand. `shortest_path` returns `None` when the target cannot be reached
and raises `KeyError` when the starting actor is not in the graph.
`answer_queries(graph, lines)` yields one answer per query line.

## wordrange: counting words in a range

Reads a command file. `i WORD` inserts a word into a balanced search tree, and
a word that is already there is ignored. `r LOW HIGH` writes the number of
stored words `w` with `LOW <= w <= HIGH`, one count per line.

```
wordrange commands.txt counts.txt
```

As a library:

```python
from corpuskit.wordrange import WordTree, run_commands

tree = WordTree()
for word in ["apple", "banana", "cherry"]:
    tree.insert(word)          # True for a new word, False for a duplicate
tree.count_range("b", "d")     # 2
len(tree)                      # 3
list(tree)                     # ["apple", "banana", "cherry"]
tree.height()                  # 2

list(run_commands(["i cat\n", "i dog\n", "r a z\n"]))   # [2]
```

Each tool can also be started as a module, for example
`python -m corpuskit.wordrange commands.txt counts.txt`.