# lrukit

A small library of hand-built containers, together with a least-recently-used
cache that is built on top of them, a `Person` record with helpers for
generating random people, and a collector that plots several series of points
with matplotlib.

## What is inside

- `lrukit.hashing`: hash functions. `hash_int` returns the absolute value;
  `hash_string` and `hash_text_sum` sum character codes modulo `MODULUS`
  (10^9 + 7).
- `lrukit.textutils`: `int_to_string`, `string_to_double` (digits and dots
  only, anything else raises `ValueError`), `read_padded` (reads up to a fixed
  number of characters of one line and returns a `PaddedRead` of text and a
  `complete` flag) and `pad_to_length`.
- `lrukit.dynamicarray.DynamicArray`: an array whose length is its capacity.
  It can be resized with `resize`, exchanged with another with `swap`, and
  shrunk by one with `del array[i]`. Negative indices are rejected with
  `IndexError`.
- `lrukit.linkedlist.LinkedList`: a doubly linked list. `append` and
  `prepend` return the new `ListNode`; `erase(node)` removes a node in constant
  time. Also `insert_at`, `remove`, `pop_first`, `first`, `last`, `head`,
  `tail`, `nodes`, `sublist` and `concat`.
- `lrukit.dictionary.HashDictionary`: a separate-chaining hash table built
  from the two containers above, with a hash function you supply and a
  configurable fill factor, growth factor and starting capacity. It supports
  `add`, `remove`, `in`, `d[key]`, `d[key] = value`, `len`, iteration over
  keys, `items()` and `capacity()`. `fill_random(size, dictionary, rng)` adds
  `size` distinct random integers, each mapped to itself.
- `lrukit.lrucache.LRUCache`: a fixed-capacity cache in front of a loader
  function. `get(key)` returns a `CacheResult` holding the `value` and a `hit`
  flag; on a miss the loader is called and, when the cache is full, the least
  recently used key is evicted. If the loader raises, the exception propagates
  and the cache is left unchanged. `keys()` lists the cached keys from least to
  most recently used.
- `lrukit.sequence`: `MutableArraySequence` changes itself in place;
  `ImmutableArraySequence` returns a modified copy from every change. Both
  offer `first`, `last`, `capacity`, `set`, `append`, `prepend`, `insert_at`,
  `delete`, `subsequence`, `concat` and `new_sequence`.
- `lrukit.person`: the frozen `Person` dataclass (id, first, middle and last
  name, birth year; equality ignores the birth year), `Person.default()`,
  `read_person` for interactive entry from a text stream, `hash_person`, and
  the orderings `int_less`, `int_less_equal`, `person_less` and
  `person_less_equal`.
- `lrukit.generate`: `load_words(path, count)` reads whitespace-separated
  words from a UTF-8 file; `generate_people(count, names, surnames, rng)`
  builds a `MutableArraySequence` of randomly named people with padded fields.
- `lrukit.realtimeplot.RealTimePlot`: collects points row by row for several
  named, coloured series; `end_input()` sorts each series by x and builds a
  matplotlib `Figure`, available from `figure()`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

An LRU cache:

```python
from lrukit.hashing import hash_int
from lrukit.lrucache import LRUCache

def load(key):
    return key * key

cache = LRUCache(load, 2, hash_int)
first = cache.get(3)   # CacheResult(value=9, hit=False): the loader runs
again = cache.get(3)   # CacheResult(value=9, hit=True): served from the cache
print(cache.keys())    # [3]
```

A `HashDictionary` works like a mapping whose hash function you supply:

```python
from lrukit.dictionary import HashDictionary
from lrukit.hashing import hash_string

table = HashDictionary(hash_string)
table.add("apple", 1)
print("apple" in table, table["apple"], len(table))
```

Adding a key that is already present raises `ValueError`; removing or looking
up a missing key raises `KeyError`.

Plotting collected points:

```python
from lrukit.realtimeplot import RealTimePlot

plot = RealTimePlot(["insert", "lookup"], ["red", "blue"], "Timings")
plot.add_data([((1, 0.5), True), ((1, 0.2), True)])
plot.add_data([((2, 0.9), True), ((2, 0.0), False)])  # second series skips this row
plot.end_input()
plot.figure().savefig("timings.png")
```

## What the package does not do

lrukit is a library only. It installs no command-line program, opens no
windows and has no graphical front end: `RealTimePlot` builds a matplotlib
figure that you save or display yourself. It ships no name or surname lists;
pass your own word files to `load_words`.