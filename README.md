# iterkit

Position-based iterators for Python. Each one has an explicit traversal
category. The package also has adaptors and checks built on them.

A Python iterator goes forward once and is then used up. The cursors in
`iterkit` point at a position instead. You can copy them, compare them
and move them forward. When the traversal allows it, you can also move
them back or jump by an offset.

The package has no dependencies beyond the standard library.

## Install

```
pip install iterkit
```

## Modules

### `iterkit.categories`

Tags are classes. A tag converts to another when it is a subclass of it.

- **Traversal tags**: `NoTraversal`, `IncrementableTraversal`,
  `SinglePassTraversal`, `ForwardTraversal`, `BidirectionalTraversal`,
  `RandomAccessTraversal`.
- **Classic category tags**: `OutputIteratorTag`, `InputIteratorTag`,
  `ForwardIteratorTag`, `BidirectionalIteratorTag`,
  `RandomAccessIteratorTag`, `InputOutputIteratorTag`.
- **Predicates**: `is_iterator_category`, `is_iterator_traversal`.
- **Conversions**:
  - `category_to_traversal` maps a category to its traversal. Traversal
    tags pass through unchanged.
  - `pure_traversal` reduces a tag to one of the five standard traversals.
  - `iterator_traversal` reads an object's `iterator_category` attribute
    and returns its traversal.
  - `minimum_traversal(*tags)` returns the weakest of the given tags. With
    no arguments it returns `RandomAccessTraversal`.
  - `category_with_traversal` builds a cached composite tag that converts
    to both a category and a stronger traversal.
  - `facade_iterator_category` computes the category of an iterator from
    three inputs: its traversal, whether it reads lvalues, and whether it
    is readable.

Invalid tags raise `TypeError`.

### `iterkit.cursor`

- **`SequenceCursor(sequence, position=0, traversal=RandomAccessTraversal, readonly=False)`**
  is a cursor over any sequence.
  - Methods: `value()`, `increment()`, `decrement()`, `advance(n)`,
    `distance_to(other)`, `copy()`.
  - Indexing: `cursor[offset]` reads and `cursor[0] = x` writes.
  - Operators: `==`, `<` and the other orderings, `cursor + n`,
    `n + cursor`, `cursor - n`, `cursor - other`.
  - An operation the traversal does not allow raises `TypeError`.
  - Moving outside `0..len(sequence)` raises `IndexError`, as does reading
    the past-the-end position.
  - Comparing or subtracting cursors over different sequences raises
    `ValueError`.
  - Writing through a read-only cursor raises `TypeError`.
- **`distance(first, last)`** subtracts random-access iterators. For any
  other iterator it counts the increments a copy of `first` needs to reach
  `last`.
- **`is_interoperable(a, b)`** is true when one type (or the type of one
  instance) is a subclass of the other.

### `iterkit.advance`

`advance(iterator, n)` moves an iterator in place and returns it. How it
moves depends on the traversal:

- **Random access**: jumps with `advance(n)`.
- **Bidirectional**: steps one at a time, forwards or backwards.
- **Anything weaker**: only steps forwards, so a negative `n` leaves the
  iterator where it is.

### `iterkit.zip`

`ZipIterator(iterators)` and `make_zip_iterator(iterators)` hold copies of
several iterators and move them together.

- `value()` returns a tuple of the component values.
- The traversal is the weakest among the components.
- Distances are measured on the first component.
- An empty list of iterators raises `ValueError`.

### `iterkit.output`

`FunctionOutputIterator(function)` and
`make_function_output_iterator(function)` build an output iterator.

- `write(value)` calls the function with the value.
- `increment()` does nothing.
- Both methods return the iterator.

### `iterkit.node`

`Node(value)` is a singly linked list node.

- `append(node)` attaches a chain at the end of the list. It raises
  `ValueError` if that would make the list cyclic.
- `double_me()` replaces the value with `value + value`.
- Iterating over a node yields it and every node after it.
- `str(node)` is `str(node.value)`.

### `iterkit.concepts`

These functions check that an iterator supports the operations a concept
needs:

- `check_readable`, `check_writable`, `check_swappable`, `check_lvalue`
- `check_incrementable`, `check_single_pass`, `check_forward`,
  `check_bidirectional`, `check_random_access`
- `check_interoperable`

A failure raises `ConceptError`, a subclass of `TypeError`. The traversal
checks return the iterator's pure traversal.

### `iterkit.checks`

These are behavioural checks that exercise an iterator on copies:

- `trivial_iterator_test`, `mutable_trivial_iterator_test`
- `input_iterator_test`, `forward_iterator_test`,
  `bidirectional_iterator_test`, `random_access_iterator_test`
- `const_nonconst_iterator_test`
- `readable_iterator_test`, `writable_iterator_test`,
  `swappable_iterator_test`
- `constant_lvalue_iterator_test`, `non_const_lvalue_iterator_test`
- `forward_readable_iterator_test`, `forward_swappable_iterator_test`
- `bidirectional_readable_iterator_test`,
  `random_access_readable_iterator_test`

The first broken expectation raises `IteratorCheckFailed`, a subclass of
`AssertionError`.

## Example

```python
from iterkit.advance import advance
from iterkit.categories import ForwardTraversal
from iterkit.cursor import SequenceCursor, distance
from iterkit.output import make_function_output_iterator
from iterkit.zip import make_zip_iterator

numbers = [42, 72]
words = ["kokoro", "pyonpyon"]

first = make_zip_iterator((SequenceCursor(numbers), SequenceCursor(words)))
last = make_zip_iterator(
    (SequenceCursor(numbers, len(numbers)), SequenceCursor(words, len(words)))
)

print(first.value())          # (42, 'kokoro')
print((first + 1).value())    # (72, 'pyonpyon')
print(last - first)           # 2

start = SequenceCursor([1, 2, 3, 4])
print(distance(start, start + 4))  # 4

forward = SequenceCursor([1, 2, 3, 4], traversal=ForwardTraversal)
print(advance(forward, 2).value())  # 3

collected = []
out = make_function_output_iterator(collected.append)
out.write(1).increment().write(2)
print(collected)              # [1, 2]
```

## What it does not include

`iterkit` is a library only and has no command-line tool. It provides two
adaptors:

- the zip adaptor
- the function output adaptor

It has no reversing or transforming adaptors over cursors. Python's own
`reversed` and `map` serve for plain sequences.

## Running the tests

```
pip install -e ".[test]"
pytest
```