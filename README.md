# csrgraph

Building blocks for working with graphs given as edge lists: parsers for
common graph file formats, integer arithmetic helpers, bit operations over
word arrays, sorted-sequence searches and merges, and small text-formatting
helpers. Pure Python, no dependencies.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `csrgraph.readers`

Parsers that take a text stream positioned just after a file's header and
return the edge list as `(src, dst)` tuples, or `(src, dst, weight)` for
the weighted formats. Vertex ids in the result are zero-based.

- `parse_market_edges(stream, num_lines)`: one-based `src dst` pairs of a
  Matrix Market body; anything after the pair on a line is ignored.
- `parse_market_label_edges(stream, num_lines)`: pairs of string labels,
  numbered in order of first appearance.
- `parse_dimacs9_edges(stream)`: every line starting with `a` (`a src dst ...`);
  other lines are skipped.
- `parse_konect_edges(stream, num_lines)`: one-based `src dst` pairs.
- `parse_netrepo_edges(stream)`: one-based `src,dst` lines up to the end of
  the stream; returns `(edges, number_of_distinct_vertex_ids)`.
- `parse_dimacs10_edges(stream, num_lines)`: line `i` lists the one-based
  neighbours of vertex `i`.
- `parse_snap_edges(stream, num_lines)`: skips leading `#` comment lines,
  then reads pairs and renumbers ids densely in order of first appearance.
- `parse_weighted_market_edges(stream, num_lines, weight_type=int)` and
  `parse_weighted_snap_edges(stream, num_lines, weight_type=int)`: the same
  with a third column converted by `weight_type`.

Running out of input before `num_lines` lines raises `ValueError`, as do
malformed DIMACS 9 arc lines and Network Repository lines.

### `csrgraph.numeric`

Integer helpers: `ceil_div`, `round_div` (halves rounded up, non-negative
operands), `upper_approx`, `lower_approx`, `is_power2`, `factorial`,
`roundup_pow2`, `rounddown_pow2`, `log2`, `ceil_log2`, `int_log`,
`ceil_int_log`, `int_pow`, `geometric_serie`, `per_cent`, `mcd` (greatest
common divisor) and `check_overflow`. Division by zero raises
`ZeroDivisionError`; out-of-domain arguments raise `ValueError`.

### `csrgraph.bits`

- `read_bit`, `write_bit`, `delete_bit`, `write_bits`, `delete_bits`: bit
  arrays packed into a list of integer words of `word_bits` bits (64 by
  default); ranges are half-open `[start, end)`.
- `compare_float_abs(a, b, epsilon)` and `compare_float_relative(a, b, epsilon)`.
- `multiply_shift_hash32` and `multiply_shift_hash64`: multiply-shift hashing
  into a power-of-two number of bins.
- `WeightedRandomGenerator(weights, seed=None)`: `get()` returns an index
  with probability proportional to its weight.

### `csrgraph.algorithm`

- `UniqueMap`: a `dict` whose `insert(key)` returns a dense id, assigning the
  next one to new keys.
- `equal_sorted`, `sort_by_key(keys, *data)` (sorts `keys` in place and
  reorders every data list the same way), `merge`, `inplace_merge`.
- `lower_bound_left`, `lower_bound_right`, `upper_bound_left`,
  `upper_bound_right`, `binary_search` (returns `len(mem)` when absent) and
  `merge_path_search(a, b, diagonal)`.
- `NaturalIterator(start)`: `it[i] == start + i`.

### `csrgraph.printext`

`human_readable(size)` (`"2 KB"`, `"3 MB"`, ...), `thousands(value)`,
`char_sequence(char, length)`, `title(text, char, length)`,
`array_to_string(values, label, sep)` and `print_array(...)`.

## Example

    import io
    from csrgraph.readers import parse_snap_edges
    from csrgraph.numeric import ceil_div, roundup_pow2
    from csrgraph.algorithm import lower_bound_left
    from csrgraph.printext import human_readable

    edges = parse_snap_edges(io.StringIO("# comment\n10 20\n20 30\n"), 2)
    # [(0, 1), (1, 2)]

    ceil_div(7, 2)                          # 4
    roundup_pow2(5)                         # 8
    lower_bound_left([0, 3, 5, 5, 8], 2)    # 0
    human_readable(1536)                    # '2 KB'

## What this package does not do

There is no graph class here: the package does not build compressed sparse
row graphs from the parsed edge lists, does not read file headers or pick a
parser by file extension, does not write graphs back to disk, and has no
command-line tool. The readers hand back plain lists of tuples for you to
store as you like.