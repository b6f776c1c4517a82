# spltoolkit

Plain-Python data structures and helpers for teaching and quick
scripting. The package has no dependencies beyond the standard library.

## Modules

- `spltoolkit.gtypes`: frozen value types `GPoint(x, y)`,
  `GDimension(width, height)` and `GRectangle(x, y, width, height)`.
  `GRectangle.is_empty()` is true when width or height is not positive.
  `GRectangle.contains(pt)` includes the left and top edges but not the
  right and bottom ones.
- `spltoolkit.hashmap`: `HashMap`, a hash table with string keys and
  `put`, `get`, `remove`, `contains_key`, `clear`, `clone`, `is_empty`
  and `items`. `get` returns `None` for a missing key. Iterating it, or
  calling `items()`, skips entries whose value is `None`. Non-string keys
  raise `TypeError`.
- `spltoolkit.sortedmap`: `SortedMap`, which has the same methods but
  iterates its keys in ascending order.
- `spltoolkit.fifo`: `Queue`, with `enqueue`, `dequeue`, `peek`,
  `is_empty`, `clear` and `clone`. `dequeue` and `peek` raise
  `IndexError` when the queue is empty.
- `spltoolkit.pqueue`: `PriorityQueue`. Smaller priority numbers leave
  first, and values with equal priority leave in the order they were
  added. It has `enqueue(value, priority)`, `dequeue`, `peek`,
  `peek_priority`, `is_empty`, `clear` and `clone`. It raises
  `IndexError` when empty.
- `spltoolkit.randomness`: `random_integer(low, high)` (inclusive),
  `random_real(low, high)` (half-open `[low, high)`), `random_chance(p)`
  and `set_random_seed(seed)`. They share one generator, which is seeded
  from the clock when the module is imported.
- `spltoolkit.options`: command-line options driven by specifications:
  - `parse_shell_args(line)` splits a line into arguments, honouring
    quotes and backslashes.
  - `parse_options(args, option_spec)` returns a dictionary keyed by full
    option name. Arguments that are not options go under `"args"`.
  - The typed getters are `get_arg_list`, `get_option`, `get_int_option`,
    `get_double_option`, `get_char_option`, `get_bool_option`,
    `get_color_option` and `get_units_option`. `get_units_option`
    understands `pt`, `px`, `i`, `in` and `cm`.
  - `show_usage(usage, spec)` prints a usage summary.
  - Invalid input raises `OptionError`, a subclass of `ValueError`.
  - A specification is a bare flag (`"-verbose"`) or a flag and a
    pattern: `<int>`, `<double>`, `<char>`, `<bool>`, `<cumulative>`, any
    other `<name>`, or alternatives such as `on|off`. Options may be
    abbreviated to any unambiguous prefix.
- `spltoolkit.graph`: `Graph`, `Node` and `Arc` for directed graphs.
  - Nodes have unique names; a duplicate name raises `ValueError`.
  - Arcs carry a `cost`, which starts at 0.
  - By default nodes are ordered by name, and arcs by start name, then
    end name, then cost. Both orderings can be replaced with
    `set_node_ordering` and `set_arc_ordering`.
  - Iterating a graph yields its nodes in order.
  - `arcs_from(node)`, `Node.neighbors()` and `Node.is_connected(other)`
    answer adjacency questions.
- `spltoolkit.gobjects`: shape models `GRect`, `GRoundRect`, `G3DRect`,
  `GOval`, `GLine` and `GArc`, which share the base class `GObject`.
  - They provide location, movement, bounds and hit testing.
    `contains(x, y)` allows a tolerance for lines and unfilled arcs.
  - `set_size` is allowed only on `GRect` and `GOval`. `set_filled` is
    allowed only on shapes with area. Both raise `TypeError` otherwise.
- `spltoolkit.gcompound`: `GPolygon` (vertices, edges and polar edges,
  with even-odd hit testing) and `GCompound`. A `GCompound` keeps objects
  from back to front and `get_object_at(x, y)` returns the frontmost hit.

## Examples

```python
from spltoolkit.pqueue import PriorityQueue

pq = PriorityQueue()
pq.enqueue("D", 3)
pq.enqueue("A", 1)
pq.enqueue("B", 1)
assert pq.dequeue() == "A"
assert pq.dequeue() == "B"
```

```python
from spltoolkit.options import parse_shell_args, parse_options, get_int_option

spec = ["-count <int>", "-verbose"]
options = parse_options(parse_shell_args("-count 3 -v file.txt"), spec)
assert get_int_option(options, "-count", 0) == 3
assert options["-verbose"] == "true"
assert options["args"] == ["file.txt"]
```

```python
from spltoolkit.graph import Graph

g = Graph()
a, b = g.add_node("A"), g.add_node("B")
g.add_arc(a, b)
assert a.is_connected(b)
assert [n.name for n in g] == ["A", "B"]
```

```python
from spltoolkit.gobjects import GOval
from spltoolkit.gcompound import GCompound

scene = GCompound()
oval = GOval(0, 0, 20, 10)
scene.add(oval)
assert scene.get_object_at(10, 5) is oval
```

## What it does not do

The shape classes are geometric models only. Nothing here opens a
window, draws, plays sound, runs timers or delivers mouse and keyboard
events, and there are no images, buttons, sliders or other interactive
controls. The package has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```