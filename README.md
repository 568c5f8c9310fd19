# velautil

A small library of general-purpose helpers. It uses only the standard library.

## Modules

### `velautil.singleton`

- `Singleton(loader=None)`: a thread-safe holder for one value.
  - `get()` returns the value. If it was never set and a loader exists, the loader runs first.
    If there is no loader and nothing was set, `get()` returns `None`.
  - `set(data)` stores a value.
  - `reload()` runs the loader again and stores what it returns. Without a loader it does nothing.
- `new_singleton(loader)` creates a `Singleton` backed by `loader`.

### `velautil.slices`

Helpers for lists:

- Set-like operations that keep order: `intersect`, `union` and `subtract`.
- Mapping, filtering and searching:
  - `map_items` and `filter_items`.
  - `index` returns the position of the first match, or `-1`.
  - `find` returns the first match, or `None`.
- Tests and counts: `all_match`, `any_match` and `count`.
- Folding: `flatten`, `group_by` (a dict from key to list) and `reduce(items, fn, initial)`.
- `contains(items, pivot)` compares items with `==`.
- `iter_to_list(iterator)` drains an iterator into a list. Passing `None` gives `[]`.
- `sort_items(items, less)` sorts a list in place with a less-than function.

### `velautil.parallel`

- `par_map(items, fn, parallelism=5)` calls `fn` on every item in a thread pool. The results come back in input order.
- `par_for(items, fn, parallelism=5)` does the same but discards the results.
- `ParConfig(parallelism=5)` holds the setting. A parallelism below 1 raises `ValueError`.
- An exception raised by `fn` propagates to the caller.

### `velautil.stringtools`

- `trim_leading_indent(s)`:
  - It strips surrounding newlines.
  - It removes the indent of the first non-blank line from every line.
  - It strips the result.
  - A string with only whitespace gives `""`.
- `capitalize(s)` upper-cases the first character and leaves the rest unchanged.

### `velautil.runtime`

- `must(value, error)` returns `value`, or raises `error` if it is not `None`.
- `is_nil(value)` is true for `None` and for the empty string.
- Controller names carried in a context mapping:
  - `with_controller(ctx, name)` returns a new dict that carries the name.
  - `controller_from(ctx)` returns the stored name, or `None`.
  - `get_controller(ctx)` returns the stored name. If there is none, it falls back to `get_controller_in_caller()`.
    That function searches the call stack for a file named `xxxcontroller.py` or `xxx_controller.py` and returns `xxx`, or `""` if it finds none.

## Installation

```
pip install .
```

For development with tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from velautil.singleton import new_singleton
from velautil.slices import intersect, union, subtract, group_by
from velautil.parallel import par_map
from velautil.stringtools import trim_leading_indent, capitalize
from velautil.runtime import must, is_nil

config = new_singleton(lambda: {"mode": "default"})
config.get()          # loader runs on first access
config.set({"mode": "custom"})
config.reload()       # runs the loader again

intersect([1, 2, 3, 4], [2, 4, 6, 8])   # [2, 4]
union([1, 2, 3, 4], [2, 4, 6, 8])       # [1, 2, 3, 4, 6, 8]
subtract([1, 2, 3, 4], [2, 4, 6, 8])    # [1, 3]
group_by([-1, 1, 0], lambda x: "pos" if x > 0 else "neg" if x < 0 else "zero")

par_map(range(10), lambda x: x * x, parallelism=4)  # ordered results

trim_leading_indent("\n\tx: 1\n\ty: 2")  # "x: 1\ny: 2"
capitalize("test case")                   # "Test case"

must("value", None)   # "value"
is_nil("")            # True
```

## What it does not do

This is a library only. It has no command-line interface. It includes no cluster clients, resource lookup or template loading.