# ggkit

A small set of helpers for everyday Python code:

- `ggkit.cond`: choose values in one expression, with eager or lazy branches and a chainable `Switch`.
- `ggkit.func`: partial application from the left or from the right, for functions of fixed arity.
- `ggkit.conv`: convert arbitrary values to `bool`, `int`, `float` or `str`. You choose whether a failed conversion raises an error, gives the target's zero value or gives `None`.
- `ggkit.tuples`: build tuples of 2 to 10 elements, zip sequences into tuple lists and unzip them again.

The package has no dependencies beyond the standard library.

## Installation

```
pip install ggkit
```

## Conditions

```python
from ggkit.cond import if_, if_lazy, if_lazy_l, if_lazy_r, Switch

if_(True, 1, 2)                                # 1
if_lazy(False, lambda: 1, lambda: 2)           # 2, only the chosen branch is called
if_lazy_l(False, lambda: expensive(), 0)       # 0
if_lazy_r(True, 1, lambda: expensive())        # 1

(Switch(3)
    .case(1, "1")
    .case_lazy(2, lambda: "2")
    .when(3, 4).then("3/4")
    .when(5, 6).then_lazy(lambda: "5/6")
    .default("other"))                         # "3/4"
```

`if_` receives both values already evaluated. The lazy variants take zero-argument callables and call only the one that is chosen.

In a `Switch`, the first matching clause wins. Later clauses are ignored and their lazy results are never computed. `when(*values)` matches if the variable equals any of the values, and it must be followed by `then` or `then_lazy`. `default` and `default_lazy` end the chain and return the result.

## Partial application

```python
from ggkit.func import partial

add = partial(lambda a, b: a + b, 2)
add1 = add.partial(1)        # binds the leftmost argument
add1(0)                      # 1
add1(1)                      # 2
add1.partial_r(2)()          # 3, binds the rightmost argument
```

`partial(fn, arity)` returns a `Func`. Each call to `partial` or `partial_r` returns a new `Func` that takes one argument fewer. Calling a `Func` with the wrong number of arguments raises `TypeError`, and so does binding an argument of a `Func` whose arity is 0.

## Conversion

```python
from ggkit.conv import to, to_optional, to_e, UnsupportedConversionError

to(int, "1.0")         # 1
to(int, "x")           # 0, the zero value of the target
to(bool, "true")       # True
to(str, 1.0)           # "1"
to(str, None)          # ""
to_optional(int, "x")  # None
to_e(int, "x")         # raises ValueError
to_e(bool, [1, 2])     # raises UnsupportedConversionError
```

The target is `bool`, `int`, `float`, `str` or a subclass of one of them. If the target is a subclass, the result is an instance of that subclass.

The input can be `None`, a number, a string, or `bytes`/`bytearray`/`memoryview`, which are decoded as UTF-8.

- Booleans are parsed from `1`, `t`, `T`, `TRUE`, `true` and `True`, and from `0`, `f`, `F`, `FALSE`, `false` and `False`. Any non-zero number, including a complex number, converts to `True`.
- Integers are parsed from decimal text. A fraction made only of zeros is accepted, so `"1.00"` gives `1`. Any other fraction is rejected. Floats are truncated.
- Strings are produced as follows:
  - Booleans become `"true"` or `"false"`.
  - Floats are written without exponent or trailing zeros.
  - Exceptions, and objects that define their own `__str__`, give their `str()`.

Other types cannot be converted. For them, `to_e` raises `UnsupportedConversionError`, which is a subclass of `ValueError`. For malformed text, `to_e` raises `ValueError`. A target that is not one of the supported types raises `TypeError` from all three functions.

## Tuples

```python
from ggkit.tuples import make, zip_tuples, TupleList

addr = make("localhost", 8080)
addr.first, addr.second    # ("localhost", 8080)
addr.values()              # ("localhost", 8080)

pairs = zip_tuples(["red", "green", "blue"], [14, 15, 16])
pairs.unzip()              # (["red", "green", "blue"], [14, 15, 16])

zip_tuples([], None).unzip()   # ([], [])
```

`make` returns a `Tuple`, which is an immutable `tuple` with the named fields `first` through `tenth`. A field beyond the tuple's size raises `AttributeError`.

`zip_tuples` takes 2 to 10 sequences and stops at the shortest one. It treats `None` as empty. It returns a `TupleList`, a `list` of tuples that all have the same arity. Its `unzip` method returns one list per position. `TupleList(arity, items)` can also be built directly, and it rejects items of the wrong length.

## Limits

- Tuples hold 2 to 10 elements. Other sizes raise `ValueError`.
- Conversion targets are limited to booleans, integers, floats and strings. There is no conversion to containers or other types.

## Running the tests

```
pip install -e ".[test]"
pytest
```