# typednum

A `Num` is a number that stands for exactly one value: the one it was made
with. It suits fields such as a format version. Writing the field always
gives that value. Reading the field back fails unless the stored value is
that same value.

Values are signed 64-bit integers. The package has no dependencies beyond
the standard library.

## Installing

```
pip install typednum
```

## The type

```python
from typednum.num import Num, NumMismatchError

V3 = Num(3)
V3.check(3)       # returns V3
V3.check(2)       # raises NumMismatchError("not 3")
int(V3)           # 3
```

- `Num` is a frozen dataclass with one field, `value`.
- Making a `Num` from something that is not an `int` (a `bool` counts as
  not an `int`) raises `TypeError`; a value outside the signed 64-bit range
  raises `ValueError`.
- `Num.check(value)` returns the `Num` itself when `value` equals it, and
  raises `NumMismatchError` otherwise, including for `True` and `False`.
- `NumMismatchError` is a `ValueError`. Its message is `not <N>` and its
  `expected` attribute holds `N`.

## Plain values (TOML, JSON and the like)

`typednum.serde` turns a `Num` into a plain integer and checks a value that
has been read back:

```python
import tomllib
from typednum.num import Num
from typednum.serde import serialize, deserialize

VERSION = Num(3)

doc = {"version": serialize(VERSION), "hash": "abc"}   # {"version": 3, ...}
loaded = tomllib.loads('version = 3\nhash = "abc"\n')
deserialize(VERSION, loaded["version"])                # returns VERSION
```

`deserialize(num, value)` raises `TypeError` when `value` is not an integer
(a `bool` included), and `NumMismatchError` with the message `not <N>` when
it is an integer other than `N`.

## Binary encoding

`typednum.bincode` writes and reads a compact binary form:

- Unsigned integers below 251 take one byte. Larger ones are a marker byte
  (251, 252 or 253) followed by a little-endian 16, 32 or 64 bit value.
  The marker 254 (a 128-bit value) and 255 are rejected.
- Signed integers are zigzag-mapped, then written as unsigned integers.
- Byte strings and text carry their length as an unsigned integer before
  the bytes; text is UTF-8.

Helpers for integers, byte strings and text let a whole record be built:

```python
from typednum.num import Num
from typednum.bincode import encode, decode, encode_str, decode_str, DecodeError

VERSION = Num(42)

blob = encode(VERSION) + encode_str("test_data")

num, offset = decode(VERSION, blob, 0)
data, offset = decode_str(blob, offset)
assert offset == len(blob)

decode(Num(43), blob, 0)   # raises DecodeError("not 43")
```

The functions are `encode_varint` / `decode_varint`, `encode_i64` /
`decode_i64`, `encode_bytes` / `decode_bytes`, `encode_str` / `decode_str`
and `encode` / `decode`.

- Every `decode_*` function takes the buffer and a start offset (default 0)
  and returns the decoded value with the offset just past it. `decode`
  takes the expected `Num` first.
- Input that is cut short, has a bad marker byte or holds invalid UTF-8
  raises `DecodeError`, a `ValueError`.
- `encode_varint` and `encode_i64` raise `ValueError` for a value outside
  the unsigned or signed 64-bit range.

## What it does not do

There is no schema or record type: fields are encoded and decoded one at a
time, in whatever order the caller chooses, and no other binary layouts are
offered.

## Running the tests

```
pip install -e ".[test]"
pytest
```