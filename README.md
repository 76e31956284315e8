# enumwords

Small helpers for generating source code for enumerations. They turn type
names into singular and plural forms, render Python values as Go-style
source literals, and collect generated text.

## Install

```
pip install enumwords
```

The package has no runtime dependencies.

## Inflection (`enumwords.inflect`)

```python
from enumwords.inflect import pluralise, singularise, is_plural, camel, lower_first, split_by_space

pluralise("status")       # "statuses"
pluralise("city")         # "cities"
pluralise("man")          # "men"
pluralise("dogs")         # "dogs" (already plural)
singularise("dog_houses") # "dog_house"
singularise("DOGS")       # "DOG"
singularise("men")        # "man"
is_plural("boxes")        # True
is_plural("status")       # False
camel("hello")            # "Hello"
lower_first("Hello")      # "hello"
split_by_space('"hello world" test')  # ('"hello world"', 'test')
```

- `pluralise` and `singularise` know a fixed table of irregular words
  (man/men, child/children, index/indices, status/statuses, quiz/quizzes and
  others); other words follow simple English suffix rules.
- The casing of the input is carried over to the result: all upper, all
  lower, title case and mixed case are kept.
- `singularise` handles compound names joined by `_`, `-` or spaces by
  changing only the last part, and strips surrounding whitespace.
- `split_by_space` splits at the first space that is not inside double
  quotes and returns a `(before, after)` pair; `after` is `""` when there is
  no such space.

## Literals (`enumwords.literal`)

```python
from datetime import datetime, timedelta, timezone
from enumwords.literal import ify, ifiable_numeric, as_type

ify("hello")                  # '"hello"'
ify(b"hello")                 # '"hello"'
ify(True)                     # 'true'
ify(42)                       # '42'
ify(3.14)                     # '3.14'
ify(timedelta(hours=2))       # 'time.Hour * 2'
ify(timedelta(minutes=30))    # 'time.Minute * 30'
ify(timedelta(hours=-1))      # 'time.Hour * -1'
ify(timedelta(0))             # ''
ify(datetime(2023, 1, 1, 12, tzinfo=timezone.utc))  # '2023-01-01T12:00:00Z'

ifiable_numeric(42)           # '42'
ifiable_numeric(-42.5)        # '-42.5'
ifiable_numeric(1e7)          # '1.00e+07'

as_type("hello")              # 'string'
as_type(42)                   # 'int'
as_type(True)                 # 'bool'
```

- `ify` quotes strings and byte strings, and also quotes objects that define
  their own `__str__`. Dataclass instances are rendered as `{field ...}`.
- `ifiable_numeric` uses scientific notation with two decimals for values
  whose magnitude is at least `1e6` or below `1e-6` (but not zero), and the
  shortest plain decimal otherwise. It raises `TypeError` for non-numbers
  and booleans.

## Building output (`enumwords.builder`)

```python
import io
from enumwords.builder import EnumBuilder, EnumWriter

builder = EnumBuilder()
builder.write_string("hello")
builder.write_string(" world")
builder.write_byte(ord("!"))
builder.write(b"?")          # returns 1
str(builder)                 # "hello world!?"
len(builder)                 # 13 (UTF-8 bytes)
builder.reset()              # empty again

sink = io.BytesIO()
writer = EnumWriter(sink)
writer.write(b"generated code")   # returns 14
```

`EnumBuilder.write_byte` raises `ValueError` for values outside 0..255, and
`grow` raises `ValueError` for a negative count. `EnumWriter` accepts bytes or
text, writes to standard output when no writer is given, and decodes bytes
before writing to text streams.

## What this package does not do

It is a helper library only. It does not read source files, find enum
declarations, or write generated enum files, and it installs no command.

## Tests

```
pip install enumwords[test]
pytest
```