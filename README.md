# hl7stamp

Parse, format and convert the date and time values used in HL7v2 messages.

HL7v2 writes timestamps as `YYYY[MM[DD[HH[MM[SS[.S[S[S[S]]]]]]]]][+/-ZZZZ]`,
with every part after the year optional. `hl7stamp` reads these values into
small frozen dataclasses, writes them back out in the same form, and converts
them to and from the standard library's `datetime`, `date` and `time` types.

Values are parsed for structure only: a parsed timestamp is not checked for
being a real calendar date or clock time until you convert it.

## Installation

```
pip install hl7stamp
```

## Parsing timestamps

```python
from hl7stamp.timestamp import parse_timestamp, TimeStamp, TimeStampOffset

ts = parse_timestamp("20230312195905.1234-0700")
assert ts.year == 2023
assert ts.month == 3
assert ts.microsecond == 123_400
assert ts.offset == TimeStampOffset(hours=-7, minutes=0)

assert str(ts) == "20230312195905.1234-0700"

# Strict parsing rejects trailing characters; lenient parsing ignores them.
TimeStamp.parse_strict("2023")
TimeStamp.parse("20230312 trailing", True)
```

`parse_timestamp(s, lenient_trailing_chars=False)` and `TimeStamp.parse`
behave the same; `TimeStamp.parse_strict(s)` never allows trailing characters.

Some details of the format:

- Up to four digits of fractional seconds are read and stored as
  microseconds (`.1` is `100_000`, `.1234` is `123_400`). When formatting,
  the fraction is written with four digits and any finer precision is dropped.
- An offset is kept only when both its hours and minutes are present; the
  sign applies to the hours.
- Formatting stops at the first missing part (a timestamp with no day is
  written without hour, minute or second), but an offset is always written
  when present: `TimeStamp(year=2023, month=3, day=12, hour=19,
  offset=TimeStampOffset(-7, 0))` formats as `2023031219-0700`.

## Dates and times of day

```python
from hl7stamp.date import parse_date, Date
from hl7stamp.timeofday import parse_time, Time

d = parse_date("20230312")
assert d == Date(year=2023, month=3, day=12)
assert str(d) == "20230312"

t = parse_time("195905.1234-0700")
assert t.hour == 19
assert t.microsecond == 123_400
assert str(t) == "195905.1234-0700"
```

`Date` reads `YYYY[MM[DD]]` and `Time` reads
`HH[MM[SS[.S[S[S[S]]]]]][+/-ZZZZ]`. Both offer `parse` and `parse_strict`
classmethods like `TimeStamp`.

## Errors

Failures raise subclasses of `hl7stamp.errors.DateTimeParseError`, which is
itself a `ValueError`:

- `ParsingFailedError` – the leading year (or, for a time, hour) could not be
  read; its `component` attribute names the part
- `UnexpectedCharacterError` – strict parsing found trailing characters; it
  carries `position` and `character`
- `InvalidComponentRangeError` – a conversion found values that do not make a
  real date, time or offset
- `MissingComponentError` – a strict conversion needs a part that is absent
- `AmbiguousTimeError` – for a local time with two possible instants; the
  conversions here use fixed offsets only, so none of them raises it

`InvalidComponentRangeError` and `MissingComponentError` give the part
involved as an `ErroredDateTimeComponent` in their `component` attribute.

## Converting to and from the standard library

### Lenient conversions

`hl7stamp.conversions` fills in what is missing: an absent month or day
becomes 1, absent time parts become 0 and an absent offset becomes UTC.

```python
from hl7stamp.conversions import (
    to_date, to_time, to_naive_datetime, to_datetime, to_utc,
    timestamp_from_date, timestamp_from_datetime,
    date_from_python, time_from_python,
)

aware = to_datetime(ts)      # datetime with the timestamp's fixed offset
utc = to_utc(ts)             # the same instant in UTC
naive = to_naive_datetime(ts)  # offset ignored
back = timestamp_from_datetime(aware)
```

- `to_date` accepts a `TimeStamp` or `Date`; `to_time` accepts a `Time` or a
  `TimeStamp` and ignores any offset.
- `timestamp_from_datetime` keeps the offset of an aware datetime and gives no
  offset for a naive one. `timestamp_from_date` gives a timestamp with only a
  date.
- `date_from_python` and `time_from_python` build HL7 `Date` and `Time`
  values (the latter without an offset).

The same lenient conversions are available in `hl7stamp.zoned` as
`civil_date`, `civil_time`, `civil_datetime` and `zoned_datetime`, together
with `timestamp_from_civil` (never an offset) and `timestamp_from_zoned`
(which raises `MissingComponentError` for a naive datetime).

In the lenient conversions the offset's minutes are added to its hours as
given, so `TimeStampOffset(hours=-5, minutes=30)` means −4:30.

### Strict conversions

`hl7stamp.strict` refuses to fill in missing parts and raises
`MissingComponentError` instead:

```python
from hl7stamp.strict import (
    strict_date, strict_time, strict_naive_datetime, strict_datetime,
    timestamp_from_aware,
)
```

- `strict_date` needs a month and a day, and raises
  `InvalidComponentRangeError` for a month outside 1–12.
- `strict_time` needs minutes and seconds; a missing fraction counts as zero.
- `strict_naive_datetime` needs every part down to the second.
- `strict_datetime` also needs an offset. Here the offset's minutes take the
  sign of its hours, so `TimeStampOffset(hours=-5, minutes=30)` means −5:30.
- `timestamp_from_aware` turns any `datetime.datetime` into a `TimeStamp`,
  with an offset only when the datetime is aware.

## What this package does not do

`hl7stamp` handles date, time and timestamp values only. It does not read or
build whole HL7 messages, segments or fields, and it has no command-line tool.