# pestle

Small building blocks for hand-written parsers:

- `pestle.position.Position`: a cursor into an input string. It can look up
  line and column and offers matching primitives (`match_string`,
  `match_insensitive`, `match_range`, `match_char_by`, `skip`, `skip_back`,
  `skip_until`).
- `pestle.span.Span`: a slice of the input between two byte offsets, with
  `as_str()`, `start_pos()`, `end_pos()`, `split()` and `lines()`.
- `pestle.stack.Stack`: a stack that records its operations, so that it can
  be rewound to a `snapshot()` with `restore()`.
- `pestle.token.Start` and `pestle.token.End`: frozen tokens that mark where a
  rule begins and ends. `pestle.token.Token` is their union.
- `pestle.prec_climber`: `Assoc`, `Operator` and `PrecClimber` for folding
  infix expressions by precedence climbing.

Positions and spans count offsets in UTF-8 bytes. An offset that falls inside
a multi-byte character raises `ValueError`. Positions and spans are equal only
when they refer to the very same input object. Ordering positions from
different inputs raises `ValueError`.

## Install

```
pip install .
```

## Positions and spans

```python
from pestle.position import Position
from pestle.span import Span

pos = Position("a\rb\nc\r\nd", 4)
pos.line_col()      # (2, 1)
pos.line_of()       # "c\r\n"

cursor = Position.from_start("abc")
cursor.match_string("ab")   # True, cursor.pos == 2

span = Span("abc\ndef\nghi", 1, 7)
list(span.lines())  # ["abc\n", "def\n"]
```

`Position.span(other)` builds a `Span` between two positions of the same input.

## Rewindable stack

```python
from pestle.stack import Stack

stack = Stack()
stack.push(0)
stack.snapshot()
stack.pop()
stack.restore()
stack.peek()        # 0
```

`restore()` with no snapshot taken empties the stack. `clear_snapshot()`
drops the latest snapshot and keeps the current contents.

## Precedence climbing

```python
from pestle.prec_climber import Assoc, Operator, PrecClimber

climber = PrecClimber([
    Operator("plus", Assoc.LEFT) | Operator("minus", Assoc.LEFT),
    Operator("times", Assoc.LEFT),
    Operator("power", Assoc.RIGHT),
])

pairs = [2, "plus", 3, "times", 4]
result = climber.climb(
    iter(pairs),
    primary=lambda p: p,
    infix=lambda lhs, op, rhs: {"plus": lhs + rhs,
                                "minus": lhs - rhs,
                                "times": lhs * rhs,
                                "power": lhs ** rhs}[op],
    rule_of=lambda p: p,
)
# result == 14
```

Each entry in the list gets precedence *index + 1*. Operators joined with `|`
share a precedence. `PrecClimber.from_table` takes
`(rule, precedence, assoc)` entries directly. `climb` expects the items to
alternate between primaries and operators, starting with a primary. `rule_of`
maps an item to the rule that the operators are keyed by. `climb` raises
`ValueError` if the items are empty or an operator has no primary after it.

## What it does not do

These are primitives only. The package has no grammar language, no parser
state or driver, and no tree of matched pairs. You combine the pieces in your
own parser.

## Tests

```
pip install .[test]
pytest
```