# pcpdemos

A collection of small, self-contained programming demos, runnable from one
interactive menu or used as a library.

| Demo       | Module               | What it does |
|------------|----------------------|--------------|
| `language` | `pcpdemos.language`  | Guesses whether a text is German (`de`), English (`en`) or French (`fr`) by comparing its letter counts with reference frequency vectors using cosine similarity. |
| `advent`   | `pcpdemos.advent`    | Counts a population of timers (0–8) after a number of days; a timer at 0 resets to 6 and spawns a new one at 8. |
| `stacks`   | `pcpdemos.stacks`    | A list-backed `Stack` and a linked-list `StackList`, with size reporting. |
| `routines` | `pcpdemos.routines`  | Runs a 3 s and a 6 s task on threads, waits for both, then waits 2 s more, printing dots meanwhile. |
| `bank`     | `pcpdemos.bank`      | An `Account` shared by many threads, with locked deposits and withdrawals. |
| `weather`  | `pcpdemos.weather`   | Starts three simulated weather services that each fail half the time; the first success wins, or a message reports that all failed. |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demos

```
pcpdemos
```

The program lists the available demos and asks for a name on standard input.
Type a demo name (case does not matter) to run it, `help` to list the demos
again, or `exit` to quit. End of input also quits.

## Using the library

```python
from pcpdemos.advent import advent
from pcpdemos.stacks import Stack, StackList, EmptyStackError, get_stats, get_stats_stack
from pcpdemos.language import detect_language, cosine_similarity, letter_occurrence
from pcpdemos.bank import Account

advent([3, 4, 3, 1, 2], 80)          # 5934
advent([3, 4, 3, 1, 2], 256)         # 26984457539

stack = Stack()
stack.push(10)
stack.push(20)
stack.pop()                          # 20
stack.peek()                         # 10
len(stack)                           # 1
get_stats(StackList())               # "The datastructures is empty"
get_stats_stack(stack)               # "The size is 1"

letter_occurrence("abC")[:3]         # [1.0, 1.0, 1.0]
detect_language("")                  # "no key here"

account = Account()
account.deposit(100)
account.withdraw(50)
account.withdraw(500)                # not covered: ignored
account.balance()                    # 50
account.transaction_count()          # 2
```

Notes on behaviour:

- Popping from or peeking into an empty `Stack` or `StackList` raises
  `EmptyStackError` (a subclass of `IndexError`).
- `get_stats` accepts anything with `is_empty()` and `len()`;
  `get_stats_stack` accepts only a `Stack` and raises `TypeError` otherwise.
- `detect_language` counts only the ASCII letters A–Z, case-insensitively,
  and returns `"no key here"` when the text contains none.
- `cosine_similarity` returns NaN when either vector is all zeros.
- `weather.call_weather_service` raises `WeatherServiceError` on failure;
  `weather.demo` accepts a `random.Random` for reproducible runs and returns
  the winning message, or `None` if every service failed.
- `routines.last_task()` blocks for about 8 seconds and returns
  `"Was waiting for 11000 ms"`.

## What is not included

The `language` demo reads `English.txt`, `French.txt` and `German.txt` from a
`LanguageDetection` directory under the current working directory. These
sample texts are not shipped with the package; supply your own files there,
or call `language.run_language(filename, directory)` with a directory of
your choice.