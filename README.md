# philo

A simulation of the dining philosophers problem. Philosophers sit at a round
table with one fork between each pair of neighbours. Each philosopher runs in
its own thread and repeats the same cycle: take two forks, eat, put the forks
down, sleep, think. If a philosopher goes too long without eating, it dies and
the simulation stops.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same command is available as `python -m philo.cli`.

All times are in milliseconds. Each argument must be made only of the digits
`0`-`9`; signs, spaces and decimal points are rejected. Values wrap around as
unsigned 32-bit numbers. The first four values must be greater than zero.

The optional last argument, `MEALS`, sets how many times each philosopher must
eat. The simulation ends when every philosopher has eaten that many times. The
value cannot be zero. Without it, the simulation runs until a philosopher dies.

Example:

```
philo 5 800 200 200 7
```

Every state change is printed as one line: the milliseconds since the
simulation started, the philosopher's number, then the event:

```
0 Philo 1 has taken a fork.
0 Philo 1 has taken a fork.
0 Philo 1 is eating.
200 Philo 1 is sleeping.
400 Philo 1 is thinking
```

If a philosopher starves, a `died.` line is printed and no status line follows
it. If every philosopher reaches the required number of meals, the program ends
with a summary line:

```
Each philosopher ate 7 time(s)
```

A lone philosopher has only one fork: it takes it, waits `TIME_TO_DIE`
milliseconds and dies.

When the arguments are invalid, the program writes `Invalid args` (or
`They can't eat 0 times` for a meal count of zero) to standard error and exits
with status 1. Otherwise it exits with status 0.

## Library use

The same simulation can be run from Python:

```python
import io

from philo.parsing import parse_args
from philo.table import StopReason, Table

args = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
reason = Table(args, out).run()
print(out.getvalue())
assert reason is StopReason.ALL_FED or reason is StopReason.DIED
```

- `philo.parsing.parse_args(argv)` takes the arguments that follow the program
  name and returns an `Args` dataclass (`num_philos`, `time_die`, `time_eat`,
  `time_sleep`, `must_eat`, the last being `None` when not given). It raises
  `ArgumentError`, a `ValueError`, when the arguments are invalid.
- `philo.parsing.parse_number(text)` parses one digit string.
- `philo.table.Table(args, out=None)` prepares the philosophers; output goes to
  `out`, or to standard output when it is `None`.
  - `start()` resets the clock and starts one thread per philosopher.
  - `wait()` blocks until the simulation stops, joins the threads, prints the
    summary line when everyone has eaten enough, and returns a `StopReason`.
  - `run()` does both.
  - `is_stopped()` reports whether a death or a full meal count has ended the
    simulation.
  - `write_status(philo, message)` prints one timestamped status line unless
    the simulation has ended.
- `StopReason` is `RUNNING`, `DIED` or `ALL_FED`.
- `philo.timing.now_ms()` and `philo.timing.sleep_ms(ms)` are the millisecond
  clock and sleep the simulation uses.

## Tests

```
pip install .[test]
pytest
```