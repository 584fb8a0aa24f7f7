# dining

A simulation of the dining philosophers problem. Each philosopher runs in its own
thread and goes round eating, sleeping and thinking. A fork lies between each pair
of neighbours, and a philosopher needs both of them to eat. A monitor thread stops
the simulation when a philosopher starves. If a number of meals was given, it also
stops once every philosopher has eaten that many.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

You can also run it as `python -m dining.cli` with the same arguments.

- `NUMBER_OF_PHILOSOPHERS`: from 1 to 200.
- `TIME_TO_DIE`, `TIME_TO_EAT`, `TIME_TO_SLEEP`: milliseconds, each greater than zero.
- `MEALS_REQUIRED` (optional): zero or more.

Numbers may carry a leading `+` and be padded with spaces. Nothing else is accepted.

Each event is printed in colour as `<milliseconds since start> <philosopher id> <action>`.
The action is one of `has taken a fork`, `is eating`, `is sleeping`, `is thinking` or `died`.
Once the simulation has ended, only the `died` line is still printed.

```
$ dining 5 800 200 200 7
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

The exact timings and the order of the lines change from run to run.

If the number of arguments is wrong or an argument is invalid, the command prints
an error message in red and exits with status 1. Otherwise it exits with status 0,
whether or not a philosopher died.

A lone philosopher takes one fork and waits. There is no second fork, so that
philosopher starves after `TIME_TO_DIE` milliseconds.

## Library use

```python
import io

from dining.parsing import parse_arguments
from dining.simulation import Simulation

config = parse_arguments(["4", "410", "200", "200", "3"])
log = io.StringIO()
died = Simulation(config, out=log).run()
```

- `dining.parsing.parse_arguments(args)` takes the four or five arguments, without
  the program name. It returns a frozen `Config` with the fields `philosophers`,
  `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals_required`. The last
  field is `None` when no meal count was given. Invalid input raises
  `ArgumentError`, a subclass of `ValueError`. Its message names the argument
  that was rejected.
- `dining.parsing.parse_long(text)` reads a leading signed integer in the manner
  of C's `atol`. `dining.parsing.is_numeric(text)` checks the accepted number
  format.
- `dining.simulation.Simulation(config, out=None)` writes its log to `out`, or to
  standard output when `out` is not given. `run()` blocks until the simulation
  ends. It returns the `Philosopher` who died, or `None` if every philosopher ate
  the required number of meals. After a run, each philosopher's `meals_count`
  and `last_meal` can be read from `simulation.philosophers`.

## Running the tests

```
pip install .[test]
pytest
```