# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. It picks up the fork on its left and then the fork on its right,
eats, puts both forks down, sleeps and thinks. A monitor thread watches for a
philosopher who has gone too long without starting a meal. It stops the
simulation when one dies, or when every philosopher has eaten the required
number of meals.

## Installing

    pip install .

## Running

    philo NUMBER TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]

- `NUMBER`: how many philosophers, and forks, sit at the table
- `TIME_TO_DIE`: milliseconds a philosopher may go without starting a meal
- `TIME_TO_EAT`: milliseconds a meal takes
- `TIME_TO_SLEEP`: milliseconds spent sleeping after a meal
- `MEALS` (optional): the simulation ends once every philosopher has eaten
  this many times

Every argument must be a positive whole number no greater than 2147483647.
Whitespace around the number and a leading `+` are accepted.

Example:

    philo 5 800 200 200 7

Each event is printed as one line. The line holds the milliseconds since the
start, the philosopher's number (counting from 0) and what happened:

    0 0 has taken a fork
    0 0 has taken a fork
    0 0 is eating
    200 0 is sleeping
    ...
    812 3 died

Nothing is printed after the simulation has ended. A lone philosopher has only
one fork, so it takes it and waits until it dies.

Exit status:

- `0` when the simulation finishes.
- `1` when the argument count is wrong. The message `Enter 4 or 5 arguments`
  goes to standard error.
- `1` when an argument is invalid. The message `Enter valid argument` goes to
  standard error. The one exception is a malformed or zero `MEALS` value,
  which prints nothing.
- `1` when a thread cannot be started. The message `failed create thread`
  goes to standard error.

## Using it from Python

    import sys
    from philosophers.args import parse_settings
    from philosophers.table import Table

    settings = parse_settings(["4", "410", "200", "200", "3"])
    Table(settings, sys.stdout).run()

- `philosophers.args.parse_settings(args)` takes the arguments that follow the
  program name and returns a frozen `Settings`. `Settings` has the fields
  `count`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals`. `meals`
  is `None` when no meal count was given. A wrong argument count or an
  invalid value raises `ArgumentError`, which is a subclass of `ValueError`.
- `philosophers.args.parse_number(text)` returns the value of a single
  argument. It raises `ArgumentError` if the argument is malformed, zero,
  negative or greater than 2147483647.
- `philosophers.table.Table(settings, out)` holds the state of one simulation.
  It writes event lines to `out`, or to standard output when `out` is `None`.
  - `run()` starts every philosopher and the monitor, then waits for them all.
  - `is_over()` reports whether the simulation has ended.
- `philosophers.clock.now_ms()` returns a monotonic time in milliseconds.
- `philosophers.clock.sleep_ms(ms)` sleeps for at least `ms` milliseconds.
- `philosophers.cli.main(argv=None)` runs the command. It returns the exit
  status rather than exiting.