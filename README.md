# philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and shares one fork (a lock) with each neighbour. Each philosopher
eats, then sleeps, then thinks, and repeats. A monitor thread ends the
simulation in either of two cases: a philosopher has gone longer than the time
to die without starting a meal, or every philosopher has eaten the required
number of meals.

## Installing

    pip install .

To install the test dependencies as well:

    pip install .[test]

## Running

    philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]

All times are in milliseconds. For example:

    philo 5 800 200 200
    philo 4 410 200 200 7

The arguments must follow these rules:

- There must be four or five arguments.
- Each argument must be a non-negative whole number of one to ten digits. A
  leading `+` is allowed, and so is whitespace on either side. A `-` sign is
  rejected.
- The number of philosophers must be between 1 and 200.
- Each of the three times must be at least 60.
- The meal count, when given, must not be zero.

If a rule is broken, the command prints one of these messages and exits with
status 1:

- `Invalid number of args`
- `Args provided is invalid`
- `Args provided has invalid values`

## Output

Every event is printed as one line:

    <milliseconds since start> <philosopher id> <event>

The event is one of the following:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `has died`

Events are coloured with ANSI escape codes. Once the simulation has ended,
nothing more is printed for any philosopher.

A table with a single philosopher has only one fork. That philosopher takes
it, waits for the time to die, and dies.

If a meal count was given and nobody died, the command prints the line
`Philo's has eaten at least N`. In every case it then prints
`Simulation has ended`.

## Using it from Python

    import io

    from philo.args import parse_config
    from philo.simulation import Simulation

    config = parse_config(["5", "800", "200", "200", "3"])
    log = io.StringIO()
    died = Simulation(config, output=log).run()

The pieces you can use:

- `parse_config` takes the arguments that follow the program name and returns
  a validated `Config`. When the arguments are not acceptable, it raises
  `ArgumentCountError`, `ArgumentFormatError` or `ArgumentValueError`. All three
  are subclasses of `philo.args.ArgumentError`.
- `Simulation(config, output=None)` writes status lines to `output`, or to
  standard output when `output` is not given.
- `Simulation.run()` blocks until the simulation ends. It returns `True` if the
  monitor saw a philosopher die.
- `philo.cli.main(argv)` runs the whole command and returns its exit status. It
  reads `sys.argv` when `argv` is not given.

Helpers in other modules:

- `philo.timing`: `get_time` and `precise_sleep`, a sleep that can be
  interrupted.
- `philo.shared`: `Guarded`, a value protected by a lock.