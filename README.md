# csopesy

An interactive command-line shell that emulates a small operating system.
It has processes made of instructions, named screens, and an abstract base
for CPU schedulers.

## Installing

```
pip install .
```

## Running the shell

```
csopesy
```

The shell clears the terminal, prints a banner and shows a `root:\\>`
prompt. The console has to be initialized before it accepts other commands.
Until then, `exit` leaves the shell and any other input prints a reminder to
type `initialize`. Reaching the end of input counts as `exit`.

Once the console is initialized:

| Command             | Effect                                                             |
|---------------------|--------------------------------------------------------------------|
| `initialize`        | Initializes the console.                                           |
| `clear`             | Clears the screen and prints the banner again.                     |
| `screen -r <name>`  | Switches to the console registered under `<name>`. If there is none, an error goes to stderr. |
| `screen -s <name>`  | Accepted, but does nothing yet.                                    |
| `screen -ls`        | Accepted, but does nothing yet.                                    |
| `report-util`       | Prints `report-util command recognized. Doing something.`          |
| `exit`              | Leaves the shell.                                                  |

Any other input is ignored. An empty line redraws the banner.

## Using the library

```python
from csopesy.commands import CommandType
from csopesy.process import Process

proc = Process(1, "worker")
proc.add_command(CommandType.PRINT)
print(proc.execute_current_command())  # "PID 1:Command added!\n"
proc.move_to_next_line()
assert proc.is_finished
```

### `csopesy.commands`

- `CommandType` is an enumeration with the members `IO` and `PRINT`.
- `Command.execute()` waits 10 ms.
- `PrintCommand.execute()` also waits 10 ms. It then returns the message
  `"PID <pid>:<text>\n"`.

### `csopesy.process`

`Process(pid, name)` holds a list of commands and a command counter. A new
process starts in `ProcessState.READY` with `cpu_core_id` set to -1.

- `add_command(command_type)` always appends a `PrintCommand` with the text
  `Command added!`, whatever type is given.
- `execute_current_command()` runs the command under the counter and returns
  its result. It raises `IndexError` once the process is finished.
- `move_to_next_line()` advances the counter.
- `increment_command_counter()` advances the counter and returns the value it
  had before.
- `is_finished` is true once the counter reaches `lines_of_code`.
- `remaining_time` currently reports the command counter.

### `csopesy.screen`

- `Screen(name)` records `current_instruction`, `total_instruction` and
  `time_created`.
  - `timestamp()` formats the creation time as `%m/%d/%Y, %I:%M %p`.
  - `display()` prints the screen's details and returns the printed text.
- `CommandParser.parse(text)` handles `screen -s <name>`, `screen -r <name>`
  and `screen -ls` against its own `screens` table.
  - For `-s` and `-r` it clears the terminal, displays the screen and returns
    it.
  - For `-ls` it prints a placeholder line and returns `None`.
  - A missing name, a duplicate or unknown screen, an unknown option or a
    command other than `screen` raises `ScreenCommandError`.
  - The clearing function can be replaced through the constructor.

### `csopesy.worker` and `csopesy.scheduler`

- `Worker.start()` runs `run()` on a daemon thread and returns the thread.
- `Worker.sleep(ms)` blocks the calling thread for `ms` milliseconds.
- `Scheduler` is an abstract `Worker`. It holds a list of `processes`, and
  `find_process(name)` returns the first one with that name, or `None`.
  - `run()` calls `init()` and then calls `execute()` repeatedly until
    `stop()` is called.
  - Subclasses implement the scheduling methods, such as `add_process`,
    `assign_core` and `check_core_queue`.
  - `SchedulingAlgorithm` has one member, `FCFS`.

### `csopesy.consoles` and `csopesy.manager`

- `Console` is the abstract base, with `on_enabled()`, `display()` and
  `process()`.
- `MainConsole` is the prompt.
  - `handle_input(line)` interprets one line without reading from the
    terminal, which makes it useful for scripting and tests.
  - The main console also accepts a custom `input_fn`.
- `BaseScreen(process_name)` shows the progress of a fresh process with that
  name.
- `clear_screen()` clears the terminal with ANSI escape codes.
- `ConsoleManager` keeps a table of consoles and tracks the current and
  previous ones.
  - `initialize()`, `get_instance()` and `destroy()` manage a shared
    instance.
  - Failed lookups raise `ConsoleError`.
- `main()` runs the prompt loop until the user exits.

## What the package does not do

- There is no concrete scheduler. `Scheduler` is only an abstract base, and
  nothing in the shell starts one.
- `screen -s` creates no process or screen.
- The manager registers only the main console. `screen -r` therefore finds
  nothing else to switch to.
- `screen -ls` lists nothing.
- `report-util` prints a fixed message and does not measure utilisation.

## Running the tests

```
pip install .[test]
pytest
```