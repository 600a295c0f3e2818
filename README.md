# ninetools

A set of small, terse command-line utilities: few options, plain output.
Every command is installed with a `9` prefix so it never shadows the tools
already on your system. The package has no dependencies beyond the Python
standard library and is meant for POSIX systems; `9ps` and `9gfetch` read
Linux's `/proc`.

## Installation

```sh
pip install .
```

For running the test suite:

```sh
pip install ".[test]"
pytest
```

## Commands

| Command    | What it does |
|------------|--------------|
| `9cal`     | Print a calendar: `9cal`, `9cal 2024`, `9cal jan`, `9cal 9 1752` |
| `9cat`     | Concatenate files (or standard input) to standard output |
| `9chmod`   | Change permissions: `9chmod 0755 file` or `9chmod [ugoa]{+,-,=}[rwxalt] file` |
| `9chown`   | Change owner and group: `9chown user group file` (names or numeric ids) |
| `9cp`      | Copy files: `9cp [-gux] from to` or `9cp [-x] from ... dir` |
| `9date`    | Print the date: `9date [-un] [seconds]` |
| `9du`      | Disk usage: `9du [-aefhnqrstu] [-b size] [-p si-pfx] [file ...]` |
| `9echo`    | Print arguments: `9echo [-n] words ...` |
| `9gfetch`  | Show a short system summary with a little ASCII art |
| `9kill`    | Signal processes: `9kill [-sig] pid ...`, list signals with `9kill -l` |
| `9ls`      | List files: `9ls [-dlmnpqrstuFQT] [file ...]` |
| `9mkdir`   | Make directories: `9mkdir [-p] [-m mode] dir ...` |
| `9mv`      | Move or rename: `9mv from to` or `9mv from ... dir` |
| `9ps`      | Show one process from `/proc`: `9ps pid` |
| `9pwd`     | Print the working directory |
| `9rm`      | Remove files: `9rm [-fr] file ...` |
| `9rmdir`   | Remove empty directories |
| `9sleep`   | Sleep for seconds, with up to millisecond fractions: `9sleep 1.25` |
| `9touch`   | Update file times or create files: `9touch [-c] [-t seconds] file ...` |
| `9uname`   | System name: `9uname [-amnrsv]` |
| `9wc`      | Count lines, words, runes and bytes: `9wc [-lwrbc] [file ...]` |
| `9whoami`  | Print the user name |

## A few examples

```sh
$ 9cal 2 2024
   February 2024
 S  M Tu  W Th  F  S
             1  2  3
 4  5  6  7  8  9 10
11 12 13 14 15 16 17
18 19 20 21 22 23 24
25 26 27 28 29

$ 9echo -n no newline
$ 9wc -l notes.txt
     42 notes.txt
$ 9du -s -h .
```

`9cal` follows the historical British calendar change, so `9cal 9 1752`
shows the eleven missing days of September 1752. A single argument from 1
to 12 (or a month name) prints that month of the current year; any other
single number prints the whole year.

## Things to know

- `9ls` takes `-d` and `-l` as options that consume the following word, so
  `9ls -l file` treats `file` as the option's value rather than a path.
- `9wc` prints one line per file; it does not add a total line, and its `-b`
  column (badly encoded characters) is always zero.
- `9whoami` always prints `general`; it does not look up the current user.
- `9ps` shows a single process given by its id; it does not list all
  processes.
- `9date` and `9touch` take times only as seconds since the epoch
  (decimal, `0x` hexadecimal or leading-`0` octal); they do not parse
  calendar dates.

## Using the modules from Python

Each command lives in its own module with a `main(argv=None)` entry point
that returns the exit status, and the pieces behind it are ordinary
functions, for example:

```python
from ninetools.cal import format_month
from ninetools.chmod import parse_spec, apply_mode
from ninetools.wc import count

print(format_month(2, 2024))
mask, mode = parse_spec("go-w")
print(oct(apply_mode(0o666, mask, mode)))
print(count(b"hello world\n"))
```