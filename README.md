# rhit

`rhit` reads nginx access logs and prints a report of the hits they hold:
a histogram of hits per day, tables of HTTP status codes, methods, remote
addresses, referrers and paths, with trends over the last days when the logs
cover at least four days.

Plain and gzipped (`.gz`) files are read. When given a directory, `rhit`
walks it and keeps the files whose names contain `access.log`. Files are
ordered by the date of their first log line; a file with no log line among
its first three lines is skipped.

Both the common log format date (`10/Jan/2021:10:27:01 +0000`) and ISO 8601
dates (`2021-03-03T09:08:37+08:00`) are understood.

## Installation

```
pip install .
```

## Usage

```
rhit                       # analyze /var/log/nginx
rhit path/to/logs          # a file or a directory
rhit -f a                  # show all tables
rhit -f +i                 # add remote addresses to the default tables
rhit -k bytes              # sort and draw histograms by bytes sent
rhit -l 3                  # longer tables (detail level 0 to 6)
rhit -c                    # add "more popular" and "less popular" tables
rhit --lines -s 5xx        # print the raw log lines that pass the filters
```

On an error (no log file found, an invalid filter, an unreadable file) the
command prints `Error: ...` on stderr and exits with status 1.

### Fields

`-f` takes a comma separated list of tables: `date`, `method`, `status`,
`ip`, `ref`, `path`. Only the first letter of each name counts. `a` or `all`
selects every table. A list starting with `+` or `-` adds to or removes from
the default set (`date,status,ref,path`), e.g. `-f -date+ip`. Tables are
printed in the order of the list.

At detail level 0 the status table is a short summary of the 2xx, 3xx, 4xx
and 5xx shares.

### Filters

| option | filters on | examples |
|-|-|-|
| `-d` | date | `-d 2021/02/15`, `-d '>02/15'`, `-d '<2021/02/15'`, `-d '!15'`, `-d 2021/01/03-2021/02/15`, `-d 2021/02`, `-d 2021` |
| `-s` | status | `-s 404`, `-s 4xx,5xx`, `-s 310-340`, `-s 4xx,!404` |
| `-m` | method | `-m PUT`, `-m !GET`, `-m none`, `-m other` |
| `-i` | remote address | `-i 10.0.0.1`, `-i '!^10\.'` |
| `-p` | path | `-p blog`, `-p '^/\d+'`, `-p 'blog & !( img \| css )'` |
| `-r` | referrer | `-r example`, `-r 'a,!b'` |

Path, referrer and address patterns are regular expressions searched in the
value. They may be combined either with commas (all must match, `!` negates
one) or with `&`, `|`, `!` and parentheses, where `&`, `|` and `(` must be
followed by a space and `)` preceded by one. Operators are evaluated left to
right.

Dates may leave out the year when the first log file and the last one start
in the same year, and the year and month when they start in the same month.

The summary at the top of the report tells, for each filter, the share of
lines it removed.

### Other options

- `--color yes|no|auto`: styling of the output (`auto` styles only when
  stdout is a terminal)
- `-a`, `--all`: include resources (images, css, scripts, fonts) in the
  paths table
- `--no-name-check`: open every file in the directory, whatever its name;
  files that can't be read are then skipped with a warning instead of
  stopping the run
- `--silent-load`: no progress bar or file count while loading
- `--version`: print the version

## Use from Python

The pieces of the report can be used on their own, for example:

```python
from rhit.cli.args import Args
from rhit.nginx_log.log_base import LogBase
from rhit.nginx_log.log_line import LogLine
from rhit.filters.str_filter import StrFilter

line = LogLine.parse(
    '10.0.0.1 - - [10/Jan/2021:10:27:01 +0000] "GET /blog?x=1 HTTP/1.1" 200 99 "-" "-"'
)
assert line.path == "/blog"

assert StrFilter.parse("blog & !( img | css )").accepts("/blog/post")

base = LogBase.load("path/to/logs", Args(silent_load=True))
print(base.unfiltered_count, base.start_time(), base.end_time())
```

## What it does not do

`rhit` only reads log files already on disk: it doesn't follow files as
they grow, and it doesn't read log formats other than nginx's default
access log lines.