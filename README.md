# statusbar

A small status monitor for Linux. On a fixed interval it collects pieces of
system information, such as CPU usage, memory, battery, date and time, or the
output of shell commands, formats them into a single line and prints that
line to standard output.

## Installation

```sh
pip install .
```

## Usage

```sh
statusbar -s
```

With `-s` the command prints the status line once per interval (one second)
until it receives SIGINT (Ctrl+C) or SIGTERM. The command always uses the
stock configuration from `statusbar.config.default_config()`, which shows the
local date and time in the form `%F %T`.

Any other option or argument prints a usage message and exits with status 1.

## What it does not do

- It does not set the name of an X root window. Run without `-s`, the command
  reports `XOpenDisplay: Failed to open display` and exits with status 1.
- The command reads no configuration file and has no option to choose
  components; other status lines are built from Python (see below).
- Keyboard lock indicators and the active keymap are not read from the
  display. `statusbar.keyboard` only offers the text helpers
  `format_indicators(fmt, led_mask)`, `valid_layout_or_variant(sym)` and
  `get_layout(symbols, group)`, which work on values you supply.

## Components

A status line is a sequence of `statusbar.config.Arg(func, fmt, args)`
entries. `func` names a component, `fmt` is a `%`-style format applied to the
component's text, and `args` is passed to the component. A component that
cannot produce a value shows `Config.unknown_str` (`n/a` by default) instead.

| Component name | Shows | Argument |
|----------------|-------|----------|
| `battery_perc`, `battery_state`, `battery_remaining` | charge in percent; state `+`, `-`, `F` or `?`; time left as `Hh Mm` while discharging | battery name, e.g. `BAT0` |
| `cpu_perc`, `cpu_freq` | CPU usage in percent since the previous update; frequency of the first CPU | ignored |
| `datetime` | local date and time | `strftime` format, e.g. `%F %T` |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | disk space | mount point, e.g. `/` |
| `entropy` | available kernel entropy | ignored |
| `hostname`, `kernel_release`, `load_avg`, `uptime` | host information | ignored |
| `ipv4`, `ipv6` | interface address | interface name, e.g. `eth0` |
| `netspeed_rx`, `netspeed_tx` | receive and transmit rate since the previous update | interface name |
| `num_files` | number of entries in a directory | directory path |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | memory | ignored |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap | ignored |
| `temp` | temperature in whole degrees Celsius | sensor file, e.g. under `/sys/class/thermal/` |
| `run_command` | first line printed by a shell command | command |
| `gid`, `uid`, `username` | current user | ignored |
| `vol_perc` | OSS mixer volume | mixer device, e.g. `/dev/mixer` |
| `wifi_perc`, `wifi_essid` | wireless link quality in percent; network name | interface name |

Sizes are shown with binary prefixes, e.g. `3.2 Gi`. `cpu_perc`,
`netspeed_rx` and `netspeed_tx` need one earlier sample, so they show the
placeholder on the first update.

## Using it from Python

```python
from statusbar.cli import render_status
from statusbar.config import Arg, Config

config = Config(
    args=(
        Arg("cpu_perc", "CPU: %s%% | "),
        Arg("ram_used", "RAM: %sB | "),
        Arg("datetime", "%s", "%a %d %H:%M:%S"),
    ),
)
print(render_status(config, config.functions()))
```

`Config` also takes `interval` (milliseconds, default 1000), `unknown_str`
(default `n/a`) and `maxlen` (default 2048 bytes; rendering stops at the first
element that would reach it). `render_status` raises `ValueError` for an
unknown component name. `statusbar.cli.run(config, single, out)` repeats the
rendering every interval and writes each line to `out`.

The components can also be called directly, e.g.
`statusbar.memory.ram_used()` or `statusbar.cpu.CpuUsage().percent()`; they
raise `statusbar.util.StatusError` when a value cannot be read.

`statusbar.util.fmt_human` formats a number with SI (`base=1000`) or binary
(`base=1024`) prefixes:

```python
>>> from statusbar.util import fmt_human
>>> fmt_human(1536, 1024)
'1.5 Ki'
```

## Running the tests

```sh
pip install ".[test]"
pytest
```