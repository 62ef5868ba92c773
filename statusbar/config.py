"""Status line configuration and the table of available components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import battery, memory, sensors, system, wireless
from .cpu import CpuUsage, cpu_freq
from .network import NetSpeed, ipv4, ipv6

Component = Callable[[Optional[str]], str]


@dataclass(frozen=True)
class Arg:
    """One status element: a component name, a printf-style format and its argument."""

    func: str
    fmt: str
    args: str | None = None


@dataclass(frozen=True)
class Config:
    """Update interval (ms), placeholder for missing values, length limit and elements."""

    args: tuple[Arg, ...] = ()
    interval: int = 1000
    unknown_str: str = "n/a"
    maxlen: int = 2048

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        if self.maxlen <= 0:
            raise ValueError("maxlen must be positive")

    def functions(self) -> dict[str, Component]:
        """Return fresh component callables, keyed by name, taking one argument."""
        cpu = CpuUsage()
        net = NetSpeed(self.interval)

        def ignoring(func: Callable[[], str]) -> Component:
            return lambda _arg: func()

        return {
            "battery_perc": battery.battery_perc,
            "battery_state": battery.battery_state,
            "battery_remaining": battery.battery_remaining,
            "cpu_perc": ignoring(cpu.percent),
            "cpu_freq": ignoring(cpu_freq),
            "datetime": system.datetime_str,
            "disk_free": system.disk_free,
            "disk_perc": system.disk_perc,
            "disk_total": system.disk_total,
            "disk_used": system.disk_used,
            "entropy": ignoring(system.entropy),
            "gid": ignoring(system.gid),
            "hostname": ignoring(system.hostname),
            "ipv4": ipv4,
            "ipv6": ipv6,
            "kernel_release": ignoring(system.kernel_release),
            "load_avg": ignoring(system.load_avg),
            "netspeed_rx": net.rx,
            "netspeed_tx": net.tx,
            "num_files": system.num_files,
            "ram_free": ignoring(memory.ram_free),
            "ram_perc": ignoring(memory.ram_perc),
            "ram_total": ignoring(memory.ram_total),
            "ram_used": ignoring(memory.ram_used),
            "run_command": sensors.run_command,
            "swap_free": ignoring(memory.swap_free),
            "swap_perc": ignoring(memory.swap_perc),
            "swap_total": ignoring(memory.swap_total),
            "swap_used": ignoring(memory.swap_used),
            "temp": sensors.temp,
            "uid": ignoring(system.uid),
            "uptime": ignoring(system.uptime),
            "username": ignoring(system.username),
            "vol_perc": wireless.vol_perc,
            "wifi_perc": wireless.wifi_perc,
            "wifi_essid": wireless.wifi_essid,
        }


DESKTOP_ARGS = (
    Arg("run_command", "%s ", "mpc --format '%artist% - %title%' | head -1"),
    Arg(
        "run_command",
        "%s | ",
        "mpc status '(%currenttime%/%totaltime%) Shuffle: %random%'",
    ),
    Arg("run_command", "%s | ", "wpctl get-volume @DEFAULT_AUDIO_SINK@"),
    Arg("cpu_perc", "CPU: %s%% | "),
    Arg("ram_used", "RAM: %sB | "),
    Arg("run_command", "%s | ", "cat ~/keyboardlayout"),
    Arg("datetime", "%s ", "%a %d %H:%M:%S"),
)


def default_config() -> Config:
    """Return the stock configuration: the date and time, once a second."""
    return Config(args=(Arg("datetime", "%s", "%F %T"),))