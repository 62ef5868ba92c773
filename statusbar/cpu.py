"""CPU frequency and utilisation."""

from __future__ import annotations

from .util import StatusError, fmt_human, read_first_line, read_int

PROC_STAT = "/proc/stat"
SCALING_CUR_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


class CpuUsage:
    """Tracks successive /proc/stat samples to compute CPU usage."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: tuple[float, ...] = (0.0,) * _FIELDS

    def _sample(self) -> tuple[float, ...]:
        fields = read_first_line(self.stat_path).split()[1 : 1 + _FIELDS]
        if len(fields) != _FIELDS:
            raise StatusError(f"malformed '{self.stat_path}'")
        try:
            return tuple(float(value) for value in fields)
        except ValueError as exc:
            raise StatusError(f"malformed '{self.stat_path}'") from exc

    def percent(self) -> str:
        """Return usage since the previous call, in whole percent."""
        old = self._previous
        new = self._sample()
        self._previous = new
        if old[0] == 0:
            raise StatusError("no previous CPU sample")

        total = sum(old) - sum(new)
        if total == 0:
            raise StatusError("no CPU time elapsed")

        busy = sum(old[i] for i in _BUSY) - sum(new[i] for i in _BUSY)
        return str(int(100 * busy / total))


def cpu_freq(path: str = SCALING_CUR_FREQ) -> str:
    """Return the current frequency of the first CPU, scaled to Hz."""
    return fmt_human(read_int(path) * 1000, 1000)