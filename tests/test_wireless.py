import pytest

from statusbar.util import StatusError
from statusbar.wireless import (
    parse_wireless_quality,
    rssi_to_perc,
    vol_perc,
    wifi_essid,
    wifi_perc,
)

HEADER = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
)


def wireless_text(interface, quality):
    return (
        HEADER
        + f" {interface}: 0000   {quality}.  -40.  -256        0      0      0      0      0        0\n"
    )


def test_rssi_bounds():
    assert rssi_to_perc(-50) == 100
    assert rssi_to_perc(-10) == 100
    assert rssi_to_perc(-100) == 0
    assert rssi_to_perc(-130) == 0


def test_rssi_monotonic_and_in_range():
    values = [rssi_to_perc(rssi) for rssi in range(-120, 0)]
    assert values == sorted(values)
    assert all(0 <= value <= 100 for value in values)


def test_quality_at_maximum_is_full():
    assert parse_wireless_quality(wireless_text("wlan0", 70), "wlan0") == "100"


def test_quality_zero():
    assert parse_wireless_quality(wireless_text("wlan0", 0), "wlan0") == "0"


def test_quality_grows_with_link():
    low = int(parse_wireless_quality(wireless_text("wlan0", 20), "wlan0"))
    high = int(parse_wireless_quality(wireless_text("wlan0", 50), "wlan0"))
    assert low < high


def test_quality_missing_interface():
    with pytest.raises(StatusError):
        parse_wireless_quality(wireless_text("wlan0", 50), "wlan1")


def test_quality_needs_data_line():
    with pytest.raises(StatusError):
        parse_wireless_quality(HEADER, "wlan0")


def test_wifi_perc_reads_files(tmp_path):
    iface = tmp_path / "net" / "wlan0"
    iface.mkdir(parents=True)
    (iface / "operstate").write_text("up\n")
    wireless = tmp_path / "wireless"
    wireless.write_text(wireless_text("wlan0", 70))
    assert wifi_perc("wlan0", str(tmp_path / "net"), str(wireless)) == "100"


def test_wifi_perc_interface_down(tmp_path):
    iface = tmp_path / "net" / "wlan0"
    iface.mkdir(parents=True)
    (iface / "operstate").write_text("down\n")
    wireless = tmp_path / "wireless"
    wireless.write_text(wireless_text("wlan0", 70))
    with pytest.raises(StatusError):
        wifi_perc("wlan0", str(tmp_path / "net"), str(wireless))


def test_wifi_perc_missing_operstate(tmp_path):
    with pytest.raises(StatusError):
        wifi_perc("wlan0", str(tmp_path), str(tmp_path / "wireless"))


def test_wifi_essid_unknown_interface():
    with pytest.raises(StatusError):
        wifi_essid("nosuchif0")


def test_wifi_essid_name_too_long():
    with pytest.raises(StatusError):
        wifi_essid("x" * 20)


def test_vol_perc_missing_device(tmp_path):
    with pytest.raises(StatusError):
        vol_perc(str(tmp_path / "mixer"))


def test_vol_perc_not_a_mixer(tmp_path):
    plain = tmp_path / "mixer"
    plain.write_text("")
    with pytest.raises(StatusError):
        vol_perc(str(plain))