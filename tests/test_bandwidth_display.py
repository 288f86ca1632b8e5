import unittest
import sys
import os
import ipaddress

# Add parent dir to path to import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from display.bandwidth import DisplayBandwidth, display_upload_and_download
from display.ui_state import ConnectionData, NetworkData
from network.connection import (
    Connection,
    Protocol,
    Socket,
    display_connection_string,
    display_ip_or_host,
)


class TestDisplayBandwidth(unittest.TestCase):
    def test_unit_thresholds(self):
        self.assertEqual(str(DisplayBandwidth(0)), "0Bps")
        self.assertEqual(str(DisplayBandwidth(999)), "999Bps")
        self.assertEqual(str(DisplayBandwidth(1000)), "1.00KBps")
        self.assertEqual(str(DisplayBandwidth(999_999)), "1000.00KBps")
        self.assertEqual(str(DisplayBandwidth(1_000_000)), "1.00MBps")
        self.assertEqual(str(DisplayBandwidth(1_500_000)), "1.50MBps")
        self.assertEqual(str(DisplayBandwidth(2_000_000_000)), "2.00GBps")

    def test_fstring_uses_display_form(self):
        self.assertEqual(f"{DisplayBandwidth(12_500)}", "12.50KBps")

    def test_upload_then_download(self):
        data = NetworkData(bytes_uploaded=1000, bytes_downloaded=2_000_000, connection_count=3)
        self.assertEqual(display_upload_and_download(data), "1.00KBps / 2.00MBps")

    def test_connection_data_is_a_bandwidth(self):
        data = ConnectionData("curl", "eth0", bytes_uploaded=10, bytes_downloaded=20)
        self.assertEqual(display_upload_and_download(data), "10Bps / 20Bps")


class TestConnectionDisplay(unittest.TestCase):
    def setUp(self):
        self.connection = Connection(Socket.parse("93.184.216.34", 443), Protocol.TCP, 51234)

    def test_address_without_hostname(self):
        ip = ipaddress.ip_address("10.0.0.1")
        self.assertEqual(display_ip_or_host(ip, {}), "10.0.0.1")

    def test_address_with_hostname(self):
        ip = ipaddress.ip_address("2606:4700:4700::1111")
        self.assertEqual(display_ip_or_host(ip, {ip: "one.one.one.one"}), "one.one.one.one")

    def test_connection_string(self):
        self.assertEqual(
            display_connection_string(self.connection, {}, "eth0"),
            "<eth0>:51234 => 93.184.216.34:443 (tcp)",
        )

    def test_connection_string_uses_resolved_host(self):
        ip = self.connection.remote_socket.ip
        udp = Connection(self.connection.remote_socket, Protocol.UDP, 5353)
        self.assertEqual(
            display_connection_string(udp, {ip: "example.com"}, "wlan0"),
            "<wlan0>:5353 => example.com:443 (udp)",
        )

    def test_connections_are_hashable_keys(self):
        same = Connection(Socket.parse("93.184.216.34", 443), Protocol.TCP, 51234)
        self.assertEqual({self.connection: 1}[same], 1)


if __name__ == "__main__":
    unittest.main()
