"""Basic ifconfig-like control of a network interface."""

from __future__ import annotations

import fcntl
import os
import socket
import struct

IFNAMSIZ = 16
IFREQ_SIZE = 40
IFF_UP = 0x1

SIOCGIFFLAGS = 0x8913
SIOCSIFFLAGS = 0x8914
SIOCSIFADDR = 0x8916
SIOCSIFNETMASK = 0x891C


def _parse_ipv4(text: str) -> bytes:
    try:
        return socket.inet_pton(socket.AF_INET, text)
    except OSError as exc:
        raise ValueError(f"invalid IPv4 address: {text!r}") from exc


def _ifreq(name: bytes, payload: bytes) -> bytes:
    return (name.ljust(IFNAMSIZ, b"\0") + payload).ljust(IFREQ_SIZE, b"\0")


def _sockaddr_in(addr: bytes) -> bytes:
    return struct.pack("=H", socket.AF_INET) + b"\0\0" + addr + b"\0" * 8


def ifconfig(ifname: str, addr: str | None = None, mask: str | None = None,
             up: bool = True) -> None:
    """Bring interface *ifname* up or down.

    When bringing it up, *addr* is set as its IPv4 address and, unless
    *addr* is ``0.0.0.0``, *mask* as its netmask.  Raises OSError when
    the kernel refuses a request.
    """
    if not ifname:
        raise ValueError("ifconfig() needs an interface name")
    name = os.fsencode(ifname)[:IFNAMSIZ - 1]

    address = _parse_ipv4(addr) if up and addr else None
    netmask = None
    if up and addr and mask and addr != "0.0.0.0":
        netmask = _parse_ipv4(mask)

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_IP) as sd:
        fd = sd.fileno()
        if address is not None:
            fcntl.ioctl(fd, SIOCSIFADDR, _ifreq(name, _sockaddr_in(address)))
        if netmask is not None:
            fcntl.ioctl(fd, SIOCSIFNETMASK, _ifreq(name, _sockaddr_in(netmask)))

        reply = fcntl.ioctl(fd, SIOCGIFFLAGS, _ifreq(name, b""))
        (flags,) = struct.unpack_from("=H", reply, IFNAMSIZ)
        flags = flags | IFF_UP if up else flags & ~IFF_UP & 0xFFFF
        fcntl.ioctl(fd, SIOCSIFFLAGS, _ifreq(name, struct.pack("=H", flags)))