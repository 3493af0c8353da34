"""MD5 helpers and a consistent-hashing ring with virtual nodes."""

from __future__ import annotations

import hashlib
import os
from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable
from dataclasses import dataclass, field

_CHUNK_SIZE = 1024


def _render(hexdigest: str, length: int) -> str:
    if length == 32:
        return hexdigest
    if length == 16:
        return hexdigest[8:24]
    raise ValueError(f"md5 length must be 16 or 32, got {length}")


def md5_hex(text: str | bytes, length: int = 32) -> str:
    """Return the MD5 of text as lower-case hex, 32 chars or the middle 16."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return _render(hashlib.md5(data).hexdigest(), length)


def md5_file(path: str | os.PathLike, length: int = 32) -> str:
    """Return the MD5 of a file's contents as lower-case hex."""
    if length not in (16, 32):
        raise ValueError(f"md5 length must be 16 or 32, got {length}")
    digest = hashlib.md5()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return _render(digest.hexdigest(), length)


def ring_hash(text: str | bytes) -> int:
    """Map text to a 32-bit ring position.

    The 32-character hex digest is read as eight little-endian groups of
    four ASCII bytes, which are summed modulo 2**32.
    """
    hexdigest = md5_hex(text).encode("ascii")
    total = sum(
        int.from_bytes(hexdigest[i:i + 4], "little")
        for i in range(0, len(hexdigest), 4)
    )
    return total & 0xFFFFFFFF


@dataclass(frozen=True, eq=False)
class VirtualHost:
    """A virtual node on the ring, owned by a physical host."""

    ip: str
    host: PhysicalHost = field(repr=False)
    position: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", ring_hash(self.ip))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VirtualHost):
            return NotImplemented
        return self.ip == other.ip

    def __hash__(self) -> int:
        return hash(self.ip)

    def __lt__(self, other: VirtualHost) -> bool:
        return self.position < other.position


class PhysicalHost:
    """A real machine represented on the ring by `vnumber` virtual nodes."""

    def __init__(self, ip: str, vnumber: int) -> None:
        self.ip = ip
        self.virtual_hosts = tuple(
            VirtualHost(f"{ip}#{i}", self) for i in range(vnumber)
        )

    def __repr__(self) -> str:
        return f"PhysicalHost({self.ip!r}, {len(self.virtual_hosts)})"


class ConsistentHash:
    """A hash ring that maps client addresses to physical hosts."""

    def __init__(self) -> None:
        self._positions: list[int] = []
        self._ring: dict[int, VirtualHost] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def add_host(self, host: PhysicalHost) -> None:
        """Place every virtual node of host on the ring.

        A node whose position is already taken is not added.
        """
        for vhost in host.virtual_hosts:
            if vhost.position not in self._ring:
                self._ring[vhost.position] = vhost
                insort(self._positions, vhost.position)

    def remove_host(self, host: PhysicalHost) -> None:
        """Take every ring position held by host's virtual nodes off the ring."""
        for vhost in host.virtual_hosts:
            if self._ring.pop(vhost.position, None) is not None:
                del self._positions[bisect_left(self._positions, vhost.position)]

    def get_host(self, client_ip: str) -> str:
        """Return the ip of the physical host serving client_ip."""
        if not self._positions:
            raise LookupError("the hash ring holds no hosts")
        index = bisect_right(self._positions, ring_hash(client_ip))
        position = self._positions[index % len(self._positions)]
        return self._ring[position].host.ip

    def distribute(self, client_ips: Iterable[str]) -> dict[str, list[str]]:
        """Group client ips by the host serving them, keyed in host order."""
        groups: dict[str, list[str]] = {}
        for client_ip in client_ips:
            groups.setdefault(self.get_host(client_ip), []).append(client_ip)
        return dict(sorted(groups.items()))