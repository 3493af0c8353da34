import pytest

from dsalgo.hashing import (
    ConsistentHash,
    PhysicalHost,
    VirtualHost,
    md5_file,
    md5_hex,
    ring_hash,
)

CLIENTS = [
    "192.168.1.123",
    "192.168.1.12",
    "192.168.1.13",
    "192.168.1.23",
    "192.168.1.54",
    "192.168.1.89",
    "192.168.1.21",
    "192.168.1.27",
    "192.168.1.49",
    "192.168.1.145",
    "192.168.2.34",
    "192.168.6.78",
    "192.168.2.90",
    "192.168.4.5",
]


@pytest.fixture
def hosts():
    return [
        PhysicalHost("10.117.124.10", 150),
        PhysicalHost("10.117.124.20", 150),
        PhysicalHost("10.117.124.30", 150),
    ]


@pytest.fixture
def ring(hosts):
    chash = ConsistentHash()
    for host in hosts:
        chash.add_host(host)
    return chash


def test_md5_hex_empty_string():
    assert md5_hex("") == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_hex_short_is_middle_of_long():
    full = md5_hex("192.168.1.100#0")
    assert md5_hex("192.168.1.100#0", 16) == full[8:24]
    assert len(full) == 32


def test_md5_hex_bad_length():
    with pytest.raises(ValueError):
        md5_hex("110", 20)


def test_md5_file_matches_text(tmp_path):
    path = tmp_path / "data.bin"
    content = "x" * 3000
    path.write_text(content)
    assert md5_file(path) == md5_hex(content)
    assert md5_file(path, 16) == md5_hex(content, 16)


def test_md5_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        md5_file(tmp_path / "missing")
    path = tmp_path / "f"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        md5_file(path, 8)


def test_ring_hash_range_and_determinism():
    first = ring_hash("110")
    assert first == ring_hash("110")
    assert 0 <= first < 2**32
    assert ring_hash("111") != first


def test_physical_host_virtual_nodes():
    host = PhysicalHost("10.0.0.1", 4)
    assert [v.ip for v in host.virtual_hosts] == [
        "10.0.0.1#0", "10.0.0.1#1", "10.0.0.1#2", "10.0.0.1#3",
    ]
    assert all(v.host is host for v in host.virtual_hosts)
    assert all(v.position == ring_hash(v.ip) for v in host.virtual_hosts)


def test_virtual_host_equality_by_ip():
    a = PhysicalHost("a", 0)
    b = PhysicalHost("b", 0)
    assert VirtualHost("x#1", a) == VirtualHost("x#1", b)
    assert len({VirtualHost("x#1", a), VirtualHost("x#1", b)}) == 1


def test_ring_holds_all_virtual_nodes(ring):
    assert len(ring) == 450


def test_distribute_covers_all_clients(ring, hosts):
    groups = ring.distribute(CLIENTS)
    assert sorted(ip for ips in groups.values() for ip in ips) == sorted(CLIENTS)
    assert set(groups) <= {h.ip for h in hosts}
    assert list(groups) == sorted(groups)


def test_remove_host_only_moves_its_clients(ring, hosts):
    before = {ip: ring.get_host(ip) for ip in CLIENTS}
    ring.remove_host(hosts[0])
    after = {ip: ring.get_host(ip) for ip in CLIENTS}
    assert hosts[0].ip not in after.values()
    for ip in CLIENTS:
        if before[ip] != hosts[0].ip:
            assert after[ip] == before[ip]
    assert len(ring) == 300


def test_single_host_serves_everyone():
    chash = ConsistentHash()
    chash.add_host(PhysicalHost("10.1.1.1", 3))
    assert {chash.get_host(ip) for ip in CLIENTS} == {"10.1.1.1"}


def test_empty_ring_raises(hosts):
    chash = ConsistentHash()
    with pytest.raises(LookupError):
        chash.get_host("192.168.1.1")
    chash.add_host(hosts[0])
    chash.remove_host(hosts[0])
    with pytest.raises(LookupError):
        chash.get_host("192.168.1.1")