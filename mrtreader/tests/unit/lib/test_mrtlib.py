# Copyright (C) 2016 Nippon Telegraph and Telephone Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import logging
import unittest
from unittest import mock

import netaddr

from mrtreader import cfg
from mrtreader.exception import InvalidEncoding
from mrtreader.exception import InvalidPeerIndex
from mrtreader.exception import InvalidPrefixLength
from mrtreader.exception import MrtDecodeError
from mrtreader.exception import Truncated
from mrtreader.lib import mrtlib
from mrtreader.lib.packet import afi
from mrtreader.lib.packet import bgp


LOG = logging.getLogger(__name__)


def _header(type_, subtype, body, timestamp=b'\x58\x17\xda\x00'):
    length = len(body).to_bytes(4, 'big')
    return (timestamp + type_.to_bytes(2, 'big') +
            subtype.to_bytes(2, 'big') + length)


def _record(type_, subtype, body):
    return _header(type_, subtype, body) + body


PEER_INDEX_TABLE_BODY = (
    b'\x01\x02\x03\x04'  # collector_bgp_id
    b'\x00\x00'  # view_name_len
    b'\x00\x01'  # peer_count
    b'\x00'  # peer_type = IPv4, 2 octet AS
    b'\x0a\x0a\x0a\x0a'  # peer_bgp_id
    b'\x0a\x00\x00\x01'  # peer_ip
    b'\xfd\xe8'  # peer_as = 65000
)

RIB_IPV4_EMPTY_BODY = (
    b'\x00\x00\x00\x00'  # seq_num
    b'\x18'  # prefix_len
    b'\xc0\xa8\x01'  # prefix = 192.168.1.0
    b'\x00\x00'  # entry_count
)

RIB_IPV4_BODY = (
    b'\x00\x00\x00\x01'  # seq_num
    b'\x18\xc0\x00\x02'  # prefix = 192.0.2.0/24
    b'\x00\x01'  # entry_count
    b'\x00\x00'  # peer_index
    b'\x58\x17\xda\x00'  # originated_time
    b'\x00\x18'  # attr_len
    b'\x40\x01\x01\x00'  # ORIGIN
    b'\x40\x02\x0a\x02\x02'  # AS_PATH
    b'\x00\x00\x0b\x62'  # 2914
    b'\x00\x00\x0d\x1c'  # 3356
    b'\x40\x03\x04\xc0\x00\x02\x01'  # NEXT_HOP
)

RIB_IPV6_BODY = (
    b'\x00\x00\x00\x02'  # seq_num
    b'\x20\x20\x01\x0d\xb8'  # prefix = 2001:db8::/32
    b'\x00\x01'  # entry_count
    b'\x00\x00'  # peer_index
    b'\x58\x17\xda\x00'  # originated_time
    b'\x00\x18'  # attr_len
    b'\x40\x01\x01\x00'  # ORIGIN
    b'\x80\x0e\x11'  # MP_REACH_NLRI
    b'\x10'  # next_hop_len
    b'\x20\x01\x0d\xb8\x00\x00\x00\x00'
    b'\x00\x00\x00\x00\x00\x00\x00\x01'  # 2001:db8::1
)

TABLE_DUMP_BODY = (
    b'\x00\x00'  # view_num
    b'\x00\x05'  # seq_num
    b'\xc0\x00\x02\x00'  # prefix
    b'\x18'  # prefix_len
    b'\x01'  # status
    b'\x58\x17\xda\x00'  # originated_time
    b'\x0a\x00\x00\x01'  # peer_ip
    b'\xfd\xe8'  # peer_as
    b'\x00\x09'  # attr_len
    b'\x40\x02\x06\x02\x02'  # AS_PATH
    b'\x0b\x62'  # 2914
    b'\x0d\x1c'  # 3356
)

PEER_INDEX_TABLE = _record(13, 1, PEER_INDEX_TABLE_BODY)
RIB_IPV4_EMPTY = _record(13, 2, RIB_IPV4_EMPTY_BODY)
RIB_IPV4 = _record(13, 2, RIB_IPV4_BODY)
RIB_IPV6 = _record(13, 4, RIB_IPV6_BODY)
TABLE_DUMP = _record(12, 1, TABLE_DUMP_BODY)


class TestMrtlibMrtHeader(unittest.TestCase):
    """
    Test case for mrtreader.lib.mrtlib.MrtHeader.
    """

    def test_parse(self):
        record, rest = mrtlib.MrtRecord.parse(RIB_IPV4_EMPTY)
        header = record.header

        self.assertEqual(0x5817da00, header.timestamp)
        self.assertEqual(mrtlib.MrtRecord.TYPE_TABLE_DUMP_V2, header.type)
        self.assertEqual(mrtlib.MrtRecord.SUBTYPE_RIB_IPV4_UNICAST,
                         header.subtype)
        self.assertEqual(len(RIB_IPV4_EMPTY_BODY), header.length)
        self.assertEqual(None, header.ms_timestamp)
        self.assertEqual(float(0x5817da00), header.timestamp_float)
        self.assertEqual(b'', rest)

    def test_parse_short(self):
        self.assertRaises(Truncated, mrtlib.MrtRecord.parse,
                          RIB_IPV4_EMPTY[:11])

    def test_extended_timestamp(self):
        body = (
            b'\x00\x0f\x42\x3f'  # ms_timestamp = 999999
            b'\xaa\xbb\xcc'
        )
        record, _ = mrtlib.MrtRecord.parse(
            _record(mrtlib.MrtRecord.TYPE_BGP4MP_ET, 4, body))

        self.assertTrue(isinstance(record, mrtlib.UnsupportedMrtRecord))
        self.assertEqual(999999, record.header.ms_timestamp)
        self.assertEqual(7, record.header.length)
        self.assertEqual(b'\xaa\xbb\xcc', record.buf)
        self.assertAlmostEqual(0x5817da00 + 0.999999,
                               record.header.timestamp_float)


class TestMrtlibTableDump2PeerIndexTable(unittest.TestCase):
    """
    Test case for mrtreader.lib.mrtlib.TableDump2PeerIndexTableMrtRecord.
    """

    def test_parse(self):
        record, rest = mrtlib.MrtRecord.parse(PEER_INDEX_TABLE)

        self.assertTrue(isinstance(
            record, mrtlib.TableDump2PeerIndexTableMrtRecord))
        self.assertEqual(b'', rest)
        self.assertEqual('1.2.3.4', record.bgp_id)
        self.assertEqual('', record.view_name)
        self.assertEqual(1, len(record.peer_entries))
        peer = record.peer_entries[0]
        self.assertEqual('10.10.10.10', peer.bgp_id)
        self.assertEqual('10.0.0.1', peer.ip_addr)
        self.assertEqual(65000, peer.as_num)
        self.assertFalse(peer.is_ipv6)
        self.assertFalse(peer.is_as4)

    def test_parse_ipv6_as4_peer(self):
        body = (
            b'\x01\x02\x03\x04'
            b'\x00\x04' b'rrc0'  # view_name
            b'\x00\x02'
            b'\x03'  # peer_type = IPv6, 4 octet AS
            b'\x0a\x0a\x0a\x0a'
            b'\x20\x01\x0d\xb8\x00\x00\x00\x00'
            b'\x00\x00\x00\x00\x00\x00\x00\x01'
            b'\x00\x03\x0d\x40'  # 200000
            b'\x02'  # peer_type = IPv4, 4 octet AS
            b'\x0b\x0b\x0b\x0b'
            b'\xc0\x00\x02\x01'
            b'\x00\x00\x0b\x62'
        )
        record, _ = mrtlib.MrtRecord.parse(_record(13, 1, body))

        self.assertEqual('rrc0', record.view_name)
        self.assertEqual(['2001:db8::1', '192.0.2.1'],
                         [p.ip_addr for p in record.peer_entries])
        self.assertEqual([200000, 2914],
                         [p.as_num for p in record.peer_entries])
        self.assertTrue(record.peer_entries[0].is_ipv6)
        self.assertTrue(record.peer_entries[1].is_as4)

    def test_parse_invalid_view_name(self):
        body = (
            b'\x01\x02\x03\x04'
            b'\x00\x01\xff'  # not UTF-8
            b'\x00\x00'
        )
        self.assertRaises(InvalidEncoding, mrtlib.MrtRecord.parse,
                          _record(13, 1, body))

    def test_parse_deterministic(self):
        record1, _ = mrtlib.MrtRecord.parse(PEER_INDEX_TABLE)
        record2, _ = mrtlib.MrtRecord.parse(PEER_INDEX_TABLE)

        self.assertEqual(record1.to_jsondict(), record2.to_jsondict())

    def test_get_peer(self):
        record, _ = mrtlib.MrtRecord.parse(PEER_INDEX_TABLE)

        self.assertEqual('10.0.0.1', record.get_peer(0).ip_addr)
        self.assertRaises(InvalidPeerIndex, record.get_peer, 1)

    def test_validate_peer_indices(self):
        peer_table, _ = mrtlib.MrtRecord.parse(PEER_INDEX_TABLE)
        rib, _ = mrtlib.MrtRecord.parse(RIB_IPV4)

        peer_table.validate_peer_indices(rib)

        rib.rib_entries[0].peer_index = 3
        with self.assertRaises(InvalidPeerIndex) as cm:
            peer_table.validate_peer_indices(rib)
        self.assertEqual(3, cm.exception.kwargs['index'])
        self.assertEqual(1, cm.exception.kwargs['count'])


class TestMrtlibTableDump2Rib(unittest.TestCase):
    """
    Test case for the RIB subtypes of TABLE_DUMP_V2.
    """

    def test_parse_empty(self):
        record, _ = mrtlib.MrtRecord.parse(RIB_IPV4_EMPTY)

        self.assertTrue(isinstance(
            record, mrtlib.TableDump2RibIPv4UnicastMrtRecord))
        self.assertEqual(0, record.seq_num)
        self.assertEqual('192.168.1.0/24', record.prefix.prefix)
        self.assertEqual(netaddr.IPNetwork('192.168.1.0/24'),
                         record.prefix.network)
        self.assertEqual([], record.rib_entries)
        self.assertEqual([], record.get_origin_as())

    def test_parse_ipv4(self):
        record, _ = mrtlib.MrtRecord.parse(RIB_IPV4)

        self.assertEqual(1, record.seq_num)
        self.assertEqual(1, len(record.rib_entries))
        rib_entry = record.rib_entries[0]
        self.assertEqual(0, rib_entry.peer_index)
        self.assertEqual(0x5817da00, rib_entry.originated_time)
        self.assertEqual(24, rib_entry.attr_len)
        origin, as_path, next_hop = rib_entry.bgp_attributes
        self.assertEqual(bgp.BGP_ATTR_ORIGIN_IGP, origin.value)
        self.assertTrue(as_path.as4)
        self.assertEqual([2914, 3356], as_path.value[0].as_numbers)
        self.assertEqual('192.0.2.1', next_hop.value)
        self.assertEqual([3356], rib_entry.get_origin_as())
        self.assertEqual([3356], record.get_origin_as())

    def test_parse_ipv6_abbreviated_mp_reach(self):
        record, _ = mrtlib.MrtRecord.parse(RIB_IPV6)

        self.assertTrue(isinstance(
            record, mrtlib.TableDump2RibIPv6UnicastMrtRecord))
        self.assertEqual('2001:db8::/32', record.prefix.prefix)
        _, mp_reach = record.rib_entries[0].bgp_attributes
        self.assertTrue(mp_reach.abbreviated)
        self.assertEqual(afi.IP6, mp_reach.afi)
        self.assertEqual(['2001:db8::1'], mp_reach.next_hop)

    def test_parse_two_octet_as_context(self):
        # RIB_IPV4 carries four octet AS numbers
        self.assertRaises(Truncated, mrtlib.MrtRecord.parse, RIB_IPV4,
                          rib_as4=False)

        body = (
            b'\x00\x00\x00\x03'  # seq_num
            b'\x18\xc0\x00\x02'  # prefix = 192.0.2.0/24
            b'\x00\x01'  # entry_count
            b'\x00\x00'  # peer_index
            b'\x58\x17\xda\x00'  # originated_time
            b'\x00\x09'  # attr_len
            b'\x40\x02\x06\x02\x02'  # AS_PATH
            b'\x0b\x62'  # 2914
            b'\x0d\x1c'  # 3356
        )
        record, _ = mrtlib.MrtRecord.parse(_record(13, 2, body),
                                           rib_as4=False)

        self.assertEqual(mrtlib.MrtRecord.SUBTYPE_RIB_IPV4_UNICAST,
                         record.subtype)
        (as_path,) = record.rib_entries[0].bgp_attributes
        self.assertFalse(as_path.as4)
        self.assertEqual([2914, 3356], as_path.value[0].as_numbers)
        self.assertEqual([3356], record.get_origin_as())

    def test_parse_invalid_prefix_length(self):
        body = (
            b'\x00\x00\x00\x00'
            b'\x21\xc0\xa8\x01\x00\x00'  # prefix_len = 33
            b'\x00\x00'
        )
        self.assertRaises(InvalidPrefixLength, mrtlib.MrtRecord.parse,
                          _record(13, 2, body))

    def test_attr_len_bounds_attributes(self):
        # attr_len claims 4 bytes while the ORIGIN attribute needs 5
        body = (
            b'\x00\x00\x00\x00'
            b'\x00'
            b'\x00\x01'
            b'\x00\x00\x00\x00\x00\x00'
            b'\x00\x04'
            b'\x40\x01\x02\x00\x00'
        )
        self.assertRaises(Truncated, mrtlib.MrtRecord.parse,
                          _record(13, 2, body))

    def test_entry_count_exceeds_body(self):
        body = RIB_IPV4_EMPTY_BODY[:-2] + b'\x00\x01'
        self.assertRaises(Truncated, mrtlib.MrtRecord.parse,
                          _record(13, 2, body))

    def test_leftover_bytes_in_body(self):
        body = RIB_IPV4_EMPTY_BODY + b'\xde\xad'
        record, rest = mrtlib.MrtRecord.parse(
            _record(13, 2, body) + b'\xff')

        self.assertEqual([], record.rib_entries)
        self.assertEqual(len(body), record.header.length)
        self.assertEqual(b'\xff', rest)

    def test_truncated_body(self):
        bodies = [
            (13, 1, PEER_INDEX_TABLE_BODY),
            (13, 2, RIB_IPV4_BODY),
            (13, 4, RIB_IPV6_BODY),
            (12, 1, TABLE_DUMP_BODY),
        ]
        for type_, subtype, body in bodies:
            for i in range(len(body)):
                with self.assertRaises(Truncated) as cm:
                    mrtlib.MrtRecord.parse(_record(type_, subtype, body[:i]))
                self.assertEqual(body[:i], cm.exception.buf)
                self.assertEqual(type_, cm.exception.header.type)


class TestMrtlibTableDump(unittest.TestCase):
    """
    Test case for mrtreader.lib.mrtlib.TableDumpMrtRecord.
    """

    def test_parse(self):
        record, _ = mrtlib.MrtRecord.parse(TABLE_DUMP)

        self.assertTrue(isinstance(record, mrtlib.TableDumpMrtRecord))
        self.assertEqual(0, record.view_num)
        self.assertEqual(5, record.seq_num)
        self.assertEqual('192.0.2.0', record.prefix)
        self.assertEqual(24, record.prefix_len)
        self.assertEqual(netaddr.IPNetwork('192.0.2.0/24'), record.network)
        self.assertEqual(1, record.status)
        self.assertEqual('10.0.0.1', record.peer_ip)
        self.assertEqual(65000, record.peer_as)
        self.assertEqual(9, record.attr_len)
        (as_path,) = record.bgp_attributes
        self.assertFalse(as_path.as4)
        self.assertEqual([2914, 3356], as_path.value[0].as_numbers)
        self.assertEqual([3356], record.get_origin_as())

    def test_parse_ipv6(self):
        body = (
            b'\x00\x00\x00\x01'
            b'\x20\x01\x0d\xb8' + b'\x00' * 12 +
            b'\x20'  # prefix_len
            b'\x01'
            b'\x58\x17\xda\x00'
            b'\x20\x01\x0d\xb8' + b'\x00' * 11 + b'\x01' +
            b'\xfd\xe8'
            b'\x00\x00'  # no attributes
        )
        record, _ = mrtlib.MrtRecord.parse(_record(12, 2, body))

        self.assertEqual('2001:db8::', record.prefix)
        self.assertEqual(32, record.prefix_len)
        self.assertEqual('2001:db8::1', record.peer_ip)
        self.assertEqual([], record.bgp_attributes)

    def test_parse_invalid_prefix_length(self):
        body = TABLE_DUMP_BODY[:8] + b'\x21' + TABLE_DUMP_BODY[9:]
        self.assertRaises(InvalidPrefixLength, mrtlib.MrtRecord.parse,
                          _record(12, 1, body))


class TestMrtlibUnsupported(unittest.TestCase):
    """
    Test case for mrtreader.lib.mrtlib.UnsupportedMrtRecord.
    """

    def test_unsupported_type(self):
        record, _ = mrtlib.MrtRecord.parse(_record(16, 4, b'\xaa\xbb\xcc'))

        self.assertTrue(isinstance(record, mrtlib.UnsupportedMrtRecord))
        self.assertEqual(16, record.type)
        self.assertEqual(4, record.subtype)
        self.assertEqual(b'\xaa\xbb\xcc', record.buf)

    def test_unsupported_subtype(self):
        # RIB_IPV4_MULTICAST
        record, _ = mrtlib.MrtRecord.parse(_record(13, 3, b'\x00'))

        self.assertTrue(isinstance(record, mrtlib.UnsupportedMrtRecord))
        self.assertEqual(b'\x00', record.buf)


class TestMrtlibReader(unittest.TestCase):
    """
    Test case for mrtreader.lib.mrtlib.Reader.
    """

    def test_reader(self):
        buf = PEER_INDEX_TABLE + RIB_IPV4_EMPTY + RIB_IPV4 + RIB_IPV6
        records = list(mrtlib.Reader(io.BytesIO(buf)))

        self.assertEqual(
            [mrtlib.TableDump2PeerIndexTableMrtRecord,
             mrtlib.TableDump2RibIPv4UnicastMrtRecord,
             mrtlib.TableDump2RibIPv4UnicastMrtRecord,
             mrtlib.TableDump2RibIPv6UnicastMrtRecord],
            [r.__class__ for r in records])

    def test_reader_bytes(self):
        records = list(mrtlib.Reader(TABLE_DUMP + TABLE_DUMP))

        self.assertEqual(2, len(records))

    def test_reader_empty(self):
        self.assertEqual([], list(mrtlib.Reader(b'')))

    def test_reader_short_reads(self):
        # file objects like pipes may return less than asked for
        class ShortReader(object):
            def __init__(self, buf):
                self._f = io.BytesIO(buf)

            def read(self, size):
                return self._f.read(min(size, 3))

        records = list(mrtlib.Reader(ShortReader(PEER_INDEX_TABLE + RIB_IPV4)))

        self.assertEqual(2, len(records))
        self.assertEqual([3356], records[1].get_origin_as())

    def test_reader_truncated_header(self):
        records = list(mrtlib.Reader(TABLE_DUMP + TABLE_DUMP[:5]))

        self.assertEqual(2, len(records))
        self.assertTrue(isinstance(records[0], mrtlib.TableDumpMrtRecord))
        self.assertTrue(isinstance(records[1], Truncated))
        self.assertEqual(None, records[1].header)
        self.assertEqual(TABLE_DUMP[:5], records[1].buf)

    def test_reader_truncated_body(self):
        reader = mrtlib.Reader(TABLE_DUMP[:-1])
        error = next(reader)

        self.assertTrue(isinstance(error, Truncated))
        self.assertEqual(12, error.header.type)
        self.assertRaises(StopIteration, next, reader)

    def test_reader_continues_after_error(self):
        bad = _record(13, 1, b'\x01\x02\x03\x04\x00\x01\xff\x00\x00')
        records = list(mrtlib.Reader(PEER_INDEX_TABLE + bad + RIB_IPV4))

        self.assertEqual(3, len(records))
        self.assertTrue(isinstance(records[1], InvalidEncoding))
        self.assertTrue(isinstance(records[1], MrtDecodeError))
        self.assertEqual(1, records[1].header.subtype)
        self.assertEqual(bad[12:], records[1].buf)
        self.assertTrue(isinstance(
            records[2], mrtlib.TableDump2RibIPv4UnicastMrtRecord))

    def test_records_skips_errors(self):
        bad = _record(13, 2, b'\x00\x00\x00\x00\x21\x00\x00\x00\x00\x00\x00')
        reader = mrtlib.Reader(RIB_IPV4_EMPTY + bad + RIB_IPV4)

        with mock.patch.object(mrtlib.LOG, 'warning') as warning:
            records = list(reader.records())

        self.assertEqual(2, len(records))
        self.assertEqual(1, warning.call_count)

    def test_records_logs_truncated_header(self):
        reader = mrtlib.Reader(RIB_IPV4_EMPTY + b'\x00')

        with mock.patch.object(mrtlib.LOG, 'warning') as warning:
            records = list(reader.records())

        self.assertEqual(1, len(records))
        self.assertEqual(1, warning.call_count)

    def test_unsupported_record_logs_debug(self):
        with mock.patch.object(mrtlib.LOG, 'debug') as debug:
            records = list(mrtlib.Reader(_record(16, 4, b'\x00')))

        self.assertTrue(isinstance(records[0], mrtlib.UnsupportedMrtRecord))
        debug.assert_called_once_with(
            'Unsupported MRT record type %d subtype %d', 16, 4)

    def test_context_manager(self):
        f = io.BytesIO(RIB_IPV4_EMPTY)
        with mrtlib.Reader(f) as reader:
            records = list(reader)

        self.assertEqual(1, len(records))
        self.assertTrue(f.closed)

    def test_close(self):
        f = mock.Mock()
        mrtlib.Reader(f).close()

        f.close.assert_called_once_with()


class TestMrtlibConfig(unittest.TestCase):
    """
    Test case for the AS number size options.
    """

    # two octet AS_PATH in a RIB entry, as written by some old collectors
    RIB_AS2 = _record(13, 2, (
        b'\x00\x00\x00\x00'
        b'\x18\xc0\x00\x02'
        b'\x00\x01'
        b'\x00\x00'
        b'\x58\x17\xda\x00'
        b'\x00\x09'
        b'\x40\x02\x06\x02\x02'
        b'\x0b\x62'
        b'\x0d\x1c'
    ))

    def setUp(self):
        self.addCleanup(cfg.CONF.clear_override, 'rib_as4')
        self.addCleanup(cfg.CONF.clear_override, 'table_dump_as4')

    def test_defaults(self):
        self.assertTrue(cfg.CONF.rib_as4)
        self.assertFalse(cfg.CONF.table_dump_as4)

    def test_rib_as4_option(self):
        cfg.CONF.set_override('rib_as4', False)
        (record,) = list(mrtlib.Reader(self.RIB_AS2))

        self.assertEqual([2914, 3356],
                         record.rib_entries[0].bgp_attributes[0]
                         .value[0].as_numbers)

    def test_argument_overrides_option(self):
        cfg.CONF.set_override('rib_as4', False)
        (error,) = list(mrtlib.Reader(self.RIB_AS2, rib_as4=True))

        # 4 octet AS numbers run past the attribute
        self.assertTrue(isinstance(error, Truncated))

    def test_table_dump_as4_option(self):
        body = TABLE_DUMP_BODY[:-11] + (
            b'\x00\x0d'  # attr_len
            b'\x40\x02\x0a\x02\x02'
            b'\x00\x01\x00\x00'  # 65536
            b'\x00\x00\x0d\x1c'
        )
        cfg.CONF.set_override('table_dump_as4', True)
        (record,) = list(mrtlib.Reader(_record(12, 1, body)))

        self.assertEqual([65536, 3356],
                         record.bgp_attributes[0].value[0].as_numbers)


class TestMrtlibStringify(unittest.TestCase):

    def test_str(self):
        record, _ = mrtlib.MrtRecord.parse(RIB_IPV4_EMPTY)

        self.assertTrue(str(record).startswith(
            'TableDump2RibIPv4UnicastMrtRecord(header=MrtHeader('))

    def test_to_jsondict(self):
        record, _ = mrtlib.MrtRecord.parse(_record(16, 4, b'\x01'))
        jsondict = record.to_jsondict()['UnsupportedMrtRecord']

        self.assertEqual('AQ==', jsondict['buf'])
        self.assertEqual(16, jsondict['header']['MrtHeader']['type'])
