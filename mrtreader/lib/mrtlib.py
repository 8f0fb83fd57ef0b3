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

"""
Library for reading MRT (Multi-Threaded Routing Toolkit) Routing
Information Export Format [RFC6396] table dumps.

TABLE_DUMP and the PEER_INDEX_TABLE, RIB_IPV4_UNICAST and
RIB_IPV6_UNICAST subtypes of TABLE_DUMP_V2 are decoded.  Every other
record is returned as UnsupportedMrtRecord with its raw body.
"""

import io
import logging

from mrtreader import cfg
from mrtreader import utils
from mrtreader.exception import InvalidEncoding
from mrtreader.exception import InvalidPeerIndex
from mrtreader.exception import InvalidPrefixLength
from mrtreader.exception import MrtDecodeError
from mrtreader.exception import Truncated
from mrtreader.lib import addrconv
from mrtreader.lib import ip
from mrtreader.lib import stringify
from mrtreader.lib import type_desc
from mrtreader.lib.cursor import BufferCursor
from mrtreader.lib.packet import bgp


LOG = logging.getLogger(__name__)

CONF = cfg.CONF

CONF.register_opts([
    cfg.BoolOpt('rib-as4', default=True,
                help='decode AS_PATH of TABLE_DUMP_V2 RIB entries with '
                     'four octet AS numbers'),
    cfg.BoolOpt('table-dump-as4', default=False,
                help='decode AS_PATH of TABLE_DUMP records with four '
                     'octet AS numbers'),
])


class MrtHeader(stringify.StringifyMixin):
    """
    MRT Common Header.

    ``length`` is the body length as declared on the wire.  For the
    Extended Timestamp types it includes the 4 octet microsecond field,
    which is stored in ``ms_timestamp``.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                           Timestamp                           |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |             Type              |            Subtype            |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                             Length                            |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                      Message... (variable)
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    HEADER_SIZE = 12

    def __init__(self, timestamp, type_, subtype, length, ms_timestamp=None):
        self.timestamp = timestamp
        self.type = type_
        self.subtype = subtype
        self.length = length
        self.ms_timestamp = ms_timestamp

    @classmethod
    def parse(cls, cur):
        timestamp = cur.read_u32()
        type_ = cur.read_u16()
        subtype = cur.read_u16()
        length = cur.read_u32()
        return cls(timestamp, type_, subtype, length)

    @property
    def is_extended_timestamp(self):
        return self.type in MrtRecord.EXT_TS_TYPES

    @property
    def timestamp_float(self):
        if self.ms_timestamp is None:
            return float(self.timestamp)
        return self.timestamp + self.ms_timestamp / 1000000.0


def _origin_as_of(bgp_attributes):
    for attr in bgp_attributes:
        if isinstance(attr, bgp.BGPPathAttributeAsPath):
            return attr.get_origin_as()
    return []


class MrtRecord(stringify.StringifyMixin, type_desc.TypeDisp):
    """
    MRT record.

    Subclasses are registered on (type, subtype) keys and decode the
    record body from a cursor bounded to the declared body length.
    """
    # MRT Types
    TYPE_OSPFv2 = 11
    TYPE_TABLE_DUMP = 12
    TYPE_TABLE_DUMP_V2 = 13
    TYPE_BGP4MP = 16
    TYPE_BGP4MP_ET = 17
    TYPE_ISIS = 32
    TYPE_ISIS_ET = 33
    TYPE_OSPFv3 = 48
    TYPE_OSPFv3_ET = 49

    # List of MRT type using Extended Timestamp MRT Header
    EXT_TS_TYPES = [TYPE_BGP4MP_ET, TYPE_ISIS_ET, TYPE_OSPFv3_ET]

    # TABLE_DUMP subtypes
    SUBTYPE_AFI_IPv4 = 1
    SUBTYPE_AFI_IPv6 = 2

    # TABLE_DUMP_V2 subtypes
    SUBTYPE_PEER_INDEX_TABLE = 1
    SUBTYPE_RIB_IPV4_UNICAST = 2
    SUBTYPE_RIB_IPV4_MULTICAST = 3
    SUBTYPE_RIB_IPV6_UNICAST = 4
    SUBTYPE_RIB_IPV6_MULTICAST = 5
    SUBTYPE_RIB_GENERIC = 6

    def __init__(self, header):
        self.header = header

    @property
    def type(self):
        return self.header.type

    @property
    def subtype(self):
        return self.header.subtype

    @classmethod
    def parse_body(cls, header, cur, rib_as4=True, table_dump_as4=False):
        raise NotImplementedError()

    @classmethod
    def parse_record(cls, header, body, rib_as4=None, table_dump_as4=None):
        """
        Decodes the body of the record described by *header*.

        *body* must hold exactly ``header.length`` bytes.  A decode error
        is raised with ``header`` and ``buf`` attached.
        """
        if rib_as4 is None:
            rib_as4 = CONF.rib_as4
        if table_dump_as4 is None:
            table_dump_as4 = CONF.table_dump_as4

        cur = BufferCursor(body)
        sub_cls = cls._lookup_type((header.type, header.subtype))
        try:
            if header.is_extended_timestamp:
                header.ms_timestamp = cur.read_u32()
            record = sub_cls.parse_body(header, cur, rib_as4=rib_as4,
                                        table_dump_as4=table_dump_as4)
        except MrtDecodeError as e:
            e.header = header
            e.buf = bytes(body)
            raise
        # leftover bytes inside the body are dropped here
        return record

    @classmethod
    def parse(cls, buf, rib_as4=None, table_dump_as4=None):
        """
        Decodes one record at the beginning of *buf*.

        Returns a tuple of the record and the bytes after it.  Raises
        MrtDecodeError subclasses on damaged input.
        """
        cur = BufferCursor(buf)
        header = MrtHeader.parse(cur)
        body = cur.read_bytes(header.length)
        record = cls.parse_record(header, body, rib_as4=rib_as4,
                                  table_dump_as4=table_dump_as4)
        return record, cur.rest()


@MrtRecord.register_unknown_type()
class UnsupportedMrtRecord(MrtRecord):
    """
    Record of a (type, subtype) which is not decoded.

    ``buf`` holds the raw body.  For the Extended Timestamp types the
    microsecond field is not part of it.
    """

    def __init__(self, header, buf):
        super(UnsupportedMrtRecord, self).__init__(header)
        self.buf = buf

    @classmethod
    def parse_body(cls, header, cur, rib_as4=True, table_dump_as4=False):
        LOG.debug('Unsupported MRT record type %d subtype %d',
                  header.type, header.subtype)
        return cls(header, cur.rest())


@MrtRecord.register_type(
    (MrtRecord.TYPE_TABLE_DUMP, MrtRecord.SUBTYPE_AFI_IPv4),
    (MrtRecord.TYPE_TABLE_DUMP, MrtRecord.SUBTYPE_AFI_IPv6))
class TableDumpMrtRecord(MrtRecord):
    """
    MRT Record for the TABLE_DUMP Type.

    The address family of ``prefix`` and ``peer_ip`` is given by the
    subtype.  ``peer_as`` is always a two octet AS number.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |         View Number           |       Sequence Number         |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                        Prefix (variable)                      |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # | Prefix Length |    Status     |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                         Originated Time                       |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                    Peer IP Address (variable)                 |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |           Peer AS             |       Attribute Length        |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                   BGP Attribute... (variable)
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    _ADDR_CONV = {
        MrtRecord.SUBTYPE_AFI_IPv4: addrconv.ipv4,
        MrtRecord.SUBTYPE_AFI_IPv6: addrconv.ipv6,
    }

    def __init__(self, header, view_num, seq_num, prefix, prefix_len, status,
                 originated_time, peer_ip, peer_as, bgp_attributes,
                 attr_len=None):
        super(TableDumpMrtRecord, self).__init__(header)
        self.view_num = view_num
        self.seq_num = seq_num
        self.prefix = prefix
        self.prefix_len = prefix_len
        # Status SHOULD be 1, but it is not checked.
        self.status = status
        self.originated_time = originated_time
        self.peer_ip = peer_ip
        self.peer_as = peer_as
        self.bgp_attributes = bgp_attributes
        self.attr_len = attr_len

    @classmethod
    def parse_body(cls, header, cur, rib_as4=True, table_dump_as4=False):
        conv = cls._ADDR_CONV[header.subtype]
        view_num = cur.read_u16()
        seq_num = cur.read_u16()
        prefix = ip.bin_to_text(cur.read_bytes(conv.size))
        prefix_len = cur.read_u8()
        if prefix_len > conv.width:
            raise InvalidPrefixLength(length=prefix_len, bits=conv.width)
        status = cur.read_u8()
        originated_time = cur.read_u32()
        peer_ip = ip.bin_to_text(cur.read_bytes(conv.size))
        peer_as = cur.read_u16()
        attr_len = cur.read_u16()
        bgp_attributes = bgp.parse_path_attributes(cur.sub_cursor(attr_len),
                                                   as4=table_dump_as4)

        return cls(header, view_num, seq_num, prefix, prefix_len, status,
                   originated_time, peer_ip, peer_as, bgp_attributes,
                   attr_len)

    @property
    def network(self):
        conv = self._ADDR_CONV[self.header.subtype]
        return conv.bin_to_network(ip.text_to_bin(self.prefix),
                                   self.prefix_len)

    def get_origin_as(self):
        return sorted(set(_origin_as_of(self.bgp_attributes)))


class MrtPeer(stringify.StringifyMixin):
    """
    MRT Peer.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |   Peer Type   |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                         Peer BGP ID                           |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                   Peer IP Address (variable)                  |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                        Peer AS (variable)                     |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

    # Peer Type field:
    #
    #  0 1 2 3 4 5 6 7
    # +-+-+-+-+-+-+-+-+
    # | | | | | | |A|I|
    # +-+-+-+-+-+-+-+-+
    #
    #  Bit 6: Peer AS number size:  0 = 2 bytes, 1 = 4 bytes
    #  Bit 7: Peer IP Address family:  0 = IPv4(4 bytes),  1 = IPv6(16 bytes)
    IP_ADDR_FAMILY_BIT = 1 << 0
    AS_NUMBER_SIZE_BIT = 1 << 1

    def __init__(self, bgp_id, ip_addr, as_num, type_=0):
        self.type = type_
        self.bgp_id = bgp_id
        self.ip_addr = ip_addr
        self.as_num = as_num

    @classmethod
    def parse(cls, cur):
        type_ = cur.read_u8()
        bgp_id = cur.read_ipv4()
        if type_ & cls.IP_ADDR_FAMILY_BIT:
            ip_addr = cur.read_ipv6()
        else:
            ip_addr = cur.read_ipv4()
        if type_ & cls.AS_NUMBER_SIZE_BIT:
            as_num = cur.read_u32()
        else:
            as_num = cur.read_u16()
        return cls(bgp_id, ip_addr, as_num, type_)

    @property
    def is_ipv6(self):
        return bool(self.type & self.IP_ADDR_FAMILY_BIT)

    @property
    def is_as4(self):
        return bool(self.type & self.AS_NUMBER_SIZE_BIT)


@MrtRecord.register_type(
    (MrtRecord.TYPE_TABLE_DUMP_V2, MrtRecord.SUBTYPE_PEER_INDEX_TABLE))
class TableDump2PeerIndexTableMrtRecord(MrtRecord):
    """
    MRT Record for the TABLE_DUMP_V2 Type and the PEER_INDEX_TABLE subtype.

    The order of ``peer_entries`` is the index space referred to by the
    ``peer_index`` of the RIB entries which follow in the dump.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                      Collector BGP ID                         |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |       View Name Length        |     View Name (variable)      |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |          Peer Count           |    Peer Entries (variable)
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

    def __init__(self, header, bgp_id, peer_entries, view_name=''):
        super(TableDump2PeerIndexTableMrtRecord, self).__init__(header)
        self.bgp_id = bgp_id
        self.view_name = view_name
        self.peer_entries = peer_entries

    @classmethod
    def parse_body(cls, header, cur, rib_as4=True, table_dump_as4=False):
        bgp_id = cur.read_ipv4()
        view_name_len = cur.read_u16()
        try:
            view_name = cur.read_bytes(view_name_len).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(reason='view name: %s' % e)

        peer_count = cur.read_u16()
        peer_entries = [MrtPeer.parse(cur) for _ in range(peer_count)]

        return cls(header, bgp_id, peer_entries, view_name)

    def get_peer(self, index):
        if not 0 <= index < len(self.peer_entries):
            raise InvalidPeerIndex(index=index, count=len(self.peer_entries))
        return self.peer_entries[index]

    def validate_peer_indices(self, rib_record):
        """
        Raises InvalidPeerIndex if an entry of *rib_record* refers to a
        peer which is not in this table.
        """
        for rib_entry in rib_record.rib_entries:
            self.get_peer(rib_entry.peer_index)


class MrtRibEntry(stringify.StringifyMixin):
    """
    MRT RIB Entry.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |         Peer Index            |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                         Originated Time                       |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |      Attribute Length         |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                    BGP Attributes... (variable)
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

    def __init__(self, peer_index, originated_time, bgp_attributes,
                 attr_len=None):
        self.peer_index = peer_index
        self.originated_time = originated_time
        self.bgp_attributes = bgp_attributes
        self.attr_len = attr_len

    @classmethod
    def parse(cls, cur, as4=True, afi=None):
        peer_index = cur.read_u16()
        originated_time = cur.read_u32()
        attr_len = cur.read_u16()
        bgp_attributes = bgp.parse_path_attributes(cur.sub_cursor(attr_len),
                                                   as4=as4, afi=afi)
        return cls(peer_index, originated_time, bgp_attributes, attr_len)

    def get_origin_as(self):
        return _origin_as_of(self.bgp_attributes)


class TableDump2AfiSafiSpecificRibMrtRecord(MrtRecord):
    """
    MRT Record for the TABLE_DUMP_V2 Type and the AFI/SAFI-specific
    unicast RIB subtypes.
    """
    #  0                   1                   2                   3
    #  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                         Sequence Number                       |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # | Prefix Length |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |                        Prefix (variable)                      |
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    # |         Entry Count           |  RIB Entries (variable)
    # +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

    # Parser class to parse the Prefix field
    _PREFIX_CLS = None  # should be defined in subclass

    def __init__(self, header, seq_num, prefix, rib_entries):
        super(TableDump2AfiSafiSpecificRibMrtRecord, self).__init__(header)
        self.seq_num = seq_num
        self.prefix = prefix
        self.rib_entries = rib_entries

    @classmethod
    def parse_body(cls, header, cur, rib_as4=True, table_dump_as4=False):
        seq_num = cur.read_u32()
        prefix = cls._PREFIX_CLS.parser(cur)
        entry_count = cur.read_u16()
        rib_entries = [MrtRibEntry.parse(cur, as4=rib_as4,
                                         afi=cls._PREFIX_CLS.AFI)
                       for _ in range(entry_count)]
        return cls(header, seq_num, prefix, rib_entries)

    def get_origin_as(self):
        """
        Returns the sorted list of origin AS numbers over all entries.
        """
        origins = set()
        for rib_entry in self.rib_entries:
            origins.update(rib_entry.get_origin_as())
        return sorted(origins)


@MrtRecord.register_type(
    (MrtRecord.TYPE_TABLE_DUMP_V2, MrtRecord.SUBTYPE_RIB_IPV4_UNICAST))
class TableDump2RibIPv4UnicastMrtRecord(TableDump2AfiSafiSpecificRibMrtRecord):
    """
    MRT Record for the TABLE_DUMP_V2 Type and the RIB_IPV4_UNICAST subtype.
    """
    _PREFIX_CLS = bgp.IPAddrPrefix


@MrtRecord.register_type(
    (MrtRecord.TYPE_TABLE_DUMP_V2, MrtRecord.SUBTYPE_RIB_IPV6_UNICAST))
class TableDump2RibIPv6UnicastMrtRecord(TableDump2AfiSafiSpecificRibMrtRecord):
    """
    MRT Record for the TABLE_DUMP_V2 Type and the RIB_IPV6_UNICAST subtype.
    """
    _PREFIX_CLS = bgp.IP6AddrPrefix


class Reader(object):
    """
    MRT format file reader.

    Iterating a Reader yields, for each record in the input, either the
    decoded MrtRecord or the MrtDecodeError which prevented decoding it.
    Errors are yielded rather than raised so that the caller can decide
    to skip the record or to stop.  After a body decode error the reader
    goes on with the next record.  A truncated header or body ends the
    iteration after the Truncated error.

    ================ ================================================
    Argument         Description
    ================ ================================================
    f                File object which reading MRT format file
                     in binary mode, or a bytes-like object.
    rib_as4          (Optional) AS number size for TABLE_DUMP_V2 RIB
                     entries. The default is the 'rib-as4' option.
    table_dump_as4   (Optional) AS number size for TABLE_DUMP records.
                     The default is the 'table-dump-as4' option.
    ================ ================================================

    Example of Usage::

        import bz2
        from mrtreader.lib import mrtlib

        with mrtlib.Reader(bz2.BZ2File('rib.YYYYMMDD.hhmm.bz2', 'rb')) as r:
            for record in r.records():
                print(record)
    """

    def __init__(self, f, rib_as4=None, table_dump_as4=None):
        if isinstance(f, (bytes, bytearray, memoryview)):
            f = io.BytesIO(f)
        self._f = f
        self._rib_as4 = rib_as4
        self._table_dump_as4 = table_dump_as4
        self._done = False

    def __iter__(self):
        return self

    def _read(self, size):
        buf = b''
        while len(buf) < size:
            chunk = self._f.read(size - len(buf))
            if not chunk:
                break
            buf += chunk
        return buf

    def __next__(self):
        if self._done:
            raise StopIteration()

        header_buf = self._read(MrtHeader.HEADER_SIZE)
        if not header_buf:
            self._done = True
            raise StopIteration()
        if len(header_buf) < MrtHeader.HEADER_SIZE:
            self._done = True
            return Truncated(needed=MrtHeader.HEADER_SIZE,
                             available=len(header_buf), buf=header_buf)

        header = MrtHeader.parse(BufferCursor(header_buf))
        body = self._read(header.length)
        if len(body) < header.length:
            self._done = True
            return Truncated(needed=header.length, available=len(body),
                             header=header, buf=body)

        try:
            return MrtRecord.parse_record(
                header, body, rib_as4=self._rib_as4,
                table_dump_as4=self._table_dump_as4)
        except MrtDecodeError as e:
            LOG.debug('Failed to decode MRT record: %s: %s', e,
                      utils.hex_array(body[:32]))
            return e

    def records(self):
        """
        Yields the decoded records only.

        Records which failed to decode are logged and skipped.
        """
        for record in self:
            if isinstance(record, MrtDecodeError):
                if record.header is not None:
                    LOG.warning('Skip MRT record type %d subtype %d: %s',
                                record.header.type, record.header.subtype,
                                record)
                else:
                    LOG.warning('Skip MRT record: %s', record)
                continue
            yield record

    def close(self):
        self._f.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
