# Copyright (C) 2013,2014 Nippon Telegraph and Telephone Corporation.
# Copyright (C) 2013,2014 YAMAMOTO Takashi <yamamoto at valinux co jp>
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
RFC 4271 BGP-4 path attributes and prefixes, as embedded in MRT table
dumps.

Only the decoding direction is implemented.  Attributes whose type code
is not registered here are kept as BGPPathAttributeUnknown with their raw
value, so nothing in a dump is ever dropped.
"""

import logging

from mrtreader.exception import InvalidEncoding
from mrtreader.exception import InvalidPrefixLength
from mrtreader.exception import Truncated
from mrtreader.lib import addrconv
from mrtreader.lib.cursor import BufferCursor
from mrtreader.lib.packet import afi as addr_family
from mrtreader.lib.packet import safi as subaddr_family
from mrtreader.lib.stringify import StringifyMixin
from mrtreader.lib.type_desc import TypeDisp


LOG = logging.getLogger(__name__)

BGP_ATTR_FLAG_OPTIONAL = 1 << 7
BGP_ATTR_FLAG_TRANSITIVE = 1 << 6
BGP_ATTR_FLAG_PARTIAL = 1 << 5
BGP_ATTR_FLAG_EXTENDED_LENGTH = 1 << 4

BGP_ATTR_TYPE_ORIGIN = 1  # 0,1,2 (1 byte)
BGP_ATTR_TYPE_AS_PATH = 2  # a list of AS_SET/AS_SEQUENCE  eg. {1 2 3} 4 5
BGP_ATTR_TYPE_NEXT_HOP = 3  # an IPv4 address
BGP_ATTR_TYPE_MULTI_EXIT_DISC = 4  # uint32 metric
BGP_ATTR_TYPE_LOCAL_PREF = 5  # uint32
BGP_ATTR_TYPE_ATOMIC_AGGREGATE = 6  # 0 bytes
BGP_ATTR_TYPE_AGGREGATOR = 7  # AS number and IPv4 address
BGP_ATTR_TYPE_COMMUNITIES = 8  # RFC 1997
BGP_ATTR_TYPE_MP_REACH_NLRI = 14  # RFC 4760
BGP_ATTR_TYPE_EXTENDED_COMMUNITIES = 16  # RFC 4360

BGP_ATTR_ORIGIN_IGP = 0x00
BGP_ATTR_ORIGIN_EGP = 0x01
BGP_ATTR_ORIGIN_INCOMPLETE = 0x02


def pad(binary, len_):
    assert len(binary) <= len_
    return binary + b'\0' * (len_ - len(binary))


class _AddrPrefix(StringifyMixin):
    """
    IP prefix.

    ``length`` is the prefix length in bits, ``bin_addr`` the network
    bytes as found on the wire (``(length + 7) // 8`` bytes) and ``addr``
    the text form of those bytes padded to the full address width.
    """
    _ADDR_CONV = None  # should be defined in subclass
    AFI = None

    def __init__(self, length, addr, bin_addr=None):
        self.check_length(length)
        self.length = length
        self.addr = addr
        if bin_addr is None:
            bin_addr = self._ADDR_CONV.text_to_bin(addr)[:self.byte_length]
        self.bin_addr = bin_addr

    @classmethod
    def check_length(cls, length):
        if length > cls._ADDR_CONV.width:
            raise InvalidPrefixLength(length=length,
                                      bits=cls._ADDR_CONV.width)

    @property
    def byte_length(self):
        return (self.length + 7) // 8

    @classmethod
    def parse_addr(cls, cur, length):
        """
        Reads the network bytes of a *length* bit prefix from *cur*.
        """
        cls.check_length(length)
        bin_addr = cur.read_bytes((length + 7) // 8)
        addr = cls._ADDR_CONV.bin_to_text(pad(bin_addr, cls._ADDR_CONV.size))
        return cls(length, addr, bin_addr)

    @classmethod
    def parser(cls, cur):
        length = cur.read_u8()
        return cls.parse_addr(cur, length)

    @property
    def prefix(self):
        return self.addr + '/{0}'.format(self.length)

    @property
    def network(self):
        return self._ADDR_CONV.bin_to_network(self.bin_addr, self.length)


class IPAddrPrefix(_AddrPrefix):
    _ADDR_CONV = addrconv.ipv4
    AFI = addr_family.IP


class IP6AddrPrefix(_AddrPrefix):
    _ADDR_CONV = addrconv.ipv6
    AFI = addr_family.IP6


_ADDR_CLASSES = {
    (addr_family.IP, subaddr_family.UNICAST): IPAddrPrefix,
    (addr_family.IP6, subaddr_family.UNICAST): IP6AddrPrefix,
}


def _get_addr_class(afi, safi):
    return _ADDR_CLASSES.get((afi, safi))


class _PathAttribute(StringifyMixin, TypeDisp):
    """
    Base class of BGP path attributes.

    ``flags`` is the attribute flags octet exactly as encoded, ``type``
    the attribute type code and ``length`` the length of the value.
    """

    def __init__(self, value=None, flags=0, type_=None, length=None):
        if type_ is None:
            type_ = self._rev_lookup_type(self.__class__)
        self.flags = flags
        self.type = type_
        self.length = length
        if value is not None:
            self.value = value

    @property
    def optional(self):
        return bool(self.flags & BGP_ATTR_FLAG_OPTIONAL)

    @property
    def transitive(self):
        return bool(self.flags & BGP_ATTR_FLAG_TRANSITIVE)

    @property
    def partial(self):
        return bool(self.flags & BGP_ATTR_FLAG_PARTIAL)

    @property
    def extended_length(self):
        return bool(self.flags & BGP_ATTR_FLAG_EXTENDED_LENGTH)

    @classmethod
    def parser(cls, cur, as4=False, afi=None):
        """
        Decodes one attribute at the position of cursor *cur*.

        *as4* selects four octet AS numbers for AS_PATH and *afi* is the
        address family of the enclosing RIB record, if any.  Neither can
        be learned from the attribute bytes themselves.
        """
        flags = cur.read_u8()
        type_ = cur.read_u8()
        if flags & BGP_ATTR_FLAG_EXTENDED_LENGTH:
            length = cur.read_u16()
        else:
            length = cur.read_u8()
        value_cur = cur.sub_cursor(length)

        subcls = cls._lookup_type(type_)
        kwargs = subcls.parse_value(value_cur, as4=as4, afi=afi)
        if value_cur.remaining():
            raise InvalidEncoding(
                reason='%d trailing bytes in path attribute type %d'
                % (value_cur.remaining(), type_))

        return subcls(flags=flags, type_=type_, length=length, **kwargs)

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {}


@_PathAttribute.register_unknown_type()
class BGPPathAttributeUnknown(_PathAttribute):
    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {
            'value': cur.rest()
        }


class _PathAttributeUint32(_PathAttribute):
    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {
            'value': cur.read_u32()
        }


@_PathAttribute.register_type(BGP_ATTR_TYPE_ORIGIN)
class BGPPathAttributeOrigin(_PathAttribute):
    # Values other than IGP, EGP and INCOMPLETE are kept as they are.
    _NAMES = {
        BGP_ATTR_ORIGIN_IGP: 'IGP',
        BGP_ATTR_ORIGIN_EGP: 'EGP',
        BGP_ATTR_ORIGIN_INCOMPLETE: 'INCOMPLETE',
    }

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {
            'value': cur.read_u8()
        }

    @property
    def name(self):
        return self._NAMES.get(self.value, 'UNKNOWN')


class AsPathSegment(StringifyMixin):
    """
    AS_PATH segment.

    ``type`` is the segment type code and ``as_numbers`` the AS numbers
    in the order they were encoded, also for AS_SET.
    """
    AS_SET = 1
    AS_SEQUENCE = 2
    AS_CONFED_SEQUENCE = 3  # RFC 5065
    AS_CONFED_SET = 4  # RFC 5065

    def __init__(self, type_, as_numbers):
        self.type = type_
        self.as_numbers = as_numbers

    @classmethod
    def parser(cls, cur, as4=False):
        type_ = cur.read_u8()
        num_as = cur.read_u8()
        if as4:
            read_as = cur.read_u32
        else:
            read_as = cur.read_u16
        as_numbers = [read_as() for _ in range(num_as)]
        return cls(type_, as_numbers)

    @property
    def is_set(self):
        return self.type in (self.AS_SET, self.AS_CONFED_SET)

    @property
    def is_confed(self):
        return self.type in (self.AS_CONFED_SEQUENCE, self.AS_CONFED_SET)


def is_reserved_as(as_number):
    """
    Returns True if *as_number* cannot be the origin of a route seen in
    the global table.

    0 and 65535 are reserved, 64496-64511 and 65536-65551 are for
    documentation, 64512-65534 are private use, 65552-131071 reserved,
    and anything beyond 1000000 is not allocated.
    """
    return (as_number == 0
            or 64496 <= as_number <= 131071
            or as_number > 1000000)


@_PathAttribute.register_type(BGP_ATTR_TYPE_AS_PATH)
class BGPPathAttributeAsPath(_PathAttribute):
    # The AS number size is not encoded in the attribute.  TABLE_DUMP_V2
    # always uses four octet AS numbers, legacy TABLE_DUMP two octet ones,
    # so the caller tells it through 'as4'.

    def __init__(self, value, as4=False, flags=0, type_=None, length=None):
        super(BGPPathAttributeAsPath, self).__init__(value=value,
                                                     flags=flags,
                                                     type_=type_,
                                                     length=length)
        self.as4 = as4

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        segments = []
        while cur.remaining():
            segments.append(AsPathSegment.parser(cur, as4))
        return {
            'value': segments,
            'as4': as4,
        }

    def get_as_path_len(self):
        count = 0
        for seg in self.value:
            if seg.is_confed:
                continue
            elif seg.is_set:
                # AS_SET counts as one.
                count += 1
            else:
                count += len(seg.as_numbers)
        return count

    def get_origin_as(self):
        """
        Returns the list of origin AS numbers of this path.

        The rightmost AS_SEQUENCE member which is not reserved is the
        origin.  If the rightmost segment is an AS_SET, all of its
        members which are not reserved are.  Confederation segments are
        skipped.  An empty list is returned when no origin is found.
        """
        for seg in reversed(self.value):
            if seg.is_confed:
                continue
            elif seg.type == AsPathSegment.AS_SET:
                return [a for a in seg.as_numbers if not is_reserved_as(a)]
            elif seg.type == AsPathSegment.AS_SEQUENCE:
                for as_number in reversed(seg.as_numbers):
                    if not is_reserved_as(as_number):
                        return [as_number]
            else:
                LOG.debug('Skip unknown AS_PATH segment type %d', seg.type)
        return []


@_PathAttribute.register_type(BGP_ATTR_TYPE_NEXT_HOP)
class BGPPathAttributeNextHop(_PathAttribute):
    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {
            'value': cur.read_ipv4(),
        }


@_PathAttribute.register_type(BGP_ATTR_TYPE_MULTI_EXIT_DISC)
class BGPPathAttributeMultiExitDisc(_PathAttributeUint32):
    pass


@_PathAttribute.register_type(BGP_ATTR_TYPE_LOCAL_PREF)
class BGPPathAttributeLocalPref(_PathAttributeUint32):
    pass


@_PathAttribute.register_type(BGP_ATTR_TYPE_ATOMIC_AGGREGATE)
class BGPPathAttributeAtomicAggregate(_PathAttribute):
    pass


@_PathAttribute.register_type(BGP_ATTR_TYPE_AGGREGATOR)
class BGPPathAttributeAggregator(_PathAttribute):
    # Note: AS numbers can be Two-Octet or Four-Octet.
    # This class would detect it by the value length field.
    # - if the value field length is 6, AS number should be Two-Octet.
    # - else if the length is 8, AS number should be Four-Octet.
    _TWO_OCTET_VALUE_SIZE = 6
    _FOUR_OCTET_VALUE_SIZE = 8

    def __init__(self, as_number, addr, flags=0, type_=None, length=None):
        super(BGPPathAttributeAggregator, self).__init__(flags=flags,
                                                         type_=type_,
                                                         length=length)
        self.as_number = as_number
        self.addr = addr

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        size = cur.remaining()
        if size == cls._FOUR_OCTET_VALUE_SIZE:
            as_number = cur.read_u32()
        elif size == cls._TWO_OCTET_VALUE_SIZE:
            as_number = cur.read_u16()
        elif size < cls._TWO_OCTET_VALUE_SIZE:
            raise Truncated(needed=cls._TWO_OCTET_VALUE_SIZE, available=size)
        else:
            raise InvalidEncoding(
                reason='invalid AGGREGATOR length %d' % size)
        return {
            'as_number': as_number,
            'addr': cur.read_ipv4(),
        }


@_PathAttribute.register_type(BGP_ATTR_TYPE_COMMUNITIES)
class BGPPathAttributeCommunities(_PathAttribute):
    """
    COMMUNITIES attribute.

    ``communities`` is the list of (AS number, value) tuples in the
    encoded order.
    """

    # Well-known-communities
    NO_EXPORT = (0xFFFF, 0xFF01)
    NO_ADVERTISE = (0xFFFF, 0xFF02)
    NO_EXPORT_SUBCONFED = (0xFFFF, 0xFF03)
    WELL_KNOW_COMMUNITIES = (NO_EXPORT, NO_ADVERTISE, NO_EXPORT_SUBCONFED)

    def __init__(self, communities,
                 flags=0, type_=None, length=None):
        super(BGPPathAttributeCommunities, self).__init__(flags=flags,
                                                          type_=type_,
                                                          length=length)
        self.communities = communities

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        communities = []
        while cur.remaining():
            communities.append((cur.read_u16(), cur.read_u16()))
        return {
            'communities': communities,
        }

    @staticmethod
    def is_no_export(comm_attr):
        """Returns True if given value matches well-known community NO_EXPORT
         attribute value.
         """
        return comm_attr == BGPPathAttributeCommunities.NO_EXPORT

    @staticmethod
    def is_no_advertise(comm_attr):
        """Returns True if given value matches well-known community
        NO_ADVERTISE attribute value.
        """
        return comm_attr == BGPPathAttributeCommunities.NO_ADVERTISE

    @staticmethod
    def is_no_export_subconfed(comm_attr):
        """Returns True if given value matches well-known community
         NO_EXPORT_SUBCONFED attribute value.
         """
        return comm_attr == BGPPathAttributeCommunities.NO_EXPORT_SUBCONFED

    def has_comm_attr(self, attr):
        """Returns True if given community attribute is present."""
        return attr in self.communities


@_PathAttribute.register_type(BGP_ATTR_TYPE_MP_REACH_NLRI)
class BGPPathAttributeMpReachNLRI(_PathAttribute):
    """
    MP_REACH_NLRI attribute (RFC 4760).

    Next hops and NLRI are decoded for the IPv4 and IPv6 unicast
    families only.  For any other family ``next_hop`` and ``nlri`` are
    empty and ``value`` holds the raw attribute value.

    Inside TABLE_DUMP_V2 RIB entries the attribute is abbreviated to the
    next hop length and next hop (RFC 6396 4.3.4).  That form is
    recognised when the address family of the RIB record is given, and
    ``abbreviated`` is set.
    """
    _HEADER_SIZE = 4  # afi, safi, next_hop_len
    _RESERVED_LENGTH = 1

    def __init__(self, afi, safi, next_hop, nlri, value=None,
                 abbreviated=False, flags=0, type_=None, length=None):
        super(BGPPathAttributeMpReachNLRI, self).__init__(
            flags=flags, type_=type_, length=length)
        self.afi = afi
        self.safi = safi
        self.next_hop = next_hop
        self.nlri = nlri
        self.value = value
        self.abbreviated = abbreviated

    @staticmethod
    def parse_next_hop(cur):
        size = cur.remaining()
        if size and size % addrconv.ipv6.size == 0:
            # global address, optionally followed by the link-local one
            read_addr = cur.read_ipv6
            unit = addrconv.ipv6.size
        elif size % addrconv.ipv4.size == 0:
            read_addr = cur.read_ipv4
            unit = addrconv.ipv4.size
        else:
            raise InvalidEncoding(
                reason='invalid MP_REACH_NLRI next hop length %d' % size)
        return [read_addr() for _ in range(size // unit)]

    @classmethod
    def _is_abbreviated(cls, cur):
        return cur.remaining() > 0 and cur.peek_u8() == cur.remaining() - 1

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        if afi is not None and cls._is_abbreviated(cur):
            next_hop_len = cur.read_u8()
            next_hop = cls.parse_next_hop(cur.sub_cursor(next_hop_len))
            return {
                'afi': afi,
                'safi': subaddr_family.UNICAST,
                'next_hop': next_hop,
                'nlri': [],
                'abbreviated': True,
            }

        raw = cur.rest()
        value_cur = BufferCursor(raw)
        afi = value_cur.read_u16()
        safi = value_cur.read_u8()

        addr_cls = _get_addr_class(afi, safi)
        if addr_cls is None:
            # opaque family, keep the raw value
            return {
                'afi': afi,
                'safi': safi,
                'next_hop': [],
                'nlri': [],
                'value': raw,
            }

        next_hop_len = value_cur.read_u8()
        next_hop_cur = value_cur.sub_cursor(next_hop_len)
        value_cur.skip(cls._RESERVED_LENGTH)

        next_hop = cls.parse_next_hop(next_hop_cur)
        nlri = []
        while value_cur.remaining():
            nlri.append(addr_cls.parser(value_cur))

        return {
            'afi': afi,
            'safi': safi,
            'next_hop': next_hop,
            'nlri': nlri,
        }


@_PathAttribute.register_type(BGP_ATTR_TYPE_EXTENDED_COMMUNITIES)
class BGPPathAttributeExtendedCommunities(_PathAttribute):
    # The communities are not interpreted, 'value' holds the raw bytes.
    _COMMUNITY_SIZE = 8

    @classmethod
    def parse_value(cls, cur, as4=False, afi=None):
        return {
            'value': cur.rest()
        }

    @property
    def communities(self):
        """The raw value split in 8 octet extended communities."""
        size = self._COMMUNITY_SIZE
        return [self.value[i:i + size]
                for i in range(0, len(self.value), size)]


def parse_path_attributes(buf, as4=False, afi=None):
    """
    Decodes a block of BGP path attributes.

    *buf* is a bytes-like object or a BufferCursor holding exactly the
    attribute block, which is consumed entirely.  The attributes are
    returned in the encoded order.  Duplicated attributes are kept.

    ========= ================================================
    Argument  Description
    ========= ================================================
    buf       Attribute block.
    as4       True if AS_PATH carries four octet AS numbers.
    afi       (Optional) Address family of the enclosing
              TABLE_DUMP_V2 RIB record.
    ========= ================================================
    """
    if isinstance(buf, BufferCursor):
        cur = buf
    else:
        cur = BufferCursor(buf)
    attributes = []
    while cur.remaining():
        attributes.append(_PathAttribute.parser(cur, as4=as4, afi=afi))
    return attributes
