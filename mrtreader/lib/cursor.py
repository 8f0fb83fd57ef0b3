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
Bounds checked reader over an in-memory buffer.

All of the MRT and BGP decoders read through BufferCursor, so the only
place which has to care about the buffer end is here.  A read which asks
for more bytes than remain raises exception.Truncated and leaves the
position untouched.
"""

import struct

from mrtreader.exception import Truncated
from mrtreader.lib import addrconv


class BufferCursor(object):
    """
    Read position over a bytes-like object.

    ========= ================================================
    Argument  Description
    ========= ================================================
    buf       bytes, bytearray or memoryview to read.
    offset    (Optional) start position in buf.
    end       (Optional) exclusive end position in buf.
              The default is the length of buf.
    ========= ================================================
    """
    _U8 = struct.Struct('!B')
    _U16 = struct.Struct('!H')
    _U32 = struct.Struct('!I')

    def __init__(self, buf, offset=0, end=None):
        self._buf = memoryview(buf).cast('B')
        if end is None:
            end = len(self._buf)
        assert 0 <= offset <= end <= len(self._buf)
        self._pos = offset
        self._end = end

    def __len__(self):
        return self.remaining()

    def tell(self):
        return self._pos

    def remaining(self):
        return self._end - self._pos

    def _require(self, size):
        if size < 0:
            raise ValueError('negative read size %d' % size)
        available = self._end - self._pos
        if size > available:
            raise Truncated(needed=size, available=available)

    def _unpack(self, st):
        self._require(st.size)
        (value,) = st.unpack_from(self._buf, self._pos)
        self._pos += st.size
        return value

    def peek_u8(self):
        self._require(1)
        return self._buf[self._pos]

    def read_u8(self):
        return self._unpack(self._U8)

    def read_u16(self):
        return self._unpack(self._U16)

    def read_u32(self):
        return self._unpack(self._U32)

    def read_bytes(self, size):
        self._require(size)
        value = self._buf[self._pos:self._pos + size].tobytes()
        self._pos += size
        return value

    def read_ipv4(self):
        return addrconv.ipv4.bin_to_text(self.read_bytes(4))

    def read_ipv6(self):
        return addrconv.ipv6.bin_to_text(self.read_bytes(16))

    def skip(self, size):
        self._require(size)
        self._pos += size

    def rest(self):
        return self.read_bytes(self.remaining())

    def sub_cursor(self, size):
        """
        Returns a new cursor over the next *size* bytes and moves this
        cursor past them.

        Reads through the returned cursor can never go beyond those
        *size* bytes even if this cursor has more data.
        """
        self._require(size)
        sub = BufferCursor(self._buf, self._pos, self._pos + size)
        self._pos += size
        return sub
