# Copyright (C) 2011 Nippon Telegraph and Telephone Corporation.
# Copyright (C) 2011 Isaku Yamahata <yamahata at valinux co jp>
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


class MrtReaderException(Exception):
    message = 'An unknown exception'

    def __init__(self, msg=None, **kwargs):
        self.kwargs = kwargs
        if msg is None:
            msg = self.message

        try:
            msg = msg % kwargs
        except Exception:
            msg = self.message

        super(MrtReaderException, self).__init__(msg)


class MrtDecodeError(MrtReaderException):
    """
    Structural error found while decoding an MRT record.

    ``header`` and ``buf`` are filled in by the record dispatcher with the
    header and the raw body of the record that failed, when known.
    """
    message = 'malformed MRT record'

    def __init__(self, msg=None, header=None, buf=None, **kwargs):
        super(MrtDecodeError, self).__init__(msg, **kwargs)
        self.header = header
        self.buf = buf


class Truncated(MrtDecodeError):
    message = ('truncated data: %(needed)d bytes needed, '
               '%(available)d bytes available')


class InvalidEncoding(MrtDecodeError):
    message = 'invalid encoding: %(reason)s'


class InvalidPrefixLength(MrtDecodeError):
    message = 'invalid prefix length %(length)d for %(bits)d bit address'


class InvalidPeerIndex(MrtDecodeError):
    message = 'peer index %(index)d out of range (peer count %(count)d)'
