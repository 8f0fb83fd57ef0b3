# Copyright (C) 2015 Nippon Telegraph and Telephone Corporation.
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

from mrtreader.exception import InvalidEncoding
from mrtreader.lib import addrconv


def text_to_bin(ip):
    """
    Converts human readable IPv4 or IPv6 string to binary representation.
    :param str ip: IPv4 or IPv6 address string
    :return: binary representation of IPv4 or IPv6 address
    """
    if ':' not in ip:
        return addrconv.ipv4.text_to_bin(ip)
    else:
        return addrconv.ipv6.text_to_bin(ip)


def bin_to_text(ip):
    """
    Converts binary representation to human readable IPv4 or IPv6 string.
    :param ip: binary representation of IPv4 or IPv6 address
    :return: IPv4 or IPv6 address string
    """
    if len(ip) == 4:
        return addrconv.ipv4.bin_to_text(ip)
    elif len(ip) == 16:
        return addrconv.ipv6.bin_to_text(ip)
    else:
        raise InvalidEncoding(
            reason='invalid ip address length: %d' % len(ip))
