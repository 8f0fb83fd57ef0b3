# Copyright (C) 2013 Nippon Telegraph and Telephone Corporation.
# Copyright (C) 2013 YAMAMOTO Takashi <yamamoto at valinux co jp>
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

import netaddr
from netaddr.strategy import ipv4 as _ipv4_strategy
from netaddr.strategy import ipv6 as _ipv6_strategy


class AddressConverter(object):
    def __init__(self, addr, strat, network, **kwargs):
        self._addr = addr
        self._strat = strat
        self._network = network
        self._addr_kwargs = kwargs
        self.size = strat.width // 8
        self.width = strat.width

    def text_to_bin(self, text):
        return self._addr(text, **self._addr_kwargs).packed

    def bin_to_text(self, bin):
        return str(self._addr(self._strat.packed_to_int(bytes(bin)),
                              **self._addr_kwargs))

    def bin_to_network(self, bin, length):
        """
        Returns netaddr.IPNetwork of the *length* bit prefix whose network
        address is *bin*, right padded with zero bytes to the full width.
        """
        bin = bytes(bin).ljust(self.size, b'\0')
        return self._network('%s/%d' % (self.bin_to_text(bin), length),
                             **self._addr_kwargs)


ipv4 = AddressConverter(netaddr.IPAddress, _ipv4_strategy,
                        netaddr.IPNetwork, version=4)
ipv6 = AddressConverter(netaddr.IPAddress, _ipv6_strategy,
                        netaddr.IPNetwork, version=6)
