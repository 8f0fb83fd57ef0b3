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

import logging
import os


LOG = logging.getLogger('mrtreader.utils')

_REQUIREMENTS_FILES = {
    'install': 'tools/pip-requires',
    'test': 'tools/test-requires',
}


def parse_requirements(kind='install', basedir=None):
    """
    Returns the list of requirement specifiers found in the requirements
    file of the given kind.

    Blank lines and comments are skipped.
    """
    if basedir is None:
        basedir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    path = os.path.join(basedir, _REQUIREMENTS_FILES[kind])
    requires = []
    with open(path) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                requires.append(line)
    return requires


def hex_array(data):
    """
    Convert bytes or bytearray into array of hexes to be printed.
    """
    # convert data into bytearray explicitly
    return ' '.join('0x%02x' % byte for byte in bytearray(data))
