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

"""
Logging setup for programs which embed the MRT decoder.

The decoder itself only emits records through module level loggers
(``logging.getLogger(__name__)``).  The functions here attach handlers
and levels according to the options registered on ``mrtreader.cfg.CONF``.
"""

import configparser
import logging
import logging.config
import logging.handlers
import os
import sys

from mrtreader import cfg


CONF = cfg.CONF

CONF.register_cli_opts([
    cfg.IntOpt('default-log-level', default=None, help='default log level'),
    cfg.BoolOpt('verbose', default=False, help='show debug output'),
    cfg.BoolOpt('use-stderr', default=True, help='log to standard error'),
    cfg.BoolOpt('use-syslog', default=False, help='output to syslog'),
    cfg.StrOpt('log-dir', default=None, help='log file directory'),
    cfg.StrOpt('log-file', default=None, help='log file name'),
    cfg.StrOpt('log-file-mode', default='0644',
               help='default log file permission'),
    cfg.StrOpt('log-config-file', default=None,
               help='Path to a logging config file to use'),
    cfg.IntOpt('decoder-log-level', default=None,
               help='log level of the record decoder only, e.g. 40 to '
                    'hide the per-record warnings on damaged dumps'),
])

DECODER_LOGGER = 'mrtreader.lib'
LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'

_EARLY_LOG_HANDLER = None


def early_init_log(level=None):
    """
    Installs a stderr handler on the root logger until init_log() runs.
    """
    global _EARLY_LOG_HANDLER
    _EARLY_LOG_HANDLER = logging.StreamHandler(sys.stderr)

    log = logging.getLogger()
    log.addHandler(_EARLY_LOG_HANDLER)
    if level is not None:
        log.setLevel(level)


def _get_log_file(prog='mrtreader'):
    if CONF.log_file:
        return CONF.log_file
    if CONF.log_dir:
        return os.path.join(CONF.log_dir, prog + '.log')
    return None


def _root_level():
    if CONF.default_log_level is not None:
        return CONF.default_log_level
    elif CONF.verbose:
        return logging.DEBUG
    return logging.INFO


def init_log(prog='mrtreader'):
    """
    Configures the root logger from CONF.

    *prog* names the log file when only ``log-dir`` is given.
    """
    global _EARLY_LOG_HANDLER

    log = logging.getLogger()

    if CONF.log_config_file:
        try:
            logging.config.fileConfig(CONF.log_config_file,
                                      disable_existing_loggers=True)
        except (configparser.Error, KeyError, RuntimeError, OSError) as e:
            print('Failed to parse %s: %s' % (CONF.log_config_file, e),
                  file=sys.stderr)
            sys.exit(2)
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = []
    if CONF.use_stderr:
        handlers.append(logging.StreamHandler(sys.stderr))
    if _EARLY_LOG_HANDLER is not None:
        log.removeHandler(_EARLY_LOG_HANDLER)
        _EARLY_LOG_HANDLER = None

    if CONF.use_syslog:
        handlers.append(logging.handlers.SysLogHandler(address='/dev/log'))

    log_file = _get_log_file(prog)
    if log_file is not None:
        handlers.append(logging.handlers.WatchedFileHandler(log_file))
        mode = int(CONF.log_file_mode, 8)
        os.chmod(log_file, mode)

    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)

    log.setLevel(_root_level())

    if CONF.decoder_log_level is not None:
        logging.getLogger(DECODER_LOGGER).setLevel(CONF.decoder_log_level)
