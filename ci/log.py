# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


from copy import copy
import logging
import sys


class Bcolors:
    RESET_ALL = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'


class CCFormatter(logging.Formatter):
    level_colours = {
        logging.DEBUG: Bcolors.BLUE,
        logging.INFO: Bcolors.GREEN,
        logging.WARNING: Bcolors.YELLOW,
        logging.ERROR: Bcolors.RED,
    }

    def color_level_name(self, level_name: str, level_number: int) -> str:
        if not (colour := self.level_colours.get(level_number)):
            return str(level_name)
        return f'{Bcolors.BOLD}{colour}{level_name}{Bcolors.RESET_ALL}'

    def formatMessage(self, record):
        record_copy = copy(record)
        levelname = record_copy.levelname
        if sys.stderr.isatty():
            levelname = self.color_level_name(levelname, record_copy.levelno)
        record_copy.__dict__['levelprefix'] = levelname
        return super().formatMessage(record_copy)


# GitPython logs every executed command at debug-level
_noisy_loggers = (
    'git',
    'git.cmd',
    'git.remote',
)


def default_fmt_string() -> str:
    return '%(asctime)s [%(levelprefix)s] %(name)s: %(message)s'


def configure_default_logging(
    stdout_level=None,
    force=True,
    custom_format_string: str = '',
):
    if not stdout_level:
        stdout_level = logging.INFO

    # make sure to have a clean root logger (in case setup is called multiple times)
    if force:
        for h in list(logging.root.handlers):
            logging.root.removeHandler(h)
            h.close()

    sh = logging.StreamHandler(stream=sys.stderr)
    sh.setLevel(stdout_level)
    sh.setFormatter(CCFormatter(fmt=custom_format_string or default_fmt_string()))

    logging.root.addHandler(hdlr=sh)
    logging.root.setLevel(level=stdout_level)

    for name in _noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
