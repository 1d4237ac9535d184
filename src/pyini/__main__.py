# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/17 14:30:12

"""Demo: read `Section1.var1` (int) and `Section2.var2` (str) from a file.

    python -m pyini [config.ini] [--dump] [-v]
"""

import logging
import sys
from argparse import ArgumentParser

from . import IniError, load

DEFAULT_CONFIG = 'config.ini'


def parse_arguments(argv=None):
    parser = ArgumentParser(prog='pyini', description=__doc__.splitlines()[0])
    parser.add_argument('config', nargs='?', default=DEFAULT_CONFIG,
                        help=f'INI file to read (default: {DEFAULT_CONFIG})')
    parser.add_argument('--encoding', default=None,
                        help='try this codec first (default: system)')
    parser.add_argument('--dump', action='store_true',
                        help='also print every section and entry')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='show debug logs')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose
                        else logging.WARNING,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    try:
        doc = load(args.config, args.encoding)
        int_value = doc.get_value('Section1.var1', int)
        string_value = doc.get_value('Section2.var2', str)
    except IniError as e:
        print(f'Error: {e.message}', file=sys.stderr)
        return 1

    print(f'Section1.var1: {int_value}')
    print(f'Section2.var2: {string_value}')
    if args.dump:
        for section in doc.values():
            print(section)
            for k, v in section.items():
                print(f'{k} = {v}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
