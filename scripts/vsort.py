"""
usage: vsort --help
       vsort --version
       vsort [-v] [--log-file PATH] [<path>]

Sort version strings, one per line, in ascending release order

positional arguments:
  <path>                 File to read version strings from. Standard input
                         is read when omitted.

options:
  -h, --help             Show this help message and exit
  -v, --verbose          Be more verbose
  --version              The current installed version of vsort
  --log-file PATH        Also write log messages to PATH
"""
import docopt

import vsort
import vsort.sort


def main(argv=None):
    args = docopt.docopt(__doc__, argv=argv, version=vsort.__version__)
    vsort.sort.main(args)
