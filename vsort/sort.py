import io
import logging
import sys

from typing import IO, Iterable, List

from vsort import setup_log_file, install_except_hook
from vsort.version import Version

log = logging.getLogger(__name__)


class UnreadableInput(Exception):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"could not open {path!r}: {cause}")


def main(args):
    if args['--verbose']:
        logging.getLogger('vsort').setLevel(logging.DEBUG)
    if args['--log-file']:
        setup_log_file(args['--log-file'])
    install_except_hook()

    path = args['<path>']
    stream = open_input(path)
    try:
        versions = sort_versions(parse_versions(read_lines(stream)))
    finally:
        if path is None:
            stream.detach()
        else:
            stream.close()
    log.debug("Sorted %d versions from %s", len(versions), path or 'stdin')

    write_versions(versions, sys.stdout)


def open_input(path=None) -> IO[str]:
    """
    path: A file to read version strings from. Standard input is used when
          it is None.

    Lines end only at a line feed, so a lone carriage return stays part of
    the line.
    """
    if path is None:
        return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='\n')
    try:
        return open(path, encoding='utf-8', newline='\n')
    except OSError as exc:
        raise UnreadableInput(path, exc) from exc


def read_lines(stream: IO[str]) -> List[str]:
    lines = []
    for line in stream:
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        lines.append(line)
    return lines


def parse_versions(lines: Iterable[str]) -> List[Version]:
    return [Version.parse(line) for line in lines]


def sort_versions(versions: Iterable[Version]) -> List[Version]:
    return sorted(versions)


def sort_lines(lines: Iterable[str]) -> List[str]:
    """
    Sort version strings, returning them unchanged in ascending order
    """
    return [str(v) for v in sort_versions(parse_versions(lines))]


def write_versions(versions: Iterable[Version], out: IO[str]):
    for version in versions:
        out.write(f"{version}\n")

