#
# Decoder for the run-length encoded Life pattern format (.rle).
#
# The input may start with blank lines and "#" comment lines, followed by
# an optional "x = ..., y = ..." header line, followed by runs: an optional
# repeat count and a single tag character. The data ends at "!" or at the
# end of the file. Embedded white space is ignored everywhere.
#
#   $   newline
#   b   dead cell, written as "."
#   o   live cell, written as is
#
# Any other tag (multi-state letters, stray bytes) is written as is.
#

import logging
from io import BytesIO
from typing import BinaryIO, Iterator, NamedTuple, Optional

from rletext import settings
from rletext.rleexceptions import RLEValueError

log = logging.getLogger(__name__)


EOF = b""
EOL = b"\n"
WHITESPACE = b" \t\n"
TERMINATOR = b"!"
COMMENT = b"#"
HEADER = b"x"
TAGS = {
    b"$": b"\n",
    b"b": b".",
}


class Run(NamedTuple):
    count: int
    tag: bytes


class RLEFileReader:
    """Forward-only byte reader with room for one byte of pushback."""

    def __init__(self, fp: BinaryIO) -> None:
        self.fp = fp
        self._peeked: Optional[bytes] = None

    def read1(self) -> bytes:
        """Read one byte, returning b"" at the end of the stream."""
        if self._peeked is not None:
            c = self._peeked
            self._peeked = None
            return c
        return self.fp.read(1)

    def unread(self, c: bytes) -> None:
        """Push a byte back so that the next read1() returns it."""
        if self._peeked is not None:
            raise RLEValueError("Only one byte can be pushed back")
        self._peeked = c

    def skip_whitespace(self) -> bytes:
        """Return the first byte that is not white space."""
        while True:
            c = self.read1()
            # b"" (EOF) is in every bytes object, check it first
            if c == EOF or c not in WHITESPACE:
                return c

    def skip_line(self) -> bool:
        """Consume bytes through the next newline.

        Returns False when the stream ends before a newline is found.
        """
        while True:
            c = self.read1()
            if c == EOL:
                return True
            if c == EOF:
                return False


class RLEDecoder:
    """Single-pass decoder from .rle data to text rows.

    The three phases (preamble, header, runs) are strictly sequential;
    run() drives all of them and yields the decoded output in chunks.
    """

    def __init__(self, fp: BinaryIO, max_run: Optional[int] = None) -> None:
        if max_run is None:
            max_run = settings.MAX_RUN_LENGTH
        if max_run is not None and max_run < 1:
            raise RLEValueError(f"max_run must be at least 1: {max_run!r}")
        self.reader = RLEFileReader(fp)
        self.max_run = max_run
        self.lastc = EOL

    def skip_preamble(self) -> bool:
        """Skip blank lines and comment lines.

        Returns False when the input ends inside the preamble, in which
        case there is nothing left to decode.
        """
        while True:
            c = self.reader.read1()
            if c == EOF:
                return False
            elif c == EOL:
                continue
            elif c == COMMENT:
                if not self.reader.skip_line():
                    # EOF in a comment
                    return False
            else:
                self.reader.unread(c)
                return True

    def skip_header(self) -> None:
        """Discard the header line if there is one.

        Its width, height and rule are not used for anything.
        """
        c = self.reader.skip_whitespace()
        if c == HEADER:
            self.reader.skip_line()
        else:
            self.reader.unread(c)

    def iter_runs(self) -> Iterator[Run]:
        """Yield (count, tag) pairs up to the terminator.

        A missing count and an explicit count of zero both mean 1.
        """
        if not self.skip_preamble():
            return
        self.skip_header()
        n = 0
        while True:
            c = self.reader.skip_whitespace()
            if c.isdigit():
                n = 10 * n + int(c)
                continue
            if c == EOF or c == TERMINATOR:
                return
            if n == 0:
                n = 1
            if self.max_run is not None and n > self.max_run:
                log.warning("Run count %d clamped to %d", n, self.max_run)
                n = self.max_run
            log.debug("run: count=%d, tag=%r", n, c)
            yield Run(n, c)
            n = 0

    def run(self) -> Iterator[bytes]:
        """Yield the decoded output, ending with a newline if non-empty."""
        for n, tag in self.iter_runs():
            c = TAGS.get(tag, tag)
            self.lastc = c
            while n > 0:
                k = min(n, settings.BLOCKSIZE)
                yield c * k
                n -= k
        if self.lastc != EOL:
            # flush the last line
            self.lastc = EOL
            yield EOL


def rledecode(data: bytes, max_run: Optional[int] = None) -> bytes:
    """Decode in-memory .rle data and return the text rows."""
    fp = BytesIO(data)
    return b"".join(RLEDecoder(fp, max_run=max_run).run())
