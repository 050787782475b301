"""Functions that can be used for the most common use-cases for rletext"""

import logging
from io import BytesIO
from typing import BinaryIO, Optional, cast

from rletext.rleparser import RLEDecoder
from rletext.utils import FileOrName, make_compat_str, open_filename


def rle_to_text_fp(
    inf: BinaryIO,
    outfp: BinaryIO,
    max_run: Optional[int] = None,
    debug: bool = False,
) -> None:
    """Decodes the .rle pattern in inf-file and writes the rows to outfp.

    :param inf: a binary file-like object to read the pattern from, such as
        a file handler (using the builtin `open()` function) or a `BytesIO`.
    :param outfp: a binary file-like object to write the rows to.
    :param max_run: Clamp every run count to this value. Default is None,
        which uses `rletext.settings.MAX_RUN_LENGTH`.
    :param debug: Output more logging data
    :return: nothing, acting as it does on two streams. Use BytesIO to get
        bytes.
    """
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    for data in RLEDecoder(inf, max_run=max_run).run():
        outfp.write(data)


def rle_to_text(rle_file: FileOrName, max_run: Optional[int] = None) -> str:
    """Decode an .rle pattern and return its rows as a string.

    :param rle_file: Path to the .rle file, or a binary file-like object
    :param max_run: Clamp every run count to this value
    :return: a string with one line per pattern row, "." for dead cells.
    """
    with open_filename(rle_file, "rb") as fp, BytesIO() as output:
        rle_to_text_fp(cast(BinaryIO, fp), output, max_run=max_run)
        return make_compat_str(output.getvalue())
